"""
Errors raised by content generation and the credential store.

Each error carries a stable ``code`` and an HTTP ``status_code`` so the
project exception handler can render it without knowing the concrete type.
"""

from rest_framework import status


class ContentStudioError(Exception):
    """Base class for domain errors surfaced to API clients."""
    code = "CONTENT_STUDIO_ERROR"
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message = "Failed to generate content"

    def __init__(self, message: str = None, details: dict = None):
        self.message = message or self.default_message
        self.details = details or {}
        super().__init__(self.message)


class UnresolvableModel(ContentStudioError):
    """The requested model id matches no provider in the catalog."""
    code = "UNRESOLVABLE_MODEL"
    default_message = "Unknown model"

    def __init__(self, model_id):
        super().__init__(
            f"No provider serves model {model_id!r}",
            details={'model': model_id},
        )
        self.model_id = model_id


class CredentialMissing(ContentStudioError):
    """The provider needs a per-user API key and the caller has none."""
    code = "CREDENTIAL_MISSING"

    def __init__(self, provider_name: str, provider: str):
        super().__init__(
            f"{provider_name} API key not found",
            details={'provider': provider},
        )
        self.provider = provider


class ProviderNotImplemented(ContentStudioError):
    """The provider is in the catalog but generation is not available yet."""
    code = "NOT_IMPLEMENTED"

    def __init__(self, provider_name: str, provider: str):
        super().__init__(
            f"{provider_name} models not implemented yet",
            details={'provider': provider},
        )
        self.provider = provider


class GenerationFailed(ContentStudioError):
    """The upstream provider call failed or returned no usable text."""
    code = "GENERATION_FAILED"


class CredentialNotFound(ContentStudioError):
    """No credential with that id belongs to the caller."""
    code = "NOT_FOUND"
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "API key not found"
