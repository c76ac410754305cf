"""
Generation dispatcher.

Resolves the provider for a model id, checks that the caller can use it,
calls the provider and persists the result. Nothing is persisted unless the
provider returned text; failures are raised to the caller and never retried.
"""

import logging

from django.contrib.auth.models import User
from django.db import transaction

from APIKeys.services import CredentialStore

from ..exceptions import CredentialMissing, ProviderNotImplemented
from ..models import TITLE_LENGTH, ContentItem
from .ai_service_factory import AIServiceFactory
from .content_classifier import classify
from .content_repository import ContentRepository
from .provider_router import resolve_provider

logger = logging.getLogger(__name__)


class GenerationService:

    def __init__(self, credential_store: CredentialStore,
                 repository: ContentRepository,
                 service_factory: AIServiceFactory):
        self.credential_store = credential_store
        self.repository = repository
        self.service_factory = service_factory

    def generate(self, user: User, prompt: str, model_id: str) -> ContentItem:
        """
        Generate content for ``prompt`` with ``model_id`` and save it.

        Raises:
            UnresolvableModel: no provider serves the model id.
            ProviderNotImplemented: the provider has no integration yet.
            CredentialMissing: the provider needs an API key the user lacks.
            GenerationFailed: the provider call failed or returned no text.
        """
        spec = resolve_provider(model_id)

        if not spec.implemented:
            raise ProviderNotImplemented(spec.name, spec.provider.value)

        api_key = None
        if spec.requires_credential:
            credential = self.credential_store.get(user, spec.provider.value)
            if credential is None:
                raise CredentialMissing(spec.name, spec.provider.value)
            api_key = credential.api_key

        content_type = classify(prompt)
        service = self.service_factory.create_service(
            spec, model_id, api_key=api_key)

        logger.info("Generating %s content with %s (%s) for user %s",
                    content_type.value, model_id, spec.name, user.pk)
        content = service.generate_text(
            spec.system_prompt(content_type.value), prompt)

        with transaction.atomic():
            item = self.repository.create(
                user,
                title=prompt[:TITLE_LENGTH],
                content=content,
                content_type=content_type.value,
                model=model_id,
            )
        logger.info("Saved content item %s for user %s", item.pk, user.pk)
        return item


def build_generation_service() -> GenerationService:
    return GenerationService(
        credential_store=CredentialStore(),
        repository=ContentRepository(),
        service_factory=AIServiceFactory(),
    )
