import logging
from abc import ABC, abstractmethod

from ..exceptions import GenerationFailed

logger = logging.getLogger(__name__)


class BaseAIService(ABC):
    """Base class for provider text generation services."""

    provider_name = "AI provider"

    def __init__(self, model_name: str, api_key: str = None):
        self.model_name = model_name
        self.api_key = api_key

    @abstractmethod
    def _make_ai_request(self, system_prompt: str, prompt: str) -> str:
        """Make the actual AI API request and return the raw text."""

    def generate_text(self, system_prompt: str, prompt: str) -> str:
        """
        Generate text for a single prompt.

        Any SDK or transport error, and any empty response, is raised as
        GenerationFailed with the upstream message.
        """
        try:
            content = self._make_ai_request(system_prompt, prompt)
        except GenerationFailed:
            raise
        except Exception as e:
            logger.warning("%s request for model %s failed: %s",
                           self.provider_name, self.model_name, e)
            raise GenerationFailed(
                f"{self.provider_name} request failed: {e}",
                details={'model': self.model_name},
            ) from e

        if not content or not content.strip():
            raise GenerationFailed(
                "Failed to generate content",
                details={'model': self.model_name,
                         'reason': f'empty response from {self.provider_name}'},
            )
        return content
