from typing import Callable, Dict

from ..exceptions import ProviderNotImplemented
from .base_ai_service import BaseAIService
from .gemini_service import GeminiService
from .openai_service import GroqService, OpenAIService
from .provider_router import Provider, ProviderSpec


class AIServiceFactory:
    """Builds the generation service for a resolved provider."""

    _SERVICES: Dict[str, Callable[..., BaseAIService]] = {
        Provider.OPENAI: OpenAIService,
        Provider.GROQ: GroqService,
        Provider.GOOGLE: GeminiService,
    }

    def create_service(self, spec: ProviderSpec, model_name: str,
                       api_key: str = None) -> BaseAIService:
        """
        Create the AI service for a provider.

        Raises:
            ProviderNotImplemented: for catalog providers without a
                generation integration (Anthropic, DeepSeek).
        """
        service_class = self._SERVICES.get(spec.provider)
        if not spec.implemented or service_class is None:
            raise ProviderNotImplemented(spec.name, spec.provider.value)
        return service_class(model_name=model_name, api_key=api_key)
