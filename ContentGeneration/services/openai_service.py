import openai
from django.conf import settings

from .base_ai_service import BaseAIService

GROQ_DEFAULT_BASE_URL = "https://api.groq.com/openai/v1"


class OpenAIService(BaseAIService):
    """Service for interacting with OpenAI GPT models."""

    provider_name = "OpenAI"

    def __init__(self, model_name: str = "gpt-3.5-turbo", api_key: str = None,
                 base_url: str = None):
        super().__init__(model_name, api_key)
        self.base_url = base_url or settings.OPENAI_BASE_URL or None

    def _build_client(self) -> openai.OpenAI:
        kwargs = {
            'api_key': self.api_key,
            'timeout': settings.AI_REQUEST_TIMEOUT_SECONDS,
            # Failures surface to the caller immediately
            'max_retries': 0,
        }
        if self.base_url:
            kwargs['base_url'] = self.base_url
        return openai.OpenAI(**kwargs)

    def _make_ai_request(self, system_prompt: str, prompt: str) -> str:
        """Make the actual AI API request to an OpenAI-compatible endpoint."""
        client = self._build_client()
        response = client.chat.completions.create(
            model=self.model_name,
            messages=[
                {"role": "system", "content": system_prompt},
                {"role": "user", "content": prompt},
            ],
            max_tokens=settings.AI_GENERATION_MAX_TOKENS,
            temperature=settings.AI_GENERATION_TEMPERATURE,
        )

        if response.choices and response.choices[0].message:
            return response.choices[0].message.content or ""
        return ""


class GroqService(OpenAIService):
    """Groq-hosted Llama models through Groq's OpenAI-compatible API."""

    provider_name = "Groq"

    def __init__(self, model_name: str, api_key: str = None):
        super().__init__(
            model_name, api_key,
            base_url=settings.GROQ_BASE_URL or GROQ_DEFAULT_BASE_URL)
