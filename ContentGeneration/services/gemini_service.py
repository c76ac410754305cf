from django.conf import settings
from google import genai
from google.genai import types

from ..exceptions import GenerationFailed
from .base_ai_service import BaseAIService


class GeminiService(BaseAIService):
    """
    Service for Google Gemini models.

    Gemini does not use a per-user key; the process-wide GEMINI_API_KEY
    setting is used for every request.
    """

    provider_name = "Google Gemini"

    def __init__(self, model_name: str = "gemini-pro", api_key: str = None):
        super().__init__(model_name, api_key or settings.GEMINI_API_KEY)

    def _make_ai_request(self, system_prompt: str, prompt: str) -> str:
        if not self.api_key:
            raise GenerationFailed(
                "GEMINI_API_KEY is not configured",
                details={'model': self.model_name},
            )

        client = genai.Client(api_key=self.api_key)
        response = client.models.generate_content(
            model=self.model_name,
            contents=prompt,
            config=types.GenerateContentConfig(
                system_instruction=system_prompt,
                temperature=settings.AI_GENERATION_TEMPERATURE,
                max_output_tokens=settings.AI_GENERATION_MAX_TOKENS,
            ),
        )
        return response.text or ""
