"""Tests for the provider adapters with the SDK clients mocked out."""

from unittest.mock import MagicMock, patch

import pytest
from django.test import override_settings

from ContentGeneration.exceptions import GenerationFailed, ProviderNotImplemented
from ContentGeneration.services.ai_service_factory import AIServiceFactory
from ContentGeneration.services.gemini_service import GeminiService
from ContentGeneration.services.openai_service import (
    GROQ_DEFAULT_BASE_URL,
    GroqService,
    OpenAIService,
)
from ContentGeneration.services.provider_router import get_provider_spec

SYSTEM_PROMPT = "Generate blog content that is SEO-optimized and human-like."


def _chat_completion(text):
    return MagicMock(choices=[MagicMock(message=MagicMock(content=text))])


class TestOpenAIService:

    @override_settings(OPENAI_BASE_URL='')
    @patch('ContentGeneration.services.openai_service.openai.OpenAI')
    def test_sends_system_and_user_messages(self, mock_openai):
        client = mock_openai.return_value
        client.chat.completions.create.return_value = _chat_completion("Hello world")

        service = OpenAIService(model_name='gpt-4', api_key='sk-test', base_url='')
        result = service.generate_text(SYSTEM_PROMPT, "Write a blog")

        assert result == "Hello world"
        assert mock_openai.call_args.kwargs['api_key'] == 'sk-test'
        assert 'base_url' not in mock_openai.call_args.kwargs
        kwargs = client.chat.completions.create.call_args.kwargs
        assert kwargs['model'] == 'gpt-4'
        assert kwargs['messages'] == [
            {"role": "system", "content": SYSTEM_PROMPT},
            {"role": "user", "content": "Write a blog"},
        ]
        assert kwargs['max_tokens'] == 2000
        assert kwargs['temperature'] == 0.7

    @patch('ContentGeneration.services.openai_service.openai.OpenAI')
    def test_upstream_error_becomes_generation_failed(self, mock_openai):
        mock_openai.return_value.chat.completions.create.side_effect = Exception(
            "invalid api key")

        service = OpenAIService(model_name='gpt-4', api_key='sk-bad')

        with pytest.raises(GenerationFailed) as exc_info:
            service.generate_text(SYSTEM_PROMPT, "Write a blog")

        assert "invalid api key" in exc_info.value.message

    @pytest.mark.parametrize('text', ["", "   ", None])
    @patch('ContentGeneration.services.openai_service.openai.OpenAI')
    def test_empty_response_is_a_failure(self, mock_openai, text):
        mock_openai.return_value.chat.completions.create.return_value = _chat_completion(text)

        service = OpenAIService(model_name='gpt-4', api_key='sk-test')

        with pytest.raises(GenerationFailed) as exc_info:
            service.generate_text(SYSTEM_PROMPT, "Write a blog")

        assert exc_info.value.message == "Failed to generate content"


class TestGroqService:

    @override_settings(GROQ_BASE_URL='https://groq.example/openai/v1')
    @patch('ContentGeneration.services.openai_service.openai.OpenAI')
    def test_uses_groq_endpoint(self, mock_openai):
        mock_openai.return_value.chat.completions.create.return_value = _chat_completion("Hi")

        service = GroqService(model_name='llama3-8b-8192', api_key='gsk-test')
        service.generate_text(SYSTEM_PROMPT, "Write a blog")

        assert mock_openai.call_args.kwargs['base_url'] == 'https://groq.example/openai/v1'
        assert mock_openai.call_args.kwargs['api_key'] == 'gsk-test'

    @override_settings(GROQ_BASE_URL='')
    @patch('ContentGeneration.services.openai_service.openai.OpenAI')
    def test_blank_groq_setting_falls_back_to_groq_endpoint(self, mock_openai):
        mock_openai.return_value.chat.completions.create.return_value = _chat_completion("Hi")

        GroqService(model_name='llama3-8b-8192', api_key='gsk-test').generate_text(
            SYSTEM_PROMPT, "Write a blog")

        assert mock_openai.call_args.kwargs['base_url'] == GROQ_DEFAULT_BASE_URL

    @override_settings(GROQ_BASE_URL='', OPENAI_BASE_URL='')
    def test_groq_key_is_never_sent_to_openai(self):
        client = GroqService(model_name='llama3-8b-8192', api_key='gsk-test')._build_client()

        assert 'api.groq.com' in str(client.base_url)
        assert 'api.openai.com' not in str(client.base_url)


class TestGeminiService:

    @override_settings(GEMINI_API_KEY='gemini-test-key')
    @patch('ContentGeneration.services.gemini_service.genai')
    def test_uses_process_wide_key_and_requested_model(self, mock_genai):
        client = mock_genai.Client.return_value
        client.models.generate_content.return_value = MagicMock(text="Gemini text")

        result = GeminiService(model_name='gemini-pro').generate_text(
            SYSTEM_PROMPT, "Write a blog")

        assert result == "Gemini text"
        mock_genai.Client.assert_called_once_with(api_key='gemini-test-key')
        kwargs = client.models.generate_content.call_args.kwargs
        assert kwargs['model'] == 'gemini-pro'
        assert kwargs['contents'] == "Write a blog"
        assert kwargs['config'].system_instruction == SYSTEM_PROMPT

    @override_settings(GEMINI_API_KEY='')
    @patch('ContentGeneration.services.gemini_service.genai')
    def test_missing_process_key_fails(self, mock_genai):
        with pytest.raises(GenerationFailed) as exc_info:
            GeminiService().generate_text(SYSTEM_PROMPT, "Write a blog")

        assert exc_info.value.message == "GEMINI_API_KEY is not configured"
        mock_genai.Client.assert_not_called()

    @override_settings(GEMINI_API_KEY='gemini-test-key')
    @patch('ContentGeneration.services.gemini_service.genai')
    def test_empty_text_is_a_failure(self, mock_genai):
        mock_genai.Client.return_value.models.generate_content.return_value = MagicMock(
            text=None)

        with pytest.raises(GenerationFailed):
            GeminiService().generate_text(SYSTEM_PROMPT, "Write a blog")


class TestAIServiceFactory:

    @pytest.mark.parametrize('provider,service_class', [
        ('openai', OpenAIService),
        ('groq', GroqService),
        ('google', GeminiService),
    ])
    def test_builds_service_for_implemented_providers(self, provider, service_class):
        service = AIServiceFactory().create_service(
            get_provider_spec(provider), 'model-x', api_key='key')

        assert type(service) is service_class
        assert service.model_name == 'model-x'

    @pytest.mark.parametrize('provider', ['anthropic', 'deepseek'])
    def test_unimplemented_providers_raise(self, provider):
        with pytest.raises(ProviderNotImplemented):
            AIServiceFactory().create_service(get_provider_spec(provider), 'model-x')
