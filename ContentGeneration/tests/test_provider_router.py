"""Tests for the model catalog and model-id routing."""

import pytest

from ContentGeneration.exceptions import UnresolvableModel
from ContentGeneration.services.provider_router import (
    PROVIDER_CATALOG,
    SYSTEM_PROMPT_TEMPLATE,
    Provider,
    catalog_as_dicts,
    credential_provider_choices,
    get_provider_spec,
    requires_credential,
    resolve_provider,
)

CATALOG_MODELS = [
    (spec.provider, model_id)
    for spec in PROVIDER_CATALOG
    for model_id in spec.models
]


@pytest.mark.parametrize('provider,model_id', CATALOG_MODELS)
def test_every_catalog_model_resolves_to_its_provider(provider, model_id):
    matches = [spec for spec in PROVIDER_CATALOG if spec.serves(model_id)]

    assert len(matches) == 1
    assert resolve_provider(model_id).provider == provider


@pytest.mark.parametrize('provider,model_id', CATALOG_MODELS)
def test_requires_credential_matches_catalog(provider, model_id):
    spec = resolve_provider(model_id)

    assert requires_credential(provider) is spec.requires_credential


def test_only_google_is_credential_free():
    credential_free = [
        spec.provider for spec in PROVIDER_CATALOG if not spec.requires_credential]

    assert credential_free == [Provider.GOOGLE]


def test_anthropic_and_deepseek_are_not_implemented():
    not_implemented = {
        spec.provider for spec in PROVIDER_CATALOG if not spec.implemented}

    assert not_implemented == {Provider.ANTHROPIC, Provider.DEEPSEEK}


def test_each_provider_has_exactly_one_capability_record():
    providers = [spec.provider for spec in PROVIDER_CATALOG]

    assert sorted(providers) == sorted(Provider.values)


@pytest.mark.parametrize('model_id,provider', [
    ('gpt-4o', Provider.OPENAI),
    ('llama-3.3-70b-versatile', Provider.GROQ),
    ('gemini-1.5-flash', Provider.GOOGLE),
    ('claude-3-5-sonnet', Provider.ANTHROPIC),
    ('deepseek-reasoner', Provider.DEEPSEEK),
])
def test_routing_is_by_prefix(model_id, provider):
    assert resolve_provider(model_id).provider == provider


@pytest.mark.parametrize('model_id', [
    'mistral-large', '', None, 'GPT-4', ' gpt-4', 42,
])
def test_unknown_model_is_unresolvable(model_id):
    with pytest.raises(UnresolvableModel) as exc_info:
        resolve_provider(model_id)

    assert exc_info.value.code == 'UNRESOLVABLE_MODEL'


def test_system_prompt_uses_content_type():
    spec = get_provider_spec('openai')

    assert spec.system_prompt('facebook') == (
        "Generate facebook content that is SEO-optimized and human-like.")
    assert spec.system_prompt_template == SYSTEM_PROMPT_TEMPLATE


def test_credential_provider_choices_exclude_google():
    values = [value for value, _ in credential_provider_choices()]

    assert values == ['openai', 'groq', 'anthropic', 'deepseek']


def test_catalog_as_dicts_keeps_catalog_order():
    catalog = catalog_as_dicts()

    assert [entry['name'] for entry in catalog] == [
        'OpenAI', 'Groq', 'Google', 'Anthropic', 'DeepSeek']
    google = catalog[2]
    assert google['requires_api_key'] is False
    assert google['models'] == ['gemini-pro', 'gemini-pro-vision']
