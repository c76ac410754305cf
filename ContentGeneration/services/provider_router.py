"""
Static model catalog and model-id routing.

Every provider has exactly one capability record. A model id is routed by
its prefix; prefixes never overlap, so a valid id resolves to exactly one
provider.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Tuple

from django.db.models import TextChoices

from ..exceptions import UnresolvableModel

SYSTEM_PROMPT_TEMPLATE = "Generate {content_type} content that is SEO-optimized and human-like."


class Provider(TextChoices):
    OPENAI = 'openai', 'OpenAI'
    GROQ = 'groq', 'Groq'
    GOOGLE = 'google', 'Google'
    ANTHROPIC = 'anthropic', 'Anthropic'
    DEEPSEEK = 'deepseek', 'DeepSeek'


@dataclass(frozen=True)
class ProviderSpec:
    """Capability record for one provider."""
    provider: Provider
    model_prefix: str
    models: Tuple[str, ...]
    requires_credential: bool
    implemented: bool
    system_prompt_template: str = field(default=SYSTEM_PROMPT_TEMPLATE)

    @property
    def name(self) -> str:
        return self.provider.label

    def system_prompt(self, content_type: str) -> str:
        return self.system_prompt_template.format(content_type=content_type)

    def serves(self, model_id: str) -> bool:
        return model_id.startswith(self.model_prefix)


PROVIDER_CATALOG: Tuple[ProviderSpec, ...] = (
    ProviderSpec(
        provider=Provider.OPENAI,
        model_prefix='gpt',
        models=('gpt-4-turbo-preview', 'gpt-4', 'gpt-3.5-turbo'),
        requires_credential=True,
        implemented=True,
    ),
    ProviderSpec(
        provider=Provider.GROQ,
        model_prefix='llama',
        models=(
            'llama-3.1-sonar-small-128k-online',
            'llama-3.1-sonar-large-128k-online',
            'llama-3.1-sonar-huge-128k-online',
        ),
        requires_credential=True,
        implemented=True,
    ),
    # Uses the process-wide GEMINI_API_KEY instead of a per-user key
    ProviderSpec(
        provider=Provider.GOOGLE,
        model_prefix='gemini',
        models=('gemini-pro', 'gemini-pro-vision'),
        requires_credential=False,
        implemented=True,
    ),
    ProviderSpec(
        provider=Provider.ANTHROPIC,
        model_prefix='claude',
        models=('claude-3-opus', 'claude-3-sonnet', 'claude-3-haiku'),
        requires_credential=True,
        implemented=False,
    ),
    ProviderSpec(
        provider=Provider.DEEPSEEK,
        model_prefix='deepseek',
        models=('deepseek-chat', 'deepseek-coder'),
        requires_credential=True,
        implemented=False,
    ),
)

_SPECS_BY_PROVIDER: Dict[str, ProviderSpec] = {
    spec.provider.value: spec for spec in PROVIDER_CATALOG
}


def resolve_provider(model_id: str) -> ProviderSpec:
    """Return the capability record of the provider serving ``model_id``.

    Raises:
        UnresolvableModel: if no provider prefix matches.
    """
    if not isinstance(model_id, str) or not model_id:
        raise UnresolvableModel(model_id)

    matches = [spec for spec in PROVIDER_CATALOG if spec.serves(model_id)]
    if len(matches) != 1:
        raise UnresolvableModel(model_id)
    return matches[0]


def get_provider_spec(provider: str) -> ProviderSpec:
    return _SPECS_BY_PROVIDER[Provider(provider).value]


def requires_credential(provider: str) -> bool:
    return get_provider_spec(provider).requires_credential


def credential_provider_choices() -> List[Tuple[str, str]]:
    """Choices for providers that need a stored per-user API key."""
    return [
        (spec.provider.value, spec.provider.label)
        for spec in PROVIDER_CATALOG
        if spec.requires_credential
    ]


def catalog_as_dicts() -> List[dict]:
    return [
        {
            'provider': spec.provider.value,
            'name': spec.name,
            'models': list(spec.models),
            'requires_api_key': spec.requires_credential,
            'implemented': spec.implemented,
        }
        for spec in PROVIDER_CATALOG
    ]
