from rest_framework import serializers

from .models import UserAPIKey


class UserAPIKeySerializer(serializers.ModelSerializer):
    """Credential as returned to its owner. The secret itself is never sent."""
    api_key_preview = serializers.CharField(source='masked_key', read_only=True)

    class Meta:
        model = UserAPIKey
        fields = ['id', 'provider', 'api_key_preview', 'created_at', 'updated_at']
        read_only_fields = fields


class _APIKeyInputMixin:
    """Accepts the key as either ``apiKey`` or ``api_key``."""

    def to_internal_value(self, data):
        if hasattr(data, 'keys') and 'api_key' not in data and 'apiKey' in data:
            data = data.dict() if hasattr(data, 'dict') else dict(data)
            data['api_key'] = data.pop('apiKey')
        return super().to_internal_value(data)


class SetAPIKeySerializer(_APIKeyInputMixin, serializers.Serializer):
    provider = serializers.ChoiceField(choices=UserAPIKey.PROVIDER_CHOICES)
    api_key = serializers.CharField(trim_whitespace=True)


class UpdateAPIKeySerializer(_APIKeyInputMixin, serializers.Serializer):
    api_key = serializers.CharField(trim_whitespace=True)
