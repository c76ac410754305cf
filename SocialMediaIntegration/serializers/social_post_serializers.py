from rest_framework import serializers

from ..services import SUPPORTED_PLATFORMS


class SocialPostSerializer(serializers.Serializer):
    platform = serializers.ChoiceField(choices=SUPPORTED_PLATFORMS)
    content = serializers.CharField(trim_whitespace=False)

    def validate_content(self, value):
        if not value.strip():
            raise serializers.ValidationError("This field may not be blank.")
        return value

    def to_internal_value(self, data):
        if hasattr(data, 'keys') and isinstance(data.get('platform'), str):
            data = data.dict() if hasattr(data, 'dict') else dict(data)
            data['platform'] = data['platform'].strip().lower()
        return super().to_internal_value(data)
