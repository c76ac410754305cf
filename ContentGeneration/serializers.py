from rest_framework import serializers

from .models import ContentItem


class ContentGenerationRequestSerializer(serializers.Serializer):
    prompt = serializers.CharField(trim_whitespace=False)
    model = serializers.CharField(max_length=100)

    def validate_prompt(self, value):
        if not value.strip():
            raise serializers.ValidationError("This field may not be blank.")
        return value


class ContentItemSerializer(serializers.ModelSerializer):

    class Meta:
        model = ContentItem
        fields = ['id', 'title', 'content', 'type', 'model', 'created_at']
        read_only_fields = fields
