from allauth.socialaccount.models import SocialAccount
from dj_rest_auth.registration.serializers import RegisterSerializer
from django.contrib.auth.models import User
from rest_framework import serializers


class CustomRegisterSerializer(RegisterSerializer):
    """Username/password registration; email is required and must be valid."""
    email = serializers.EmailField(required=True)


class CustomUserDetailsSerializer(serializers.ModelSerializer):
    """Current principal, including how the account authenticates."""
    has_password = serializers.SerializerMethodField()
    google_id = serializers.SerializerMethodField()

    class Meta:
        model = User
        fields = ['id', 'username', 'email', 'has_password', 'google_id',
                  'date_joined']
        read_only_fields = fields

    def get_has_password(self, obj):
        return obj.has_usable_password()

    def get_google_id(self, obj):
        account = SocialAccount.objects.filter(
            user=obj, provider='google').only('uid').first()
        return account.uid if account else None
