from django.contrib.auth.models import User
from django.db import models

from ContentGeneration.services.provider_router import credential_provider_choices


class UserAPIKey(models.Model):
    """Stores per-user API keys for the model providers that need one."""

    PROVIDER_CHOICES = credential_provider_choices()

    user = models.ForeignKey(
        User, on_delete=models.CASCADE, related_name='api_keys')
    provider = models.CharField(max_length=50, choices=PROVIDER_CHOICES)
    api_key = models.TextField()
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        unique_together = ('user', 'provider')
        db_table = 'user_api_keys'
        ordering = ['id']

    def __str__(self):
        return f"{self.user.username}:{self.provider}"

    @property
    def masked_key(self) -> str:
        if len(self.api_key) <= 8:
            return '****'
        return f"{self.api_key[:3]}****{self.api_key[-4:]}"
