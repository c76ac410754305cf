import logging
from typing import Optional, Tuple

from django.contrib.auth.models import User
from django.db import transaction
from django.db.models import QuerySet

from ContentGeneration.exceptions import CredentialNotFound

from .models import UserAPIKey

logger = logging.getLogger(__name__)


class CredentialStore:
    """
    Per-user provider API keys.

    At most one key exists per (user, provider); the unique constraint on
    UserAPIKey enforces it and create() replaces an existing key in place.
    Keys are never checked against the provider here.
    """

    def get(self, user: User, provider: str) -> Optional[UserAPIKey]:
        return UserAPIKey.objects.filter(user=user, provider=provider).first()

    def list_for_user(self, user: User) -> QuerySet:
        return UserAPIKey.objects.filter(user=user).order_by('id')

    def create(self, user: User, provider: str, api_key: str) -> Tuple[UserAPIKey, bool]:
        """Store the key for a provider, replacing any existing one."""
        with transaction.atomic():
            credential, created = UserAPIKey.objects.update_or_create(
                user=user,
                provider=provider,
                defaults={'api_key': api_key.strip()}
            )
        logger.info("%s %s API key for user %s",
                    "Created" if created else "Replaced", provider, user.pk)
        return credential, created

    def update(self, user: User, credential_id: int, api_key: str) -> UserAPIKey:
        credential = self._get_owned(user, credential_id)
        credential.api_key = api_key.strip()
        credential.save(update_fields=['api_key', 'updated_at'])
        logger.info("Updated %s API key for user %s",
                    credential.provider, user.pk)
        return credential

    def delete(self, user: User, credential_id: int) -> UserAPIKey:
        credential = self._get_owned(user, credential_id)
        credential.delete()
        logger.info("Deleted %s API key for user %s",
                    credential.provider, user.pk)
        return credential

    def _get_owned(self, user: User, credential_id: int) -> UserAPIKey:
        try:
            return UserAPIKey.objects.get(id=credential_id, user=user)
        except UserAPIKey.DoesNotExist:
            raise CredentialNotFound()
