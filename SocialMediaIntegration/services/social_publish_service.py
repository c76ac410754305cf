"""
Social Publish Service

Hands generated content to an external publisher. When
SOCIAL_PUBLISH_WEBHOOK_URL is configured the post is forwarded there;
otherwise it is only acknowledged. Publication itself is never verified.
"""

import logging
from dataclasses import dataclass, field
from typing import Optional

import requests
from django.conf import settings
from django.contrib.auth.models import User
from django.utils import timezone
from rest_framework import status

from ContentGeneration.exceptions import ContentStudioError

logger = logging.getLogger(__name__)

SUPPORTED_PLATFORMS = ('facebook', 'twitter', 'linkedin', 'instagram')


@dataclass
class PublishResult:
    """Acknowledgment of a publish request."""
    platform: str
    status: str
    submitted_at: str = field(default_factory=lambda: timezone.now().isoformat())
    reference: Optional[str] = None

    def to_dict(self) -> dict:
        return {
            'success': True,
            'platform': self.platform,
            'status': self.status,
            'submitted_at': self.submitted_at,
            'reference': self.reference,
        }


class SocialPublishError(ContentStudioError):
    """The configured publisher could not be reached or rejected the post."""
    code = "SOCIAL_PUBLISH_FAILED"
    status_code = status.HTTP_502_BAD_GATEWAY
    default_message = "Failed to post content"


class SocialPublishService:
    """Pass-through publisher for generated content."""

    def __init__(self, webhook_url: str = None, timeout: float = None):
        self.webhook_url = webhook_url if webhook_url is not None else settings.SOCIAL_PUBLISH_WEBHOOK_URL
        self.timeout = timeout or settings.SOCIAL_PUBLISH_TIMEOUT_SECONDS

    def publish(self, user: User, platform: str, content: str) -> PublishResult:
        """
        Submit ``content`` for publication on ``platform``.

        Returns:
            PublishResult with status 'forwarded' when a webhook accepted the
            post, or 'accepted' when no publisher is configured.

        Raises:
            SocialPublishError: the webhook failed or answered with an error.
        """
        if not self.webhook_url:
            logger.info("No social publisher configured; acknowledging %s post for user %s",
                        platform, user.pk)
            return PublishResult(platform=platform, status='accepted')

        payload = {
            'platform': platform,
            'content': content,
            'user_id': user.pk,
        }

        try:
            response = requests.post(
                self.webhook_url, json=payload, timeout=self.timeout)
            response.raise_for_status()
        except requests.RequestException as e:
            logger.error("Social publish to %s failed for user %s: %s",
                         platform, user.pk, e)
            raise SocialPublishError(
                f"Failed to post content to {platform}: {e}",
                details={'platform': platform},
            ) from e

        reference = _response_reference(response)
        logger.info("Forwarded %s post for user %s", platform, user.pk)
        return PublishResult(
            platform=platform,
            status='forwarded',
            reference=str(reference) if reference is not None else None,
        )


def _response_reference(response: requests.Response) -> Optional[str]:
    """Publisher-side id from a JSON acknowledgment, if the body carries one."""
    if not response.headers.get('Content-Type', '').startswith('application/json'):
        return None
    try:
        body = response.json()
    except ValueError as e:
        # The post was already accepted; an unreadable body only loses the id
        logger.warning("Social publisher returned unreadable JSON: %s", e)
        return None
    if not isinstance(body, dict):
        return None
    return body.get('id') or body.get('reference')
