"""
SocialMediaIntegration Services

Services for handing generated content to social platforms.
"""

from .social_publish_service import (
    SUPPORTED_PLATFORMS,
    PublishResult,
    SocialPublishError,
    SocialPublishService,
)

__all__ = [
    'SUPPORTED_PLATFORMS',
    'PublishResult',
    'SocialPublishError',
    'SocialPublishService',
]
