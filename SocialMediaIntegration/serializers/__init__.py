"""
SocialMediaIntegration Serializers
"""

from .social_post_serializers import SocialPostSerializer

__all__ = [
    'SocialPostSerializer',
]
