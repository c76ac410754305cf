"""
Keyword classification of a prompt into a content type.

Pure and deterministic: the prompt is lower-cased and checked for substring
matches against each keyword set in priority order. The first set with a
match wins; prompts matching nothing are treated as blog content.
"""

from django.db import models


class ContentItemType(models.TextChoices):
    BLOG = 'blog', 'Blog'
    FACEBOOK = 'facebook', 'Facebook'
    SCRIPT = 'script', 'Script'


# Ordered by priority: blog > facebook > script
CONTENT_TYPE_KEYWORDS = (
    (ContentItemType.BLOG, ('blog', 'article', 'post')),
    (ContentItemType.FACEBOOK, ('facebook', 'social media', 'fb')),
    (ContentItemType.SCRIPT, ('script', 'video', 'dialogue')),
)

DEFAULT_CONTENT_TYPE = ContentItemType.BLOG


def classify(prompt: str) -> ContentItemType:
    """Return the content type a prompt asks for."""
    lowercase_prompt = (prompt or '').lower()

    for content_type, keywords in CONTENT_TYPE_KEYWORDS:
        if any(keyword in lowercase_prompt for keyword in keywords):
            return content_type

    return DEFAULT_CONTENT_TYPE
