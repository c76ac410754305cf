from typing import Optional

from django.contrib.auth.models import User
from django.db.models import QuerySet

from ..models import ContentItem


class ContentRepository:
    """Persistence of generated content. Items are never updated or deleted."""

    def create(self, user: User, title: str, content: str, content_type: str,
               model: Optional[str] = None) -> ContentItem:
        return ContentItem.objects.create(
            user=user,
            title=title,
            content=content,
            type=content_type,
            model=model,
        )

    def list_by_user(self, user: User) -> QuerySet:
        """The user's content in insertion order."""
        return ContentItem.objects.filter(user=user).order_by('id')
