from django.contrib.auth.models import User
from django.db import models

from .services.content_classifier import ContentItemType

TITLE_LENGTH = 50


class ContentItem(models.Model):
    """A generated piece of marketing copy and the model that produced it."""
    user = models.ForeignKey(
        User, on_delete=models.CASCADE, related_name='content_items')
    title = models.CharField(
        max_length=255, help_text="First characters of the originating prompt")
    content = models.TextField(help_text="Generated body text")
    type = models.CharField(
        max_length=50,
        choices=ContentItemType.choices,
        help_text="Content type classified from the prompt"
    )
    model = models.CharField(
        max_length=100, null=True, blank=True,
        help_text="Model id that generated this content")
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'content_items'
        verbose_name = 'Content Item'
        verbose_name_plural = 'Content Items'
        ordering = ['id']

    def __str__(self):
        return f"{self.title} ({self.get_type_display()})"
