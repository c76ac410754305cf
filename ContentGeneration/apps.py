from django.apps import AppConfig


class ContentGenerationConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'ContentGeneration'
    verbose_name = 'Content Generation'
