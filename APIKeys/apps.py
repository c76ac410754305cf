from django.apps import AppConfig


class APIKeysConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'APIKeys'
    verbose_name = 'Provider API Keys'
