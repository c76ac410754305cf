from django.apps import AppConfig


class SocialMediaIntegrationConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'SocialMediaIntegration'
    verbose_name = 'Social Media Integration'
