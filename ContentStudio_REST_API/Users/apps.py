from django.apps import AppConfig


class UsersConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'ContentStudio_REST_API.Users'
    label = 'Users'
    verbose_name = 'Users'
