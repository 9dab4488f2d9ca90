"""Django app configuration for main app."""

from django.apps import AppConfig


class MainConfig(AppConfig):
    """Configuration for main app."""

    default_auto_field = 'django.db.models.BigAutoField'
    name = 'server.apps.main'
    verbose_name = 'Main'
