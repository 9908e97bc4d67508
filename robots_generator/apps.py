"""App configuration for the robots_generator app."""

from django.apps import AppConfig

class RobotsGeneratorConfig(AppConfig):
    """Configuration class for the robots.txt generator app."""
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'robots_generator'
    verbose_name = 'robots.txt generator'
