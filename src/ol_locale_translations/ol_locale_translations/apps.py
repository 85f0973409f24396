"""
ol_locale_translations Django application initialization.
"""

from django.apps import AppConfig


class OLLocaleTranslationsConfig(AppConfig):
    """
    Configuration for the ol_locale_translations Django application.
    """

    name = "ol_locale_translations"
    verbose_name = "Locale translations"
    default_auto_field = "django.db.models.BigAutoField"
