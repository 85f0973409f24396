"""Common settings for the locale translations app"""

from ol_locale_translations.utils.constants import (
    DEFAULT_EXPORT_CONTENT_TYPE,
    DEFAULT_REQUEST_TIMEOUT,
    DEFAULT_UNTRANSLATED_PAGE_SIZE,
)

LOGGER_NAME = "ol_locale_translations"


def _apply_logging_settings(settings):
    """
    Add a JSON console logger for the app, keeping any existing configuration.
    """
    app_logging = getattr(settings, "LOGGING", None) or {
        "version": 1,
        "disable_existing_loggers": False,
    }
    app_logging.setdefault("formatters", {})
    app_logging.setdefault("handlers", {})
    app_logging.setdefault("loggers", {})

    app_logging["formatters"].setdefault(
        "locale_translations_json",
        {
            "()": "pythonjsonlogger.json.JsonFormatter",
            "timestamp": True,
        },
    )
    app_logging["handlers"].setdefault(
        "locale_translations_console",
        {
            "class": "logging.StreamHandler",
            "formatter": "locale_translations_json",
        },
    )
    app_logging["loggers"].setdefault(
        LOGGER_NAME,
        {
            "handlers": ["locale_translations_console"],
            "level": settings.LOCALE_TRANSLATIONS_LOG_LEVEL,
            "propagate": False,
        },
    )
    settings.LOGGING = app_logging


def plugin_settings(settings):
    """
    Apply the locale translations settings.
    """
    settings.LOCALE_TRANSLATIONS_REQUEST_TIMEOUT = DEFAULT_REQUEST_TIMEOUT
    settings.LOCALE_TRANSLATIONS_EXPORT_CONTENT_TYPE = DEFAULT_EXPORT_CONTENT_TYPE
    settings.LOCALE_TRANSLATIONS_UNTRANSLATED_PAGE_SIZE = (
        DEFAULT_UNTRANSLATED_PAGE_SIZE
    )
    settings.LOCALE_TRANSLATIONS_LOG_LEVEL = "INFO"
    _apply_logging_settings(settings)
