"""
Settings for running the ol_locale_translations tests
"""

from .common import *  # pylint: disable=wildcard-import, unused-wildcard-import  # noqa: F403


class SettingsClass:  # pylint: disable=useless-object-inheritance
    """dummy settings class"""


SETTINGS = SettingsClass()
plugin_settings(SETTINGS)  # noqa: F405
vars().update(SETTINGS.__dict__)


SECRET_KEY = "test-secret-key"  # noqa: S105  # pragma: allowlist secret
DEBUG = False
USE_TZ = True
ROOT_URLCONF = "ol_locale_translations.urls"
ALLOWED_HOSTS = ["*"]

INSTALLED_APPS = [
    "django.contrib.admin",
    "django.contrib.auth",
    "django.contrib.contenttypes",
    "django.contrib.sessions",
    "django.contrib.messages",
    "rest_framework",
    "ol_locale_translations",
]

MIDDLEWARE = [
    "django.contrib.sessions.middleware.SessionMiddleware",
    "django.contrib.auth.middleware.AuthenticationMiddleware",
    "django.contrib.messages.middleware.MessageMiddleware",
]

TEMPLATES = [
    {
        "BACKEND": "django.template.backends.django.DjangoTemplates",
        "APP_DIRS": True,
        "OPTIONS": {
            "context_processors": [
                "django.template.context_processors.request",
                "django.contrib.auth.context_processors.auth",
                "django.contrib.messages.context_processors.messages",
            ],
        },
    },
]

DATABASES = {"default": {"ENGINE": "django.db.backends.sqlite3", "NAME": "db.sqlite3"}}
DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"
