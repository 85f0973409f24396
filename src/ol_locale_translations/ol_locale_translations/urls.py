"""
URL configuration for ol_locale_translations app.
"""

from django.urls import re_path

from ol_locale_translations.views import (
    LocaleTranslationExportView,
    LocaleTranslationStatisticsView,
    LocaleTranslationSyncView,
    LocaleTranslationUntranslatedView,
)

TRANSLATION_PATTERN = r"api/translations/(?P<translation_id>\d+)"

urlpatterns = [
    re_path(
        rf"^{TRANSLATION_PATTERN}/statistics/$",
        LocaleTranslationStatisticsView.as_view(),
        name="locale_translation_statistics",
    ),
    re_path(
        rf"^{TRANSLATION_PATTERN}/sync/$",
        LocaleTranslationSyncView.as_view(),
        name="locale_translation_sync",
    ),
    re_path(
        rf"^{TRANSLATION_PATTERN}/export/$",
        LocaleTranslationExportView.as_view(),
        name="locale_translation_export",
    ),
    re_path(
        rf"^{TRANSLATION_PATTERN}/untranslated/$",
        LocaleTranslationUntranslatedView.as_view(),
        name="locale_translation_untranslated",
    ),
]
