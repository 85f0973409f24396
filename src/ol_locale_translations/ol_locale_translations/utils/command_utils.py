"""
Utility functions for management commands.

This module provides reusable utilities for the locale translations
management commands: lookups, error conversion and report formatting.
"""

from django.core.management.base import CommandError

from ol_locale_translations.exceptions import LocaleTranslationError
from ol_locale_translations.models import LocaleTranslation

# ============================================================================
# Lookup Utilities
# ============================================================================


def get_translation(translation_id: int) -> LocaleTranslation:
    """Return the translation with the given id or raise CommandError."""
    try:
        return LocaleTranslation.objects.get(pk=translation_id)
    except LocaleTranslation.DoesNotExist as e:
        msg = f"Locale translation {translation_id} does not exist"
        raise CommandError(msg) from e


# ============================================================================
# Error Handling Utilities
# ============================================================================


def to_command_error(error: LocaleTranslationError, operation: str) -> CommandError:
    """Convert a locale translation error into a CommandError with context."""
    return CommandError(f"Error {operation}: {error!s}")


# ============================================================================
# Reporting Helpers
# ============================================================================


def format_percentage(translated_count: int, overall_count: int) -> str:
    """
    Format translation progress as a percentage.

    Examples:
        >>> format_percentage(1, 4)
        '25.0%'
        >>> format_percentage(0, 0)
        '100.0%'
    """
    if not overall_count:
        return "100.0%"
    return f"{translated_count / overall_count * 100:.1f}%"


def format_sync_summary(summary: dict) -> list[str]:
    """Return the lines describing a synchronization summary."""
    translated_count = summary["translated_count"]
    overall_count = summary["overall_count"]
    percentage = format_percentage(translated_count, overall_count)
    return [
        f"New untranslated keys: {summary['new_untranslated_count']}",
        f"Unused translated keys: {summary['unused_translated_count']}",
        f"Translated: {translated_count}/{overall_count} ({percentage})",
    ]
