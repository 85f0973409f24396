"""
Django management command to synchronize a locale translation with its upstream
locale document.

Usage:
    ./manage.py sync_locale_translation 1
    ./manage.py sync_locale_translation 1 --url https://example.com/en.yml --apply
"""

from django.core.management.base import BaseCommand

from ol_locale_translations.api import sync_translation
from ol_locale_translations.exceptions import LocaleTranslationError
from ol_locale_translations.utils.command_utils import (
    format_sync_summary,
    get_translation,
    to_command_error,
)


class Command(BaseCommand):
    """Synchronize a locale translation with its upstream locale document."""

    help = (
        "Merge the upstream locale document into a stored translation "
        "and report new and unused keys."
    )

    def add_arguments(self, parser) -> None:
        """Entry point for subclassed commands to add custom arguments."""
        parser.add_argument(
            "translation_id",
            type=int,
            help="Id of the locale translation to synchronize.",
        )
        parser.add_argument(
            "--url",
            dest="url",
            default=None,
            help="URL of the upstream document, defaults to the stored source URL.",
        )
        parser.add_argument(
            "--apply",
            dest="apply",
            action="store_true",
            default=False,
            help="Store the merged data. Without it only the summary is shown.",
        )

    def handle(self, **options) -> None:
        """Handle the sync_locale_translation command."""
        translation = get_translation(options["translation_id"])
        try:
            summary = sync_translation(
                translation, url=options["url"], apply=options["apply"]
            )
        except LocaleTranslationError as e:
            raise to_command_error(e, f"synchronizing {translation}") from e

        for line in format_sync_summary(summary):
            self.stdout.write(line)
        if options["apply"]:
            self.stdout.write(self.style.SUCCESS(f"Updated {translation}"))
        else:
            self.stdout.write(
                self.style.WARNING("Dry run, use --apply to store the merged data")
            )
