"""
Management command to export a locale translation as a YAML document.
"""

import logging
from pathlib import Path

from django.core.management.base import BaseCommand, CommandError

from ol_locale_translations.utils.command_utils import get_translation
from ol_locale_translations.utils.documents import to_document

logger = logging.getLogger(__name__)


class Command(BaseCommand):
    """Export a locale translation as a YAML document."""

    help = "Write the translated locale data of a translation as YAML."

    def add_arguments(self, parser) -> None:
        """Entry point for subclassed commands to add custom arguments."""
        parser.add_argument(
            "translation_id",
            type=int,
            help="Id of the locale translation to export.",
        )
        parser.add_argument(
            "--output",
            dest="output",
            default=None,
            help="File to write the document to. Defaults to stdout.",
        )

    def handle(self, **options) -> None:
        """Handle the export_locale_translation command."""
        translation = get_translation(options["translation_id"])
        document = to_document(translation.tree)

        if not options["output"]:
            self.stdout.write(document, ending="")
            return

        output_path = Path(options["output"])
        try:
            output_path.parent.mkdir(parents=True, exist_ok=True)
            output_path.write_text(document, encoding="utf-8")
        except OSError as e:
            msg = f"Unable to write {output_path}: {e!s}"
            raise CommandError(msg) from e
        logger.info("Exported translation %s to %s", translation.pk, output_path)
        self.stdout.write(
            self.style.SUCCESS(f"Exported {translation} to {output_path}")
        )
