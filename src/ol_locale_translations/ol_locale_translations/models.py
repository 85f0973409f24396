"""Models for locale translations app"""

from django.db import models

from ol_locale_translations.utils.locale_tree import (
    from_processed_data,
    statistics,
)


class LocaleTranslation(models.Model):
    """A translation of an upstream locale document."""

    name = models.CharField(
        max_length=255,
        help_text="Human-readable name of the translation",
    )
    locale = models.CharField(
        max_length=32,
        help_text="Target locale code (e.g., 'fr')",
    )
    source_url = models.URLField(
        max_length=1024,
        blank=True,
        help_text="URL of the upstream locale document to synchronize with",
    )
    data = models.JSONField(
        default=dict,
        blank=True,
        help_text="Processed locale data with original and translated values",
    )
    created_at = models.DateTimeField(
        auto_now_add=True,
    )
    updated_at = models.DateTimeField(
        auto_now=True,
    )

    class Meta:
        """Meta options for LocaleTranslation."""

        app_label = "ol_locale_translations"
        ordering = ["name", "locale"]

    def __str__(self):
        """Return a string representation of the translation."""
        return f"{self.name} ({self.locale})"

    @property
    def tree(self):
        """The processed tree of the stored data."""
        return from_processed_data(self.data)

    def statistics(self):
        return statistics(self.tree)
