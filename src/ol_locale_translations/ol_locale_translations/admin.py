"""Django admin configuration for locale translations app."""

from django.contrib import admin

from ol_locale_translations.models import LocaleTranslation


@admin.register(LocaleTranslation)
class LocaleTranslationAdmin(admin.ModelAdmin):
    """Admin interface for LocaleTranslation model."""

    list_display = ("id", "name", "locale", "progress", "updated_at")
    list_filter = ("locale",)
    readonly_fields = ("created_at", "updated_at", "progress")
    search_fields = ("name", "source_url")

    @admin.display(description="Translated")
    def progress(self, obj):
        """Show translated/overall counts."""
        translated_count, overall_count = obj.statistics()
        return f"{translated_count}/{overall_count}"
