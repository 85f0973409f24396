from django.db import migrations, models


class Migration(migrations.Migration):
    initial = True

    dependencies = []  # type: ignore  # noqa: PGH003

    operations = [
        migrations.CreateModel(
            name="LocaleTranslation",
            fields=[
                (
                    "id",
                    models.BigAutoField(
                        auto_created=True,
                        primary_key=True,
                        serialize=False,
                        verbose_name="ID",
                    ),
                ),
                (
                    "name",
                    models.CharField(
                        help_text="Human-readable name of the translation",
                        max_length=255,
                    ),
                ),
                (
                    "locale",
                    models.CharField(
                        help_text="Target locale code (e.g., 'fr')",
                        max_length=32,
                    ),
                ),
                (
                    "source_url",
                    models.URLField(
                        blank=True,
                        help_text=(
                            "URL of the upstream locale document to synchronize with"
                        ),
                        max_length=1024,
                    ),
                ),
                (
                    "data",
                    models.JSONField(
                        blank=True,
                        default=dict,
                        help_text=(
                            "Processed locale data with original and translated values"
                        ),
                    ),
                ),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
            options={
                "ordering": ["name", "locale"],
            },
        ),
    ]
