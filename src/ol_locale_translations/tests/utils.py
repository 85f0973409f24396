"""
Utils for ol-locale-translations tests.
"""

from ol_locale_translations.models import LocaleTranslation
from ol_locale_translations.utils.locale_tree import Branch, LeafPair

SOURCE_URL = "https://locales.example.com/en.yml"


def leaf(original, translated=None):
    """Shortcut for building a LeafPair"""
    return LeafPair(original=original, translated=translated)


def branch(**children):
    """Shortcut for building a Branch from keyword arguments"""
    return Branch(children)


def processed(original, translated=None):
    """A leaf record in the persisted processed form"""
    return {"_original": original, "_translated": translated}


def create_translation(**kwargs):
    """
    Create a LocaleTranslation with some translated and untranslated keys.
    """
    defaults = {
        "name": "Web app",
        "locale": "fr",
        "source_url": SOURCE_URL,
        "data": {
            "en": {
                "common": {
                    "here": processed("Here", "Ici"),
                    "there": processed("There"),
                    "blank": processed("", ""),
                },
                "title": processed("Title"),
                "old": processed("Old", "Vieux"),
            }
        },
    }
    defaults.update(kwargs)
    return LocaleTranslation.objects.create(**defaults)
