"""Exceptions for the locale translations app"""


class LocaleTranslationError(Exception):
    """
    Base class for locale translation errors
    """

    def __init__(self, message):
        # Force the lazy i18n values to turn into actual unicode objects
        super().__init__(str(message))


class MissingURLError(LocaleTranslationError):
    """
    Raised when a locale document is requested without a source URL
    """

    def __init__(self, message="You must provide a URL."):
        super().__init__(message)


class LocaleFetchError(LocaleTranslationError):
    """
    Raised when an upstream locale document could not be fetched
    """

    def __init__(self, url, message):
        self.url = url
        super().__init__(message)


class DocumentDecodeError(LocaleTranslationError):
    """
    Raised when a locale document is not a valid YAML mapping
    """
