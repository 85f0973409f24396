import logging

import requests
from django.conf import settings

from ol_locale_translations.exceptions import LocaleFetchError, MissingURLError
from ol_locale_translations.utils.constants import (
    DEFAULT_REQUEST_TIMEOUT,
    MAX_ERROR_MESSAGE_LENGTH,
)

log = logging.getLogger(__name__)


class LocaleDocumentClient:
    def __init__(self, timeout=None):
        self.session = self.get_session()
        self.timeout = timeout or getattr(
            settings, "LOCALE_TRANSLATIONS_REQUEST_TIMEOUT", DEFAULT_REQUEST_TIMEOUT
        )

    @staticmethod
    def get_session():
        """
        Create a request session for fetching locale documents
        """
        session = requests.Session()
        session.headers.update({"Accept": "text/yaml, text/plain, */*"})
        return session

    def fetch_raw_document(self, url):
        """
        Fetch the text of a locale document

        Args:
            url (str): The URL of the upstream locale document

        Returns:
            str: The document text
        """
        if not url:
            raise MissingURLError

        try:
            resp = self.session.get(url, timeout=self.timeout)
            resp.raise_for_status()
        except requests.RequestException as e:
            log.warning("Unable to fetch locale document from %s: %s", url, e)
            msg = f"Unable to fetch {url}: {str(e)[:MAX_ERROR_MESSAGE_LENGTH]}"
            raise LocaleFetchError(url, msg) from e

        # Locale files are UTF-8 even when the server doesn't say so
        if "charset" not in resp.headers.get("content-type", ""):
            resp.encoding = "utf-8"
        return resp.text


def fetch_raw_document(url):
    """Fetch the text of a locale document with a default client"""
    return LocaleDocumentClient().fetch_raw_document(url)
