"""API functions for locale translations"""

import logging
from typing import NamedTuple

from ol_locale_translations.client import LocaleDocumentClient
from ol_locale_translations.exceptions import MissingURLError
from ol_locale_translations.utils.documents import decode_document
from ol_locale_translations.utils.locale_tree import (
    Branch,
    merge,
    statistics,
    to_processed_data,
    unused_translated_keys_count,
)

log = logging.getLogger(__name__)


class ReconcileResult(NamedTuple):
    merged_tree: Branch
    new_untranslated_count: int
    unused_translated_count: int


def reconcile(url, existing_tree=None, client=None):
    """
    Fetch the locale document at *url* and merge it with the existing tree.

    Args:
        url (str): The URL to pull the raw data from
        existing_tree (Branch): The processed tree supplementing the fetched
            data with its translations
        client (LocaleDocumentClient): The client used for fetching

    Returns:
        ReconcileResult: The merged tree, the count of keys that still need
            a translation and the count of translated keys that are gone
            upstream
    """
    if not url:
        raise MissingURLError
    client = client or LocaleDocumentClient()

    raw_data = decode_document(client.fetch_raw_document(url))
    merged_tree, new_untranslated_count = merge(existing_tree, raw_data)
    unused_translated_count = unused_translated_keys_count(existing_tree, merged_tree)
    return ReconcileResult(
        merged_tree=merged_tree,
        new_untranslated_count=new_untranslated_count,
        unused_translated_count=unused_translated_count,
    )


def apply_reconciliation(translation, result):
    """
    Replace the data of a stored translation with a reconciled tree.

    Args:
        translation (LocaleTranslation): The translation to update
        result (ReconcileResult): The accepted reconciliation
    """
    translation.data = to_processed_data(result.merged_tree)
    translation.save(update_fields=["data", "updated_at"])
    log.info(
        "Applied reconciliation to translation %s (%s new, %s unused)",
        translation.pk,
        result.new_untranslated_count,
        result.unused_translated_count,
    )


def sync_translation(translation, url=None, apply=False, client=None):  # noqa: FBT002
    """
    Reconcile a stored translation with its upstream locale document.

    Returns:
        dict: Summary of the reconciliation along with the merged data
    """
    url = url or translation.source_url
    result = reconcile(url, translation.tree, client=client)
    if apply:
        apply_reconciliation(translation, result)

    translated_count, overall_count = statistics(result.merged_tree)
    log.info(
        "Synchronized translation %s with %s: %s new untranslated, %s unused",
        translation.pk,
        url,
        result.new_untranslated_count,
        result.unused_translated_count,
    )
    return {
        "new_untranslated_count": result.new_untranslated_count,
        "unused_translated_count": result.unused_translated_count,
        "translated_count": translated_count,
        "overall_count": overall_count,
        "applied": apply,
        "data": to_processed_data(result.merged_tree),
    }
