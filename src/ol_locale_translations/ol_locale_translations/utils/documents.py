"""Conversions between YAML locale documents and locale trees."""

import logging
import re
from typing import Any

import yaml

from ol_locale_translations.exceptions import DocumentDecodeError
from ol_locale_translations.utils.constants import (
    MAX_ERROR_MESSAGE_LENGTH,
    YAML_DUMP_OPTIONS,
)
from ol_locale_translations.utils.locale_tree import Branch, from_raw_data, to_raw

log = logging.getLogger(__name__)


class LocaleDocumentLoader(yaml.SafeLoader):
    """
    Safe loader that keeps locale strings as they are written.

    Plain scalars are only resolved to ``null`` and to ``true``/``false`` (the
    YAML 1.2 core booleans). ``yes``, ``no``, ``on``, ``off``, numbers and dates
    stay strings, so a ``no:`` locale key or a ``Yes`` label survive decoding.
    """


LocaleDocumentLoader.yaml_implicit_resolvers = {
    first: [
        (tag, regexp)
        for tag, regexp in resolvers
        if tag in ("tag:yaml.org,2002:null", "tag:yaml.org,2002:merge")
    ]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}
LocaleDocumentLoader.add_implicit_resolver(
    "tag:yaml.org,2002:bool",
    re.compile(r"^(?:true|True|TRUE|false|False|FALSE)$"),
    list("tTfF"),
)


def decode_document(text: str) -> dict[str, Any]:
    """
    Parse a YAML locale document into raw data.

    Args:
        text (str): The YAML document

    Returns:
        dict: The raw data, empty for an empty document

    Raises:
        DocumentDecodeError: If the document is not valid YAML, its top level
            is not a mapping or it refers to itself through an alias
    """
    try:
        data = yaml.load(text, Loader=LocaleDocumentLoader)  # noqa: S506
    except yaml.YAMLError as e:
        msg = f"Invalid YAML document: {str(e)[:MAX_ERROR_MESSAGE_LENGTH]}"
        log.warning(msg)
        raise DocumentDecodeError(msg) from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        msg = (
            "Expected a mapping at the top of the document, "
            f"got {type(data).__name__}"
        )
        log.warning(msg)
        raise DocumentDecodeError(msg)
    try:
        return from_raw_data(data)
    except RecursionError as e:
        msg = "Recursive or too deeply nested YAML document"
        log.warning(msg)
        raise DocumentDecodeError(msg) from e


def encode_document(raw_data: dict[str, Any]) -> str:
    """Return the YAML representation of raw data."""
    return yaml.safe_dump(raw_data, **YAML_DUMP_OPTIONS)


def to_document(tree: Branch) -> str:
    """Return the YAML representation of a processed tree."""
    return encode_document(to_raw(tree))
