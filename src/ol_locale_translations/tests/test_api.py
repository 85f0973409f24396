"""Tests for the locale translations API functions"""

import pytest
from ol_locale_translations.api import (
    ReconcileResult,
    apply_reconciliation,
    reconcile,
    sync_translation,
)
from ol_locale_translations.exceptions import (
    DocumentDecodeError,
    LocaleFetchError,
    MissingURLError,
)

from tests.utils import SOURCE_URL, branch, create_translation, leaf, processed

UPSTREAM_DOCUMENT = """\
en:
  common:
    here: Here
    there: There
    blank: ''
  title: Title
  subtitle: Subtitle
"""


def _add_upstream(mocked_responses, body=UPSTREAM_DOCUMENT, **kwargs):
    mocked_responses.add(
        mocked_responses.GET,
        kwargs.pop("url", SOURCE_URL),
        body=body,
        content_type="text/yaml; charset=utf-8",
        **kwargs,
    )


def test_reconcile(mocked_responses):
    """Test that the fetched data is merged and counts are reported"""
    _add_upstream(mocked_responses)
    existing = branch(
        en=branch(
            common=branch(here=leaf("Here", "Ici"), there=leaf("There")),
            old=leaf("Old", "Vieux"),
            removed=branch(a=leaf("A", "AA"), b=leaf("B")),
        )
    )

    result = reconcile(SOURCE_URL, existing)

    assert isinstance(result, ReconcileResult)
    assert result.merged_tree == branch(
        en=branch(
            common=branch(
                here=leaf("Here", "Ici"), there=leaf("There"), blank=leaf("", "")
            ),
            title=leaf("Title"),
            subtitle=leaf("Subtitle"),
        )
    )
    assert result.new_untranslated_count == 3
    assert result.unused_translated_count == 2


def test_reconcile_without_existing_data(mocked_responses):
    """Test reconciling a new translation"""
    _add_upstream(mocked_responses)

    result = reconcile(SOURCE_URL)

    assert result.new_untranslated_count == 4
    assert result.unused_translated_count == 0


@pytest.mark.parametrize("url", ["", None])
def test_reconcile_missing_url(mocked_responses, url):
    """Test that reconciling without a URL fails before any request"""
    with pytest.raises(MissingURLError):
        reconcile(url, branch(a=leaf("A", "AA")))
    assert len(mocked_responses.calls) == 0


def test_reconcile_fetch_error(mocked_responses):
    """Test that fetch errors are propagated"""
    _add_upstream(mocked_responses, body="", status=404)

    with pytest.raises(LocaleFetchError):
        reconcile(SOURCE_URL, branch())


def test_reconcile_decode_error(mocked_responses):
    """Test that decode errors are propagated"""
    _add_upstream(mocked_responses, body="en: [unclosed")

    with pytest.raises(DocumentDecodeError):
        reconcile(SOURCE_URL, branch())


def test_reconcile_with_client(mocker):
    """Test that a given client is used for fetching"""
    client = mocker.Mock()
    client.fetch_raw_document.return_value = "a: A\n"

    result = reconcile("https://other.example.com/a.yml", None, client=client)

    client.fetch_raw_document.assert_called_once_with(
        "https://other.example.com/a.yml"
    )
    assert result.merged_tree == branch(a=leaf("A"))


@pytest.mark.django_db
def test_apply_reconciliation():
    """Test that the merged tree is stored on the translation"""
    translation = create_translation()
    result = ReconcileResult(
        merged_tree=branch(a=leaf("A", "AA"), b=leaf("B")),
        new_untranslated_count=1,
        unused_translated_count=0,
    )

    apply_reconciliation(translation, result)

    translation.refresh_from_db()
    assert translation.data == {"a": processed("A", "AA"), "b": processed("B")}


@pytest.mark.django_db
@pytest.mark.parametrize("apply", [True, False])
def test_sync_translation(mocked_responses, apply):
    """Test synchronizing a stored translation with its source URL"""
    _add_upstream(mocked_responses)
    translation = create_translation()
    data_before = translation.data

    summary = sync_translation(translation, apply=apply)

    assert summary["new_untranslated_count"] == 3
    assert summary["unused_translated_count"] == 1
    assert summary["translated_count"] == 1
    assert summary["overall_count"] == 4
    assert summary["applied"] is apply
    assert summary["data"]["en"]["common"]["here"] == processed("Here", "Ici")

    translation.refresh_from_db()
    if apply:
        assert translation.data == summary["data"]
    else:
        assert translation.data == data_before


@pytest.mark.django_db
def test_sync_translation_url_override(mocked_responses):
    """Test that a given URL takes precedence over the stored one"""
    other_url = "https://other.example.com/en.yml"
    _add_upstream(mocked_responses, url=other_url)
    translation = create_translation(source_url="")

    summary = sync_translation(translation, url=other_url)

    assert summary["overall_count"] == 4


@pytest.mark.django_db
def test_sync_translation_without_source_url():
    """Test that a translation without source URL cannot be synchronized"""
    translation = create_translation(source_url="")

    with pytest.raises(MissingURLError):
        sync_translation(translation)
