"""
API Views for ol_locale_translations App
"""

import logging
from collections.abc import Mapping
from itertools import islice

from django.conf import settings
from django.http import HttpResponse
from django.shortcuts import get_object_or_404
from rest_framework import status
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from ol_locale_translations.api import sync_translation
from ol_locale_translations.exceptions import (
    DocumentDecodeError,
    LocaleFetchError,
    MissingURLError,
)
from ol_locale_translations.models import LocaleTranslation
from ol_locale_translations.utils.constants import (
    DEFAULT_EXPORT_CONTENT_TYPE,
    DEFAULT_UNTRANSLATED_PAGE_SIZE,
    EXPORT_FILE_EXTENSION,
    KEY_PATH_SEPARATOR,
)
from ol_locale_translations.utils.documents import to_document
from ol_locale_translations.utils.locale_tree import (
    next_untranslated_key,
    untranslated_keys,
)

log = logging.getLogger(__name__)


def _as_bool(value):
    if isinstance(value, str):
        return value.strip().lower() in ("1", "true", "yes", "on")
    return bool(value)


def _serialize_untranslated_key(item):
    if item is None:
        return None
    return {"path": list(item.path), "original": item.leaf.original}


class LocaleTranslationStatisticsView(APIView):
    """
    API View to retrieve the translation progress of a locale translation.

    Sample Request:
        GET /api/translations/{translation_id}/statistics/

    Sample Response:
        200 OK
        {
            "translated_count": 12,
            "overall_count": 40
        }
    """

    permission_classes = [IsAuthenticated]

    def get(self, request, translation_id):  # noqa: ARG002
        """
        Retrieve the statistics of the specified translation.
        """
        translation = get_object_or_404(LocaleTranslation, pk=translation_id)
        translated_count, overall_count = translation.statistics()
        return Response(
            {"translated_count": translated_count, "overall_count": overall_count}
        )


class LocaleTranslationSyncView(APIView):
    """
    Synchronize a locale translation with its upstream locale document.

    POST /api/translations/{translation_id}/sync/

    Request payload:
    {
        "url": "<optional URL overriding the stored source URL>",
        "apply": false
    }

    Responses:
    - 200: The reconciliation summary and the merged data,
           stored when "apply" is true
    - 400: No URL to synchronize with
    - 502: The upstream document could not be fetched or parsed
    """

    permission_classes = [IsAuthenticated]
    http_method_names = ["post"]

    def post(self, request, translation_id):
        """
        Reconcile the translation, optionally applying the result.
        """
        translation = get_object_or_404(LocaleTranslation, pk=translation_id)
        if not isinstance(request.data, Mapping):
            return Response(
                {"error": "The request payload must be an object."},
                status=status.HTTP_400_BAD_REQUEST,
            )
        url = request.data.get("url") or None
        apply = _as_bool(request.data.get("apply", False))

        try:
            summary = sync_translation(translation, url=url, apply=apply)
        except MissingURLError as e:
            return Response({"error": str(e)}, status=status.HTTP_400_BAD_REQUEST)
        except (LocaleFetchError, DocumentDecodeError) as e:
            log.info("Synchronization of translation %s failed: %s", translation_id, e)
            return Response({"error": str(e)}, status=status.HTTP_502_BAD_GATEWAY)
        return Response(summary)


class LocaleTranslationExportView(APIView):
    """
    Download a locale translation as a YAML document.

    GET /api/translations/{translation_id}/export/
    """

    permission_classes = [IsAuthenticated]

    def get(self, request, translation_id):  # noqa: ARG002
        """
        Return the YAML document as an attachment named after the locale.
        """
        translation = get_object_or_404(LocaleTranslation, pk=translation_id)
        content_type = getattr(
            settings,
            "LOCALE_TRANSLATIONS_EXPORT_CONTENT_TYPE",
            DEFAULT_EXPORT_CONTENT_TYPE,
        )
        response = HttpResponse(
            to_document(translation.tree),
            content_type=f"{content_type}; charset=utf-8",
        )
        filename = f"{translation.locale}{EXPORT_FILE_EXTENSION}"
        response["Content-Disposition"] = f'attachment; filename="{filename}"'
        log.info("Exported translation %s as %s", translation_id, filename)
        return response


class LocaleTranslationUntranslatedView(APIView):
    """
    List the keys of a locale translation that still need a translation.

    Sample Request:
        GET /api/translations/{translation_id}/untranslated/?after=en.common.here

    Sample Response:
        200 OK
        {
            "count": 2,
            "results": [
                {"path": ["en", "common", "here"], "original": "Here"},
                {"path": ["en", "common", "there"], "original": "There"}
            ],
            "next": {"path": ["en", "common", "there"], "original": "There"}
        }

    "next" is the untranslated key following the "after" key path (dot
    separated), wrapping around to the first one. Keys containing a dot are
    passed as repeated "after_key" parameters instead, one per path segment:
        ?after_key=en&after_key=errors.messages
    """

    permission_classes = [IsAuthenticated]

    def get(self, request, translation_id):
        """
        Retrieve the untranslated keys of the specified translation.
        """
        translation = get_object_or_404(LocaleTranslation, pk=translation_id)
        default_limit = getattr(
            settings,
            "LOCALE_TRANSLATIONS_UNTRANSLATED_PAGE_SIZE",
            DEFAULT_UNTRANSLATED_PAGE_SIZE,
        )
        try:
            limit = int(request.query_params.get("limit", default_limit))
        except ValueError:
            return Response(
                {"error": "limit must be an integer."},
                status=status.HTTP_400_BAD_REQUEST,
            )
        if limit < 0:
            return Response(
                {"error": "limit must not be negative."},
                status=status.HTTP_400_BAD_REQUEST,
            )

        after_path = tuple(request.query_params.getlist("after_key")) or None
        after = request.query_params.get("after")
        if after_path is None and after:
            after_path = tuple(after.split(KEY_PATH_SEPARATOR))

        tree = translation.tree
        count = sum(1 for _ in untranslated_keys(tree))
        results = [
            _serialize_untranslated_key(item)
            for item in islice(untranslated_keys(tree), limit)
        ]
        return Response(
            {
                "count": count,
                "results": results,
                "next": _serialize_untranslated_key(
                    next_untranslated_key(tree, after_path)
                ),
            }
        )
