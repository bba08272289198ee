"""Catalog provider: choose between the live API and a snapshot."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from google_font_url.catalog.bundled import load_bundled_catalog, load_catalog_file
from google_font_url.catalog.remote import CatalogFetcher
from google_font_url.exceptions import CatalogFetchError, InvalidDataShapeError
from google_font_url.models import FontRecord, FontURLOptions

logger = logging.getLogger(__name__)


def resolve_catalog(
    options: FontURLOptions | None = None,
    fetcher: CatalogFetcher | None = None,
    snapshot: Sequence[FontRecord] | None = None,
) -> Sequence[FontRecord]:
    """Return the catalog selected by options.

    With an API key and fetch_latest enabled, the live catalog is fetched;
    any fetch failure is logged and the snapshot is used instead. The
    snapshot is the packaged one unless another is passed in.

    Raises:
        InvalidDataShapeError: If the resolved catalog is not a sequence.
    """
    options = options or FontURLOptions()

    if options.wants_remote:
        fetcher = fetcher or CatalogFetcher()
        try:
            catalog = fetcher.fetch(options.google_fonts_api)
        except CatalogFetchError as e:
            logger.warning("Failed to fetch latest fonts, falling back to bundled data: %s", e)
            catalog = snapshot if snapshot is not None else load_bundled_catalog()
    else:
        catalog = snapshot if snapshot is not None else load_bundled_catalog()

    if not isinstance(catalog, (list, tuple)):
        raise InvalidDataShapeError("Invalid Google Fonts data structure")
    return catalog


__all__ = ["CatalogFetcher", "load_bundled_catalog", "load_catalog_file", "resolve_catalog"]
