"""Public API: resolve a family name to a Google Fonts stylesheet URL.

Example:
    >>> from google_font_url import get_font_url
    >>> get_font_url("Space Mono")
    'https://fonts.googleapis.com/css2?family=Space+Mono:ital,wght@0,700;1,700&display=swap'
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from google_font_url.catalog import CatalogFetcher, load_catalog_file, resolve_catalog
from google_font_url.config import Config
from google_font_url.exceptions import FontNotFoundError, InvalidArgumentError
from google_font_url.formatter import format_url
from google_font_url.models import FontRecord, FontURLOptions

logger = logging.getLogger(__name__)


class FontURLResolver:
    """Resolve font families using settings from a Config.

    Args:
        config: Settings; loaded from file/environment when omitted.
        fetcher: Remote catalog fetcher; built from config.timeout when omitted.
    """

    def __init__(self, config: Config | None = None, fetcher: CatalogFetcher | None = None) -> None:
        self.config = config or Config.load()
        self.fetcher = fetcher or CatalogFetcher(timeout=self.config.timeout)

    def catalog(self, options: FontURLOptions | None = None) -> Sequence[FontRecord]:
        """Return the catalog for options, or for the configured defaults.

        A configured snapshot_path replaces the packaged snapshot.
        """
        snapshot_file = self.config.snapshot()
        snapshot = load_catalog_file(snapshot_file) if snapshot_file else None
        return resolve_catalog(options or self.config.options(), fetcher=self.fetcher, snapshot=snapshot)

    def find(self, family: str, options: FontURLOptions | None = None) -> FontRecord:
        """Return the first catalog record whose family matches exactly.

        Raises:
            InvalidArgumentError: If family is not a non-empty string.
            FontNotFoundError: If no record matches.
        """
        _validate_family(family)
        return find_font(self.catalog(options), family)

    def get_font_url(self, family: str, options: FontURLOptions | None = None) -> str:
        """Return the CSS2 stylesheet URL for family."""
        url = format_url(self.find(family, options))
        logger.debug("Resolved %r to %s", family, url)
        return url


def get_font_url(family: str, options: FontURLOptions | None = None) -> str:
    """Return the Google Fonts CSS2 stylesheet URL for a font family.

    Uses the bundled catalog unless options carry an API key with
    fetch_latest enabled, in which case the live catalog is fetched and the
    bundled one is used if that fails.

    Args:
        family: Exact, case-sensitive family name, e.g. "Open Sans".
        options: Catalog source options.

    Returns:
        Stylesheet URL ending in "&display=swap".

    Raises:
        InvalidArgumentError: If family is not a non-empty string.
        FontNotFoundError: If the family is not in the catalog.
        InvalidDataShapeError: If the catalog is malformed.
    """
    _validate_family(family)
    record = find_font(resolve_catalog(options or FontURLOptions()), family)
    return format_url(record)


def find_font(catalog: Sequence[FontRecord], family: str) -> FontRecord:
    """Return the first record in catalog named family."""
    for record in catalog:
        if record.family == family:
            return record
    raise FontNotFoundError(family)


def _validate_family(family: object) -> None:
    if not isinstance(family, str) or not family:
        raise InvalidArgumentError("Font family must be a non-empty string")
