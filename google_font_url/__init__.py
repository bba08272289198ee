"""google-font-url: Build Google Fonts stylesheet URLs from family names.

This library provides:
- Lookup of font families in the Google Fonts catalog
- Live catalog fetching with fallback to a bundled snapshot
- CSS2 URL encoding of variable-font axes and static variants

Example:
    >>> from google_font_url import get_font_url
    >>> get_font_url("Open Sans")
    'https://fonts.googleapis.com/css2?family=Open+Sans:ital,wdth,wght@0,75..100,300..800;1,75..100,300..800&display=swap'
"""

__version__ = "0.1.0"

from google_font_url.api import FontURLResolver, find_font, get_font_url  # noqa: E402
from google_font_url.catalog import (  # noqa: E402
    CatalogFetcher,
    load_bundled_catalog,
    load_catalog_file,
    resolve_catalog,
)
from google_font_url.config import Config  # noqa: E402
from google_font_url.exceptions import (  # noqa: E402
    CatalogFetchError,
    FontNotFoundError,
    GoogleFontURLError,
    InvalidArgumentError,
    InvalidDataShapeError,
)
from google_font_url.formatter import format_url, sort_axes  # noqa: E402
from google_font_url.models import FontAxis, FontRecord, FontURLOptions  # noqa: E402

__all__ = [
    # Main API
    "get_font_url",
    "FontURLResolver",
    "find_font",
    "Config",
    # Catalog
    "resolve_catalog",
    "load_bundled_catalog",
    "load_catalog_file",
    "CatalogFetcher",
    # Formatting
    "format_url",
    "sort_axes",
    # Models
    "FontAxis",
    "FontRecord",
    "FontURLOptions",
    # Exceptions
    "GoogleFontURLError",
    "InvalidArgumentError",
    "FontNotFoundError",
    "InvalidDataShapeError",
    "CatalogFetchError",
    # Metadata
    "__version__",
]
