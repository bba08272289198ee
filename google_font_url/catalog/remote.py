"""Remote catalog fetcher.

Fetches the live font catalog from the Google Fonts Developer API.
"""

from __future__ import annotations

import http.client
import json
import logging
import urllib.error
import urllib.request
from urllib.parse import quote

from google_font_url import __version__
from google_font_url.exceptions import CatalogFetchError, InvalidDataShapeError
from google_font_url.models import FontRecord, parse_catalog

logger = logging.getLogger(__name__)

WEBFONTS_API_URL = "https://www.googleapis.com/webfonts/v1/webfonts"


class CatalogFetcher:
    """Fetch catalog records from the Google Fonts Developer API.

    Exactly one GET request is issued per fetch() call. Any failure is
    reported as CatalogFetchError; retrying is left to the caller.
    """

    # Default timeout for requests (seconds)
    DEFAULT_TIMEOUT = 30

    # The full catalog is a few MB; anything far larger is not the API
    MAX_SIZE = 50 * 1024 * 1024

    def __init__(self, timeout: float = DEFAULT_TIMEOUT, max_size: int = MAX_SIZE) -> None:
        """Initialize fetcher.

        Args:
            timeout: Request timeout in seconds.
            max_size: Maximum response size to accept.
        """
        self.timeout = timeout
        self.max_size = max_size

    def fetch(self, api_key: str) -> tuple[FontRecord, ...]:
        """Fetch and validate the catalog.

        Args:
            api_key: Google Fonts Developer API key.

        Returns:
            Catalog records in API order.

        Raises:
            CatalogFetchError: On any failure, including HTTP and transport
                errors, undecodable bodies, invalid JSON and a payload
                without an `items` list.
        """
        url = build_api_url(api_key)
        safe_url = redact_api_key(url)
        logger.debug("Fetching Google Fonts catalog from %s", safe_url)

        try:
            req = urllib.request.Request(
                url,
                headers={
                    "User-Agent": f"google-font-url/{__version__}",
                    "Accept": "application/json",
                },
            )

            with urllib.request.urlopen(req, timeout=self.timeout) as response:
                content = response.read(self.max_size + 1)
                if len(content) > self.max_size:
                    raise CatalogFetchError(
                        safe_url,
                        details={"error": f"Response too large: >{self.max_size} bytes"},
                    )
                encoding = response.headers.get_content_charset() or "utf-8"
                payload = json.loads(content.decode(encoding))

        except CatalogFetchError:
            raise
        except urllib.error.HTTPError as e:
            raise CatalogFetchError(safe_url, status_code=e.code, details={"error": _error_body(e)}) from e
        except urllib.error.URLError as e:
            raise CatalogFetchError(safe_url, details={"error": str(e.reason)}) from e
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise CatalogFetchError(safe_url, details={"error": f"Invalid JSON response: {e}"}) from e
        except LookupError as e:
            raise CatalogFetchError(safe_url, details={"error": f"Unsupported response charset: {e}"}) from e
        except http.client.HTTPException as e:
            raise CatalogFetchError(safe_url, details={"error": f"HTTP protocol error: {e}"}) from e
        except OSError as e:
            raise CatalogFetchError(safe_url, details={"error": str(e)}) from e
        except Exception as e:
            raise CatalogFetchError(safe_url, details={"error": str(e) or type(e).__name__}) from e

        try:
            records = parse_catalog(payload)
        except InvalidDataShapeError as e:
            raise CatalogFetchError(safe_url, details={"error": str(e)}) from e

        logger.debug("Fetched %d catalog records", len(records))
        return records


def build_api_url(api_key: str) -> str:
    """Return the Developer API URL for the given key."""
    return f"{WEBFONTS_API_URL}?key={quote(api_key, safe='')}"


def redact_api_key(url: str) -> str:
    """Hide the key query parameter so URLs can be logged."""
    head, sep, _ = url.partition("?key=")
    return f"{head}{sep}***" if sep else url


def _error_body(error: urllib.error.HTTPError) -> str:
    try:
        return error.read().decode("utf-8", errors="replace").strip()
    except OSError:
        return str(error.reason)
