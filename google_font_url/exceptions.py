"""Exception hierarchy for google-font-url.

All errors raised by the library derive from GoogleFontURLError, so callers
can catch a single type. CatalogFetchError is recovered internally by the
catalog provider and never escapes get_font_url().
"""

from __future__ import annotations

from typing import Any


class GoogleFontURLError(Exception):
    """Base exception for all google-font-url errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        return self.message


class InvalidArgumentError(GoogleFontURLError, ValueError):
    """Raised when a caller passes an unusable argument."""


class FontNotFoundError(GoogleFontURLError, LookupError):
    """Raised when a family is missing from the resolved catalog."""

    def __init__(self, family: str) -> None:
        super().__init__(
            f'Font family "{family}" not found in Google Fonts data',
            details={"family": family},
        )
        self.family = family


class InvalidDataShapeError(GoogleFontURLError):
    """Raised when catalog data does not have the expected structure."""


class CatalogFetchError(GoogleFontURLError):
    """Raised when the remote catalog cannot be fetched or parsed.

    Args:
        url: Request URL with the API key redacted.
        status_code: HTTP status, if the server answered.
        details: Extra context, usually {"error": "..."}.
    """

    def __init__(
        self,
        url: str,
        status_code: int | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        details = details or {}
        if status_code is not None:
            reason = f"{status_code} {details.get('error', '')}".strip()
        else:
            reason = details.get("error", "unknown error")
        super().__init__(
            f"Failed to fetch Google Fonts data from API: {reason}",
            details=details,
        )
        self.url = url
        self.status_code = status_code
