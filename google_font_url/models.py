"""Font catalog data model.

Records are frozen dataclasses holding tuples, so a catalog loaded once can
be shared between calls without copying.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from google_font_url.exceptions import InvalidDataShapeError

Number = int | float


@dataclass(frozen=True)
class FontAxis:
    """One variable-font axis and its inclusive range."""

    tag: str
    start: Number
    end: Number

    @classmethod
    def from_dict(cls, data: Any) -> FontAxis:
        if not isinstance(data, Mapping):
            raise InvalidDataShapeError(f"Axis entry must be an object, got {type(data).__name__}")
        tag = data.get("tag")
        start = data.get("start")
        end = data.get("end")
        if not isinstance(tag, str):
            raise InvalidDataShapeError("Axis entry is missing a string 'tag'")
        if not _is_number(start) or not _is_number(end):
            raise InvalidDataShapeError(f"Axis '{tag}' must have numeric 'start' and 'end'")
        return cls(tag=tag, start=start, end=end)


@dataclass(frozen=True)
class FontRecord:
    """A single family entry from the Google Fonts catalog."""

    family: str
    variants: tuple[str, ...] = ()
    axes: tuple[FontAxis, ...] = ()
    category: str | None = None

    @property
    def is_variable(self) -> bool:
        return len(self.axes) > 0

    @classmethod
    def from_dict(cls, data: Any) -> FontRecord:
        """Build a record from one API item, ignoring unknown keys.

        Raises:
            InvalidDataShapeError: If required fields are missing or mistyped.
        """
        if not isinstance(data, Mapping):
            raise InvalidDataShapeError(f"Catalog entry must be an object, got {type(data).__name__}")

        family = data.get("family")
        if not isinstance(family, str):
            raise InvalidDataShapeError("Catalog entry is missing a string 'family'")

        variants = data.get("variants") or []
        if not isinstance(variants, list) or not all(isinstance(v, str) for v in variants):
            raise InvalidDataShapeError(f"'variants' of {family!r} must be a list of strings")

        axes = data.get("axes") or []
        if not isinstance(axes, list):
            raise InvalidDataShapeError(f"'axes' of {family!r} must be a list")

        category = data.get("category")
        return cls(
            family=family,
            variants=tuple(variants),
            axes=tuple(FontAxis.from_dict(axis) for axis in axes),
            category=category if isinstance(category, str) else None,
        )


@dataclass(frozen=True)
class FontURLOptions:
    """Per-call options controlling where the catalog comes from.

    Attributes:
        google_fonts_api: Google Fonts Developer API key. None means the
            bundled snapshot is used.
        fetch_latest: When False, the bundled snapshot is used even if a
            key is supplied.
    """

    google_fonts_api: str | None = None
    fetch_latest: bool = True

    @property
    def wants_remote(self) -> bool:
        return bool(self.google_fonts_api) and self.fetch_latest


def parse_catalog(payload: Any) -> tuple[FontRecord, ...]:
    """Validate a `{"items": [...]}` payload and return its records.

    Raises:
        InvalidDataShapeError: If the payload or any entry is malformed.
    """
    if not isinstance(payload, Mapping):
        raise InvalidDataShapeError("Invalid Google Fonts data structure")
    items = payload.get("items")
    if not isinstance(items, list):
        raise InvalidDataShapeError("Invalid Google Fonts data structure")
    return tuple(FontRecord.from_dict(item) for item in items)


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)
