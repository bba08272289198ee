"""Build Google Fonts CSS2 stylesheet URLs from catalog records.

Variable fonts are encoded by axis ranges, static fonts by their discrete
weight/italic variants:

    Inter        ->  family=Inter:ital,opsz,wght@0,14..32,100..900;1,14..32,100..900
    Space Mono   ->  family=Space+Mono:ital,wght@0,700;1,700
"""

from __future__ import annotations

import re
from collections.abc import Iterable

from google_font_url.models import FontAxis, FontRecord, Number

CSS2_BASE_URL = "https://fonts.googleapis.com/css2?"
DISPLAY_SUFFIX = "&display=swap"

_LOWERCASE_INITIAL = re.compile(r"^[a-z]")


def sort_axes(axes: Iterable[FontAxis]) -> list[FontAxis]:
    """Order axes the way the CSS2 API requires.

    Registered (lowercase) tags come before custom (uppercase) tags, and
    tags are compared lexically within each group.
    """
    # Code-point order, not locale collation: tags are ASCII, so the
    # result matches JavaScript's localeCompare within a case group.
    return sorted(axes, key=lambda axis: (_LOWERCASE_INITIAL.match(axis.tag) is None, axis.tag))


def format_url(record: FontRecord) -> str:
    """Return the CSS2 stylesheet URL for a catalog record."""
    family = "family=" + record.family.replace(" ", "+")
    if record.axes:
        variants = _axes_segment(record)
    else:
        variants = _variants_segment(record.variants)
    return CSS2_BASE_URL + family + variants + DISPLAY_SUFFIX


def _axes_segment(record: FontRecord) -> str:
    axes = sort_axes(record.axes)
    axes_list = ",".join(axis.tag for axis in axes)
    axes_values = ",".join(f"{_format_number(axis.start)}..{_format_number(axis.end)}" for axis in axes)

    if "italic" in record.variants:
        return f":ital,{axes_list}@0,{axes_values};1,{axes_values}"
    return f":{axes_list}@{axes_values}"


def _variants_segment(variants: tuple[str, ...]) -> str:
    if not variants:
        return ""

    has_italic = any("italic" in v.lower() for v in variants)
    # "700italic" -> "700", "italic" -> "" (dropped with "regular")
    stripped = (v.replace("italic", "", 1).strip() for v in variants)
    weights = list(dict.fromkeys(w for w in stripped if w not in ("regular", "")))

    if weights:
        segment = ":ital,wght@" + ";".join(f"0,{w}" for w in weights)
        if has_italic:
            segment += ";" + ";".join(f"1,{w}" for w in weights)
        return segment
    if has_italic:
        return ":ital@0;1"
    return ""


def _format_number(value: Number) -> str:
    # JSON numbers like 1000.0 must render as "1000"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)
