"""Catalog snapshots: the one shipped with the package and user-supplied dumps.

A user snapshot is a saved Developer API response (`{"items": [...]}`),
e.g. the output of `curl "https://www.googleapis.com/webfonts/v1/webfonts?key=..."`.
"""

from __future__ import annotations

import json
import logging
from functools import lru_cache
from importlib import resources
from pathlib import Path

from google_font_url.exceptions import InvalidArgumentError
from google_font_url.models import FontRecord, parse_catalog

logger = logging.getLogger(__name__)

SNAPSHOT_RESOURCE = "googlefonts.json"


@lru_cache(maxsize=1)
def load_bundled_catalog() -> tuple[FontRecord, ...]:
    """Load the packaged snapshot once and return the shared records.

    Raises:
        InvalidDataShapeError: If the snapshot is malformed.
    """
    text = resources.files(__package__).joinpath(SNAPSHOT_RESOURCE).read_text(encoding="utf-8")
    records = parse_catalog(json.loads(text))
    logger.debug("Loaded %d records from bundled snapshot", len(records))
    return records


@lru_cache(maxsize=8)
def load_catalog_file(path: Path) -> tuple[FontRecord, ...]:
    """Load a snapshot file in place of the packaged one, once per path.

    Raises:
        InvalidArgumentError: If the file cannot be read or is not JSON.
        InvalidDataShapeError: If the JSON is not a catalog.
    """
    try:
        payload = json.loads(Path(path).read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
        raise InvalidArgumentError(f"Cannot read catalog snapshot {path}: {e}") from e
    records = parse_catalog(payload)
    logger.debug("Loaded %d records from %s", len(records), path)
    return records
