"""Configuration for google-font-url.

Values are layered: built-in defaults, then an optional TOML file, then
environment variables. Example config.toml:

    [google_font_url]
    google_fonts_api = "AIza..."
    fetch_latest = true
    timeout = 10
    snapshot_path = "~/fonts/webfonts.json"
"""

from __future__ import annotations

import os
import tomllib
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any

from google_font_url.exceptions import InvalidArgumentError
from google_font_url.models import FontURLOptions

CONFIG_ENV_VAR = "GOOGLE_FONT_URL_CONFIG"
DEFAULT_CONFIG_PATH = Path.home() / ".config" / "google-font-url" / "config.toml"
CONFIG_TABLE = "google_font_url"

ENV_API_KEY = "GOOGLE_FONTS_API_KEY"
ENV_FETCH_LATEST = "GOOGLE_FONT_URL_FETCH_LATEST"
ENV_TIMEOUT = "GOOGLE_FONT_URL_TIMEOUT"
ENV_SNAPSHOT = "GOOGLE_FONT_URL_SNAPSHOT"

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


@dataclass(frozen=True)
class Config:
    """Settings shared by the resolver and the CLI."""

    google_fonts_api: str | None = None
    fetch_latest: bool = True
    timeout: float = 30.0
    log_level: str = "WARNING"
    snapshot_path: str | None = None

    @classmethod
    def load(cls, path: Path | None = None) -> Config:
        """Load configuration from file and environment.

        Args:
            path: Explicit TOML file. Falls back to $GOOGLE_FONT_URL_CONFIG,
                then ~/.config/google-font-url/config.toml. A missing file
                is not an error.

        Raises:
            InvalidArgumentError: If a value cannot be interpreted.
        """
        config = cls()

        if path is None:
            env_path = os.environ.get(CONFIG_ENV_VAR)
            path = Path(env_path) if env_path else DEFAULT_CONFIG_PATH
        if path.is_file():
            config = config.merge(_read_toml(path))

        return config.merge(_read_env())

    def merge(self, values: dict[str, Any]) -> Config:
        """Return a copy with known keys from values applied."""
        known = {f.name for f in fields(self)}
        updates: dict[str, Any] = {}
        for key, value in values.items():
            if key not in known or value is None:
                continue
            if key == "fetch_latest":
                value = _to_bool(key, value)
            elif key == "timeout":
                value = _to_float(key, value)
            else:
                value = str(value)
            updates[key] = value
        return replace(self, **updates)

    def options(self) -> FontURLOptions:
        return FontURLOptions(google_fonts_api=self.google_fonts_api, fetch_latest=self.fetch_latest)

    def snapshot(self) -> Path | None:
        """Return the configured snapshot file, with ~ expanded."""
        return Path(self.snapshot_path).expanduser() if self.snapshot_path else None


def _read_toml(path: Path) -> dict[str, Any]:
    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise InvalidArgumentError(f"Invalid config file {path}: {e}") from e
    table = data.get(CONFIG_TABLE, {})
    if not isinstance(table, dict):
        raise InvalidArgumentError(f"[{CONFIG_TABLE}] in {path} must be a table")
    return table


def _read_env() -> dict[str, Any]:
    return {
        "google_fonts_api": os.environ.get(ENV_API_KEY) or None,
        "fetch_latest": os.environ.get(ENV_FETCH_LATEST),
        "timeout": os.environ.get(ENV_TIMEOUT),
        "snapshot_path": os.environ.get(ENV_SNAPSHOT) or None,
    }


def _to_bool(key: str, value: Any) -> bool:
    if isinstance(value, bool):
        return value
    text = str(value).strip().lower()
    if text in _TRUE:
        return True
    if text in _FALSE:
        return False
    raise InvalidArgumentError(f"{key} must be a boolean, got {value!r}")


def _to_float(key: str, value: Any) -> float:
    try:
        result = float(value)
    except (TypeError, ValueError) as e:
        raise InvalidArgumentError(f"{key} must be a number, got {value!r}") from e
    if result <= 0:
        raise InvalidArgumentError(f"{key} must be positive, got {value!r}")
    return result
