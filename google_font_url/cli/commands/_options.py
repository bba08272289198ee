"""Options shared by commands that resolve the catalog."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import click

from google_font_url.config import Config
from google_font_url.models import FontURLOptions


def catalog_source_options(func: Callable[..., Any]) -> Callable[..., Any]:
    """Add --api-key and --fetch-latest/--no-fetch-latest to a command."""
    func = click.option(
        "--fetch-latest/--no-fetch-latest",
        default=None,
        help="Fetch the live catalog when an API key is set (default: on)",
    )(func)
    func = click.option(
        "--api-key",
        help="Google Fonts Developer API key (overrides GOOGLE_FONTS_API_KEY)",
    )(func)
    return func


def build_options(config: Config, api_key: str | None, fetch_latest: bool | None) -> FontURLOptions:
    """Merge command-line flags over configured defaults."""
    return FontURLOptions(
        google_fonts_api=api_key if api_key is not None else config.google_fonts_api,
        fetch_latest=fetch_latest if fetch_latest is not None else config.fetch_latest,
    )
