"""CLI commands for google-font-url."""

from google_font_url.cli.commands.catalog import catalog
from google_font_url.cli.commands.url import url

__all__ = ["url", "catalog"]
