"""Command-line interface for google-font-url."""

from google_font_url.cli.main import cli

__all__ = ["cli"]
