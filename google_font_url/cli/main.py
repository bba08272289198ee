"""Root click group for the google-font-url CLI."""

from __future__ import annotations

import logging
from pathlib import Path

import click
from rich.console import Console
from rich.logging import RichHandler

from google_font_url import __version__
from google_font_url.cli.commands import catalog, url
from google_font_url.config import Config
from google_font_url.exceptions import GoogleFontURLError

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


@click.group()
@click.version_option(__version__, prog_name="google-font-url")
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Path to a TOML config file",
)
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default=None,
    help="Logging verbosity (default: WARNING)",
)
@click.pass_context
def cli(ctx: click.Context, config_path: Path | None, log_level: str | None) -> None:
    """Resolve Google Fonts families to CSS2 stylesheet URLs."""
    ctx.ensure_object(dict)
    try:
        config = Config.load(config_path)
    except GoogleFontURLError as e:
        raise click.ClickException(str(e)) from e

    level = (log_level or config.log_level).upper()
    _setup_logging(level)
    ctx.obj["config"] = config
    ctx.obj["log_level"] = level


def _setup_logging(level: str) -> None:
    logger = logging.getLogger("google_font_url")
    logger.handlers.clear()
    logger.addHandler(
        RichHandler(console=Console(stderr=True), show_time=False, show_path=False)
    )
    logger.setLevel(level)
    logger.propagate = False


cli.add_command(url)
cli.add_command(catalog)


if __name__ == "__main__":
    cli()
