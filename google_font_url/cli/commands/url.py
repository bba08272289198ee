"""URL command - print the stylesheet URL for a family."""

from __future__ import annotations

import html

import click
from rich.console import Console

from google_font_url.api import FontURLResolver
from google_font_url.cli.commands._options import build_options, catalog_source_options
from google_font_url.config import Config
from google_font_url.exceptions import GoogleFontURLError

console = Console(stderr=True)


@click.command()
@click.argument("family")
@catalog_source_options
@click.option("--html", "as_html", is_flag=True, help="Print a <link> tag instead of the bare URL")
@click.pass_context
def url(
    ctx: click.Context,
    family: str,
    api_key: str | None,
    fetch_latest: bool | None,
    as_html: bool,
) -> None:
    """Print the Google Fonts CSS2 URL for FAMILY.

    FAMILY: Exact family name, e.g. "Open Sans" (case-sensitive).
    """
    config = ctx.obj.get("config") or Config.load()
    resolver = FontURLResolver(config=config)
    options = build_options(config, api_key, fetch_latest)

    try:
        font_url = resolver.get_font_url(family, options)
    except GoogleFontURLError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise SystemExit(1) from e

    if as_html:
        click.echo(f'<link rel="stylesheet" href="{html.escape(font_url)}">')
    else:
        click.echo(font_url)
