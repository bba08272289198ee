"""Catalog command - browse the resolved font catalog."""

from __future__ import annotations

import click
from rich.console import Console
from rich.table import Table

from google_font_url.api import FontURLResolver
from google_font_url.cli.commands._options import build_options, catalog_source_options
from google_font_url.config import Config
from google_font_url.exceptions import GoogleFontURLError
from google_font_url.formatter import format_url, sort_axes

console = Console()


@click.group()
def catalog() -> None:
    """Font catalog commands."""
    pass


@catalog.command("list")
@click.option("--family", help="Filter by family name substring")
@click.option("--variable", is_flag=True, help="Only show variable fonts")
@catalog_source_options
@click.pass_context
def list_catalog(
    ctx: click.Context,
    family: str | None,
    variable: bool,
    api_key: str | None,
    fetch_latest: bool | None,
) -> None:
    """List font families in the catalog."""
    config = ctx.obj.get("config") or Config.load()
    resolver = FontURLResolver(config=config)

    with console.status("[bold green]Loading catalog..."):
        try:
            records = resolver.catalog(build_options(config, api_key, fetch_latest))
        except GoogleFontURLError as e:
            console.print(f"[red]Error:[/red] {e}")
            raise SystemExit(1) from e

    table = Table(title="Google Fonts Catalog")
    table.add_column("Family", style="cyan")
    table.add_column("Category", style="green")
    table.add_column("Variants", style="yellow")
    table.add_column("Axes", style="dim")

    count = 0
    for record in records:
        if family and family.lower() not in record.family.lower():
            continue
        if variable and not record.is_variable:
            continue

        table.add_row(
            record.family,
            record.category or "-",
            str(len(record.variants)),
            ",".join(axis.tag for axis in sort_axes(record.axes)) or "-",
        )
        count += 1

    console.print(table)
    console.print(f"\n[bold]Total:[/bold] {count} families")


@catalog.command("show")
@click.argument("family")
@catalog_source_options
@click.pass_context
def show_family(
    ctx: click.Context,
    family: str,
    api_key: str | None,
    fetch_latest: bool | None,
) -> None:
    """Show variants, axes and URL of one family."""
    config = ctx.obj.get("config") or Config.load()
    resolver = FontURLResolver(config=config)

    try:
        record = resolver.find(family, build_options(config, api_key, fetch_latest))
    except GoogleFontURLError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise SystemExit(1) from e

    console.print(f"[bold cyan]{record.family}[/bold cyan]")
    if record.category:
        console.print(f"  [blue]Category:[/blue] {record.category}")
    console.print(f"  [blue]Variants:[/blue] {', '.join(record.variants) or '-'}")

    if record.axes:
        table = Table(title="Axes")
        table.add_column("Tag", style="cyan")
        table.add_column("Start", style="yellow")
        table.add_column("End", style="yellow")
        for axis in sort_axes(record.axes):
            table.add_row(axis.tag, str(axis.start), str(axis.end))
        console.print(table)

    console.print(f"  [blue]URL:[/blue] {format_url(record)}", soft_wrap=True)
