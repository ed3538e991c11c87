"""
Pages Command - List the pages of a published site.

Each listed JSON URL can be passed straight to ``show`` or ``explore``.
"""

import sys

import click
from rich.console import Console
from rich.table import Table

from ...loading.loader import LoadError
from ...loading.site import fetch_site_pages
from ..utils import echo_error, get_settings

console = Console()


@click.command()
@click.argument("site_url")
def pages(site_url: str):
    """
    Fetch SITE_URL's site models and list its pages.
    """
    try:
        site_pages = fetch_site_pages(site_url, get_settings())
    except LoadError as e:
        echo_error(str(e))
        sys.exit(1)

    if not site_pages:
        console.print("[yellow]No pages found.[/yellow]")
        return

    table = Table(title=f"Pages ({len(site_pages)})")
    table.add_column("Title", style="bold")
    table.add_column("Page ID", style="cyan")
    table.add_column("JSON URL", overflow="fold")
    for page in site_pages:
        table.add_row(page.title, page.page_id, page.json_url or "[dim]unavailable[/dim]")
    console.print(table)
