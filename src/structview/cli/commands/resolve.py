"""
Resolve Command - Look up a single query reference.
"""

import json
import sys

import click
from rich.console import Console
from rich.json import JSON

from ...core.resolver import is_unresolved
from ..utils import echo_warning, open_document

console = Console()


@click.command()
@click.argument("source")
@click.argument("field")
@click.argument("value")
@click.option("--json", "json_mode", is_flag=True, help="Print the resolved value as raw JSON")
def resolve(source: str, field: str, value: str, json_mode: bool):
    """
    Resolve VALUE of query FIELD (e.g. namingQuery "#comp-1") in SOURCE.

    Exits with status 1 when no known map holds the reference.
    """
    controller = open_document(source)
    if controller is None:
        sys.exit(1)

    resolved = controller.resolver.resolve(field, value)

    if is_unresolved(resolved):
        if json_mode:
            click.echo(json.dumps({"unresolved": resolved.original_query}))
        else:
            echo_warning(f"Query not found in any data map: {resolved.original_query}")
        sys.exit(1)

    if json_mode:
        click.echo(json.dumps(resolved, default=str))
        return
    console.print(f"[bold]{field}[/bold] = [cyan]{value}[/cyan]")
    console.print(JSON(json.dumps(resolved, default=str)))
