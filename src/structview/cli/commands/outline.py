"""
Outline Command - Dump the full component structure as indented text.

Walks the whole document at once. Prefer ``show`` or ``explore`` for large
documents.
"""

import sys
from typing import Optional

import click

from ...render.outline import outline_lines
from ..utils import open_document


@click.command()
@click.argument("source", required=False)
@click.option("--max-depth", type=int, default=None, help="Do not descend below this depth")
def outline(source: str, max_depth: Optional[int]):
    """
    Print every node of SOURCE with its child and descendant counts.
    """
    controller = open_document(source)
    if controller is None:
        sys.exit(1)

    click.echo("=== Component Structure ===")
    for line in outline_lines(controller.context.root, max_depth=max_depth):
        click.echo(line)
    click.echo("=== End Structure ===")
