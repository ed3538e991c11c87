"""
Show Command - Render a document outline once.

Loads the document, expands the root, then applies the requested expansions
in order before printing. ``--depth`` expands level by level, each level a
separate bounded step, exactly as a user clicking through would.
"""

import json
import sys
from typing import Tuple

import click
from rich.console import Console

from ...core.materializer import TreeMaterializer, UnknownPathError
from ...render.console import render_tree
from ..utils import echo_error, echo_info, open_document

console = Console()


def expand_to_depth(materializer: TreeMaterializer, depth: int) -> None:
    """Expand every materialized node shallower than ``depth``."""
    for level in range(1, depth):
        for pnode in list(materializer.visible()):
            if pnode.depth == level and pnode.has_children:
                materializer.expand(pnode.path)


def expand_path(materializer: TreeMaterializer, path: str) -> None:
    """Expand ``path`` and every ancestor on the way down to it."""
    parts = path.split("/")
    for i in range(1, len(parts) + 1):
        materializer.expand("/".join(parts[:i]))


def snapshot(materializer: TreeMaterializer) -> list:
    """JSON-ready list of the currently materialized nodes."""
    rows = []
    for pnode in materializer.visible():
        row = {
            "path": pnode.path,
            "depth": pnode.depth,
            "id": pnode.label.id,
            "display_id": pnode.display_id,
            "type": pnode.label.type,
            "descendants": pnode.descendant_count,
            "expanded": pnode.expanded,
        }
        if pnode.structure is not None:
            row["structure"] = {
                field.key: (
                    {"unresolved": field.raw} if field.unresolved else field.value
                )
                for field in pnode.structure
            }
        rows.append(row)
    return rows


@click.command()
@click.argument("source", required=False)
@click.option("-e", "--expand", "expand_paths", multiple=True, help="Path to expand, e.g. root/0/2")
@click.option("-d", "--depth", default=1, show_default=True, help="Expand all nodes down to this depth")
@click.option("-s", "--structure", "structure_paths", multiple=True, help="Path whose structure panel to show")
@click.option("--json", "json_mode", is_flag=True, help="Output the materialized nodes as JSON")
def show(
    source: str,
    expand_paths: Tuple[str, ...],
    depth: int,
    structure_paths: Tuple[str, ...],
    json_mode: bool,
):
    """
    Render the outline of SOURCE (a JSON file or URL).

    Paths are positions in the displayed order: the root is "root", its
    largest child "root/0", that child's largest child "root/0/0".
    """
    controller = open_document(source)
    if controller is None:
        sys.exit(1)

    materializer = controller.materializer
    try:
        expand_to_depth(materializer, depth)
        for path in expand_paths:
            expand_path(materializer, path)
        for path in structure_paths:
            materializer.show_structure(path)
    except UnknownPathError as e:
        echo_error(str(e.args[0]))
        sys.exit(1)

    if json_mode:
        click.echo(json.dumps({"status": controller.status, "nodes": snapshot(materializer)}, default=str))
        return

    console.print(render_tree(materializer))
    echo_info(f"{controller.status} · {len(materializer)} nodes materialized")
