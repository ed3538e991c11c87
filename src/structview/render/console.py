"""
Console rendering of the materialized outline.

The materializer decides what is visible; this module only draws it, as a
``rich.tree.Tree``. Values are shown the way the browser viewer shows them:
``null``, ``null (<query>)`` for references that point nowhere,
``{...} (N properties)`` for objects and ``[Array(N)]`` for lists.
"""

from typing import Any, Dict, List, Mapping, Optional

from rich.markup import escape
from rich.tree import Tree

from ..core.materializer import TreeMaterializer
from ..core.types import PresentationNode, StructureField, Unresolved

CARET_COLLAPSED = "▸"
CARET_EXPANDED = "▾"
LEAF_BULLET = "•"


def format_scalar(value: Any) -> str:
    """JSON-flavoured text for a single value."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Unresolved):
        return str(value)
    if isinstance(value, list):
        return f"[Array({len(value)})]"
    if isinstance(value, Mapping):
        return "{Object}"
    return str(value)


def format_field(field: StructureField) -> str:
    """One-line rendering of a structure field value, with provenance."""
    value = field.value
    if isinstance(value, Unresolved):
        return f"[red]{escape(str(value))}[/red]"
    if isinstance(value, Mapping):
        text = f"{{...}} ({len(value)} properties)"
    elif isinstance(value, list):
        text = f"[Array({len(value)})]"
    elif value is None:
        text = "null"
    else:
        text = format_scalar(value)
    text = escape(text)
    if field.resolved:
        text += f" [dim]\\[resolved from {escape(str(field.raw))}][/dim]"
    if value is None:
        return f"[dim]{text}[/dim]"
    return text


def node_label(pnode: PresentationNode) -> str:
    """Caret, display id, type label and descendant badge for one row."""
    if pnode.has_children:
        caret = CARET_EXPANDED if pnode.expanded else CARET_COLLAPSED
    else:
        caret = LEAF_BULLET
    parts = [caret, f"[bold]{escape(pnode.display_id)}[/bold]"]
    if pnode.label.type:
        parts.append(f"[dim]{escape(pnode.label.type)}[/dim]")
    if pnode.descendant_count > 0:
        parts.append(f"[cyan]({pnode.descendant_count})[/cyan]")
    parts.append(f"[dim]{pnode.path}[/dim]")
    return " ".join(parts)


def add_structure(branch: Tree, fields: List[StructureField]) -> None:
    """Attach a structure panel (one entry per field) under ``branch``."""
    panel = branch.add(f"⚙️  structure ({len(fields)} properties)", style="yellow")
    for field in fields:
        entry = panel.add(f"[magenta]{escape(field.key)}:[/magenta] {format_field(field)}")
        if isinstance(field.value, Mapping):
            for key, nested in field.value.items():
                entry.add(f"[magenta]{escape(str(key))}:[/magenta] {escape(format_scalar(nested))}")


def render_tree(materializer: TreeMaterializer) -> Optional[Tree]:
    """Draw every currently materialized node; ``None`` when nothing is mounted."""
    root = materializer.root
    if root is None:
        return None

    tree = Tree(node_label(root), guide_style="dim")
    branches: Dict[str, Tree] = {root.path: tree}
    for pnode in materializer.visible():
        branch = branches[pnode.path]
        if pnode.structure is not None:
            add_structure(branch, pnode.structure)
        for cpath in pnode.child_paths:
            branches[cpath] = branch.add(node_label(materializer.get(cpath)))
    return tree
