"""Rendering collaborators: rich console tree and plain outline dump."""

from .console import format_field, node_label, render_tree
from .outline import outline_lines

__all__ = ["format_field", "node_label", "outline_lines", "render_tree"]
