"""
Plain-text outline of a whole document.

Unlike the materializer this walks everything, eagerly and in document order.
Meant for dumping a structure to a terminal or a file, not for browsing.
"""

from typing import Any, Iterator, List, Optional, Tuple

from ..config import OUTLINE_INDENT
from ..core import accessor
from ..core.counter import DescendantCounter


def outline_lines(root: Any, max_depth: Optional[int] = None) -> Iterator[str]:
    """
    Yield ``"<indent><id> (<type>) [<n> children, <m> total]"`` per node.

    Args:
        root: The structural root.
        max_depth: Stop descending below this depth (root is depth 0).
    """
    counter = DescendantCounter()
    stack: List[Tuple[Any, int]] = [(root, 0)]
    while stack:
        node, depth = stack.pop()
        node_label = accessor.label(node)
        kids = accessor.children(node)
        yield (
            f"{OUTLINE_INDENT * depth}{node_label.id} ({node_label.type}) "
            f"[{len(kids)} children, {counter.count(node)} total]"
        )
        if max_depth is not None and depth >= max_depth:
            continue
        stack.extend((kid, depth + 1) for kid in reversed(kids))
