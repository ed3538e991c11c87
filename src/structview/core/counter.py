"""
Descendant Counter.

A node's descendant count is ``len(children) + sum(count(child))``. Both the
plain function and the memoizing counter walk with an explicit stack, so a
deeply nested document never hits the interpreter recursion limit. Neither
guards against cycles: documents are assumed to be trees.
"""

from typing import Any, Dict, List, Tuple

from .accessor import children


def count_descendants(node: Any) -> int:
    """Total number of descendants of ``node``. Re-walks the subtree every call."""
    total = 0
    stack: List[Any] = [node]
    while stack:
        kids = children(stack.pop())
        total += len(kids)
        stack.extend(kids)
    return total


class DescendantCounter:
    """
    Descendant counts memoized by node identity.

    Sibling ordering asks for the count of every child at every expansion;
    uncached, that is quadratic in the worst case. One counter lives as long
    as one loaded document and is dropped with it.
    """

    def __init__(self):
        # id(node) -> (node, count). The node is held so its id cannot be reused.
        self._memo: Dict[int, Tuple[Any, int]] = {}

    def _cached(self, node: Any):
        hit = self._memo.get(id(node))
        if hit is not None and hit[0] is node:
            return hit[1]
        return None

    def count(self, node: Any) -> int:
        """Descendant count of ``node``, computing and caching its whole subtree once."""
        cached = self._cached(node)
        if cached is not None:
            return cached

        stack: List[Tuple[Any, bool]] = [(node, False)]
        while stack:
            current, ready = stack.pop()
            if self._cached(current) is not None:
                continue
            kids = children(current)
            if ready:
                total = len(kids) + sum(self._cached(kid) for kid in kids)
                self._memo[id(current)] = (current, total)
            else:
                stack.append((current, True))
                stack.extend((kid, False) for kid in kids if self._cached(kid) is None)

        return self._memo[id(node)][1]

    def clear(self) -> None:
        self._memo.clear()

    def __len__(self) -> int:
        return len(self._memo)
