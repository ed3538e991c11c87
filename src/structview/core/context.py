"""
Document context.

Everything derived from one loaded document travels together in a
``DocumentContext``: the full document (searched by the resolver), its
structural root, and the descendant-count memo. Loading another document
means building another context; two contexts never share state.
"""

from dataclasses import dataclass, field
from typing import Any, Mapping, Optional

from .counter import DescendantCounter


@dataclass
class DocumentContext:
    """
    Attributes:
        document: The parsed input exactly as delivered by the loader.
        root: The structural root (``document["structure"]`` or the document).
        source: Where the document came from, for status lines only.
        counter: Descendant counts memoized for this document.
    """

    document: Mapping[str, Any]
    root: Mapping[str, Any]
    source: Optional[str] = None
    counter: DescendantCounter = field(default_factory=DescendantCounter)

    def descendant_count(self, node: Any) -> int:
        return self.counter.count(node)
