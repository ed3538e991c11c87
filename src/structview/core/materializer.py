"""
Tree Materializer.

Builds the visible outline one expansion at a time. Presentation Nodes live
in an arena keyed by path (``root``, ``root/0``, ``root/0/3``; the index is
the position among the sorted siblings). Each Presentation Node moves
between two states:

    Collapsed --expand--> Expanded   synthesize direct children, largest first
    Expanded --collapse--> Collapsed free every arena entry below the node

Expansion costs O(direct children) plus count lookups, never a full-subtree
render. Collapsing drops the synthesized subtree outright; re-expanding
rebuilds it from the Graph Nodes, so no presentation state survives a
collapse/expand cycle.

The materializer never mutates the Graph Nodes or the document. Everything
the rendering collaborator needs to mirror the surface is reported through
``MaterializeEvent`` notifications.
"""

import logging
from typing import Any, Callable, Dict, Iterator, List, Mapping, Optional

from . import accessor
from .context import DocumentContext
from .registry import is_query_field
from .resolver import ReferenceResolver
from .types import (
    ROOT_PATH,
    EventKind,
    MaterializeEvent,
    PresentationNode,
    StructureField,
    child_path,
    is_within,
)

logger = logging.getLogger(__name__)

Listener = Callable[[MaterializeEvent], None]


class UnknownPathError(KeyError):
    """
    Raised when an operation names a path that is not currently materialized.

    Attributes:
        path: The offending path.
    """

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"No materialized node at path '{path}'")


class TreeMaterializer:
    """
    Lazily materialized outline over one document.

    Attributes:
        context: The document whose root is being explored.
        resolver: Resolver bound to the same context.
    """

    def __init__(self, context: DocumentContext, listener: Optional[Listener] = None):
        self.context = context
        self.resolver = ReferenceResolver(context)
        self._listener = listener
        self._arena: Dict[str, PresentationNode] = {}

    # ------------------------------------------------------------------
    # Arena access
    # ------------------------------------------------------------------

    def get(self, path: str) -> PresentationNode:
        try:
            return self._arena[path]
        except KeyError:
            raise UnknownPathError(path) from None

    def __contains__(self, path: str) -> bool:
        return path in self._arena

    def __len__(self) -> int:
        return len(self._arena)

    @property
    def root(self) -> Optional[PresentationNode]:
        return self._arena.get(ROOT_PATH)

    def visible(self) -> Iterator[PresentationNode]:
        """Pre-order walk of the materialized nodes, in sibling order."""
        root = self.root
        if root is None:
            return
        stack = [root]
        while stack:
            current = stack.pop()
            yield current
            stack.extend(self._arena[p] for p in reversed(current.child_paths))

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def mount(self) -> PresentationNode:
        """Create the root Presentation Node; the root starts Expanded."""
        if self.root is not None:
            self.clear()
        root = self._synthesize(self.context.root, ROOT_PATH, depth=0, parent_path=None)
        self._emit(EventKind.ATTACH, ROOT_PATH, None, 0)
        self.expand(ROOT_PATH)
        return root

    def clear(self) -> None:
        """Detach everything, root included."""
        if self.root is not None:
            self._free_below(ROOT_PATH)
            del self._arena[ROOT_PATH]
            self._emit(EventKind.DETACH, ROOT_PATH, None, 0)
        self._arena.clear()

    # ------------------------------------------------------------------
    # Expand / collapse
    # ------------------------------------------------------------------

    def expand(self, path: str) -> List[PresentationNode]:
        """
        Move a node to Expanded, synthesizing its children if not hydrated.

        Children are ordered by descending descendant count; ties keep their
        document order (``sorted`` is stable). Expanding a hydrated node is a
        no-op. Returns the node's materialized children.
        """
        pnode = self.get(path)
        pnode.expanded = True
        if pnode.hydrated:
            return self._children_of(pnode)

        kids = accessor.children_from(pnode.node, pnode.children_source)
        counts = [self.context.descendant_count(kid) for kid in kids]
        order = sorted(range(len(kids)), key=lambda i: -counts[i])

        for position, index in enumerate(order):
            cpath = child_path(path, position)
            self._synthesize(
                kids[index],
                cpath,
                depth=pnode.depth + 1,
                parent_path=path,
                descendant_count=counts[index],
            )
            pnode.child_paths.append(cpath)
            self._emit(EventKind.ATTACH, cpath, path, position)

        pnode.hydrated = True
        logger.debug(f"Expanded {path}: {len(kids)} children materialized")
        return self._children_of(pnode)

    def collapse(self, path: str) -> int:
        """
        Move a node to Collapsed and free its whole presentation subtree.

        Returns the number of Presentation Nodes released.
        """
        pnode = self.get(path)
        pnode.expanded = False
        freed = self._free_below(path)
        pnode.child_paths.clear()
        pnode.hydrated = False
        if freed:
            logger.debug(f"Collapsed {path}: released {freed} nodes")
        return freed

    def toggle(self, path: str) -> bool:
        """
        Flip a node between Collapsed and Expanded.

        A childless node has nothing to expand, so its structure panel is
        toggled instead. Returns the resulting expanded/shown state.
        """
        pnode = self.get(path)
        if not pnode.has_children:
            return self.toggle_structure(path)
        if pnode.expanded:
            self.collapse(path)
            return False
        self.expand(path)
        return True

    # ------------------------------------------------------------------
    # Structure panel
    # ------------------------------------------------------------------

    def show_structure(self, path: str) -> List[StructureField]:
        """Synthesize the structure panel of a node; idempotent."""
        pnode = self.get(path)
        if pnode.structure is None:
            pnode.structure = self.structure_fields(pnode.node)
            self._emit(EventKind.STRUCTURE_SHOWN, path, pnode.parent_path, None)
        return pnode.structure

    def hide_structure(self, path: str) -> None:
        pnode = self.get(path)
        if pnode.structure is not None:
            pnode.structure = None
            self._emit(EventKind.STRUCTURE_HIDDEN, path, pnode.parent_path, None)

    def toggle_structure(self, path: str) -> bool:
        if self.get(path).structure_shown:
            self.hide_structure(path)
            return False
        self.show_structure(path)
        return True

    def structure_fields(self, node: Mapping[str, Any]) -> List[StructureField]:
        """Non-child fields of ``node``, with query fields passed through the resolver."""
        fields = []
        for key, raw in accessor.structure_items(node):
            if is_query_field(key):
                fields.append(StructureField(key, raw, self.resolver.resolve(key, raw), True))
            else:
                fields.append(StructureField(key, raw, raw))
        return fields

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _synthesize(
        self,
        node: Any,
        path: str,
        depth: int,
        parent_path: Optional[str],
        descendant_count: Optional[int] = None,
    ) -> PresentationNode:
        if descendant_count is None:
            descendant_count = self.context.descendant_count(node)
        graph_node = node if isinstance(node, Mapping) else {}
        pnode = PresentationNode(
            path=path,
            depth=depth,
            node=graph_node,
            label=accessor.label(graph_node),
            display_id=accessor.display_label(graph_node, self.resolver),
            descendant_count=descendant_count,
            children_source=accessor.children_source(graph_node),
            parent_path=parent_path,
        )
        self._arena[path] = pnode
        return pnode

    def _free_below(self, path: str) -> int:
        pnode = self._arena[path]
        for position, cpath in enumerate(pnode.child_paths):
            self._emit(EventKind.DETACH, cpath, path, position)
        doomed = [p for p in self._arena if is_within(p, path)]
        for p in doomed:
            del self._arena[p]
        return len(doomed)

    def _children_of(self, pnode: PresentationNode) -> List[PresentationNode]:
        return [self._arena[p] for p in pnode.child_paths]

    def _emit(
        self,
        kind: EventKind,
        path: str,
        parent_path: Optional[str],
        position: Optional[int],
    ) -> None:
        if self._listener is None:
            return
        self._listener(
            MaterializeEvent(kind=kind, path=path, parent_path=parent_path, position=position)
        )
