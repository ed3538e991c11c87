"""
Node Accessor.

Uniform read-only view over a Graph Node. Graph Nodes are arbitrary decoded
JSON mappings, so every function here degrades to a default instead of
failing when a field is absent or has the wrong shape.
"""

from typing import TYPE_CHECKING, Any, List, Mapping, Optional, Sequence, Tuple

from .types import NO_ID, ChildrenSource, NodeLabel

if TYPE_CHECKING:
    from .resolver import ReferenceResolver

CHILD_FIELDS = (ChildrenSource.CHILDREN.value, ChildrenSource.COMPONENTS.value)
NAMING_FIELD = "namingQuery"


def _non_empty_list(value: Any) -> bool:
    return isinstance(value, list) and len(value) > 0


def children_source(node: Any) -> ChildrenSource:
    """
    Decide once which field holds the node's children.

    ``children`` wins over ``components``; an empty list counts as absent.
    """
    if not isinstance(node, Mapping):
        return ChildrenSource.NONE
    if _non_empty_list(node.get("children")):
        return ChildrenSource.CHILDREN
    if _non_empty_list(node.get("components")):
        return ChildrenSource.COMPONENTS
    return ChildrenSource.NONE


def children_from(node: Any, source: ChildrenSource) -> Sequence[Any]:
    """Fetch the child sequence for an already-decided source."""
    if source is ChildrenSource.NONE:
        return []
    return node[source.value]


def children(node: Any) -> Sequence[Any]:
    """Ordered children of a node; the two child fields are never merged."""
    return children_from(node, children_source(node))


def has_children(node: Any) -> bool:
    return children_source(node) is not ChildrenSource.NONE


def label(node: Any) -> NodeLabel:
    """Identifier (``id``, then ``name``, then a marker) and type label."""
    if not isinstance(node, Mapping):
        return NodeLabel(id=NO_ID)
    node_id = node.get("id") or node.get("name") or NO_ID
    node_type = node.get("componentType") or node.get("type") or ""
    return NodeLabel(id=str(node_id), type=str(node_type))


def structure_items(node: Any) -> List[Tuple[str, Any]]:
    """All fields except the child-holding ones, in document order."""
    if not isinstance(node, Mapping):
        return []
    return [(key, value) for key, value in node.items() if key not in CHILD_FIELDS]


def naming_name(node: Any, resolver: Optional["ReferenceResolver"] = None) -> Optional[str]:
    """
    Human name attached to a node through its ``namingQuery`` field.

    The field may hold a reference string (resolved through ``resolver``) or
    an already-inlined object. Only a non-blank string ``name`` counts.
    """
    if not isinstance(node, Mapping):
        return None
    naming = node.get(NAMING_FIELD)
    if isinstance(naming, str):
        if resolver is None:
            return None
        naming = resolver.resolve(NAMING_FIELD, naming)
    if not isinstance(naming, Mapping):
        return None
    name = naming.get("name")
    if isinstance(name, str) and name.strip():
        return name.strip()
    return None


def display_label(node: Any, resolver: Optional["ReferenceResolver"] = None) -> str:
    """The node id, suffixed with its resolved naming when there is one."""
    node_id = label(node).id
    name = naming_name(node, resolver)
    return f"{node_id} ({name})" if name else node_id
