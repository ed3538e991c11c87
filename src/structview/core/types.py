"""
Core type definitions for structview.

Graph Nodes themselves are never wrapped: they stay the plain mappings the
JSON decoder produced, so every type here that points at document data holds
a reference (dataclass) rather than a validated copy (pydantic).
"""

from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any, List, Mapping, Optional

from pydantic import BaseModel, ConfigDict

ROOT_PATH = "root"
PATH_SEPARATOR = "/"
NO_ID = "(no-id)"


class ChildrenSource(StrEnum):
    """Which field of a Graph Node holds its children."""
    CHILDREN = "children"
    COMPONENTS = "components"
    NONE = "none"


class EventKind(StrEnum):
    """Presentation surface notifications emitted by the materializer."""
    ATTACH = "attach"
    DETACH = "detach"
    STRUCTURE_SHOWN = "structure_shown"
    STRUCTURE_HIDDEN = "structure_hidden"


class Unresolved(BaseModel):
    """
    Marker for a query reference that no known map could satisfy.

    Distinct from ``None`` so callers can tell "the map holds null" apart
    from "the reference points nowhere".
    """
    original_query: str
    query_id: str

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return f"null ({self.original_query})"


class NodeLabel(BaseModel):
    """Display identifier and type label of a Graph Node."""
    id: str
    type: str = ""

    model_config = ConfigDict(frozen=True)


class MaterializeEvent(BaseModel):
    """A single attach/detach notification for the rendering collaborator."""
    kind: EventKind
    path: str
    parent_path: Optional[str] = None
    position: Optional[int] = None

    model_config = ConfigDict(frozen=True)


@dataclass
class StructureField:
    """
    One non-child field of a Graph Node, as shown in its structure panel.

    ``raw`` is the value stored on the node; ``value`` is what the resolver
    turned it into (identical for non-query fields).
    """
    key: str
    raw: Any
    value: Any
    is_query: bool = False

    @property
    def resolved(self) -> bool:
        """True when the resolver replaced the raw value with something else."""
        return self.is_query and self.value is not self.raw

    @property
    def unresolved(self) -> bool:
        return isinstance(self.value, Unresolved)


@dataclass
class PresentationNode:
    """
    Transient view of a Graph Node, alive only while its ancestors are expanded.

    Owns no document data: ``node`` is a back-reference to the Graph Node.
    """
    path: str
    depth: int
    node: Mapping[str, Any]
    label: NodeLabel
    display_id: str
    descendant_count: int
    children_source: ChildrenSource
    parent_path: Optional[str] = None
    expanded: bool = False
    hydrated: bool = False
    child_paths: List[str] = field(default_factory=list)
    structure: Optional[List[StructureField]] = None

    @property
    def has_children(self) -> bool:
        return self.children_source is not ChildrenSource.NONE

    @property
    def structure_shown(self) -> bool:
        return self.structure is not None


def child_path(parent: str, index: int) -> str:
    """Build the arena path of the ``index``-th materialized child."""
    return f"{parent}{PATH_SEPARATOR}{index}"


def is_within(path: str, ancestor: str) -> bool:
    """True if ``path`` is strictly below ``ancestor`` in the arena."""
    return path.startswith(ancestor + PATH_SEPARATOR)
