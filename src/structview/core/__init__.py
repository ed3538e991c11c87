"""
Core of structview: node access, reference resolution and lazy materialization.
"""

from .accessor import children, children_source, display_label, has_children, label
from .context import DocumentContext
from .controller import DocumentRootController, RootHandle, normalize_root
from .counter import DescendantCounter, count_descendants
from .materializer import TreeMaterializer, UnknownPathError
from .registry import REFERENCE_MAPS
from .resolver import ReferenceResolver, is_unresolved, resolve_query
from .result import Err, Ok, Result
from .types import (
    ChildrenSource,
    EventKind,
    MaterializeEvent,
    NodeLabel,
    PresentationNode,
    StructureField,
    Unresolved,
)

__all__ = [
    "ChildrenSource",
    "DescendantCounter",
    "DocumentContext",
    "DocumentRootController",
    "Err",
    "EventKind",
    "MaterializeEvent",
    "NodeLabel",
    "Ok",
    "PresentationNode",
    "REFERENCE_MAPS",
    "ReferenceResolver",
    "Result",
    "RootHandle",
    "StructureField",
    "TreeMaterializer",
    "UnknownPathError",
    "Unresolved",
    "children",
    "children_source",
    "count_descendants",
    "display_label",
    "has_children",
    "is_unresolved",
    "label",
    "normalize_root",
    "resolve_query",
]
