"""
Document Root Controller.

Owns the currently loaded document. ``load`` normalizes a parsed document to
its structural root, swaps in a fresh ``DocumentContext`` and rebuilds the
outline from that root. A document with no usable root is refused and the
previously loaded state stays exactly as it was.
"""

import logging
from dataclasses import dataclass
from typing import Any, Mapping, Optional

from .context import DocumentContext
from .materializer import Listener, TreeMaterializer
from .resolver import ReferenceResolver
from .result import Err, Ok, Result
from .types import ROOT_PATH, PresentationNode

logger = logging.getLogger(__name__)

STRUCTURE_FIELD = "structure"
NO_ROOT_MESSAGE = "No root found"


def normalize_root(document: Any) -> Any:
    """Unwrap ``document["structure"]`` when it is an object. One level only."""
    if isinstance(document, Mapping):
        inner = document.get(STRUCTURE_FIELD)
        if isinstance(inner, Mapping):
            return inner
    return document


@dataclass
class RootHandle:
    """What a successful load hands back to the caller."""
    context: DocumentContext
    materializer: TreeMaterializer

    @property
    def root(self) -> PresentationNode:
        return self.materializer.get(ROOT_PATH)


class DocumentRootController:
    """
    Single-document controller for one viewer session.

    Attributes:
        status: The user-visible status line for the last load attempt.
    """

    def __init__(self, listener: Optional[Listener] = None):
        self._listener = listener
        self._handle: Optional[RootHandle] = None
        self.status = ""

    @property
    def handle(self) -> Optional[RootHandle]:
        return self._handle

    @property
    def context(self) -> Optional[DocumentContext]:
        return self._handle.context if self._handle else None

    @property
    def materializer(self) -> Optional[TreeMaterializer]:
        return self._handle.materializer if self._handle else None

    @property
    def resolver(self) -> ReferenceResolver:
        return ReferenceResolver(self.context)

    def load(self, document: Any, source: Optional[str] = None) -> Result[RootHandle, str]:
        """
        Replace the current document and materialize its root, expanded.

        Every Presentation Node of the previous document is detached and every
        value resolved against it becomes stale.
        """
        root = normalize_root(document)
        if not isinstance(root, Mapping):
            logger.warning(f"Refusing document from {source or '<memory>'}: {NO_ROOT_MESSAGE}")
            self.status = NO_ROOT_MESSAGE
            return Err(NO_ROOT_MESSAGE)

        if self._handle is not None:
            self._handle.materializer.clear()

        context = DocumentContext(document=document, root=root, source=source)
        materializer = TreeMaterializer(context, listener=self._listener)
        materializer.mount()
        self._handle = RootHandle(context=context, materializer=materializer)

        self.status = f"Loaded: {source}" if source else "Loaded"
        logger.info(
            f"Loaded document {source or '<memory>'}: "
            f"{context.descendant_count(root)} nodes below root"
        )
        return Ok(self._handle)
