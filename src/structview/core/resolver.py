"""
Reference Resolver.

Turns the string held by a ``<name>Query`` field into the value it points at.

Resolution Strategy:
    1. Candidate keys: the value with one leading ``#`` stripped, then the
       raw value itself if it differs.
    2. Candidate containers: the document, then ``document["data"]``.
    3. Primary pass: the map the registry names for this field, in each
       container.
    4. Fallback pass: every registry map, in registry order, in each
       container. Some documents file a reference under the wrong map, so
       the first hit anywhere wins even if an unrelated map happens to share
       the id.
    5. Nothing found: an ``Unresolved`` marker carrying the original string.

Resolution never raises. Logging is diagnostic only.
"""

import logging
from typing import Any, List, Mapping, Optional, Tuple

from .context import DocumentContext
from .registry import REFERENCE_MAPS, map_name_for
from .types import Unresolved

logger = logging.getLogger(__name__)

DATA_CONTAINER = "data"

_MISSING = object()


def candidate_keys(value: str) -> Tuple[str, List[str]]:
    """Return the query id and the ordered lookup keys for a reference string."""
    query_id = value[1:] if value.startswith("#") else value
    keys = [query_id]
    if query_id != value:
        keys.append(value)
    return query_id, keys


def candidate_containers(document: Mapping[str, Any]) -> List[Mapping[str, Any]]:
    """The document and its ``data`` sub-object, when those are mappings."""
    containers = [document]
    data = document.get(DATA_CONTAINER)
    if isinstance(data, Mapping):
        containers.append(data)
    return containers


def _lookup(container: Mapping[str, Any], map_name: str, keys: List[str]) -> Any:
    data_map = container.get(map_name)
    if not isinstance(data_map, Mapping):
        return _MISSING
    for key in keys:
        if key in data_map:
            return data_map[key]
    return _MISSING


def resolve_query(field_name: str, value: Any, document: Optional[Mapping[str, Any]]) -> Any:
    """
    Resolve ``value`` of query field ``field_name`` against ``document``.

    Non-string values (already inlined objects) and calls without a document
    are returned unchanged. A found ``None`` is returned as ``None``; a miss
    returns ``Unresolved``.
    """
    if not isinstance(value, str) or not isinstance(document, Mapping):
        return value

    query_id, keys = candidate_keys(value)
    containers = candidate_containers(document)

    map_name = map_name_for(field_name)
    if map_name:
        for container in containers:
            found = _lookup(container, map_name, keys)
            if found is not _MISSING:
                logger.debug(f"Resolved {field_name} via {map_name}: {value}")
                return found

    for fallback_name in REFERENCE_MAPS.values():
        for container in containers:
            found = _lookup(container, fallback_name, keys)
            if found is not _MISSING:
                logger.debug(
                    f"Resolved {field_name} via fallback {fallback_name}: {value}"
                )
                return found

    logger.debug(f"Unresolved {field_name}: {value} not found in any known map")
    return Unresolved(original_query=value, query_id=query_id)


def is_unresolved(value: Any) -> bool:
    return isinstance(value, Unresolved)


class ReferenceResolver:
    """Resolver bound to one ``DocumentContext``."""

    def __init__(self, context: Optional[DocumentContext]):
        self.context = context

    @property
    def document(self) -> Optional[Mapping[str, Any]]:
        return self.context.document if self.context is not None else None

    def resolve(self, field_name: str, value: Any) -> Any:
        return resolve_query(field_name, value, self.document)
