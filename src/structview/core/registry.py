"""
Reference Map Registry.

Pairs each recognized ``<name>Query`` node field with the name of the
container field holding its lookup map. Iteration order is the fallback scan
order used by the resolver.
"""

from types import MappingProxyType
from typing import Mapping, Optional

QUERY_SUFFIX = "Query"

REFERENCE_MAPS: Mapping[str, str] = MappingProxyType({
    "dataQuery": "document_data",
    "designQuery": "design_data",
    "behaviorsQuery": "behaviors_data",
    "connectionQuery": "connections_data",
    "themeQuery": "theme_data",
    "layoutQuery": "layout_data",
    "componentPropertiesQuery": "component_properties",
    "mobileHintsQuery": "mobile_hints",
    "atomicScopesQuery": "atomicScopes",
    "classnamesQuery": "classnames",
    "editorsettingsQuery": "editorsettings",
    "fixerVersionsQuery": "fixerVersions",
    "namingQuery": "naming",
    "reactionsQuery": "reactions",
    "slotsQuery": "slots",
    "sourceQuery": "source",
    "statesQuery": "states",
    "themeConfigQuery": "themeConfig",
    "transformationsQuery": "transformations_data",
    "transitionsQuery": "transitions_data",
    "triggersQuery": "triggers",
    "variablesQuery": "variables",
    "variantsQuery": "variants_data",
})


def is_query_field(field_name: str) -> bool:
    """Fields ending in ``Query`` hold indirect references."""
    return field_name.endswith(QUERY_SUFFIX)


def map_name_for(field_name: str) -> Optional[str]:
    return REFERENCE_MAPS.get(field_name)
