"""Unit tests for the reference resolver."""

import logging

import pytest

from structview.core.context import DocumentContext
from structview.core.registry import REFERENCE_MAPS, is_query_field
from structview.core.resolver import (
    ReferenceResolver,
    candidate_keys,
    is_unresolved,
    resolve_query,
)
from structview.core.types import Unresolved


class TestCandidateKeys:
    def test_hash_is_stripped_once(self):
        assert candidate_keys("#x1") == ("x1", ["x1", "#x1"])

    def test_plain_value(self):
        assert candidate_keys("x1") == ("x1", ["x1"])

    def test_only_one_hash(self):
        assert candidate_keys("##x") == ("#x", ["#x", "##x"])


class TestResolveQuery:
    def test_round_trip(self):
        doc = {"naming": {"x1": {"name": "Header"}}}
        assert resolve_query("namingQuery", "#x1", doc) == {"name": "Header"}

    def test_fallback_finds_map_under_unrelated_key(self):
        doc = {"variables": {"x1": {"name": "Header"}}}
        assert resolve_query("namingQuery", "#x1", doc) == {"name": "Header"}

    def test_unregistered_field_uses_fallback(self):
        doc = {"states": {"s1": "hover"}}
        assert resolve_query("madeUpQuery", "#s1", doc) == "hover"

    def test_miss_returns_sentinel_with_original_query(self):
        result = resolve_query("namingQuery", "#ghost", {"naming": {"x1": {}}})
        assert isinstance(result, Unresolved)
        assert result.original_query == "#ghost"
        assert result.query_id == "ghost"
        assert is_unresolved(result)
        assert str(result) == "null (#ghost)"

    def test_found_null_is_not_unresolved(self):
        result = resolve_query("designQuery", "#d1", {"design_data": {"d1": None}})
        assert result is None
        assert not is_unresolved(result)

    @pytest.mark.parametrize("value", [{"name": "inline"}, 7, None, ["#x1"]])
    def test_non_string_passes_through(self, value):
        assert resolve_query("namingQuery", value, {"naming": {"x1": 1}}) is value

    def test_no_document_passes_through(self):
        assert resolve_query("namingQuery", "#x1", None) == "#x1"

    def test_query_id_beats_raw_value(self):
        doc = {"naming": {"x1": "stripped", "#x1": "raw"}}
        assert resolve_query("namingQuery", "#x1", doc) == "stripped"

    def test_raw_value_key_is_tried(self):
        doc = {"naming": {"#x1": "raw"}}
        assert resolve_query("namingQuery", "#x1", doc) == "raw"

    def test_document_beats_data_container(self):
        doc = {"naming": {"x1": "top"}, "data": {"naming": {"x1": "nested"}}}
        assert resolve_query("namingQuery", "#x1", doc) == "top"

    def test_data_container_is_searched(self):
        doc = {"data": {"naming": {"x1": "nested"}}}
        assert resolve_query("namingQuery", "#x1", doc) == "nested"

    def test_primary_map_beats_earlier_registry_map(self):
        # document_data comes first in registry order but naming is the mapped map
        doc = {"document_data": {"x1": "wrong"}, "naming": {"x1": "right"}}
        assert resolve_query("namingQuery", "#x1", doc) == "right"

    def test_fallback_follows_registry_order(self):
        doc = {"variables": {"x1": "late"}, "design_data": {"x1": "early"}}
        assert resolve_query("namingQuery", "#x1", doc) == "early"

    def test_non_mapping_maps_are_skipped(self):
        doc = {"naming": ["x1"], "data": "junk", "states": {"x1": "ok"}}
        assert resolve_query("namingQuery", "#x1", doc) == "ok"

    def test_logs_each_path(self, caplog):
        doc = {"naming": {"x1": 1}, "states": {"s1": 2}}
        with caplog.at_level(logging.DEBUG, logger="structview.core.resolver"):
            resolve_query("namingQuery", "#x1", doc)
            resolve_query("namingQuery", "#s1", doc)
            resolve_query("namingQuery", "#zz", doc)
        messages = [r.getMessage() for r in caplog.records]
        assert any("via naming" in m for m in messages)
        assert any("via fallback states" in m for m in messages)
        assert any("Unresolved" in m for m in messages)


class TestReferenceResolver:
    def test_bound_to_context(self, document):
        resolver = ReferenceResolver(DocumentContext(document=document, root=document["structure"]))
        assert resolver.resolve("variablesQuery", "#v1") == 42

    def test_without_context(self):
        assert ReferenceResolver(None).resolve("namingQuery", "#x1") == "#x1"


class TestRegistry:
    def test_is_read_only(self):
        with pytest.raises(TypeError):
            REFERENCE_MAPS["newQuery"] = "new"  # type: ignore[index]

    def test_known_mapping(self):
        assert REFERENCE_MAPS["namingQuery"] == "naming"
        assert REFERENCE_MAPS["dataQuery"] == "document_data"

    def test_query_suffix(self):
        assert is_query_field("fooQuery")
        assert not is_query_field("query")
