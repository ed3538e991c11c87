"""Shared document fixtures."""

import json

import pytest


def leaf(node_id, **fields):
    return {"id": node_id, "componentType": "Text", **fields}


@pytest.fixture
def root_node():
    """
    root
    ├── A  (5 leaves)                 -> 5 descendants
    ├── B  (2 leaves via components)  -> 2 descendants
    └── C  (c1 with 3 leaves, c2)     -> 5 descendants
    """
    return {
        "id": "root",
        "componentType": "Page",
        "namingQuery": "#x1",
        "children": [
            {
                "id": "A",
                "componentType": "Section",
                "children": [leaf(f"a{i}") for i in range(1, 6)],
            },
            {
                "id": "B",
                "type": "Container",
                "components": [leaf("b1", variablesQuery="#v1"), leaf("b2", designQuery="#missing")],
            },
            {
                "id": "C",
                "componentType": "Section",
                "children": [
                    {"id": "c1", "children": [leaf("c11"), leaf("c12"), leaf("c13")]},
                    leaf("c2"),
                ],
            },
        ],
    }


@pytest.fixture
def document(root_node):
    return {
        "structure": root_node,
        "naming": {"x1": {"name": "Header"}},
        "design_data": {"nullish": None},
        "data": {"variables": {"v1": 42}},
    }


@pytest.fixture
def document_file(tmp_path, document):
    path = tmp_path / "page.json"
    path.write_text(json.dumps(document))
    return path
