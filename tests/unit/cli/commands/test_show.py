"""
Unit tests for the 'show' command.
"""

import json

from click.testing import CliRunner

from structview.cli.commands.show import show


def _nodes(output: str):
    return json.loads(output)["nodes"]


class TestShowCommand:
    def test_renders_root_and_children(self, document_file):
        runner = CliRunner()
        result = runner.invoke(show, [str(document_file)])

        assert result.exit_code == 0
        assert "root (Header)" in result.output
        assert "root/2" in result.output
        assert "4 nodes materialized" in result.output

    def test_json_default_depth(self, document_file):
        runner = CliRunner()
        result = runner.invoke(show, [str(document_file), "--json"])

        assert result.exit_code == 0
        nodes = _nodes(result.output)
        assert [n["id"] for n in nodes] == ["root", "A", "C", "B"]
        assert [n["descendants"] for n in nodes] == [15, 5, 5, 2]
        assert nodes[0]["expanded"] and not nodes[1]["expanded"]

    def test_depth_expands_level_by_level(self, document_file):
        runner = CliRunner()
        result = runner.invoke(show, [str(document_file), "--json", "--depth", "2"])

        nodes = _nodes(result.output)
        assert len(nodes) == 4 + 5 + 2 + 2
        assert [n["id"] for n in nodes if n["depth"] == 2][:5] == ["a1", "a2", "a3", "a4", "a5"]

    def test_expand_path_opens_ancestors(self, document_file):
        runner = CliRunner()
        result = runner.invoke(show, [str(document_file), "--json", "-e", "root/1/0"])

        ids = [n["id"] for n in _nodes(result.output)]
        assert ids == ["root", "A", "C", "c1", "c11", "c12", "c13", "c2", "B"]

    def test_structure_panel(self, document_file):
        runner = CliRunner()
        result = runner.invoke(
            show, [str(document_file), "--json", "-e", "root/2", "-s", "root", "-s", "root/2/1"]
        )

        nodes = {n["path"]: n for n in _nodes(result.output)}
        assert nodes["root"]["structure"]["namingQuery"] == {"name": "Header"}
        assert nodes["root/2/1"]["structure"]["designQuery"] == {"unresolved": "#missing"}

    def test_unknown_path(self, document_file):
        runner = CliRunner()
        result = runner.invoke(show, [str(document_file), "-e", "root/9"])

        assert result.exit_code == 1
        assert "No materialized node at path 'root/9'" in result.output

    def test_null_document(self, tmp_path):
        f = tmp_path / "null.json"
        f.write_text("null")
        runner = CliRunner()
        result = runner.invoke(show, [str(f)])

        assert result.exit_code == 1
        assert "No root found" in result.output

    def test_missing_document(self, tmp_path):
        runner = CliRunner()
        result = runner.invoke(show, [str(tmp_path / "missing.json")])

        assert result.exit_code == 1
        assert "File not found" in result.output
