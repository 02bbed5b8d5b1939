"""Tests for the command line interface."""

from __future__ import annotations

import json

import pytest

from docoutline.cli import format_as_tree, format_metadata, main
from docoutline.core.outline import OutlineNode


@pytest.fixture
def markdown_file(tmp_path, sample_markdown):
    path = tmp_path / "guide.md"
    path.write_text(sample_markdown, encoding="utf-8")
    return path


@pytest.fixture
def python_file(tmp_path, sample_python):
    path = tmp_path / "person.py"
    path.write_text(sample_python, encoding="utf-8")
    return path


# ===================================================================
# Rendering
# ===================================================================


class TestRendering:
    def test_tree_indents_children(self):
        root = OutlineNode(title="A", type="heading", line=1)
        root.add_child(OutlineNode(title="B", type="heading", depth=2))
        assert format_as_tree([root]) == "├─ A [heading] (line 1)\n  ├─ B [heading]"

    def test_metadata_summary(self):
        meta = {
            "visibility": "protected",
            "is_async": True,
            "parameters": [{"name": "x"}, {"name": "y"}],
        }
        assert format_metadata(meta) == " (protected, async, params: x, y)"

    def test_public_visibility_hidden(self):
        assert format_metadata({"visibility": "public"}) == ""


# ===================================================================
# main
# ===================================================================


class TestMain:
    """Tests for the CLI entry point."""

    def test_tree_output(self, markdown_file, capsys):
        assert main([str(markdown_file)]) == 0
        out = capsys.readouterr().out
        assert "├─ Guide [heading]" in out
        assert "    ├─ From source [heading]" in out

    def test_line_numbers(self, markdown_file, capsys):
        assert main([str(markdown_file), "-l"]) == 0
        assert "├─ Guide [heading] (line 1)" in capsys.readouterr().out

    def test_json_output(self, markdown_file, capsys):
        assert main([str(markdown_file), "-f", "json", "-d", "1"]) == 0
        data = json.loads(capsys.readouterr().out)
        assert [n["title"] for n in data] == ["Guide", "Reference"]
        assert "children" not in data[0]

    def test_output_file(self, markdown_file, tmp_path, capsys):
        target = tmp_path / "outline.json"
        assert main([str(markdown_file), "--format", "json", "-o", str(target)]) == 0
        assert json.loads(target.read_text(encoding="utf-8"))[0]["title"] == "Guide"
        assert "Outline written to" in capsys.readouterr().out

    def test_exclude_private(self, python_file, capsys):
        assert main([str(python_file), "-p"]) == 0
        out = capsys.readouterr().out
        assert "__init__ [method]" in out
        assert "params: name, age" in out
        assert "_secret" not in out

    def test_list_formats(self, capsys):
        assert main(["--list-formats"]) == 0
        out = capsys.readouterr().out
        assert "  .md" in out
        assert "  .csv" in out

    def test_unsupported_format(self, tmp_path, capsys):
        path = tmp_path / "data.xyz"
        path.write_text("x", encoding="utf-8")
        assert main([str(path)]) == 1
        assert capsys.readouterr().err.startswith("Error: No analyzer registered for format: xyz")

    def test_missing_file(self, tmp_path, capsys):
        assert main([str(tmp_path / "missing.md")]) == 1
        assert "Error:" in capsys.readouterr().err

    def test_malformed_input(self, tmp_path, capsys):
        path = tmp_path / "bad.json"
        path.write_text("{", encoding="utf-8")
        assert main([str(path)]) == 1
        assert "Invalid JSON" in capsys.readouterr().err

    def test_invalid_depth(self, markdown_file, capsys):
        assert main([str(markdown_file), "-d", "0"]) == 1
        assert "max_depth" in capsys.readouterr().err

    def test_file_required(self):
        with pytest.raises(SystemExit):
            main([])
