"""Tests for hierarchy building, depth filtering and id derivation."""

from __future__ import annotations

from docoutline.core.outline import AnalyzedElement, GeneratorOptions, OutlineNode, Position
from docoutline.hierarchy.builder import HierarchyBuilder
from docoutline.hierarchy.filters import filter_by_depth
from docoutline.hierarchy.identifiers import create_anchor, generate_id
from docoutline.hierarchy.tree import find_node, get_statistics, iter_forest, max_depth


# ===================================================================
# Helpers
# ===================================================================


def _node(title: str, depth: int = 1, node_type: str = "heading") -> OutlineNode:
    """Create a childless node."""
    return OutlineNode(title=title, type=node_type, depth=depth)


def _titles(nodes: list[OutlineNode] | None) -> list[str]:
    return [n.title for n in nodes or []]


# ===================================================================
# build_hierarchy
# ===================================================================


class TestBuildHierarchy:
    """Tests for depth-stack nesting."""

    def test_empty(self):
        assert HierarchyBuilder.build_hierarchy([]) == []

    def test_siblings_and_children(self):
        nodes = [_node("A", 1), _node("B", 2), _node("C", 2), _node("D", 1)]
        result = HierarchyBuilder.build_hierarchy(nodes)

        assert _titles(result) == ["A", "D"]
        assert _titles(result[0].children) == ["B", "C"]
        assert result[1].children is None

    def test_skipped_level_nests_under_nearest_shallower(self):
        nodes = [_node("A", 1), _node("B", 3), _node("C", 2)]
        result = HierarchyBuilder.build_hierarchy(nodes)

        assert _titles(result) == ["A"]
        assert _titles(result[0].children) == ["B", "C"]

    def test_document_starting_deep(self):
        nodes = [_node("B", 2), _node("C", 3), _node("A", 1)]
        result = HierarchyBuilder.build_hierarchy(nodes)

        assert _titles(result) == ["B", "A"]
        assert _titles(result[0].children) == ["C"]

    def test_preserves_document_order(self):
        titles = ["A", "B", "C", "D", "E", "F"]
        depths = [1, 2, 3, 2, 1, 2]
        result = HierarchyBuilder.build_hierarchy(
            [_node(t, d) for t, d in zip(titles, depths)]
        )
        assert [n.title for n in iter_forest(result)] == titles

    def test_equal_depth_closes_scope(self):
        nodes = [_node("A", 2), _node("B", 2), _node("C", 2)]
        result = HierarchyBuilder.build_hierarchy(nodes)
        assert _titles(result) == ["A", "B", "C"]

    def test_content_nodes_open_scopes(self):
        nodes = [
            _node("A", 1),
            _node("p", 1, node_type="paragraph"),
            _node("B", 2),
        ]
        result = HierarchyBuilder.build_hierarchy(nodes)

        assert _titles(result) == ["A", "p"]
        assert result[0].children is None
        assert _titles(result[1].children) == ["B"]


# ===================================================================
# elements_to_nodes / assemble
# ===================================================================


class TestElementsToNodes:
    """Tests for converting analyzed elements to nodes."""

    def test_ids_use_kind_and_line(self, flat_elements):
        nodes = HierarchyBuilder.elements_to_nodes(flat_elements)
        assert [n.id for n in nodes] == [
            "class-a-1",
            "method-b-2",
            "method-c-5",
            "function-d-9",
        ]
        assert nodes[0].line == 1
        assert nodes[0].column == 1

    def test_no_position_means_no_line(self):
        element = AnalyzedElement(name="run", kind="function")
        node = HierarchyBuilder.elements_to_nodes([element])[0]
        assert node.line is None
        assert node.id == "function-run"
        assert node.metadata is None

    def test_unnamed_element_skipped_with_members(self):
        elements = [
            AnalyzedElement(name="", kind="class", depth=1),
            AnalyzedElement(name="orphan", kind="method", depth=2),
            AnalyzedElement(name="after", kind="function", depth=1),
        ]
        nodes = HierarchyBuilder.elements_to_nodes(elements)
        assert _titles(nodes) == ["after"]

    def test_private_elements_excluded_when_requested(self):
        elements = [
            AnalyzedElement(name="Public", kind="class", depth=1, visibility="public"),
            AnalyzedElement(name="_hidden", kind="method", depth=2, visibility="protected"),
            AnalyzedElement(name="shown", kind="method", depth=2, visibility="public"),
        ]
        opts = GeneratorOptions(include_private=False)
        nodes = HierarchyBuilder.elements_to_nodes(elements, opts)
        assert _titles(nodes) == ["Public", "shown"]

    def test_private_elements_kept_by_default(self):
        elements = [AnalyzedElement(name="__x", kind="function", visibility="private")]
        nodes = HierarchyBuilder.elements_to_nodes(elements)
        assert nodes[0].metadata == {"visibility": "private"}

    def test_docstring_only_with_comments(self):
        element = AnalyzedElement(name="run", kind="function", docstring="Run it.")
        plain = HierarchyBuilder.elements_to_nodes([element])[0]
        commented = HierarchyBuilder.elements_to_nodes(
            [element], GeneratorOptions(include_comments=True)
        )[0]
        assert plain.metadata is None
        assert commented.metadata == {"docstring": "Run it."}

    def test_assemble_nests_and_filters(self, flat_elements):
        result = HierarchyBuilder.assemble(flat_elements, GeneratorOptions(max_depth=1))
        assert _titles(result) == ["A", "D"]
        assert result[0].children is None

    def test_assemble_full_depth(self, flat_elements):
        result = HierarchyBuilder.assemble(flat_elements)
        assert _titles(result[0].children) == ["B", "C"]


# ===================================================================
# filter_by_depth
# ===================================================================


class TestFilterByDepth:
    """Tests for depth pruning."""

    def _forest(self) -> list[OutlineNode]:
        return HierarchyBuilder.build_hierarchy(
            [_node("A", 1), _node("B", 2), _node("C", 3), _node("D", 1)]
        )

    def test_none_returns_input(self):
        forest = self._forest()
        assert filter_by_depth(forest, None) is forest

    def test_prunes_deeper_nodes(self):
        result = filter_by_depth(self._forest(), 2)
        assert _titles(result) == ["A", "D"]
        assert _titles(result[0].children) == ["B"]
        assert result[0].children[0].children is None

    def test_fully_pruned_children_become_none(self):
        result = filter_by_depth(self._forest(), 1)
        assert all(node.children is None for node in result)

    def test_does_not_modify_input(self):
        forest = self._forest()
        filter_by_depth(forest, 1)
        assert _titles(forest[0].children) == ["B"]

    def test_no_nodes_deeper_than_bound(self):
        for bound in (1, 2, 3):
            result = filter_by_depth(self._forest(), bound)
            assert max_depth(result) <= bound

    def test_everything_deeper_than_bound(self):
        forest = [_node("B", 2), _node("C", 3)]
        assert filter_by_depth(forest, 1) == []


# ===================================================================
# Identifiers
# ===================================================================


class TestIdentifiers:
    def test_generate_id_with_line(self):
        assert generate_id("Getting Started", "heading", 3) == "heading-getting-started-3"

    def test_generate_id_without_line(self):
        assert generate_id("user_id", "property") == "property-user-id"

    def test_generate_id_line_zero(self):
        assert generate_id("Name", "column", 0) == "column-name-0"

    def test_generate_id_replaces_each_character(self):
        assert generate_id("A  B!", "heading") == "heading-a--b-"

    def test_generate_id_deterministic(self):
        assert generate_id("Intro", "heading", 1) == generate_id("Intro", "heading", 1)

    def test_anchor_strips_punctuation(self):
        assert create_anchor("Getting Started!") == "getting-started"

    def test_anchor_collapses_hyphens(self):
        assert create_anchor("  API -- Reference  ") == "api-reference"

    def test_anchor_keeps_underscores(self):
        assert create_anchor("snake_case name") == "snake_case-name"

    def test_anchor_empty(self):
        assert create_anchor("!!!") == ""


# ===================================================================
# Forest helpers
# ===================================================================


class TestForestHelpers:
    def test_find_node(self, flat_elements):
        forest = HierarchyBuilder.assemble(flat_elements)
        found = find_node(forest, "method-c-5")
        assert found is not None
        assert found.title == "C"
        assert find_node(forest, "missing") is None

    def test_statistics(self, flat_elements):
        stats = get_statistics(HierarchyBuilder.assemble(flat_elements))
        assert stats["total_nodes"] == 4
        assert stats["top_level_nodes"] == 2
        assert stats["leaf_nodes"] == 3
        assert stats["max_depth"] == 2
        assert stats["type_distribution"] == {"class": 1, "method": 2, "function": 1}
        assert stats["depth_distribution"] == {1: 2, 2: 2}

    def test_max_depth_empty(self):
        assert max_depth([]) == 0
