"""Tests for the Markdown analyzer."""

from __future__ import annotations

import pytest

from docoutline.analyzers.markdown import MarkdownAnalyzer, split_frontmatter
from docoutline.core.errors import MalformedInputError
from docoutline.core.outline import GeneratorOptions


@pytest.fixture
def analyzer() -> MarkdownAnalyzer:
    return MarkdownAnalyzer()


# ===================================================================
# Headings
# ===================================================================


class TestHeadings:
    """Tests for heading extraction and nesting."""

    def test_nesting(self, analyzer, sample_markdown):
        nodes = analyzer.analyze(sample_markdown)
        assert [n.title for n in nodes] == ["Guide", "Reference"]
        guide = nodes[0]
        assert [c.title for c in guide.children] == ["Installation", "Usage"]
        assert [c.title for c in guide.children[0].children] == ["From source"]
        assert nodes[1].children is None

    def test_ids_and_anchors(self, analyzer, sample_markdown):
        nodes = analyzer.analyze(sample_markdown)
        install = nodes[0].children[0]
        assert nodes[0].id == "heading-guide-1"
        assert install.id == "heading-installation-5"
        assert install.anchor == "installation"
        assert install.type == "heading"
        assert install.depth == 2

    def test_metadata(self, analyzer):
        node = analyzer.analyze("##  Spaced Title \n")[0]
        assert node.metadata["level"] == 2
        assert node.title == "Spaced Title"

    def test_line_numbers_optional(self, analyzer, sample_markdown):
        plain = analyzer.analyze(sample_markdown)
        numbered = analyzer.analyze(sample_markdown, GeneratorOptions(include_line_numbers=True))
        assert plain[0].line is None
        assert numbered[0].line == 1
        assert numbered[0].column == 1
        assert numbered[0].children[0].line == 5

    def test_max_depth(self, analyzer, sample_markdown):
        nodes = analyzer.analyze(sample_markdown, GeneratorOptions(max_depth=2))
        install = nodes[0].children[0]
        assert install.title == "Installation"
        assert install.children is None

    def test_setext_heading(self, analyzer):
        nodes = analyzer.analyze("Title\n=====\n\nSub\n---\n")
        assert nodes[0].title == "Title"
        assert nodes[0].children[0].title == "Sub"

    def test_code_fence_is_not_heading(self, analyzer):
        nodes = analyzer.analyze("```\n# not a heading\n```\n\n# Real\n")
        assert [n.title for n in nodes] == ["Real"]

    def test_empty_heading_skipped(self, analyzer):
        nodes = analyzer.analyze("#\n\n# Named\n")
        assert [n.title for n in nodes] == ["Named"]

    def test_no_headings(self, analyzer):
        assert analyzer.analyze("Just a paragraph.\n") == []


# ===================================================================
# Front matter
# ===================================================================


class TestFrontMatter:
    """Tests for YAML front matter handling."""

    def test_split(self):
        data, body, consumed = split_frontmatter("---\ntitle: Doc\n---\n# Hello\n")
        assert data == {"title": "Doc"}
        assert body == "# Hello\n"
        assert consumed == 3

    def test_no_front_matter(self):
        data, body, consumed = split_frontmatter("# Hello\n")
        assert data == {}
        assert body == "# Hello\n"
        assert consumed == 0

    def test_attached_to_first_heading(self, analyzer):
        content = "---\ntitle: Doc\n---\n# Hello\n## World\n"
        nodes = analyzer.analyze(content, GeneratorOptions(include_line_numbers=True))
        assert nodes[0].metadata["frontmatter"] == {"title": "Doc"}
        assert nodes[0].line == 4
        assert "frontmatter" not in nodes[0].children[0].metadata

    def test_invalid_front_matter(self, analyzer):
        with pytest.raises(MalformedInputError):
            analyzer.analyze("---\nkey: [unclosed\n---\n# A\n")

    def test_non_mapping_ignored(self, analyzer):
        nodes = analyzer.analyze("---\n- a\n- b\n---\n# A\n")
        assert "frontmatter" not in nodes[0].metadata

    def test_non_mapping_block_stays_in_body(self, analyzer):
        content = "---\n# Title\ntext\n---\n## Sub\n"
        data, body, consumed = split_frontmatter(content)
        assert (data, body, consumed) == ({}, content, 0)

        nodes = analyzer.analyze(content, GeneratorOptions(include_line_numbers=True))
        assert nodes[0].title == "Title"
        assert nodes[0].line == 2
        assert "Sub" in [c.title for c in nodes[0].children]
