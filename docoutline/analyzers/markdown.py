"""
Markdown analyzer using markdown-it-py.

Turns ATX and setext headings into a nested outline. Headings inside
code fences are not headings to the parser and are skipped.
"""

from __future__ import annotations

import logging
import re
from typing import Any, ClassVar

import yaml
from markdown_it import MarkdownIt
from markdown_it.token import Token

from docoutline.analyzers.base import BaseAnalyzer
from docoutline.core.errors import MalformedInputError
from docoutline.core.outline import GeneratorOptions, OutlineNode, Position
from docoutline.hierarchy.builder import HierarchyBuilder
from docoutline.hierarchy.filters import filter_by_depth

logger = logging.getLogger(__name__)

_FRONTMATTER_CLOSE_RE = re.compile(r"\n---[ \t]*(?:\n|$)")


def split_frontmatter(content: str) -> tuple[dict[str, Any], str, int]:
    """Separate a leading YAML front matter block from the body.

    Returns:
        Tuple of (front matter mapping, body text, lines consumed by the
        front matter). The mapping is empty when there is none; a
        block that is not a mapping stays in the body.

    Raises:
        MalformedInputError: If the front matter is not valid YAML
    """
    if not content.startswith("---"):
        return {}, content, 0

    end_match = _FRONTMATTER_CLOSE_RE.search(content, 3)
    if not end_match:
        return {}, content, 0

    raw = content[3 : end_match.start()]
    body = content[end_match.end() :]
    consumed_lines = content[: end_match.end()].count("\n")

    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as exc:
        raise MalformedInputError("markdown front matter", str(exc)) from exc

    if data is None:
        return {}, body, consumed_lines
    if not isinstance(data, dict):
        logger.warning(
            "Leading --- block is not a YAML mapping (%s); reading it as Markdown",
            type(data).__name__,
        )
        return {}, content, 0
    return data, body, consumed_lines


class MarkdownAnalyzer(BaseAnalyzer):
    """
    Analyze Markdown documents.

    Extracts:
    - Headings with levels (depth = heading level)
    - YAML front matter, attached to the first heading
    """

    SUPPORTED_DISCRIMINATORS: ClassVar[tuple[str, ...]] = ("md", "markdown")
    ANALYZER_NAME: ClassVar[str] = "markdown"

    def __init__(self) -> None:
        self._md = MarkdownIt("commonmark")
        self._md.enable("table")

    def analyze(self, content: str, options: GeneratorOptions | None = None) -> list[OutlineNode]:
        opts = options or GeneratorOptions()
        frontmatter, body, line_offset = split_frontmatter(content)

        tokens = self._md.parse(body)
        nodes: list[OutlineNode] = []

        for index, token in enumerate(tokens):
            if token.type != "heading_open":
                continue
            node = self._process_heading(tokens, index, line_offset, opts)
            if node is not None:
                nodes.append(node)

        if frontmatter and nodes:
            nodes[0].metadata = {**(nodes[0].metadata or {}), "frontmatter": frontmatter}

        return filter_by_depth(HierarchyBuilder.build_hierarchy(nodes), opts.max_depth)

    def _process_heading(
        self,
        tokens: list[Token],
        index: int,
        line_offset: int,
        options: GeneratorOptions,
    ) -> OutlineNode | None:
        """Process a heading_open / inline / heading_close group."""
        open_token = tokens[index]
        level = int(open_token.tag[1])  # h1 -> 1, h2 -> 2, etc.

        inline_token = tokens[index + 1]
        raw_title = inline_token.content
        title = raw_title.strip()
        if not title:
            logger.debug("Skipping empty heading at token %d", index)
            return None

        line = (open_token.map[0] if open_token.map else 0) + 1 + line_offset
        node = self.create_node(
            title,
            "heading",
            level,
            Position(line=line, column=1) if options.include_line_numbers else None,
            {"level": level, "raw_title": raw_title},
        )
        node.id = self.generate_id(title, "heading", line)
        node.anchor = self.create_anchor(title)
        return node
