"""
Hierarchy builder.

Nests flat, depth-annotated outline nodes into a forest.
"""

from __future__ import annotations

import logging
from typing import Any

from docoutline.core.outline import AnalyzedElement, GeneratorOptions, OutlineNode
from docoutline.hierarchy.filters import filter_by_depth
from docoutline.hierarchy.identifiers import generate_id

logger = logging.getLogger(__name__)


class HierarchyBuilder:
    """
    Builds outline forests from flat node lists.

    Every analyzer that discovers elements one after another (headings,
    declarations) goes through here, so all formats nest the same way.
    """

    @staticmethod
    def build_hierarchy(nodes: list[OutlineNode]) -> list[OutlineNode]:
        """Nest nodes under the nearest preceding node of smaller depth.

        Strategy:
        1. Keep a stack of open nodes
        2. Pop every open node whose depth is >= the incoming depth
        3. Attach to the top of the stack, or to the result if it is empty
        4. Push the incoming node, whatever its type

        Every node opens a scope, headings or not. Content at depth 1
        following a depth-1 heading is therefore its sibling, and a
        depth-2 node after that content nests under the content.

        Args:
            nodes: Flat nodes in document order.

        Returns:
            Top-level nodes; the input nodes are attached to each other.
        """
        result: list[OutlineNode] = []
        node_stack: list[OutlineNode] = []

        for node in nodes:
            while node_stack and node_stack[-1].depth >= node.depth:
                node_stack.pop()

            if node_stack:
                node_stack[-1].add_child(node)
            else:
                result.append(node)

            node_stack.append(node)

        return result

    @staticmethod
    def elements_to_nodes(
        elements: list[AnalyzedElement],
        options: GeneratorOptions | None = None,
    ) -> list[OutlineNode]:
        """Convert analyzed elements into flat outline nodes.

        Elements without a usable name, and private/protected elements
        when ``include_private`` is off, are skipped together with every
        deeper element that follows them.

        Args:
            elements: Elements in document order.
            options: Generator options (private members, comments).

        Returns:
            Flat nodes in the same order, ready for build_hierarchy.
        """
        opts = options or GeneratorOptions()
        nodes: list[OutlineNode] = []
        skip_below: int | None = None

        for element in elements:
            if skip_below is not None:
                if element.depth > skip_below:
                    continue
                skip_below = None

            if not element.name or not element.name.strip():
                logger.debug("Skipping unnamed %s element and its members", element.kind)
                skip_below = element.depth
                continue
            if not opts.include_private and element.visibility in ("private", "protected"):
                skip_below = element.depth
                continue

            line = element.position.line if element.position else None
            node = OutlineNode(
                title=element.name,
                type=element.kind,
                depth=element.depth,
                line=line,
                column=element.position.column if element.position else None,
                metadata=HierarchyBuilder._element_metadata(element, opts) or None,
                id=generate_id(element.name, element.kind, line),
            )
            nodes.append(node)

        return nodes

    @staticmethod
    def _element_metadata(element: AnalyzedElement, options: GeneratorOptions) -> dict[str, Any]:
        metadata: dict[str, Any] = {}
        if element.visibility:
            metadata["visibility"] = element.visibility
        if element.parameters is not None:
            metadata["parameters"] = [p.to_dict() for p in element.parameters]
        if element.docstring and options.include_comments:
            metadata["docstring"] = element.docstring
        metadata.update(element.metadata)
        return metadata

    @staticmethod
    def assemble(
        elements: list[AnalyzedElement],
        options: GeneratorOptions | None = None,
    ) -> list[OutlineNode]:
        """Convert, nest and depth-filter analyzed elements in one call."""
        opts = options or GeneratorOptions()
        nodes = HierarchyBuilder.elements_to_nodes(elements, opts)
        return filter_by_depth(HierarchyBuilder.build_hierarchy(nodes), opts.max_depth)
