"""Depth filtering for outline forests."""

from __future__ import annotations

from dataclasses import replace

from docoutline.core.outline import OutlineNode


def filter_by_depth(nodes: list[OutlineNode], max_depth: int | None = None) -> list[OutlineNode]:
    """Keep only nodes with ``depth <= max_depth``, recursively.

    Returns the input list itself when ``max_depth`` is None. Otherwise
    returns copies; a node whose children are all pruned ends up with
    ``children=None``.
    """
    if max_depth is None:
        return nodes

    result = []
    for node in nodes:
        if node.depth > max_depth:
            continue
        children = None
        if node.children:
            children = filter_by_depth(node.children, max_depth) or None
        result.append(replace(node, children=children))
    return result
