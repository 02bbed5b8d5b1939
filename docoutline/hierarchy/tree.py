"""
Forest-level helpers: traversal, lookup and statistics.
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterator
from typing import Any

from docoutline.core.outline import OutlineNode


def iter_forest(nodes: list[OutlineNode]) -> Iterator[OutlineNode]:
    """Yield every node of a forest in pre-order."""
    for node in nodes:
        yield from node.iter_nodes()


def find_node(nodes: list[OutlineNode], node_id: str) -> OutlineNode | None:
    """Find the first node with the given id."""
    for node in iter_forest(nodes):
        if node.id == node_id:
            return node
    return None


def max_depth(nodes: list[OutlineNode]) -> int:
    """Deepest ``depth`` value in the forest (0 when empty)."""
    return max((node.depth for node in iter_forest(nodes)), default=0)


def get_statistics(nodes: list[OutlineNode]) -> dict[str, Any]:
    """Get forest statistics for reporting."""
    all_nodes = list(iter_forest(nodes))
    return {
        "total_nodes": len(all_nodes),
        "top_level_nodes": len(nodes),
        "leaf_nodes": sum(1 for n in all_nodes if n.is_leaf),
        "max_depth": max_depth(nodes),
        "type_distribution": dict(Counter(n.type for n in all_nodes)),
        "depth_distribution": dict(Counter(n.depth for n in all_nodes)),
    }
