"""
Hierarchy module - nesting, filtering and naming of outline nodes.

Every analyzer relies on this module so that all formats share one
nesting rule and one id scheme.
"""

from docoutline.hierarchy.builder import HierarchyBuilder
from docoutline.hierarchy.filters import filter_by_depth
from docoutline.hierarchy.identifiers import create_anchor, generate_id
from docoutline.hierarchy.tree import find_node, get_statistics, iter_forest, max_depth

__all__ = [
    "HierarchyBuilder",
    "create_anchor",
    "filter_by_depth",
    "find_node",
    "generate_id",
    "get_statistics",
    "iter_forest",
    "max_depth",
]
