"""
Outline data model for docoutline.

Defines the node type every analyzer produces, the intermediate element
type code analyzers hand to the hierarchy builder, and the per-call
generator options.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field, replace
from typing import Any

# camelCase spellings accepted by GeneratorOptions.from_dict
_OPTION_ALIASES = {
    "maxDepth": "max_depth",
    "includeLineNumbers": "include_line_numbers",
    "fileName": "file_name",
    "includePrivate": "include_private",
    "includeComments": "include_comments",
}


@dataclass
class Position:
    """A 1-based line/column location in the source text."""

    line: int
    column: int = 1

    def to_dict(self) -> dict[str, int]:
        return {"line": self.line, "column": self.column}


@dataclass
class Parameter:
    """A single parameter of a function or method."""

    name: str
    annotation: str | None = None
    default: str | None = None
    optional: bool = False

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "annotation": self.annotation,
            "default": self.default,
            "optional": self.optional,
        }


@dataclass
class OutlineNode:
    """
    A titled, typed unit of a document outline.

    Nodes form an ordered forest. A node's ``children`` is None (not an
    empty list) when it has no descendants, so callers can distinguish
    "no children" from "explicitly empty".
    """

    title: str
    type: str
    depth: int = 1
    line: int | None = None
    column: int | None = None
    children: list[OutlineNode] | None = None
    metadata: dict[str, Any] | None = None
    id: str | None = None
    anchor: str | None = None

    def add_child(self, child: OutlineNode) -> None:
        """Append a child, creating the children list on first use."""
        if self.children is None:
            self.children = []
        self.children.append(child)

    def iter_nodes(self) -> Iterator[OutlineNode]:
        """Yield this node and all descendants in pre-order."""
        yield self
        for child in self.children or []:
            yield from child.iter_nodes()

    @property
    def is_leaf(self) -> bool:
        return not self.children

    @property
    def descendant_count(self) -> int:
        """Count all descendants (children, grandchildren, etc.)."""
        count = len(self.children or [])
        for child in self.children or []:
            count += child.descendant_count
        return count

    def to_dict(self) -> dict[str, Any]:
        """
        Convert to a JSON-friendly dictionary.

        Absent optional fields are omitted rather than written as null.
        """
        result: dict[str, Any] = {
            "title": self.title,
            "type": self.type,
            "depth": self.depth,
        }
        if self.line is not None:
            result["line"] = self.line
        if self.column is not None:
            result["column"] = self.column
        if self.id is not None:
            result["id"] = self.id
        if self.anchor is not None:
            result["anchor"] = self.anchor
        if self.metadata is not None:
            result["metadata"] = self.metadata
        if self.children is not None:
            result["children"] = [child.to_dict() for child in self.children]
        return result

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> OutlineNode:
        """Reconstruct a node (and its subtree) from ``to_dict`` output."""
        children = data.get("children")
        return cls(
            title=data["title"],
            type=data["type"],
            depth=data.get("depth", 1),
            line=data.get("line"),
            column=data.get("column"),
            children=[cls.from_dict(c) for c in children] if children is not None else None,
            metadata=data.get("metadata"),
            id=data.get("id"),
            anchor=data.get("anchor"),
        )

    def __repr__(self) -> str:
        title_preview = self.title[:40]
        child_count = len(self.children) if self.children is not None else 0
        return f"<OutlineNode {self.type} '{title_preview}' depth={self.depth} children={child_count}>"


@dataclass
class AnalyzedElement:
    """
    A flat, depth-annotated element discovered by an analyzer.

    Created by code analyzers and consumed once by
    HierarchyBuilder.elements_to_nodes.
    """

    name: str
    kind: str
    depth: int = 1
    position: Position | None = None
    visibility: str | None = None
    parameters: list[Parameter] | None = None
    docstring: str | None = None
    metadata: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class GeneratorOptions:
    """Options passed through an analysis call.

    Attributes:
        max_depth: Prune nodes deeper than this. None keeps everything.
        include_line_numbers: Attach line/column where an analyzer makes it optional.
        file_name: Name of the source file, for context only.
        include_private: Keep private/protected code members.
        include_comments: Attach docstrings and comments to metadata.
        extra: Analyzer-specific keys; ignored by the core.
    """

    max_depth: int | None = None
    include_line_numbers: bool = False
    file_name: str | None = None
    include_private: bool = True
    include_comments: bool = False
    extra: dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if self.max_depth is not None and self.max_depth < 1:
            raise ValueError(f"max_depth must be a positive integer, got {self.max_depth}")

    @classmethod
    def from_dict(cls, data: dict[str, Any] | None) -> GeneratorOptions:
        """Build options from a mapping with snake_case or camelCase keys.

        Unknown keys are kept in ``extra``.
        """
        known: dict[str, Any] = {}
        extra: dict[str, Any] = {}
        for key, value in (data or {}).items():
            name = _OPTION_ALIASES.get(key, key)
            if name in ("max_depth", "include_line_numbers", "file_name",
                        "include_private", "include_comments"):
                known[name] = value
            else:
                extra[key] = value
        return cls(**known, extra=extra)

    def with_file_name(self, file_name: str) -> GeneratorOptions:
        """Return a copy with ``file_name`` set."""
        return replace(self, file_name=file_name)
