"""
Identifier and anchor derivation for outline nodes.

Ids are deterministic slugs and are not checked for collisions:
two headings with the same title, type and line get the same id.
"""

from __future__ import annotations

import re

_ID_UNSAFE_RE = re.compile(r"[^a-z0-9]")
_ANCHOR_STRIP_RE = re.compile(r"[^\w\s-]", re.ASCII)
_WHITESPACE_RE = re.compile(r"\s+")
_HYPHEN_RUN_RE = re.compile(r"-+")


def generate_id(title: str, node_type: str, line: int | None = None) -> str:
    """Build a node id from its title, type and optional line number.

    Examples:
    ("Getting Started", "heading", 3) -> "heading-getting-started-3"
    ("user_id", "property") -> "property-user-id"
    """
    clean_title = _ID_UNSAFE_RE.sub("-", title.lower())
    suffix = f"-{line}" if line is not None else ""
    return f"{node_type}-{clean_title}{suffix}"


def create_anchor(title: str) -> str:
    """Build a navigation anchor from a title.

    Examples:
    "Getting Started!" -> "getting-started"
    "  API -- Reference  " -> "api-reference"
    """
    anchor = _ANCHOR_STRIP_RE.sub("", title.lower())
    anchor = _WHITESPACE_RE.sub("-", anchor)
    anchor = _HYPHEN_RUN_RE.sub("-", anchor)
    return anchor.strip("-")
