"""Command line interface: print the outline of a file.

Run: docoutline README.md --max-depth 2
     docoutline data.csv --format json -o outline.json
     docoutline --list-formats
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any

from docoutline.core.errors import OutlineError
from docoutline.core.outline import GeneratorOptions, OutlineNode
from docoutline.generator import DocumentOutliner


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="docoutline",
        description="Generate outline structures for documents and code files",
    )
    parser.add_argument("file", nargs="?", help="file to analyze")
    parser.add_argument(
        "-d", "--max-depth", type=int, default=None, help="maximum depth to include"
    )
    parser.add_argument(
        "-l", "--line-numbers", action="store_true", help="include line numbers in output"
    )
    parser.add_argument(
        "-p",
        "--exclude-private",
        action="store_true",
        help="leave out private and protected members (code files)",
    )
    parser.add_argument(
        "-c", "--include-comments", action="store_true", help="include docstrings"
    )
    parser.add_argument(
        "-f", "--format", choices=("json", "tree"), default="tree", help="output format"
    )
    parser.add_argument("-o", "--output", help="output file (default: stdout)")
    parser.add_argument(
        "--list-formats", action="store_true", help="list supported format discriminators"
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    return parser


def format_metadata(metadata: dict[str, Any]) -> str:
    """Summarise the metadata worth showing next to a tree entry."""
    parts: list[str] = []
    visibility = metadata.get("visibility")
    if visibility and visibility != "public":
        parts.append(visibility)
    if metadata.get("is_static"):
        parts.append("static")
    if metadata.get("is_abstract"):
        parts.append("abstract")
    if metadata.get("is_async"):
        parts.append("async")
    parameters = metadata.get("parameters")
    if parameters:
        parts.append("params: " + ", ".join(p["name"] for p in parameters))
    if metadata.get("data_type"):
        parts.append(f"type: {metadata['data_type']}")
    return f" ({', '.join(parts)})" if parts else ""


def format_as_tree(nodes: list[OutlineNode], indent: int = 0) -> str:
    """Render nodes as an indented tree, one line per node."""
    lines: list[str] = []
    prefix = "  " * indent
    for node in nodes:
        line = f" (line {node.line})" if node.line is not None else ""
        meta = format_metadata(node.metadata) if node.metadata else ""
        lines.append(f"{prefix}├─ {node.title} [{node.type}]{line}{meta}")
        if node.children:
            lines.append(format_as_tree(node.children, indent + 1))
    return "\n".join(lines)


def render(nodes: list[OutlineNode], output_format: str) -> str:
    if output_format == "json":
        return json.dumps([node.to_dict() for node in nodes], indent=2, ensure_ascii=False, default=str)
    return format_as_tree(nodes)


def main(argv: list[str] | None = None) -> int:
    """Run the CLI.

    Returns:
        Exit code (0 for success, 1 for failure).
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s [%(name)s] %(levelname)s: %(message)s",
    )

    outliner = DocumentOutliner()

    if args.list_formats:
        print("Supported formats:")
        for discriminator in sorted(outliner.supported_formats()):
            print(f"  .{discriminator}")
        return 0

    if not args.file:
        parser.error("a file to analyze is required")

    try:
        options = GeneratorOptions(
            max_depth=args.max_depth,
            include_line_numbers=args.line_numbers,
            include_private=not args.exclude_private,
            include_comments=args.include_comments,
        )
        nodes = outliner.generate_from_file(args.file, options)
    except (OutlineError, OSError, ValueError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    output = render(nodes, args.format)
    if args.output:
        Path(args.output).write_text(output + "\n", encoding="utf-8")
        print(f"Outline written to {args.output}")
    else:
        print(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
