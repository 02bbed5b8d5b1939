"""
Analyzers for tree-structured data: JSON, YAML and XML.

These formats arrive already nested, so the outline is a direct
projection of the parsed tree. A document that fails to parse is a
whole-call failure (MalformedInputError).
"""

from __future__ import annotations

import datetime as dt
import json
import logging
import xml.etree.ElementTree as ET
from typing import Any, ClassVar

import yaml

from docoutline.analyzers.base import BaseAnalyzer
from docoutline.core.errors import MalformedInputError
from docoutline.core.outline import GeneratorOptions, OutlineNode
from docoutline.hierarchy.filters import filter_by_depth

# Repeated XML elements are summarised from their first few occurrences.
XML_ARRAY_PREVIEW = 3

logger = logging.getLogger(__name__)

TOO_DEEP = "document is nested too deeply to outline"


def _join_path(parent_path: str, key: str) -> str:
    return f"{parent_path}.{key}" if parent_path else key


# ===================================================================
# JSON
# ===================================================================


def json_type(value: Any) -> str:
    """JSON type name of a decoded value."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, list):
        return "array"
    return "object"


def infer_schema(data: Any) -> dict[str, Any]:
    """Infer a JSON-Schema-like description of a decoded document.

    Arrays are described by their first item. An object property is
    required when its value is not null.
    """
    if isinstance(data, list):
        return {
            "type": "array",
            "items": infer_schema(data[0]) if data else {"type": "any"},
        }

    if isinstance(data, dict):
        properties = {key: infer_schema(value) for key, value in data.items()}
        required = [key for key, value in data.items() if value is not None]
        schema: dict[str, Any] = {"type": "object", "properties": properties}
        if required:
            schema["required"] = required
        return schema

    return {"type": json_type(data)}


class JsonAnalyzer(BaseAnalyzer):
    """Outline the schema of a JSON document as nested properties."""

    SUPPORTED_DISCRIMINATORS: ClassVar[tuple[str, ...]] = ("json",)
    ANALYZER_NAME: ClassVar[str] = "json"

    def analyze(self, content: str, options: GeneratorOptions | None = None) -> list[OutlineNode]:
        opts = options or GeneratorOptions()
        try:
            data = json.loads(content)
            nodes = self._schema_to_outline(infer_schema(data), depth=1, parent_path="")
        except json.JSONDecodeError as exc:
            raise MalformedInputError("json", str(exc)) from exc
        except RecursionError as exc:
            raise MalformedInputError("json", TOO_DEEP) from exc

        return filter_by_depth(nodes, opts.max_depth)

    def _schema_to_outline(
        self, schema: dict[str, Any], depth: int, parent_path: str
    ) -> list[OutlineNode]:
        if schema["type"] == "array":
            items = schema["items"]
            if items["type"] == "object":
                return self._schema_to_outline(items, depth, f"{parent_path}[]")
            return []

        if schema["type"] != "object":
            return []

        nodes = []
        required = schema.get("required", [])
        for key, prop in schema["properties"].items():
            path = _join_path(parent_path, key)
            node = self.create_node(
                key,
                "property",
                depth,
                metadata={
                    "data_type": prop["type"],
                    "required": key in required,
                    "path": path,
                },
            )
            node.id = self.generate_id(key, "property")

            if prop["type"] == "object":
                node.children = self._schema_to_outline(prop, depth + 1, path) or None
            elif prop["type"] == "array" and prop["items"]["type"] == "object":
                node.children = self._schema_to_outline(prop["items"], depth + 1, f"{path}[]") or None

            nodes.append(node)
        return nodes


# ===================================================================
# YAML
# ===================================================================


def yaml_type(value: Any) -> str:
    """Type name of a value loaded by PyYAML."""
    if value is None:
        return "null"
    if isinstance(value, list):
        return "array"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, (dt.date, dt.datetime)):
        return "date"
    if isinstance(value, dict):
        return "object"
    return "unknown"


def _yaml_scalar(value: Any) -> Any:
    if isinstance(value, (dt.date, dt.datetime)):
        return value.isoformat()
    if isinstance(value, bytes):
        return value.decode("utf-8", errors="replace")
    return value


class YamlAnalyzer(BaseAnalyzer):
    """Outline a YAML document: mapping keys and sequence indexes become nodes."""

    SUPPORTED_DISCRIMINATORS: ClassVar[tuple[str, ...]] = ("yaml", "yml")
    ANALYZER_NAME: ClassVar[str] = "yaml"

    def analyze(self, content: str, options: GeneratorOptions | None = None) -> list[OutlineNode]:
        opts = options or GeneratorOptions()
        try:
            data = yaml.safe_load(content)
            nodes = self._to_outline(data, depth=1, parent_path="", open_ids=frozenset())
        except yaml.YAMLError as exc:
            raise MalformedInputError("yaml", str(exc)) from exc
        except RecursionError as exc:
            raise MalformedInputError("yaml", TOO_DEEP) from exc

        return filter_by_depth(nodes, opts.max_depth)

    def _to_outline(
        self, data: Any, depth: int, parent_path: str, open_ids: frozenset[int]
    ) -> list[OutlineNode]:
        """Project a mapping or sequence.

        ``open_ids`` holds the containers on the current path; an alias
        that points back into it is left without children.
        """
        open_ids = open_ids | {id(data)}
        if isinstance(data, dict):
            entries = [(str(key), value) for key, value in data.items()]
        elif isinstance(data, list):
            entries = [(str(index), value) for index, value in enumerate(data)]
        else:
            return []

        nodes = []
        for key, value in entries:
            path = _join_path(parent_path, key)
            is_array = isinstance(value, list)
            has_children = isinstance(value, (dict, list))
            node_type = "array" if is_array else "object" if has_children else yaml_type(value)

            node = self.create_node(
                key,
                node_type,
                depth,
                metadata={
                    "path": path,
                    "data_type": yaml_type(value),
                    "is_array": is_array,
                    "value": None if has_children else _yaml_scalar(value),
                },
            )
            node.id = self.generate_id(key, node_type)
            if has_children and id(value) in open_ids:
                logger.debug("Skipping recursive alias at %s", path)
            elif has_children:
                node.children = self._to_outline(value, depth + 1, path, open_ids) or None
            nodes.append(node)
        return nodes


# ===================================================================
# XML
# ===================================================================


def local_name(tag: str) -> str:
    """Strip a '{namespace}' prefix from an ElementTree tag."""
    return tag.rsplit("}", 1)[-1] if tag.startswith("{") else tag


def _is_structured(element: ET.Element) -> bool:
    return len(element) > 0 or bool(element.attrib)


class XmlAnalyzer(BaseAnalyzer):
    """
    Outline an XML document by element name.

    Sibling elements sharing a tag are grouped into one "array" node
    whose children come from the first few occurrences.
    """

    SUPPORTED_DISCRIMINATORS: ClassVar[tuple[str, ...]] = ("xml",)
    ANALYZER_NAME: ClassVar[str] = "xml"

    def analyze(self, content: str, options: GeneratorOptions | None = None) -> list[OutlineNode]:
        opts = options or GeneratorOptions()
        try:
            root = ET.fromstring(content)
            nodes = self._elements_to_outline([root], 1, "")
        except ET.ParseError as exc:
            raise MalformedInputError("xml", str(exc)) from exc
        except RecursionError as exc:
            raise MalformedInputError("xml", TOO_DEEP) from exc

        return filter_by_depth(nodes, opts.max_depth)

    def _elements_to_outline(
        self, elements: list[ET.Element], depth: int, parent_path: str
    ) -> list[OutlineNode]:
        groups: dict[str, list[ET.Element]] = {}
        for element in elements:
            if not isinstance(element.tag, str):
                continue  # comments and processing instructions
            groups.setdefault(local_name(element.tag), []).append(element)

        nodes = []
        for tag, group in groups.items():
            path = _join_path(parent_path, tag)
            if len(group) > 1:
                node = self._array_node(tag, group, depth, path)
            else:
                node = self._element_node(tag, group[0], depth, path)
            node.id = self.generate_id(tag, node.type)
            nodes.append(node)
        return nodes

    def _array_node(
        self, tag: str, group: list[ET.Element], depth: int, path: str
    ) -> OutlineNode:
        node = self.create_node(
            tag,
            "array",
            depth,
            metadata={"path": path, "has_attributes": False, "is_array": True, "count": len(group)},
        )
        for index, item in enumerate(group[:XML_ARRAY_PREVIEW]):
            if _is_structured(item):
                for child in self._elements_to_outline(list(item), depth + 1, f"{path}[{index}]"):
                    node.add_child(child)
        return node

    def _element_node(self, tag: str, element: ET.Element, depth: int, path: str) -> OutlineNode:
        if _is_structured(element):
            node = self.create_node(
                tag,
                "element",
                depth,
                metadata={"path": path, "has_attributes": bool(element.attrib), "is_array": False},
            )
            node.children = self._elements_to_outline(list(element), depth + 1, path) or None
            return node

        return self.create_node(
            tag,
            "text",
            depth,
            metadata={
                "path": path,
                "has_attributes": False,
                "is_array": False,
                "text_content": (element.text or "").strip(),
            },
        )
