"""
Python source analyzer.

Walks the module AST and emits a flat list of depth-annotated elements
(classes, functions, methods, class attributes). The hierarchy builder
nests them the same way it nests Markdown headings.
"""

from __future__ import annotations

import ast
import logging
from collections.abc import Iterator
from typing import Any, ClassVar

from docoutline.analyzers.base import BaseAnalyzer
from docoutline.core.errors import MalformedInputError
from docoutline.core.outline import (
    AnalyzedElement,
    GeneratorOptions,
    OutlineNode,
    Parameter,
    Position,
)
from docoutline.hierarchy.builder import HierarchyBuilder

logger = logging.getLogger(__name__)

_IMPLICIT_FIRST_ARGS = ("self", "cls")

FunctionNode = ast.FunctionDef | ast.AsyncFunctionDef


def get_visibility(name: str) -> str:
    """Visibility implied by Python naming conventions.

    Examples:
    "__init__" -> "public"
    "__secret" -> "private"
    "_helper" -> "protected"
    "run" -> "public"
    """
    if name.startswith("__") and name.endswith("__"):
        return "public"
    if name.startswith("__"):
        return "private"
    if name.startswith("_"):
        return "protected"
    return "public"


def _unparse(node: ast.AST | None) -> str | None:
    return ast.unparse(node) if node is not None else None


def extract_parameters(args: ast.arguments) -> list[Parameter]:
    """Describe a function's parameters, leaving out self and cls."""
    positional = [*args.posonlyargs, *args.args]
    # defaults line up with the last positional parameters
    padding: list[ast.expr | None] = [None] * (len(positional) - len(args.defaults))
    defaults = [*padding, *args.defaults]

    params: list[Parameter] = []
    for arg, default in zip(positional, defaults):
        params.append(
            Parameter(
                name=arg.arg,
                annotation=_unparse(arg.annotation),
                default=_unparse(default),
                optional=default is not None,
            )
        )
    if args.vararg:
        params.append(Parameter(name=args.vararg.arg, annotation=_unparse(args.vararg.annotation), optional=True))
    for arg, default in zip(args.kwonlyargs, args.kw_defaults):
        params.append(
            Parameter(
                name=arg.arg,
                annotation=_unparse(arg.annotation),
                default=_unparse(default),
                optional=default is not None,
            )
        )
    if args.kwarg:
        params.append(Parameter(name=args.kwarg.arg, annotation=_unparse(args.kwarg.annotation), optional=True))

    return [p for p in params if p.name not in _IMPLICIT_FIRST_ARGS]


def _first_docstring_line(node: ast.AST) -> str | None:
    docstring = ast.get_docstring(node)  # type: ignore[arg-type]
    if not docstring:
        return None
    return docstring.strip().splitlines()[0]


def _position(node: ast.stmt) -> Position:
    return Position(line=node.lineno, column=node.col_offset + 1)


class PythonSourceAnalyzer(BaseAnalyzer):
    """
    Analyze Python modules.

    Extracts:
    - Classes (with bases and decorators)
    - Functions and methods (parameters, return annotation, async/static flags)
    - Class-level attributes, as "property" elements
    """

    SUPPORTED_DISCRIMINATORS: ClassVar[tuple[str, ...]] = ("py", "pyi")
    ANALYZER_NAME: ClassVar[str] = "python"

    def analyze(self, content: str, options: GeneratorOptions | None = None) -> list[OutlineNode]:
        opts = options or GeneratorOptions()
        elements = self.extract_elements(content)
        return HierarchyBuilder.assemble(elements, opts)

    def extract_elements(self, content: str) -> list[AnalyzedElement]:
        """Parse the module and list its elements in source order.

        Raises:
            MalformedInputError: If the module has a syntax error
        """
        try:
            tree = ast.parse(content)
        except SyntaxError as exc:
            raise MalformedInputError("python", f"{exc.msg} (line {exc.lineno})") from exc
        except RecursionError as exc:
            raise MalformedInputError("python", "expressions are nested too deeply to parse") from exc

        return list(self._walk(tree.body, depth=1, in_class=False))

    def _walk(self, body: list[ast.stmt], depth: int, in_class: bool) -> Iterator[AnalyzedElement]:
        for stmt in body:
            if isinstance(stmt, ast.ClassDef):
                yield self._class_element(stmt, depth)
                yield from self._walk(stmt.body, depth + 1, in_class=True)
            elif isinstance(stmt, (ast.FunctionDef, ast.AsyncFunctionDef)):
                yield self._function_element(stmt, depth, in_class)
                yield from self._walk(stmt.body, depth + 1, in_class=False)
            elif in_class and isinstance(stmt, (ast.Assign, ast.AnnAssign)):
                yield from self._attribute_elements(stmt, depth)

    def _class_element(self, node: ast.ClassDef, depth: int) -> AnalyzedElement:
        metadata: dict[str, Any] = {}
        bases = [ast.unparse(base) for base in node.bases]
        if bases:
            metadata["bases"] = bases
        decorators = [ast.unparse(d) for d in node.decorator_list]
        if decorators:
            metadata["decorators"] = decorators

        return AnalyzedElement(
            name=node.name,
            kind="class",
            depth=depth,
            position=_position(node),
            visibility=get_visibility(node.name),
            docstring=_first_docstring_line(node),
            metadata=metadata,
        )

    def _function_element(self, node: FunctionNode, depth: int, in_class: bool) -> AnalyzedElement:
        decorators = [ast.unparse(d) for d in node.decorator_list]
        metadata: dict[str, Any] = {}
        if decorators:
            metadata["decorators"] = decorators
        if isinstance(node, ast.AsyncFunctionDef):
            metadata["is_async"] = True
        if "staticmethod" in decorators:
            metadata["is_static"] = True
        if any(d.endswith("abstractmethod") for d in decorators):
            metadata["is_abstract"] = True
        if node.returns is not None:
            metadata["return_type"] = ast.unparse(node.returns)

        return AnalyzedElement(
            name=node.name,
            kind="method" if in_class else "function",
            depth=depth,
            position=_position(node),
            visibility=get_visibility(node.name),
            parameters=extract_parameters(node.args),
            docstring=_first_docstring_line(node),
            metadata=metadata,
        )

    def _attribute_elements(self, node: ast.Assign | ast.AnnAssign, depth: int) -> Iterator[AnalyzedElement]:
        targets = node.targets if isinstance(node, ast.Assign) else [node.target]
        for target in targets:
            if not isinstance(target, ast.Name):
                logger.debug("Skipping non-name assignment target at line %d", node.lineno)
                continue
            metadata: dict[str, Any] = {}
            if isinstance(node, ast.AnnAssign):
                metadata["annotation"] = ast.unparse(node.annotation)
            yield AnalyzedElement(
                name=target.id,
                kind="property",
                depth=depth,
                position=_position(node),
                visibility=get_visibility(target.id),
                metadata=metadata,
            )
