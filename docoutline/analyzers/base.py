"""
Base analyzer class and registry for format analyzers.

Each analyzer turns the raw text of one or more formats into an outline
forest. Analyzers are looked up in an AnalyzerRegistry owned by the
caller, keyed by a format discriminator (usually the file extension).
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any, ClassVar, Protocol

from docoutline.core.errors import UnsupportedFormatError
from docoutline.core.outline import GeneratorOptions, OutlineNode, Position
from docoutline.hierarchy.identifiers import create_anchor, generate_id

logger = logging.getLogger(__name__)


class Analyzer(Protocol):
    """Anything the registry can dispatch to."""

    def analyze(self, content: str, options: GeneratorOptions | None = None) -> list[OutlineNode]:
        ...

    def supported_discriminators(self) -> set[str]:
        ...


class BaseAnalyzer(ABC):
    """
    Abstract base class for format analyzers.

    Each analyzer is responsible for:
    1. Declaring the format discriminators it understands
    2. Parsing the content (raising MalformedInputError when it cannot)
    3. Producing outline nodes, nested and depth-filtered

    Analyzers hold no per-call state, so one instance can serve any
    number of calls.
    """

    SUPPORTED_DISCRIMINATORS: ClassVar[tuple[str, ...]] = ()
    ANALYZER_NAME: ClassVar[str] = "base"

    @abstractmethod
    def analyze(self, content: str, options: GeneratorOptions | None = None) -> list[OutlineNode]:
        """
        Analyze content and return its outline.

        Args:
            content: Raw document text
            options: Generator options

        Returns:
            Ordered forest of outline nodes

        Raises:
            MalformedInputError: If the document cannot be parsed
        """

    def supported_discriminators(self) -> set[str]:
        """Format discriminators this analyzer handles."""
        return set(self.SUPPORTED_DISCRIMINATORS)

    @staticmethod
    def create_node(
        title: str,
        node_type: str,
        depth: int,
        position: Position | None = None,
        metadata: dict[str, Any] | None = None,
    ) -> OutlineNode:
        """Create a childless node, dropping None metadata values."""
        node = OutlineNode(title=title, type=node_type, depth=depth)
        if position:
            node.line = position.line
            node.column = position.column
        if metadata:
            cleaned = {key: value for key, value in metadata.items() if value is not None}
            node.metadata = cleaned or None
        return node

    @staticmethod
    def generate_id(title: str, node_type: str, line: int | None = None) -> str:
        return generate_id(title, node_type, line)

    @staticmethod
    def create_anchor(title: str) -> str:
        return create_anchor(title)


def normalize_discriminator(discriminator: str) -> str:
    """Lowercase a discriminator and strip a leading dot ('.MD' -> 'md')."""
    return discriminator.strip().lower().lstrip(".")


class AnalyzerRegistry:
    """
    Registry of analyzers keyed by format discriminator.

    The registry is an ordinary object: callers create one (see
    default_registry), register analyzers up front and then only read
    from it while analyses run.
    """

    def __init__(self) -> None:
        self._analyzers: dict[str, Analyzer] = {}

    def register(self, discriminator: str, analyzer: Analyzer) -> None:
        """Register an analyzer for one discriminator, replacing any previous one."""
        key = normalize_discriminator(discriminator)
        previous = self._analyzers.get(key)
        if previous is not None and previous is not analyzer:
            logger.info(
                "Replacing analyzer for '%s': %s -> %s",
                key,
                type(previous).__name__,
                type(analyzer).__name__,
            )
        self._analyzers[key] = analyzer

    def register_analyzer(self, analyzer: Analyzer) -> Analyzer:
        """Register an analyzer under every discriminator it supports."""
        for discriminator in sorted(analyzer.supported_discriminators()):
            self.register(discriminator, analyzer)
        return analyzer

    def get(self, discriminator: str) -> Analyzer:
        """
        Get the analyzer for a discriminator.

        Raises:
            UnsupportedFormatError: If nothing is registered for it
        """
        analyzer = self._analyzers.get(normalize_discriminator(discriminator))
        if analyzer is None:
            raise UnsupportedFormatError(discriminator, supported=list(self._analyzers))
        return analyzer

    def is_supported(self, discriminator: str) -> bool:
        return normalize_discriminator(discriminator) in self._analyzers

    def list_supported(self) -> set[str]:
        """Get all registered discriminators."""
        return set(self._analyzers)

    def __len__(self) -> int:
        return len(self._analyzers)

    def __contains__(self, discriminator: object) -> bool:
        return isinstance(discriminator, str) and self.is_supported(discriminator)
