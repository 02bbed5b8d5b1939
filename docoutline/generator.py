"""
Outline generation entry point.

DocumentOutliner dispatches content to the analyzer registered for its
format discriminator and returns the resulting outline forest.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from docoutline.analyzers.base import Analyzer, AnalyzerRegistry
from docoutline.analyzers.markdown import MarkdownAnalyzer
from docoutline.analyzers.python_source import PythonSourceAnalyzer
from docoutline.analyzers.structured import JsonAnalyzer, XmlAnalyzer, YamlAnalyzer
from docoutline.core.outline import GeneratorOptions, OutlineNode
from docoutline.tabular.analyzer import TabularAnalyzer

logger = logging.getLogger(__name__)


def default_registry() -> AnalyzerRegistry:
    """Create a new registry holding the built-in analyzers."""
    registry = AnalyzerRegistry()
    for analyzer in (
        MarkdownAnalyzer(),
        JsonAnalyzer(),
        YamlAnalyzer(),
        XmlAnalyzer(),
        TabularAnalyzer(),
        PythonSourceAnalyzer(),
    ):
        registry.register_analyzer(analyzer)
    return registry


def _coerce_options(options: GeneratorOptions | dict[str, Any] | None) -> GeneratorOptions:
    if options is None:
        return GeneratorOptions()
    if isinstance(options, GeneratorOptions):
        return options
    return GeneratorOptions.from_dict(options)


class DocumentOutliner:
    """
    Generate outlines for documents and source files.

    Usage:
        outliner = DocumentOutliner()
        nodes = outliner.generate_from_content(text, "md", {"maxDepth": 2})
    """

    def __init__(self, registry: AnalyzerRegistry | None = None) -> None:
        self.registry = registry if registry is not None else default_registry()

    def register_analyzer(self, discriminator: str, analyzer: Analyzer) -> None:
        """Register a custom analyzer for a format discriminator."""
        self.registry.register(discriminator, analyzer)

    def generate_from_content(
        self,
        content: str,
        discriminator: str,
        options: GeneratorOptions | dict[str, Any] | None = None,
    ) -> list[OutlineNode]:
        """
        Generate an outline from a content string.

        Raises:
            UnsupportedFormatError: If no analyzer handles the discriminator
            MalformedInputError: If the document cannot be parsed
        """
        analyzer = self.registry.get(discriminator)
        opts = _coerce_options(options)
        nodes = analyzer.analyze(content, opts)
        logger.info(
            "Analyzed %s content with %s: %d top-level nodes",
            discriminator,
            type(analyzer).__name__,
            len(nodes),
        )
        return nodes

    def generate_from_file(
        self,
        path: str | Path,
        options: GeneratorOptions | dict[str, Any] | None = None,
    ) -> list[OutlineNode]:
        """
        Generate an outline from a UTF-8 text file.

        The discriminator is the file extension. Errors reading the file
        propagate unchanged.
        """
        file_path = Path(path)
        discriminator = file_path.suffix.lstrip(".").lower()
        # check support before touching the file system
        analyzer_options = _coerce_options(options).with_file_name(file_path.name)
        self.registry.get(discriminator)

        content = file_path.read_text(encoding="utf-8")
        return self.generate_from_content(content, discriminator, analyzer_options)

    def supported_formats(self) -> set[str]:
        return self.registry.list_supported()

    def is_supported(self, discriminator: str) -> bool:
        return self.registry.is_supported(discriminator)
