"""
docoutline - hierarchical outlines for documents, data files and code.

Typical use:

    from docoutline import DocumentOutliner

    outliner = DocumentOutliner()
    nodes = outliner.generate_from_content("# Title\n## Part", "md")
"""

from docoutline.analyzers.base import AnalyzerRegistry, BaseAnalyzer
from docoutline.core.errors import (
    MalformedInputError,
    OutlineError,
    UnsupportedFormatError,
)
from docoutline.core.outline import (
    AnalyzedElement,
    GeneratorOptions,
    OutlineNode,
    Parameter,
    Position,
)
from docoutline.generator import DocumentOutliner, default_registry
from docoutline.hierarchy import HierarchyBuilder, create_anchor, filter_by_depth, generate_id

__version__ = "0.1.0"

__all__ = [
    "AnalyzedElement",
    "AnalyzerRegistry",
    "BaseAnalyzer",
    "DocumentOutliner",
    "GeneratorOptions",
    "HierarchyBuilder",
    "MalformedInputError",
    "OutlineError",
    "OutlineNode",
    "Parameter",
    "Position",
    "UnsupportedFormatError",
    "create_anchor",
    "default_registry",
    "filter_by_depth",
    "generate_id",
]
