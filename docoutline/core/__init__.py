"""Core data models and exceptions for docoutline."""

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

__all__ = [
    "AnalyzedElement",
    "GeneratorOptions",
    "MalformedInputError",
    "OutlineError",
    "OutlineNode",
    "Parameter",
    "Position",
    "UnsupportedFormatError",
]
