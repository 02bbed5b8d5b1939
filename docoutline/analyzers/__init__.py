"""Format analyzers for docoutline."""

from docoutline.analyzers.base import (
    Analyzer,
    AnalyzerRegistry,
    BaseAnalyzer,
    normalize_discriminator,
)
from docoutline.analyzers.markdown import MarkdownAnalyzer
from docoutline.analyzers.python_source import PythonSourceAnalyzer
from docoutline.analyzers.structured import JsonAnalyzer, XmlAnalyzer, YamlAnalyzer

__all__ = [
    "Analyzer",
    "AnalyzerRegistry",
    "BaseAnalyzer",
    "JsonAnalyzer",
    "MarkdownAnalyzer",
    "PythonSourceAnalyzer",
    "XmlAnalyzer",
    "YamlAnalyzer",
    "normalize_discriminator",
]
