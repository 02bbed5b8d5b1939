"""
Tabular module - structural inference for delimited text.

Detects the delimiter and header row, then infers a type and summary
statistics for every column.
"""

from docoutline.tabular.analyzer import TabularAnalyzer, profile_to_outline
from docoutline.tabular.config import TabularConfig
from docoutline.tabular.inference import (
    build_profile,
    detect_header,
    infer_column_type,
    median,
)
from docoutline.tabular.parser import detect_delimiter, split_fields
from docoutline.tabular.profile import ColumnProfile, InferredType, TabularProfile

__all__ = [
    "ColumnProfile",
    "InferredType",
    "TabularAnalyzer",
    "TabularConfig",
    "TabularProfile",
    "build_profile",
    "detect_delimiter",
    "detect_header",
    "infer_column_type",
    "median",
    "profile_to_outline",
    "split_fields",
]
