"""Result dataclasses for tabular structure inference."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class InferredType(str, Enum):
    """Column types tabular inference can assign."""

    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    DATE = "date"
    EMAIL = "email"
    URL = "url"
    PHONE = "phone"
    MIXED = "mixed"


@dataclass(frozen=True)
class ColumnProfile:
    """Inferred structure of one column.

    Args:
        name: Header value, or a synthetic ``Column_N`` name.
        index: Zero-based column position.
        inferred_type: Type assigned from the sampled values.
        nullable: Whether any data row is missing or blank here.
        unique_value_count: Distinct non-empty raw values.
        sample_values: Up to five distinct values, first-seen order.
        min_length: Shortest sampled value.
        max_length: Longest sampled value.
        avg_length: Mean sampled value length.
        min: Smallest numeric value (number columns only).
        max: Largest numeric value (number columns only).
        avg: Mean numeric value (number columns only).
        median: Median numeric value (number columns only).
    """

    name: str
    index: int
    inferred_type: InferredType
    nullable: bool
    unique_value_count: int
    sample_values: list[str] = field(default_factory=list)
    min_length: int = 0
    max_length: int = 0
    avg_length: float = 0.0
    min: float | None = None
    max: float | None = None
    avg: float | None = None
    median: float | None = None

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary."""
        result: dict[str, Any] = {
            "name": self.name,
            "index": self.index,
            "inferred_type": self.inferred_type.value,
            "nullable": self.nullable,
            "unique_value_count": self.unique_value_count,
            "sample_values": list(self.sample_values),
            "min_length": self.min_length,
            "max_length": self.max_length,
            "avg_length": self.avg_length,
        }
        if self.inferred_type is InferredType.NUMBER:
            result.update(min=self.min, max=self.max, avg=self.avg, median=self.median)
        return result


@dataclass(frozen=True)
class TabularProfile:
    """Inferred structure of a whole delimited-text document.

    Args:
        total_row_count: Non-empty lines, header included.
        data_row_count: Rows after the header.
        column_count: Modal row length.
        delimiter: Detected field delimiter.
        has_header: Whether the first row holds column names.
        columns: Per-column profiles in column order.
        empty_line_count: Blank lines dropped before analysis.
    """

    total_row_count: int
    data_row_count: int
    column_count: int
    delimiter: str
    has_header: bool
    columns: list[ColumnProfile] = field(default_factory=list)
    empty_line_count: int = 0

    def get_column(self, name: str) -> ColumnProfile | None:
        """Find a column by name."""
        for column in self.columns:
            if column.name == name:
                return column
        return None

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary."""
        return {
            "total_row_count": self.total_row_count,
            "data_row_count": self.data_row_count,
            "column_count": self.column_count,
            "delimiter": self.delimiter,
            "has_header": self.has_header,
            "empty_line_count": self.empty_line_count,
            "columns": [c.to_dict() for c in self.columns],
        }
