"""
Header, column type and statistics inference for delimited text.

Builds a TabularProfile from raw text in one pass over the rows.
"""

from __future__ import annotations

import logging

import numpy as np

from docoutline.tabular.config import TabularConfig
from docoutline.tabular.parser import (
    detect_delimiter,
    modal_column_count,
    parse_rows,
    split_lines,
)
from docoutline.tabular.patterns import TYPE_PATTERNS, has_letter, is_numeric
from docoutline.tabular.profile import ColumnProfile, InferredType, TabularProfile

logger = logging.getLogger(__name__)


def detect_header(rows: list[list[str]], config: TabularConfig | None = None) -> bool:
    """Decide whether the first row holds column names.

    Compares the first two rows cell by cell and accumulates:
    - numeric weight when the first cell is text and the second a number
    - length weight when the first cell is longer (and long enough)
    - letter weight when only the first cell contains letters

    Args:
        rows: Parsed rows; fewer than two means no header.
        config: Scoring weights.

    Returns:
        True when the accumulated score is positive.
    """
    cfg = config or TabularConfig()
    if len(rows) < 2:
        return False

    first_row, second_row = rows[0], rows[1]
    score = 0
    for first, second in zip(first_row, second_row):
        if not is_numeric(first) and is_numeric(second):
            score += cfg.header_numeric_weight
        if len(first) > len(second) and len(first) > cfg.header_min_length:
            score += cfg.header_length_weight
        if has_letter(first) and not has_letter(second):
            score += cfg.header_letter_weight

    return score > 0


def infer_column_type(values: list[str], config: TabularConfig | None = None) -> InferredType:
    """Infer a column type from its non-empty values.

    The first pattern (in priority order) whose hit ratio reaches the
    confidence threshold wins. Otherwise the column is mixed when more
    than one pattern matched anything, and string when at most one did.
    """
    cfg = config or TabularConfig()
    sample = values[: cfg.type_sample_size]
    if not sample:
        return InferredType.STRING

    hits = {
        pattern.inferred_type: sum(1 for value in sample if pattern.matches(value))
        for pattern in TYPE_PATTERNS
    }

    total = len(sample)
    for pattern in TYPE_PATTERNS:
        if hits[pattern.inferred_type] / total >= cfg.confidence_threshold:
            return pattern.inferred_type

    if sum(1 for count in hits.values() if count > 0) > 1:
        return InferredType.MIXED
    return InferredType.STRING


def median(values: list[float]) -> float | None:
    """Median of a list of numbers.

    Examples:
    [1, 2, 3] -> 2
    [1, 2, 3, 4] -> 2.5
    """
    if not values:
        return None
    ordered = sorted(values)
    middle = len(ordered) // 2
    if len(ordered) % 2 == 1:
        return ordered[middle]
    return (ordered[middle - 1] + ordered[middle]) / 2


def profile_column(
    name: str,
    index: int,
    data_rows: list[list[str]],
    config: TabularConfig | None = None,
) -> ColumnProfile:
    """Build the profile of one column.

    Args:
        name: Column name.
        index: Zero-based column position.
        data_rows: Rows after the header; short rows count as blank here.
        config: Inference configuration.

    Returns:
        ColumnProfile with type, nullability and statistics.
    """
    cfg = config or TabularConfig()
    cells = [row[index] if index < len(row) else "" for row in data_rows]
    values = [cell for cell in cells if cell]
    sample = values[: cfg.type_sample_size]

    inferred_type = infer_column_type(values, cfg)
    lengths = [len(value) for value in sample]

    numeric_stats: dict[str, float | None] = {}
    if inferred_type is InferredType.NUMBER:
        numbers = [float(value) for value in values if is_numeric(value)]
        if numbers:
            array = np.array(numbers)
            numeric_stats = {
                "min": float(array.min()),
                "max": float(array.max()),
                "avg": float(array.mean()),
                "median": median(numbers),
            }

    return ColumnProfile(
        name=name,
        index=index,
        inferred_type=inferred_type,
        nullable=any(not cell.strip() for cell in cells),
        unique_value_count=len(set(values)),
        sample_values=list(dict.fromkeys(values))[: cfg.sample_value_count],
        min_length=min(lengths, default=0),
        max_length=max(lengths, default=0),
        avg_length=sum(lengths) / len(lengths) if lengths else 0.0,
        **numeric_stats,
    )


def column_names(rows: list[list[str]], has_header: bool, column_count: int) -> list[str]:
    """Header values fitted to the column count, or synthetic names."""
    header = rows[0] if has_header and rows else []
    names = []
    for index in range(column_count):
        value = header[index] if index < len(header) else ""
        names.append(value or f"Column_{index + 1}")
    return names


def build_profile(content: str, config: TabularConfig | None = None) -> TabularProfile:
    """Infer the structure of delimited text.

    Strategy:
    1. Split into trimmed, non-empty lines
    2. Detect the delimiter and split every line with it
    3. Detect a header row and the modal column count
    4. Profile each column over the data rows

    Args:
        content: Raw delimited text.
        config: Inference configuration.

    Returns:
        Immutable TabularProfile.
    """
    cfg = config or TabularConfig()
    lines, empty_lines = split_lines(content)

    if not lines:
        return TabularProfile(
            total_row_count=0,
            data_row_count=0,
            column_count=0,
            delimiter=cfg.delimiter_candidates[0],
            has_header=False,
            empty_line_count=empty_lines,
        )

    delimiter = detect_delimiter(lines, cfg)
    rows = parse_rows(lines, delimiter)
    has_header = detect_header(rows, cfg)
    column_count = modal_column_count(rows)
    data_rows = rows[1:] if has_header else rows

    ragged = sum(1 for row in data_rows if len(row) != column_count)
    if ragged:
        logger.debug(
            "%d of %d rows do not have %d columns; missing cells read as blank",
            ragged,
            len(data_rows),
            column_count,
        )

    names = column_names(rows, has_header, column_count)
    columns = [
        profile_column(name, index, data_rows, cfg) for index, name in enumerate(names)
    ]

    return TabularProfile(
        total_row_count=len(lines),
        data_row_count=len(data_rows),
        column_count=column_count,
        delimiter=delimiter,
        has_header=has_header,
        columns=columns,
        empty_line_count=empty_lines,
    )
