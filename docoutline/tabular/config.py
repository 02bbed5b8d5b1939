"""Tunable thresholds for tabular structure inference."""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_DELIMITERS: tuple[str, ...] = (",", ";", "\t", "|", ":")
DEFAULT_CONFIDENCE_THRESHOLD = 0.8


@dataclass(frozen=True)
class TabularConfig:
    """Configuration for delimiter, header and column type inference.

    Attributes:
        delimiter_candidates: Delimiters to try, in preference order.
        delimiter_sample_lines: Leading lines scored per candidate.
        reasonable_column_range: Mean column counts that score in full.
        unreasonable_column_penalty: Score factor outside that range.
        confidence_threshold: Minimum hit ratio for a column type.
        type_sample_size: Non-empty values sampled per column.
        sample_value_count: Distinct sample values kept per column.
        header_numeric_weight: Score when a header cell is text over a number.
        header_length_weight: Score when a header cell is the longer one.
        header_letter_weight: Score when only the header cell has letters.
        header_min_length: Header cells must exceed this to earn the length score.
    """

    delimiter_candidates: tuple[str, ...] = DEFAULT_DELIMITERS
    delimiter_sample_lines: int = 10
    reasonable_column_range: tuple[int, int] = (2, 50)
    unreasonable_column_penalty: float = 0.5
    confidence_threshold: float = DEFAULT_CONFIDENCE_THRESHOLD
    type_sample_size: int = 100
    sample_value_count: int = 5
    header_numeric_weight: int = 2
    header_length_weight: int = 1
    header_letter_weight: int = 1
    header_min_length: int = 3

    def __post_init__(self) -> None:
        if not self.delimiter_candidates:
            raise ValueError("delimiter_candidates must not be empty")
        if not 0.0 < self.confidence_threshold <= 1.0:
            raise ValueError("confidence_threshold must be in (0, 1]")
