"""
Line splitting and delimiter detection for delimited text.

The splitter never fails: an unterminated quote simply runs to the end
of the line, and rows of unexpected width are kept as they are.
"""

from __future__ import annotations

from collections import Counter

import numpy as np

from docoutline.tabular.config import TabularConfig

QUOTE = '"'


def split_lines(content: str) -> tuple[list[str], int]:
    """Split text into trimmed, non-empty lines.

    Returns:
        Tuple of (lines, number of blank lines dropped).
    """
    raw_lines = content.split("\n")
    lines = [line.strip() for line in raw_lines]
    kept = [line for line in lines if line]
    return kept, len(raw_lines) - len(kept)


def split_fields(line: str, delimiter: str) -> list[str]:
    """Split one line into fields, honouring double-quoted sections.

    Inside quotes, ``""`` stands for a literal quote and the delimiter is
    ordinary text. Each field is whitespace-trimmed.
    """
    fields: list[str] = []
    current: list[str] = []
    in_quotes = False
    i = 0

    while i < len(line):
        char = line[i]
        if char == QUOTE:
            if in_quotes and line[i + 1 : i + 2] == QUOTE:
                current.append(QUOTE)
                i += 2
                continue
            in_quotes = not in_quotes
        elif char == delimiter and not in_quotes:
            fields.append("".join(current).strip())
            current = []
        else:
            current.append(char)
        i += 1

    fields.append("".join(current).strip())
    return fields


def score_delimiter(lines: list[str], delimiter: str, config: TabularConfig) -> float:
    """Score how well a delimiter splits the sample lines.

    score = consistency * reasonableness * mean width, where consistency
    is 1 / (1 + variance) of the row widths (0 for single-column splits).
    """
    sample = lines[: config.delimiter_sample_lines]
    if not sample:
        return 0.0

    widths = np.array([len(split_fields(line, delimiter)) for line in sample], dtype=float)
    mean = float(widths.mean())
    variance = float(widths.var())

    consistency = 1.0 / (1.0 + variance) if mean > 1 else 0.0
    low, high = config.reasonable_column_range
    reasonableness = 1.0 if low <= mean <= high else config.unreasonable_column_penalty
    return consistency * reasonableness * mean


def detect_delimiter(lines: list[str], config: TabularConfig | None = None) -> str:
    """Pick the best-scoring delimiter.

    Only a strictly higher score replaces the current choice, so ties go
    to the candidate listed first. If nothing scores above zero the first
    candidate is returned.
    """
    cfg = config or TabularConfig()
    best_delimiter = cfg.delimiter_candidates[0]
    best_score = 0.0

    for delimiter in cfg.delimiter_candidates:
        score = score_delimiter(lines, delimiter, cfg)
        if score > best_score:
            best_score = score
            best_delimiter = delimiter

    return best_delimiter


def parse_rows(lines: list[str], delimiter: str) -> list[list[str]]:
    """Split every line with the chosen delimiter."""
    return [split_fields(line, delimiter) for line in lines]


def modal_column_count(rows: list[list[str]]) -> int:
    """Most common row width; ties go to the width seen first."""
    if not rows:
        return 0
    counts = Counter(len(row) for row in rows)
    best_width = 0
    best_frequency = 0
    for width, frequency in counts.items():
        if frequency > best_frequency:
            best_frequency = frequency
            best_width = width
    return best_width
