"""Value pattern library for column type inference.

Each pattern classifies a single cell value. TYPE_PATTERNS lists them
in priority order: when several reach the confidence threshold, the
earliest one names the column type.
"""

from __future__ import annotations

import re
from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime
from urllib.parse import urlparse

from docoutline.tabular.profile import InferredType

EMAIL_RE = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
# Area code, then groups of digits with at least one separator between the
# last two groups so that bare integers never read as phone numbers.
PHONE_RE = re.compile(
    r"^(?:\+\d{1,3}[\s.-]?)?(?:\(\d{2,4}\)|\d{2,4})[\s.-]?\d{3,4}[\s.-]\d{3,4}$"
)
NUMERIC_RE = re.compile(r"^[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?$")
BOOLEAN_VALUES = frozenset({"true", "false", "yes", "no", "1", "0", "y", "n"})

# (shape, strptime format) pairs; a value must match both.
DATE_FORMATS: list[tuple[re.Pattern[str], str]] = [
    (re.compile(r"^\d{4}-\d{2}-\d{2}$"), "%Y-%m-%d"),
    (re.compile(r"^\d{2}/\d{2}/\d{4}$"), "%m/%d/%Y"),
    (re.compile(r"^\d{2}-\d{2}-\d{4}$"), "%m-%d-%Y"),
    (re.compile(r"^\d{4}/\d{2}/\d{2}$"), "%Y/%m/%d"),
    (re.compile(r"^\d{2}\.\d{2}\.\d{4}$"), "%d.%m.%Y"),
]
_MIN_DATE_LENGTH = 6


def is_email(value: str) -> bool:
    return EMAIL_RE.match(value.strip()) is not None


def is_url(value: str) -> bool:
    try:
        parsed = urlparse(value.strip())
    except ValueError:
        return False
    return bool(parsed.scheme and parsed.netloc)


def is_phone(value: str) -> bool:
    return PHONE_RE.match(value.strip()) is not None


def is_boolean(value: str) -> bool:
    return value.strip().lower() in BOOLEAN_VALUES


def is_numeric(value: str) -> bool:
    """True for signed decimal numbers, optionally with an exponent."""
    return NUMERIC_RE.match(value.strip()) is not None


def is_date(value: str) -> bool:
    """True for a recognised date shape that is also a real calendar date."""
    text = value.strip()
    if len(text) < _MIN_DATE_LENGTH:
        return False
    for shape, fmt in DATE_FORMATS:
        if shape.match(text):
            try:
                datetime.strptime(text, fmt)
            except ValueError:
                continue
            return True
    return False


def has_letter(value: str) -> bool:
    return re.search(r"[a-zA-Z]", value) is not None


@dataclass(frozen=True)
class TypePattern:
    """A cell-level test that votes for one column type.

    Attributes:
        inferred_type: Type this pattern stands for.
        matches: Predicate applied to each sampled value.
    """

    inferred_type: InferredType
    matches: Callable[[str], bool]


TYPE_PATTERNS: list[TypePattern] = [
    TypePattern(InferredType.EMAIL, is_email),
    TypePattern(InferredType.URL, is_url),
    TypePattern(InferredType.PHONE, is_phone),
    TypePattern(InferredType.BOOLEAN, is_boolean),
    TypePattern(InferredType.NUMBER, is_numeric),
    TypePattern(InferredType.DATE, is_date),
]
