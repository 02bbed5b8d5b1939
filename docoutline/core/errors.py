"""
Exceptions raised by outline generation.

Only whole-call failures are raised. Failures local to one element
(a malformed row, an unreadable declaration) are absorbed by the
analyzer that met them.
"""

from __future__ import annotations

from typing import Any


class OutlineError(Exception):
    """Base exception for outline generation errors."""

    def __init__(self, message: str, details: str | None = None):
        self.details = details
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": str(self),
            "type": type(self).__name__,
            "details": self.details,
        }


class UnsupportedFormatError(OutlineError):
    """No analyzer is registered for the requested format."""

    def __init__(self, discriminator: str, supported: list[str] | None = None):
        self.discriminator = discriminator
        details = f"Supported formats: {', '.join(sorted(supported))}" if supported else None
        super().__init__(
            f"No analyzer registered for format: {discriminator}",
            details=details,
        )


class MalformedInputError(OutlineError):
    """The whole document could not be parsed."""

    def __init__(self, format_name: str, details: str):
        self.format_name = format_name
        super().__init__(f"Invalid {format_name.upper()}: {details}", details=details)
