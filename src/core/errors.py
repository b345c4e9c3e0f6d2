"""csv2json exception hierarchy.

This module defines traceable domain errors with clear boundaries.
Each pipeline stage raises a specific error type for debuggability.
"""

from __future__ import annotations


class Csv2JsonError(Exception):
    """Base exception for all csv2json failures."""


class Csv2JsonConfigError(Csv2JsonError):
    """Raised for invalid runtime configuration."""


class UnknownFormatError(Csv2JsonError):
    """Raised when an input format is not recognized or not supported."""

    def __init__(self, message: str, extension: str) -> None:
        self.extension = extension
        super().__init__(message)


class RecordIOError(Csv2JsonError):
    """Raised when an input or output file cannot be opened, read, or written."""

    def __init__(self, message: str, path: str | None = None) -> None:
        self.path = path
        super().__init__(message)


class MalformedRowError(Csv2JsonError):
    """Raised when a data row does not match the fixed record schema."""

    def __init__(
        self,
        message: str,
        line_number: int,
        field_count: int | None = None,
    ) -> None:
        self.line_number = line_number
        self.field_count = field_count
        super().__init__(message)


class SerializationError(Csv2JsonError):
    """Raised when records cannot be encoded into the output format."""
