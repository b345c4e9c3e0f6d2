"""Shared typed models.

This module defines immutable data models used by the ingest, store,
and CLI layers to keep interfaces between pipeline stages explicit.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Protocol, TextIO


class DataFormat(str, Enum):
    """Recognized input encodings.

    Attributes:
        UNKNOWN: Placeholder for unrecognized inputs; never deserialized.
        CSV: Comma-separated values with a header row.
    """

    UNKNOWN = "unknown"
    CSV = "csv"


@dataclass(frozen=True)
class EmployeeRecord:
    """One parsed employee entry.

    Field order matches the output document and the input columns.

    Attributes:
        id: Opaque employee identifier.
        first_name: Given name.
        last_name: Family name.
        email: Contact email address.
        description: Free-form description text.
        role: Job title.
        phone: Contact phone number.
    """

    id: str
    first_name: str
    last_name: str
    email: str
    description: str
    role: str
    phone: str


@dataclass(frozen=True)
class DeserializeOptions:
    """Per-run deserializer switches.

    Attributes:
        require_numeric_ids: Reject rows whose id is not an integer.
    """

    require_numeric_ids: bool = False


class Deserializer(Protocol):
    """Callable that parses a text stream into employee records."""

    def __call__(self, stream: TextIO, options: DeserializeOptions) -> list[EmployeeRecord]:
        ...


@dataclass(frozen=True)
class ConversionResult:
    """Summary of one completed conversion.

    Attributes:
        input_path: Source file that was read.
        output_path: Destination file that was written.
        data_format: Detected input format.
        record_count: Number of records written.
    """

    input_path: str
    output_path: str
    data_format: DataFormat
    record_count: int
