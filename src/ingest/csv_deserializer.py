"""CSV employee record reader.

This module parses comma-separated text with a header row into
typed employee records. Any malformed row aborts the whole read.
"""

from __future__ import annotations

import csv
import re
from typing import Any, Iterator, TextIO

from core.constants import (
    CSV_DELIMITER,
    CSV_FIELD_SIZE_LIMIT,
    CSV_QUOTE_CHAR,
    EMPLOYEE_FIELD_COUNT,
)
from core.errors import MalformedRowError, RecordIOError
from core.types import DeserializeOptions, EmployeeRecord

_NUMERIC_ID_PATTERN = re.compile(r"[+-]?[0-9]+")
_LINE_BREAKS = ("\r", "\n")


def deserialize_csv(stream: TextIO, options: DeserializeOptions) -> list[EmployeeRecord]:
    """Read employee records from CSV text.

    The first non-blank row is a header and is skipped without inspection.
    Field length is not capped while reading; the previous ``csv`` module
    limit is restored afterwards.

    Args:
        stream: Text stream opened with ``newline=""``.
        options: Deserializer switches.

    Returns:
        Records in row order; empty for header-only or empty input.

    Raises:
        MalformedRowError: If a row has the wrong shape or invalid quoting.
        RecordIOError: If the stream cannot be read or decoded.
    """
    lines = _RecordLines(stream)
    reader = csv.reader(
        lines,
        delimiter=CSV_DELIMITER,
        quotechar=CSV_QUOTE_CHAR,
        strict=True,
    )
    previous_limit = csv.field_size_limit(CSV_FIELD_SIZE_LIMIT)
    try:
        rows = _iter_rows(reader, lines)
        next(rows, None)
        records: list[EmployeeRecord] = []
        for line_number, row, raw_text in rows:
            if _has_bare_quote(raw_text):
                raise MalformedRowError(
                    f"Malformed row at line {line_number}: bare quote in an unquoted field. "
                    "Quote fields that contain quotes and double embedded quotes.",
                    line_number=line_number,
                    field_count=len(row),
                )
            records.append(_row_to_record(row, line_number, options))
        return records
    finally:
        csv.field_size_limit(previous_limit)


class _RecordLines:
    """Line iterator that remembers the raw text of the record being parsed."""

    def __init__(self, stream: TextIO) -> None:
        self._stream = iter(stream)
        self._pending: list[str] = []

    def __iter__(self) -> "_RecordLines":
        return self

    def __next__(self) -> str:
        line = next(self._stream)
        self._pending.append(line)
        return line

    def take(self) -> str:
        """Return and forget the raw lines consumed since the last call."""
        raw_text = "".join(self._pending)
        self._pending.clear()
        return raw_text


def _iter_rows(reader: Any, lines: _RecordLines) -> Iterator[tuple[int, list[str], str]]:
    """Yield non-blank rows with the line number they end on.

    Args:
        reader: ``csv.reader`` reading from ``lines``.
        lines: Raw line recorder feeding the reader.

    Yields:
        Tuples of one-based line number, parsed fields, and raw record text.

    Raises:
        MalformedRowError: If quoting is invalid.
        RecordIOError: If the underlying stream fails.
    """
    while True:
        try:
            row = next(reader)
        except StopIteration:
            return
        except csv.Error as error:
            raise MalformedRowError(
                f"Failed to parse CSV at line {reader.line_num}: {error}. "
                "Quote fields that contain commas or quotes and double embedded quotes.",
                line_number=reader.line_num,
            ) from error
        except (OSError, UnicodeDecodeError) as error:
            raise RecordIOError(f"Failed to read CSV input stream: {error}.") from error
        raw_text = lines.take()
        if row:
            yield reader.line_num, row, raw_text


def _has_bare_quote(raw_text: str) -> bool:
    """Return whether a quote appears inside a field that does not start with one.

    Quoted-field structure is already enforced by the strict reader, so
    only the start, unquoted, quoted, and just-closed states are tracked.
    """
    state = "start"
    for char in raw_text:
        if state == "quoted":
            if char == CSV_QUOTE_CHAR:
                state = "closed"
        elif state == "closed":
            if char == CSV_QUOTE_CHAR:
                state = "quoted"
            elif char == CSV_DELIMITER or char in _LINE_BREAKS:
                state = "start"
        elif char == CSV_DELIMITER or char in _LINE_BREAKS:
            state = "start"
        elif char == CSV_QUOTE_CHAR:
            if state == "unquoted":
                return True
            state = "quoted"
        else:
            state = "unquoted"
    return False


def _row_to_record(
    row: list[str],
    line_number: int,
    options: DeserializeOptions,
) -> EmployeeRecord:
    """Map one CSV row positionally onto an employee record.

    Args:
        row: Parsed CSV fields.
        line_number: Line number for error context.
        options: Deserializer switches.

    Returns:
        Employee record with fields copied verbatim.

    Raises:
        MalformedRowError: If the field count differs or the id is rejected.
    """
    if len(row) != EMPLOYEE_FIELD_COUNT:
        raise MalformedRowError(
            f"Malformed row at line {line_number}: expected {EMPLOYEE_FIELD_COUNT} fields, "
            f"got {len(row)}. Fix the row so it has id, first name, last name, email, "
            "description, role, and phone columns.",
            line_number=line_number,
            field_count=len(row),
        )
    employee_id, first_name, last_name, email, description, role, phone = row
    if options.require_numeric_ids and not _NUMERIC_ID_PATTERN.fullmatch(employee_id):
        raise MalformedRowError(
            f"Malformed row at line {line_number}: id '{employee_id}' is not an integer. "
            "Use numeric ids or disable strict id checking.",
            line_number=line_number,
            field_count=len(row),
        )
    return EmployeeRecord(
        id=employee_id,
        first_name=first_name,
        last_name=last_name,
        email=email,
        description=description,
        role=role,
        phone=phone,
    )
