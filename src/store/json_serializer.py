"""JSON document encoding for employee records.

This module turns ordered records into a pretty-printed JSON array.
Writing the encoded bytes is left to the output writer.
"""

from __future__ import annotations

import json
from typing import Sequence

from core.constants import DEFAULT_JSON_INDENT, EMPLOYEE_FIELD_NAMES, OUTPUT_ENCODING
from core.errors import SerializationError
from core.types import EmployeeRecord


def record_to_payload(record: EmployeeRecord) -> dict[str, str]:
    """Serialize one record into an ordered JSON-safe payload.

    Args:
        record: Employee record.

    Returns:
        Dictionary whose key order matches the record schema.
    """
    return {name: getattr(record, name) for name in EMPLOYEE_FIELD_NAMES}


def serialize_records(
    records: Sequence[EmployeeRecord],
    indent: int = DEFAULT_JSON_INDENT,
) -> bytes:
    """Encode records as a JSON array.

    Args:
        records: Records in output order.
        indent: Spaces per nesting level.

    Returns:
        UTF-8 encoded document without a trailing newline.

    Raises:
        SerializationError: If a value cannot be encoded.
    """
    payload = [record_to_payload(record) for record in records]
    try:
        document = json.dumps(payload, indent=indent, ensure_ascii=False)
        return document.encode(OUTPUT_ENCODING)
    except (TypeError, ValueError) as error:
        raise SerializationError(
            f"Failed to serialize {len(payload)} records to JSON: {error}. "
            "Check the input file for invalid characters."
        ) from error
