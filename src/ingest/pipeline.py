"""Conversion orchestration.

This module coordinates format detection, deserialization,
serialization, and the atomic output write for one input file.
"""

from __future__ import annotations

from pathlib import Path
from typing import Sequence

from core.config import ConverterConfig
from core.constants import DEFAULT_INPUT_ENCODING, DEFAULT_JSON_INDENT
from core.errors import RecordIOError
from core.logging_config import get_logger
from core.types import ConversionResult, DataFormat, EmployeeRecord
from ingest.deserializers import build_deserializer_registry, select_deserializer
from ingest.format_detection import detect_data_format
from store.json_serializer import serialize_records
from store.output_writer import write_output_atomic

_LOGGER = get_logger(__name__)


def build_default_config(
    input_encoding: str = DEFAULT_INPUT_ENCODING,
    json_indent: int = DEFAULT_JSON_INDENT,
    require_numeric_ids: bool = False,
) -> ConverterConfig:
    """Build a validated config backed by the default deserializer registry.

    Args:
        input_encoding: Input text encoding name.
        json_indent: JSON indentation width.
        require_numeric_ids: Whether ids must parse as integers.

    Returns:
        Validated runtime config.
    """
    return ConverterConfig.build(
        build_deserializer_registry(),
        input_encoding=input_encoding,
        json_indent=json_indent,
        require_numeric_ids=require_numeric_ids,
    )


def decode(input_path: str, config: ConverterConfig) -> list[EmployeeRecord]:
    """Read and parse employee records from an input file.

    Args:
        input_path: Path of the file to read.
        config: Runtime config holding the deserializer registry.

    Returns:
        Parsed records in file order.

    Raises:
        UnknownFormatError: If the file format is not supported.
        RecordIOError: If the file cannot be opened or read.
        MalformedRowError: If any data row is malformed.
    """
    return _read_records(input_path, detect_data_format(input_path), config)


def _read_records(
    input_path: str,
    data_format: DataFormat,
    config: ConverterConfig,
) -> list[EmployeeRecord]:
    """Parse an input file whose format has already been detected."""
    deserializer = select_deserializer(data_format, config.deserializers)
    try:
        with open(input_path, encoding=config.input_encoding, newline="") as stream:
            records = deserializer(stream, config.deserialize_options())
    except OSError as error:
        raise RecordIOError(
            f"Failed to open input file {input_path}: {error.strerror or error}. "
            "Provide an existing, readable file.",
            path=input_path,
        ) from error
    _LOGGER.debug(
        "records_deserialized",
        input_path=input_path,
        data_format=data_format.value,
        record_count=len(records),
    )
    return records


def encode(
    records: Sequence[EmployeeRecord],
    output_path: str,
    config: ConverterConfig,
) -> None:
    """Serialize records and write them to the output path.

    Args:
        records: Records in output order.
        output_path: Destination file path; overwritten when present.
        config: Runtime config holding output formatting.

    Raises:
        SerializationError: If records cannot be encoded.
        RecordIOError: If the output cannot be written.
    """
    payload = serialize_records(records, indent=config.json_indent)
    _LOGGER.debug("records_serialized", record_count=len(records), byte_count=len(payload))
    write_output_atomic(Path(output_path), payload)
    _LOGGER.debug("output_written", output_path=output_path, byte_count=len(payload))


def convert(input_path: str, output_path: str, config: ConverterConfig) -> ConversionResult:
    """Convert one input file into one output document.

    The output is only touched after the input is fully parsed.

    Args:
        input_path: Source file path.
        output_path: Destination file path.
        config: Runtime config.

    Returns:
        Summary of the completed conversion.
    """
    _LOGGER.info("conversion_started", input_path=input_path, output_path=output_path)
    data_format = detect_data_format(input_path)
    records = _read_records(input_path, data_format, config)
    encode(records, output_path, config)
    result = ConversionResult(
        input_path=input_path,
        output_path=output_path,
        data_format=data_format,
        record_count=len(records),
    )
    _LOGGER.info(
        "conversion_completed",
        input_path=input_path,
        output_path=output_path,
        data_format=data_format.value,
        record_count=result.record_count,
    )
    return result
