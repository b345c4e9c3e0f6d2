"""Public SDK surface for csv2json.

This module provides a stable import path for library users.
It re-exports the conversion entry points and typed models.
"""

from __future__ import annotations

from core.config import ConverterConfig
from core.errors import (
    Csv2JsonConfigError,
    Csv2JsonError,
    MalformedRowError,
    RecordIOError,
    SerializationError,
    UnknownFormatError,
)
from core.types import ConversionResult, DataFormat, DeserializeOptions, EmployeeRecord
from ingest.csv_deserializer import deserialize_csv
from ingest.deserializers import build_deserializer_registry, select_deserializer
from ingest.format_detection import detect_data_format
from ingest.pipeline import build_default_config, convert, decode, encode
from store.json_serializer import serialize_records

__all__ = [
    "ConversionResult",
    "ConverterConfig",
    "Csv2JsonConfigError",
    "Csv2JsonError",
    "DataFormat",
    "DeserializeOptions",
    "EmployeeRecord",
    "MalformedRowError",
    "RecordIOError",
    "SerializationError",
    "UnknownFormatError",
    "build_default_config",
    "build_deserializer_registry",
    "convert",
    "decode",
    "deserialize_csv",
    "detect_data_format",
    "encode",
    "select_deserializer",
    "serialize_records",
]
