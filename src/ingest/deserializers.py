"""Format-to-deserializer registry.

The registry is built once by the caller and carried inside the
runtime config, so pipeline code never consults module-level state.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from core.errors import UnknownFormatError
from core.types import DataFormat, Deserializer
from ingest.csv_deserializer import deserialize_csv


def build_deserializer_registry() -> Mapping[DataFormat, Deserializer]:
    """Return an immutable mapping of every supported input format."""
    return MappingProxyType({DataFormat.CSV: deserialize_csv})


def select_deserializer(
    data_format: DataFormat,
    registry: Mapping[DataFormat, Deserializer],
) -> Deserializer:
    """Look up the deserializer for a detected format.

    Args:
        data_format: Detected input format.
        registry: Format-to-deserializer mapping from config.

    Returns:
        Matching deserializer function.

    Raises:
        UnknownFormatError: If no deserializer handles the format.
    """
    deserializer = registry.get(data_format)
    if deserializer is None:
        raise UnknownFormatError(
            f"Unsupported data format '{data_format.value}': no deserializer is registered. "
            f"Registered formats: {sorted(fmt.value for fmt in registry)}.",
            extension="",
        )
    return deserializer
