"""Input format detection by file extension."""

from __future__ import annotations

from pathlib import Path
from types import MappingProxyType

from core.constants import CSV_EXTENSION
from core.errors import UnknownFormatError
from core.types import DataFormat

_EXTENSION_FORMATS = MappingProxyType({CSV_EXTENSION: DataFormat.CSV})


def detect_data_format(file_name: str) -> DataFormat:
    """Classify a file name by its final extension.

    Args:
        file_name: Path or bare file name; only the suffix is inspected.

    Returns:
        Recognized input format.

    Raises:
        UnknownFormatError: If the extension is missing or unsupported.
    """
    extension = Path(file_name).suffix.lower()
    data_format = _EXTENSION_FORMATS.get(extension)
    if data_format is None:
        shown = extension or "(none)"
        raise UnknownFormatError(
            f"Unknown input format for {file_name}: extension {shown} is not supported. "
            f"Supported extensions: {tuple(_EXTENSION_FORMATS)}.",
            extension=extension,
        )
    return data_format
