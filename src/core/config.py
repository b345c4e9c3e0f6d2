"""Runtime configuration model for csv2json.

This module owns validation of every conversion knob.
Other modules consume a typed config object instead of raw CLI values.
"""

from __future__ import annotations

import codecs
from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping

from core.constants import DEFAULT_INPUT_ENCODING, DEFAULT_JSON_INDENT
from core.errors import Csv2JsonConfigError
from core.types import DataFormat, Deserializer, DeserializeOptions


@dataclass(frozen=True)
class ConverterConfig:
    """Validated runtime configuration.

    Attributes:
        deserializers: Immutable mapping from input format to its parser.
        input_encoding: Text encoding used to open the input file.
        json_indent: Number of spaces per JSON nesting level.
        require_numeric_ids: Reject rows whose id is not an integer.
    """

    deserializers: Mapping[DataFormat, Deserializer]
    input_encoding: str = DEFAULT_INPUT_ENCODING
    json_indent: int = DEFAULT_JSON_INDENT
    require_numeric_ids: bool = False

    @classmethod
    def build(
        cls,
        deserializers: Mapping[DataFormat, Deserializer],
        input_encoding: str = DEFAULT_INPUT_ENCODING,
        json_indent: int = DEFAULT_JSON_INDENT,
        require_numeric_ids: bool = False,
    ) -> "ConverterConfig":
        """Build a validated config.

        Args:
            deserializers: Format-to-parser registry, frozen on construction.
            input_encoding: Input text encoding name.
            json_indent: JSON indentation width.
            require_numeric_ids: Whether ids must parse as integers.

        Returns:
            A validated config object.

        Raises:
            Csv2JsonConfigError: If any value is invalid.
        """
        return cls(
            deserializers=MappingProxyType(dict(deserializers)),
            input_encoding=_validate_encoding(input_encoding),
            json_indent=_validate_indent(json_indent),
            require_numeric_ids=require_numeric_ids,
        )

    def deserialize_options(self) -> DeserializeOptions:
        """Return the deserializer switches derived from this config."""
        return DeserializeOptions(require_numeric_ids=self.require_numeric_ids)


def _validate_encoding(encoding: str) -> str:
    """Check that an encoding name is known to the codec registry.

    Args:
        encoding: Raw encoding name.

    Returns:
        The unchanged encoding name.

    Raises:
        Csv2JsonConfigError: If the codec is unknown.
    """
    try:
        codecs.lookup(encoding)
    except LookupError as error:
        raise Csv2JsonConfigError(
            f"Invalid input encoding: unknown codec '{encoding}'. "
            "Use a standard codec name such as utf-8 or latin-1."
        ) from error
    return encoding


def _validate_indent(indent: int) -> int:
    """Check JSON indentation width.

    Args:
        indent: Requested spaces per level.

    Returns:
        The unchanged indent.

    Raises:
        Csv2JsonConfigError: If indent is negative.
    """
    if indent < 0:
        raise Csv2JsonConfigError(
            f"Invalid JSON indent: expected a non-negative integer, got {indent}. "
            "Pass 0 or a positive number of spaces."
        )
    return indent
