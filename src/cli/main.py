"""csv2json CLI entry points.
This module parses input and output paths and runs one conversion.
It maps argparse options onto the typed runtime config.
"""

from __future__ import annotations

import argparse
import sys
from typing import Sequence

from core.config import ConverterConfig
from core.constants import (
    DEFAULT_INPUT_ENCODING,
    DEFAULT_JSON_INDENT,
    DEFAULT_LOG_LEVEL,
    SUPPORTED_LOG_LEVELS,
)
from core.errors import Csv2JsonError
from core.logging_config import configure_logging, get_logger
from ingest.pipeline import build_default_config, convert

_LOGGER = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build the top-level CLI parser.

    Returns:
        Configured argument parser.
    """
    parser = argparse.ArgumentParser(
        prog="csv2json",
        description="Convert a CSV file of employee records into a JSON document",
    )
    parser.add_argument("input", nargs="?", help="Input CSV file path")
    parser.add_argument("output", nargs="?", help="Output JSON file path")
    parser.add_argument(
        "-i",
        "--input",
        dest="input_option",
        metavar="PATH",
        help="Input CSV file path (overrides the positional input)",
    )
    parser.add_argument(
        "-o",
        "--output",
        dest="output_option",
        metavar="PATH",
        help="Output JSON file path (overrides the positional output)",
    )
    parser.add_argument(
        "--strict-ids",
        action="store_true",
        help="Reject rows whose id column is not an integer",
    )
    parser.add_argument(
        "--indent",
        type=int,
        default=DEFAULT_JSON_INDENT,
        help="Spaces per JSON nesting level",
    )
    parser.add_argument(
        "--encoding",
        default=DEFAULT_INPUT_ENCODING,
        help="Input file text encoding",
    )
    parser.add_argument(
        "--log-level",
        default=DEFAULT_LOG_LEVEL,
        choices=SUPPORTED_LOG_LEVELS,
        help="Minimum level for structured log events on stderr",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the csv2json CLI.

    Args:
        argv: Optional argument vector.

    Returns:
        Process exit code.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_level)
    input_path = args.input_option or args.input
    output_path = args.output_option or args.output
    if not input_path or not output_path:
        parser.print_usage(sys.stderr)
        print("error: both an input and an output path are required", file=sys.stderr)
        return 1
    try:
        config = _build_config(args)
        result = convert(input_path, output_path, config)
    except Csv2JsonError as error:
        _LOGGER.error(
            "conversion_failed",
            input_path=input_path,
            output_path=output_path,
            error_type=type(error).__name__,
            error=str(error),
        )
        print(f"error: {error}", file=sys.stderr)
        return 1
    print(
        f"Converted {result.input_path} to {result.output_path} "
        f"({result.record_count} records)"
    )
    return 0


def _build_config(args: argparse.Namespace) -> ConverterConfig:
    """Build runtime config from parsed CLI args.

    Args:
        args: Parsed CLI args.

    Returns:
        Validated config.
    """
    return build_default_config(
        input_encoding=args.encoding,
        json_indent=args.indent,
        require_numeric_ids=args.strict_ids,
    )
