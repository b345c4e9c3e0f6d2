"""Unit tests for CLI command handling."""

from __future__ import annotations

import json
from pathlib import Path

from cli.main import build_parser, main
from tests.fixture_paths import fixture_path


def test_cli_converts_positional_paths(tmp_path, capsys) -> None:
    """CLI should convert using positional input and output paths."""
    output_path = tmp_path / "out.json"

    exit_code = main([str(fixture_path("employees.csv")), str(output_path)])
    output = capsys.readouterr().out.strip()

    assert exit_code == 0
    assert output.endswith("(2 records)")
    assert len(json.loads(output_path.read_text(encoding="utf-8"))) == 2


def test_cli_converts_named_options(tmp_path, capsys) -> None:
    """CLI should accept --input and --output options."""
    output_path = tmp_path / "out.json"
    args = ["--input", str(fixture_path("header_only.csv")), "--output", str(output_path)]

    exit_code = main(args)

    assert exit_code == 0
    assert output_path.read_text(encoding="utf-8") == "[]"
    assert "Converted" in capsys.readouterr().out


def test_cli_requires_both_paths(capsys) -> None:
    """CLI should print usage and fail when a path is missing."""
    exit_code = main([str(fixture_path("employees.csv"))])
    captured = capsys.readouterr()

    assert exit_code == 1
    assert "usage:" in captured.err
    assert captured.out == ""


def test_cli_reports_malformed_rows(tmp_path: Path, capsys) -> None:
    """CLI should print a diagnostic and exit non-zero on bad input."""
    output_path = tmp_path / "out.json"

    exit_code = main([str(fixture_path("short_row.csv")), str(output_path)])
    captured = capsys.readouterr()

    assert exit_code == 1
    assert "error: Malformed row at line 3" in captured.err
    assert output_path.exists() is False


def test_cli_reports_unknown_format(tmp_path: Path, capsys) -> None:
    """CLI should reject unsupported input extensions."""
    exit_code = main([str(fixture_path("employees.txt")), str(tmp_path / "out.json")])

    assert exit_code == 1
    assert "Unknown input format" in capsys.readouterr().err


def test_cli_reports_invalid_config(tmp_path: Path, capsys) -> None:
    """CLI should surface config errors as diagnostics."""
    output_path = tmp_path / "out.json"
    args = [str(fixture_path("employees.csv")), str(output_path), "--indent", "-2"]

    exit_code = main(args)

    assert exit_code == 1
    assert "Invalid JSON indent" in capsys.readouterr().err


def test_cli_strict_ids_flag_reaches_parser() -> None:
    """The strict-ids flag should parse into a boolean option."""
    args = build_parser().parse_args(["in.csv", "out.json", "--strict-ids"])

    assert args.strict_ids is True
    assert args.log_level == "WARNING"
