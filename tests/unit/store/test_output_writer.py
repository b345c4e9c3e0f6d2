"""Unit tests for atomic output writes."""

from __future__ import annotations

import stat
from pathlib import Path

import pytest

from core.constants import OUTPUT_TEMP_PREFIX
from core.errors import RecordIOError
from store.output_writer import write_output_atomic


def test_write_output_atomic_creates_file(tmp_path: Path) -> None:
    """Writer should create the destination with the exact payload."""
    output_path = tmp_path / "out.json"

    write_output_atomic(output_path, b"[]")

    assert output_path.read_bytes() == b"[]"


def test_write_output_atomic_overwrites_existing_file(tmp_path: Path) -> None:
    """Writer should replace an existing destination."""
    output_path = tmp_path / "out.json"
    output_path.write_text("old contents that are longer", encoding="utf-8")

    write_output_atomic(output_path, b"[]")

    assert output_path.read_bytes() == b"[]"


def test_write_output_atomic_raises_for_missing_directory(tmp_path: Path) -> None:
    """Writer should fail when the destination directory does not exist."""
    output_path = tmp_path / "missing" / "out.json"

    with pytest.raises(RecordIOError) as error_info:
        write_output_atomic(output_path, b"[]")

    assert error_info.value.path == str(output_path)


def test_write_output_atomic_cleans_up_after_failed_replace(tmp_path: Path) -> None:
    """A failed replace should leave no temporary files behind."""
    output_path = tmp_path / "out.json"
    output_path.mkdir()

    with pytest.raises(RecordIOError):
        write_output_atomic(output_path, b"[]")

    assert not list(tmp_path.glob(f"{OUTPUT_TEMP_PREFIX}*"))
    assert output_path.is_dir()


def test_write_output_atomic_keeps_existing_permissions(tmp_path: Path) -> None:
    """Replacing an existing file should preserve its permission bits."""
    output_path = tmp_path / "out.json"
    output_path.write_text("old", encoding="utf-8")
    output_path.chmod(0o640)

    write_output_atomic(output_path, b"[]")

    assert stat.S_IMODE(output_path.stat().st_mode) == 0o640


def test_write_output_atomic_new_file_matches_plain_open(tmp_path: Path) -> None:
    """A new file should get the permissions a plain write would give it."""
    reference_path = tmp_path / "reference.json"
    reference_path.write_bytes(b"")
    output_path = tmp_path / "out.json"

    write_output_atomic(output_path, b"[]")

    assert stat.S_IMODE(output_path.stat().st_mode) == stat.S_IMODE(
        reference_path.stat().st_mode
    )
