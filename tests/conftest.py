"""Pytest configuration and shared fixtures for repository test runs."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Callable

import pytest


def pytest_sessionstart() -> None:
    """Add src directory to sys.path for test imports."""
    project_root = Path(__file__).resolve().parent.parent
    src_path = project_root / "src"
    if str(src_path) not in sys.path:
        sys.path.insert(0, str(src_path))


@pytest.fixture
def write_csv(tmp_path: Path) -> Callable[..., Path]:
    """Return a helper that writes CSV text into the test temp directory."""

    def _write(text: str, name: str = "input.csv", encoding: str = "utf-8") -> Path:
        csv_path = tmp_path / name
        csv_path.write_bytes(text.encode(encoding))
        return csv_path

    return _write
