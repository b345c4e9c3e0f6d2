"""Atomic output file writes.

The destination is replaced only after the full payload is on disk,
so a failed run never leaves a truncated output file behind.
"""

from __future__ import annotations

import os
import stat
from pathlib import Path
from uuid import uuid4

from core.constants import OUTPUT_TEMP_PREFIX, OUTPUT_TEMP_SUFFIX
from core.errors import RecordIOError

_NEW_FILE_MODE = 0o666


def write_output_atomic(output_path: Path, payload: bytes) -> None:
    """Write bytes to a sibling temp file, then replace the destination.

    A new file gets the same permissions a plain ``open(..., "w")`` would
    give it; an existing destination keeps its permission bits.

    Args:
        output_path: Destination file; overwritten when present.
        payload: Encoded document.

    Raises:
        RecordIOError: If the temp file cannot be written or moved.
    """
    temp_path = output_path.parent / f"{OUTPUT_TEMP_PREFIX}{uuid4().hex}{OUTPUT_TEMP_SUFFIX}"
    try:
        fd = os.open(temp_path, os.O_WRONLY | os.O_CREAT | os.O_EXCL, _NEW_FILE_MODE)
    except OSError as error:
        raise RecordIOError(
            f"Failed to create output file in {output_path.parent}: {error}. "
            "Check that the directory exists and is writable.",
            path=str(output_path),
        ) from error
    try:
        with os.fdopen(fd, "wb") as handle:
            handle.write(payload)
        existing_mode = _existing_permissions(output_path)
        if existing_mode is not None:
            temp_path.chmod(existing_mode)
        temp_path.replace(output_path)
    except OSError as error:
        temp_path.unlink(missing_ok=True)
        raise RecordIOError(
            f"Failed to write output file {output_path}: {error}.",
            path=str(output_path),
        ) from error


def _existing_permissions(output_path: Path) -> int | None:
    """Return permission bits of an existing regular destination file, if any."""
    try:
        status = output_path.stat()
    except FileNotFoundError:
        return None
    if not stat.S_ISREG(status.st_mode):
        return None
    return stat.S_IMODE(status.st_mode)
