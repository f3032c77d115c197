"""Filesystem boundary: target checks, backups, reading, and writing buffers."""

from __future__ import annotations

import os
import shutil
import stat
from pathlib import Path
from typing import Optional, TextIO

from insert_text.buffer import LineBuffer
from insert_text.errors import (
    BackupFailedError,
    InvalidPathError,
    MetadataUnreadableError,
    PermissionDeniedError,
    ReadFailedError,
    WriteFailedError,
)

BACKUP_SUFFIX = ".bak"

_WRITE_BITS = stat.S_IWUSR | stat.S_IWGRP | stat.S_IWOTH


def check_target(path: str) -> None:
    """Reject directories and existing files that carry no write permission.

    A missing target is accepted; it is created on write.
    """

    try:
        mode = os.stat(path).st_mode
    except FileNotFoundError:
        return
    except OSError as exc:
        raise MetadataUnreadableError(
            f"Cannot access '{path}': {exc.strerror or exc}", path=path
        ) from exc
    if stat.S_ISDIR(mode):
        raise InvalidPathError(f"'{path}' is a directory, not a file.", path=path)
    if not mode & _WRITE_BITS:
        raise PermissionDeniedError(f"No write permission for '{path}'.", path=path)


def backup_path(path: str) -> str:
    return f"{path}{BACKUP_SUFFIX}"


def create_backup(path: str) -> Optional[str]:
    """Copy ``path`` to ``<path>.bak``; returns ``None`` when there is nothing to copy."""

    if not Path(path).exists():
        return None
    destination = backup_path(path)
    try:
        shutil.copy(path, destination)
    except OSError as exc:
        raise BackupFailedError(
            f"Failed to create backup '{destination}': {exc.strerror or exc}",
            path=path,
        ) from exc
    return destination


def read_raw(path: str) -> Optional[bytes]:
    """Return the file bytes, or ``None`` when the file does not exist."""

    target = Path(path)
    if not target.exists():
        return None
    try:
        return target.read_bytes()
    except OSError as exc:
        raise ReadFailedError(
            f"Cannot read '{path}': {exc.strerror or exc}", path=path
        ) from exc


def render(buffer: LineBuffer) -> str:
    """Serialize lines joined by ``\\n`` with one terminating ``\\n``.

    The buffer always holds at least one line, so the terminator is written
    regardless of ``had_trailing_newline``, which stays informational.
    """

    return "\n".join(buffer.snapshot()) + "\n"


def commit(path: str, buffer: LineBuffer) -> int:
    """Write the rendered buffer to ``path`` and return the byte count."""

    payload = render(buffer).encode("utf-8")
    try:
        Path(path).write_bytes(payload)
    except OSError as exc:
        raise WriteFailedError(
            f"Cannot write '{path}': {exc.strerror or exc}", path=path
        ) from exc
    return len(payload)


def emit(buffer: LineBuffer, stream: TextIO) -> None:
    """Dry-run output: same serialization as ``commit``, sent to ``stream``."""

    stream.write(render(buffer))
    stream.flush()


__all__ = [
    "BACKUP_SUFFIX",
    "backup_path",
    "check_target",
    "commit",
    "create_backup",
    "emit",
    "read_raw",
    "render",
]
