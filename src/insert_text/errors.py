"""Error taxonomy shared by the loader, engine, filesystem adapter, and CLI."""

from __future__ import annotations

from typing import Optional


class LineEditError(RuntimeError):
    """Base class for every failure surfaced to the ``it`` user."""

    def __init__(self, message: str, *, path: Optional[str] = None) -> None:
        super().__init__(message)
        self.message = message
        self.path = path

    def __str__(self) -> str:
        return self.message

    def with_path(self, path: str) -> "LineEditError":
        self.path = path
        return self


class InvalidPathError(LineEditError):
    """Raised when a target names a directory instead of a file."""


class MetadataUnreadableError(LineEditError):
    """Raised when an existing target cannot be stat'ed."""


class PermissionDeniedError(LineEditError):
    """Raised when a target carries no write permission bits."""


class BackupFailedError(LineEditError):
    """Raised when the ``.bak`` copy cannot be created."""


class ReadFailedError(LineEditError):
    """Raised when target content cannot be read or decoded."""


class WriteFailedError(LineEditError):
    """Raised when the edited content cannot be written back."""


class MalformedRangeError(LineEditError, ValueError):
    """Raised when a ``START[,END]`` clear range fails to parse or validate."""


class AddressOutOfRangeError(LineEditError):
    """Raised when a clear range points past the end of the buffer."""

    def __init__(
        self,
        message: str,
        *,
        address: int,
        line_count: int,
        path: Optional[str] = None,
    ) -> None:
        super().__init__(message, path=path)
        self.address = address
        self.line_count = line_count

    def __str__(self) -> str:
        if self.path is None:
            return self.message
        return f"{self.message} for '{self.path}'."


class StartBeyondEndError(AddressOutOfRangeError):
    pass


class EndBeyondEndError(AddressOutOfRangeError):
    pass


__all__ = [
    "AddressOutOfRangeError",
    "BackupFailedError",
    "EndBeyondEndError",
    "InvalidPathError",
    "LineEditError",
    "MalformedRangeError",
    "MetadataUnreadableError",
    "PermissionDeniedError",
    "ReadFailedError",
    "StartBeyondEndError",
    "WriteFailedError",
]
