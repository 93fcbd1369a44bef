"""Error taxonomy for the file copier."""

from __future__ import annotations

import os


class UsageError(Exception):
    """Raised when the command line does not name exactly two paths."""


class CopyError(Exception):
    """Base class for failures during a copy.

    Attributes:
        phase: Step that failed ("open-source", "open-destination", "read", "write").
        path: Path the failing step was operating on.
        os_error: Underlying OSError, or None when the failure has no errno
            (e.g. a short write).
        bytes_copied: Bytes transferred to the destination before the failure.
    """

    phase = "copy"
    action = "copy"

    def __init__(
        self,
        path: str | os.PathLike,
        os_error: OSError | None = None,
        reason: str | None = None,
        bytes_copied: int = 0,
    ) -> None:
        self.path = os.fspath(path)
        self.os_error = os_error
        self.reason = reason
        self.bytes_copied = bytes_copied
        super().__init__(self._format())

    def _format(self) -> str:
        if self.os_error is not None:
            detail = self.os_error.strerror or str(self.os_error)
        else:
            detail = self.reason or "unknown error"
        return f"Failed to {self.action} '{self.path}': {detail}"


class SourceOpenError(CopyError):
    phase = "open-source"
    action = "open source file"


class DestOpenError(CopyError):
    phase = "open-destination"
    action = "open destination file"


class ReadError(CopyError):
    phase = "read"
    action = "read from source file"


class WriteError(CopyError):
    phase = "write"
    action = "write to destination file"
