"""Byte-for-byte file backup utility."""

from __future__ import annotations

from .config import DEFAULT_BUFFER_SIZE, CopyConfig
from .copier import CopyResult, FileCopier, copy_file
from .errors import (
    CopyError,
    DestOpenError,
    ReadError,
    SourceOpenError,
    UsageError,
    WriteError,
)

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_BUFFER_SIZE",
    "CopyConfig",
    "CopyError",
    "CopyResult",
    "DestOpenError",
    "FileCopier",
    "ReadError",
    "SourceOpenError",
    "UsageError",
    "WriteError",
    "copy_file",
]
