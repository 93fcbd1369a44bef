"""Tests for the copy error taxonomy."""

from __future__ import annotations

import errno
from pathlib import Path

import pytest

from backup_utility.errors import (
    CopyError,
    DestOpenError,
    ReadError,
    SourceOpenError,
    UsageError,
    WriteError,
)


class TestCopyError:

    @pytest.mark.parametrize("cls,phase,prefix", [
        (SourceOpenError, "open-source", "Failed to open source file"),
        (DestOpenError, "open-destination", "Failed to open destination file"),
        (ReadError, "read", "Failed to read from source file"),
        (WriteError, "write", "Failed to write to destination file"),
    ])
    def test_phase_and_message(self, cls, phase, prefix):
        err = cls("a.bin", os_error=OSError(errno.EACCES, "Permission denied"))
        assert err.phase == phase
        assert str(err) == f"{prefix} 'a.bin': Permission denied"

    def test_reason_used_without_os_error(self):
        err = WriteError("b.bin", reason="short write (3 of 4 bytes)")
        assert str(err) == "Failed to write to destination file 'b.bin': short write (3 of 4 bytes)"
        assert err.os_error is None

    def test_os_error_without_strerror(self):
        err = ReadError("c.bin", os_error=OSError("device went away"))
        assert str(err).endswith("device went away")

    def test_path_like_is_stored_as_string(self):
        err = SourceOpenError(Path("dir") / "x.bin", os_error=FileNotFoundError(2, "No such file or directory"))
        assert err.path == str(Path("dir") / "x.bin")

    def test_bytes_copied_defaults_to_zero(self):
        assert DestOpenError("d.bin", reason="nope").bytes_copied == 0

    def test_usage_error_is_not_a_copy_error(self):
        assert not issubclass(UsageError, CopyError)
