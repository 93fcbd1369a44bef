"""File copier — moves bytes from a source file to a destination through a reusable buffer."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from .config import DEFAULT_BUFFER_SIZE
from .errors import CopyError, DestOpenError, ReadError, SourceOpenError, WriteError

logger = logging.getLogger(__name__)

STATE_INIT = "init"
STATE_SOURCE_OPEN = "source-open"
STATE_DEST_OPEN = "dest-open"
STATE_COPYING = "copying"
STATE_DONE = "done"
STATE_FAILED = "failed"

# Forward transitions only; any non-terminal state may also move to "failed".
_NEXT_STATE = {
    STATE_INIT: STATE_SOURCE_OPEN,
    STATE_SOURCE_OPEN: STATE_DEST_OPEN,
    STATE_DEST_OPEN: STATE_COPYING,
    STATE_COPYING: STATE_DONE,
}

TERMINAL_STATES = {STATE_DONE, STATE_FAILED}


@dataclass
class CopyResult:
    """Outcome of a successful copy."""
    source: str
    destination: str
    bytes_copied: int
    reads: int  # non-empty reads performed
    buffer_size: int


class FileCopier:
    """Copy one file to another path, byte for byte.

    A FileCopier is single-use: construct it with the two paths, call
    copy() once, then inspect ``state``, ``history`` and ``error``.

    Args:
        source: Path of the file to read.
        destination: Path of the file to create or truncate.
        buffer_size: Capacity of the transfer buffer in bytes.
        remove_partial: Delete the destination if the copy fails after it
            was opened. By default a partial file is left in place.

    Raises:
        ValueError: If buffer_size is not a positive integer.
    """

    def __init__(
        self,
        source: str | os.PathLike,
        destination: str | os.PathLike,
        buffer_size: int = DEFAULT_BUFFER_SIZE,
        remove_partial: bool = False,
    ) -> None:
        if isinstance(buffer_size, bool) or not isinstance(buffer_size, int) or buffer_size <= 0:
            raise ValueError(f"buffer_size must be a positive integer, got {buffer_size!r}")

        self.source = os.fspath(source)
        self.destination = os.fspath(destination)
        self.buffer_size = buffer_size
        self.remove_partial = remove_partial

        self.state = STATE_INIT
        self.history: list[str] = [STATE_INIT]
        self.error: CopyError | None = None
        self.bytes_copied = 0
        self.reads = 0

    def copy(self) -> CopyResult:
        """Run the copy.

        Returns:
            CopyResult with the number of bytes transferred.

        Raises:
            SourceOpenError: The source could not be opened. The destination
                is not touched.
            DestOpenError: The destination could not be opened, or is the
                source file itself.
            ReadError: Reading or closing the source failed.
            WriteError: Writing or closing the destination failed, or a
                write came up short.
            ValueError: The transfer buffer could not be allocated. Raised
                before either file is opened.
            RuntimeError: copy() was already called on this instance.
        """
        if self.state != STATE_INIT:
            raise RuntimeError(f"FileCopier has already run (state: {self.state})")

        buffer = self._allocate_buffer()

        try:
            self._run(buffer)
        except CopyError as exc:
            self._fail(exc)
            raise

        self._advance(STATE_DONE)
        logger.debug(
            "Copied %d bytes from %s to %s in %d reads",
            self.bytes_copied, self.source, self.destination, self.reads,
        )
        return CopyResult(
            source=self.source,
            destination=self.destination,
            bytes_copied=self.bytes_copied,
            reads=self.reads,
            buffer_size=self.buffer_size,
        )

    def _allocate_buffer(self) -> bytearray:
        try:
            return bytearray(self.buffer_size)
        except (MemoryError, OverflowError) as exc:
            raise ValueError(
                f"cannot allocate a transfer buffer of {self.buffer_size} bytes"
            ) from exc

    def _run(self, buffer: bytearray) -> None:
        # Closing a handle can still report a deferred I/O error; blame the side that raised it
        try:
            with self._open_source() as src:
                self._advance(STATE_SOURCE_OPEN)
                try:
                    with self._open_destination(src) as dst:
                        self._advance(STATE_DEST_OPEN)
                        self._advance(STATE_COPYING)
                        self._transfer(src, dst, buffer)
                except OSError as exc:
                    raise WriteError(self.destination, os_error=exc) from exc
        except OSError as exc:
            raise ReadError(self.source, os_error=exc) from exc

    def _open_source(self):
        try:
            return open(self.source, "rb", buffering=0)
        except OSError as exc:
            raise SourceOpenError(self.source, os_error=exc) from exc

    def _open_destination(self, src):
        # Opening with "wb" would truncate the source if both paths name one file
        try:
            dest_stat = os.stat(self.destination)
        except OSError:
            dest_stat = None
        if dest_stat is not None and os.path.samestat(os.fstat(src.fileno()), dest_stat):
            raise DestOpenError(
                self.destination,
                reason="destination is the same file as the source",
            )

        try:
            return open(self.destination, "wb", buffering=0)
        except OSError as exc:
            raise DestOpenError(self.destination, os_error=exc) from exc

    def _transfer(self, src, dst, buffer: bytearray) -> None:
        view = memoryview(buffer)

        while True:
            try:
                n = src.readinto(buffer)
            except OSError as exc:
                raise ReadError(self.source, os_error=exc) from exc
            if not n:
                break
            self.reads += 1

            try:
                written = dst.write(view[:n])
            except OSError as exc:
                raise WriteError(self.destination, os_error=exc) from exc
            if written != n:
                raise WriteError(
                    self.destination,
                    reason=f"short write ({written} of {n} bytes)",
                )
            self.bytes_copied += n

        logger.debug("Reached end of %s after %d bytes", self.source, self.bytes_copied)

    def _advance(self, state: str) -> None:
        expected = _NEXT_STATE.get(self.state)
        if state != expected:
            raise RuntimeError(f"Invalid copy state transition: {self.state} -> {state}")
        self.state = state
        self.history.append(state)
        logger.debug("Copy state: %s", state)

    def _fail(self, exc: CopyError) -> None:
        dest_opened = STATE_DEST_OPEN in self.history
        exc.bytes_copied = self.bytes_copied
        self.error = exc
        self.state = STATE_FAILED
        self.history.append(STATE_FAILED)
        logger.debug("Copy state: %s (%s)", STATE_FAILED, exc.phase)

        if self.remove_partial and dest_opened:
            self._remove_partial()

    def _remove_partial(self) -> None:
        try:
            os.remove(self.destination)
        except OSError as exc:
            logger.warning(
                "Could not remove partial destination %s: %s", self.destination, exc
            )
        else:
            logger.info("Removed partial destination %s", self.destination)


def copy_file(
    source: str | os.PathLike,
    destination: str | os.PathLike,
    buffer_size: int = DEFAULT_BUFFER_SIZE,
    remove_partial: bool = False,
) -> int:
    """Copy source to destination and return the number of bytes copied.

    Raises the same CopyError subclasses as FileCopier.copy().
    """
    copier = FileCopier(
        source, destination, buffer_size=buffer_size, remove_partial=remove_partial
    )
    return copier.copy().bytes_copied
