"""Append-only CSV writers for temperature readings."""

from __future__ import annotations

import logging
import threading
from pathlib import Path
from queue import Queue
from typing import BinaryIO, Optional, Union

from errors import ErrorKind, TempLogError
from models.records import Reading

logger = logging.getLogger(__name__)

DEFAULT_BUFFER_SIZE = 4096

_CLOSE = object()


def format_line(timestamp: float, value: float) -> str:
    return f"{timestamp},{value}\n"


def open_log(path: Path | str) -> BinaryIO:
    """Open (creating if needed) the log file for appending."""
    try:
        return open(path, "a+b")
    except OSError as exc:
        raise TempLogError(
            f"Could not open or create log file '{path}': {exc}", ErrorKind.io, path
        ) from exc


class DirectLogWriter:
    """Writes and flushes every reading synchronously in the caller's thread."""

    def __init__(self, handle: BinaryIO) -> None:
        self._handle = handle
        self._closed = False

    def write(self, reading: Reading) -> None:
        if self._closed:
            raise TempLogError("Log writer is closed.", ErrorKind.domain)
        line = format_line(reading.timestamp, reading.value).encode("utf-8")
        try:
            self._handle.write(line)
            self._handle.flush()
        except OSError as exc:
            raise TempLogError(f"Could not write to log file: {exc}", ErrorKind.io) from exc

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        self._handle.close()


class BufferedLogWriter:
    """Hands readings to a writer thread that flushes at a byte threshold.

    The thread owns the file handle. Lines accumulate in memory until the
    buffer holds at least ``buffer_size`` bytes, at which point the whole
    buffer is written in one call and cleared. Readings are written in the
    order they were passed to :meth:`write`.
    """

    def __init__(self, handle: BinaryIO, buffer_size: int = DEFAULT_BUFFER_SIZE) -> None:
        if buffer_size < 1:
            raise ValueError("buffer_size must be positive")
        self.buffer_size = buffer_size
        self.flush_count = 0
        self._handle = handle
        self._queue: Queue[object] = Queue()
        self._buffer = bytearray()
        self._error: Optional[OSError] = None
        self._closed = False
        self._thread = threading.Thread(
            target=self._run, name="templog-writer", daemon=True
        )
        self._thread.start()

    def write(self, reading: Reading) -> None:
        if self._error is not None:
            raise TempLogError(
                f"Buffered log writer stopped after a failed write: {self._error}",
                ErrorKind.io,
            ) from self._error
        if self._closed or not self._thread.is_alive():
            raise TempLogError("Buffered log writer channel is closed.", ErrorKind.domain)
        self._queue.put(reading)

    def close(self) -> None:
        """Drain pending readings, flush the remaining buffer and stop the thread."""
        if self._closed:
            return
        self._closed = True
        self._queue.put(_CLOSE)
        self._thread.join()
        if self._error is not None:
            raise TempLogError(
                f"Could not write to log file: {self._error}", ErrorKind.io
            ) from self._error

    def _run(self) -> None:
        try:
            while True:
                item = self._queue.get()
                if item is _CLOSE:
                    break
                self._buffer += format_line(item.timestamp, item.value).encode("utf-8")
                if len(self._buffer) >= self.buffer_size and not self._flush():
                    return
            if self._buffer:
                self._flush()
        finally:
            self._handle.close()

    def _flush(self) -> bool:
        byte_count = len(self._buffer)
        try:
            self._handle.write(bytes(self._buffer))
            self._handle.flush()
        except OSError as exc:
            self._error = exc
            logger.error(
                "Buffered log write failed",
                extra={"byte_count": byte_count, "reason": str(exc)},
            )
            return False
        self._buffer.clear()
        self.flush_count += 1
        logger.debug("Flushed log buffer", extra={"byte_count": byte_count})
        return True


LogWriter = Union[DirectLogWriter, BufferedLogWriter]


def open_log_writer(path: Path | str, buffer_size: int = DEFAULT_BUFFER_SIZE) -> LogWriter:
    """Open the log at ``path``; a zero ``buffer_size`` selects direct mode."""
    if buffer_size < 0:
        raise ValueError("buffer_size must not be negative")
    handle = open_log(path)
    if buffer_size == 0:
        return DirectLogWriter(handle)
    return BufferedLogWriter(handle, buffer_size)
