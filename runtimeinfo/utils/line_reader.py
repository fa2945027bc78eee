"""Cancellable line reader for files that may be slow or unexpectedly large.

Files are opened and read in fixed-size chunks on a worker thread and
decoded incrementally, so only one chunk plus the current partial line is
held in memory and the event loop never blocks on the read. An optional
``asyncio.Event`` aborts a pending read as soon as it is set.
"""

import asyncio
import codecs
import os
import threading
from typing import AsyncIterator, Optional, Union

from runtimeinfo.utils.constants import DEFAULT_ENCODING, DEFAULT_READ_BUFFER_SIZE
from runtimeinfo.utils.exceptions import DetectionCancelledError
from runtimeinfo.utils.logging_config import get_logger

logger = get_logger(__name__)


class CancellableLineReader:
    """Async context manager yielding the lines of a file.

    The file handle is only touched under ``_io_lock``. When the reader is
    closed while a worker thread is still reading, the worker closes the
    handle once its read returns.

    Example:
        async with CancellableLineReader("/proc/1/cgroup") as reader:
            async for line in reader:
                ...
    """

    def __init__(
        self,
        path: Union[str, os.PathLike],
        buffer_size: int = DEFAULT_READ_BUFFER_SIZE,
        encoding: str = DEFAULT_ENCODING,
        cancel_event: Optional[asyncio.Event] = None,
    ):
        if buffer_size < 1:
            raise ValueError("buffer_size must be a positive integer")

        self.path = os.fspath(path)
        self.buffer_size = buffer_size
        self.encoding = encoding
        self.cancel_event = cancel_event
        self._fh = None
        self._entered = False
        self._closed = False
        self._io_lock = threading.Lock()

    @property
    def closed(self) -> bool:
        return self._closed

    async def __aenter__(self) -> "CancellableLineReader":
        self._raise_if_cancelled()
        self._entered = True
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        self._request_close()

    def __aiter__(self) -> AsyncIterator[str]:
        if not self._entered:
            raise RuntimeError("CancellableLineReader must be used as an async context manager")
        return self._iter_lines()

    async def _iter_lines(self) -> AsyncIterator[str]:
        decoder = codecs.getincrementaldecoder(self.encoding)(errors="replace")
        pending = ""

        while True:
            self._raise_if_cancelled()
            chunk = await self._read()
            pending += decoder.decode(chunk, final=not chunk)

            *lines, pending = pending.split("\n")
            for line in lines:
                self._raise_if_cancelled()
                yield line.rstrip("\r")

            if not chunk:
                break

        if pending:
            self._raise_if_cancelled()
            yield pending.rstrip("\r")

    async def _read(self) -> bytes:
        read = asyncio.ensure_future(asyncio.to_thread(self._read_chunk))
        if self.cancel_event is None:
            return await read

        cancelled = asyncio.ensure_future(self.cancel_event.wait())
        try:
            await asyncio.wait({read, cancelled}, return_when=asyncio.FIRST_COMPLETED)
        finally:
            cancelled.cancel()
            if not read.done():
                # The worker finishes on its own; its handle is closed by _request_close
                read.cancel()

        self._raise_if_cancelled()
        return read.result()

    def _read_chunk(self) -> bytes:
        # Runs on a worker thread
        chunk = b""
        with self._io_lock:
            if not self._closed:
                if self._fh is None:
                    self._fh = open(self.path, "rb", buffering=0)
                chunk = self._fh.read(self.buffer_size)

        if self._closed:
            self._close_handle()
        return chunk

    def _request_close(self) -> None:
        self._closed = True
        # A worker holding the lock sees _closed after its read and closes
        if self._io_lock.acquire(blocking=False):
            try:
                self._close_handle(locked=True)
            finally:
                self._io_lock.release()

    def _close_handle(self, locked: bool = False) -> None:
        if not locked:
            with self._io_lock:
                self._close_handle(locked=True)
            return

        if self._fh is not None:
            self._fh.close()
            self._fh = None

    def _raise_if_cancelled(self) -> None:
        if self.cancel_event is not None and self.cancel_event.is_set():
            logger.debug(f"Read of {self.path} cancelled")
            raise DetectionCancelledError(f"Read of {self.path} was cancelled", check=self.path)
