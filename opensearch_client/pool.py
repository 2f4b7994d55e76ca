"""
Reusable response body buffers.
"""

import io
import queue
from contextlib import contextmanager
from typing import Iterator


class BufferPool:
    """
    Bounded pool of BytesIO buffers.

    Buffers are handed out through ``acquire()``, which always returns
    the buffer on exit, including when the body read or decode fails.
    Buffers beyond ``max_size`` are closed instead of retained.
    """

    def __init__(self, max_size: int):
        self.max_size = max_size
        self._buffers: "queue.LifoQueue[io.BytesIO]" = queue.LifoQueue(maxsize=max_size)

    def get(self) -> io.BytesIO:
        try:
            buffer = self._buffers.get_nowait()
        except queue.Empty:
            return io.BytesIO()
        buffer.seek(0)
        buffer.truncate()
        return buffer

    def put(self, buffer: io.BytesIO):
        try:
            self._buffers.put_nowait(buffer)
        except queue.Full:
            buffer.close()

    @contextmanager
    def acquire(self) -> Iterator[io.BytesIO]:
        """Borrow a cleared buffer for the duration of a with block."""
        buffer = self.get()
        try:
            yield buffer
        finally:
            self.put(buffer)

    def __len__(self) -> int:
        return self._buffers.qsize()
