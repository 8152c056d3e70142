"""Reading a file descriptor or binary stream one line at a time."""

from __future__ import annotations

import os
from typing import Any, Iterator, Optional, Union

BUFFER_SIZE = 42

Source = Union[int, Any]


class LineReader:
    """Reads lines, each ending with its newline except possibly the last.

    ``fd`` is an integer file descriptor or an object with a ``read(n)`` method.
    """

    def __init__(self, fd: Source, buffer_size: int = BUFFER_SIZE) -> None:
        if isinstance(fd, int) and fd < 0:
            raise ValueError("file descriptor must not be negative")
        if buffer_size <= 0:
            raise ValueError("buffer size must be positive")
        self._source = fd
        self._buffer_size = buffer_size
        self._buffer = bytearray()

    def _read_chunk(self) -> bytes:
        if isinstance(self._source, int):
            return os.read(self._source, self._buffer_size)
        data = self._source.read(self._buffer_size)
        if isinstance(data, str):
            data = data.encode("utf-8", "surrogateescape")
        return data or b""

    def readline(self) -> Optional[str]:
        """The next line, or None once the input is exhausted.

        A read error discards anything buffered and propagates.
        """
        while b"\n" not in self._buffer:
            try:
                chunk = self._read_chunk()
            except OSError:
                self._buffer.clear()
                raise
            if not chunk:
                break
            self._buffer += chunk
        if not self._buffer:
            return None
        newline = self._buffer.find(b"\n")
        end = len(self._buffer) if newline == -1 else newline + 1
        line = bytes(self._buffer[:end])
        del self._buffer[:end]
        return line.decode("utf-8", "surrogateescape")

    def __iter__(self) -> Iterator[str]:
        while (line := self.readline()) is not None:
            yield line