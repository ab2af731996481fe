"""Reading a stream one line at a time through a fixed-size read buffer."""

from __future__ import annotations

from collections.abc import Iterator
from typing import IO, AnyStr, Generic

BUFFER_SIZE = 1


class LineReader(Generic[AnyStr]):
    """Return the lines of a text or binary stream, newline included.

    Data is read in chunks of ``buffer_size``; what follows a line is kept for
    the next call. Reaching the end of the stream is not remembered, so data
    that arrives later is still read.
    """

    def __init__(self, stream: IO[AnyStr], buffer_size: int = BUFFER_SIZE) -> None:
        if buffer_size < 1:
            raise ValueError("buffer_size must be at least 1")
        self._stream = stream
        self._buffer_size = buffer_size
        self._pending: AnyStr | None = None

    def read_line(self) -> AnyStr | None:
        """Return the next line, ending in a newline unless it is the last; None at the end."""
        pending = self._pending
        while pending is None or (b"\n" if isinstance(pending, bytes) else "\n") not in pending:
            chunk = self._stream.read(self._buffer_size)
            if not chunk:
                break
            if isinstance(chunk, bytearray):
                chunk = bytes(chunk)
            pending = chunk if pending is None else pending + chunk
        if not pending:
            self._pending = None
            return None
        newline = b"\n" if isinstance(pending, bytes) else "\n"
        end = pending.find(newline)
        if end < 0:
            self._pending = None
            return pending
        self._pending = pending[end + 1 :] or None
        return pending[: end + 1]

    def __iter__(self) -> Iterator[AnyStr]:
        while (line := self.read_line()) is not None:
            yield line


def read_lines(stream: IO[AnyStr]) -> Iterator[AnyStr]:
    """Yield every line of ``stream`` in order."""
    yield from LineReader(stream)