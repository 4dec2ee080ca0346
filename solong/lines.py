"""Read lines from a stream in fixed-size chunks."""

from __future__ import annotations

from typing import IO, AnyStr, Generic, Iterator, Optional

BUFFER_SIZE = 4


class LineReader(Generic[AnyStr]):
    """Return lines, newline included, from *stream* read *buffer_size* units at a time.

    Works with both text and binary streams. The last line is returned even
    without a trailing newline.
    """

    def __init__(self, stream: IO[AnyStr], buffer_size: int = BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError(f"buffer_size must be positive, got {buffer_size}")
        self._stream = stream
        self._buffer_size = buffer_size
        self._pending: Optional[AnyStr] = None

    def readline(self) -> Optional[AnyStr]:
        """The next line, or None when the stream holds no more data."""
        pending = self._pending
        newline = None
        while True:
            if pending is not None:
                newline = "\n" if isinstance(pending, str) else b"\n"
                if newline in pending:
                    break
            chunk = self._stream.read(self._buffer_size)
            if not chunk:
                break
            pending = chunk if pending is None else pending + chunk
        if not pending:
            self._pending = pending
            return None
        index = pending.find(newline)
        if index < 0:
            line, rest = pending, pending[:0]
        else:
            line, rest = pending[: index + 1], pending[index + 1 :]
        self._pending = rest
        return line

    def __iter__(self) -> Iterator[AnyStr]:
        while True:
            line = self.readline()
            if line is None:
                return
            yield line


def read_lines(stream: IO[AnyStr], buffer_size: int = BUFFER_SIZE) -> Iterator[AnyStr]:
    """Yield every line of *stream*, reading *buffer_size* units at a time."""
    yield from LineReader(stream, buffer_size)