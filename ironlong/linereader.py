"""Reading a stream one line at a time through a fixed-size read buffer."""

from __future__ import annotations

from typing import IO, AnyStr, Generic, Iterator, Optional

BUFFER_SIZE = 50


class LineReader(Generic[AnyStr]):
    """Return successive lines of a text or binary stream.

    Each line keeps its trailing newline; the last line may lack one. The
    stream is read ``buffer_size`` units at a time, and anything read past
    a newline is kept for the next call.
    """

    def __init__(self, stream: IO[AnyStr], buffer_size: int = BUFFER_SIZE) -> None:
        self._stream = stream
        self._buffer_size = buffer_size
        self._pending: Optional[AnyStr] = None

    def next_line(self) -> Optional[AnyStr]:
        """The next line, or None when the stream is exhausted."""
        if self._buffer_size <= 0:
            return None
        parts: list = []
        while True:
            pending = self._pending
            if pending:
                newline = "\n" if isinstance(pending, str) else b"\n"
                index = pending.find(newline)
                if index >= 0:
                    parts.append(pending[:index + 1])
                    self._pending = pending[index + 1:]
                    break
                parts.append(pending)
                self._pending = pending[:0]
            chunk = self._stream.read(self._buffer_size)
            if not chunk:
                break
            self._pending = chunk
        if not parts:
            return None
        return parts[0][:0].join(parts)

    def __iter__(self) -> Iterator[AnyStr]:
        while True:
            line = self.next_line()
            if line is None:
                return
            yield line


def read_lines(stream: IO[AnyStr], buffer_size: int = BUFFER_SIZE) -> Iterator[AnyStr]:
    """Yield the lines of ``stream`` in order."""
    yield from LineReader(stream, buffer_size)