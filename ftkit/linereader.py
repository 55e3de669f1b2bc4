"""Reading a stream line by line through a fixed-size read buffer."""

from __future__ import annotations

from collections.abc import Iterator
from typing import IO, AnyStr, Generic

DEFAULT_BUFFER_SIZE = 42


class LineReader(Generic[AnyStr]):
    """Return one line at a time from a text or binary stream.

    The stream is read in chunks of buffer_size. Each line keeps its
    trailing newline; the last line may have none. At end of input
    read_line returns None.
    """

    def __init__(self, stream: IO[AnyStr], buffer_size: int = DEFAULT_BUFFER_SIZE) -> None:
        if buffer_size < 1:
            raise ValueError("buffer_size must be at least 1")
        self._stream = stream
        self._buffer_size = buffer_size
        self._pending: AnyStr | None = None

    @staticmethod
    def _newline(chunk: AnyStr) -> AnyStr:
        return b"\n" if isinstance(chunk, (bytes, bytearray)) else "\n"  # type: ignore[return-value]

    def read_line(self) -> AnyStr | None:
        """Return the next line, or None when the stream is exhausted."""
        parts: list[AnyStr] = []
        while True:
            if not self._pending:
                chunk = self._stream.read(self._buffer_size)
                if not chunk:
                    self._pending = None
                    break
                self._pending = chunk
            pending = self._pending
            idx = pending.find(self._newline(pending))
            if idx >= 0:
                parts.append(pending[: idx + 1])
                self._pending = pending[idx + 1:]
                break
            parts.append(pending)
            self._pending = None
        if not parts:
            return None
        return parts[0][:0].join(parts)

    def __iter__(self) -> Iterator[AnyStr]:
        while (line := self.read_line()) is not None:
            yield line