"""Reading a stream one line at a time through a fixed-size read buffer."""

from __future__ import annotations

from collections.abc import Iterator
from typing import IO, AnyStr, Generic

BUFFER_SIZE = 42


def _newline_index(data: str | bytes) -> int:
    """Return the position of the first newline in ``data``, or -1."""
    if isinstance(data, (bytes, bytearray)):
        return data.find(b"\n")
    return data.find("\n")


class LineReader(Generic[AnyStr]):
    """Split a text or binary stream into lines, newline kept.

    The stream is read ``buffer_size`` units at a time until a newline shows up
    or a read comes back empty. The last line may lack a newline.
    """

    def __init__(self, stream: IO[AnyStr], buffer_size: int = BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError("buffer_size must be positive")
        self._stream = stream
        self._buffer_size = buffer_size
        self._pending: AnyStr | None = None

    def readline(self) -> AnyStr | None:
        """Return the next line, or None once the stream is exhausted."""
        pending = self._pending
        while pending is None or _newline_index(pending) == -1:
            chunk = self._stream.read(self._buffer_size)
            if not chunk:
                break
            pending = chunk if pending is None else pending + chunk
        if not pending:
            self._pending = None
            return None
        cut = _newline_index(pending)
        if cut == -1:
            self._pending = None
            return pending
        self._pending = pending[cut + 1:] or None
        return pending[: cut + 1]

    def __iter__(self) -> Iterator[AnyStr]:
        while (line := self.readline()) is not None:
            yield line


def read_lines(stream: IO[AnyStr], buffer_size: int = BUFFER_SIZE) -> list[AnyStr]:
    """Read every remaining line of ``stream``."""
    return list(LineReader(stream, buffer_size))