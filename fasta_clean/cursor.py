"""Sequential byte access over binary streams."""

from __future__ import annotations

from typing import BinaryIO, Union

from .errors import InputReadError, OutputWriteError

DEFAULT_CHUNK_SIZE = 64 * 1024


class _EndOfInput:
    __slots__ = ()

    def __repr__(self) -> str:
        return "END_OF_INPUT"


END_OF_INPUT = _EndOfInput()

ReadOutcome = Union[int, _EndOfInput]


class ByteCursor:
    """Hand out one byte per call from a binary source.

    The source is read in chunks, but callers only ever see a single byte,
    ``END_OF_INPUT`` once the stream is exhausted, or an ``InputReadError``.
    """

    def __init__(self, source: BinaryIO, chunk_size: int = DEFAULT_CHUNK_SIZE) -> None:
        if chunk_size <= 0:
            raise ValueError(f"chunk_size must be positive, got {chunk_size}")
        self._source = source
        self._chunk_size = chunk_size
        self._buffer = b""
        self._position = 0
        self._exhausted = False
        self.offset = 0

    def next(self) -> ReadOutcome:
        if self._position >= len(self._buffer):
            if self._exhausted or not self._fill():
                return END_OF_INPUT
        byte = self._buffer[self._position]
        self._position += 1
        self.offset += 1
        return byte

    def _fill(self) -> bool:
        try:
            chunk = self._source.read(self._chunk_size)
        except OSError as exc:
            raise InputReadError(f"read error after {self.offset} bytes: {exc}") from exc
        if not chunk:
            self._exhausted = True
            return False
        self._buffer = chunk
        self._position = 0
        return True


class ByteSink:
    """Forward writes to a binary target, counting bytes written."""

    def __init__(self, target: BinaryIO) -> None:
        self._target = target
        self.bytes_written = 0

    def write(self, data: bytes) -> None:
        try:
            self._target.write(data)
        except OSError as exc:
            raise OutputWriteError(f"write error after {self.bytes_written} bytes: {exc}") from exc
        self.bytes_written += len(data)
