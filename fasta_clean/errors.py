"""Exceptions raised while cleaning FASTA streams."""

from __future__ import annotations


class FastaCleanError(Exception):
    """Base class for all fatal cleaning errors."""


class MalformedFastaError(FastaCleanError):
    """Input does not follow the FASTA layout the cleaner accepts."""

    def __init__(self, message: str, offset: int) -> None:
        super().__init__(f"{message} (byte offset {offset})")
        self.reason = message
        self.offset = offset


class StreamError(FastaCleanError):
    """An I/O failure on the input or output stream."""


class InputReadError(StreamError):
    pass


class OutputWriteError(StreamError):
    pass
