"""Open the byte source and sink for a cleaning run."""

from __future__ import annotations

import contextlib
import sys
from pathlib import Path
from typing import BinaryIO, ContextManager

STDIO_PATH = "-"


def open_source(path: Path | str) -> ContextManager[BinaryIO]:
    """Open ``path`` for binary reading; ``-`` reads stdin and leaves it open."""

    if str(path) == STDIO_PATH:
        return contextlib.nullcontext(sys.stdin.buffer)
    return Path(path).open("rb")


def open_sink(path: Path | str) -> ContextManager[BinaryIO]:
    """Create or truncate ``path`` for binary writing; ``-`` writes stdout."""

    if str(path) == STDIO_PATH:
        return _flushing(sys.stdout.buffer)
    return Path(path).open("wb")


@contextlib.contextmanager
def _flushing(stream: BinaryIO):
    try:
        yield stream
    finally:
        stream.flush()
