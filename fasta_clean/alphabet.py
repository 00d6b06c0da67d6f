"""Byte classification for FASTA input."""

from __future__ import annotations

from typing import Optional

RECORD_START = ord(">")
LINE_FEED = ord("\n")
CARRIAGE_RETURN = ord("\r")

LINE_BREAKS = frozenset((LINE_FEED, CARRIAGE_RETURN))
# Space, tab, LF, form feed and CR. Vertical tab is not included.
ASCII_WHITESPACE = frozenset(b" \t\n\x0c\r")

_CANONICAL = {ord(base): ord(base.upper()) for base in "ACGTacgt"}


def is_line_break(byte: int) -> bool:
    return byte in LINE_BREAKS


def is_ascii_whitespace(byte: int) -> bool:
    return byte in ASCII_WHITESPACE


def canonical_base(byte: int) -> Optional[int]:
    """Return the uppercase base for A/C/G/T in either case, otherwise None."""

    return _CANONICAL.get(byte)
