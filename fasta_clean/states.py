"""Phases of the normalization automaton.

Each phase is its own frozen dataclass carrying only the counters that phase
needs. ``width`` is the inferred wrap width; ``out_count`` is the number of
bases already written on the current output line.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union


@dataclass(frozen=True, slots=True)
class Init:
    """Nothing but whitespace seen so far."""


@dataclass(frozen=True, slots=True)
class Header:
    width: Optional[int]


@dataclass(frozen=True, slots=True)
class HeaderBoundary:
    width: Optional[int]


@dataclass(frozen=True, slots=True)
class SequenceMeasuring:
    """First sequence line of the file; every byte counts toward the width."""

    raw_count: int
    out_count: int


@dataclass(frozen=True, slots=True)
class SequenceBoundaryMeasuring:
    width: int
    out_count: int


@dataclass(frozen=True, slots=True)
class Sequence:
    width: int
    out_count: int


@dataclass(frozen=True, slots=True)
class SequenceBoundary:
    width: int
    out_count: int


State = Union[
    Init,
    Header,
    HeaderBoundary,
    SequenceMeasuring,
    SequenceBoundaryMeasuring,
    Sequence,
    SequenceBoundary,
]
