"""Single-pass FASTA normalization automaton."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import BinaryIO, Callable, Dict, Optional, Union

from .alphabet import RECORD_START, canonical_base, is_ascii_whitespace, is_line_break
from .cursor import DEFAULT_CHUNK_SIZE, END_OF_INPUT, ByteCursor, ByteSink, ReadOutcome
from .errors import MalformedFastaError
from .logging_utils import get_logger
from .states import (
    Header,
    HeaderBoundary,
    Init,
    Sequence,
    SequenceBoundary,
    SequenceBoundaryMeasuring,
    SequenceMeasuring,
    State,
)

NEWLINE = b"\n"
RECORD_MARKER = b">"


@dataclass(slots=True)
class NormalizationStats:
    records: int = 0
    line_width: Optional[int] = None
    bases_kept: int = 0
    bytes_dropped: int = 0
    bytes_read: int = 0
    bytes_written: int = 0


class FastaNormalizer:
    """Drive the state machine from a cursor into a sink.

    Handlers take the current state and the next read outcome and return the
    following state, or ``None`` once the input is exhausted.
    """

    def __init__(self, cursor: ByteCursor, sink: ByteSink, logger: Optional[logging.Logger] = None) -> None:
        self.cursor = cursor
        self.sink = sink
        self.logger = logger or get_logger()
        self.stats = NormalizationStats()
        self._handlers: Dict[type, Callable[..., Optional[State]]] = {
            Init: self._init,
            Header: self._header,
            HeaderBoundary: self._header_boundary,
            SequenceMeasuring: self._sequence_measuring,
            SequenceBoundaryMeasuring: self._sequence_boundary,
            Sequence: self._sequence,
            SequenceBoundary: self._sequence_boundary,
        }

    def run(self) -> NormalizationStats:
        state: Optional[State] = Init()
        while state is not None:
            outcome = self.cursor.next()
            state = self._handlers[type(state)](state, outcome)
        self.stats.bytes_read = self.cursor.offset
        self.stats.bytes_written = self.sink.bytes_written
        return self.stats

    def _init(self, state: Init, outcome: ReadOutcome) -> Optional[State]:
        if outcome is END_OF_INPUT:
            return None
        if outcome == RECORD_START:
            self._start_record()
            return Header(width=None)
        if is_ascii_whitespace(outcome):
            return state
        raise MalformedFastaError("non-whitespace content before the first record", self.cursor.offset - 1)

    def _header(self, state: Header, outcome: ReadOutcome) -> Optional[State]:
        if outcome is END_OF_INPUT:
            return None
        if is_line_break(outcome):
            self.sink.write(NEWLINE)
            return HeaderBoundary(width=state.width)
        self.sink.write(bytes((outcome,)))
        return state

    def _header_boundary(self, state: HeaderBoundary, outcome: ReadOutcome) -> Optional[State]:
        if outcome is END_OF_INPUT:
            return None
        if is_line_break(outcome):
            return state
        if outcome == RECORD_START:
            # Empty record: no sequence line, no blank line.
            self._start_record()
            return Header(width=state.width)
        out_count = self._emit_base(outcome, 0)
        if state.width is None:
            return SequenceMeasuring(raw_count=1, out_count=out_count)
        return Sequence(width=state.width, out_count=out_count)

    def _sequence_measuring(self, state: SequenceMeasuring, outcome: ReadOutcome) -> Optional[State]:
        if outcome is END_OF_INPUT:
            self.sink.write(NEWLINE)
            return None
        if is_line_break(outcome):
            width = state.raw_count
            self.stats.line_width = width
            self.logger.debug("Found FASTA line width %d", width)
            out_count = state.out_count
            if out_count == width:
                self.sink.write(NEWLINE)
                out_count = 0
            return SequenceBoundaryMeasuring(width=width, out_count=out_count)
        if outcome == RECORD_START:
            raise self._misplaced_record_start()
        return SequenceMeasuring(
            raw_count=state.raw_count + 1,
            out_count=self._emit_base(outcome, state.out_count),
        )

    def _sequence_boundary(
        self, state: Union[SequenceBoundaryMeasuring, SequenceBoundary], outcome: ReadOutcome
    ) -> Optional[State]:
        """Handle both boundary states; the width is fixed from here on."""

        if outcome is END_OF_INPUT:
            self.sink.write(NEWLINE)
            return None
        if is_line_break(outcome):
            return state
        if outcome == RECORD_START:
            if state.out_count > 0:
                self.sink.write(NEWLINE)
            self._start_record()
            return Header(width=state.width)
        return self._continue_sequence(state.width, state.out_count, outcome)

    def _sequence(self, state: Sequence, outcome: ReadOutcome) -> Optional[State]:
        if outcome is END_OF_INPUT:
            # Unconditional, even when the current row is empty.
            self.sink.write(NEWLINE)
            return None
        if is_line_break(outcome):
            out_count = state.out_count
            if out_count == state.width:
                self.sink.write(NEWLINE)
                out_count = 0
            return SequenceBoundary(width=state.width, out_count=out_count)
        if outcome == RECORD_START:
            raise self._misplaced_record_start()
        return self._continue_sequence(state.width, state.out_count, outcome)

    def _continue_sequence(self, width: int, out_count: int, byte: int) -> Sequence:
        if out_count == width:
            self.sink.write(NEWLINE)
            out_count = 0
        return Sequence(width=width, out_count=self._emit_base(byte, out_count))

    def _emit_base(self, byte: int, out_count: int) -> int:
        base = canonical_base(byte)
        if base is None:
            self.stats.bytes_dropped += 1
            return out_count
        self.sink.write(bytes((base,)))
        self.stats.bases_kept += 1
        return out_count + 1

    def _start_record(self) -> None:
        self.sink.write(RECORD_MARKER)
        self.stats.records += 1

    def _misplaced_record_start(self) -> MalformedFastaError:
        return MalformedFastaError("'>' encountered within a sequence", self.cursor.offset - 1)


def normalize_stream(
    source: BinaryIO,
    target: BinaryIO,
    chunk_size: int = DEFAULT_CHUNK_SIZE,
    logger: Optional[logging.Logger] = None,
) -> NormalizationStats:
    """Normalize FASTA bytes from ``source`` into ``target`` in one forward pass.

    Sequence bytes are uppercased and everything except A/C/G/T is dropped.
    Output lines are wrapped to the raw length of the first sequence line in
    the file. Raises ``MalformedFastaError`` on layout errors and a
    ``StreamError`` subclass on I/O failures; output written before the
    failure is left as is.
    """

    normalizer = FastaNormalizer(ByteCursor(source, chunk_size), ByteSink(target), logger)
    return normalizer.run()
