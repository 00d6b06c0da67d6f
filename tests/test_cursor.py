import io

import pytest

from fasta_clean.cursor import END_OF_INPUT, ByteCursor, ByteSink
from fasta_clean.errors import InputReadError, OutputWriteError


class _BrokenSource:
    def read(self, size: int = -1) -> bytes:
        raise OSError("unreadable")


@pytest.mark.parametrize("chunk_size", [1, 2, 5, 1024])
def test_cursor_yields_each_byte_then_end_of_input(chunk_size: int) -> None:
    cursor = ByteCursor(io.BytesIO(b">ab\n"), chunk_size=chunk_size)
    values = [cursor.next() for _ in range(4)]
    assert values == [ord(">"), ord("a"), ord("b"), ord("\n")]
    assert cursor.next() is END_OF_INPUT
    assert cursor.next() is END_OF_INPUT
    assert cursor.offset == 4


def test_cursor_on_empty_source() -> None:
    cursor = ByteCursor(io.BytesIO(b""))
    assert cursor.next() is END_OF_INPUT
    assert cursor.offset == 0


def test_cursor_wraps_read_errors() -> None:
    cursor = ByteCursor(_BrokenSource())
    with pytest.raises(InputReadError) as excinfo:
        cursor.next()
    assert "unreadable" in str(excinfo.value)


def test_cursor_rejects_non_positive_chunk_size() -> None:
    with pytest.raises(ValueError):
        ByteCursor(io.BytesIO(b""), chunk_size=0)


def test_sink_counts_bytes() -> None:
    target = io.BytesIO()
    sink = ByteSink(target)
    sink.write(b">h\n")
    sink.write(b"A")
    assert sink.bytes_written == 4
    assert target.getvalue() == b">h\nA"


class _FullDisk:
    def write(self, data: bytes) -> int:
        raise OSError("no space left on device")


def test_sink_wraps_write_errors() -> None:
    sink = ByteSink(_FullDisk())
    with pytest.raises(OutputWriteError):
        sink.write(b"A")
