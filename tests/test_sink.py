"""Tests for checked output writes."""

import io

import pytest

from b32dec.errors import WriteFailed
from b32dec.sink import SinkWriter


class ShortWriter:
    """Accepts at most ``limit`` bytes per write."""

    def __init__(self, limit: int):
        self.limit = limit
        self.data = bytearray()

    def write(self, b):
        chunk = bytes(b[:self.limit])
        self.data.extend(chunk)
        return len(chunk)


class BrokenWriter:
    def write(self, b):
        raise BrokenPipeError(32, "Broken pipe")

    def flush(self):
        raise BrokenPipeError(32, "Broken pipe")


def test_write_all():
    out = io.BytesIO()
    sink = SinkWriter(out)
    sink.write(b"hello")
    sink.write(b"")
    sink.write(b" world")
    sink.flush()
    assert out.getvalue() == b"hello world"
    assert sink.bytes_written == 11


def test_short_write():
    sink = SinkWriter(ShortWriter(3))
    with pytest.raises(WriteFailed, match="short write") as exc:
        sink.write(b"hello")
    assert exc.value.requested == 5
    assert exc.value.written == 3
    assert sink.bytes_written == 0


def test_write_error():
    sink = SinkWriter(BrokenWriter())
    with pytest.raises(WriteFailed) as exc:
        sink.write(b"hello")
    assert isinstance(exc.value.__cause__, BrokenPipeError)


def test_flush_error():
    sink = SinkWriter(BrokenWriter())
    with pytest.raises(WriteFailed, match="flush"):
        sink.flush()


def test_write_failed_is_oserror():
    assert issubclass(WriteFailed, OSError)
