"""Tests for the byte input/output channels."""

import io

from brainfuck.program_io import BufferIO, StreamIO


class TestBufferIO:
    def test_reads_input_in_order_then_none(self):
        channel = BufferIO(b"ab")
        assert channel.read_byte() == ord("a")
        assert channel.read_byte() == ord("b")
        assert channel.read_byte() is None
        assert channel.read_byte() is None

    def test_collects_output(self):
        channel = BufferIO()
        channel.write_byte(72)
        channel.write_byte(255)
        assert channel.output == b"H\xff"


class FlushCountingStream(io.BytesIO):
    def __init__(self):
        super().__init__()
        self.flushes = 0

    def flush(self):
        self.flushes += 1
        super().flush()


class TestStreamIO:
    def test_reads_one_byte_at_a_time(self):
        channel = StreamIO(source=io.BytesIO(b"xy"), sink=io.BytesIO())
        assert channel.read_byte() == ord("x")
        assert channel.read_byte() == ord("y")
        assert channel.read_byte() is None

    def test_each_write_is_flushed(self):
        sink = FlushCountingStream()
        channel = StreamIO(source=io.BytesIO(), sink=sink)
        channel.write_byte(65)
        channel.write_byte(66)
        assert sink.getvalue() == b"AB"
        assert sink.flushes == 2
