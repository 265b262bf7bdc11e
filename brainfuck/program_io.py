"""Byte-level input/output used by the ',' and '.' instructions."""

from __future__ import annotations

import sys
from abc import ABC, abstractmethod
from typing import BinaryIO


class ProgramIO(ABC):
    """Abstract base for the program's input and output channels."""

    @abstractmethod
    def read_byte(self) -> int | None:
        """Return the next input byte (0-255), or None at end of input."""
        ...

    @abstractmethod
    def write_byte(self, value: int) -> None:
        """Emit one output byte (0-255)."""
        ...


class StreamIO(ProgramIO):
    """Reads and writes binary streams, flushing after every byte."""

    def __init__(self, source: BinaryIO | None = None, sink: BinaryIO | None = None):
        self._source = source if source is not None else sys.stdin.buffer
        self._sink = sink if sink is not None else sys.stdout.buffer

    def read_byte(self) -> int | None:
        chunk = self._source.read(1)
        if not chunk:
            return None
        return chunk[0]

    def write_byte(self, value: int) -> None:
        self._sink.write(bytes((value,)))
        self._sink.flush()


class BufferIO(ProgramIO):
    """In-memory input and collected output."""

    def __init__(self, input_data: bytes = b""):
        self._input = input_data
        self._position = 0
        self._output = bytearray()

    def read_byte(self) -> int | None:
        if self._position >= len(self._input):
            return None
        value = self._input[self._position]
        self._position += 1
        return value

    def write_byte(self, value: int) -> None:
        self._output.append(value)

    @property
    def output(self) -> bytes:
        return bytes(self._output)
