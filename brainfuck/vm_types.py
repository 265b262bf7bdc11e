"""Tape VM — data types (pure data, no dispatch logic)."""

from __future__ import annotations

from array import array
from dataclasses import dataclass, field
from typing import Any

from .errors import AllocationError
from .instructions import SourceLocation
from .position import locate

# ── Instruction buffer ──────────────────────────────────────────


@dataclass(frozen=True)
class Program:
    """Immutable program text with an explicit end."""

    code: bytes
    source_name: str = "<stdin>"

    def __len__(self) -> int:
        return len(self.code)

    def instruction_at(self, offset: int) -> int | None:
        """Return the byte at *offset*, or None once the end is reached."""
        if offset < 0:
            raise IndexError(f"offset {offset} is before the start of the program")
        if offset >= len(self.code):
            return None
        return self.code[offset]

    def locate(self, offset: int) -> SourceLocation:
        return locate(self.code, offset)


# ── Data segment ────────────────────────────────────────────────


class DataSegment:
    """Fixed-size tape of signed 8-bit cells.

    Indices outside [0, size) are only reached with bounds checking off;
    they read as zero and are kept in a sparse overflow map.
    """

    def __init__(self, size: int):
        if size <= 0:
            raise ValueError(f"data segment size must be positive, got {size}")
        try:
            self._cells = array("b", [0]) * size
        except (MemoryError, OverflowError) as exc:
            raise AllocationError(f"{size} cells") from exc
        self._overflow: dict[int, int] = {}

    @property
    def size(self) -> int:
        return len(self._cells)

    def in_bounds(self, index: int) -> bool:
        return 0 <= index < len(self._cells)

    def __len__(self) -> int:
        return len(self._cells)

    def __getitem__(self, index: int) -> int:
        if 0 <= index < len(self._cells):
            return self._cells[index]
        return self._overflow.get(index, 0)

    def __setitem__(self, index: int, value: int):
        if 0 <= index < len(self._cells):
            self._cells[index] = value
        else:
            self._overflow[index] = value

    def snapshot(self, start: int = 0, stop: int | None = None) -> list[int]:
        """Copy of the in-bounds cells in [start, stop)."""
        return self._cells[start:stop].tolist()

    @property
    def overflow(self) -> dict[int, int]:
        return dict(self._overflow)


# ── Machine state ───────────────────────────────────────────────


@dataclass
class MachineState:
    data: DataSegment
    instruction_cursor: int = 0
    data_cursor: int = 0
    steps: int = 0
    jumps: int = 0
    bytes_read: int = 0
    bytes_written: int = 0

    @property
    def current_cell(self) -> int:
        return self.data[self.data_cursor]

    def to_dict(self, window: int = 16) -> dict:
        d: dict[str, Any] = {
            "instruction_cursor": self.instruction_cursor,
            "data_cursor": self.data_cursor,
            "cells": self.data.snapshot(0, window),
            "steps": self.steps,
        }
        overflow = self.data.overflow
        if overflow:
            d["overflow"] = overflow
        return d
