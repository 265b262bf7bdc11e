"""Instruction set — the eight tape instructions and source positions."""

from __future__ import annotations

from enum import IntEnum

from pydantic import BaseModel


class Opcode(IntEnum):
    # Data cursor motion
    MOVE_RIGHT = ord(">")
    MOVE_LEFT = ord("<")
    # Cell arithmetic
    INCREMENT = ord("+")
    DECREMENT = ord("-")
    # Control flow
    LOOP_OPEN = ord("[")
    LOOP_CLOSE = ord("]")
    # I/O
    OUTPUT = ord(".")
    INPUT = ord(",")


class SourceLocation(BaseModel):
    """1-based row/column of an instruction in the program text."""

    row: int
    column: int

    def __str__(self) -> str:
        return f"{self.row}:{self.column}"
