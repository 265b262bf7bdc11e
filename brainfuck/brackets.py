"""Bracket Matcher — locate the partner of a loop instruction.

The default strategy rescans the program text every time a jump is taken,
tracking nesting depth.  build_jump_table() is the separate, opt-in
variant that pairs every bracket once up front.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum

from .instructions import Opcode
from .vm_types import Program

logger = logging.getLogger(__name__)


class Direction(Enum):
    FORWARD = 1
    BACKWARD = -1


@dataclass(frozen=True)
class BracketMatch:
    """Result of a bracket search."""

    found: bool
    offset: int = -1

    @classmethod
    def at(cls, offset: int) -> BracketMatch:
        return cls(found=True, offset=offset)

    @classmethod
    def not_found(cls) -> BracketMatch:
        return cls(found=False)


def match_bracket(program: Program, start: int, direction: Direction) -> BracketMatch:
    """Scan from *start* in *direction* for the partner bracket.

    Each '[' visited adds one to the depth and each ']' subtracts one,
    starting with the bracket at *start*; the partner is where the depth
    returns to zero.

    Args:
        program: The program being executed.
        start: Offset of a '[' or ']'.
        direction: FORWARD from an open bracket, BACKWARD from a close.

    Returns:
        BracketMatch.at(offset) on success, BracketMatch.not_found() when
        the scan runs off either end of the program.
    """
    depth = 0
    offset = start
    step = direction.value
    while offset >= 0:
        value = program.instruction_at(offset)
        if value is None:
            break
        if value == Opcode.LOOP_OPEN:
            depth += 1
        elif value == Opcode.LOOP_CLOSE:
            depth -= 1
        if depth == 0:
            return BracketMatch.at(offset)
        offset += step
    logger.debug("No partner for bracket at offset %d (%s)", start, direction.name)
    return BracketMatch.not_found()


def build_jump_table(program: Program) -> dict[int, int]:
    """Pair every matched bracket in one pass.

    Returns:
        A dict mapping each matched bracket's offset to its partner's
        offset, in both directions.  Unmatched brackets are absent.
    """
    table: dict[int, int] = {}
    open_offsets: list[int] = []
    for offset, value in enumerate(program.code):
        if value == Opcode.LOOP_OPEN:
            open_offsets.append(offset)
        elif value == Opcode.LOOP_CLOSE and open_offsets:
            start = open_offsets.pop()
            table[start] = offset
            table[offset] = start
    return table
