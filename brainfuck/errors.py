"""Error types — runtime halts as tagged values, setup failures as exceptions."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

# ── Runtime errors (carried inside a RunOutcome) ────────────────


@dataclass(frozen=True)
class RunError:
    """A terminal runtime error.

    offset is the instruction cursor at the moment of the halt, instruction
    the byte found there, cell the value under the data cursor.
    """

    offset: int
    instruction: int
    cell: int

    message: ClassVar[str] = ""

    @property
    def kind(self) -> str:
        return type(self).__name__

    def to_dict(self) -> dict:
        return {
            "kind": self.kind,
            "message": self.message,
            "offset": self.offset,
            "instruction": chr(self.instruction),
            "cell": self.cell,
        }


class IndexAboveSegment(RunError):
    message = "Indexing above the data segment"


class IndexBelowSegment(RunError):
    message = "Indexing below the data segment"


class WrapOver(RunError):
    message = "Data cell value wraps over"


class WrapUnder(RunError):
    message = "Data cell value wraps under"


class NoMatchForOpenBracket(RunError):
    message = "No match for opening bracket"


class NoMatchForCloseBracket(RunError):
    message = "No match for closing bracket"


class UnknownInstruction(RunError):
    message = "Unknown command"


RUN_ERROR_KINDS: tuple[type[RunError], ...] = (
    IndexAboveSegment,
    IndexBelowSegment,
    WrapOver,
    WrapUnder,
    NoMatchForOpenBracket,
    NoMatchForCloseBracket,
    UnknownInstruction,
)


# ── Setup errors (raised before execution starts) ───────────────


class BrainfuckError(Exception):
    """Base class for failures that prevent a run from starting."""

    message = "Interpreter setup failed"

    def __str__(self) -> str:
        detail = super().__str__()
        return f"{self.message} ({detail})" if detail else self.message


class UsageError(BrainfuckError):
    message = "Invalid command line arguments"


class FileReadError(BrainfuckError):
    message = "Reading file failed!"


class AllocationError(BrainfuckError):
    message = "Memory allocation failed!"


class NoCodeError(BrainfuckError):
    message = "No code to be interpreted!"
