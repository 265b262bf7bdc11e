"""Trace data types for step-by-step execution replay."""

from __future__ import annotations

from dataclasses import dataclass, field

from .run_types import ExecutionStats, RunOutcome


@dataclass(frozen=True)
class TraceStep:
    """A single dispatched instruction.

    offset and instruction identify what was executed; instruction_cursor,
    data_cursor and cell describe the machine after the step completed.
    """

    step_index: int
    offset: int
    instruction: int
    instruction_cursor: int
    data_cursor: int
    cell: int

    def __str__(self) -> str:
        return (
            f"[{self.step_index}] @{self.offset} {chr(self.instruction)!r} "
            f"-> ip={self.instruction_cursor} dp={self.data_cursor} cell={self.cell}"
        )


@dataclass(frozen=True)
class ExecutionTrace:
    """Complete trace of an execution run.

    Steps only cover instructions that completed; a failing instruction
    appears in the outcome instead.
    """

    steps: list[TraceStep] = field(default_factory=list)
    stats: ExecutionStats = field(default_factory=ExecutionStats)
    outcome: RunOutcome = field(default_factory=RunOutcome.success)
