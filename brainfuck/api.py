"""Composable API functions for running programs without the CLI.

All functions accept program text as bytes or str and use in-memory I/O,
so they are safe to call from tests and other tools.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from .diagnostics import format_run_error
from .engine import execute, execute_traced
from .program_io import BufferIO
from .program_stats import count_opcodes
from .run_types import EngineConfig, RunOutcome
from .trace_types import ExecutionTrace
from .vm_types import MachineState, Program

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RunResult:
    outcome: RunOutcome
    output: bytes
    state: MachineState


def as_program(code: bytes | str, source_name: str = "<string>") -> Program:
    if isinstance(code, str):
        code = code.encode("utf-8")
    return Program(code=code, source_name=source_name)


def run_source(
    code: bytes | str,
    input_data: bytes = b"",
    config: EngineConfig = EngineConfig(),
) -> RunResult:
    """Execute program text with in-memory input and collect its output.

    Args:
        code: Program text.
        input_data: Bytes consumed by ',' in order.
        config: Engine configuration.

    Returns:
        A RunResult with the outcome, the output bytes and the final state.
    """
    io = BufferIO(input_data)
    state, outcome = execute(as_program(code), config, io)
    return RunResult(outcome=outcome, output=io.output, state=state)


def trace_source(
    code: bytes | str,
    input_data: bytes = b"",
    config: EngineConfig = EngineConfig(),
) -> ExecutionTrace:
    """Execute program text and return the per-step trace."""
    _, trace = execute_traced(as_program(code), config, BufferIO(input_data))
    logger.info("Traced %d steps", len(trace.steps))
    return trace


def format_outcome(code: bytes | str, outcome: RunOutcome) -> str:
    """Diagnostic line for a failed outcome, or an empty string on success."""
    if outcome.succeeded:
        return ""
    return format_run_error(as_program(code), outcome.error)


def instruction_stats(code: bytes | str) -> dict[str, int]:
    """Opcode frequencies of program text."""
    return count_opcodes(as_program(code).code)
