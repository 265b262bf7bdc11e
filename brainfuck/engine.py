"""Execution Engine — the instruction dispatch loop."""

from __future__ import annotations

import logging
from typing import Callable

from .brackets import Direction, build_jump_table, match_bracket
from .constants import ALLOWED_NON_INSTRUCTIONS, CELL_MAX, CELL_MIN, EOF_CELL_VALUE
from .errors import (
    IndexAboveSegment,
    IndexBelowSegment,
    NoMatchForCloseBracket,
    NoMatchForOpenBracket,
    RunError,
    UnknownInstruction,
    WrapOver,
    WrapUnder,
)
from .instructions import Opcode
from .program_io import ProgramIO, StreamIO
from .run_types import EngineConfig, ExecutionStats, MatchStrategy, RunOutcome
from .trace_types import ExecutionTrace, TraceStep
from .vm_types import DataSegment, MachineState, Program

logger = logging.getLogger(__name__)

# A handler returns the error kind that halts the run, or None to continue.
Handler = Callable[[int], "type[RunError] | None"]


def wrap_cell(value: int) -> int:
    """Two's-complement wraparound into the signed 8-bit cell range."""
    return ((value - CELL_MIN) & 0xFF) + CELL_MIN


class Engine:
    """Runs one program against one freshly allocated data segment."""

    def __init__(self, program: Program, config: EngineConfig, io: ProgramIO):
        self.program = program
        self.config = config
        self.io = io
        self.state = MachineState(data=DataSegment(config.data_size))
        self._jump_table: dict[int, int] | None = None
        if config.match_strategy == MatchStrategy.JUMP_TABLE:
            self._jump_table = build_jump_table(program)
        self._dispatch: dict[int, Handler] = {
            Opcode.MOVE_RIGHT: self._move_right,
            Opcode.MOVE_LEFT: self._move_left,
            Opcode.INCREMENT: self._increment,
            Opcode.DECREMENT: self._decrement,
            Opcode.LOOP_OPEN: self._loop_open,
            Opcode.LOOP_CLOSE: self._loop_close,
            Opcode.OUTPUT: self._output,
            Opcode.INPUT: self._input,
        }

    @property
    def halted(self) -> bool:
        return self.program.instruction_at(self.state.instruction_cursor) is None

    def step(self) -> type[RunError] | None:
        """Dispatch the instruction under the cursor and advance past it.

        On failure the cursor stays on the offending instruction.
        """
        state = self.state
        value = self.program.instruction_at(state.instruction_cursor)
        failure = self._dispatch.get(value, self._comment)(value)
        if failure is not None:
            return failure
        state.instruction_cursor += 1
        state.steps += 1
        return None

    def run(self, on_step: Callable[[int, int], None] | None = None) -> RunOutcome:
        """Step until the end of the program or the first error.

        Args:
            on_step: Called with (offset, instruction) after every
                completed step.
        """
        state = self.state
        verbose = logger.isEnabledFor(logging.DEBUG)
        while not self.halted:
            offset = state.instruction_cursor
            value = self.program.code[offset]
            failure = self.step()
            if failure is not None:
                return self._fail(failure)
            if verbose:
                logger.debug(
                    "@%d %r ip=%d dp=%d cell=%d",
                    offset,
                    chr(value),
                    state.instruction_cursor,
                    state.data_cursor,
                    state.current_cell,
                )
            if on_step is not None:
                on_step(offset, value)
        return RunOutcome.success()

    def stats(self) -> ExecutionStats:
        state = self.state
        return ExecutionStats(
            steps=state.steps,
            jumps=state.jumps,
            bytes_read=state.bytes_read,
            bytes_written=state.bytes_written,
        )

    def _fail(self, kind: type[RunError]) -> RunOutcome:
        state = self.state
        error = kind(
            offset=state.instruction_cursor,
            instruction=self.program.code[state.instruction_cursor],
            cell=state.current_cell,
        )
        logger.debug("Halted: %s at offset %d", error.kind, error.offset)
        return RunOutcome.failure(error)

    # ── Instruction handlers ────────────────────────────────────

    def _move_right(self, value: int) -> type[RunError] | None:
        state = self.state
        if self.config.bounds_check and not state.data.in_bounds(
            state.data_cursor + 1
        ):
            return IndexAboveSegment
        state.data_cursor += 1
        return None

    def _move_left(self, value: int) -> type[RunError] | None:
        state = self.state
        if self.config.bounds_check and not state.data.in_bounds(
            state.data_cursor - 1
        ):
            return IndexBelowSegment
        state.data_cursor -= 1
        return None

    def _increment(self, value: int) -> type[RunError] | None:
        state = self.state
        cell = state.current_cell
        if self.config.wrap_check and cell == CELL_MAX:
            return WrapOver
        state.data[state.data_cursor] = wrap_cell(cell + 1)
        return None

    def _decrement(self, value: int) -> type[RunError] | None:
        state = self.state
        cell = state.current_cell
        if self.config.wrap_check and cell == CELL_MIN:
            return WrapUnder
        state.data[state.data_cursor] = wrap_cell(cell - 1)
        return None

    def _loop_open(self, value: int) -> type[RunError] | None:
        if self.state.current_cell != 0:
            return None
        if not self._jump(Direction.FORWARD):
            return NoMatchForOpenBracket
        return None

    def _loop_close(self, value: int) -> type[RunError] | None:
        if self.state.current_cell == 0:
            return None
        if not self._jump(Direction.BACKWARD):
            return NoMatchForCloseBracket
        return None

    def _output(self, value: int) -> type[RunError] | None:
        state = self.state
        self.io.write_byte(state.current_cell & 0xFF)
        state.bytes_written += 1
        return None

    def _input(self, value: int) -> type[RunError] | None:
        state = self.state
        received = self.io.read_byte()
        if received is None:
            state.data[state.data_cursor] = EOF_CELL_VALUE
        else:
            state.data[state.data_cursor] = wrap_cell(received)
            state.bytes_read += 1
        return None

    def _comment(self, value: int) -> type[RunError] | None:
        if self.config.syntax_check and value not in ALLOWED_NON_INSTRUCTIONS:
            return UnknownInstruction
        return None

    def _jump(self, direction: Direction) -> bool:
        """Move the instruction cursor onto the partner bracket."""
        state = self.state
        if self._jump_table is not None:
            target = self._jump_table.get(state.instruction_cursor)
            if target is None:
                return False
        else:
            match = match_bracket(self.program, state.instruction_cursor, direction)
            if not match.found:
                return False
            target = match.offset
        state.instruction_cursor = target
        state.jumps += 1
        return True


def execute(
    program: Program,
    config: EngineConfig = EngineConfig(),
    io: ProgramIO | None = None,
) -> tuple[MachineState, RunOutcome]:
    """Execute *program* against a freshly allocated data segment.

    Args:
        program: The instruction buffer.
        config: Checks and data segment size.
        io: Byte input/output; defaults to the process's stdin/stdout.

    Returns:
        Tuple of (final MachineState, RunOutcome).
    """
    engine = Engine(program, config, io if io is not None else StreamIO())
    outcome = engine.run()
    return engine.state, outcome


def execute_traced(
    program: Program,
    config: EngineConfig = EngineConfig(),
    io: ProgramIO | None = None,
) -> tuple[MachineState, ExecutionTrace]:
    """Execute *program* and record every completed step.

    Identical to execute() but snapshots the cursors and current cell
    after each instruction so callers can replay the run.

    Returns:
        Tuple of (final MachineState, ExecutionTrace).
    """
    engine = Engine(program, config, io if io is not None else StreamIO())
    state = engine.state
    steps: list[TraceStep] = []

    def record(offset: int, value: int):
        steps.append(
            TraceStep(
                step_index=len(steps),
                offset=offset,
                instruction=value,
                instruction_cursor=state.instruction_cursor,
                data_cursor=state.data_cursor,
                cell=state.current_cell,
            )
        )

    outcome = engine.run(on_step=record)
    trace = ExecutionTrace(steps=steps, stats=engine.stats(), outcome=outcome)
    return state, trace
