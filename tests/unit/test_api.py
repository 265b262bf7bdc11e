"""Tests for the composable API functions in brainfuck.api."""

from brainfuck.api import (
    RunResult,
    as_program,
    format_outcome,
    instruction_stats,
    run_source,
    trace_source,
)
from brainfuck.errors import NoMatchForOpenBracket
from brainfuck.run_types import EngineConfig, RunOutcome
from brainfuck.trace_types import ExecutionTrace

PRINT_A = "[-]" + "+" * 65 + "."


class TestAsProgram:
    def test_str_is_utf8_encoded(self):
        assert as_program("+é").code == "+é".encode("utf-8")

    def test_bytes_pass_through(self):
        program = as_program(b"+-", source_name="demo")
        assert program.code == b"+-"
        assert program.source_name == "demo"


class TestRunSource:
    def test_returns_run_result(self):
        result = run_source(PRINT_A)
        assert isinstance(result, RunResult)
        assert result.outcome.succeeded
        assert result.output == b"A"

    def test_input_data(self):
        result = run_source(",+.,+.", input_data=b"ab")
        assert result.output == b"bc"

    def test_config_is_applied(self):
        result = run_source("<", config=EngineConfig(bounds_check=True))
        assert not result.outcome.succeeded
        assert result.state.data_cursor == 0

    def test_each_call_uses_a_fresh_segment(self):
        first = run_source("+++")
        second = run_source("+++")
        assert first.state.current_cell == second.state.current_cell == 3


class TestTraceSource:
    def test_returns_trace(self):
        trace = trace_source("+.")
        assert isinstance(trace, ExecutionTrace)
        assert len(trace.steps) == 2
        assert trace.outcome.succeeded


class TestFormatOutcome:
    def test_success_is_empty(self):
        assert format_outcome("+", RunOutcome.success()) == ""

    def test_failure_message(self):
        outcome = run_source("[").outcome
        assert isinstance(outcome.error, NoMatchForOpenBracket)
        assert format_outcome("[", outcome) == (
            "Error: No match for opening bracket at 1:1 (code: '[' data: '0')"
        )


class TestInstructionStats:
    def test_counts(self):
        assert instruction_stats(PRINT_A) == {
            "LOOP_OPEN": 1,
            "LOOP_CLOSE": 1,
            "DECREMENT": 1,
            "INCREMENT": 65,
            "OUTPUT": 1,
        }
