"""Brainfuck tape interpreter package."""

from .run import run  # noqa: F401
from .api import (  # noqa: F401
    run_source,
    trace_source,
    format_outcome,
    instruction_stats,
)
from .run_types import EngineConfig, MatchStrategy, RunOutcome  # noqa: F401
