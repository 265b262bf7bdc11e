"""Run pipeline data types (pure data, no business logic)."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from pydantic import BaseModel, ConfigDict, PositiveInt

from .constants import DEFAULT_DATA_SIZE
from .errors import RunError


class MatchStrategy(Enum):
    """How loop instructions find their partner bracket."""

    RESCAN = "rescan"
    JUMP_TABLE = "jump_table"


class EngineConfig(BaseModel):
    """Feature toggles and data segment size for one run."""

    model_config = ConfigDict(frozen=True)

    data_size: PositiveInt = DEFAULT_DATA_SIZE
    bounds_check: bool = False
    wrap_check: bool = False
    syntax_check: bool = False
    match_strategy: MatchStrategy = MatchStrategy.RESCAN


@dataclass(frozen=True)
class RunOutcome:
    """Success, or the runtime error that halted the run."""

    error: RunError | None = None

    @property
    def succeeded(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls) -> RunOutcome:
        return cls()

    @classmethod
    def failure(cls, error: RunError) -> RunOutcome:
        return cls(error=error)


@dataclass
class ExecutionStats:
    """Counters gathered while executing a program."""

    steps: int = 0
    jumps: int = 0
    bytes_read: int = 0
    bytes_written: int = 0

    def report(self) -> str:
        return (
            f"{self.steps} steps, {self.jumps} jumps, "
            f"{self.bytes_read} bytes read, {self.bytes_written} bytes written"
        )
