"""Orchestrator — run() entry point."""

from __future__ import annotations

import logging
import time

from .engine import Engine
from .errors import NoCodeError
from .program_io import ProgramIO, StreamIO
from .run_types import EngineConfig, RunOutcome
from .vm_types import Program

logger = logging.getLogger(__name__)


def run(
    program: Program,
    config: EngineConfig = EngineConfig(),
    io: ProgramIO | None = None,
) -> RunOutcome:
    """End-to-end: allocate the data segment, execute, report.

    Args:
        program: The instruction buffer.
        config: Checks, data segment size and bracket match strategy.
        io: Byte input/output; defaults to the process's stdin/stdout.

    Raises:
        NoCodeError: The program is empty.
        AllocationError: The data segment could not be allocated.
    """
    if not program.code:
        raise NoCodeError(program.source_name)

    logger.info(
        "Executing %s (%d bytes, %d cells, %s matching)",
        program.source_name,
        len(program),
        config.data_size,
        config.match_strategy.value,
    )
    start = time.perf_counter()
    engine = Engine(program, config, io if io is not None else StreamIO())
    outcome = engine.run()
    elapsed = time.perf_counter() - start

    logger.info("Finished in %.1fms: %s", elapsed * 1000, engine.stats().report())
    if not outcome.succeeded:
        logger.info("Run halted: %s", outcome.error.to_dict())
    logger.debug("Final state: %s", engine.state.to_dict())
    return outcome
