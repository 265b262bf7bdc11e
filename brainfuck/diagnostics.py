"""Human-readable messages for failed runs."""

from __future__ import annotations

from .constants import USAGE_TEXT
from .errors import BrainfuckError, NoCodeError, RunError, UsageError
from .vm_types import Program


def format_run_error(program: Program, error: RunError) -> str:
    """Describe a runtime halt with its position, instruction and cell.

    Example: ``Error: No match for opening bracket at 1:1 (code: '[' data: '0')``
    """
    location = program.locate(error.offset)
    return (
        f"Error: {error.message} at {location} "
        f"(code: '{chr(error.instruction)}' data: '{error.cell}')"
    )


def format_setup_error(error: BrainfuckError) -> str:
    if isinstance(error, UsageError):
        return USAGE_TEXT
    if isinstance(error, NoCodeError):
        return error.message
    return f"Error: {error.message}"
