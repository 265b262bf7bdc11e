"""Position Locator — maps a buffer offset to a row/column pair."""

from __future__ import annotations

from .constants import LINE_BREAK
from .instructions import SourceLocation


def locate(code: bytes, offset: int) -> SourceLocation:
    """Return the 1-based row and column of *offset* in *code*.

    Every byte before *offset* advances the column; a line break resets
    the column to 1 and starts the next row.

    Args:
        code: The program text.
        offset: Offset of the instruction to locate.

    Returns:
        A SourceLocation with 1-based row and column.
    """
    row, column = 1, 1
    for value in code[:offset]:
        column += 1
        if value == LINE_BREAK:
            row += 1
            column = 1
    return SourceLocation(row=row, column=column)
