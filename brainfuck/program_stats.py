"""Pure functions for computing statistics over program text."""

from __future__ import annotations

from collections import Counter

from .instructions import Opcode


def count_opcodes(code: bytes) -> dict[str, int]:
    """Return a frequency map of opcode names in *code*.

    Args:
        code: Program text; comment bytes are ignored.

    Returns:
        A dict mapping opcode name strings to their occurrence counts.
        Empty dict when the text holds no instructions.
    """
    counts = Counter(code)
    return {op.name: counts[op.value] for op in Opcode if counts[op.value]}
