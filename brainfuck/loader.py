"""Program loading — read the instruction buffer from a file or stream."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import BinaryIO

from .errors import FileReadError
from .vm_types import Program

logger = logging.getLogger(__name__)


def load_file(path: str | Path) -> Program:
    """Read the whole file at *path* as program text.

    Raises:
        FileReadError: The file is missing or unreadable.
    """
    try:
        code = Path(path).read_bytes()
    except OSError as exc:
        raise FileReadError(str(path)) from exc
    logger.info("Read %d bytes from %s", len(code), path)
    return Program(code=code, source_name=str(path))


def load_stream(stream: BinaryIO, source_name: str = "<stdin>") -> Program:
    """Read *stream* up to end-of-stream as program text."""
    code = stream.read()
    logger.info("Read %d bytes from %s", len(code), source_name)
    return Program(code=code, source_name=source_name)
