"""Named constants — eliminates magic bytes and strings across the codebase."""

from __future__ import annotations

DEFAULT_DATA_SIZE = 30000

CELL_MIN = -128
CELL_MAX = 127

# Stored by ',' once the input stream is exhausted.
EOF_CELL_VALUE = -1

LINE_BREAK = ord("\n")

# Bytes accepted by the strict syntax check besides the eight instructions.
ALLOWED_NON_INSTRUCTIONS: frozenset[int] = frozenset({LINE_BREAK})

EXIT_SUCCESS = 0
EXIT_FAILURE = 1

STDIN_PROMPT = "Type in the code (issue ^D to stop):"
RUNNING_NOTICE = "Running the program..."
NO_CODE_MESSAGE = "No code to be interpreted!"

USAGE_TEXT = (
    "Usage: bf [-f <file> | -d <size> | -b | -w | -s | -j | -q | -v | -h]\n"
    "(type 'bf -h' for help)"
)

HELP_TEXT = """\
Brainfuck interpreter

Usage: bf [-f <file> | -d <size> | -b | -w | -s | -j | -q | -v | -h]

  -f <file>    read bf code from file (default is stdin)
  -d <size>    size of the data segment in cells (default 30000)
  -b           enable bounds checking for the data segment
  -w           enable wrap checking for data cells
  -s           enable strict syntax check
  -j           resolve loops with a precomputed jump table
  -q           enable quiet mode
  -v           log every executed instruction to stderr
  -h           this help text
"""
