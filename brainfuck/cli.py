"""Command-line entry point: bf [-f <file> | -d <size> | -b | -w | -s | -j | -q | -v | -h]."""

from __future__ import annotations

import argparse
import logging
import sys

from .constants import (
    DEFAULT_DATA_SIZE,
    EXIT_FAILURE,
    EXIT_SUCCESS,
    HELP_TEXT,
    RUNNING_NOTICE,
    STDIN_PROMPT,
    USAGE_TEXT,
)
from .diagnostics import format_run_error, format_setup_error
from .errors import BrainfuckError, UsageError
from .loader import load_file, load_stream
from .program_io import StreamIO
from .run import run
from .run_types import EngineConfig, MatchStrategy
from .vm_types import Program

logger = logging.getLogger(__name__)

# Flags that consume the following token as their value.
_VALUE_FLAGS = frozenset({"-f", "-d"})


class _ArgumentParser(argparse.ArgumentParser):
    """argparse parser that raises UsageError instead of exiting."""

    def error(self, message):
        raise UsageError(message)


def _data_size(raw: str) -> int:
    try:
        value = int(raw)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid data size: {raw!r}")
    if value <= 0:
        raise argparse.ArgumentTypeError(f"data size must be positive: {raw!r}")
    return value


def build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(prog="bf", add_help=False, allow_abbrev=False)
    parser.add_argument("-f", dest="file", default=None)
    parser.add_argument(
        "-d", dest="data_size", type=_data_size, default=DEFAULT_DATA_SIZE
    )
    parser.add_argument("-b", dest="bounds_check", action="store_true")
    parser.add_argument("-w", dest="wrap_check", action="store_true")
    parser.add_argument("-s", dest="syntax_check", action="store_true")
    parser.add_argument("-j", dest="jump_table", action="store_true")
    parser.add_argument("-q", dest="quiet", action="store_true")
    parser.add_argument("-v", dest="verbose", action="store_true")
    parser.add_argument("-h", dest="show_help", action="store_true")
    return parser


def _normalize_tokens(argv: list[str]) -> list[str]:
    """Validate standalone '-x' tokens and attach each -f/-d value to its flag.

    Attached values ('-f-b') keep argparse from reading a value that
    starts with '-' as another flag; combined flags are rejected.
    """
    tokens: list[str] = []
    pending: str | None = None
    for token in argv:
        if pending is not None:
            tokens.append(pending + token)
            pending = None
            continue
        if len(token) != 2 or token[0] != "-" or not token[1].isalpha():
            raise UsageError(f"unrecognized argument: {token!r}")
        if token in _VALUE_FLAGS:
            pending = token
        else:
            tokens.append(token)
    if pending is not None:
        tokens.append(pending)
    return tokens


def parse_args(argv: list[str]) -> argparse.Namespace:
    """Parse command-line tokens.

    Raises:
        UsageError: Unknown flag, malformed token or missing/invalid value.
    """
    return build_parser().parse_args(_normalize_tokens(argv))


def config_from_args(args: argparse.Namespace) -> EngineConfig:
    return EngineConfig(
        data_size=args.data_size,
        bounds_check=args.bounds_check,
        wrap_check=args.wrap_check,
        syntax_check=args.syntax_check,
        match_strategy=(
            MatchStrategy.JUMP_TABLE if args.jump_table else MatchStrategy.RESCAN
        ),
    )


def _read_program(args: argparse.Namespace) -> Program:
    if args.file:
        return load_file(args.file)
    if not args.quiet:
        print(STDIN_PROMPT, flush=True)
    program = load_stream(sys.stdin.buffer)
    if not args.quiet:
        print(RUNNING_NOTICE, flush=True)
    return program


def main(argv: list[str] | None = None) -> int:
    try:
        args = parse_args(sys.argv[1:] if argv is None else argv)
    except UsageError as exc:
        print(format_setup_error(exc))
        logger.debug("Rejected arguments: %s", exc)
        return EXIT_FAILURE

    if args.show_help:
        print(HELP_TEXT)
        return EXIT_SUCCESS

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s: %(message)s",
    )

    config = config_from_args(args)
    try:
        program = _read_program(args)
        outcome = run(program, config, StreamIO())
    except BrainfuckError as exc:
        logger.debug("Setup failed: %s", exc)
        if not args.quiet:
            print(format_setup_error(exc))
        return EXIT_FAILURE

    if not outcome.succeeded:
        if not args.quiet:
            print(format_run_error(program, outcome.error))
        return EXIT_FAILURE
    return EXIT_SUCCESS


if __name__ == "__main__":
    sys.exit(main())
