"""Command-line interface for puzzlegraph."""

from __future__ import annotations

import argparse
import logging
import sys
from time import perf_counter
from typing import List, Optional

from puzzlegraph.config import RUNNER_CONFIG
from puzzlegraph.days import UnknownDayError, get_solver
from puzzlegraph.grid import read_lines
from puzzlegraph.logging import get_logger, set_global_log_level

logger = get_logger(__name__)


def _format_duration(seconds: float) -> str:
    """Return a concise human-readable duration string.

    Examples:
        0.123 -> "123.0 ms"; 1.234 -> "1.23 s"; 75.2 -> "1m 15.2s".
    """
    if seconds < 1.0:
        return f"{seconds * 1000.0:.1f} ms"
    if seconds < 60.0:
        return f"{seconds:.2f} s"
    minutes = int(seconds // 60)
    rem = seconds - minutes * 60
    return f"{minutes}m {rem:.1f}s"


def _positive_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        number = 0
    if number <= 0:
        raise argparse.ArgumentTypeError(
            f"invalid day {value!r}: expected a positive integer"
        )
    return number


def _run_day(day: int, part: int, path: str) -> None:
    """Solve one part of one day and print the answer.

    Exits with status 1 when the day is unknown, the input file is missing or
    the input cannot be parsed.
    """
    print(f"Running part {part} of day {day} using input {path}.")
    print()

    _start_time = perf_counter()
    try:
        solver = get_solver(day, part)
        answer = solver(read_lines(path))
    except UnknownDayError as e:
        logger.error(str(e))
        print(f"ERROR: {e}")
        sys.exit(1)
    except FileNotFoundError:
        logger.error(f"Input file not found: {path}")
        print(f"ERROR: Input file not found: {path}")
        sys.exit(1)
    except ValueError as e:
        logger.error(f"Failed to solve day {day} part {part}: {e}")
        print(f"ERROR: Invalid input: {e}")
        sys.exit(1)

    print(answer)
    _elapsed = perf_counter() - _start_time
    logger.info(f"Day {day} part {part} solved in {_format_duration(_elapsed)}")


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the ``puzzlegraph`` command.

    Args:
        argv: Optional list of command-line arguments. If ``None``, ``sys.argv``
            is used.
    """
    parser = argparse.ArgumentParser(
        prog="puzzlegraph",
        description="Solve one part of a daily puzzle.",
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable debug logging"
    )
    parser.add_argument(
        "--quiet", action="store_true", help="Only log warnings and errors"
    )
    parser.add_argument("day", type=_positive_int, help="Day number")
    parser.add_argument(
        "part", type=int, choices=RUNNER_CONFIG.parts, help="Puzzle part"
    )
    parser.add_argument(
        "path",
        nargs="?",
        default=None,
        help=f"Input file (default: {RUNNER_CONFIG.input_template})",
    )

    effective_args = sys.argv[1:] if argv is None else argv

    # If no arguments are provided, show help and exit cleanly
    if not effective_args:
        parser.print_help()
        raise SystemExit(0)

    args = parser.parse_args(effective_args)

    if args.verbose:
        set_global_log_level(logging.DEBUG)
        logger.debug("Debug logging enabled")
    elif args.quiet:
        set_global_log_level(logging.WARNING)
    else:
        set_global_log_level(logging.INFO)

    path = args.path
    if path is None:
        path = RUNNER_CONFIG.default_input(args.day)
    _run_day(args.day, args.part, path)


if __name__ == "__main__":
    main()
