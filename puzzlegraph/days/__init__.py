"""Puzzle solvers, one module per day.

Each day module exposes ``run1`` and ``run2``; both take the input lines and
return the answer as text.
"""

from __future__ import annotations

from types import ModuleType
from typing import Callable, Dict, Iterable

from puzzlegraph.config import RUNNER_CONFIG
from puzzlegraph.days import day07, day12

Solver = Callable[[Iterable[str]], str]

DAYS: Dict[int, ModuleType] = {
    7: day07,
    12: day12,
}


class UnknownDayError(LookupError):
    """No solver is registered for the requested day."""


def get_solver(day: int, part: int) -> Solver:
    """Return the solver for ``part`` of ``day``.

    Raises:
        UnknownDayError: If ``day`` has no solver yet.
        ValueError: If ``part`` is not a valid part number.
    """
    if part not in RUNNER_CONFIG.parts:
        valid = ", ".join(str(p) for p in RUNNER_CONFIG.parts)
        raise ValueError(f"Invalid part {part!r}. Valid parts are: {valid}")
    try:
        module = DAYS[day]
    except KeyError:
        done = ", ".join(str(d) for d in sorted(DAYS))
        raise UnknownDayError(
            f"Day {day} is not implemented (available: {done})"
        ) from None
    return getattr(module, f"run{part}")
