"""Reading puzzle input text into character grids."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, Iterator, List, Union


def read_lines(path: Union[str, Path]) -> Iterator[str]:
    """Yield the lines of ``path`` without line terminators.

    Raises:
        FileNotFoundError: If ``path`` does not exist.
    """
    with open(path, encoding="utf-8") as fh:
        for line in fh:
            yield line.rstrip("\r\n")


def lines_to_grid(lines: Iterable[str]) -> List[List[str]]:
    """Split lines into rows of single characters, skipping blank lines.

    Raises:
        ValueError: If the non-blank rows differ in length.
    """
    grid = [list(line.rstrip("\r\n")) for line in lines if line.strip()]
    widths = {len(row) for row in grid}
    if len(widths) > 1:
        raise ValueError(f"Grid rows have inconsistent widths: {sorted(widths)}")
    return grid
