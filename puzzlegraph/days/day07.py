"""Day 7: beams travelling down through a manifold of splitters.

A beam enters at ``S`` and moves down one row per step. When the cell below a
beam holds a splitter ``^`` the beam continues as two beams, one column to the
left and one to the right of the splitter. Beams that meet merge, and beams
leaving the bottom row exit the manifold.

Part 1 counts splitter hits, part 2 counts the timelines a single particle
could follow from ``S`` to an exit.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List

from puzzlegraph.graph.search import count_walks, num_reachable_targets
from puzzlegraph.grid import Coords, lines_to_grid
from puzzlegraph.logging import get_logger

logger = get_logger(__name__)

START = "S"
SPLITTER = "^"


@dataclass
class Manifold:
    """Splitter layout parsed from the puzzle grid."""

    grid: List[List[str]]
    start: Coords

    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> "Manifold":
        """Parse a manifold.

        Raises:
            ValueError: If the grid is empty or has no start cell.
        """
        grid = lines_to_grid(lines)
        for r, row in enumerate(grid):
            if START in row:
                return cls(grid=grid, start=(r, row.index(START)))
        raise ValueError(f"Manifold has no start cell '{START}'")

    @property
    def height(self) -> int:
        return len(self.grid)

    @property
    def width(self) -> int:
        return len(self.grid[0])

    def is_exit(self, pos: Coords) -> bool:
        """Exits are virtual cells one row below the grid."""
        return pos[0] == self.height

    def is_above_splitter(self, pos: Coords) -> bool:
        r, c = pos
        return r + 1 < self.height and self.grid[r + 1][c] == SPLITTER

    def beam_neighbors(self, pos: Coords) -> List[Coords]:
        """Cells a beam at ``pos`` occupies after one step."""
        r, c = pos
        if r >= self.height:
            return []
        if not self.is_above_splitter(pos):
            return [(r + 1, c)]
        return [(r + 1, col) for col in (c - 1, c + 1) if 0 <= col < self.width]

    def count_splits(self) -> int:
        """Number of times a beam hits a splitter.

        Merged beams hit a splitter once, so this is the number of reachable
        beam cells sitting directly above a splitter.
        """
        return num_reachable_targets(
            self.start, self.is_above_splitter, self.beam_neighbors
        )

    def count_timelines(self) -> int:
        """Number of distinct routes from the start cell to any exit."""
        return count_walks(self.start, self.is_exit, self.beam_neighbors)


def run1(lines: Iterable[str]) -> str:
    manifold = Manifold.from_lines(lines)
    logger.debug(
        f"Manifold {manifold.height}x{manifold.width}, start at {manifold.start}"
    )
    return str(manifold.count_splits())


def run2(lines: Iterable[str]) -> str:
    manifold = Manifold.from_lines(lines)
    return str(manifold.count_timelines())
