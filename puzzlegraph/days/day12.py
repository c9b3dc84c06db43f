"""Day 12: fencing garden regions.

A region is a maximal set of orthogonally connected plots growing the same
plant. Part 1 prices each region at area times perimeter, part 2 at area times
number of straight sides.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import FrozenSet, Iterable, List, Set, Tuple

from puzzlegraph.graph.uptree import UpTree
from puzzlegraph.grid import Coords, Direction, lines_to_grid, step
from puzzlegraph.logging import get_logger

logger = get_logger(__name__)

#: A unit fence segment: the plot it encloses and the side it faces.
Fence = Tuple[Coords, Direction]


@dataclass
class Region:
    plant: str
    plots: FrozenSet[Coords]
    fences: Set[Fence] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self.fences = {
            (plot, d)
            for plot in self.plots
            for d in Direction.cardinals()
            if step(plot, d) not in self.plots
        }

    @property
    def area(self) -> int:
        return len(self.plots)

    @property
    def perimeter(self) -> int:
        return len(self.fences)

    @property
    def num_sides(self) -> int:
        """Number of maximal straight fence runs.

        Segments facing the same way on neighbouring plots belong to one side,
        so each side is counted at the segment with no such neighbour on its
        right-hand end.
        """
        return sum(
            1
            for plot, facing in self.fences
            if (step(plot, facing.turn_right()), facing) not in self.fences
        )


def find_regions(grid: List[List[str]]) -> List[Region]:
    """Group the plots of ``grid`` into regions."""
    tree: UpTree[Coords] = UpTree()
    for r, row in enumerate(grid):
        for c, plant in enumerate(row):
            tree.insert_root((r, c), plant)

    height = len(grid)
    for r, row in enumerate(grid):
        width = len(row)
        for c, plant in enumerate(row):
            if c + 1 < width and row[c + 1] == plant:
                tree.union((r, c), (r, c + 1))
            if r + 1 < height and grid[r + 1][c] == plant:
                tree.union((r, c), (r + 1, c))

    regions = [
        Region(plant=next(iter(members.values())), plots=frozenset(members))
        for members in tree.flatten()
    ]
    logger.debug(f"Found {len(regions)} regions over {len(tree)} plots")
    return regions


def run1(lines: Iterable[str]) -> str:
    regions = find_regions(lines_to_grid(lines))
    return str(sum(region.area * region.perimeter for region in regions))


def run2(lines: Iterable[str]) -> str:
    regions = find_regions(lines_to_grid(lines))
    return str(sum(region.area * region.num_sides for region in regions))
