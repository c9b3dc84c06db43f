"""Grid helpers shared by the puzzle solvers."""

from puzzlegraph.grid.direction import Coords, Direction, step
from puzzlegraph.grid.text import lines_to_grid, read_lines

__all__ = ["Coords", "Direction", "lines_to_grid", "read_lines", "step"]
