"""Compass directions and coordinate stepping on a row/column grid."""

from __future__ import annotations

from enum import IntEnum
from typing import Optional, Tuple

#: Grid position as (row, column). Row 0 is the top of the grid.
Coords = Tuple[int, int]


class Direction(IntEnum):
    """The eight compass directions, numbered clockwise from north."""

    N = 0
    NE = 1
    E = 2
    SE = 3
    S = 4
    SW = 5
    W = 6
    NW = 7

    @classmethod
    def from_num(cls, value: int) -> "Direction":
        """Return the direction numbered ``value``.

        Raises:
            ValueError: If ``value`` is not in 0..7.
        """
        try:
            return cls(value)
        except ValueError:
            raise ValueError(
                f"Invalid direction number {value!r}; expected 0..{len(cls) - 1}"
            ) from None

    @classmethod
    def cardinals(cls) -> Tuple["Direction", ...]:
        return (cls.N, cls.E, cls.S, cls.W)

    @property
    def is_cardinal(self) -> bool:
        return self.value % 2 == 0

    @property
    def offset(self) -> Coords:
        """(row, column) delta of one step in this direction."""
        return _OFFSETS[self.value]

    def turn_right(self) -> "Direction":
        """Rotate 90 degrees clockwise."""
        return Direction((self.value + 2) % 8)

    def turn_left(self) -> "Direction":
        """Rotate 90 degrees counter-clockwise."""
        return Direction((self.value - 2) % 8)

    def reflect(self) -> "Direction":
        """Rotate 180 degrees."""
        return Direction((self.value + 4) % 8)

    def combine_cardinal(self, other: "Direction") -> Optional["Direction"]:
        """Return the diagonal between two perpendicular cardinal directions.

        For example ``N.combine_cardinal(E)`` is ``NE``. Returns ``None`` when
        either direction is diagonal or the two are not perpendicular.
        """
        if not (self.is_cardinal and other.is_cardinal):
            return None
        if (self.value - other.value) % 4 != 2:
            return None
        if {self.value, other.value} == {0, 6}:
            return Direction.NW
        return Direction((self.value + other.value) // 2)


_OFFSETS: Tuple[Coords, ...] = (
    (-1, 0),
    (-1, 1),
    (0, 1),
    (1, 1),
    (1, 0),
    (1, -1),
    (0, -1),
    (-1, -1),
)


def step(coords: Coords, direction: Direction, n: int = 1) -> Coords:
    """Return the position ``n`` steps from ``coords`` in ``direction``."""
    dr, dc = direction.offset
    return (coords[0] + n * dr, coords[1] + n * dc)
