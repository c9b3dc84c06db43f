import pytest

from puzzlegraph.days import day07
from puzzlegraph.days.day07 import Manifold

SAMPLE = """\
.......S.......
...............
.......^.......
...............
......^.^......
...............
.....^.^.^.....
...............
....^.^...^....
...............
...^.^...^.^...
...............
..^...^.....^..
...............
.^.^.^.^.^...^.
...............
"""

SMALL = """\
..S..
.....
..^..
.....
.^.^.
.....
"""


def test_sample_part1():
    assert day07.run1(SAMPLE.splitlines()) == "21"


def test_sample_part2():
    assert day07.run2(SAMPLE.splitlines()) == "40"


def test_merged_beams_hit_splitter_once():
    # the two inner beams merge above the middle of the bottom row
    assert day07.run1(SMALL.splitlines()) == "3"
    assert day07.run2(SMALL.splitlines()) == "4"


def test_start_found():
    manifold = Manifold.from_lines(SMALL.splitlines())
    assert manifold.start == (0, 2)
    assert (manifold.height, manifold.width) == (6, 5)


def test_beam_neighbors():
    manifold = Manifold.from_lines(SMALL.splitlines())
    assert manifold.beam_neighbors((0, 2)) == [(1, 2)]
    assert manifold.beam_neighbors((1, 2)) == [(2, 1), (2, 3)]
    # last row exits below the grid
    assert manifold.beam_neighbors((5, 0)) == [(6, 0)]
    assert manifold.beam_neighbors((6, 0)) == []


def test_split_at_edge_drops_outside_beam():
    manifold = Manifold.from_lines(["S.", "^.", ".."])
    assert manifold.beam_neighbors((0, 0)) == [(1, 1)]
    assert manifold.count_splits() == 1
    assert manifold.count_timelines() == 1


def test_no_splitters_single_timeline():
    lines = ["..S", "...", "..."]
    assert day07.run1(lines) == "0"
    assert day07.run2(lines) == "1"


def test_missing_start_raises():
    with pytest.raises(ValueError, match="no start"):
        Manifold.from_lines(["...", ".^."])
