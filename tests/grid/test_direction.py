import pytest

from puzzlegraph.grid.direction import Direction, step


def test_numbering_is_clockwise_from_north():
    assert [d.name for d in Direction] == ["N", "NE", "E", "SE", "S", "SW", "W", "NW"]
    assert Direction.from_num(4) is Direction.S


def test_from_num_out_of_range():
    with pytest.raises(ValueError, match="Invalid direction number"):
        Direction.from_num(8)


def test_cardinals():
    assert Direction.cardinals() == (Direction.N, Direction.E, Direction.S, Direction.W)
    assert all(d.is_cardinal for d in Direction.cardinals())
    assert not Direction.NE.is_cardinal


@pytest.mark.parametrize(
    "direction,right,left",
    [
        (Direction.N, Direction.E, Direction.W),
        (Direction.E, Direction.S, Direction.N),
        (Direction.S, Direction.W, Direction.E),
        (Direction.W, Direction.N, Direction.S),
        (Direction.NE, Direction.SE, Direction.NW),
    ],
)
def test_turns(direction, right, left):
    assert direction.turn_right() is right
    assert direction.turn_left() is left


def test_reflect():
    assert Direction.N.reflect() is Direction.S
    assert Direction.SW.reflect() is Direction.NE
    assert all(d.reflect().reflect() is d for d in Direction)


@pytest.mark.parametrize(
    "a,b,expected",
    [
        (Direction.N, Direction.E, Direction.NE),
        (Direction.E, Direction.S, Direction.SE),
        (Direction.S, Direction.W, Direction.SW),
        (Direction.W, Direction.N, Direction.NW),
        (Direction.N, Direction.W, Direction.NW),
        (Direction.N, Direction.S, None),
        (Direction.E, Direction.E, None),
        (Direction.NE, Direction.E, None),
    ],
)
def test_combine_cardinal(a, b, expected):
    assert a.combine_cardinal(b) == expected


def test_step():
    assert step((3, 3), Direction.N) == (2, 3)
    assert step((3, 3), Direction.SE) == (4, 4)
    assert step((3, 3), Direction.W, n=3) == (3, 0)
