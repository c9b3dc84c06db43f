"""Global pytest configuration and shared sample graphs.

Sample graphs are plain neighbor functions, matching how the search API
consumes them.
"""

from __future__ import annotations

from typing import Callable, Set

import pytest

NeighborFn = Callable[[int], Set[int]]


@pytest.fixture
def hexagon() -> NeighborFn:
    #   0 ─ 1 ─ 2
    #   │       │
    #   5 ─ 4 ─ 3
    edges = {
        0: {1, 5},
        1: {0, 2},
        2: {1, 3},
        3: {2, 4},
        4: {3, 5},
        5: {4, 0},
    }
    return lambda v: edges.get(v, set())


@pytest.fixture
def diamond_dag() -> NeighborFn:
    #   0 ─► 1 ─► 3 ─► 5 ─┐
    #   │                 ▼
    #   └──► 2 ─► 4 ─► 6 ─► 7 ─► {8, 9}
    edges = {
        0: {1, 2},
        1: {3},
        2: {4},
        3: {5},
        4: {6},
        5: {7},
        6: {7},
        7: {8, 9},
    }
    return lambda v: edges.get(v, set())


@pytest.fixture
def byte_ring() -> NeighborFn:
    # 0 ─ 1 ─ ... ─ 255 ─ 0
    return lambda v: {(v - 1) % 256, (v + 1) % 256}


@pytest.fixture
def no_edges() -> NeighborFn:
    return lambda v: set()
