"""puzzlegraph: daily puzzle solvers on a generic graph search library.

The reusable part is the search API, which works on any graph given as a
start vertex and a neighbor function:

    num_reachable_targets() - Count reachable vertices matching a predicate
    exists_path() - Test reachability between two vertices
    shortest_path() - One shortest path in an unweighted graph, or None
    count_walks() - Count walks ending at the first matching vertex

Example:
    from puzzlegraph import shortest_path

    def ring(v):
        return {(v - 1) % 6, (v + 1) % 6}

    shortest_path(0, 4, ring)  # [0, 5, 4]
"""

from __future__ import annotations

from puzzlegraph import cli, logging
from puzzlegraph._version import __version__
from puzzlegraph.graph import (
    AdjacencyGraph,
    GraphSearchError,
    UpTree,
    WalkCycleError,
    count_walks,
    exists_path,
    from_neighbors,
    num_reachable_targets,
    shortest_path,
)

__all__ = [
    # Version
    "__version__",
    # Search
    "num_reachable_targets",
    "exists_path",
    "shortest_path",
    "count_walks",
    "GraphSearchError",
    "WalkCycleError",
    # Graph structures
    "AdjacencyGraph",
    "from_neighbors",
    "UpTree",
    # Utilities
    "cli",
    "logging",
]
