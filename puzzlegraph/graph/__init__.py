"""Graph primitives and search.

This package provides the generic search functions (`search`), the
networkx-backed `AdjacencyGraph` for materialized graphs (`adjacency`) and the
`UpTree` disjoint-set forest (`uptree`).
"""

from puzzlegraph.graph.adjacency import AdjacencyGraph, from_neighbors
from puzzlegraph.graph.search import (
    GraphSearchError,
    WalkCycleError,
    count_walks,
    exists_path,
    num_reachable_targets,
    shortest_path,
)
from puzzlegraph.graph.uptree import UpTree

__all__ = [
    "AdjacencyGraph",
    "GraphSearchError",
    "UpTree",
    "WalkCycleError",
    "count_walks",
    "exists_path",
    "from_neighbors",
    "num_reachable_targets",
    "shortest_path",
]
