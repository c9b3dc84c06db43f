"""Explicit adjacency storage for graph search.

The search functions in :mod:`puzzlegraph.graph.search` only need a neighbor
function. `AdjacencyGraph` is for callers that already hold a materialized
graph: it extends `networkx.DiGraph` with an ``undirect()`` step and exposes
its successors as a neighbor function.
"""

from __future__ import annotations

from collections import deque
from typing import Any, Callable, Hashable, Iterable, Set

import networkx as nx

from puzzlegraph.logging import get_logger

logger = get_logger(__name__)

NodeID = Hashable


class AdjacencyGraph(nx.DiGraph):
    """A directed graph that can be turned into an undirected one in place.

    The flag lives in the graph attribute dict so that networkx copies,
    subgraph copies and conversions carry it along.
    """

    @property
    def undirected(self) -> bool:
        """True once :meth:`undirect` has added every reverse edge."""
        return bool(self.graph.get("undirected", False))

    def undirect(self) -> None:
        """Add the reverse of every edge, keeping its attributes.

        Reverse edges that already exist keep their own attributes.
        """
        for u, v, data in list(self.edges(data=True)):
            if not self.has_edge(v, u):
                self.add_edge(v, u, **data)
        self.graph["undirected"] = True

    def neighbors_of(self, node: NodeID) -> Set[NodeID]:
        """Return the successors of ``node``; empty for unknown nodes."""
        if node not in self:
            return set()
        return set(self.successors(node))

    def neighbor_fn(self) -> Callable[[NodeID], Set[NodeID]]:
        """Return a neighbor function over this graph for the search API."""
        return self.neighbors_of


def from_neighbors(
    src: NodeID,
    get_neighbors: Callable[[NodeID], Iterable[NodeID]],
    **edge_attr: Any,
) -> AdjacencyGraph:
    """Materialize the subgraph reachable from ``src``.

    Args:
        src: Vertex to start from.
        get_neighbors: Neighbor function describing the implicit graph.
        **edge_attr: Attributes stored on every created edge.

    Returns:
        AdjacencyGraph holding every vertex reachable from ``src`` and every
        edge leaving those vertices.
    """
    graph = AdjacencyGraph()
    graph.add_node(src)
    queue: deque = deque([src])

    while queue:
        node = queue.popleft()
        for nbr in get_neighbors(node):
            if nbr not in graph:
                graph.add_node(nbr)
                queue.append(nbr)
            graph.add_edge(node, nbr, **edge_attr)

    logger.debug(
        f"Materialized {graph.number_of_nodes()} nodes and "
        f"{graph.number_of_edges()} edges from {src!r}"
    )
    return graph
