"""Generic breadth-first and depth-first graph search.

Every function here works on an implicit graph: the caller supplies a source
vertex and a neighbor function, and nothing about the graph is stored beyond
the bookkeeping of a single call. Vertices only need to be hashable.

Notes:
    The neighbor function and the target predicate are assumed to be pure.
    They may be called any number of times for the same vertex.
"""

from __future__ import annotations

from collections import deque
from typing import (
    Callable,
    Dict,
    Hashable,
    Iterable,
    Iterator,
    List,
    Optional,
    Set,
    TypeVar,
)

from puzzlegraph.logging import get_logger

logger = get_logger(__name__)

#: Vertex type. Any hashable value; equal vertices are the same node.
V = TypeVar("V", bound=Hashable)

#: Produces the vertices one edge away from the given vertex.
NeighborFn = Callable[[V], Iterable[V]]

#: Flags vertices of interest.
Predicate = Callable[[V], bool]


class GraphSearchError(Exception):
    """Base class for graph search errors."""


class WalkCycleError(GraphSearchError):
    """A walk re-entered a non-target vertex that is still being explored.

    Raised by :func:`count_walks` when its cycle guard is enabled, since the
    number of terminating walks through such a cycle is unbounded.
    """

    def __init__(self, vertex: Hashable) -> None:
        super().__init__(f"Cycle avoiding all targets detected at vertex {vertex!r}")
        self.vertex = vertex


def num_reachable_targets(
    src: V,
    is_target: Predicate,
    get_neighbors: NeighborFn,
) -> int:
    """Count distinct vertices reachable from ``src`` that satisfy ``is_target``.

    The source itself is counted when it satisfies the predicate.

    Args:
        src: Vertex to start from.
        is_target: Predicate selecting the vertices to count.
        get_neighbors: Neighbor function of the graph.

    Returns:
        Number of matching vertices in the component reachable from ``src``.
    """
    result = int(bool(is_target(src)))

    visited: Set[V] = {src}
    # vertices whose neighbors have not been checked yet
    queue: deque = deque([src])

    while queue:
        node = queue.popleft()
        for nbr in get_neighbors(node):
            if nbr in visited:
                continue
            visited.add(nbr)
            queue.append(nbr)
            if is_target(nbr):
                result += 1

    logger.debug(
        f"Reachable-target count from {src!r}: {result} of {len(visited)} visited"
    )
    return result


def exists_path(src: V, tgt: V, get_neighbors: NeighborFn) -> bool:
    """Return True if ``tgt`` can be reached from ``src``.

    A vertex always reaches itself by the empty path.
    """
    if src == tgt:
        return True

    visited: Set[V] = {src}
    queue: deque = deque([src])

    while queue:
        node = queue.popleft()
        for nbr in get_neighbors(node):
            if nbr in visited:
                continue
            if nbr == tgt:
                return True
            visited.add(nbr)
            queue.append(nbr)

    return False


def shortest_path(src: V, tgt: V, get_neighbors: NeighborFn) -> Optional[List[V]]:
    """Find one shortest path from ``src`` to ``tgt`` in an unweighted graph.

    Breadth-first search records the discovering parent of every vertex. The
    first time ``tgt`` is discovered its distance from ``src`` is minimal, so
    walking the parent links back to ``src`` gives a shortest path.

    Args:
        src: Source vertex.
        tgt: Target vertex.
        get_neighbors: Neighbor function of the graph.

    Returns:
        List of vertices from ``src`` to ``tgt`` inclusive, or ``None`` if
        ``tgt`` is unreachable. ``[src]`` when ``src == tgt``.
    """
    if src == tgt:
        return [src]

    # The source has no parent and is at distance zero from itself.
    parents: Dict[V, Optional[V]] = {src: None}
    queue: deque = deque([(src, 0)])

    while queue:
        node, dist = queue.popleft()
        for nbr in get_neighbors(node):
            if nbr in parents:
                continue
            parents[nbr] = node
            if nbr == tgt:
                # dist counts the steps to the parent of tgt
                path = list(_walk_to_root(parents, src, nbr))
                path.reverse()
                logger.debug(
                    f"Shortest path {src!r} -> {tgt!r}: {dist + 1} steps, "
                    f"{len(parents)} visited"
                )
                return path
            queue.append((nbr, dist + 1))

    logger.debug(f"No path from {src!r} to {tgt!r} ({len(parents)} visited)")
    return None


def _walk_to_root(parents: Dict[V, Optional[V]], root: V, node: V) -> Iterator[V]:
    """Yield ``node`` and its ancestors, ending with ``root``.

    Stops on ``root`` itself rather than on its ``None`` parent, since
    ``None`` may be a vertex of the graph.
    """
    cur = node
    while cur != root:
        yield cur
        cur = parents[cur]
    yield root


def count_walks(
    src: V,
    is_target: Predicate,
    get_neighbors: NeighborFn,
    *,
    cycle_guard: bool = True,
) -> int:
    """Count the walks from ``src`` that end at the first target they reach.

    Target vertices are never expanded: a walk stops the instant it arrives at
    one. Walks are not deduplicated, so a vertex reached by several distinct
    walks contributes once per walk. The source is expanded regardless of
    whether it is a target.

    The search uses an explicit stack, so deep graphs do not run into the
    interpreter recursion limit. The number of terminating walks leaving a
    vertex depends only on the vertex, so it is memoized for the duration of
    the call.

    Args:
        src: Vertex the walks start from.
        is_target: Predicate marking walk endpoints.
        get_neighbors: Neighbor function. The non-target region reachable from
            ``src`` must be acyclic.
        cycle_guard: When True, raise :class:`WalkCycleError` on a cycle that
            avoids all targets. When False such a cycle makes the call run
            forever.

    Returns:
        Total number of terminating walks.

    Raises:
        WalkCycleError: If ``cycle_guard`` is set and a target-avoiding cycle
            is reachable from ``src``.
    """
    walks_from: Dict[V, int] = {}
    on_stack: Set[V] = {src}
    # frames: [vertex, remaining neighbors, walks counted so far]
    stack: List[list] = [[src, iter(get_neighbors(src)), 0]]

    while stack:
        frame = stack[-1]
        for nbr in frame[1]:
            if is_target(nbr):
                frame[2] += 1
            elif nbr in walks_from:
                frame[2] += walks_from[nbr]
            else:
                if nbr in on_stack and cycle_guard:
                    raise WalkCycleError(nbr)
                on_stack.add(nbr)
                stack.append([nbr, iter(get_neighbors(nbr)), 0])
                break
        else:
            stack.pop()
            node, _, count = frame
            on_stack.discard(node)
            walks_from[node] = count
            if stack:
                stack[-1][2] += count

    logger.debug(
        f"Walk count from {src!r}: {walks_from[src]} over {len(walks_from)} vertices"
    )
    return walks_from[src]
