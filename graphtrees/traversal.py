"""Depth-first and breadth-first traversals with three-colour marking."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from enum import Enum
from typing import Deque, Iterator, List, Tuple

from .graph import AdjacencyView, Vertex, Weight, check_vertex
from .logger import Logger, NoopLogger


class Colour(Enum):
    """Traversal state of a vertex."""

    WHITE = "white"  # not yet discovered
    GREY = "grey"  # discovered, neighbours still being processed
    BLACK = "black"  # finished


@dataclass(frozen=True)
class DepthFirstForest:
    """Result of a depth-first traversal from one source.

    Attributes:
        source: Start vertex.
        parent: Predecessor of each vertex; ``0`` for the root and for
            vertices the traversal never reached.
        discovery: Clock value when each vertex turned grey (``0`` if never).
        finish: Clock value when each vertex turned black (``0`` if never).
        colour: Final colour of each vertex (index ``0`` unused).
        order: Vertices in discovery order.
    """

    source: Vertex
    parent: List[Vertex]
    discovery: List[int]
    finish: List[int]
    colour: List[Colour]
    order: List[Vertex]

    def reached(self, v: Vertex) -> bool:
        """Return ``True`` if ``v`` was discovered."""
        return self.discovery[v] > 0


@dataclass(frozen=True)
class BreadthFirstTree:
    """Result of a breadth-first traversal from one source.

    Attributes:
        source: Start vertex.
        parent: Predecessor of each vertex; ``0`` for the root and for
            unreached vertices.
        distance: Number of edges from the source, ``-1`` if unreached.
        colour: Final colour of each vertex (index ``0`` unused).
        order: Vertices in dequeue order.
        levels: Number of traversal levels processed.
    """

    source: Vertex
    parent: List[Vertex]
    distance: List[int]
    colour: List[Colour]
    order: List[Vertex]
    levels: int

    def reached(self, v: Vertex) -> bool:
        """Return ``True`` if ``v`` was discovered."""
        return self.distance[v] >= 0


class _Clock:
    """Timestamp counter owned by a single traversal run."""

    def __init__(self) -> None:
        self.time = 0

    def tick(self) -> int:
        self.time += 1
        return self.time


def depth_first(
    G: AdjacencyView,
    source: Vertex,
    recursive: bool = False,
    logger: Logger | None = None,
) -> DepthFirstForest:
    """Run a coloured depth-first traversal from ``source``.

    On entering a vertex the clock ticks, the vertex records its discovery
    time and turns grey. Each white neighbour has its parent set before it is
    visited. When all neighbours are exhausted the vertex turns black and
    records its finish time. Only the tree rooted at ``source`` is explored.

    Args:
        G: Graph to traverse.
        source: Start vertex.
        recursive: Use Python recursion instead of an explicit stack. Both
            produce identical results; the recursive form is bounded by the
            interpreter's recursion limit.
        logger: Receives ``dfs.discover`` / ``dfs.finish`` debug events.

    Raises:
        InvalidVertexError: If ``source`` is not a vertex of ``G``.
    """
    check_vertex(G, source, "source")
    log = logger or NoopLogger()
    n = G.n
    colour = [Colour.WHITE] * (n + 1)
    parent = [0] * (n + 1)
    d = [0] * (n + 1)
    f = [0] * (n + 1)
    order: List[Vertex] = []
    clock = _Clock()

    def discover(u: Vertex) -> None:
        d[u] = clock.tick()
        colour[u] = Colour.GREY
        order.append(u)
        log.debug("dfs.discover", vertex=u, parent=parent[u], time=d[u])

    def finish(u: Vertex) -> None:
        colour[u] = Colour.BLACK
        f[u] = clock.tick()
        log.debug("dfs.finish", vertex=u, time=f[u])

    if recursive:

        def visit(u: Vertex) -> None:
            discover(u)
            for v, _ in G.neighbors(u):
                if colour[v] is Colour.WHITE:
                    parent[v] = u
                    visit(v)
            finish(u)

        visit(source)
    else:
        discover(source)
        stack: List[Tuple[Vertex, Iterator[Tuple[Vertex, Weight]]]] = [
            (source, iter(G.neighbors(source)))
        ]
        while stack:
            u, it = stack[-1]
            for v, _ in it:
                if colour[v] is Colour.WHITE:
                    parent[v] = u
                    discover(v)
                    stack.append((v, iter(G.neighbors(v))))
                    break
            else:
                stack.pop()
                finish(u)

    log.info("dfs.done", source=source, reached=len(order), time=clock.time)
    return DepthFirstForest(
        source=source, parent=parent, discovery=d, finish=f, colour=colour, order=order
    )


def breadth_first(
    G: AdjacencyView,
    source: Vertex,
    logger: Logger | None = None,
) -> BreadthFirstTree:
    """Run a level-synchronous coloured breadth-first traversal.

    The queue is drained one level at a time: its length is captured before
    dequeuing so that every vertex at distance ``k`` is processed before any
    vertex at ``k + 1``. A white neighbour turns grey, gets ``distance + 1``
    and the current vertex as parent and is enqueued; the current vertex turns
    black once its neighbours are scanned. Distances count edges, not weight.

    Raises:
        InvalidVertexError: If ``source`` is not a vertex of ``G``.
    """
    check_vertex(G, source, "source")
    log = logger or NoopLogger()
    n = G.n
    colour = [Colour.WHITE] * (n + 1)
    parent = [0] * (n + 1)
    distance = [-1] * (n + 1)
    order: List[Vertex] = []

    colour[source] = Colour.GREY
    distance[source] = 0
    queue: Deque[Vertex] = deque([source])
    levels = 1

    while queue:
        level_size = len(queue)
        log.debug("bfs.level", depth=levels, queue=list(queue))
        for _ in range(level_size):
            u = queue.popleft()
            order.append(u)
            for v, _ in G.neighbors(u):
                if colour[v] is Colour.WHITE:
                    colour[v] = Colour.GREY
                    distance[v] = distance[u] + 1
                    parent[v] = u
                    queue.append(v)
                    log.debug("bfs.enqueue", vertex=v, parent=u, distance=distance[v])
            colour[u] = Colour.BLACK
        if queue:
            levels += 1

    log.info("bfs.done", source=source, reached=len(order), levels=levels)
    return BreadthFirstTree(
        source=source,
        parent=parent,
        distance=distance,
        colour=colour,
        order=order,
        levels=levels,
    )


__all__ = ["BreadthFirstTree", "Colour", "DepthFirstForest", "breadth_first", "depth_first"]
