"""Dijkstra's shortest-path tree driven by :class:`~graphtrees.heap.IndexedMinHeap`."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Dict, List

from .graph import AdjacencyView, Vertex, check_vertex
from .heap import IndexedMinHeap
from .logger import Logger, NoopLogger
from .path import reconstruct_path

Float = float


@dataclass(frozen=True)
class ShortestPathTree:
    """Distances and predecessors from one source.

    Attributes:
        source: Root of the tree.
        dist: Shortest distance from ``source``; ``math.inf`` when unreachable.
        parent: Predecessor on a shortest path; ``0`` for the root and for
            unreachable vertices.
        edge_count: Number of tree edges (finalised vertices minus the root).
        counters: Heap and relaxation counters for the run.
    """

    source: Vertex
    dist: List[Float]
    parent: List[Vertex]
    edge_count: int
    counters: Dict[str, int] = field(default_factory=dict)

    def reachable(self, v: Vertex) -> bool:
        """Return ``True`` if ``v`` is connected to the source."""
        return self.dist[v] < math.inf

    def path_to(self, target: Vertex) -> List[Vertex]:
        """Return the vertices from the source to ``target`` (empty if unreachable)."""
        return reconstruct_path(self.parent, self.source, target)


def shortest_path_tree(
    G: AdjacencyView,
    source: Vertex,
    logger: Logger | None = None,
    check_heap: bool = False,
) -> ShortestPathTree:
    """Compute the shortest-path tree rooted at ``source``.

    The frontier is an indexed min-heap over ``dist``. When an edge
    ``(v, u, w)`` improves ``dist[u]`` the vertex is inserted on first
    discovery, otherwise it is sifted up from its current slot: priorities
    only ever decrease, so a sift-down is never needed.

    Edge weights must be non-negative; :class:`~graphtrees.graph.Graph`
    rejects negative weights on construction.

    Args:
        G: Undirected graph.
        source: Root vertex in ``[1, V]``.
        logger: Receives ``spt.*`` debug events for every heap step.
        check_heap: Verify the heap invariants after every mutation.

    Raises:
        InvalidVertexError: If ``source`` is out of range.

    Examples:
        ```python
        >>> from graphtrees.graph import Graph
        >>> g = Graph.from_edges(4, [(1, 2, 4), (2, 3, 1), (1, 3, 10), (3, 4, 2)])
        >>> t = shortest_path_tree(g, 1)
        >>> t.dist[1:], t.parent[1:]
        ([0, 4, 5, 7], [0, 1, 2, 3])
        ```
    """
    check_vertex(G, source, "source")
    log = logger or NoopLogger()
    n = G.n
    dist: List[Float] = [math.inf] * (n + 1)
    parent: List[Vertex] = [0] * (n + 1)
    h_pos: List[int] = [0] * (n + 1)
    relaxed = 0
    edge_count = 0

    dist[source] = 0
    heap = IndexedMinHeap(n, dist, h_pos)
    heap.insert(source)
    log.debug("spt.start", source=source, h_pos=h_pos[source])

    while not heap.is_empty():
        v = heap.extract_min()
        if v != source:
            edge_count += 1
        dv = dist[v]
        log.debug("spt.extract", vertex=v, dist=dv)
        for u, w in G.neighbors(v):
            if dv + w < dist[u]:
                relaxed += 1
                dist[u] = dv + w
                parent[u] = v
                if h_pos[u] == 0:
                    heap.insert(u)
                    log.debug("spt.insert", vertex=u, dist=dist[u], parent=v)
                else:
                    log.debug("spt.sift_up", vertex=u, dist=dist[u], parent=v)
                    heap.sift_up(h_pos[u])
        if check_heap:
            heap.check()

    counters = dict(heap.counters)
    counters["edges_relaxed"] = relaxed
    log.info("spt.done", source=source, tree_edges=edge_count, relaxed=relaxed)
    return ShortestPathTree(
        source=source, dist=dist, parent=parent, edge_count=edge_count, counters=counters
    )


__all__ = ["ShortestPathTree", "shortest_path_tree"]
