"""Prim's minimum spanning tree driven by :class:`~graphtrees.heap.IndexedMinHeap`."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Dict, List, Tuple

from .exceptions import DisconnectedGraphError
from .graph import AdjacencyView, Vertex, Weight, check_vertex
from .heap import IndexedMinHeap
from .logger import Logger, NoopLogger


@dataclass(frozen=True)
class MinimumSpanningTree:
    """Spanning tree grown from one start vertex.

    Attributes:
        start: Root of the tree.
        parent: Tree neighbour closer to the root; ``0`` for the root and for
            vertices outside the start vertex's component.
        weight: Weight of the edge joining each vertex to its parent (``0``
            for the root and unreached vertices).
        total_weight: Sum of the tree edge weights.
        edge_count: Number of tree edges. Equals ``vertex_count - 1`` only
            when the graph is connected.
        vertex_count: Number of vertices in the graph.
        counters: Heap and relaxation counters for the run.
    """

    start: Vertex
    parent: List[Vertex]
    weight: List[Weight]
    total_weight: Weight
    edge_count: int
    vertex_count: int
    counters: Dict[str, int] = field(default_factory=dict)

    @property
    def spanning(self) -> bool:
        """``True`` when the tree covers every vertex of the graph."""
        return self.edge_count == self.vertex_count - 1

    def edges(self) -> List[Tuple[Vertex, Vertex, Weight]]:
        """Return the tree edges as ``(parent, child, weight)`` triples."""
        return [
            (p, v, self.weight[v])
            for v, p in enumerate(self.parent)
            if p != 0
        ]

    def require_spanning(self) -> "MinimumSpanningTree":
        """Return ``self`` or raise if only part of the graph was spanned.

        Raises:
            DisconnectedGraphError: If ``edge_count < vertex_count - 1``.
        """
        if not self.spanning:
            raise DisconnectedGraphError(
                f"graph is disconnected: tree from {self.start} has {self.edge_count} "
                f"edges, a spanning tree needs {self.vertex_count - 1}"
            )
        return self


def minimum_spanning_tree(
    G: AdjacencyView,
    start: Vertex,
    logger: Logger | None = None,
    check_heap: bool = False,
) -> MinimumSpanningTree:
    """Grow a minimum spanning tree from ``start`` with Prim's algorithm.

    The heap key of a vertex is the weight of the cheapest known edge joining
    it to the tree. A vertex is settled when it leaves the heap; settled
    vertices are tracked in their own flag list and are never relaxed again.

    On a disconnected graph only the component of ``start`` is spanned. The
    result then reports ``spanning == False`` and a ``mst.partial`` warning is
    logged; call :meth:`MinimumSpanningTree.require_spanning` to turn that
    into an error.

    Raises:
        InvalidVertexError: If ``start`` is out of range.
    """
    check_vertex(G, start, "start")
    log = logger or NoopLogger()
    n = G.n
    dist: List[float] = [math.inf] * (n + 1)
    parent: List[Vertex] = [0] * (n + 1)
    h_pos: List[int] = [0] * (n + 1)
    settled: List[bool] = [False] * (n + 1)
    total = 0
    edge_count = 0
    relaxed = 0

    dist[start] = 0
    heap = IndexedMinHeap(n, dist, h_pos)
    heap.insert(start)
    log.debug("mst.start", start=start, h_pos=h_pos[start])

    while not heap.is_empty():
        v = heap.extract_min()
        settled[v] = True
        total += dist[v]
        if v != start:
            edge_count += 1
        log.debug("mst.extract", vertex=v, key=dist[v], total=total)
        for u, w in G.neighbors(v):
            if not settled[u] and w < dist[u]:
                relaxed += 1
                dist[u] = w
                parent[u] = v
                if h_pos[u] == 0:
                    heap.insert(u)
                    log.debug("mst.insert", vertex=u, key=w, parent=v)
                else:
                    log.debug("mst.sift_up", vertex=u, key=w, parent=v)
                    heap.sift_up(h_pos[u])
        if check_heap:
            heap.check()

    weight = [0 if parent[v] == 0 else int(dist[v]) for v in range(n + 1)]
    counters = dict(heap.counters)
    counters["edges_relaxed"] = relaxed
    result = MinimumSpanningTree(
        start=start,
        parent=parent,
        weight=weight,
        total_weight=int(total),
        edge_count=edge_count,
        vertex_count=n,
        counters=counters,
    )
    if result.spanning:
        log.info("mst.done", start=start, weight=result.total_weight, tree_edges=edge_count)
    else:
        log.warning(
            "mst.partial",
            start=start,
            weight=result.total_weight,
            tree_edges=edge_count,
            expected=n - 1,
        )
    return result


__all__ = ["MinimumSpanningTree", "minimum_spanning_tree"]
