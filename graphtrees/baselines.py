"""Reference implementations used to cross-check the indexed-heap algorithms."""

from __future__ import annotations

import heapq
import math
from typing import Iterable, List, Optional, Set, Tuple

from .graph import Edge, Graph, Vertex, Weight, check_vertex


def dijkstra_reference(G: Graph, source: Vertex) -> Tuple[List[float], List[Vertex]]:
    """Run Dijkstra with :mod:`heapq` and lazy deletion of stale entries.

    Args:
        G: Input graph with non-negative edge weights.
        source: Source vertex identifier.

    Returns:
        ``(dist, parent)`` lists in the same shape as
        :class:`~graphtrees.spt.ShortestPathTree`.
    """
    check_vertex(G, source, "source")
    n = G.n
    dist: List[float] = [math.inf] * (n + 1)
    parent: List[Vertex] = [0] * (n + 1)
    dist[source] = 0
    pq: List[Tuple[float, Vertex]] = [(0, source)]
    seen: Set[Vertex] = set()
    while pq:
        d, u = heapq.heappop(pq)
        if d != dist[u] or u in seen:
            continue
        seen.add(u)
        for v, w in G.neighbors(u):
            nd = d + w
            if nd < dist[v]:
                dist[v] = nd
                parent[v] = u
                heapq.heappush(pq, (nd, v))
    return dist, parent


class DisjointSet:
    """Union-find over ``1`` .. ``n`` with path halving and union by size."""

    def __init__(self, n: int) -> None:
        self._parent = list(range(n + 1))
        self._size = [1] * (n + 1)

    def find(self, x: int) -> int:
        parent = self._parent
        while parent[x] != x:
            parent[x] = parent[parent[x]]
            x = parent[x]
        return x

    def union(self, a: int, b: int) -> bool:
        """Merge the sets of ``a`` and ``b``; return ``False`` if already joined."""
        ra, rb = self.find(a), self.find(b)
        if ra == rb:
            return False
        if self._size[ra] < self._size[rb]:
            ra, rb = rb, ra
        self._parent[rb] = ra
        self._size[ra] += self._size[rb]
        return True


def kruskal_forest(n: int, edges: Iterable[Edge]) -> List[Edge]:
    """Return a minimum spanning forest as a list of ``(u, v, w)`` edges."""
    ds = DisjointSet(n)
    forest: List[Edge] = []
    for u, v, w in sorted(edges, key=lambda e: e[2]):
        if ds.union(u, v):
            forest.append((u, v, w))
    return forest


def kruskal_weight(G: Graph, component_of: Optional[Vertex] = None) -> Weight:
    """Return the minimum spanning forest weight of ``G``.

    Args:
        G: Input graph.
        component_of: Restrict the sum to the tree containing this vertex,
            matching what Prim computes from a start vertex.
    """
    forest = kruskal_forest(G.n, G.edges())
    if component_of is None:
        return sum(w for _, _, w in forest)
    ds = DisjointSet(G.n)
    for u, v, _ in forest:
        ds.union(u, v)
    root = ds.find(component_of)
    return sum(w for u, _, w in forest if ds.find(u) == root)


__all__ = ["DisjointSet", "dijkstra_reference", "kruskal_forest", "kruskal_weight"]
