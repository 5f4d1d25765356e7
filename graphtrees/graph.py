"""Undirected weighted graph stored as per-vertex adjacency lists."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, List, Protocol, Tuple

from .exceptions import GraphFormatError, InputError, InvalidVertexError, NegativeWeightError

Vertex = int
Weight = int
Edge = Tuple[Vertex, Vertex, Weight]


class AdjacencyView(Protocol):
    """Read-only view consumed by the tree and traversal algorithms.

    Vertices are numbered ``1`` .. ``n``.
    """

    n: int

    def neighbors(self, u: Vertex) -> Iterable[Tuple[Vertex, Weight]]:
        """Return the ``(neighbor, weight)`` pairs of ``u``."""
        ...


def check_vertex(G: AdjacencyView, v: Vertex, role: str = "vertex") -> None:
    """Raise :class:`InvalidVertexError` unless ``1 <= v <= G.n``."""
    if isinstance(v, bool) or not isinstance(v, int) or not (1 <= v <= G.n):
        raise InvalidVertexError(f"{role} {v!r} is not a vertex id in [1, {G.n}]")


@dataclass
class Graph:
    """Undirected graph with non-negative integer edge weights.

    Each edge is stored twice, once in the adjacency list of every endpoint,
    so that for every entry ``(u -> v, w)`` there is a matching
    ``(v -> u, w)``. Negative weights are rejected with
    :class:`~graphtrees.exceptions.NegativeWeightError`.

    Attributes:
        n: Number of vertices, numbered ``1`` .. ``n``.
        adj: Adjacency lists indexed by vertex; ``adj[0]`` is unused.
    """

    n: int

    def __post_init__(self) -> None:
        """Validate vertex count and initialize adjacency lists."""
        if isinstance(self.n, bool) or not isinstance(self.n, int) or self.n <= 0:
            raise InputError("Graph.n must be a positive integer.")
        self.adj: List[List[Tuple[Vertex, Weight]]] = [[] for _ in range(self.n + 1)]
        self.m = 0

    def add_edge(self, u: Vertex, v: Vertex, w: Weight) -> None:
        """Add the undirected edge ``u -- v`` with weight ``w``.

        Args:
            u: First endpoint.
            v: Second endpoint.
            w: Non-negative integer weight.

        Raises:
            InputError: If ``u`` or ``v`` are not integers or are out of range.
            GraphFormatError: If ``w`` is not an integer.
            NegativeWeightError: If ``w`` is negative.

        Examples:
            ```python
            >>> g = Graph(2)
            >>> g.add_edge(1, 2, 7)
            >>> g.adj
            [[], [(2, 7)], [(1, 7)]]
            ```
        """
        for x in (u, v):
            if isinstance(x, bool) or not isinstance(x, int):
                raise InputError(f"edge ({u!r}, {v!r}): vertex ids must be integers.")
        if not (1 <= u <= self.n and 1 <= v <= self.n):
            raise InputError(f"edge ({u}, {v}): vertex ids must be in [1, {self.n}].")
        if isinstance(w, bool) or not isinstance(w, int):
            raise GraphFormatError(f"non-integer weight {w!r} on edge ({u}, {v})")
        if w < 0:
            raise NegativeWeightError(f"negative weight {w} on edge ({u}, {v})")
        self.adj[u].append((v, w))
        self.adj[v].append((u, w))
        self.m += 1

    @classmethod
    def from_edges(cls, n: int, edges: Iterable[Edge]) -> "Graph":
        """Create a graph from an iterable of ``(u, v, w)`` edges."""
        g = cls(n)
        for u, v, w in edges:
            g.add_edge(int(u), int(v), w)
        return g

    def neighbors(self, u: Vertex) -> List[Tuple[Vertex, Weight]]:
        """Return the adjacency list of ``u``."""
        return self.adj[u]

    def degree(self, u: Vertex) -> int:
        """Return the number of adjacency entries of ``u``."""
        return len(self.adj[u])

    def weight(self, u: Vertex, v: Vertex) -> Weight | None:
        """Return the weight of the lightest edge ``u -- v`` or ``None``."""
        best = None
        for x, w in self.adj[u]:
            if x == v and (best is None or w < best):
                best = w
        return best

    def edges(self) -> Iterator[Edge]:
        """Yield every undirected edge once, as ``(u, v, w)`` with ``u <= v``.

        Parallel edges are yielded once per copy. A self-loop appears twice in
        ``adj[u]`` and is yielded once.
        """
        for u in range(1, self.n + 1):
            loops = 0
            for v, w in self.adj[u]:
                if u < v:
                    yield u, v, w
                elif u == v:
                    loops += 1
                    if loops % 2:
                        yield u, v, w


__all__ = ["AdjacencyView", "Edge", "Graph", "Vertex", "Weight", "check_vertex"]
