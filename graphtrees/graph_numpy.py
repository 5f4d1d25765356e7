"""NumPy-backed graph representation in compressed sparse row layout."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Tuple

import numpy as np
import numpy.typing as npt

from .exceptions import InputError
from .graph import Graph, Vertex, Weight


@dataclass(frozen=True)
class CSRGraph:
    """Read-only undirected graph with flattened adjacency arrays.

    The neighbours of ``u`` are ``targets[offsets[u]:offsets[u + 1]]`` with
    the matching ``weights`` slice. Vertex ``0`` owns an empty range so that
    vertex ids stay ``1`` .. ``n``.
    """

    n: int
    offsets: npt.NDArray[np.int64]
    targets: npt.NDArray[np.int64]
    weights: npt.NDArray[np.int64]

    def __post_init__(self) -> None:
        """Validate array shapes."""
        if self.offsets.shape != (self.n + 2,):
            raise InputError("offsets must hold n + 2 entries.")
        if self.targets.shape != self.weights.shape:
            raise InputError("targets and weights must have the same length.")
        if int(self.offsets[-1]) != self.targets.shape[0]:
            raise InputError("last offset must equal the number of adjacency entries.")

    @classmethod
    def from_graph(cls, G: Graph) -> "CSRGraph":
        """Flatten ``G`` keeping each vertex's adjacency order."""
        degrees = np.array([len(lst) for lst in G.adj], dtype=np.int64)
        offsets = np.zeros(G.n + 2, dtype=np.int64)
        np.cumsum(degrees, out=offsets[1:])
        targets = np.fromiter(
            (v for lst in G.adj for v, _ in lst), dtype=np.int64, count=int(offsets[-1])
        )
        weights = np.fromiter(
            (w for lst in G.adj for _, w in lst), dtype=np.int64, count=int(offsets[-1])
        )
        return cls(n=G.n, offsets=offsets, targets=targets, weights=weights)

    def neighbors(self, u: Vertex) -> Iterator[Tuple[Vertex, Weight]]:
        """Yield the ``(neighbor, weight)`` pairs of ``u`` as Python ints."""
        lo, hi = int(self.offsets[u]), int(self.offsets[u + 1])
        return zip(self.targets[lo:hi].tolist(), self.weights[lo:hi].tolist())

    def degree(self, u: Vertex) -> int:
        """Return the number of adjacency entries of ``u``."""
        return int(self.offsets[u + 1] - self.offsets[u])

    @property
    def m(self) -> int:
        """Number of undirected edges (half the adjacency entries)."""
        return int(self.targets.shape[0]) // 2

    def to_graph(self) -> Graph:
        """Return a :class:`~graphtrees.graph.Graph` with the same edges."""
        g = Graph(self.n)
        for u in range(1, self.n + 1):
            g.adj[u] = list(self.neighbors(u))
        g.m = self.m
        return g


__all__ = ["CSRGraph"]
