"""Facade running the tree and traversal algorithms over one graph."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional

from .exceptions import ConfigError
from .graph import AdjacencyView, Graph, Vertex
from .logger import Logger, NoopLogger
from .mst import MinimumSpanningTree, minimum_spanning_tree
from .spt import ShortestPathTree, shortest_path_tree
from .traversal import BreadthFirstTree, DepthFirstForest, breadth_first, depth_first


@dataclass(frozen=True)
class SolverMetrics:
    """Performance metrics collected from solver runs."""

    n: int
    m: int
    backend: str
    runs: Dict[str, int]
    counters: Dict[str, int]
    wall_ms: float
    peak_kib: float | None = None


@dataclass(frozen=True)
class SolverConfig:
    """Configuration knobs for :class:`TreeSolver`.

    Attributes:
        backend: ``"list"`` runs on the graph's adjacency lists, ``"csr"`` on
            a :class:`~graphtrees.graph_numpy.CSRGraph` copy.
        dfs_recursive: Use the recursive depth-first traversal instead of the
            explicit-stack one.
        strict_mst: Raise :class:`~graphtrees.exceptions.DisconnectedGraphError`
            instead of returning a partial spanning tree.
        check_heap: Verify heap invariants after every heap step.
    """

    backend: str = "list"  # or "csr"
    dfs_recursive: bool = False
    strict_mst: bool = False
    check_heap: bool = False


class TreeSolver:
    """Run DFS, BFS, Dijkstra and Prim on one read-only graph.

    Every call allocates its own working arrays, so calls can be repeated and
    mixed freely on the same solver.
    """

    def __init__(
        self,
        G: Graph,
        config: Optional[SolverConfig] = None,
        logger: Logger | None = None,
    ) -> None:
        """Initialize the solver.

        Args:
            G: Input graph.
            config: Optional solver configuration.
            logger: Receives the algorithms' trace and summary events.

        Raises:
            ConfigError: If ``config.backend`` is unknown.
        """
        self.G = G
        self.cfg = config or SolverConfig()
        self.logger = logger or NoopLogger()
        self.view: AdjacencyView
        if self.cfg.backend == "list":
            self.view = G
        elif self.cfg.backend == "csr":
            from .graph_numpy import CSRGraph

            self.view = CSRGraph.from_graph(G)
        else:
            raise ConfigError(f"unknown backend '{self.cfg.backend}'")

        self.runs: Dict[str, int] = {"dfs": 0, "bfs": 0, "spt": 0, "mst": 0}
        self.counters: Dict[str, int] = {
            "inserts": 0,
            "extracts": 0,
            "sift_ups": 0,
            "sift_downs": 0,
            "swaps": 0,
            "edges_relaxed": 0,
        }

    def _absorb(self, counters: Dict[str, int]) -> None:
        for k, v in counters.items():
            self.counters[k] = self.counters.get(k, 0) + v

    # ---------- traversals ------------------------------------------------

    def traverse_depth_first(self, source: Vertex) -> DepthFirstForest:
        """Return parents and discovery/finish times of a DFS from ``source``."""
        res = depth_first(
            self.view, source, recursive=self.cfg.dfs_recursive, logger=self.logger
        )
        self.runs["dfs"] += 1
        return res

    def traverse_breadth_first(self, source: Vertex) -> BreadthFirstTree:
        """Return parents and edge distances of a BFS from ``source``."""
        res = breadth_first(self.view, source, logger=self.logger)
        self.runs["bfs"] += 1
        return res

    # ---------- heap-driven trees -----------------------------------------

    def compute_shortest_path_tree(self, source: Vertex) -> ShortestPathTree:
        """Return Dijkstra's distances and parents from ``source``."""
        res = shortest_path_tree(
            self.view, source, logger=self.logger, check_heap=self.cfg.check_heap
        )
        self.runs["spt"] += 1
        self._absorb(res.counters)
        return res

    def compute_minimum_spanning_tree(self, start: Vertex) -> MinimumSpanningTree:
        """Return Prim's spanning tree grown from ``start``.

        Raises:
            DisconnectedGraphError: If ``strict_mst`` is set and the graph is
                not connected.
        """
        res = minimum_spanning_tree(
            self.view, start, logger=self.logger, check_heap=self.cfg.check_heap
        )
        self.runs["mst"] += 1
        self._absorb(res.counters)
        if self.cfg.strict_mst:
            res.require_spanning()
        return res

    # ---------- counters --------------------------------------------------

    def summary(self) -> Dict[str, int]:
        """Return a copy of the counters accumulated over all runs."""
        return dict(self.counters)

    def metrics(self, wall_ms: float, peak_kib: float | None = None) -> SolverMetrics:
        """Return performance metrics for the runs so far.

        Args:
            wall_ms: Wall-clock time spent in the runs in milliseconds.
            peak_kib: Optional peak memory usage in KiB.
        """
        return SolverMetrics(
            n=self.G.n,
            m=self.G.m,
            backend=self.cfg.backend,
            runs=dict(self.runs),
            counters=self.summary(),
            wall_ms=wall_ms,
            peak_kib=peak_kib,
        )


__all__ = ["SolverConfig", "SolverMetrics", "TreeSolver"]
