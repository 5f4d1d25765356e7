"""Public package exports for :mod:`graphtrees`."""

from __future__ import annotations

from .baselines import dijkstra_reference, kruskal_weight
from .exceptions import (
    AlgorithmError,
    ConfigError,
    DisconnectedGraphError,
    GraphFormatError,
    GraphTreesError,
    HeapOverflowError,
    InputError,
    InvalidVertexError,
    NegativeWeightError,
)
from .graph import Graph
from .graph_numpy import CSRGraph
from .heap import IndexedMinHeap
from .io import read_graph, write_graph
from .logger import Logger, NoopLogger, StdLogger
from .mst import MinimumSpanningTree, minimum_spanning_tree
from .solver import SolverConfig, SolverMetrics, TreeSolver
from .spt import ShortestPathTree, shortest_path_tree
from .traversal import BreadthFirstTree, Colour, DepthFirstForest, breadth_first, depth_first

__version__ = "0.1.0"

__all__ = [
    "Graph",
    "CSRGraph",
    "IndexedMinHeap",
    "TreeSolver",
    "SolverConfig",
    "SolverMetrics",
    "ShortestPathTree",
    "MinimumSpanningTree",
    "DepthFirstForest",
    "BreadthFirstTree",
    "Colour",
    "shortest_path_tree",
    "minimum_spanning_tree",
    "depth_first",
    "breadth_first",
    "dijkstra_reference",
    "kruskal_weight",
    "Logger",
    "NoopLogger",
    "StdLogger",
    "read_graph",
    "write_graph",
    "GraphTreesError",
    "InputError",
    "InvalidVertexError",
    "GraphFormatError",
    "ConfigError",
    "NegativeWeightError",
    "AlgorithmError",
    "HeapOverflowError",
    "DisconnectedGraphError",
]
