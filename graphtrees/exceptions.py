"""Custom exception types used across :mod:`graphtrees`."""

from __future__ import annotations


class GraphTreesError(Exception):
    """Base class for all package-specific errors."""


class InputError(GraphTreesError, ValueError):
    """Raised for invalid user input such as malformed edges."""


class InvalidVertexError(InputError):
    """Raised when a source, start or target vertex is outside ``[1, V]``."""


class GraphFormatError(InputError):
    """Raised when parsing a graph file fails."""


class ConfigError(GraphTreesError, ValueError):
    """Raised for invalid configuration options."""


class NegativeWeightError(ConfigError):
    """Raised when an edge with a negative weight is added to a graph."""


class AlgorithmError(GraphTreesError, RuntimeError):
    """Raised when algorithm invariants are violated at runtime."""


class HeapOverflowError(AlgorithmError):
    """Raised on an insert beyond heap capacity or of a vertex already present."""


class DisconnectedGraphError(GraphTreesError):
    """Raised when a spanning tree was required but only part of the graph is reachable."""


__all__ = [
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
