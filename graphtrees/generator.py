"""
Seeded generator of undirected weighted graphs.

SUPPORTED GRAPH TYPES
---------------------
1. random
   Uniformly sampled edges between distinct vertices.
   Use for:
     - Average-case behaviour of Dijkstra and Prim

2. grid
   2D grid with edges between horizontal and vertical neighbours.
   Use for:
     - Many equal-length shortest paths (tie-breaking in the heap)
     - Deep DFS trees

3. tree
   A random spanning tree, optionally with extra random edges.
   Use for:
     - Sparse graphs where the MST is (nearly) the whole graph

WEIGHT DISTRIBUTIONS
--------------------
- uniform: evenly distributed edge weights
- small_int: many equal weights (stresses tie handling)
- log_uniform / exp: heavy-tailed distributions

All weights are non-negative integers.
"""

from __future__ import annotations

import math
import random
from dataclasses import dataclass, field
from typing import Dict, List, Literal, Optional, Set, Tuple

from .exceptions import ConfigError
from .graph import Edge, Graph

WeightDist = Literal["uniform", "small_int", "log_uniform", "exp"]
GraphType = Literal["random", "grid", "tree"]


@dataclass(frozen=True)
class GeneratedGraph:
    graph: Graph
    metadata: Dict[str, object] = field(default_factory=dict)


def _sample_weight(
    rng: random.Random,
    dist: WeightDist,
    w_min: int,
    w_max: int,
) -> int:
    if dist == "uniform":
        return rng.randint(w_min, w_max)

    if dist == "small_int":
        hi = min(w_max, w_min + 10)
        return rng.randint(w_min, hi)

    if dist == "log_uniform":
        # Sample uniformly in log-space; shift by one to avoid log(0).
        a = max(1, w_min + 1)
        b = max(a, w_max + 1)
        x = math.exp(rng.uniform(math.log(a), math.log(b)))
        return max(w_min, min(w_max, int(round(x - 1))))

    if dist == "exp":
        if w_max == w_min:
            return w_min
        lam = 1.0 / max(1.0, (w_max - w_min) / 4.0)
        x = rng.expovariate(lam)
        return int(w_min + min(w_max - w_min, round(x)))

    raise ConfigError(f"Unknown weight distribution: {dist}")


def generate_graph(
    *,
    n: int,
    m: Optional[int] = None,
    graph_type: GraphType = "random",
    weight_dist: WeightDist = "uniform",
    w_min: int = 1,
    w_max: int = 100,
    seed: Optional[int] = 0,
    connected: bool = True,
    grid_cols: Optional[int] = None,
) -> GeneratedGraph:
    """
    Generate an undirected weighted graph on vertices ``1`` .. ``n``.

    Notes:
    - ``m`` is the target number of distinct undirected edges. It defaults to
      ``2 * n`` for ``random`` and to no extra edges for ``grid``/``tree``.
    - ``connected=True`` for ``random`` first lays a random spanning tree, so
      every vertex is reachable from every other.
    - No self-loops or parallel edges are produced.

    Raises:
        ConfigError: On invalid sizes or weight bounds.
    """
    if n <= 0:
        raise ConfigError("n must be > 0.")
    if w_min < 0:
        raise ConfigError("w_min must be >= 0 for Dijkstra-safe graphs.")
    if w_max < w_min:
        raise ConfigError("w_max must be >= w_min.")
    if m is not None and m < 0:
        raise ConfigError("m must be >= 0.")

    rng = random.Random(seed)
    max_edges = n * (n - 1) // 2
    seen: Set[Tuple[int, int]] = set()
    edges: List[Edge] = []

    def add_edge(u: int, v: int) -> None:
        if u == v:
            return
        key = (min(u, v), max(u, v))
        if key in seen:
            return
        seen.add(key)
        edges.append((u, v, _sample_weight(rng, weight_dist, w_min, w_max)))

    def add_random_until(target: int) -> None:
        target = min(target, max_edges)
        while len(edges) < target:
            add_edge(rng.randint(1, n), rng.randint(1, n))

    def add_spanning_tree() -> None:
        order = list(range(1, n + 1))
        rng.shuffle(order)
        for i in range(1, n):
            add_edge(order[i], order[rng.randrange(i)])

    if graph_type == "random":
        if connected:
            add_spanning_tree()
        add_random_until(2 * n if m is None else m)

    elif graph_type == "tree":
        add_spanning_tree()
        if m is not None:
            add_random_until(m)

    elif graph_type == "grid":
        cols = grid_cols or max(1, math.isqrt(n))
        for v in range(1, n + 1):
            if v % cols != 0 and v + 1 <= n:
                add_edge(v, v + 1)
            if v + cols <= n:
                add_edge(v, v + cols)
        if m is not None:
            add_random_until(m)

    else:
        raise ConfigError(f"Unknown graph_type: {graph_type}")

    return GeneratedGraph(
        graph=Graph.from_edges(n, edges),
        metadata={
            "graph_type": graph_type,
            "weight_dist": weight_dist,
            "w_min": w_min,
            "w_max": w_max,
            "seed": seed,
            "connected": connected,
            "m": len(edges),
        },
    )


__all__ = ["GeneratedGraph", "generate_graph"]
