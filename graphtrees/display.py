"""Plain-text rendering of graphs and result trees."""

from __future__ import annotations

import math
from typing import Callable, List

from .graph import AdjacencyView, Vertex
from .mst import MinimumSpanningTree
from .spt import ShortestPathTree
from .traversal import BreadthFirstTree, DepthFirstForest

Labeler = Callable[[Vertex], str]


def number_label(v: Vertex) -> str:
    """Label a vertex by its id."""
    return str(v)


def letter_label(v: Vertex) -> str:
    """Label vertex ``1`` as ``A``, ``2`` as ``B`` and so on.

    Ids beyond ``26`` continue spreadsheet-style (``AA``, ``AB``, ...).
    """
    out = ""
    while v > 0:
        v, r = divmod(v - 1, 26)
        out = chr(ord("A") + r) + out
    return out


LABELERS = {"number": number_label, "letter": letter_label}


def render_adjacency(G: AdjacencyView, label: Labeler = number_label) -> str:
    """Render ``adj[u] -> |v | w| -> ...`` lines for every vertex."""
    lines: List[str] = []
    for u in range(1, G.n + 1):
        cells = "".join(f" |{label(v)} | {w}| ->" for v, w in G.neighbors(u))
        lines.append(f"adj[{label(u)}] ->{cells}")
    return "\n".join(lines)


def _tree_lines(parent: List[Vertex], source: Vertex, label: Labeler) -> List[str]:
    lines: List[str] = []
    for u in range(1, len(parent)):
        if parent[u] != 0:
            lines.append(f"{label(u)} <- {label(parent[u])}")
        elif u == source:
            lines.append(f"{label(u)} <- root of tree")
        else:
            lines.append(f"{label(u)} <- - (not reachable from source)")
    return lines


def render_depth_first(res: DepthFirstForest, label: Labeler = number_label) -> str:
    """Render the DFS parent array with discovery/finish times."""
    lines = [f"Depth first traversal from {label(res.source)}"]
    lines.append(f"{'Vertex':<8} {'Parent':<8} {'d':>4} {'f':>4}")
    for u in range(1, len(res.parent)):
        p = label(res.parent[u]) if res.parent[u] else "-"
        lines.append(f"{label(u):<8} {p:<8} {res.discovery[u]:>4} {res.finish[u]:>4}")
    lines.append("")
    lines.append("Traversal tree (parent array):")
    lines.extend(_tree_lines(res.parent, res.source, label))
    return "\n".join(lines)


def render_breadth_first(res: BreadthFirstTree, label: Labeler = number_label) -> str:
    """Render the BFS parent array with edge distances and level count."""
    lines = [f"Breadth first traversal from {label(res.source)}"]
    for u in range(1, len(res.parent)):
        if res.distance[u] < 0:
            continue
        unit = "edge" if res.distance[u] == 1 else "edges"
        lines.append(f"{label(u)}: distance {res.distance[u]} {unit}")
    lines.append(f"Total traversal levels processed: {res.levels}")
    lines.append("")
    lines.append("Traversal tree (parent array):")
    lines.extend(_tree_lines(res.parent, res.source, label))
    return "\n".join(lines)


def render_shortest_path_tree(res: ShortestPathTree, label: Labeler = number_label) -> str:
    """Render the ``Vertex / Parent / Distance`` table of a shortest-path tree."""
    n = len(res.parent) - 1
    lines = [f"{'Vertex':<8} {'Parent':<8} {'Distance from ' + label(res.source):<15}"]
    for u in range(1, n + 1):
        p = label(res.parent[u]) if res.parent[u] else "-"
        d = "inf" if res.dist[u] == math.inf else str(res.dist[u])
        lines.append(f"{label(u):<8} {p:<8} {d:<15}")
    lines.append("")
    lines.append(f"Number of edges in SPT = {res.edge_count} (V - 1 = {n - 1} when connected)")
    return "\n".join(lines)


def render_minimum_spanning_tree(res: MinimumSpanningTree, label: Labeler = number_label) -> str:
    """Render the MST edge list, total weight and edge count."""
    lines = ["Edges in minimum spanning tree (parent -> child):"]
    for p, v, w in res.edges():
        lines.append(f"{label(p)} --({w})--> {label(v)}")
    lines.append("")
    lines.append(f"Weight of MST = {res.total_weight}")
    lines.append(
        f"Number of edges in MST = {res.edge_count} (should be equal to V - 1 = {res.vertex_count - 1})"
    )
    if not res.spanning:
        lines.append("Graph is not connected: the tree spans only the start vertex's component")
    return "\n".join(lines)


__all__ = [
    "LABELERS",
    "Labeler",
    "letter_label",
    "number_label",
    "render_adjacency",
    "render_breadth_first",
    "render_depth_first",
    "render_minimum_spanning_tree",
    "render_shortest_path_tree",
]
