"""Export utilities for result trees."""

from __future__ import annotations

import json
import math
from typing import List, Optional, Sequence, Tuple

from .graph import Graph, Vertex
from .path import tree_depths


def tree_edges(G: Graph, parent: Sequence[Vertex]) -> List[Tuple[int, int, Optional[int]]]:
    """Return ``(parent, child, weight)`` for every vertex with a parent.

    The weight is that of the lightest graph edge between the two vertices.
    """
    return [(p, v, G.weight(p, v)) for v, p in enumerate(parent) if p != 0]


def export_tree_json(
    G: Graph,
    parent: Sequence[Vertex],
    root: Vertex,
    dist: Optional[Sequence[float]] = None,
) -> str:
    """Return a JSON string with the tree's nodes and edges.

    Nodes carry their ``depth`` in tree edges (``-1`` when unreached) and,
    when ``dist`` is given, their distance (``null`` when infinite).
    """
    depth = tree_depths(parent, root)
    nodes = []
    for i in range(1, G.n + 1):
        node = {"id": i, "depth": depth[i]}
        if dist is not None:
            node["dist"] = None if dist[i] == math.inf else dist[i]
        nodes.append(node)
    data = {
        "root": root,
        "nodes": nodes,
        "edges": [
            {"source": u, "target": v, "weight": w} for (u, v, w) in tree_edges(G, parent)
        ],
    }
    return json.dumps(data)


def export_tree_graphml(G: Graph, parent: Sequence[Vertex]) -> str:
    """Return a minimal GraphML string for the tree, edges directed parent to child."""
    lines: List[str] = []
    lines.append('<?xml version="1.0" encoding="UTF-8"?>')
    lines.append('<graphml xmlns="http://graphml.graphdrawing.org/xmlns">')
    lines.append('  <graph id="T" edgedefault="directed">')
    for i in range(1, G.n + 1):
        lines.append(f'    <node id="n{i}"/>')
    for u, v, w in tree_edges(G, parent):
        lines.append(f'    <edge source="n{u}" target="n{v}" weight="{w}"/>')
    lines.append("  </graph>")
    lines.append("</graphml>")
    return "\n".join(lines)


__all__ = ["export_tree_graphml", "export_tree_json", "tree_edges"]
