"""
Plot a result tree over its graph with NetworkX + Matplotlib.

Tree edges are drawn thick and coloured, the remaining graph edges thin and
grey, and the root is highlighted. Large graphs are downsampled to a random
subset of their non-tree edges so the tree stays readable.
"""

from __future__ import annotations

import random
from typing import Iterable, List, Optional, Sequence, Tuple

import matplotlib.pyplot as plt
import networkx as nx

from .graph import Graph, Vertex


def to_networkx(G: Graph) -> nx.Graph:
    """Return an undirected :class:`networkx.Graph` with ``weight`` attributes.

    Parallel edges collapse to the lightest copy.
    """
    H = nx.Graph()
    H.add_nodes_from(range(1, G.n + 1))
    for u, v, w in G.edges():
        if not H.has_edge(u, v) or H[u][v]["weight"] > w:
            H.add_edge(u, v, weight=w)
    return H


def downsample_edges(
    edges: Iterable[Tuple[int, int]],
    max_edges: int,
    seed: int = 0,
) -> List[Tuple[int, int]]:
    """
    Randomly sample edges if the graph is too large to visualize.
    """
    edges = list(edges)
    if len(edges) <= max_edges:
        return edges
    rng = random.Random(seed)
    return rng.sample(edges, max_edges)


def plot_tree(
    G: Graph,
    parent: Sequence[Vertex],
    root: Vertex,
    *,
    title: str = "Tree",
    layout: str = "spring",
    show_weights: bool = False,
    max_edges: int = 300,
    node_size: int = 300,
    out_path: Optional[str] = None,
):
    """
    Render the tree described by ``parent`` on top of ``G``.

    Args:
        out_path: Save the figure there instead of opening a window.

    Returns:
        The Matplotlib figure.
    """
    H = to_networkx(G)
    tree = [(p, v) for v, p in enumerate(parent) if p != 0]
    tree_keys = {frozenset(e) for e in tree}
    others = [(u, v) for u, v in H.edges() if frozenset((u, v)) not in tree_keys]
    others = downsample_edges(others, max(0, max_edges - len(tree)))

    if layout == "spring":
        pos = nx.spring_layout(H, seed=42)
    elif layout == "kamada_kawai":
        pos = nx.kamada_kawai_layout(H)
    elif layout == "shell":
        pos = nx.shell_layout(H)
    else:
        raise ValueError(f"Unknown layout: {layout}")

    fig = plt.figure(figsize=(12, 10))

    node_colors = ["tab:red" if node == root else "tab:blue" for node in H.nodes]
    nx.draw_networkx_nodes(H, pos, node_color=node_colors, node_size=node_size, alpha=0.9)
    nx.draw_networkx_edges(H, pos, edgelist=others, width=0.8, alpha=0.3, edge_color="grey")
    nx.draw_networkx_edges(H, pos, edgelist=tree, width=2.5, alpha=0.9, edge_color="tab:green")
    nx.draw_networkx_labels(H, pos, font_size=8, font_color="black")

    if show_weights:
        edge_labels = {(u, v): H[u][v]["weight"] for u, v in tree}
        nx.draw_networkx_edge_labels(H, pos, edge_labels=edge_labels, font_size=7)

    plt.title(title, fontsize=14)
    plt.axis("off")
    plt.tight_layout()
    if out_path:
        fig.savefig(out_path)
        plt.close(fig)
    else:
        plt.show()
    return fig


__all__ = ["downsample_edges", "plot_tree", "to_networkx"]
