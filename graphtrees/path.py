"""Utilities for reconstructing paths from parent arrays."""

from __future__ import annotations

from typing import List, Sequence

from .exceptions import InvalidVertexError

Vertex = int


def reconstruct_path(
    parent: Sequence[Vertex],
    source: Vertex,
    target: Vertex,
) -> List[Vertex]:
    """Return the path from ``source`` to ``target`` using a parent array.

    Args:
        parent: Predecessor of each vertex, ``0`` for the root and for
            unreached vertices. Index ``0`` is unused.
        source: Root of the tree.
        target: Vertex to walk back from.

    Returns:
        Vertices from source to target (inclusive). Returns an empty list if
        ``target`` is not in the tree rooted at ``source``.

    Raises:
        InvalidVertexError: If ``source`` or ``target`` is out of range.
    """
    n = len(parent) - 1
    if not (1 <= source <= n and 1 <= target <= n):
        raise InvalidVertexError(f"source/target must be vertex ids in [1, {n}].")
    if source == target:
        return [source]

    chain: List[Vertex] = []
    cur = target
    # a tree path has at most n vertices; more means the array holds a cycle
    while cur != 0 and len(chain) <= n:
        chain.append(cur)
        if cur == source:
            chain.reverse()
            return chain
        cur = parent[cur]

    return []  # unreachable


def tree_depths(parent: Sequence[Vertex], root: Vertex) -> List[int]:
    """Return the number of tree edges between ``root`` and every vertex.

    Unreached vertices (parent ``0`` and not the root) get ``-1``.
    """
    n = len(parent) - 1
    depth = [-1] * (n + 1)
    depth[root] = 0
    for v in range(1, n + 1):
        if depth[v] >= 0 or parent[v] == 0:
            continue
        stack = []
        cur = v
        while depth[cur] < 0 and parent[cur] != 0 and len(stack) <= n:
            stack.append(cur)
            cur = parent[cur]
        base = depth[cur]
        if base < 0:
            continue
        for x in reversed(stack):
            base += 1
            depth[x] = base
    return depth


__all__ = ["reconstruct_path", "tree_depths"]
