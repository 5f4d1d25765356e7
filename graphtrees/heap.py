"""Indexed binary min-heap over vertex ids.

The heap stores only vertex identifiers. Priorities live in a ``dist`` list
owned by the caller and the reverse index ``h_pos`` (vertex -> heap slot) is
also caller-owned, so an algorithm can lower ``dist[v]`` in place and restore
the heap order with ``sift_up(h_pos[v])`` in ``O(log n)``.

Slots are 1-based: the root is ``a[1]``, the parent of slot ``k`` is
``k // 2`` and its children are ``2k`` and ``2k + 1``. ``h_pos[v] == 0``
means ``v`` is not in the heap.
"""

from __future__ import annotations

from typing import Dict, List, MutableSequence

from .exceptions import AlgorithmError, HeapOverflowError

Vertex = int
Priority = float


class IndexedMinHeap:
    """Min-heap of vertices ordered by an external priority list.

    Args:
        capacity: Maximum number of vertices held at once (usually ``V``).
        dist: Priority of each vertex, indexed by vertex id. Borrowed, not copied.
        h_pos: Heap slot of each vertex, indexed by vertex id. Borrowed and
            kept up to date by every operation. Entries must start at ``0``.

    Ties between equal priorities resolve by position only (sift-up moves on
    strictly smaller priorities, sift-down prefers the left child), so a given
    sequence of operations always produces the same extraction order.
    """

    def __init__(
        self,
        capacity: int,
        dist: MutableSequence[Priority],
        h_pos: MutableSequence[int],
    ) -> None:
        if capacity < 0:
            raise ValueError("capacity must be non-negative.")
        self.capacity = capacity
        self.dist = dist
        self.h_pos = h_pos
        self._a: List[Vertex] = [0] * (capacity + 1)
        self._n = 0
        self.counters: Dict[str, int] = {
            "inserts": 0,
            "extracts": 0,
            "sift_ups": 0,
            "sift_downs": 0,
            "swaps": 0,
        }

    def __len__(self) -> int:
        return self._n

    def __contains__(self, v: object) -> bool:
        return isinstance(v, int) and 0 <= v < len(self.h_pos) and self.h_pos[v] != 0

    def is_empty(self) -> bool:
        """Return ``True`` if the heap holds no vertices."""
        return self._n == 0

    def peek(self) -> Vertex:
        """Return the vertex with the smallest priority without removing it."""
        if self._n == 0:
            raise AlgorithmError("peek on an empty heap.")
        return self._a[1]

    def items(self) -> List[Vertex]:
        """Return a copy of the occupied slots ``a[1..n]`` in heap order."""
        return self._a[1 : self._n + 1]

    def sift_up(self, k: int) -> None:
        """Move the vertex at slot ``k`` towards the root.

        The vertex at ``k`` may have a smaller priority than its parent at
        ``k // 2``, typically right after an insert or a priority decrease.
        Parents with a larger priority are shifted down one level; the vertex
        lands in the first slot whose parent is not larger.
        """
        a, dist, h_pos = self._a, self.dist, self.h_pos
        self.counters["sift_ups"] += 1
        v = a[k]
        v_dist = dist[v]
        while k > 1 and v_dist < dist[a[k // 2]]:
            a[k] = a[k // 2]
            h_pos[a[k]] = k
            k //= 2
            self.counters["swaps"] += 1
        a[k] = v
        h_pos[v] = k

    def sift_down(self, k: int) -> None:
        """Move the vertex at slot ``k`` towards the leaves.

        At each level the smaller child is chosen; the right child only wins
        when it exists and is strictly smaller than the left. The walk stops
        once the vertex's priority is no larger than that child's.
        """
        a, dist, h_pos, n = self._a, self.dist, self.h_pos, self._n
        self.counters["sift_downs"] += 1
        v = a[k]
        v_dist = dist[v]
        while 2 * k <= n:
            j = 2 * k
            if j < n and dist[a[j + 1]] < dist[a[j]]:
                j += 1
            if v_dist <= dist[a[j]]:
                break
            a[k] = a[j]
            h_pos[a[k]] = k
            k = j
            self.counters["swaps"] += 1
        a[k] = v
        h_pos[v] = k

    def insert(self, v: Vertex) -> None:
        """Append ``v`` at the next free slot and sift it up.

        Raises:
            HeapOverflowError: If the heap is full or ``v`` is already present.
        """
        if self.h_pos[v] != 0:
            raise HeapOverflowError(f"vertex {v} is already in the heap at slot {self.h_pos[v]}")
        if self._n == self.capacity:
            raise HeapOverflowError(f"heap capacity {self.capacity} exceeded inserting {v}")
        self.counters["inserts"] += 1
        self._n += 1
        self._a[self._n] = v
        self.sift_up(self._n)

    def extract_min(self) -> Vertex:
        """Remove and return the vertex with the smallest priority.

        Raises:
            AlgorithmError: If the heap is empty.
        """
        if self._n == 0:
            raise AlgorithmError("extract_min on an empty heap.")
        a = self._a
        self.counters["extracts"] += 1
        v = a[1]
        self.h_pos[v] = 0
        a[1] = a[self._n]
        a[self._n] = 0
        self._n -= 1
        if self._n > 0:
            self.h_pos[a[1]] = 1
            self.sift_down(1)
        return v

    def check(self) -> None:
        """Verify heap order and ``h_pos`` consistency.

        Raises:
            AlgorithmError: On the first violated invariant.
        """
        a, dist, h_pos = self._a, self.dist, self.h_pos
        for k in range(1, self._n + 1):
            v = a[k]
            if h_pos[v] != k:
                raise AlgorithmError(f"h_pos[{v}] == {h_pos[v]} but vertex sits at slot {k}")
            if k > 1 and dist[a[k // 2]] > dist[v]:
                raise AlgorithmError(
                    f"heap order violated: slot {k // 2} ({dist[a[k // 2]]}) > slot {k} ({dist[v]})"
                )
        present = set(a[1 : self._n + 1])
        for v in range(len(h_pos)):
            if v not in present and h_pos[v] != 0:
                raise AlgorithmError(f"h_pos[{v}] == {h_pos[v]} but vertex is not in the heap")


__all__ = ["IndexedMinHeap"]
