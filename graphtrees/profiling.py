"""Timing, peak-memory and optional cProfile measurement of algorithm runs."""

from __future__ import annotations

import cProfile
import pstats
import time
import tracemalloc
from io import StringIO
from types import TracebackType
from typing import Optional


class Measurement:
    """Context manager recording wall time and, optionally, memory and a profile.

    Example:
        ```python
        with Measurement(track_memory=True) as m:
            solver.compute_shortest_path_tree(1)
        print(m.wall_ms, m.peak_kib)
        ```
    """

    def __init__(
        self,
        track_memory: bool = False,
        profile: bool = False,
        dump_path: Optional[str] = None,
    ) -> None:
        """Configure the measurement.

        Args:
            track_memory: Record peak traced allocations with :mod:`tracemalloc`.
            profile: Record a :mod:`cProfile` session.
            dump_path: Optional path where raw profile stats are dumped on exit.
        """
        self.track_memory = track_memory
        self.dump_path = dump_path
        self._prof = cProfile.Profile() if profile or dump_path else None
        self._t0 = 0.0
        self.wall_ms: float = 0.0
        self.peak_kib: Optional[float] = None

    def __enter__(self) -> "Measurement":
        """Start the clocks."""
        if self.track_memory:
            tracemalloc.start()
        if self._prof is not None:
            self._prof.enable()
        self._t0 = time.perf_counter()
        return self

    def __exit__(
        self,
        exc_type: Optional[type[BaseException]],
        exc: Optional[BaseException],
        tb: Optional[TracebackType],
    ) -> None:
        """Stop the clocks and finalize statistics."""
        self.wall_ms = (time.perf_counter() - self._t0) * 1000.0
        if self._prof is not None:
            self._prof.disable()
            if self.dump_path:
                self._prof.dump_stats(self.dump_path)
        if self.track_memory:
            _, peak = tracemalloc.get_traced_memory()
            tracemalloc.stop()
            self.peak_kib = peak / 1024

    def report(self, lines: int = 20) -> str:
        """Return the profile table sorted by cumulative time.

        Raises:
            RuntimeError: If profiling was not enabled.
        """
        if self._prof is None:
            raise RuntimeError("profiling was not enabled for this measurement")
        buffer = StringIO()
        stats = pstats.Stats(self._prof, stream=buffer)
        stats.strip_dirs().sort_stats("cumulative").print_stats(lines)
        return buffer.getvalue()


__all__: list[str] = ["Measurement"]
