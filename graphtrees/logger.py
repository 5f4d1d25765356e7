"""Structured step tracing for the tree and traversal algorithms.

Every algorithm takes an optional ``logger`` and reports through the
:class:`Logger` protocol with a dotted event name and keyword fields:

- ``debug``: one event per step (``spt.extract``, ``spt.insert``,
  ``spt.sift_up``, ``mst.extract``, ``dfs.discover``, ``dfs.finish``,
  ``bfs.level``, ``bfs.enqueue``, ...).
- ``info``: a single summary per run (``spt.done``, ``mst.done``,
  ``dfs.done``, ``bfs.done``) and the CLI's ``run`` totals.
- ``warning``: a spanning tree that covers only part of the graph
  (``mst.partial``).
"""

from __future__ import annotations

import json
import sys
from typing import Any, Dict, Protocol


class Logger(Protocol):
    """Sink for algorithm trace and summary events."""

    def info(self, event: str, /, **fields: Any) -> None:
        """Record a per-run summary."""
        ...

    def debug(self, event: str, /, **fields: Any) -> None:
        """Record a single algorithm step."""
        ...

    def warning(self, event: str, /, **fields: Any) -> None:
        """Record a degraded but usable result."""
        ...


class NoopLogger:
    """Logger used when the caller passes none; drops every event."""

    def info(self, event: str, /, **fields: Any) -> None:
        return

    def debug(self, event: str, /, **fields: Any) -> None:
        return

    def warning(self, event: str, /, **fields: Any) -> None:
        return


class StdLogger:
    """Write events as ``level event key=value`` lines or JSON objects.

    ``level="debug"`` reproduces a full step-by-step run (every heap
    extraction, insertion and decrease-key, every DFS discovery and finish,
    every BFS level). The default ``"warning"`` only reports partial
    spanning trees.

    Args:
        level: Lowest level written: ``"debug"``, ``"info"`` or ``"warning"``.
        json_fmt: Write one JSON object per event instead of text.
        stream: Output stream, ``sys.stderr`` by default.
    """

    _levels: Dict[str, int] = {"debug": 10, "info": 20, "warning": 30}

    def __init__(
        self,
        level: str = "warning",
        json_fmt: bool = False,
        stream: Any | None = None,
    ) -> None:
        self.level = level
        self.json_fmt = json_fmt
        self.stream = stream or sys.stderr

    def _enabled(self, level: str) -> bool:
        return self._levels[level] >= self._levels.get(self.level, 20)

    def log(self, level: str, event: str, /, **fields: Any) -> None:
        """Write ``event`` with its ``fields`` if ``level`` is enabled.

        ``level`` and ``event`` are positional-only, so an event may carry
        fields of the same name.
        """
        if not self._enabled(level):
            return
        if self.json_fmt:
            obj = {"level": level, "event": event}
            obj.update(fields)
            self.stream.write(json.dumps(obj, default=str) + "\n")
        else:
            kv = " ".join(f"{k}={v}" for k, v in fields.items())
            msg = f"{level} {event} {kv}".rstrip()
            self.stream.write(msg + "\n")

    def info(self, event: str, /, **fields: Any) -> None:
        self.log("info", event, **fields)

    def debug(self, event: str, /, **fields: Any) -> None:
        self.log("debug", event, **fields)

    def warning(self, event: str, /, **fields: Any) -> None:
        self.log("warning", event, **fields)


__all__ = ["Logger", "NoopLogger", "StdLogger"]
