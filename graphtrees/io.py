"""Graph input/output helpers.

All formats carry 1-based vertex ids and integer weights. Each undirected
edge is written once.
"""

from __future__ import annotations

import json
import re
import xml.etree.ElementTree as ET
from pathlib import Path
from typing import List, Optional, Tuple

from .exceptions import GraphFormatError
from .graph import Graph

EdgeList = List[Tuple[int, int, int]]

_WS = re.compile(r"\s+")


def _parse_int(token: str, what: str, lineno: int) -> int:
    try:
        return int(token)
    except ValueError as exc:
        raise GraphFormatError(f"line {lineno}: {what} {token!r} is not an integer") from exc


def _read_txt(path: Path) -> Tuple[int, EdgeList]:
    """Read the ``V E`` header format.

    The first line holds the vertex count ``V`` and edge count ``E``; each of
    the next ``E`` non-blank lines holds ``u v w`` separated by whitespace.

    Raises:
        GraphFormatError: If the header is missing or malformed, a line has
            fewer than three fields, or fewer than ``E`` edges are present.
    """
    edges: EdgeList = []
    with path.open("r", encoding="utf-8") as fh:
        header = fh.readline()
        parts = _WS.split(header.strip())
        if len(parts) < 2 or not parts[0]:
            raise GraphFormatError("line 1: expected 'V E' header")
        n = _parse_int(parts[0], "vertex count", 1)
        m = _parse_int(parts[1], "edge count", 1)
        lineno = 1
        for raw in fh:
            lineno += 1
            if len(edges) == m:
                break
            row = raw.strip()
            if not row:
                continue
            fields = _WS.split(row)
            if len(fields) < 3:
                raise GraphFormatError(f"line {lineno}: expected 'u v w'")
            edges.append(
                (
                    _parse_int(fields[0], "vertex", lineno),
                    _parse_int(fields[1], "vertex", lineno),
                    _parse_int(fields[2], "weight", lineno),
                )
            )
    if len(edges) < m:
        raise GraphFormatError(f"header announces {m} edges but only {len(edges)} were read")
    return n, edges


def _write_txt(path: Path, G: Graph) -> None:
    """Write the ``V E`` header format."""
    edges = list(G.edges())
    with path.open("w", encoding="utf-8") as fh:
        fh.write(f"{G.n} {len(edges)}\n")
        for u, v, w in edges:
            fh.write(f"{u} {v} {w}\n")


def _read_csv(path: Path) -> Tuple[int, EdgeList]:
    """Read a CSV file containing edge data and return the number of nodes and edge list.

    Each line in the file should contain at least three columns: first
    endpoint, second endpoint, and edge weight. Lines starting with '#' or
    empty lines are ignored. Columns can be separated by commas or tabs.

    Args:
        path: The path to the CSV file.

    Returns:
        A tuple containing the number of nodes (max node id) and a list of
        edges, where each edge is represented as a tuple (u, v, w).

    Raises:
        GraphFormatError: If a row cannot be parsed or no edges are found.
    """
    edges: EdgeList = []
    max_id = 0
    with path.open("r", encoding="utf-8") as fh:
        for lineno, raw in enumerate(fh, start=1):
            row = raw.strip()
            if not row or row.startswith("#"):
                continue
            parts = row.replace("\t", ",").split(",")
            if len(parts) < 3:
                raise GraphFormatError(f"line {lineno}: expected 'u,v,w'")
            u = _parse_int(parts[0].strip(), "vertex", lineno)
            v = _parse_int(parts[1].strip(), "vertex", lineno)
            w = _parse_int(parts[2].strip(), "weight", lineno)
            edges.append((u, v, w))
            max_id = max(max_id, u, v)
    if max_id < 1:
        raise GraphFormatError("no edges parsed from file")
    return max_id, edges


def _write_csv(path: Path, G: Graph) -> None:
    """Write one ``u,v,w`` row per undirected edge."""
    with path.open("w", encoding="utf-8") as fh:
        for u, v, w in G.edges():
            fh.write(f"{u},{v},{w}\n")


def _read_jsonl(path: Path) -> Tuple[int, EdgeList]:
    """Read a JSON Lines file with one ``{"u": .., "v": .., "w": ..}`` object per line.

    An optional first object ``{"n": V}`` fixes the vertex count so isolated
    vertices survive a round trip; otherwise the largest id is used.

    Raises:
        GraphFormatError: If a line is not valid JSON or lacks a key.
    """
    edges: EdgeList = []
    max_id = 0
    n: Optional[int] = None
    with path.open("r", encoding="utf-8") as fh:
        for lineno, raw in enumerate(fh, start=1):
            row = raw.strip()
            if not row:
                continue
            try:
                obj = json.loads(row)
                if "n" in obj and "u" not in obj:
                    n = int(obj["n"])
                    continue
                u = int(obj["u"])
                v = int(obj["v"])
                w = obj["w"]
            except (ValueError, KeyError, TypeError) as exc:
                raise GraphFormatError(f"line {lineno}: {exc}") from exc
            if isinstance(w, bool) or not isinstance(w, int):
                raise GraphFormatError(f"line {lineno}: weight {w!r} is not an integer")
            edges.append((u, v, w))
            max_id = max(max_id, u, v)
    n = n if n is not None else max_id
    if n < 1:
        raise GraphFormatError("no edges parsed from file")
    return n, edges


def _write_jsonl(path: Path, G: Graph) -> None:
    """Write a ``{"n": V}`` line followed by one JSON object per edge."""
    with path.open("w", encoding="utf-8") as fh:
        fh.write(json.dumps({"n": G.n}) + "\n")
        for u, v, w in G.edges():
            fh.write(json.dumps({"u": u, "v": v, "w": w}) + "\n")


def _node_id(raw: str) -> int:
    return int(raw[1:]) if raw.startswith("n") else int(raw)


def _read_graphml(path: Path) -> Tuple[int, EdgeList]:
    """Parse an undirected GraphML file.

    Node ids may be plain integers or ``n<i>``. The weight is taken from a
    ``weight`` attribute or a ``<data key="w">`` child and defaults to 1.

    Raises:
        GraphFormatError: If the XML is malformed or holds no nodes.
    """
    try:
        root = ET.parse(path).getroot()
    except ET.ParseError as exc:
        raise GraphFormatError(f"invalid GraphML: {exc}") from exc
    ns = "{http://graphml.graphdrawing.org/xmlns}"
    edges: EdgeList = []
    max_id = 0
    try:
        for node in root.findall(f".//{ns}node"):
            max_id = max(max_id, _node_id(node.attrib.get("id", "")))
        for edge in root.findall(f".//{ns}edge"):
            u = _node_id(edge.attrib.get("source", ""))
            v = _node_id(edge.attrib.get("target", ""))
            w_attr = edge.attrib.get("weight")
            if w_attr is None:
                data = edge.find(f"{ns}data[@key='w']")
                w = int(data.text) if (data is not None and data.text is not None) else 1
            else:
                w = int(w_attr)
            edges.append((u, v, w))
            max_id = max(max_id, u, v)
    except ValueError as exc:
        raise GraphFormatError(f"invalid GraphML id or weight: {exc}") from exc
    if max_id < 1:
        raise GraphFormatError("no nodes parsed from file")
    return max_id, edges


def _write_graphml(path: Path, G: Graph) -> None:
    """Write the graph as undirected GraphML with ``n<i>`` node ids."""
    lines: List[str] = []
    lines.append('<?xml version="1.0" encoding="UTF-8"?>')
    lines.append('<graphml xmlns="http://graphml.graphdrawing.org/xmlns">')
    lines.append('  <graph id="G" edgedefault="undirected">')
    for i in range(1, G.n + 1):
        lines.append(f'    <node id="n{i}"/>')
    for u, v, w in G.edges():
        lines.append(f'    <edge source="n{u}" target="n{v}" weight="{w}"/>')
    lines.append("  </graph>")
    lines.append("</graphml>")
    path.write_text("\n".join(lines), encoding="utf-8")


_FMT_READERS = {
    "txt": _read_txt,
    "csv": _read_csv,
    "jsonl": _read_jsonl,
    "graphml": _read_graphml,
}

_FMT_WRITERS = {
    "txt": _write_txt,
    "csv": _write_csv,
    "jsonl": _write_jsonl,
    "graphml": _write_graphml,
}

FORMATS = tuple(_FMT_READERS)


def _detect_format(path: Path) -> Optional[str]:
    """Detect the file format based on the file extension.

    Returns:
        ``"txt"``, ``"csv"``, ``"jsonl"``, ``"graphml"`` or ``None`` if the
        extension is not recognized.
    """
    ext = path.suffix.lower()
    if ext in {".txt", ".dat", ""}:
        return "txt"
    if ext in {".csv", ".tsv"}:
        return "csv"
    if ext in {".jsonl", ".json"}:
        return "jsonl"
    if ext == ".graphml":
        return "graphml"
    return None


def read_graph(path: str, fmt: Optional[str] = None) -> Graph:
    """Read a graph from a file in the specified format.

    Args:
        path: The path to the graph file.
        fmt: The format of the graph file. If None, the format is auto-detected.

    Returns:
        The graph object constructed from the file.

    Raises:
        GraphFormatError: If the graph format is unknown or the file is malformed.
        NegativeWeightError: If the file holds a negative weight.
    """
    p = Path(path)
    fmt = fmt or _detect_format(p)
    if fmt is None or fmt not in _FMT_READERS:
        raise GraphFormatError("unknown graph format")
    n, edges = _FMT_READERS[fmt](p)
    return Graph.from_edges(n, edges)


def write_graph(G: Graph, path: str, fmt: Optional[str] = None) -> None:
    """Write a graph to a file in the specified format.

    Args:
        G: The graph object to be written.
        path: The file path where the graph will be saved.
        fmt: The format to use for writing the graph. If None, the format is
             auto-detected from the file extension.

    Raises:
        GraphFormatError: If the format is unknown or unsupported.
    """
    p = Path(path)
    fmt = fmt or _detect_format(p)
    if fmt is None or fmt not in _FMT_WRITERS:
        raise GraphFormatError("unknown graph format")
    _FMT_WRITERS[fmt](p, G)


__all__ = ["FORMATS", "read_graph", "write_graph"]
