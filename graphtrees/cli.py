"""Command-line interface for running the tree and traversal algorithms."""

from __future__ import annotations

import argparse
import json
import math
import sys
import traceback
from dataclasses import asdict
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence, Tuple

from .display import (
    LABELERS,
    render_adjacency,
    render_breadth_first,
    render_depth_first,
    render_minimum_spanning_tree,
    render_shortest_path_tree,
)
from .exceptions import (
    ConfigError,
    DisconnectedGraphError,
    GraphFormatError,
    GraphTreesError,
    InputError,
)
from .export import export_tree_graphml, export_tree_json
from .graph import Graph, check_vertex
from .io import FORMATS, read_graph
from .logger import StdLogger
from .path import reconstruct_path
from .profiling import Measurement
from .solver import SolverConfig, TreeSolver

EXAMPLE_TXT = """4 4
1 2 4
2 3 1
1 3 10
3 4 2
"""

ALGORITHMS = ("dfs", "bfs", "spt", "mst")


def _build_graph_from_file(path: str, fmt: Optional[str]) -> Graph:
    """Build a :class:`Graph` from an edges file."""
    p = Path(path)
    if not p.exists():
        raise InputError(f"edges file not found: {path}")
    return read_graph(path, fmt)


def _build_random_graph(n: int, m: int, seed: int) -> Graph:
    """Generate a random connected graph for quick experiments."""
    from .generator import generate_graph

    return generate_graph(n=n, m=m, seed=seed).graph


def _finite(values: Sequence[float]) -> List[Any]:
    return [None if v == math.inf else v for v in values[1:]]


def _run(solver: TreeSolver, algo: str, source: int) -> Tuple[Any, Dict[str, Any]]:
    """Run one algorithm and return the result with its JSON summary."""
    if algo == "dfs":
        r = solver.traverse_depth_first(source)
        return r, {"parent": r.parent[1:], "discovery": r.discovery[1:], "finish": r.finish[1:]}
    if algo == "bfs":
        r = solver.traverse_breadth_first(source)
        return r, {"parent": r.parent[1:], "distance": r.distance[1:], "levels": r.levels}
    if algo == "spt":
        r = solver.compute_shortest_path_tree(source)
        return r, {"dist": _finite(r.dist), "parent": r.parent[1:], "edges": r.edge_count}
    r = solver.compute_minimum_spanning_tree(source)
    return r, {
        "parent": r.parent[1:],
        "total_weight": r.total_weight,
        "edges": r.edge_count,
        "spanning": r.spanning,
    }


def _render(algo: str, res: Any, label: Any) -> str:
    renderers = {
        "dfs": render_depth_first,
        "bfs": render_breadth_first,
        "spt": render_shortest_path_tree,
        "mst": render_minimum_spanning_tree,
    }
    return renderers[algo](res, label)


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point for the ``graphtrees`` command-line tool."""
    examples = (
        "Examples:\n"
        "  graphtrees --edges wGraph.txt --source 1\n"
        "  graphtrees --edges wGraph.txt --source 1 --algo mst --display --labels letter\n"
        "  graphtrees --random --n 100 --m 300 --algo spt --target 42\n"
        "  graphtrees --edges roads.txt --source 1 --algo spt --export-json spt.json\n"
    )
    p = argparse.ArgumentParser(
        prog="graphtrees",
        description="Shortest-path trees, minimum spanning trees and coloured traversals",
        epilog=examples,
        formatter_class=argparse.RawTextHelpFormatter,
    )
    p.add_argument("--verbose", action="store_true", help="Show full tracebacks")
    p.add_argument("--log-json", action="store_true", help="Emit structured log lines")
    p.add_argument(
        "--log-level",
        choices=["debug", "info", "warning"],
        default="warning",
        help="Log verbosity (debug traces every heap step)",
    )
    src = p.add_mutually_exclusive_group(required=True)
    src.add_argument("--edges", type=str, help="Path to edges file")
    src.add_argument("--random", action="store_true", help="Use a random connected graph")
    src.add_argument(
        "--example",
        action="store_true",
        help="Print a sample edges file to stdout and exit",
    )

    p.add_argument(
        "--format",
        choices=list(FORMATS),
        default=None,
        help="Edge file format (auto-detected from extension)",
    )

    p.add_argument("--n", type=int, default=10, help="Vertices (random mode)")
    p.add_argument("--m", type=int, default=20, help="Edges (random mode)")
    p.add_argument(
        "--seed",
        type=int,
        default=0,
        help="Seed controlling random graph generation",
    )
    p.add_argument("--source", type=int, default=1, help="Source / start vertex id")
    p.add_argument(
        "--algo",
        choices=list(ALGORITHMS) + ["all"],
        default="all",
        help="Algorithm to run",
    )
    p.add_argument("--target", type=int, default=None, help="Target vertex id for path output")

    p.add_argument("--backend", choices=["list", "csr"], default="list")
    p.add_argument("--dfs-recursive", action="store_true", help="Use recursive DFS")
    p.add_argument("--strict", action="store_true", help="Fail if the MST does not span the graph")
    p.add_argument("--check-heap", action="store_true", help="Verify heap invariants every step")

    p.add_argument("--display", action="store_true", help="Print text tables instead of JSON")
    p.add_argument("--labels", choices=list(LABELERS), default="number", help="Vertex labels")

    # Export + profiling
    p.add_argument(
        "--tree",
        choices=list(ALGORITHMS),
        default=None,
        help="Tree used by --export-* and --plot (default: first computed of spt, mst, bfs, dfs)",
    )
    p.add_argument("--export-json", type=str, default=None, help="Write the tree as JSON")
    p.add_argument("--export-graphml", type=str, default=None, help="Write the tree as GraphML")
    p.add_argument(
        "--plot",
        nargs="?",
        const="",
        default=None,
        metavar="PNG",
        help="Plot the tree (to PNG if a path is given)",
    )
    p.add_argument("--profile", action="store_true", help="Enable cProfile")
    p.add_argument("--profile-out", type=str, default=None, help="Dump .prof file to this path")
    p.add_argument(
        "--metrics-out",
        type=str,
        default=None,
        help="Write run metrics to this JSON file",
    )

    args = p.parse_args(argv)

    if args.example:
        sys.stdout.write(EXAMPLE_TXT)
        return 0

    try:
        if args.random:
            G = _build_random_graph(args.n, args.m, args.seed)
        else:
            G = _build_graph_from_file(args.edges, args.format)
        check_vertex(G, args.source, "source")
        if args.target is not None:
            check_vertex(G, args.target, "target")

        cfg = SolverConfig(
            backend=args.backend,
            dfs_recursive=args.dfs_recursive,
            strict_mst=args.strict,
            check_heap=args.check_heap,
        )

        stream = sys.stdout if args.log_json else sys.stderr
        level = "info" if args.log_json and args.log_level == "warning" else args.log_level
        logger = StdLogger(level=level, json_fmt=args.log_json, stream=stream)
        label = LABELERS[args.labels]

        algos = list(ALGORITHMS) if args.algo == "all" else [args.algo]
        if args.verbose and not args.log_json:
            sys.stderr.write(
                f"config: n={G.n} m={G.m} backend={args.backend} source={args.source} "
                f"algorithms={','.join(algos)}\n"
            )

        solver = TreeSolver(G, config=cfg, logger=logger)
        results: Dict[str, Any] = {}
        out: Dict[str, Any] = {"n": G.n, "m": G.m, "source": args.source}
        with Measurement(
            track_memory=bool(args.metrics_out),
            profile=args.profile,
            dump_path=args.profile_out,
        ) as meas:
            for algo in algos:
                results[algo], out[algo] = _run(solver, algo, args.source)
        if args.profile:
            sys.stderr.write(meas.report(lines=40))

        if args.target is not None:
            for algo, res in results.items():
                out[algo]["path"] = reconstruct_path(res.parent, args.source, args.target)

        tree = args.tree or next((a for a in ("spt", "mst", "bfs", "dfs") if a in results), None)
        if tree is not None and tree not in results:
            raise ConfigError(f"--tree {tree} was not computed; add it to --algo")
        if tree is not None:
            res = results[tree]
            dist = res.dist if tree == "spt" else None
            if args.export_json:
                with open(args.export_json, "w", encoding="utf-8") as fh:
                    fh.write(export_tree_json(G, res.parent, args.source, dist))
            if args.export_graphml:
                with open(args.export_graphml, "w", encoding="utf-8") as fh:
                    fh.write(export_tree_graphml(G, res.parent))
            if args.plot is not None:
                from .visualize import plot_tree

                plot_tree(
                    G,
                    res.parent,
                    args.source,
                    title=f"{tree.upper()} from {label(args.source)}",
                    show_weights=G.n <= 50,
                    out_path=args.plot or None,
                )

        if args.metrics_out:
            metrics = solver.metrics(wall_ms=meas.wall_ms, peak_kib=meas.peak_kib)
            with open(args.metrics_out, "w", encoding="utf-8") as fh:
                json.dump(asdict(metrics), fh)

        if args.log_level in ("info", "debug") or args.log_json:
            logger.info(
                "run",
                n=G.n,
                m=G.m,
                backend=args.backend,
                wall_ms=meas.wall_ms,
                **solver.summary(),
            )

        if args.display:
            blocks = [render_adjacency(G, label)]
            blocks.extend(_render(algo, res, label) for algo, res in results.items())
            print("\n\n".join(blocks))
        elif not args.log_json:
            print(json.dumps(out))
        return 0

    except DisconnectedGraphError as exc:
        if args.verbose:
            traceback.print_exc()
        else:
            sys.stderr.write(f"error: {exc}\n")
        return 65
    except (InputError, ConfigError, GraphFormatError) as exc:
        if args.verbose:
            traceback.print_exc()
        else:
            sys.stderr.write(f"error: {exc}\n")
        return 64
    except GraphTreesError as exc:
        if args.verbose:
            traceback.print_exc()
        else:
            sys.stderr.write(f"internal error: {exc}\n")
        return 70
    except Exception as exc:  # pragma: no cover - unexpected
        if args.verbose:
            traceback.print_exc()
        else:
            sys.stderr.write(f"internal error: {exc}\n")
        return 70


if __name__ == "__main__":
    sys.exit(main())
