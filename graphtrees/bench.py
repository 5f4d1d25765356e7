"""Micro-benchmark of the indexed-heap algorithms against the baselines.

Run this module as a script to time Dijkstra and Prim on random connected
graphs and cross-check them against :func:`~graphtrees.baselines.dijkstra_reference`
and Kruskal.

Example:
```bash
python -m graphtrees.bench --trials 5 --sizes 1000,5000 2000,10000 --out-csv out.csv
```

Use ``--mem`` to record peak memory usage during solver runs.
"""

from __future__ import annotations

import argparse
import csv
import statistics
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Tuple

from .baselines import dijkstra_reference, kruskal_weight
from .generator import generate_graph
from .profiling import Measurement
from .solver import SolverConfig, SolverMetrics, TreeSolver


@dataclass
class BenchResult:
    """Result of a single benchmarking run."""

    metrics: SolverMetrics
    reference_ms: float
    dist_mismatches: int
    mst_weight_ok: bool


def run_once(
    n: int,
    m: int,
    backend: str,
    seed: int = 0,
    track_mem: bool = False,
) -> BenchResult:
    """Run Dijkstra and Prim once and compare against the baselines.

    Args:
        n: Number of vertices.
        m: Number of undirected edges.
        backend: Adjacency backend (``"list"`` or ``"csr"``).
        seed: Seed for the random graph generator.
        track_mem: Record peak memory with :mod:`tracemalloc`.

    Returns:
        Timing information and correctness checks.
    """
    G = generate_graph(n=n, m=m, seed=seed, w_max=1_000).graph
    s = 1

    solver = TreeSolver(G, SolverConfig(backend=backend))
    with Measurement(track_memory=track_mem) as meas:
        spt = solver.compute_shortest_path_tree(s)
        mst = solver.compute_minimum_spanning_tree(s)

    t0 = time.perf_counter()
    ref_dist, _ = dijkstra_reference(G, s)
    ref_weight = kruskal_weight(G, component_of=s)
    t1 = time.perf_counter()

    mismatches = sum(1 for a, b in zip(spt.dist, ref_dist) if a != b)
    return BenchResult(
        metrics=solver.metrics(wall_ms=meas.wall_ms, peak_kib=meas.peak_kib),
        reference_ms=(t1 - t0) * 1000.0,
        dist_mismatches=mismatches,
        mst_weight_ok=mst.total_weight == ref_weight,
    )


def _p95(values: List[float]) -> float:
    if len(values) > 1:
        return statistics.quantiles(values, n=100, method="inclusive")[94]
    return values[0]


def main(argv: List[str] | None = None) -> None:
    """Run benchmarking trials and optionally record results.

    Args:
        argv: Optional argument list for testing.
    """
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--trials", type=int, default=1, help="Number of trials per configuration")
    parser.add_argument(
        "--sizes",
        nargs="+",
        default=["10,20", "20,40"],
        help="Size pairs as n,m (e.g. 1000,5000). Defaults to a small demo.",
    )
    parser.add_argument("--seed-base", type=int, default=0, help="Base seed for random graphs")
    parser.add_argument("--out-csv", type=Path, help="Optional path to write per-trial CSV data")
    parser.add_argument(
        "--mem",
        action="store_true",
        help="Profile peak memory usage (KiB) using tracemalloc",
    )
    args = parser.parse_args(argv)

    sizes: List[Tuple[int, int]] = []
    for pair in args.sizes:
        try:
            n_str, m_str = pair.split(",")
            sizes.append((int(n_str), int(m_str)))
        except ValueError:
            parser.error(f"invalid size pair '{pair}'")

    rows: List[List[object]] = []
    aggregates: Dict[Tuple[int, int, str], Dict[str, List[float]]] = {}

    for n, m in sizes:
        for backend in ("list", "csr"):
            agg: Dict[str, List[float]] = {"solver": [], "reference": [], "relaxed": [], "mem": []}
            for trial in range(args.trials):
                res = run_once(
                    n=n, m=m, backend=backend, seed=args.seed_base + trial, track_mem=args.mem
                )
                mtx = res.metrics
                row: List[object] = [
                    mtx.n,
                    mtx.m,
                    backend,
                    trial,
                    f"{mtx.wall_ms:.6f}",
                    f"{res.reference_ms:.6f}",
                    mtx.counters["edges_relaxed"],
                    mtx.counters["sift_ups"],
                    res.dist_mismatches,
                    int(res.mst_weight_ok),
                ]
                if args.mem:
                    row.append(f"{(mtx.peak_kib or 0.0):.3f}")
                    agg["mem"].append(mtx.peak_kib or 0.0)
                rows.append(row)
                agg["solver"].append(mtx.wall_ms)
                agg["reference"].append(res.reference_ms)
                agg["relaxed"].append(mtx.counters["edges_relaxed"])
            aggregates[(n, m, backend)] = agg

    if args.out_csv:
        with args.out_csv.open("w", newline="") as fh:
            writer = csv.writer(fh)
            csv_header = [
                "n",
                "m",
                "backend",
                "trial",
                "solver_ms",
                "reference_ms",
                "edges_relaxed",
                "sift_ups",
                "dist_mismatches",
                "mst_weight_ok",
            ]
            if args.mem:
                csv_header.append("peak_kib")
            writer.writerow(csv_header)
            writer.writerows(rows)

    header = (
        f"{'n':>6} {'m':>7} {'backend':>7} {'relaxed':>9}"
        f" {'solve_med':>10} {'solve_p95':>10} {'ref_med':>10} {'ref_p95':>10}"
    )
    if args.mem:
        header += f" {'mem_med':>9}"
    print(header)
    for (n, m, backend), agg in aggregates.items():
        line = (
            f"{n:6d} {m:7d} {backend:>7} {int(statistics.median(agg['relaxed'])):9d}"
            f" {statistics.median(agg['solver']):10.2f} {_p95(agg['solver']):10.2f}"
            f" {statistics.median(agg['reference']):10.2f} {_p95(agg['reference']):10.2f}"
        )
        if args.mem:
            line += f" {statistics.median(agg['mem']):9.1f}"
        print(line)


if __name__ == "__main__":  # pragma: no cover - manual invocation
    main()
