"""
Unit tests for the graph generator, reference algorithms, path helpers,
measurement and the benchmark script.
"""

import pytest

from graphtrees.baselines import DisjointSet, dijkstra_reference, kruskal_forest, kruskal_weight
from graphtrees.bench import main as bench_main
from graphtrees.bench import run_once
from graphtrees.exceptions import ConfigError, InvalidVertexError
from graphtrees.generator import generate_graph
from graphtrees.graph import Graph
from graphtrees.path import reconstruct_path, tree_depths
from graphtrees.profiling import Measurement
from graphtrees.traversal import breadth_first


@pytest.mark.parametrize("dist", ["uniform", "small_int", "log_uniform", "exp"])
def test_generator_weights_within_bounds(dist):
    gg = generate_graph(n=50, m=120, weight_dist=dist, w_min=2, w_max=40, seed=1)
    weights = [w for _, _, w in gg.graph.edges()]
    assert all(isinstance(w, int) and 2 <= w <= 40 for w in weights)
    assert gg.metadata["weight_dist"] == dist


def test_generator_is_seeded():
    a = generate_graph(n=30, m=60, seed=5).graph
    b = generate_graph(n=30, m=60, seed=5).graph
    c = generate_graph(n=30, m=60, seed=6).graph
    assert a.adj == b.adj
    assert a.adj != c.adj


def test_random_connected_graph_has_no_self_loops_or_parallels():
    g = generate_graph(n=40, m=100, seed=3).graph
    keys = [(u, v) for u, v, _ in g.edges()]
    assert all(u != v for u, v in keys)
    assert len(keys) == len(set(keys)) == 100
    assert -1 not in breadth_first(g, 1).distance[1:]


def test_edge_target_capped_at_complete_graph():
    g = generate_graph(n=5, m=100, seed=0).graph
    assert g.m == 10


def test_grid_and_tree_shapes():
    grid = generate_graph(n=9, graph_type="grid", grid_cols=3).graph
    assert grid.m == 12
    assert grid.degree(5) == 4
    assert grid.degree(1) == 2

    tree = generate_graph(n=25, graph_type="tree", seed=2).graph
    assert tree.m == 24
    assert -1 not in breadth_first(tree, 1).distance[1:]


@pytest.mark.parametrize(
    "kwargs",
    [
        {"n": 0},
        {"n": 5, "w_min": -1},
        {"n": 5, "w_min": 10, "w_max": 3},
        {"n": 5, "m": -1},
        {"n": 5, "graph_type": "star"},
        {"n": 5, "weight_dist": "normal"},
    ],
)
def test_generator_rejects_bad_parameters(kwargs):
    with pytest.raises(ConfigError):
        generate_graph(**kwargs)


def test_dijkstra_reference():
    g = Graph.from_edges(4, [(1, 2, 4), (2, 3, 1), (1, 3, 10), (3, 4, 2)])
    dist, parent = dijkstra_reference(g, 1)
    assert dist[1:] == [0, 4, 5, 7]
    assert parent[1:] == [0, 1, 2, 3]


def test_disjoint_set():
    ds = DisjointSet(4)
    assert ds.union(1, 2)
    assert ds.union(3, 4)
    assert not ds.union(2, 1)
    assert ds.find(1) == ds.find(2) != ds.find(3)


def test_kruskal_forest_on_disconnected_graph():
    g = Graph.from_edges(5, [(1, 2, 1), (2, 3, 2), (1, 3, 5), (4, 5, 3)])
    forest = kruskal_forest(g.n, g.edges())
    assert sorted(forest) == [(1, 2, 1), (2, 3, 2), (4, 5, 3)]
    assert kruskal_weight(g) == 6
    assert kruskal_weight(g, component_of=5) == 3


def test_reconstruct_path():
    parent = [0, 0, 1, 2, 3, 0]
    assert reconstruct_path(parent, 1, 4) == [1, 2, 3, 4]
    assert reconstruct_path(parent, 1, 1) == [1]
    assert reconstruct_path(parent, 1, 5) == []
    with pytest.raises(InvalidVertexError):
        reconstruct_path(parent, 1, 6)


def test_reconstruct_path_stops_on_cycles():
    parent = [0, 0, 3, 2]
    assert reconstruct_path(parent, 1, 3) == []


def test_tree_depths():
    assert tree_depths([0, 0, 1, 1, 2, 0], 1) == [-1, 0, 1, 1, 2, -1]
    assert tree_depths([0, 0, 3, 2], 1) == [-1, 0, -1, -1]


def test_measurement_records_time_and_memory():
    with Measurement(track_memory=True) as m:
        [0] * 10_000
    assert m.wall_ms >= 0.0
    assert m.peak_kib is not None and m.peak_kib > 0


def test_measurement_report_requires_profiling():
    with Measurement() as m:
        pass
    assert m.peak_kib is None
    with pytest.raises(RuntimeError):
        m.report()


def test_measurement_dumps_profile(tmp_path):
    out = tmp_path / "run.prof"
    with Measurement(profile=True, dump_path=str(out)) as m:
        sum(range(1000))
    assert out.exists()
    assert "function calls" in m.report(lines=5)


@pytest.mark.parametrize("backend", ["list", "csr"])
def test_bench_run_once(backend):
    res = run_once(n=60, m=180, backend=backend, seed=4, track_mem=True)
    assert res.dist_mismatches == 0
    assert res.mst_weight_ok
    assert res.metrics.runs == {"dfs": 0, "bfs": 0, "spt": 1, "mst": 1}
    assert res.metrics.peak_kib is not None


def test_bench_main_writes_csv(tmp_path, capsys):
    out = tmp_path / "bench.csv"
    bench_main(["--trials", "2", "--sizes", "20,40", "--out-csv", str(out), "--mem"])

    rows = out.read_text().splitlines()
    assert rows[0].startswith("n,m,backend,trial")
    assert rows[0].endswith("peak_kib")
    assert len(rows) == 1 + 2 * 2
    assert "solve_med" in capsys.readouterr().out


def test_bench_main_rejects_bad_sizes():
    with pytest.raises(SystemExit):
        bench_main(["--sizes", "20x40"])
