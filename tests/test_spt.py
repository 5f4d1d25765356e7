"""
Unit tests for the indexed-heap Dijkstra shortest-path tree.
"""

import io
import math

import networkx as nx
import pytest

from graphtrees.baselines import dijkstra_reference
from graphtrees.exceptions import InvalidVertexError
from graphtrees.generator import generate_graph
from graphtrees.graph import Graph
from graphtrees.graph_numpy import CSRGraph
from graphtrees.logger import StdLogger
from graphtrees.path import tree_depths
from graphtrees.spt import shortest_path_tree


def _nx(G):
    H = nx.MultiGraph()
    H.add_nodes_from(range(1, G.n + 1))
    for u, v, w in G.edges():
        H.add_edge(u, v, weight=w)
    return H


def _sample():
    return Graph.from_edges(4, [(1, 2, 4), (2, 3, 1), (1, 3, 10), (3, 4, 2)])


def test_four_vertex_scenario():
    t = shortest_path_tree(_sample(), 1)
    assert t.dist[1:] == [0, 4, 5, 7]
    assert t.parent[1:] == [0, 1, 2, 3]
    assert t.edge_count == 3
    assert t.path_to(4) == [1, 2, 3, 4]


def test_scenario_from_another_source():
    t = shortest_path_tree(_sample(), 4)
    assert t.dist[1:] == [7, 3, 2, 0]
    assert t.parent[1:] == [2, 3, 4, 0]


def test_unreachable_vertices_keep_infinity():
    g = Graph.from_edges(5, [(1, 2, 3), (2, 3, 4), (4, 5, 1)])
    t = shortest_path_tree(g, 1)

    assert t.dist[1:4] == [0, 3, 7]
    assert t.dist[4] == math.inf and t.dist[5] == math.inf
    assert t.parent[4] == 0 and t.parent[5] == 0
    assert not t.reachable(5)
    assert t.path_to(5) == []
    assert t.edge_count == 2


@pytest.mark.parametrize("source", [0, 5, -1])
def test_out_of_range_source_is_rejected(source):
    with pytest.raises(InvalidVertexError):
        shortest_path_tree(_sample(), source)


@pytest.mark.parametrize("seed", range(8))
def test_distances_match_networkx(seed):
    G = generate_graph(n=60, m=150, seed=seed, w_max=50, connected=seed % 2 == 0).graph
    t = shortest_path_tree(G, 1, check_heap=True)
    expected = nx.single_source_dijkstra_path_length(_nx(G), 1)

    for v in range(1, G.n + 1):
        assert t.dist[v] == expected.get(v, math.inf)


@pytest.mark.parametrize("seed", range(5))
def test_parent_array_forms_a_shortest_path_tree(seed):
    G = generate_graph(n=40, m=90, seed=seed, weight_dist="small_int").graph
    t = shortest_path_tree(G, 3)
    depth = tree_depths(t.parent, 3)

    for v in range(1, G.n + 1):
        if v == 3 or not t.reachable(v):
            continue
        p = t.parent[v]
        assert depth[v] == depth[p] + 1
        assert t.dist[v] == t.dist[p] + G.weight(p, v)


def test_zero_weight_edges():
    g = Graph.from_edges(4, [(1, 2, 0), (2, 3, 0), (3, 4, 5), (1, 4, 9)])
    t = shortest_path_tree(g, 1)
    assert t.dist[1:] == [0, 0, 0, 5]
    assert t.parent[4] == 3


def test_repeated_runs_are_identical():
    G = generate_graph(n=50, m=120, seed=7).graph
    a = shortest_path_tree(G, 5)
    b = shortest_path_tree(G, 5)
    assert a.dist == b.dist
    assert a.parent == b.parent


def test_csr_backend_matches_list_backend():
    G = generate_graph(n=50, m=120, seed=11).graph
    a = shortest_path_tree(G, 1)
    b = shortest_path_tree(CSRGraph.from_graph(G), 1)
    assert a.dist == b.dist
    assert a.parent == b.parent


def test_matches_heapq_reference():
    G = generate_graph(n=80, m=200, seed=3).graph
    dist, _ = dijkstra_reference(G, 1)
    assert shortest_path_tree(G, 1).dist == dist


def test_trace_events_are_logged():
    buf = io.StringIO()
    shortest_path_tree(_sample(), 1, logger=StdLogger(level="debug", stream=buf))
    out = buf.getvalue()
    assert "debug spt.extract vertex=1 dist=0" in out
    # 1 -> 3 is first found with weight 10, then lowered through 2
    assert "debug spt.sift_up vertex=3 dist=5 parent=2" in out
    assert "info spt.done" in out


def test_counters_reported():
    t = shortest_path_tree(_sample(), 1)
    assert t.counters["inserts"] == 4
    assert t.counters["extracts"] == 4
    assert t.counters["edges_relaxed"] == 4
