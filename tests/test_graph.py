"""
Unit tests for Graph and CSRGraph.
"""

import pytest

from graphtrees.exceptions import (
    ConfigError,
    GraphFormatError,
    InputError,
    InvalidVertexError,
    NegativeWeightError,
)
from graphtrees.graph import Graph, check_vertex
from graphtrees.graph_numpy import CSRGraph


def test_add_edge_stores_both_directions():
    g = Graph(3)
    g.add_edge(1, 2, 5)
    g.add_edge(2, 3, 7)

    assert g.neighbors(1) == [(2, 5)]
    assert g.neighbors(2) == [(1, 5), (3, 7)]
    assert g.neighbors(3) == [(2, 7)]
    assert g.m == 2
    assert g.degree(2) == 2


def test_every_entry_has_a_mirror():
    g = Graph.from_edges(4, [(1, 2, 3), (1, 3, 1), (3, 4, 9), (2, 4, 0)])
    for u in range(1, g.n + 1):
        for v, w in g.neighbors(u):
            assert (u, w) in g.neighbors(v)


def test_negative_weight_is_rejected_as_config_error():
    g = Graph(2)
    with pytest.raises(NegativeWeightError) as info:
        g.add_edge(1, 2, -1)
    assert isinstance(info.value, ConfigError)
    assert "(1, 2)" in str(info.value)
    assert g.m == 0


def test_non_integer_weight_is_rejected():
    g = Graph(2)
    with pytest.raises(GraphFormatError):
        g.add_edge(1, 2, 1.5)
    with pytest.raises(GraphFormatError):
        g.add_edge(1, 2, True)


def test_out_of_range_endpoints_are_rejected():
    g = Graph(2)
    with pytest.raises(InputError):
        g.add_edge(0, 1, 1)
    with pytest.raises(InputError):
        g.add_edge(1, 3, 1)


@pytest.mark.parametrize("u, v", [(1.0, 2), (1, 2.5), (True, 2), ("1", 2)])
def test_non_integer_endpoints_are_rejected(u, v):
    g = Graph(2)
    with pytest.raises(InputError, match="must be integers"):
        g.add_edge(u, v, 1)
    assert g.m == 0


@pytest.mark.parametrize("n", [0, -3, 2.0])
def test_vertex_count_must_be_positive_int(n):
    with pytest.raises(InputError):
        Graph(n)


def test_check_vertex_bounds():
    g = Graph(3)
    check_vertex(g, 1)
    check_vertex(g, 3)
    for bad in (0, 4, -1, True, "1"):
        with pytest.raises(InvalidVertexError):
            check_vertex(g, bad)


def test_edges_yield_each_undirected_edge_once():
    g = Graph.from_edges(3, [(1, 2, 4), (3, 2, 1), (2, 2, 6), (1, 2, 2)])
    assert sorted(g.edges()) == [(1, 2, 2), (1, 2, 4), (2, 2, 6), (2, 3, 1)]


def test_weight_returns_lightest_parallel_edge():
    g = Graph.from_edges(3, [(1, 2, 4), (1, 2, 2)])
    assert g.weight(1, 2) == 2
    assert g.weight(2, 1) == 2
    assert g.weight(1, 3) is None


def test_csr_graph_matches_adjacency_lists():
    g = Graph.from_edges(5, [(1, 2, 3), (1, 3, 1), (3, 4, 9), (2, 4, 0)])
    c = CSRGraph.from_graph(g)

    assert c.n == 5
    assert c.m == 4
    for u in range(1, 6):
        assert list(c.neighbors(u)) == g.neighbors(u)
        assert c.degree(u) == g.degree(u)
    assert list(c.neighbors(5)) == []

    back = c.to_graph()
    assert back.adj == g.adj
    assert back.m == g.m


def test_csr_neighbors_are_python_ints():
    c = CSRGraph.from_graph(Graph.from_edges(2, [(1, 2, 8)]))
    (v, w), = list(c.neighbors(1))
    assert type(v) is int and type(w) is int
