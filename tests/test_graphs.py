import math

import pytest
from hypothesis import given
from hypothesis import strategies as st

from algoshelf.graphs import Graph, dijkstra

SAMPLE_EDGES = [(5, 2), (5, 0), (4, 0), (4, 1), (2, 3), (3, 1)]

SAMPLE_MATRIX = [
    [0, 5, 3, 0, 0, 0, 0],
    [0, 0, 2, 0, 3, 0, 1],
    [0, 0, 0, 7, 7, 0, 0],
    [2, 0, 0, 0, 0, 6, 0],
    [0, 0, 0, 2, 0, 1, 0],
    [0, 0, 0, 0, 0, 0, 0],
    [0, 0, 0, 0, 1, 0, 0],
]


def _sample_graph():
    graph = Graph(6)
    for source, target in SAMPLE_EDGES:
        graph.add_edge(source, target)
    return graph


def test_sample_topological_order():
    assert _sample_graph().topological_sort() == [5, 4, 2, 3, 1, 0]


def test_topological_order_respects_every_edge():
    order = _sample_graph().topological_sort()
    position = {vertex: i for i, vertex in enumerate(order)}
    assert sorted(order) == list(range(6))
    assert all(position[s] < position[t] for s, t in SAMPLE_EDGES)


@given(st.integers(min_value=1, max_value=12).flatmap(
    lambda n: st.tuples(
        st.just(n),
        st.lists(st.tuples(st.integers(0, n - 1), st.integers(0, n - 1))),
    )
))
def test_acyclic_edges_are_ordered(case):
    n, pairs = case
    edges = [(min(a, b), max(a, b)) for a, b in pairs if a != b]
    graph = Graph(n)
    for source, target in edges:
        graph.add_edge(source, target)
    order = graph.topological_sort()
    position = {vertex: i for i, vertex in enumerate(order)}
    assert sorted(order) == list(range(n))
    assert all(position[s] < position[t] for s, t in edges)


def test_edge_out_of_range():
    graph = Graph(3)
    with pytest.raises(IndexError):
        graph.add_edge(0, 3)


def test_negative_vertex_count():
    with pytest.raises(ValueError):
        Graph(-1)


def test_sample_shortest_distances():
    assert dijkstra(SAMPLE_MATRIX, 0) == [0, 5, 3, 9, 7, 8, 6]


def test_unreachable_vertex_is_infinite():
    dist = dijkstra(SAMPLE_MATRIX, 5)
    assert dist[5] == 0
    assert all(math.isinf(d) for i, d in enumerate(dist) if i != 5)


def test_non_square_matrix():
    with pytest.raises(ValueError):
        dijkstra([[0, 1], [1]], 0)


def test_source_out_of_range():
    with pytest.raises(IndexError):
        dijkstra(SAMPLE_MATRIX, 7)


def test_negative_weight():
    with pytest.raises(ValueError):
        dijkstra([[0, -1], [0, 0]], 0)


@given(st.integers(min_value=1, max_value=7).flatmap(
    lambda n: st.lists(
        st.lists(st.integers(0, 9), min_size=n, max_size=n), min_size=n, max_size=n
    )
))
def test_distances_are_tight(matrix):
    n = len(matrix)
    dist = dijkstra(matrix, 0)
    assert dist[0] == 0
    for u in range(n):
        for v in range(n):
            if matrix[u][v]:
                assert dist[v] <= dist[u] + matrix[u][v]
    for v in range(1, n):
        if not math.isinf(dist[v]):
            assert any(
                matrix[u][v] and dist[u] + matrix[u][v] == dist[v] for u in range(n)
            )