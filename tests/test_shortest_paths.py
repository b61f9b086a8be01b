import math

import pytest

from dsakit.graph import Graph
from dsakit.shortest_paths import dijkstra, floyd

MAX = 7345
FMAX = 357


@pytest.fixture
def dijkstra_graph():
    arcs = [
        [0, 12, MAX, MAX, MAX, 16, 14],
        [12, 0, 10, MAX, MAX, 7, MAX],
        [MAX, 10, 0, 3, 5, 6, MAX],
        [MAX, MAX, 3, 0, 4, MAX, MAX],
        [MAX, MAX, 5, 4, 0, 2, 8],
        [16, 7, 6, MAX, 2, 0, 9],
        [14, MAX, MAX, MAX, 8, 9, 0],
    ]
    return Graph("1234567", arcs, no_edge=MAX)


@pytest.fixture
def floyd_graph():
    arcs = [
        [0, 1, FMAX, 3],
        [1, 0, 2, 2],
        [FMAX, 2, 0, 8],
        [3, 2, 8, 0],
    ]
    return Graph("1234", arcs, no_edge=FMAX)


def test_dijkstra_distances(dijkstra_graph):
    result = dijkstra(dijkstra_graph, 0)
    assert list(result.distances) == [0, 12, 22, 22, 18, 16, 14]


def test_dijkstra_distances_satisfy_edge_relaxation(dijkstra_graph):
    result = dijkstra(dijkstra_graph, 0)
    n = len(dijkstra_graph)
    for i in range(n):
        for j in dijkstra_graph.neighbours(i):
            assert result.distances[j] <= result.distances[i] + dijkstra_graph.matrix[i][j]


def test_dijkstra_predecessors_consistent(dijkstra_graph):
    result = dijkstra(dijkstra_graph, 0)
    assert result.predecessors[0] is None
    for j, pred in enumerate(result.predecessors):
        if pred is not None:
            assert result.distances[j] == result.distances[pred] + dijkstra_graph.matrix[pred][j]


def test_dijkstra_path_weights_sum_to_distance(dijkstra_graph):
    result = dijkstra(dijkstra_graph, 0)
    for target in range(len(dijkstra_graph)):
        path = result.path(target)
        assert path[0] == 0 and path[-1] == target
        total = sum(dijkstra_graph.matrix[a][b] for a, b in zip(path, path[1:]))
        assert total == result.distances[target]


def test_dijkstra_unreachable_vertex():
    graph = Graph("abc", [[0, 2, 0], [2, 0, 0], [0, 0, 0]])
    result = dijkstra(graph, 0)
    assert result.distances[2] == math.inf
    assert result.predecessors[2] is None
    with pytest.raises(ValueError):
        result.path(2)


def test_dijkstra_bad_source(dijkstra_graph):
    with pytest.raises(IndexError):
        dijkstra(dijkstra_graph, 7)


def test_floyd_detour_through_vertex(floyd_graph):
    distances, predecessors = floyd(floyd_graph)
    assert distances[0][2] == 3
    assert predecessors[0][2] == 1


def test_floyd_diagonal_and_symmetry(floyd_graph):
    distances, predecessors = floyd(floyd_graph)
    n = len(floyd_graph)
    for i in range(n):
        assert distances[i][i] == 0
        assert predecessors[i][i] is None
        for j in range(n):
            assert distances[i][j] == distances[j][i]


def test_floyd_agrees_with_dijkstra(dijkstra_graph):
    distances, _ = floyd(dijkstra_graph)
    for source in range(len(dijkstra_graph)):
        assert distances[source] == list(dijkstra(dijkstra_graph, source).distances)


def test_floyd_predecessor_walk_matches_distance(floyd_graph):
    distances, predecessors = floyd(floyd_graph)
    n = len(floyd_graph)
    for i in range(n):
        for j in range(n):
            if i == j:
                continue
            total, node = 0, j
            while node != i:
                pred = predecessors[i][node]
                total += floyd_graph.matrix[pred][node]
                node = pred
            assert total == distances[i][j]


def test_floyd_unreachable_is_infinite():
    graph = Graph("ab", [[0, 0], [0, 0]])
    distances, predecessors = floyd(graph)
    assert distances[0][1] == math.inf
    assert predecessors[0][1] is None