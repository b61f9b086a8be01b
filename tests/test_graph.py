import pytest

from dsakit.graph import Graph, TreeEdge, kruskal, prim

INF = 3217

ADJACENCY = [
    [0, 1, 1, 1, 0],
    [1, 0, 1, 1, 1],
    [1, 1, 0, 0, 0],
    [1, 1, 0, 0, 1],
    [0, 1, 0, 1, 0],
]

WEIGHTED = [
    [0, 6, 1, 5, INF, INF],
    [6, 0, 5, INF, 3, INF],
    [1, 5, 0, 5, 6, 4],
    [5, INF, 5, 0, INF, 2],
    [INF, 3, 6, INF, 0, 6],
    [INF, INF, 4, 2, 6, 0],
]


@pytest.fixture
def unweighted():
    return Graph("ABCDE", ADJACENCY)


@pytest.fixture
def weighted():
    return Graph("123456", WEIGHTED, no_edge=INF)


def test_dfs_documented(unweighted):
    assert unweighted.dfs(0) == list("ABCDE")


def test_bfs_documented(unweighted):
    assert unweighted.bfs(0) == list("ABCDE")


def test_neighbours_follow_matrix_row(unweighted):
    assert unweighted.neighbours(0) == [1, 2, 3]
    assert unweighted.neighbours(4) == [1, 3]


def test_edge_count_matches_neighbours(unweighted, weighted):
    for graph in (unweighted, weighted):
        degree_sum = sum(len(graph.neighbours(i)) for i in range(len(graph)))
        assert graph.edge_count() * 2 == degree_sum


def test_no_edge_marker_is_not_an_edge(weighted):
    assert not weighted.has_edge(0, 4)
    assert not weighted.has_edge(0, 0)
    assert weighted.has_edge(0, 2)


def test_traversals_visit_everything_once(weighted):
    for order in (weighted.dfs(3), weighted.bfs(3)):
        assert sorted(order) == list("123456")
        assert order[0] == "4"


def test_non_square_matrix_rejected():
    with pytest.raises(ValueError):
        Graph("AB", [[0, 1], [1, 0, 1]])


def test_start_out_of_range(unweighted):
    with pytest.raises(IndexError):
        unweighted.dfs(9)


def test_prim_first_edge_is_lightest_at_start(weighted):
    assert prim(weighted, 0)[0] == TreeEdge("1", "3", 1)


def test_prim_and_kruskal_agree_on_weight(weighted):
    prim_edges = prim(weighted, 0)
    kruskal_edges = kruskal(weighted)
    assert len(prim_edges) == len(kruskal_edges) == 5
    assert sum(e.weight for e in prim_edges) == sum(e.weight for e in kruskal_edges)
    assert sum(e.weight for e in prim_edges) == 15


@pytest.mark.parametrize("builder", [lambda g: prim(g, 0), kruskal])
def test_spanning_tree_reaches_all_vertices(weighted, builder):
    edges = builder(weighted)
    touched = {e.start for e in edges} | {e.end for e in edges}
    assert touched == set("123456")


def test_kruskal_weights_non_decreasing(weighted):
    weights = [e.weight for e in kruskal(weighted)]
    assert weights == sorted(weights)


def test_prim_start_anywhere_gives_same_total(weighted):
    totals = {sum(e.weight for e in prim(weighted, s)) for s in range(6)}
    assert len(totals) == 1


def test_triangle():
    graph = Graph("xyz", [[0, 1, 3], [1, 0, 2], [3, 2, 0]])
    assert kruskal(graph) == [TreeEdge("x", "y", 1), TreeEdge("y", "z", 2)]
    assert prim(graph, 0) == [TreeEdge("x", "y", 1), TreeEdge("y", "z", 2)]


def test_disconnected_graph():
    matrix = [
        [0, 4, INF, INF],
        [4, 0, INF, INF],
        [INF, INF, 0, 7],
        [INF, INF, 7, 0],
    ]
    graph = Graph("abcd", matrix, no_edge=INF)
    with pytest.raises(ValueError):
        prim(graph, 0)
    assert kruskal(graph) == [TreeEdge("a", "b", 4), TreeEdge("c", "d", 7)]