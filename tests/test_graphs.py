import pytest

from interviewkit.graphs import Digraph


def make_graph(vertices, edges):
    graph = Digraph(vertices)
    for src, dest in edges:
        graph.add_edge(src, dest)
    return graph


def edge_set(graph):
    return {(src, dest) for src, ns in enumerate(graph.adjacency) for dest in ns}


TRAVERSAL_EDGES = [(0, 1), (0, 2), (1, 3), (1, 4), (2, 4)]
TOPO_EDGES = [(5, 2), (5, 0), (4, 0), (4, 1), (2, 3), (3, 1)]
TRANSPOSE_EDGES = [(0, 1), (0, 4), (0, 3), (2, 0), (3, 2), (4, 1), (4, 3)]


def test_bfs_order_on_sample():
    graph = make_graph(5, TRAVERSAL_EDGES)
    assert graph.bfs(0) == [0, 1, 2, 3, 4]


def test_dfs_order_on_sample():
    graph = make_graph(5, TRAVERSAL_EDGES)
    assert graph.dfs(0) == [0, 2, 4, 1, 3]


@pytest.mark.parametrize("method", ["bfs", "dfs"])
def test_traversals_visit_reachable_once(method):
    graph = make_graph(6, [(0, 1), (0, 2), (1, 2), (2, 0), (2, 3), (3, 3)])
    order = getattr(graph, method)(0)
    assert order[0] == 0
    assert sorted(order) == [0, 1, 2, 3]


@pytest.mark.parametrize("method", ["bfs", "dfs"])
def test_traversal_from_isolated_vertex(method):
    graph = make_graph(3, [(0, 1)])
    assert getattr(graph, method)(2) == [2]


def test_bfs_levels_are_non_decreasing():
    graph = make_graph(5, TRAVERSAL_EDGES)
    order = graph.bfs(0)
    assert order.index(1) < order.index(3)
    assert order.index(2) < order.index(4)


def test_traversal_rejects_unknown_start():
    graph = Digraph(3)
    with pytest.raises(ValueError):
        graph.bfs(3)
    with pytest.raises(ValueError):
        graph.dfs(-1)


def test_add_edge_rejects_unknown_vertex():
    graph = Digraph(2)
    with pytest.raises(ValueError):
        graph.add_edge(0, 2)


def test_negative_vertex_count_rejected():
    with pytest.raises(ValueError):
        Digraph(-1)


def test_cycle_detected_in_sample_graphs():
    first = make_graph(
        10,
        [(1, 2), (2, 3), (3, 4), (3, 6), (4, 5), (6, 5), (7, 2), (7, 8), (8, 9), (9, 7)],
    )
    second = make_graph(5, TRANSPOSE_EDGES)
    assert first.has_cycle() is True
    assert second.has_cycle() is True


def test_dag_has_no_cycle():
    assert make_graph(6, TOPO_EDGES).has_cycle() is False


def test_self_loop_is_cycle():
    assert make_graph(1, [(0, 0)]).has_cycle() is True


def test_sample_graph_with_odd_cycle_is_not_bipartite():
    edges = [
        (1, 2), (2, 3), (2, 6), (2, 1), (3, 4), (3, 2), (6, 5), (6, 2),
        (5, 4), (5, 6), (4, 7), (4, 3), (4, 5), (7, 8), (7, 4), (8, 7),
    ]
    assert make_graph(9, edges).is_bipartite() is False


def test_even_cycle_is_bipartite():
    edges = [(0, 1), (1, 0), (1, 2), (2, 1), (2, 3), (3, 2), (3, 0), (0, 3)]
    assert make_graph(4, edges).is_bipartite() is True


def test_graph_without_edges_is_bipartite():
    assert Digraph(4).is_bipartite() is True


def test_topological_sort_sample():
    assert make_graph(6, TOPO_EDGES).topological_sort() == [5, 4, 2, 3, 1, 0]


def test_topological_sort_respects_edges():
    graph = make_graph(6, TOPO_EDGES)
    order = graph.topological_sort()
    assert sorted(order) == list(range(6))
    position = {v: i for i, v in enumerate(order)}
    for src, dest in TOPO_EDGES:
        assert position[src] < position[dest]


def test_transpose_reverses_every_edge():
    graph = make_graph(5, TRANSPOSE_EDGES)
    assert edge_set(graph.transpose()) == {(d, s) for s, d in TRANSPOSE_EDGES}


def test_transpose_twice_restores_edges_and_keeps_original():
    graph = make_graph(5, TRANSPOSE_EDGES)
    twice = graph.transpose().transpose()
    assert edge_set(twice) == set(TRANSPOSE_EDGES)
    assert twice.vertices == graph.vertices
    assert edge_set(graph) == set(TRANSPOSE_EDGES)