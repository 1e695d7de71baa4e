import pytest

from socialgraph import DataGraph, InvalidEdge

TRIANGLE = [(1, 2), (2, 3), (1, 3)]
STAR = [(0, 1), (0, 2), (0, 3), (0, 4)]


def test_triangle_degree_distribution():
    graph = DataGraph.from_edges(TRIANGLE)
    assert graph.degree_distribution() == {2: 3}
    assert graph.num_nodes == 3
    assert graph.num_edges == 3


def test_star_neighbors():
    graph = DataGraph.from_edges(STAR)
    assert graph.neighbors(0) == {1, 2, 3, 4}
    assert graph.neighbors(3) == {0}
    assert graph.degree_distribution() == {4: 1, 1: 4}


def test_edges_are_symmetric():
    edges = STAR + [(5, 6), (2, 7), (7, 9)]
    graph = DataGraph.from_edges(edges)
    for u, v in edges:
        assert v in graph.neighbors(u)
        assert u in graph.neighbors(v)


def test_handshake_lemma():
    edges = [(0, 1), (1, 2), (2, 0), (2, 3), (3, 4), (10, 11), (1, 0)]
    graph = DataGraph.from_edges(edges)
    degrees = [graph.degree(v) for v in graph.all_node_ids()]
    assert sum(degrees) == 2 * graph.num_edges
    for v in graph.all_node_ids():
        assert graph.degree(v) == len(graph.neighbors(v))


def test_duplicate_edges_are_idempotent():
    deduped = DataGraph.from_edges([(1, 2), (2, 3)])
    duplicated = DataGraph.from_edges([(1, 2), (1, 2), (2, 1), (2, 3), (3, 2)])
    for v in (1, 2, 3):
        assert duplicated.neighbors(v) == deduped.neighbors(v)
    assert duplicated.degree(1) == 1
    assert duplicated.num_edges == 2


def test_unknown_node_has_no_neighbors():
    graph = DataGraph.from_edges(TRIANGLE)
    assert graph.neighbors(42) == frozenset()
    assert graph.degree(42) == 0
    assert 42 not in graph


def test_self_loop_records_isolated_node():
    graph = DataGraph.from_edges([(5, 5), (1, 2)])
    assert 5 in graph
    assert graph.neighbors(5) == frozenset()
    assert graph.num_edges == 1
    assert graph.degree_distribution() == {0: 1, 1: 2}


def test_all_node_ids():
    graph = DataGraph.from_edges([(1, 2), (7, 100)])
    assert graph.all_node_ids() == {1, 2, 7, 100}


def test_empty_graph():
    graph = DataGraph.from_edges([])
    assert graph.is_empty()
    assert len(graph) == 0
    assert graph.degree_distribution() == {}
    assert graph.all_node_ids() == frozenset()


@pytest.mark.parametrize("edge", [(-1, 2), (1, -3), ("a", 2), (1.5, 2), (True, 2), (1, 2, 3), (1,), None])
def test_invalid_edges_are_rejected(edge):
    with pytest.raises(InvalidEdge):
        DataGraph.from_edges([(0, 1), edge])


def test_invalid_edge_is_a_value_error():
    with pytest.raises(ValueError) as excinfo:
        DataGraph.from_edges([(3, -4)])
    assert excinfo.value.edge == (3, -4)
    assert "negative" in str(excinfo.value)


def test_neighbor_sets_are_immutable():
    graph = DataGraph.from_edges(TRIANGLE)
    with pytest.raises(AttributeError):
        graph.neighbors(1).add(9)


def test_constructor_copies_adjacency():
    adjacency = {1: {2}, 2: {1}}
    graph = DataGraph(adjacency)
    adjacency[1].add(3)
    adjacency[3] = {1}
    assert graph.neighbors(1) == {2}
    assert 3 not in graph
    assert graph.num_edges == 1
