import logging

import pytest

from socialgraph import DataGraph, EmptyGraph, UnknownNode, average_shortest_path_length, bfs


def test_bfs_triangle():
    graph = DataGraph.from_edges([(1, 2), (2, 3), (1, 3)])
    assert bfs(graph, 1) == {1: 0, 2: 1, 3: 1}
    summary = average_shortest_path_length(graph, 1)
    assert summary.average == pytest.approx(1.0)
    assert summary.reachable == 2
    assert summary.defined


def test_bfs_disconnected_components():
    graph = DataGraph.from_edges([(1, 2), (3, 4)])
    distances = bfs(graph, 1)
    assert distances == {1: 0, 2: 1}
    assert 3 not in distances
    assert average_shortest_path_length(graph, 1).average == pytest.approx(1.0)


def test_bfs_path_graph():
    graph = DataGraph.from_edges([(0, 1), (1, 2), (2, 3), (3, 4)])
    assert bfs(graph, 0) == {0: 0, 1: 1, 2: 2, 3: 3, 4: 4}
    # (1 + 2 + 3 + 4) / 4
    assert average_shortest_path_length(graph, 0).average == pytest.approx(2.5)


def test_bfs_distance_bounds():
    edges = [(0, 1), (0, 2), (1, 3), (2, 3), (3, 4), (4, 5), (5, 6), (2, 6), (7, 8)]
    graph = DataGraph.from_edges(edges)
    for source in graph.all_node_ids():
        distances = bfs(graph, source)
        assert distances[source] == 0
        for dist in distances.values():
            assert 0 <= dist <= graph.num_nodes - 1


def test_bfs_takes_shortest_route():
    # long way round 0-1-2-3-4 versus shortcut 0-4
    graph = DataGraph.from_edges([(0, 1), (1, 2), (2, 3), (3, 4), (0, 4)])
    assert bfs(graph, 0)[3] == 2


def test_unknown_source():
    graph = DataGraph.from_edges([(1, 2)])
    with pytest.raises(UnknownNode) as excinfo:
        bfs(graph, 99)
    assert excinfo.value.node == 99
    with pytest.raises(UnknownNode):
        average_shortest_path_length(graph, 99)
    # graph still usable afterwards
    assert bfs(graph, 1) == {1: 0, 2: 1}


def test_empty_graph():
    graph = DataGraph.from_edges([])
    with pytest.raises(EmptyGraph):
        bfs(graph, 0)
    with pytest.raises(EmptyGraph):
        average_shortest_path_length(graph, 0)


def test_isolated_source_is_flagged(caplog):
    graph = DataGraph.from_edges([(3, 3), (1, 2)])
    with caplog.at_level(logging.WARNING, logger="socialgraph.traversal"):
        summary = average_shortest_path_length(graph, 3)
    assert summary.average == 0.0
    assert summary.reachable == 0
    assert not summary.defined
    assert "undefined" in caplog.text
