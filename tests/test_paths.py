"""Tests for path reconstruction from the successor matrix."""

import pytest

from apsp.engine import execute, get_path, path_weight
from apsp.graph import UNREACHABLE, Graph


def _build(n: int, edges: list[tuple[int, int, float]]) -> Graph:
    graph = Graph.create(n)
    for source, target, weight in edges:
        graph.add_edge(source, target, weight)
    return graph


def _four_vertex_graph() -> Graph:
    return _build(4, [
        (0, 1, 3.0), (0, 3, 7.0), (1, 0, 8.0), (1, 2, 2.0),
        (2, 0, 5.0), (2, 3, 1.0), (3, 0, 2.0),
    ])


class TestGetPath:
    """get_path() after a standard run."""

    def test_detour_path(self) -> None:
        graph = _build(4, [(0, 1, 5.0), (0, 3, 10.0), (1, 2, 3.0), (2, 3, 1.0)])
        original = graph.copy()
        execute(graph)

        path = get_path(graph, 0, 3)
        assert path == [0, 1, 2, 3]
        assert path_weight(original, path) == 9.0
        assert path_weight(original, path) < original.get_edge_weight(0, 3)

    def test_multi_hop_path(self) -> None:
        graph = _four_vertex_graph()
        original = graph.copy()
        execute(graph)
        path = get_path(graph, 1, 0)
        assert path == [1, 2, 3, 0]
        assert path_weight(original, path) == graph.get_edge_weight(1, 0) == 5.0

    def test_every_path_weight_matches_distance(self) -> None:
        graph = _four_vertex_graph()
        original = graph.copy()
        execute(graph)
        for start in range(4):
            for end in range(4):
                path = get_path(graph, start, end)
                assert path is not None
                assert path[0] == start
                assert path[-1] == end
                assert len(path) <= 4
                assert path_weight(original, path) == graph.get_edge_weight(start, end)

    def test_start_equals_end(self) -> None:
        graph = _four_vertex_graph()
        execute(graph)
        assert get_path(graph, 2, 2) == [2]

    def test_unreachable_pair(self) -> None:
        graph = _build(3, [(0, 1, 1.0)])
        execute(graph)
        assert get_path(graph, 1, 0) is None
        assert get_path(graph, 0, 2) is None

    @pytest.mark.parametrize("start,end", [(-1, 0), (0, 4), (4, 4)])
    def test_out_of_range(self, start: int, end: int) -> None:
        graph = _four_vertex_graph()
        execute(graph)
        assert get_path(graph, start, end) is None

    def test_invalid_graph(self) -> None:
        assert get_path(None, 0, 1) is None
        assert get_path(Graph(3), 0, 1) is None

    def test_direct_edge_before_execution(self) -> None:
        graph = _four_vertex_graph()
        assert get_path(graph, 0, 1) == [0, 1]

    def test_negative_cycle_walk_does_not_loop(self) -> None:
        graph = _build(3, [(0, 1, 1.0), (1, 2, -3.0), (2, 0, 1.0)])
        execute(graph)
        for start in range(3):
            for end in range(3):
                path = get_path(graph, start, end)
                assert path is None or len(path) <= 3

    def test_broken_successor_chain(self) -> None:
        graph = _build(3, [(0, 1, 1.0)])
        graph.distance[0, 2] = 5.0  # reachable distance with no successor
        assert get_path(graph, 0, 2) is None


class TestPathWeight:
    """path_weight() sums stored distances along a route."""

    def test_sums_hops(self) -> None:
        graph = _build(3, [(0, 1, 1.5), (1, 2, 2.5)])
        assert path_weight(graph, [0, 1, 2]) == 4.0

    def test_single_vertex_path(self) -> None:
        assert path_weight(Graph.create(2), [1]) == 0.0

    def test_missing_hop(self) -> None:
        graph = _build(3, [(0, 1, 1.0)])
        assert path_weight(graph, [0, 1, 2]) == UNREACHABLE

    def test_none_or_empty(self) -> None:
        graph = Graph.create(2)
        assert path_weight(graph, None) == UNREACHABLE
        assert path_weight(graph, []) == UNREACHABLE
        assert path_weight(None, [0]) == UNREACHABLE
