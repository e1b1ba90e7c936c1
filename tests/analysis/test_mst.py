"""Tests for the minimum spanning forest builder."""

import random

import pytest

from graphbench.analysis import find_mst, total_weight
from graphbench.graph import Edge
from tests.graph_helpers import (
    brute_force_min_forest_weight,
    component_count,
    is_acyclic,
    make_graph,
    random_multigraph,
)


class TestMstScenarios:
    """Known graphs with known spanning forests."""

    def test_path(self, weighted_path):
        result = find_mst(weighted_path)
        assert result == [Edge("A", "B", 2.0), Edge("B", "C", 3.0)]
        assert total_weight(result) == 5.0

    def test_square_drops_heaviest(self, weighted_square):
        result = find_mst(weighted_square)
        assert len(result) == 3
        assert total_weight(result) == 6.0
        assert Edge("C", "D", 4.0) not in result

    def test_acceptance_order_is_by_weight(self, weighted_square):
        assert [e.weight for e in find_mst(weighted_square)] == [1.0, 2.0, 3.0]

    def test_single_vertex(self, single_vertex):
        assert find_mst(single_vertex) == []

    def test_empty_graph(self):
        assert find_mst(make_graph([])) == []

    def test_forest_on_disconnected_graph(self, two_disjoint_edges):
        assert find_mst(two_disjoint_edges) == [Edge("A", "B"), Edge("C", "D")]

    def test_graph_not_modified(self, weighted_square):
        before = weighted_square.snapshot()
        find_mst(weighted_square)
        assert weighted_square == before
        assert weighted_square.edges == before.edges


class TestMstTieBreaking:
    """Equal weights keep edge-sequence order."""

    def test_stable_order(self):
        g = make_graph([("A", "B"), ("B", "C"), ("A", "C")])
        assert find_mst(g) == [Edge("A", "B"), Edge("B", "C")]

    def test_stable_order_reordered(self):
        g = make_graph([("A", "C"), ("A", "B"), ("B", "C")], vertices="ABC")
        assert find_mst(g) == [Edge("A", "C"), Edge("A", "B")]

    def test_parallel_edges_take_lighter(self):
        g = make_graph([("A", "B", 5), ("B", "A", 2)])
        assert find_mst(g) == [Edge("A", "B", 2.0)]


class TestMstSkippedEdges:
    """Loops and dangling edges are never accepted."""

    def test_self_loop_skipped(self):
        g = make_graph([("A", "A", 0.5), ("A", "B", 2)])
        assert find_mst(g) == [Edge("A", "B", 2.0)]

    def test_dangling_edge_skipped(self):
        g = make_graph([("A", "Z", 0.1), ("A", "B", 1)], vertices="AB")
        assert find_mst(g) == [Edge("A", "B")]

    def test_negative_weights(self):
        g = make_graph([("A", "B", -1), ("B", "C", -3), ("A", "C", 0)])
        assert total_weight(find_mst(g)) == -4.0


class TestTotalWeight:
    """Tests for total_weight."""

    def test_empty(self):
        assert total_weight([]) == 0.0

    def test_sum(self):
        assert total_weight([Edge("A", "B", 1.5), Edge("B", "C", 2.25)]) == 3.75


class TestMstOracle:
    """Compare against exhaustive search on random small multigraphs."""

    @pytest.mark.parametrize("seed", range(150))
    def test_minimal_spanning_forest(self, seed):
        g = random_multigraph(random.Random(seed), max_vertices=6, max_edges=8)
        ids = list(g.vertices)
        result = find_mst(g)
        assert is_acyclic(ids, result)
        assert len(result) == len(ids) - component_count(ids, g.edges)
        assert total_weight(result) == pytest.approx(brute_force_min_forest_weight(g))
