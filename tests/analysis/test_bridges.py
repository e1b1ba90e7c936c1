"""Tests for the bridge finder."""

import random

import pytest

from graphbench.analysis import find_bridges
from graphbench.graph import Edge
from tests.graph_helpers import brute_force_bridge_indices, indices_of, make_graph, random_multigraph


class TestBridgeScenarios:
    """Known graphs with known bridges."""

    def test_single_bridge(self, bridge_graph):
        assert find_bridges(bridge_graph) == [Edge("B", "C")]

    def test_cycle_has_no_bridges(self, square_graph):
        assert find_bridges(square_graph) == []

    def test_single_vertex(self, single_vertex):
        assert find_bridges(single_vertex) == []

    def test_empty_graph(self):
        assert find_bridges(make_graph([])) == []

    def test_every_tree_edge_is_a_bridge(self, weighted_path):
        result = find_bridges(weighted_path)
        assert set(result) == set(weighted_path.edges)
        # Deeper edge is confirmed first
        assert result == [Edge("B", "C", 3.0), Edge("A", "B", 2.0)]

    def test_disconnected_components(self, two_disjoint_edges):
        assert find_bridges(two_disjoint_edges) == [Edge("A", "B"), Edge("C", "D")]

    def test_returns_graph_edge_objects(self, bridge_graph):
        (bridge,) = find_bridges(bridge_graph)
        assert bridge is bridge_graph.edges[2]

    def test_graph_not_modified(self, bridge_graph):
        before = bridge_graph.snapshot()
        find_bridges(bridge_graph)
        assert bridge_graph == before


class TestMultigraphBridges:
    """Parallel edges, loops and dangling references."""

    def test_parallel_edges_are_not_bridges(self):
        g = make_graph([("A", "B"), ("B", "A"), ("B", "C")])
        assert find_bridges(g) == [Edge("B", "C")]

    def test_self_loop_is_not_a_bridge(self):
        g = make_graph([("A", "A"), ("A", "B")])
        assert find_bridges(g) == [Edge("A", "B")]

    def test_dangling_edges_ignored(self):
        g = make_graph([("A", "B"), ("B", "Z")], vertices="AB")
        assert find_bridges(g) == [Edge("A", "B")]


class TestBridgeScale:
    """Depth is not limited by the recursion limit."""

    def test_long_path(self):
        n = 5000
        g = make_graph([(f"V{i}", f"V{i + 1}") for i in range(n - 1)])
        assert len(find_bridges(g)) == n - 1

    def test_long_cycle(self):
        n = 5000
        g = make_graph([(f"V{i}", f"V{(i + 1) % n}") for i in range(n)])
        assert find_bridges(g) == []


class TestBridgeOracle:
    """Compare against remove-and-count on random small multigraphs."""

    @pytest.mark.parametrize("seed", range(200))
    def test_matches_brute_force(self, seed):
        g = random_multigraph(random.Random(seed))
        result = find_bridges(g)
        assert len(result) == len({id(e) for e in result})
        assert indices_of(g, result) == brute_force_bridge_indices(g)
