"""Tests for the degree-sequence graph generator."""

import logging
from collections import Counter

import pytest

from graphbench.graph import Adjacency
from graphbench.graph.generator import (
    circle_layout,
    generate_from_degree_sequence,
    havel_hakimi_pairs,
)


def _degrees(graph):
    return Adjacency(graph).degrees()


class TestHavelHakimi:
    """Tests for havel_hakimi_pairs."""

    def test_triangle(self):
        pairs = havel_hakimi_pairs({"A": 2, "B": 2, "C": 2})
        assert sorted(tuple(sorted(p)) for p in pairs) == [("A", "B"), ("A", "C"), ("B", "C")]

    def test_graphical_sequence_realized(self):
        requested = {"V0": 3, "V1": 3, "V2": 2, "V3": 2, "V4": 2}
        g = generate_from_degree_sequence(requested)
        assert _degrees(g) == requested
        assert g.edge_count() == 6

    def test_no_parallel_edges_or_loops(self):
        g = generate_from_degree_sequence({"V0": 3, "V1": 3, "V2": 2, "V3": 2, "V4": 2})
        keys = Counter(e.key for e in g.edges)
        assert max(keys.values()) == 1
        assert not any(e.is_loop for e in g.edges)

    def test_ties_keep_sequence_order(self):
        assert havel_hakimi_pairs({"A": 1, "B": 1}) == [("A", "B")]
        assert havel_hakimi_pairs({"B": 1, "A": 1}) == [("B", "A")]

    def test_all_zero(self):
        assert havel_hakimi_pairs({"A": 0, "B": 0}) == []

    def test_non_graphical_tolerated(self, caplog):
        with caplog.at_level(logging.WARNING, logger="graphbench"):
            pairs = havel_hakimi_pairs({"A": 3, "B": 1})
        assert pairs == [("A", "B")]
        assert "not graphical" in caplog.text

    def test_graphical_sequence_no_warning(self, caplog):
        with caplog.at_level(logging.WARNING, logger="graphbench"):
            havel_hakimi_pairs({"A": 1, "B": 1})
        assert caplog.records == []

    def test_negative_degree(self):
        with pytest.raises(ValueError, match="non-negative"):
            havel_hakimi_pairs({"A": -1})


class TestLayout:
    """Tests for the circle layout."""

    def test_positions(self):
        vertices = circle_layout(["A", "B", "C", "D"])
        assert (vertices["A"].x, vertices["A"].y) == pytest.approx((700.0, 300.0))
        assert (vertices["B"].x, vertices["B"].y) == pytest.approx((400.0, 600.0))
        assert (vertices["C"].x, vertices["C"].y) == pytest.approx((100.0, 300.0))

    def test_custom_center_and_radius(self):
        vertices = circle_layout(["A", "B"], center=(0.0, 0.0), radius=10.0)
        assert (vertices["A"].x, vertices["A"].y) == pytest.approx((10.0, 0.0))
        assert (vertices["B"].x, vertices["B"].y) == pytest.approx((-10.0, 0.0))

    def test_empty(self):
        assert circle_layout([]) == {}

    def test_generated_graph_uses_defaults(self):
        g = generate_from_degree_sequence({"A": 1, "B": 1})
        assert g.vertex_ids() == ["A", "B"]
        assert all(v.radius == 25.0 for v in g.iter_vertices())
        assert all(e.weight == 1.0 for e in g.edges)
