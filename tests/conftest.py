"""Pytest fixtures shared by the graphbench tests."""

import logging
import os

import pytest

from tests.graph_helpers import make_graph


@pytest.fixture(autouse=True)
def _restore_package_logger():
    """Undo CLI logging setup so caplog sees package records again."""
    logger = logging.getLogger("graphbench")
    handlers, level, propagate = list(logger.handlers), logger.level, logger.propagate
    yield
    logger.handlers[:] = handlers
    logger.setLevel(level)
    logger.propagate = propagate


@pytest.fixture
def bridge_graph():
    """A -- B -- C with a square A-B-E-D; B-C is the only bridge."""
    return make_graph(
        [("A", "B"), ("A", "D"), ("B", "C"), ("B", "E"), ("D", "E")],
        vertices="ABCDE",
    )


@pytest.fixture
def square_graph():
    """4-cycle A-B-C-D-A, unit weights."""
    return make_graph([("A", "B"), ("B", "C"), ("C", "D"), ("D", "A")])


@pytest.fixture
def weighted_square():
    """4-cycle with weights 2, 3, 4, 1; MST weight 6."""
    return make_graph([("A", "B", 2), ("B", "C", 3), ("C", "D", 4), ("D", "A", 1)])


@pytest.fixture
def weighted_path():
    """A --2-- B --3-- C."""
    return make_graph([("A", "B", 2), ("B", "C", 3)])


@pytest.fixture
def single_vertex():
    """One vertex, no edges."""
    return make_graph([], vertices=["A"])


@pytest.fixture
def two_disjoint_edges():
    """A-B and C-D; no vertex reaches degree 2."""
    return make_graph([("A", "B"), ("C", "D")], vertices="ABCD")


@pytest.fixture
def grid_graph():
    """2x4 grid: A-B-C-D over E-F-G-H with vertical rungs."""
    return make_graph(
        [
            ("A", "B"), ("B", "C"), ("C", "D"),
            ("E", "F"), ("F", "G"), ("G", "H"),
            ("A", "E"), ("B", "F"), ("C", "G"), ("D", "H"),
        ],
        vertices="ABCDEFGH",
    )


@pytest.fixture
def k4_with_fringe():
    """K4 on A-D; E touches A and B; F touches only A."""
    return make_graph(
        [
            ("A", "B"), ("A", "C"), ("A", "D"), ("B", "C"), ("B", "D"), ("C", "D"),
            ("E", "A"), ("E", "B"),
            ("F", "A"),
        ],
        vertices="ABCDEF",
    )


@pytest.fixture(autouse=True)
def _clear_graphbench_env(monkeypatch):
    """Keep GRAPHBENCH_* variables from the outer shell out of config tests."""
    for name in list(os.environ):
        if name.startswith("GRAPHBENCH_"):
            monkeypatch.delenv(name)
