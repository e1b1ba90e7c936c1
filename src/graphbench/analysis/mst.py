"""Minimum Spanning Forest - Kruskal's algorithm over a DisjointSetUnion."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from graphbench.analysis.dsu import DisjointSetUnion
from graphbench.graph.model import Edge, Graph

logger = logging.getLogger(__name__)


def find_mst(graph: Graph) -> list[Edge]:
    """Build a minimum spanning forest.

    Edges are sorted by weight with a stable sort, so equal weights keep
    their edge-sequence order and the result is deterministic. An edge is
    accepted when its endpoints are in different sets. The scan stops as
    soon as V - 1 edges are accepted; on a disconnected graph it runs out
    of edges first and the result is a forest.

    Edges with an endpoint missing from the vertex map are skipped.
    Self-loops always close a cycle and are never accepted.

    Args:
        graph: Graph to analyze. It is not modified.

    Returns:
        Accepted edges in acceptance order.
    """
    if not graph.vertices or not graph.edges:
        return []

    dsu = DisjointSetUnion(graph.vertices)
    target = len(graph.vertices) - 1
    accepted: list[Edge] = []

    for edge in sorted(graph.edges, key=lambda e: e.weight):
        if edge.source not in dsu or edge.target not in dsu:
            continue
        if dsu.union(edge.source, edge.target):
            accepted.append(edge)
            if len(accepted) == target:
                break

    logger.debug(
        "Spanning forest: %d edge(s) over %d vertices in %d component(s)",
        len(accepted),
        len(graph.vertices),
        dsu.set_count(),
    )
    return accepted


def total_weight(edges: Iterable[Edge]) -> float:
    """Sum edge weights with plain float accumulation."""
    total = 0.0
    for edge in edges:
        total += edge.weight
    return total


__all__ = ["find_mst", "total_weight"]
