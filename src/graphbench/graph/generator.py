"""Graph generator - Build a graph that realizes a degree sequence.

Uses the Havel-Hakimi construction and lays the vertices out on a circle
so the editor has something sensible to draw.
"""

from __future__ import annotations

import logging
import math

from graphbench.graph.model import Edge, Graph, Vertex

logger = logging.getLogger(__name__)

DEFAULT_CENTER = (400.0, 300.0)
DEFAULT_LAYOUT_RADIUS = 300.0


def circle_layout(
    vertex_ids: list[str],
    center: tuple[float, float] = DEFAULT_CENTER,
    radius: float = DEFAULT_LAYOUT_RADIUS,
) -> dict[str, Vertex]:
    """Place vertices evenly on a circle, in the given order."""
    cx, cy = center
    n = len(vertex_ids)
    vertices: dict[str, Vertex] = {}
    for i, vid in enumerate(vertex_ids):
        angle = 2.0 * math.pi * i / n
        vertices[vid] = Vertex(
            id=vid,
            x=cx + radius * math.cos(angle),
            y=cy + radius * math.sin(angle),
        )
    return vertices


def havel_hakimi_pairs(degrees: dict[str, int]) -> list[tuple[str, str]]:
    """Return the edge pairs chosen by Havel-Hakimi for a degree sequence.

    Each round takes the vertex with the highest remaining degree (ties
    keep sequence order), retires it, and connects it to the next
    highest-degree vertices. If the sequence is not graphical the rounds
    simply connect as many vertices as remain.

    Raises:
        ValueError: If any degree is negative.
    """
    for vid, d in degrees.items():
        if d < 0:
            raise ValueError(f"Degree of {vid} must be non-negative, got {d}")

    remaining = dict(degrees)
    pairs: list[tuple[str, str]] = []
    short = 0

    while any(d > 0 for d in remaining.values()):
        ranked = sorted(
            ((vid, d) for vid, d in remaining.items() if d > 0),
            key=lambda item: -item[1],
        )
        head, head_degree = ranked[0]
        del remaining[head]

        targets = ranked[1 : head_degree + 1]
        short += head_degree - len(targets)
        for target, _ in targets:
            pairs.append((head, target))
            remaining[target] -= 1

    if short:
        logger.warning(
            "Degree sequence is not graphical; %d requested connection(s) could not be made",
            short,
        )
    return pairs


def generate_from_degree_sequence(
    degrees: dict[str, int],
    *,
    center: tuple[float, float] = DEFAULT_CENTER,
    radius: float = DEFAULT_LAYOUT_RADIUS,
) -> Graph:
    """Generate a graph whose vertex degrees follow `degrees`.

    Args:
        degrees: Mapping of vertex id to requested degree.
        center: Layout circle center.
        radius: Layout circle radius.

    Returns:
        A Graph with one vertex per key and unit-weight edges.
    """
    graph = Graph(vertices=circle_layout(list(degrees), center, radius))
    for source, target in havel_hakimi_pairs(degrees):
        graph.add_edge(Edge(source, target, 1.0))
    logger.debug(
        "Generated graph with %d vertices and %d edges",
        graph.vertex_count(),
        graph.edge_count(),
    )
    return graph


__all__ = [
    "DEFAULT_CENTER",
    "DEFAULT_LAYOUT_RADIUS",
    "circle_layout",
    "havel_hakimi_pairs",
    "generate_from_degree_sequence",
]
