"""Bridge Finder - Cut edges via Tarjan's low-link DFS.

An edge is a bridge when removing it increases the number of connected
components. The DFS runs on an explicit stack, so graph depth is not
limited by the interpreter's recursion limit.
"""

from __future__ import annotations

import logging

from graphbench.graph.adjacency import Adjacency
from graphbench.graph.model import Edge, Graph

logger = logging.getLogger(__name__)

_NO_EDGE = -1


def find_bridges(graph: Graph) -> list[Edge]:
    """Find every bridge in the graph.

    DFS starts from each unvisited vertex in vertex-map order, so
    disconnected graphs are covered. The edge used to enter a vertex is
    tracked by its index in the edge sequence, and only that edge is
    excluded from the low-link update. A pair joined by parallel edges is
    therefore never reported as a bridge.

    Args:
        graph: Graph to analyze. It is not modified.

    Returns:
        Bridge edges in the order the DFS confirmed them. Empty for
        empty or edgeless graphs.
    """
    adjacency = Adjacency(graph)
    disc: dict[str, int] = {}
    low: dict[str, int] = {}
    bridges: list[Edge] = []
    clock = 0

    for root in adjacency.vertices():
        if root in disc:
            continue

        disc[root] = low[root] = clock
        clock += 1
        # Frame: [vertex, index of the edge used to enter it, next incident position]
        stack: list[list] = [[root, _NO_EDGE, 0]]

        while stack:
            frame = stack[-1]
            vertex, parent_edge, position = frame
            incident = adjacency.incident(vertex)

            if position < len(incident):
                frame[2] = position + 1
                edge_index, neighbor = incident[position]
                if edge_index == parent_edge:
                    continue
                if neighbor not in disc:
                    disc[neighbor] = low[neighbor] = clock
                    clock += 1
                    stack.append([neighbor, edge_index, 0])
                else:
                    low[vertex] = min(low[vertex], disc[neighbor])
                continue

            stack.pop()
            if not stack:
                continue
            parent = stack[-1][0]
            low[parent] = min(low[parent], low[vertex])
            if low[vertex] > disc[parent]:
                bridges.append(graph.edges[parent_edge])

    logger.debug(
        "Bridge search visited %d vertices, found %d bridge(s)", len(disc), len(bridges)
    )
    return bridges


__all__ = ["find_bridges"]
