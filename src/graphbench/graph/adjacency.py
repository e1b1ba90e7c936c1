"""Adjacency - Undirected neighbor and degree queries.

Every analyzer reads the graph through this module. An Adjacency is built
once per analysis call from a Graph and an optional restricting subset of
vertex ids; all queries then answer "within that subset".

Edges are undirected: (u, v) makes u adjacent to v and v adjacent to u.
Edges with an endpoint outside the subset, or missing from the vertex
mapping, are skipped.
"""

from __future__ import annotations

from collections.abc import Collection, Iterable
from typing import Iterator

from graphbench.graph.model import Graph


class Adjacency:
    """Incidence lists for a graph restricted to a vertex subset.

    Example:
        >>> adj = Adjacency(graph, within={"A", "B", "C"})
        >>> adj.degree("A")
        2
        >>> sorted(adj.neighbors("A"))
        ['B', 'C']
    """

    def __init__(self, graph: Graph, within: Iterable[str] | None = None) -> None:
        """Build incidence lists in O(V + E).

        Args:
            graph: The graph to index.
            within: Vertex ids to restrict to. Defaults to every vertex.
                Ids not present in the graph are ignored.
        """
        if within is None:
            members = set(graph.vertices)
        else:
            members = set(within) & graph.vertices.keys()

        # Keep vertex-map order so traversals are deterministic
        self._incident: dict[str, list[tuple[int, str]]] = {
            vid: [] for vid in graph.vertices if vid in members
        }

        for index, edge in enumerate(graph.edges):
            u, v = edge.source, edge.target
            if u not in self._incident or v not in self._incident:
                continue
            self._incident[u].append((index, v))
            if u != v:
                self._incident[v].append((index, u))

    def __contains__(self, vertex_id: object) -> bool:
        return vertex_id in self._incident

    def __len__(self) -> int:
        return len(self._incident)

    def vertices(self) -> Iterator[str]:
        """Iterate over the vertex ids in the subset."""
        yield from self._incident

    def incident(self, vertex_id: str) -> list[tuple[int, str]]:
        """Return (edge_index, neighbor_id) pairs in edge-sequence order.

        A self-loop appears once, with the vertex as its own neighbor.
        Unknown ids yield an empty list.
        """
        return self._incident.get(vertex_id, [])

    def neighbors(self, vertex_id: str) -> set[str]:
        """Return the set of neighbor ids within the subset."""
        return {w for _, w in self.incident(vertex_id)}

    def degree(self, vertex_id: str, among: Collection[str] | None = None) -> int:
        """Count incident edges within the subset.

        Parallel edges each count. A self-loop counts once.

        Args:
            vertex_id: Vertex to measure.
            among: Further restriction on the other endpoint, used while
                peeling to avoid rebuilding the index.
        """
        if among is None:
            return len(self.incident(vertex_id))
        return sum(1 for _, w in self.incident(vertex_id) if w in among)

    def degrees(self, among: Collection[str] | None = None) -> dict[str, int]:
        """Return {vertex_id: degree} for the subset (or for `among`)."""
        ids = self._incident if among is None else [v for v in self._incident if v in among]
        return {v: self.degree(v, among) for v in ids}

    def are_adjacent(self, u: str, v: str) -> bool:
        """Check if some edge joins u and v within the subset."""
        return any(w == v for _, w in self.incident(u))

    def max_degree(self) -> int:
        """Return the largest degree in the subset, 0 when empty."""
        return max((len(pairs) for pairs in self._incident.values()), default=0)


def neighbors(graph: Graph, vertex_id: str, within: Iterable[str] | None = None) -> set[str]:
    """One-off neighbor query. Prefer Adjacency for repeated lookups."""
    return Adjacency(graph, within).neighbors(vertex_id)


def degree(graph: Graph, vertex_id: str, within: Iterable[str] | None = None) -> int:
    """One-off degree query. Prefer Adjacency for repeated lookups."""
    return Adjacency(graph, within).degree(vertex_id)


__all__ = ["Adjacency", "neighbors", "degree"]
