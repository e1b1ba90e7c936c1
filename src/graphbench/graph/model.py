"""Graph model - Vertex, Edge and Graph entities.

This module provides the data structures shared by every analyzer:
- Vertex: identity plus opaque display attributes
- Edge: undirected weighted edge stored as an ordered pair
- Graph: vertex mapping plus edge sequence
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Iterator

DEFAULT_RADIUS = 25.0
DEFAULT_WEIGHT = 1.0

EdgeKey = tuple[str, str]

_ENDPOINT_FIELDS = frozenset({"source", "target"})


def canonical_pair(u: str, v: str) -> EdgeKey:
    """Return the endpoint pair in canonical (sorted) order."""
    return (u, v) if u <= v else (v, u)


@dataclass
class Vertex:
    """A vertex in the workbench graph.

    Only `id` is meaningful to the analyzers. Position and radius belong
    to the editor and are carried through unchanged.

    Attributes:
        id: Unique key within a graph.
        x: Canvas x position.
        y: Canvas y position.
        radius: Display radius.
    """

    id: str
    x: float = 0.0
    y: float = 0.0
    radius: float = DEFAULT_RADIUS


@dataclass
class Edge:
    """An undirected weighted edge.

    Stored as (source, target) because that is how the editor creates it,
    but identity is the unordered endpoint pair: Edge("A", "B", 1.0) and
    Edge("B", "A", 1.0) compare equal.

    The hash covers only the endpoints, and they are fixed once the edge is
    built, so an edge stays findable in sets and dict keys. The weight may
    be edited in place. To reconnect an edge, build a new one.

    Attributes:
        source: First endpoint id.
        target: Second endpoint id.
        weight: Edge weight.
    """

    source: str
    target: str
    weight: float = DEFAULT_WEIGHT

    def __setattr__(self, name: str, value: object) -> None:
        if name in _ENDPOINT_FIELDS and name in self.__dict__:
            raise AttributeError(f"Edge endpoints are fixed; cannot reassign '{name}'")
        super().__setattr__(name, value)

    @property
    def key(self) -> EdgeKey:
        """Canonical undirected identity of this edge."""
        return canonical_pair(self.source, self.target)

    @property
    def is_loop(self) -> bool:
        """True if both endpoints are the same vertex."""
        return self.source == self.target

    def endpoints(self) -> tuple[str, str]:
        """Return (source, target) as stored."""
        return (self.source, self.target)

    def touches(self, vertex_id: str) -> bool:
        """Check if vertex_id is one of the endpoints."""
        return self.source == vertex_id or self.target == vertex_id

    def other(self, vertex_id: str) -> str | None:
        """Return the endpoint opposite vertex_id, or None if not incident."""
        if self.source == vertex_id:
            return self.target
        if self.target == vertex_id:
            return self.source
        return None

    def __eq__(self, other: object) -> bool:
        """Check equality on the unordered endpoint pair and weight."""
        if not isinstance(other, Edge):
            return NotImplemented
        return self.key == other.key and self.weight == other.weight

    def __hash__(self) -> int:
        """Hash on the unordered endpoint pair."""
        return hash(self.key)

    def __str__(self) -> str:
        return f"{self.source} - {self.target} ({self.weight:g})"


@dataclass
class Graph:
    """A weighted undirected graph as edited in the workbench.

    Edges referencing a vertex id missing from `vertices` are tolerated.
    Adjacency queries skip them rather than failing.

    Attributes:
        vertices: Mapping of vertex id to Vertex.
        edges: Edge sequence. Order only matters for tie-breaking.
    """

    vertices: dict[str, Vertex] = field(default_factory=dict)
    edges: list[Edge] = field(default_factory=list)

    def add_vertex(self, vertex: Vertex) -> Vertex:
        """Insert or replace a vertex keyed by its id."""
        self.vertices[vertex.id] = vertex
        return vertex

    def add_edge(self, edge: Edge) -> Edge:
        """Append an edge. No duplicate or endpoint checks are made."""
        self.edges.append(edge)
        return edge

    def has_vertex(self, vertex_id: str) -> bool:
        """Check if a vertex id is present."""
        return vertex_id in self.vertices

    def vertex_ids(self) -> list[str]:
        """Return vertex ids in mapping order."""
        return list(self.vertices)

    def iter_vertices(self) -> Iterator[Vertex]:
        """Iterate over vertices."""
        yield from self.vertices.values()

    def iter_edges(self) -> Iterator[Edge]:
        """Iterate over edges in sequence order."""
        yield from self.edges

    def vertex_count(self) -> int:
        """Return number of vertices."""
        return len(self.vertices)

    def edge_count(self) -> int:
        """Return number of edges."""
        return len(self.edges)

    def is_empty(self) -> bool:
        """True if the graph has no vertices."""
        return not self.vertices

    def dangling_edges(self) -> list[Edge]:
        """Return edges with at least one endpoint missing from vertices."""
        return [
            e
            for e in self.edges
            if e.source not in self.vertices or e.target not in self.vertices
        ]

    def total_weight(self) -> float:
        """Sum of all edge weights."""
        return sum((e.weight for e in self.edges), 0.0)

    def snapshot(self) -> Graph:
        """Return an independent copy safe to hand to an analyzer.

        Vertex and Edge values are copied as well as the containers, so
        later edits to this graph (moving a vertex, changing a weight) are
        not observed through the snapshot.
        """
        return Graph(
            vertices={vid: replace(v) for vid, v in self.vertices.items()},
            edges=[replace(e) for e in self.edges],
        )


__all__ = [
    "DEFAULT_RADIUS",
    "DEFAULT_WEIGHT",
    "EdgeKey",
    "canonical_pair",
    "Vertex",
    "Edge",
    "Graph",
]
