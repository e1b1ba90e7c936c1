"""Graph Serialization - Persisted JSON format for workbench graphs.

The persisted shape is:

    {
      "vertices": {"A": {"id": "A", "x": 0.0, "y": 0.0, "radius": 25.0}, ...},
      "edges": [{"source": "A", "target": "B", "weight": 1.0}, ...]
    }

Display attributes and weights are passed through untouched: an integer
stays an integer on load and save. Missing fields take the model defaults. Anything that cannot be
turned back into a Graph raises GraphLoadError, which callers treat as
the "load failed" outcome.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from graphbench.exceptions import GraphLoadError
from graphbench.graph.model import DEFAULT_RADIUS, DEFAULT_WEIGHT, Edge, Graph, Vertex

logger = logging.getLogger(__name__)

GRAPH_SUFFIX = ".json"


def vertex_to_dict(vertex: Vertex) -> dict[str, Any]:
    """Serialize a Vertex to a JSON-compatible dict."""
    return {
        "id": vertex.id,
        "x": vertex.x,
        "y": vertex.y,
        "radius": vertex.radius,
    }


def edge_to_dict(edge: Edge) -> dict[str, Any]:
    """Serialize an Edge to a JSON-compatible dict."""
    return {
        "source": edge.source,
        "target": edge.target,
        "weight": edge.weight,
    }


def graph_to_dict(graph: Graph) -> dict[str, Any]:
    """Serialize a Graph to the persisted dict shape.

    Args:
        graph: The graph to serialize.

    Returns:
        Dict with "vertices" and "edges".
    """
    return {
        "vertices": {vid: vertex_to_dict(v) for vid, v in graph.vertices.items()},
        "edges": [edge_to_dict(e) for e in graph.edges],
    }


def _number(value: Any, what: str) -> int | float:
    # bool is an int subclass but never a valid coordinate or weight
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise GraphLoadError(f"{what} must be a number, got {value!r}")
    # Integers stay integers so saving writes back the numbers that were loaded
    return value


def _string(data: dict[str, Any], key: str, what: str) -> str:
    if key not in data:
        raise GraphLoadError(f"{what} is missing required field '{key}'")
    value = data[key]
    if not isinstance(value, str):
        raise GraphLoadError(f"{what} field '{key}' must be a string, got {value!r}")
    return value


def vertex_from_dict(key: str, data: Any) -> Vertex:
    """Build a Vertex from its persisted dict.

    Args:
        key: The mapping key the vertex was stored under.
        data: The vertex object.

    Raises:
        GraphLoadError: If the object is malformed or its id disagrees
            with its key.
    """
    if not isinstance(data, dict):
        raise GraphLoadError(f"vertex '{key}' must be an object")
    vertex_id = _string(data, "id", f"vertex '{key}'")
    if vertex_id != key:
        raise GraphLoadError(f"vertex key '{key}' does not match its id '{vertex_id}'")
    return Vertex(
        id=vertex_id,
        x=_number(data.get("x", 0.0), f"vertex '{key}' x"),
        y=_number(data.get("y", 0.0), f"vertex '{key}' y"),
        radius=_number(data.get("radius", DEFAULT_RADIUS), f"vertex '{key}' radius"),
    )


def edge_from_dict(position: int, data: Any) -> Edge:
    """Build an Edge from its persisted dict.

    Endpoints are not checked against the vertex mapping; dangling edges
    are loaded as-is.
    """
    what = f"edge #{position}"
    if not isinstance(data, dict):
        raise GraphLoadError(f"{what} must be an object")
    return Edge(
        source=_string(data, "source", what),
        target=_string(data, "target", what),
        weight=_number(data.get("weight", DEFAULT_WEIGHT), f"{what} weight"),
    )


def graph_from_dict(data: Any) -> Graph:
    """Build a Graph from the persisted dict shape.

    Both top-level fields are optional; a missing one means empty.

    Raises:
        GraphLoadError: If the structure is malformed.
    """
    if not isinstance(data, dict):
        raise GraphLoadError("top-level value must be an object")

    raw_vertices = data.get("vertices", {})
    raw_edges = data.get("edges", [])
    if not isinstance(raw_vertices, dict):
        raise GraphLoadError("'vertices' must be an object keyed by vertex id")
    if not isinstance(raw_edges, list):
        raise GraphLoadError("'edges' must be a list")

    graph = Graph()
    for key, raw in raw_vertices.items():
        graph.add_vertex(vertex_from_dict(key, raw))
    for position, raw in enumerate(raw_edges):
        graph.add_edge(edge_from_dict(position, raw))

    dangling = len(graph.dangling_edges())
    if dangling:
        logger.warning("Loaded graph has %d edge(s) referencing missing vertices", dangling)
    return graph


def dumps_graph(graph: Graph) -> str:
    """Serialize a Graph to a pretty-printed JSON string."""
    return json.dumps(graph_to_dict(graph), indent=2)


def loads_graph(text: str) -> Graph:
    """Parse a Graph from a JSON string.

    Raises:
        GraphLoadError: On invalid JSON or malformed structure.
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise GraphLoadError(f"invalid JSON: {e}") from e
    return graph_from_dict(data)


def with_graph_suffix(path: Path | str) -> Path:
    """Append .json unless the path already ends with it (any case)."""
    p = Path(path)
    if p.suffix.lower() == GRAPH_SUFFIX:
        return p
    return p.with_name(p.name + GRAPH_SUFFIX)


def save_graph(graph: Graph, path: Path | str) -> Path:
    """Write a graph to disk.

    Args:
        graph: The graph to save.
        path: Target file. ".json" is appended if missing.

    Returns:
        The path actually written.
    """
    target = with_graph_suffix(path)
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(dumps_graph(graph) + "\n", encoding="utf-8")
    logger.debug(
        "Saved graph (%d vertices, %d edges) to %s",
        graph.vertex_count(),
        graph.edge_count(),
        target,
    )
    return target


def load_graph(path: Path | str) -> Graph:
    """Read a graph from disk.

    Raises:
        GraphLoadError: If the file is missing, unreadable, or malformed.
            The error carries the path.
    """
    p = Path(path)
    if not p.is_file():
        raise GraphLoadError("file not found", path=p)
    try:
        text = p.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise GraphLoadError(f"cannot read file: {e}", path=p) from e
    try:
        graph = loads_graph(text)
    except GraphLoadError as e:
        raise GraphLoadError(e.reason, path=p) from e
    logger.debug(
        "Loaded graph (%d vertices, %d edges) from %s",
        graph.vertex_count(),
        graph.edge_count(),
        p,
    )
    return graph


__all__ = [
    "GRAPH_SUFFIX",
    "vertex_to_dict",
    "edge_to_dict",
    "graph_to_dict",
    "vertex_from_dict",
    "edge_from_dict",
    "graph_from_dict",
    "dumps_graph",
    "loads_graph",
    "with_graph_suffix",
    "save_graph",
    "load_graph",
]
