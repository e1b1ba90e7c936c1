"""Graph module - Core graph data structures.

Exports:
- Vertex: Vertex identity plus display attributes
- Edge: Undirected weighted edge with canonical equality
- Graph: Vertex mapping plus edge sequence
- Adjacency: Restricted neighbor/degree queries
- load_graph / save_graph: Persisted JSON format
"""

from graphbench.graph.adjacency import Adjacency
from graphbench.graph.model import Edge, EdgeKey, Graph, Vertex, canonical_pair
from graphbench.graph.serialize import (
    graph_from_dict,
    graph_to_dict,
    load_graph,
    save_graph,
)

__all__ = [
    "Vertex",
    "Edge",
    "EdgeKey",
    "Graph",
    "canonical_pair",
    "Adjacency",
    "graph_from_dict",
    "graph_to_dict",
    "load_graph",
    "save_graph",
]
