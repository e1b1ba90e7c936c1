"""
graphbench - Structural analysis for an interactive weighted-graph workbench

The editor owns the graph; graphbench answers three questions about a
snapshot of it: which edges are bridges, what is the minimum spanning
forest, and how do the vertices group into core-based communities.
"""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("graphbench")
except PackageNotFoundError:
    __version__ = "0.0.0+unknown"  # Not installed
__license__ = "MIT"

from graphbench.analysis import (
    AnalysisKind,
    find_bridges,
    find_communities,
    find_mst,
    run_analysis,
)
from graphbench.exceptions import ConfigurationError, GraphbenchError, GraphLoadError
from graphbench.graph import Edge, Graph, Vertex, load_graph, save_graph

__all__ = [
    "__version__",
    "Vertex",
    "Edge",
    "Graph",
    "load_graph",
    "save_graph",
    "find_bridges",
    "find_mst",
    "find_communities",
    "AnalysisKind",
    "run_analysis",
    "GraphbenchError",
    "GraphLoadError",
    "ConfigurationError",
]
