"""
graphbench.commands.stats - Summarize a saved graph.
"""

import argparse
import json
from typing import Any, Dict

from graphbench.commands._common import load_command_graph
from graphbench.graph import Graph


def graph_stats(graph: Graph) -> Dict[str, Any]:
    """Return counts and weight totals for a graph."""
    return {
        "vertex_count": graph.vertex_count(),
        "edge_count": graph.edge_count(),
        "total_weight": graph.total_weight(),
        "dangling_edge_count": len(graph.dangling_edges()),
    }


def run(args: argparse.Namespace) -> int:
    """Run the stats command."""
    graph = load_command_graph(args)
    if graph is None:
        return 1

    stats = graph_stats(graph)
    if getattr(args, "json", False):
        print(json.dumps(stats, indent=2))
        return 0

    print(f"Vertices: {stats['vertex_count']}")
    print(f"Edges: {stats['edge_count']}")
    print(f"Total weight: {stats['total_weight']:.2f}")
    if stats["dangling_edge_count"]:
        print(f"Dangling edges: {stats['dangling_edge_count']}")
        for edge in graph.dangling_edges():
            print(f"  {edge.source} - {edge.target}")
    return 0
