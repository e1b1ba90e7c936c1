"""
graphbench.commands.analyze - Run one analyzer on a saved graph.
"""

import argparse
import json
import sys

from graphbench.analysis import (
    AnalysisKind,
    BridgeResult,
    CommunityResult,
    MstResult,
    run_analysis,
)
from graphbench.commands._common import load_command_config, load_command_graph
from graphbench.exceptions import ConfigurationError
from graphbench.graph import Graph


def run(args: argparse.Namespace) -> int:
    """Run the analyze command.

    Returns:
        Exit code (0 for success, 1 for load or parameter errors).
    """
    if not getattr(args, "analysis", None):
        print("Usage: graphbench analyze {bridges|mst|communities} GRAPH", file=sys.stderr)
        return 1

    kind = AnalysisKind.from_name(args.analysis)

    config = load_command_config(args)
    if config is None:
        return 1
    graph = load_command_graph(args)
    if graph is None:
        return 1

    try:
        result = run_analysis(
            graph,
            kind,
            start_k=getattr(args, "start_k", None),
            expansion_threshold=getattr(args, "threshold", None),
            config=config,
        )
    except (ConfigurationError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if getattr(args, "json", False):
        print(json.dumps(result.to_dict(), indent=2))
        return 0

    print(f"{kind.display_name}: {args.graph}")
    print("=" * 60)
    if isinstance(result, BridgeResult):
        print_bridges(result)
    elif isinstance(result, MstResult):
        print_mst(result, graph)
    elif isinstance(result, CommunityResult):
        print_communities(result, graph)
    return 0


def print_bridges(result: BridgeResult) -> None:
    """Print bridges, one per line."""
    print(f"Bridges: {len(result.bridges)}")
    for edge in result.bridges:
        print(f"  {edge.source} - {edge.target}")


def print_mst(result: MstResult, graph: Graph) -> None:
    """Print the spanning forest and its weight."""
    print(f"Edges in spanning forest: {len(result.edges)}")
    print(f"Total weight: {result.total_weight:.2f}")
    if result.edges and not result.is_spanning_tree(graph.vertex_count()):
        print("Graph is disconnected; result is a spanning forest")
    for edge in result.edges:
        print(f"  {edge.source} - {edge.target} ({edge.weight:g})")


def print_communities(result: CommunityResult, graph: Graph) -> None:
    """Print each community's members and the unassigned vertices."""
    print(f"Communities: {result.community_count}")
    for community_id in sorted(set(result.communities.values())):
        members = ", ".join(result.members(community_id))
        print(f"  {community_id}: {members}")
    unassigned = result.unassigned(graph)
    if unassigned:
        print(f"Unassigned: {', '.join(unassigned)}")
