"""
graphbench.commands.serve - Serve a graph over the REST API.
"""

import argparse
import sys

from graphbench.commands._common import load_command_config, load_command_graph
from graphbench.graph import Graph


def run(args: argparse.Namespace) -> int:
    """Run the serve command.

    Starts from an empty graph when the file does not exist yet, so the
    editor can create one and save it there.
    """
    from graphbench.server import create_app

    config = load_command_config(args)
    if config is None:
        return 1

    if args.graph.exists():
        graph = load_command_graph(args)
        if graph is None:
            return 1
    else:
        graph = Graph()

    host = args.host or config["server"]["host"]
    port = args.port or config["server"]["port"]

    app = create_app(graph, config, graph_path=args.graph)
    print(f"Serving {args.graph} on http://{host}:{port}/", file=sys.stderr)
    app.run(host=host, port=int(port), debug=False)
    return 0
