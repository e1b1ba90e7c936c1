"""
graphbench.commands._common - Helpers shared by command modules.
"""

import argparse
import sys
from typing import Any, Dict, Optional

from graphbench.config import load_config
from graphbench.exceptions import ConfigurationError, GraphLoadError
from graphbench.graph import Graph, load_graph


def load_command_config(args: argparse.Namespace) -> Optional[Dict[str, Any]]:
    """Load config honouring the global --config flag.

    Prints the error and returns None on failure.
    """
    try:
        return load_config(getattr(args, "config", None))
    except ConfigurationError as e:
        print(f"Error: {e}", file=sys.stderr)
        return None


def load_command_graph(args: argparse.Namespace) -> Optional[Graph]:
    """Load the graph named by args.graph.

    Prints the load failure and returns None so the command can exit 1.
    """
    try:
        return load_graph(args.graph)
    except GraphLoadError as e:
        print(f"Error: {e}", file=sys.stderr)
        return None
