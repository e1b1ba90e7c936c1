"""
graphbench.commands.config_cmd - Inspect the effective configuration.
"""

import argparse
import json
import sys

from graphbench.commands._common import load_command_config
from graphbench.config import find_config_file


def run(args: argparse.Namespace) -> int:
    """Run the config command."""
    action = getattr(args, "config_action", None)
    if action == "path":
        return cmd_path(args)
    if action == "show":
        return cmd_show(args)
    print("Usage: graphbench config {show|path}", file=sys.stderr)
    return 1


def cmd_path(args: argparse.Namespace) -> int:
    """Print the config file in effect, if any."""
    path = getattr(args, "config", None) or find_config_file()
    if path is None:
        print("No .graphbench.toml found (using defaults)")
        return 0
    print(path)
    return 0


def cmd_show(args: argparse.Namespace) -> int:
    """Print the merged configuration as JSON."""
    config = load_command_config(args)
    if config is None:
        return 1
    print(json.dumps(config, indent=2))
    return 0
