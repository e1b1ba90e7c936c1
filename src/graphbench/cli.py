"""
graphbench.cli - Command-line interface.

Main entry point for the graphbench CLI tool.
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from graphbench import __version__
from graphbench.analysis import AnalysisKind
from graphbench.commands import analyze, config_cmd, generate, serve, stats
from graphbench.logging_utils import level_for, setup_logging

logger = logging.getLogger(__name__)


def _positive_int(value: str) -> int:
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be >= 1, got {number}")
    return number


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="graphbench",
        description="Structural analysis for weighted graphs",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  graphbench analyze bridges graph.json        # List cut edges
  graphbench analyze mst graph.json -j         # Spanning forest as JSON
  graphbench analyze communities graph.json --start-k 3
  graphbench stats graph.json                  # Counts and total weight
  graphbench generate out.json --degrees A=2,B=2,C=2
  graphbench serve graph.json --port 8000      # REST API for the editor

Configuration:
  graphbench config path        # Show config file location
  graphbench config show        # View merged settings

For detailed command help: graphbench <command> --help
        """,
    )

    # Global options
    parser.add_argument(
        "--version",
        action="version",
        version=f"graphbench {__version__}",
    )
    parser.add_argument(
        "--config",
        type=Path,
        help="Path to configuration file",
        metavar="PATH",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Verbose output",
    )
    parser.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        help="Suppress non-error output",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # analyze command
    analyze_parser = subparsers.add_parser(
        "analyze",
        help="Run bridge, spanning-tree, or community analysis",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Analyses:
  bridges       Edges whose removal disconnects part of the graph
  mst           Minimum spanning forest (Kruskal)
  communities   Core-expansion communities (partial assignment)
""",
    )
    analyze_parser.add_argument(
        "analysis",
        choices=[kind.value for kind in AnalysisKind],
        help="Analysis to run",
    )
    analyze_parser.add_argument(
        "graph",
        type=Path,
        help="Graph JSON file",
    )
    analyze_parser.add_argument(
        "-j",
        "--json",
        action="store_true",
        help="Output result as JSON",
    )
    analyze_parser.add_argument(
        "--start-k",
        type=_positive_int,
        help="Smallest core order for community detection (default from config: 2)",
        metavar="N",
    )
    analyze_parser.add_argument(
        "--threshold",
        type=_positive_int,
        help="Edges into a core needed to join it (default from config: 2)",
        metavar="N",
    )

    # stats command
    stats_parser = subparsers.add_parser(
        "stats",
        help="Show vertex/edge counts and total weight",
    )
    stats_parser.add_argument("graph", type=Path, help="Graph JSON file")
    stats_parser.add_argument(
        "-j",
        "--json",
        action="store_true",
        help="Output as JSON",
    )

    # generate command
    generate_parser = subparsers.add_parser(
        "generate",
        help="Generate a graph from a degree sequence (Havel-Hakimi)",
    )
    generate_parser.add_argument("output", type=Path, help="Where to save the graph")
    source = generate_parser.add_mutually_exclusive_group(required=True)
    source.add_argument(
        "--degrees",
        help="Comma-separated ID=DEGREE pairs, e.g. V0=3,V1=2",
        metavar="SPEC",
    )
    source.add_argument(
        "--degrees-file",
        type=Path,
        help="JSON object mapping vertex id to degree",
        metavar="PATH",
    )

    # serve command
    serve_parser = subparsers.add_parser(
        "serve",
        help="Serve a graph over a REST API for the editor",
    )
    serve_parser.add_argument("graph", type=Path, help="Graph JSON file (created on save)")
    serve_parser.add_argument("--host", help="Bind address (default from config)")
    serve_parser.add_argument("--port", type=int, help="Port (default from config)")

    # config command
    config_parser = subparsers.add_parser(
        "config",
        help="Inspect configuration",
    )
    config_subparsers = config_parser.add_subparsers(dest="config_action")
    config_subparsers.add_parser("show", help="Print merged configuration as JSON")
    config_subparsers.add_parser("path", help="Print the config file in use")

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main entry point for the CLI.

    Args:
        argv: Command line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code (0 for success, non-zero for failure)
    """
    parser = create_parser()

    # Enable shell tab-completion if argcomplete is installed
    # Install with: pip install graphbench[completion]
    try:
        import argcomplete

        argcomplete.autocomplete(parser)
    except ImportError:
        pass

    args = parser.parse_args(argv)
    setup_logging(level_for(args.verbose, args.quiet))

    if not args.command:
        parser.print_help()
        return 0

    try:
        if args.command == "analyze":
            return analyze.run(args)
        elif args.command == "stats":
            return stats.run(args)
        elif args.command == "generate":
            return generate.run(args)
        elif args.command == "serve":
            return serve.run(args)
        elif args.command == "config":
            return config_cmd.run(args)
        else:
            parser.print_help()
            return 1

    except KeyboardInterrupt:
        print("\nOperation cancelled.", file=sys.stderr)
        return 130
    except Exception as e:
        if args.verbose:
            raise
        logger.debug("Command %s failed", args.command, exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
