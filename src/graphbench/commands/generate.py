"""
graphbench.commands.generate - Generate a graph from a degree sequence.
"""

import argparse
import json
import sys
from pathlib import Path
from typing import Dict

from graphbench.commands._common import load_command_config
from graphbench.config import get_generator_params
from graphbench.exceptions import ConfigurationError
from graphbench.graph import save_graph
from graphbench.graph.generator import generate_from_degree_sequence


def parse_degree_spec(spec: str) -> Dict[str, int]:
    """Parse "V0=3,V1=2,V2=1" into an ordered degree mapping.

    Raises:
        ValueError: On a malformed item, a non-integer degree, or a
            repeated vertex id.
    """
    degrees: Dict[str, int] = {}
    for item in spec.split(","):
        item = item.strip()
        if not item:
            continue
        vertex_id, sep, value = item.partition("=")
        vertex_id = vertex_id.strip()
        if not sep or not vertex_id:
            raise ValueError(f"Expected ID=DEGREE, got '{item}'")
        if vertex_id in degrees:
            raise ValueError(f"Vertex '{vertex_id}' listed twice")
        try:
            degrees[vertex_id] = int(value)
        except ValueError:
            raise ValueError(f"Degree of '{vertex_id}' must be an integer, got '{value}'") from None
    return degrees


def load_degree_file(path: Path) -> Dict[str, int]:
    """Read a JSON object mapping vertex id to degree.

    Raises:
        ValueError: If the file is not such an object.
    """
    try:
        data = json.loads(Path(path).read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        raise ValueError(f"Cannot read degree file {path}: {e}") from e
    if not isinstance(data, dict):
        raise ValueError(f"Degree file {path} must contain a JSON object")
    degrees: Dict[str, int] = {}
    for vertex_id, value in data.items():
        if isinstance(value, bool) or not isinstance(value, int):
            raise ValueError(f"Degree of '{vertex_id}' must be an integer, got {value!r}")
        degrees[str(vertex_id)] = value
    return degrees


def run(args: argparse.Namespace) -> int:
    """Run the generate command."""
    config = load_command_config(args)
    if config is None:
        return 1

    try:
        if getattr(args, "degrees_file", None):
            degrees = load_degree_file(args.degrees_file)
        elif getattr(args, "degrees", None):
            degrees = parse_degree_spec(args.degrees)
        else:
            print("Error: provide --degrees or --degrees-file", file=sys.stderr)
            return 1
        layout = get_generator_params(config)
        graph = generate_from_degree_sequence(degrees, **layout)
    except (ValueError, ConfigurationError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    written = save_graph(graph, args.output)
    if not getattr(args, "quiet", False):
        print(f"Generated graph saved to {written}")
        print(f"Vertices: {graph.vertex_count()}")
        print(f"Edges: {graph.edge_count()}")
    return 0
