"""
graphbench.config.defaults - Built-in configuration values.
"""

from typing import Any, Dict

CONFIG_FILENAME = ".graphbench.toml"

DEFAULT_CONFIG: Dict[str, Any] = {
    "analysis": {
        "communities": {
            # Smallest core order tried in each round
            "start_k": 2,
            # Edges into a fresh core needed to join it
            "expansion_threshold": 2,
        },
    },
    "server": {
        "host": "127.0.0.1",
        "port": 5050,
    },
    "generator": {
        "center_x": 400.0,
        "center_y": 300.0,
        "radius": 300.0,
    },
}
