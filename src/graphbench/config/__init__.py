"""
graphbench.config - Configuration loading and defaults
"""

from graphbench.config.defaults import CONFIG_FILENAME, DEFAULT_CONFIG
from graphbench.config.loader import (
    find_config_file,
    get_community_params,
    get_generator_params,
    load_config,
    merge_configs,
    parse_toml,
    parse_toml_document,
)

__all__ = [
    "CONFIG_FILENAME",
    "DEFAULT_CONFIG",
    "load_config",
    "find_config_file",
    "merge_configs",
    "parse_toml",
    "parse_toml_document",
    "get_community_params",
    "get_generator_params",
]
