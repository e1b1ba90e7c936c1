"""
graphbench.config.loader - Find, parse and merge .graphbench.toml files.
"""

from __future__ import annotations

import copy
import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

import tomlkit
from tomlkit.exceptions import TOMLKitError

from graphbench.config.defaults import CONFIG_FILENAME, DEFAULT_CONFIG
from graphbench.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

ENV_PREFIX = "GRAPHBENCH_"


def parse_toml_document(content: str) -> tomlkit.TOMLDocument:
    """Parse TOML text into a style-preserving tomlkit document.

    Raises:
        ConfigurationError: If the text is not valid TOML.
    """
    try:
        return tomlkit.parse(content)
    except TOMLKitError as e:
        raise ConfigurationError(f"Invalid TOML: {e}") from e


def parse_toml(content: str) -> Dict[str, Any]:
    """Parse TOML text into plain Python dicts and lists."""
    return parse_toml_document(content).unwrap()


def find_config_file(start_dir: Optional[Path] = None) -> Optional[Path]:
    """Find .graphbench.toml in start_dir or any parent directory.

    Args:
        start_dir: Directory to start from (defaults to cwd).

    Returns:
        Path to the config file, or None if none exists.
    """
    current = Path(start_dir or Path.cwd()).resolve()
    for directory in (current, *current.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None


def merge_configs(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """Deep-merge override into a copy of base.

    Nested dicts merge key by key; any other value in override replaces
    the base value.
    """
    merged = copy.deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = merge_configs(merged[key], value)
        else:
            merged[key] = copy.deepcopy(value)
    return merged


def _try_parse_env_value(raw: str) -> Any:
    """Turn an environment variable string into a typed value.

    JSON arrays and objects, booleans, integers and floats are recognised.
    Anything else (including malformed JSON) stays a string.
    """
    stripped = raw.strip()
    if stripped.startswith(("[", "{")):
        try:
            return json.loads(stripped)
        except json.JSONDecodeError:
            return raw
    lowered = stripped.lower()
    if lowered == "true":
        return True
    if lowered == "false":
        return False
    try:
        return int(stripped)
    except ValueError:
        pass
    try:
        return float(stripped)
    except ValueError:
        return raw


def _leaf_paths(config: Dict[str, Any], prefix: tuple[str, ...] = ()) -> list[tuple[str, ...]]:
    paths: list[tuple[str, ...]] = []
    for key, value in config.items():
        path = prefix + (key,)
        if isinstance(value, dict) and value:
            paths.extend(_leaf_paths(value, path))
        else:
            paths.append(path)
    return paths


def _set_path(config: Dict[str, Any], path: tuple[str, ...], value: Any) -> None:
    node = config
    for key in path[:-1]:
        child = node.get(key)
        if not isinstance(child, dict):
            child = {}
            node[key] = child
        node = child
    node[path[-1]] = value


def _apply_env_overrides(config: Dict[str, Any]) -> Dict[str, Any]:
    """Apply GRAPHBENCH_<SECTION>_<KEY> environment overrides in place.

    Known keys (from the config and the defaults) are matched by their
    full dotted path, so GRAPHBENCH_ANALYSIS_COMMUNITIES_START_K sets
    analysis.communities.start_k. Unknown names split at the first
    underscore into section and key.
    """
    known = {
        ENV_PREFIX + "_".join(part.upper() for part in path): path
        for path in _leaf_paths(merge_configs(DEFAULT_CONFIG, config))
    }

    for name, raw in os.environ.items():
        if not name.startswith(ENV_PREFIX):
            continue
        path = known.get(name)
        if path is None:
            section, _, key = name[len(ENV_PREFIX) :].lower().partition("_")
            if not section or not key:
                continue
            path = (section, key)
        _set_path(config, path, _try_parse_env_value(raw))
        logger.debug("Config override from %s: %s", name, ".".join(path))

    return config


def load_config(
    config_path: Optional[Path] = None,
    start_dir: Optional[Path] = None,
) -> Dict[str, Any]:
    """Load configuration merged over the defaults.

    Args:
        config_path: Explicit config file. If None, search upward from
            start_dir for .graphbench.toml.
        start_dir: Where the search starts (defaults to cwd).

    Returns:
        Plain nested dict with every default key present.

    Raises:
        ConfigurationError: If an explicit file is missing, or any file
            found cannot be read or parsed.
    """
    if config_path is None:
        config_path = find_config_file(start_dir)
    elif not Path(config_path).is_file():
        raise ConfigurationError(f"Config file not found: {config_path}")

    user: Dict[str, Any] = {}
    if config_path is not None:
        try:
            content = Path(config_path).read_text(encoding="utf-8")
        except OSError as e:
            raise ConfigurationError(f"Cannot read {config_path}: {e}") from e
        user = parse_toml(content)
        logger.debug("Loaded config from %s", config_path)

    return _apply_env_overrides(merge_configs(DEFAULT_CONFIG, user))


def _positive_int(value: Any, name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value < 1:
        raise ConfigurationError(
            f"{name} must be a positive integer, got {value!r}",
            details={"key": name, "value": value},
        )
    return value


def get_community_params(config: Dict[str, Any]) -> Dict[str, int]:
    """Extract validated community detection parameters.

    Returns:
        Dict with "start_k" and "expansion_threshold", ready to pass as
        keyword arguments to find_communities().

    Raises:
        ConfigurationError: If a value is not a positive integer.
    """
    section = merge_configs(DEFAULT_CONFIG, config)["analysis"]["communities"]
    return {
        "start_k": _positive_int(section["start_k"], "analysis.communities.start_k"),
        "expansion_threshold": _positive_int(
            section["expansion_threshold"], "analysis.communities.expansion_threshold"
        ),
    }


def get_generator_params(config: Dict[str, Any]) -> Dict[str, Any]:
    """Extract layout parameters for the degree-sequence generator."""
    section = merge_configs(DEFAULT_CONFIG, config)["generator"]
    try:
        center = (float(section["center_x"]), float(section["center_y"]))
        radius = float(section["radius"])
    except (TypeError, ValueError) as e:
        raise ConfigurationError(f"Invalid generator settings: {e}") from e
    return {"center": center, "radius": radius}


__all__ = [
    "parse_toml_document",
    "parse_toml",
    "find_config_file",
    "merge_configs",
    "load_config",
    "get_community_params",
    "get_generator_params",
]
