"""Maze configuration system with frozen, hashable, serializable dataclasses."""

from mazegraph.config.maze import GridConfig, MazeConfig
from mazegraph.config.defaults import DEFAULT_CONFIG
from mazegraph.config.hashing import (
    config_hash,
    full_config_hash,
    grid_config_hash,
    maze_id,
)
from mazegraph.config.serialization import (
    config_from_dict,
    config_from_json,
    config_to_dict,
    config_to_json,
)

__all__ = [
    "GridConfig",
    "MazeConfig",
    "DEFAULT_CONFIG",
    "config_hash",
    "grid_config_hash",
    "full_config_hash",
    "maze_id",
    "config_to_json",
    "config_from_json",
    "config_to_dict",
    "config_from_dict",
]
