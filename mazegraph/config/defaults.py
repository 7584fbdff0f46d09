"""Default configuration — single source of truth for default maze parameters."""

from mazegraph.config.maze import MazeConfig

# All-default values: rows=10, cols=10, seed=42.
DEFAULT_CONFIG = MazeConfig()
