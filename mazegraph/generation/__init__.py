"""Maze generation with the recursive-backtracker algorithm."""

from mazegraph.generation.backtracker import (
    MazeGenerationError,
    generate_maze,
    recursive_backtracker,
)

__all__ = [
    "MazeGenerationError",
    "generate_maze",
    "recursive_backtracker",
]
