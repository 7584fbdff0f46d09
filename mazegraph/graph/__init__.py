"""Grid graph model, validation, and queries for perfect mazes."""

from mazegraph.graph.adjacency import to_adjacency
from mazegraph.graph.grid import GridGraph
from mazegraph.graph.paths import solve_path
from mazegraph.graph.types import DIRECTION_OFFSETS, Direction, Edge, Vertex
from mazegraph.graph.validation import is_spanning_tree, validate_maze
from mazegraph.graph.walls import WALL_BITS, open_sides, wall_mask, wall_masks

__all__ = [
    "DIRECTION_OFFSETS",
    "Direction",
    "Edge",
    "GridGraph",
    "Vertex",
    "WALL_BITS",
    "is_spanning_tree",
    "open_sides",
    "solve_path",
    "to_adjacency",
    "validate_maze",
    "wall_mask",
    "wall_masks",
]
