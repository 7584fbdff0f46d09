"""Graph primitives for the grid maze: directions, vertices, and edges."""

from dataclasses import dataclass, field
from enum import StrEnum


class Direction(StrEnum):
    """Cardinal step directions on the grid.

    NORTH: row - 1
    SOUTH: row + 1
    EAST:  col + 1
    WEST:  col - 1

    Member order is the canonical neighbor enumeration order.
    """

    NORTH = "north"
    SOUTH = "south"
    EAST = "east"
    WEST = "west"


# (d_row, d_col) per direction
DIRECTION_OFFSETS: dict[Direction, tuple[int, int]] = {
    Direction.NORTH: (-1, 0),
    Direction.SOUTH: (1, 0),
    Direction.EAST: (0, 1),
    Direction.WEST: (0, -1),
}


@dataclass(frozen=True, slots=True)
class Edge:
    """Directed half of an undirected passage.

    Stores the destination as a vertex index rather than a reference, so
    vertices live in a single arena owned by the graph.
    """

    destination: int
    weight: float = 1.0


@dataclass(slots=True)
class Vertex:
    """A single grid cell.

    `visited` is a transient traversal marker; the generator resets it
    before returning.
    """

    index: int
    visited: bool = False
    edges: list[Edge] = field(default_factory=list)
