"""Per-cell passage and wall queries for the presentation layer.

A side of a cell is open when the cell has an edge to the neighbor on that
side and walled otherwise. Wall masks use the 4-bit encoding
N=1, E=2, S=4, W=8 (bit set = wall present), so a fully closed cell is 15.
"""

import numpy as np

from mazegraph.graph.grid import GridGraph
from mazegraph.graph.types import Direction

WALL_BITS: dict[Direction, int] = {
    Direction.NORTH: 1,
    Direction.EAST: 2,
    Direction.SOUTH: 4,
    Direction.WEST: 8,
}


def open_sides(graph: GridGraph, index: int) -> dict[Direction, bool]:
    """Which of the four sides of cell `index` have a passage.

    Destinations are compared to index -/+ cols (north/south) and
    index +/- 1 within the same row (east/west).
    """
    sides = {d: False for d in Direction}
    row = index // graph.cols
    for edge in graph.edges_of(index):
        dest = edge.destination
        if dest == index - graph.cols:
            sides[Direction.NORTH] = True
        elif dest == index + graph.cols:
            sides[Direction.SOUTH] = True
        elif dest == index + 1 and dest // graph.cols == row:
            sides[Direction.EAST] = True
        elif dest == index - 1 and dest // graph.cols == row:
            sides[Direction.WEST] = True
    return sides


def wall_mask(graph: GridGraph, index: int) -> int:
    """4-bit wall mask of cell `index`."""
    return sum(
        WALL_BITS[d] for d, is_open in open_sides(graph, index).items() if not is_open
    )


def wall_masks(graph: GridGraph) -> np.ndarray:
    """Wall masks for every cell as a uint8 array of shape (rows, cols)."""
    masks = np.array(
        [wall_mask(graph, i) for i in range(graph.size)], dtype=np.uint8
    )
    return masks.reshape(graph.rows, graph.cols)
