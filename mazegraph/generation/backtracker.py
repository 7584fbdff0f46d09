"""Recursive-backtracker maze generation over a grid graph.

Randomized depth-first traversal: walk from the top of the stack to a
uniformly chosen unvisited neighbor until stuck, then pop back to the most
recent cell that still has one. Each newly visited cell contributes exactly
one edge, so the result is a spanning tree with rows*cols - 1 edges.
"""

import logging

import numpy as np

from mazegraph.config.maze import MazeConfig
from mazegraph.graph.grid import GridGraph
from mazegraph.graph.types import Vertex
from mazegraph.graph.validation import validate_maze
from mazegraph.reproducibility.seed import create_rng

log = logging.getLogger(__name__)


class MazeGenerationError(Exception):
    """Raised when a generated maze fails spanning-tree validation."""


def recursive_backtracker(
    graph: GridGraph, rng: np.random.Generator, weight: float = 1.0
) -> GridGraph:
    """Carve a perfect maze into `graph` in place.

    Algorithm:
    1. Re-initialize the graph (fresh vertices, no edges)
    2. Push vertex 0 and mark it visited
    3. Until the stack is empty:
       a. Drunken walk: while the top has unvisited neighbors, pick one
          uniformly at random, mark it, connect it to the top, push it
       b. Backtrack: pop until the top has an unvisited neighbor again
    4. Reset every visited flag

    Args:
        graph: Grid graph to (re)generate. Its dimensions are kept.
        rng: numpy random Generator; a fixed seed gives a fixed maze.
        weight: Weight carried by every carved edge.

    Returns:
        The same graph, for chaining.
    """
    graph.initialize(graph.rows, graph.cols)

    start = graph.vertex(0)
    start.visited = True
    stack: list[Vertex] = [start]
    n_visited = 1
    n_backtracks = 0

    while stack:
        # Drunken walk
        while True:
            top = stack[-1]
            candidates = graph.unvisited_adjacent(top)
            if not candidates:
                break
            choice = candidates[int(rng.integers(0, len(candidates)))]
            choice.visited = True
            graph.add_edge(top, choice, weight)
            stack.append(choice)
            n_visited += 1

        # Backtrack
        while stack:
            if graph.unvisited_adjacent(stack[-1]):
                break
            stack.pop()
            n_backtracks += 1

    graph.reset_visited()

    log.debug(
        "Backtracker finished: visited=%d/%d, backtracks=%d",
        n_visited,
        graph.size,
        n_backtracks,
    )
    return graph


def generate_maze(
    config: MazeConfig, rng: np.random.Generator | None = None
) -> GridGraph:
    """Generate and validate a perfect maze for `config`.

    Args:
        config: Maze configuration (grid dimensions and seed).
        rng: Optional random Generator. Defaults to
            create_rng(config.seed).

    Returns:
        GridGraph whose edges form a spanning tree of the grid.

    Raises:
        MazeGenerationError: If the result is not a valid perfect maze.
    """
    rows, cols = config.grid.rows, config.grid.cols
    if rng is None:
        rng = create_rng(config.seed)

    graph = recursive_backtracker(GridGraph(rows, cols), rng)

    errors = validate_maze(graph)
    if errors:
        raise MazeGenerationError(
            f"Generated {rows}x{cols} maze (seed={config.seed}) is invalid: "
            f"{'; '.join(errors)}"
        )

    log.info(
        "Maze generated (rows=%d, cols=%d, seed=%d, edges=%d)",
        rows,
        cols,
        config.seed,
        graph.edge_count(),
    )
    return graph
