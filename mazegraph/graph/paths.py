"""Path solving between maze cells via scipy breadth-first search."""

import logging

from scipy.sparse.csgraph import breadth_first_order

from mazegraph.graph.adjacency import to_adjacency
from mazegraph.graph.grid import GridGraph

log = logging.getLogger(__name__)

# scipy marks "no predecessor" with this sentinel
_NO_PREDECESSOR = -9999


def solve_path(graph: GridGraph, start: int, end: int) -> list[int]:
    """Return the vertex indices on the path from `start` to `end`.

    In a perfect maze the path is unique; on a general graph this is the
    BFS (fewest-edges) path. Both endpoints are included.

    Args:
        graph: Grid graph, typically a generated maze.
        start: Source vertex index.
        end: Destination vertex index.

    Returns:
        List of vertex indices from start to end.

    Raises:
        IndexError: If either index is out of range.
        ValueError: If end is not reachable from start.
    """
    graph.vertex(start)
    graph.vertex(end)
    if start == end:
        return [start]

    _, predecessors = breadth_first_order(
        to_adjacency(graph), start, directed=False, return_predecessors=True
    )
    if predecessors[end] == _NO_PREDECESSOR:
        raise ValueError(f"No path from vertex {start} to vertex {end}")

    path = [end]
    current = end
    while current != start:
        current = int(predecessors[current])
        path.append(current)
    path.reverse()

    log.debug("Path %d -> %d: %d cells", start, end, len(path))
    return path
