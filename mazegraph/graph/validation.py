"""Spanning-tree validation for generated mazes.

A perfect maze over an R x C grid is a spanning tree: every edge joins two
grid-adjacent cells, each undirected edge is stored as a reciprocal pair,
there are exactly R*C - 1 undirected edges, and the graph is connected.
Connected with V - 1 edges implies acyclic.
"""

import logging
from collections import Counter

from scipy.sparse.csgraph import connected_components

from mazegraph.graph.adjacency import to_adjacency
from mazegraph.graph.grid import GridGraph

log = logging.getLogger(__name__)


def _is_grid_adjacent(graph: GridGraph, u: int, v: int) -> bool:
    if not (0 <= u < graph.size and 0 <= v < graph.size):
        return False
    ur, uc = divmod(u, graph.cols)
    vr, vc = divmod(v, graph.cols)
    return abs(ur - vr) + abs(uc - vc) == 1


def validate_maze(graph: GridGraph) -> list[str]:
    """Validate a generated maze against the perfect-maze constraints.

    Checks (cheapest first):
    1. Every edge is paired with a reciprocal of equal weight
    2. Every edge joins grid-adjacent cells (no diagonals, in bounds)
    3. No parallel edges
    4. Undirected edge count == R*C - 1
    5. Connectivity (single component)
    6. All visited flags reset

    Args:
        graph: Grid graph to check.

    Returns:
        List of error strings (empty = valid maze).
    """
    errors: list[str] = []

    directed = Counter(
        (v.index, e.destination, e.weight) for v in graph.vertices for e in v.edges
    )

    # 1. Reciprocal pairs
    unpaired = [
        key for key, count in directed.items()
        if directed.get((key[1], key[0], key[2]), 0) != count
    ]
    if unpaired:
        u, v, w = unpaired[0]
        errors.append(
            f"{len(unpaired)} directed edge(s) without a matching reciprocal, "
            f"e.g. {u}->{v} (weight={w})"
        )

    # 2. Grid adjacency
    bad = sorted({(u, v) for u, v, _ in directed if not _is_grid_adjacent(graph, u, v)})
    if bad:
        errors.append(
            f"{len(bad)} edge(s) between non-adjacent cells, e.g. {bad[0][0]}->{bad[0][1]}"
        )

    # 3. Parallel edges
    pair_counts = Counter((u, v) for u, v, _ in directed.elements())
    parallel = sorted(pair for pair, count in pair_counts.items() if count > 1)
    if parallel:
        errors.append(
            f"Parallel edges on {len(parallel)} directed pair(s), "
            f"e.g. {parallel[0][0]}->{parallel[0][1]}"
        )

    # 4. Edge count
    expected = graph.size - 1
    actual = graph.edge_count()
    if actual != expected:
        errors.append(
            f"Edge count {actual} != {expected} (rows*cols - 1)"
        )

    # 5. Connectivity (needs every destination to be a valid index)
    out_of_range = any(not 0 <= v < graph.size for _, v, _ in directed)
    n_components = -1
    if out_of_range:
        errors.append("Connectivity not checked: edges point outside the grid")
    else:
        n_components, _ = connected_components(to_adjacency(graph), directed=False)
        if n_components != 1:
            errors.append(f"Not connected: {n_components} components found")

    # 6. Visited flags
    still_visited = sum(1 for v in graph.vertices if v.visited)
    if still_visited:
        errors.append(f"{still_visited} vertex visited flag(s) not reset")

    log.debug(
        "Validated %dx%d maze: edges=%d, components=%d, errors=%d",
        graph.rows,
        graph.cols,
        actual,
        n_components,
        len(errors),
    )

    return errors


def is_spanning_tree(graph: GridGraph) -> bool:
    """True if the graph passes every check in validate_maze."""
    return not validate_maze(graph)
