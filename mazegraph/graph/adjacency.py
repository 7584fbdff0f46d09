"""Sparse adjacency export for handing a maze to scipy.sparse.csgraph."""

import numpy as np
import scipy.sparse

from mazegraph.graph.grid import GridGraph


def to_adjacency(graph: GridGraph) -> scipy.sparse.csr_matrix:
    """Build the (n x n) adjacency matrix of the graph's directed edges.

    Since every edge is stored as a reciprocal pair the result is symmetric.
    Entries hold edge weights; parallel edges are summed by the COO -> CSR
    conversion.

    Args:
        graph: Grid graph (typically a generated maze).

    Returns:
        Sparse CSR matrix of shape (graph.size, graph.size).
    """
    n = graph.size
    rows: list[int] = []
    cols: list[int] = []
    weights: list[float] = []
    for v in graph.vertices:
        for e in v.edges:
            rows.append(v.index)
            cols.append(e.destination)
            weights.append(e.weight)

    return scipy.sparse.coo_matrix(
        (
            np.asarray(weights, dtype=np.float64),
            (np.asarray(rows, dtype=np.int64), np.asarray(cols, dtype=np.int64)),
        ),
        shape=(n, n),
    ).tocsr()
