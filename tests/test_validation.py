"""Tests for spanning-tree validation and sparse adjacency export."""

import numpy as np
import pytest
from scipy.sparse.csgraph import connected_components

from mazegraph.generation import recursive_backtracker
from mazegraph.graph import (
    Edge,
    GridGraph,
    is_spanning_tree,
    to_adjacency,
    validate_maze,
)


def _path_2x2() -> GridGraph:
    """Hand-built valid maze: 0-1, 1-3, 3-2."""
    g = GridGraph(2, 2)
    g.add_edge(0, 1)
    g.add_edge(1, 3)
    g.add_edge(3, 2)
    return g


class TestToAdjacency:
    """CSR export of the edge set."""

    def test_shape_and_symmetry(self) -> None:
        adj = to_adjacency(_path_2x2())
        assert adj.shape == (4, 4)
        assert (adj != adj.T).nnz == 0

    def test_weights(self) -> None:
        g = GridGraph(1, 2)
        g.add_edge(0, 1, 3.0)
        dense = to_adjacency(g).toarray()
        np.testing.assert_array_equal(dense, [[0.0, 3.0], [3.0, 0.0]])

    def test_empty_graph(self) -> None:
        adj = to_adjacency(GridGraph(1, 1))
        assert adj.shape == (1, 1)
        assert adj.nnz == 0

    def test_generated_maze_single_component(self) -> None:
        maze = recursive_backtracker(GridGraph(9, 9), np.random.default_rng(3))
        n_components, _ = connected_components(to_adjacency(maze), directed=False)
        assert n_components == 1


class TestValidateMaze:
    """validate_maze accepts perfect mazes and reports each defect."""

    def test_valid_hand_built(self) -> None:
        assert validate_maze(_path_2x2()) == []
        assert is_spanning_tree(_path_2x2())

    def test_single_cell_valid(self) -> None:
        assert validate_maze(GridGraph(1, 1)) == []

    @pytest.mark.parametrize("seed", [0, 1, 2])
    def test_generated_valid(self, seed: int) -> None:
        maze = recursive_backtracker(GridGraph(6, 5), np.random.default_rng(seed))
        assert validate_maze(maze) == []

    def test_cycle_detected(self) -> None:
        g = _path_2x2()
        g.add_edge(0, 2)
        errors = validate_maze(g)
        assert any("Edge count 4 != 3" in e for e in errors)
        assert not is_spanning_tree(g)

    def test_disconnected_detected(self) -> None:
        g = GridGraph(2, 2)
        g.add_edge(0, 1)
        g.add_edge(2, 3)
        errors = validate_maze(g)
        assert any("Not connected: 2 components" in e for e in errors)

    def test_diagonal_edge_detected(self) -> None:
        g = GridGraph(2, 2)
        g.add_edge(0, 1)
        g.add_edge(0, 3)
        g.add_edge(0, 2)
        errors = validate_maze(g)
        assert any("non-adjacent" in e for e in errors)

    def test_row_wrap_edge_detected(self) -> None:
        """Index-consecutive cells on different rows are not adjacent."""
        g = GridGraph(2, 2)
        g.add_edge(0, 2)
        g.add_edge(2, 3)
        g.add_edge(1, 2)
        errors = validate_maze(g)
        assert any("non-adjacent" in e for e in errors)

    def test_parallel_edges_detected(self) -> None:
        g = GridGraph(1, 3)
        g.add_edge(0, 1)
        g.add_edge(0, 1)
        errors = validate_maze(g)
        assert any("Parallel edges" in e for e in errors)

    def test_missing_reciprocal_detected(self) -> None:
        g = GridGraph(1, 2)
        g.vertex(0).edges.append(Edge(1))
        errors = validate_maze(g)
        assert any("reciprocal" in e for e in errors)

    def test_out_of_range_destination_reported(self) -> None:
        g = GridGraph(1, 2)
        g.vertex(0).edges.append(Edge(5))
        errors = validate_maze(g)
        assert any("non-adjacent" in e for e in errors)
        assert any("Connectivity not checked" in e for e in errors)
        assert not is_spanning_tree(g)

    def test_negative_destination_reported(self) -> None:
        g = GridGraph(2, 2)
        g.vertex(1).edges.append(Edge(-1))
        errors = validate_maze(g)
        assert any("Connectivity not checked" in e for e in errors)

    def test_visited_flag_leak_detected(self) -> None:
        g = _path_2x2()
        g.vertex(2).visited = True
        errors = validate_maze(g)
        assert any("visited flag" in e for e in errors)
