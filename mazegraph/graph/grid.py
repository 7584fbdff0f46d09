"""Grid graph: R x C vertices in row-major order with cardinal adjacency.

Vertices are stored in one owned list and addressed by index
(row = index // cols, col = index % cols). Edges hold destination indices,
so a graph can be duplicated cheaply with copy().
"""

import logging
from collections.abc import Iterator

from mazegraph.graph.types import DIRECTION_OFFSETS, Direction, Edge, Vertex

log = logging.getLogger(__name__)


class GridGraph:
    """Undirected grid graph built from paired directed edges."""

    def __init__(self, rows: int, cols: int) -> None:
        self.rows = 0
        self.cols = 0
        self._vertices: list[Vertex] = []
        self.initialize(rows, cols)

    def initialize(self, rows: int, cols: int) -> None:
        """(Re)create rows * cols unvisited vertices with no edges.

        Raises:
            ValueError: If rows < 1 or cols < 1.
        """
        if rows < 1 or cols < 1:
            raise ValueError(
                f"Grid dimensions must be positive, got rows={rows}, cols={cols}"
            )
        self.rows = rows
        self.cols = cols
        self._vertices = [Vertex(i) for i in range(rows * cols)]
        log.debug("Initialized %dx%d grid (%d vertices)", rows, cols, self.size)

    @property
    def size(self) -> int:
        return self.rows * self.cols

    def __len__(self) -> int:
        return self.size

    @property
    def vertices(self) -> Iterator[Vertex]:
        return iter(self._vertices)

    @property
    def exit_index(self) -> int:
        """Vertex 0, the conventional exit cell."""
        return 0

    @property
    def entry_index(self) -> int:
        """Last vertex, the conventional entry cell."""
        return self.size - 1

    def vertex(self, index: int) -> Vertex:
        """Return the vertex at `index`, failing fast when out of range."""
        if not 0 <= index < self.size:
            raise IndexError(
                f"Vertex index {index} out of range for {self.size} vertices"
            )
        return self._vertices[index]

    def position(self, index: int) -> tuple[int, int]:
        """Map a vertex index to its (row, col)."""
        self.vertex(index)
        return divmod(index, self.cols)

    def index_of(self, row: int, col: int) -> int:
        """Map (row, col) to a vertex index."""
        if not (0 <= row < self.rows and 0 <= col < self.cols):
            raise IndexError(
                f"Cell ({row}, {col}) outside {self.rows}x{self.cols} grid"
            )
        return row * self.cols + col

    def neighbor_in_direction(
        self, vertex: Vertex | int, direction: Direction
    ) -> Vertex | None:
        """Return the vertex one step away in `direction`, or None at the boundary."""
        index = vertex.index if isinstance(vertex, Vertex) else vertex
        row, col = self.position(index)
        d_row, d_col = DIRECTION_OFFSETS[direction]
        row += d_row
        col += d_col
        if row < 0 or row >= self.rows or col < 0 or col >= self.cols:
            return None
        return self._vertices[row * self.cols + col]

    def add_edge(self, a: Vertex | int, b: Vertex | int, weight: float = 1.0) -> None:
        """Add the directed pair a -> b and b -> a, both carrying `weight`.

        No uniqueness check: the backtracker only ever connects a visited
        vertex to an unvisited one, so parallel edges cannot arise from it.
        """
        va = self.vertex(a.index if isinstance(a, Vertex) else a)
        vb = self.vertex(b.index if isinstance(b, Vertex) else b)
        va.edges.append(Edge(vb.index, weight))
        vb.edges.append(Edge(va.index, weight))

    def unvisited_adjacent(self, vertex: Vertex | int) -> list[Vertex]:
        """Grid-adjacent unvisited neighbors, in North, South, East, West order."""
        candidates = (self.neighbor_in_direction(vertex, d) for d in Direction)
        return [v for v in candidates if v is not None and not v.visited]

    def unvisited_connected(self, vertex: Vertex | int) -> list[Vertex]:
        """Unvisited destinations of the vertex's existing edges."""
        v = self.vertex(vertex.index if isinstance(vertex, Vertex) else vertex)
        return [
            self._vertices[e.destination]
            for e in v.edges
            if not self._vertices[e.destination].visited
        ]

    def edges_of(self, index: int) -> list[Edge]:
        """Edges incident to the vertex at `index`."""
        return list(self.vertex(index).edges)

    def edge_count(self) -> int:
        """Number of undirected edges (each reciprocal pair counted once)."""
        return sum(len(v.edges) for v in self._vertices) // 2

    def undirected_edges(self) -> list[tuple[int, int]]:
        """Sorted list of (u, v) pairs with u < v, one per undirected edge."""
        return sorted(
            (v.index, e.destination)
            for v in self._vertices
            for e in v.edges
            if v.index < e.destination
        )

    def reset_visited(self) -> None:
        for v in self._vertices:
            v.visited = False

    def copy(self) -> "GridGraph":
        """Independent duplicate with the same vertices, flags, and edges."""
        dup = GridGraph(self.rows, self.cols)
        dup._vertices = [
            Vertex(v.index, v.visited, list(v.edges)) for v in self._vertices
        ]
        return dup

    def __repr__(self) -> str:
        return (
            f"GridGraph(rows={self.rows}, cols={self.cols}, "
            f"edges={self.edge_count()})"
        )
