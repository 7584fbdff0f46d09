"""Maze configuration dataclasses — all frozen and slotted for immutability."""

from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class GridConfig:
    """Grid dimensions for maze generation."""

    rows: int = 10
    cols: int = 10

    def __post_init__(self) -> None:
        if self.rows < 1:
            raise ValueError(f"rows must be >= 1, got {self.rows}")
        if self.cols < 1:
            raise ValueError(f"cols must be >= 1, got {self.cols}")


@dataclass(frozen=True, slots=True)
class MazeConfig:
    """Top-level maze configuration composing the grid and the seed.

    The seed drives the numpy Generator used by the recursive backtracker,
    so the same config always produces the same edge set.
    """

    grid: GridConfig = field(default_factory=GridConfig)
    seed: int = 42
    description: str = ""
    tags: tuple[str, ...] = ()
