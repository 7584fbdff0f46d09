"""Deterministic config hashing using SHA-256 over sorted JSON."""

import hashlib
import json
from dataclasses import asdict
from typing import Any

from mazegraph.config.maze import MazeConfig


def _remove_nested(d: dict[str, Any], field_path: str) -> None:
    """Remove a dotted-path key from a nested dict.

    Example: _remove_nested(d, "grid.rows") removes d["grid"]["rows"].
    Single-level paths like "seed" remove d["seed"].
    """
    parts = field_path.split(".")
    current = d
    for part in parts[:-1]:
        if part not in current or not isinstance(current[part], dict):
            return
        current = current[part]
    current.pop(parts[-1], None)


def config_hash(config: Any, exclude_fields: list[str] | None = None) -> str:
    """Deterministic SHA-256 hash of a config object.

    Args:
        config: Any dataclass instance (or sub-config).
        exclude_fields: Optional list of dotted field paths to exclude.

    Returns:
        First 16 hex characters of the SHA-256 hash.
    """
    d = asdict(config)
    if exclude_fields:
        for field_path in exclude_fields:
            _remove_nested(d, field_path)
    serialized = json.dumps(
        d,
        sort_keys=True,
        ensure_ascii=True,
        separators=(",", ":"),
        indent=None,
    )
    return hashlib.sha256(serialized.encode("utf-8")).hexdigest()[:16]


# Top-level fields that do not change the grid a config describes
NON_GRID_FIELDS: tuple[str, ...] = ("seed", "description", "tags")


def grid_config_hash(config: MazeConfig) -> str:
    """Hash of the grid dimensions only (excludes seed and labels).

    Two configs differing only in seed share a grid hash: same grid,
    different spanning tree.
    """
    return config_hash(config, exclude_fields=list(NON_GRID_FIELDS))


def full_config_hash(config: MazeConfig) -> str:
    """Hash for full maze identity — includes everything including seed."""
    return config_hash(config)


def maze_id(config: MazeConfig) -> str:
    """Scannable maze identifier.

    Format: r{rows}_c{cols}_s{seed}_{hash8}
    Example: r10_c10_s42_1f3a9c0e
    """
    return (
        f"r{config.grid.rows}"
        f"_c{config.grid.cols}"
        f"_s{config.seed}"
        f"_{full_config_hash(config)[:8]}"
    )
