#!/usr/bin/env python3
"""Entry point for generating a perfect maze from a config file.

Loads a MazeConfig JSON, generates the maze with the recursive backtracker
and prints its undirected edge set to stdout as a JSON list of [u, v] pairs.
Logging goes to stderr.

Usage:
    python run_maze.py --config maze.json
    python run_maze.py --config maze.json --seed 7
    python run_maze.py --config maze.json --dry-run
    python run_maze.py --config maze.json --verbose
"""

import argparse
import json
import logging
import sys
import time
from contextlib import contextmanager
from dataclasses import replace
from pathlib import Path
from typing import Generator

from mazegraph.config import MazeConfig, config_from_json, grid_config_hash, maze_id

log = logging.getLogger(__name__)


@contextmanager
def stage_timer(name: str) -> Generator[None, None, None]:
    """Context manager that logs stage start and elapsed time."""
    log.info("Starting: %s", name)
    t0 = time.monotonic()
    yield
    log.info("Completed: %s in %.3fs", name, time.monotonic() - t0)


def run_pipeline(config: MazeConfig) -> list[tuple[int, int]]:
    """Generate the maze and return the undirected edge set.

    Args:
        config: Maze configuration.

    Returns:
        Sorted (u, v) pairs with u < v.
    """
    # Lazy imports to keep --dry-run fast
    from mazegraph.generation import generate_maze
    from mazegraph.reproducibility import get_git_hash

    log.info("Maze ID: %s", maze_id(config))
    log.info("Git hash: %s", get_git_hash(Path(__file__).parent))

    with stage_timer("Maze Generation"):
        graph = generate_maze(config)

    return graph.undirected_edges()


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Generate a perfect maze with the recursive backtracker"
    )
    parser.add_argument(
        "--config",
        type=str,
        required=True,
        help="Path to maze config JSON file",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Override the seed from the config file",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Validate the config and exit without generating",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable DEBUG-level logging",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    config_path = Path(args.config)
    if not config_path.exists():
        print(f"Error: config file not found: {config_path}", file=sys.stderr)
        return 1

    config = config_from_json(config_path.read_text())
    if args.seed is not None:
        config = replace(config, seed=args.seed)

    log.info(
        "Grid: rows=%d, cols=%d (grid hash %s), seed=%d",
        config.grid.rows,
        config.grid.cols,
        grid_config_hash(config),
        config.seed,
    )

    if args.dry_run:
        log.info("[dry-run] Config loaded successfully. Exiting.")
        return 0

    try:
        edges = run_pipeline(config)
    except Exception:
        log.exception("Maze generation failed")
        return 1

    json.dump([list(edge) for edge in edges], sys.stdout)
    sys.stdout.write("\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
