"""Seed management for reproducible maze generation.

Every random draw in maze generation comes from one explicit
np.random.Generator built by create_rng(seed). No global RNG state is read,
so a config seed alone pins down the maze.
"""

import numpy as np


def create_rng(seed: int) -> np.random.Generator:
    """Build the random Generator used for a maze run.

    Args:
        seed: Master seed value (e.g., config.seed).

    Returns:
        PCG64-backed numpy Generator.
    """
    return np.random.default_rng(seed)


def verify_seed_determinism(seed: int) -> bool:
    """Verify that two Generators from the same seed produce identical draws.

    Draws 10 bounded integers (the call the backtracker makes) from each.

    Args:
        seed: Seed value to test.

    Returns:
        True if both sequences match.
    """
    a = create_rng(seed).integers(0, 4, size=10).tolist()
    b = create_rng(seed).integers(0, 4, size=10).tolist()
    return a == b
