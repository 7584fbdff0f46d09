"""Reproducibility infrastructure: seed management and code provenance tracking."""

from mazegraph.reproducibility.seed import create_rng, verify_seed_determinism
from mazegraph.reproducibility.git_hash import get_git_hash

__all__ = [
    "create_rng",
    "verify_seed_determinism",
    "get_git_hash",
]
