"""Reproducibility infrastructure: seed management and code provenance tracking."""

from apsp.reproducibility.git_hash import get_git_hash
from apsp.reproducibility.seed import set_seed, verify_seed_determinism

__all__ = [
    "get_git_hash",
    "set_seed",
    "verify_seed_determinism",
]
