"""Seed-based attribute selection."""

from .selector import (
    SALT,
    seed_digest,
    mix,
    pick,
    compatible,
    derive_from_seed,
)

__all__ = [
    "SALT",
    "seed_digest",
    "mix",
    "pick",
    "compatible",
    "derive_from_seed",
]
