"""Core primitives shared by every generation stage."""

from dungeon_gen.core.rng import LayoutRNG, random_seed

__all__ = [
    "LayoutRNG",
    "random_seed",
]
