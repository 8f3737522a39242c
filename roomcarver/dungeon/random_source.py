"""Injected randomness for dungeon generation.

Every random draw made while building a dungeon goes through a RandomSource so
a fixed seed (or a scripted subclass in tests) reproduces the exact layout.
"""

from __future__ import annotations

import random
from typing import Optional


class RandomSource:
    """Seedable wrapper around :class:`random.Random`.

    Subclasses may override :meth:`randint` and :meth:`coin`; nothing else is
    called by the generator.
    """

    def __init__(self, seed: Optional[int] = None):
        if seed is None:
            seed = random.randint(0, 2**31 - 1)
        self.seed = seed
        # Local RNG so external random usage does not affect generation
        self._rng = random.Random(seed)

    def randint(self, lo: int, hi: int) -> int:
        """Uniform integer in ``[lo, hi]`` (both inclusive)."""
        return self._rng.randint(lo, hi)

    def coin(self) -> bool:
        return self._rng.random() < 0.5


__all__ = ["RandomSource"]
