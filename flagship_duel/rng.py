#!/usr/bin/env python3
"""
Random Source Module for the Flagship Duel simulator.

Every random draw in a duel (flagship placement and any strategy that
wants randomness) goes through a RandomSource so that tests can swap in
a scripted source and runs can be reproduced from a seed.

Key classes:
- RandomSource: Uniform integer generator backed by random.Random
- FixedRandomSource: Replays a scripted sequence of values (for tests)
"""

from __future__ import annotations

import random
from typing import Iterable, List, Optional


class RandomSource:
    """
    Uniform integer generator shared by the match engine and strategies.

    Usage:
        rng = RandomSource(seed=42)
        slot = rng.next_int(5)   # 0..4
        heads = rng.next_bool()
    """

    def __init__(self, seed: Optional[int] = None) -> None:
        """
        Initialize the random source.

        Args:
            seed: Random seed for reproducibility (None = system entropy).
        """
        self.seed = seed
        self.rng = random.Random(seed)

    def next_int(self, bound: int) -> int:
        """
        Draw a uniform integer in [0, bound).

        Args:
            bound: Exclusive upper bound, must be positive.

        Returns:
            Integer in range 0..bound-1.
        """
        if bound <= 0:
            raise ValueError(f"bound must be positive, got {bound}")
        return self.rng.randrange(bound)

    def next_bool(self) -> bool:
        """Draw a fair coin flip."""
        return self.next_int(2) == 1

    def reseed(self, seed: Optional[int]) -> None:
        """Restart the sequence from a new seed."""
        self.seed = seed
        self.rng.seed(seed)


class FixedRandomSource(RandomSource):
    """
    Scripted random source that cycles through preset values.

    Each value is reduced modulo the requested bound, so a source built
    from [0] always returns 0 and [3] returns 1 for next_int(2).
    """

    def __init__(self, values: Iterable[int]) -> None:
        super().__init__(seed=None)
        self.values: List[int] = list(values)
        if not self.values:
            raise ValueError("FixedRandomSource needs at least one value")
        self.calls = 0

    def next_int(self, bound: int) -> int:
        if bound <= 0:
            raise ValueError(f"bound must be positive, got {bound}")
        value = self.values[self.calls % len(self.values)]
        self.calls += 1
        return value % bound

    def reseed(self, seed: Optional[int]) -> None:
        self.calls = 0


# Process-wide source used when none is injected
DEFAULT_RANDOM_SOURCE = RandomSource()


def get_default_random_source() -> RandomSource:
    """Return the process-wide random source."""
    return DEFAULT_RANDOM_SOURCE
