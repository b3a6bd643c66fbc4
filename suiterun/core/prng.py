"""
Splittable pseudo-random generator capability.

The orchestration core only ever calls `step`; the algorithm behind it is
opaque and swappable.
"""

import random
from abc import ABC, abstractmethod
from typing import Tuple

MAX_INT = 2 ** 31 - 1


class SplittableGenerator(ABC):
    """
    Stateless generator interface.

    Implementations must guarantee:
    - step(seed, low, high) is a pure function of its arguments
    - low <= value < high
    """

    @abstractmethod
    def step(self, seed: int, low: int, high: int) -> Tuple[int, int]:
        """
        Draw one integer in [low, high) from `seed`.

        Returns:
            (value, next_seed)
        """
        ...


class StdlibGenerator(SplittableGenerator):
    """Generator backed by a fresh random.Random per step (no global state)."""

    def step(self, seed: int, low: int, high: int) -> Tuple[int, int]:
        rng = random.Random(seed)
        value = rng.randrange(low, high)
        return value, rng.getrandbits(32)
