"""
Random sources for fruit placement.

The simulation never touches a global RNG; it asks whatever RandomSource
it is handed for integers, which keeps tests deterministic.
"""
from abc import ABC, abstractmethod
from typing import Optional

import numpy as np


class RandomSource(ABC):
    """Uniform integer generator consumed by the simulation."""

    @abstractmethod
    def uniform_int(self, low: int, high: int) -> int:
        """
        Draw an integer uniformly from [low, high).

        Args:
            low: Inclusive lower bound
            high: Exclusive upper bound, must be greater than low
        """
        pass


class NumpyRandom(RandomSource):
    """
    RandomSource backed by a numpy Generator.

    Seed it once per process; reseeding per call would repeat draws.
    """

    def __init__(self, seed: Optional[int] = None):
        self._generator = np.random.default_rng(seed)

    def uniform_int(self, low: int, high: int) -> int:
        if high <= low:
            raise ValueError(f"Empty range [{low}, {high})")
        return int(self._generator.integers(low, high))
