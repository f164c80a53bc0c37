#!/usr/bin/env python3
"""
Random sources for Monte Carlo sampling.

The sampler never touches global random state. It receives a RandomSource
at construction; production code seeds a NumpyRandomSource once, tests pass
a seeded or scripted source.
"""

import logging
import time
from abc import ABC, abstractmethod
from typing import Iterable, Optional

import numpy as np


class RandomSource(ABC):
    """
    Abstract base class for random number sources.

    Defines the two draws the sampler needs.
    """

    @abstractmethod
    def next_int(self, bound: int) -> int:
        """
        Draw an integer uniformly from [0, bound).

        Parameters:
        -----------
        bound : int
            Exclusive upper bound (must be positive)

        Returns:
        --------
        int: Random integer in [0, bound)
        """
        pass

    @abstractmethod
    def next_uniform(self) -> float:
        """
        Draw a float uniformly from [0, 1).

        Returns:
        --------
        float: Random value in [0, 1)
        """
        pass


class NumpyRandomSource(RandomSource):
    """
    RandomSource backed by numpy's Generator.

    Parameters:
    -----------
    seed : int, optional
        Random seed for reproducibility. If None, a clock-based seed is taken
        once at construction.
    """

    def __init__(self, seed: Optional[int] = None):
        if seed is None:
            seed = time.time_ns() % (2 ** 32)
            logging.info(f"Random source seeded from clock: {seed}")
        self.seed = seed
        self._rng = np.random.default_rng(seed)

    def next_int(self, bound: int) -> int:
        if bound <= 0:
            raise ValueError(f"bound must be positive, got {bound}")
        return int(self._rng.integers(0, bound))

    def next_uniform(self) -> float:
        return float(self._rng.random())

    def __repr__(self) -> str:
        return f"NumpyRandomSource(seed={self.seed})"


class SequenceRandomSource(RandomSource):
    """
    Scripted RandomSource replaying a fixed sequence of integers.

    Each value is reduced modulo the requested bound. next_uniform() returns
    value / (max_value + 1). Raises RuntimeError when the script runs out.
    """

    def __init__(self, values: Iterable[int], max_value: int = 100):
        self._values = list(values)
        self._position = 0
        self.max_value = max_value

    def _next(self) -> int:
        if self._position >= len(self._values):
            raise RuntimeError(f"Scripted random source exhausted after {self._position} draws")
        value = self._values[self._position]
        self._position += 1
        return value

    @property
    def draws(self) -> int:
        """Number of values consumed so far."""
        return self._position

    def next_int(self, bound: int) -> int:
        if bound <= 0:
            raise ValueError(f"bound must be positive, got {bound}")
        return self._next() % bound

    def next_uniform(self) -> float:
        return (self._next() % (self.max_value + 1)) / (self.max_value + 1)
