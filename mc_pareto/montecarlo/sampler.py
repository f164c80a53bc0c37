#!/usr/bin/env python3
"""
Random Portfolio Sampler.

Draws integer weights per asset, normalizes them to sum to 1 and attaches a
placeholder transaction cost. All-zero draws are resampled.
"""

import logging
from typing import Optional

import numpy as np

from mc_pareto.engine.portfolio import Portfolio
from mc_pareto.exceptions import DegenerateSample
from mc_pareto.montecarlo.random_source import NumpyRandomSource, RandomSource


class PortfolioSampler:
    """
    Generate random normalized allocations.

    Parameters:
    -----------
    num_assets : int
        Number of assets per portfolio
    transaction_cost_rate : float
        Rate used for the placeholder transaction cost
    random_source : RandomSource, optional
        Source of draws. If None, a clock-seeded NumpyRandomSource is created.
    upper_bound : int
        Raw weights are drawn from [0, upper_bound)
    max_retries : int
        Consecutive all-zero draws tolerated before giving up
    """

    def __init__(self,
                 num_assets: int,
                 transaction_cost_rate: float = 0.0,
                 random_source: Optional[RandomSource] = None,
                 upper_bound: int = 100,
                 max_retries: int = 1000):
        if num_assets < 1:
            raise ValueError(f"num_assets must be at least 1, got {num_assets}")
        if upper_bound < 2:
            raise ValueError(f"upper_bound must be at least 2, got {upper_bound}")
        if max_retries < 1:
            raise ValueError(f"max_retries must be at least 1, got {max_retries}")

        self.num_assets = num_assets
        self.transaction_cost_rate = transaction_cost_rate
        self.random_source = random_source if random_source is not None else NumpyRandomSource()
        self.upper_bound = upper_bound
        self.max_retries = max_retries
        self.degenerate_draws = 0

    def sample_raw(self) -> Portfolio:
        """
        Make one draw attempt.

        Returns:
        --------
        Portfolio: normalized allocation carrying the placeholder cost
        (total raw weight times the cost rate)

        Raises DegenerateSample if every draw was zero.
        """
        raw = np.array(
            [self.random_source.next_int(self.upper_bound) for _ in range(self.num_assets)],
            dtype=float
        )
        return Portfolio.from_weights(raw, transaction_cost=float(raw.sum()) * self.transaction_cost_rate)

    def sample(self) -> Portfolio:
        """
        Generate one unevaluated portfolio.

        The placeholder transaction cost is total raw weight times the cost
        rate; evaluation replaces it.
        """
        for attempt in range(1, self.max_retries + 1):
            try:
                return self.sample_raw()
            except DegenerateSample:
                self.degenerate_draws += 1
                logging.debug("Degenerate draw on attempt %d, resampling", attempt)

        raise DegenerateSample(
            f"All raw weights were zero in {self.max_retries} consecutive draws",
            attempts=self.max_retries
        )
