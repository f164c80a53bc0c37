#!/usr/bin/env python3
"""
Monte Carlo Portfolio Simulation.

ONE public method: simulate_portfolios()
- Sample a random allocation
- Evaluate it against the market
- Keep it if its active-asset count is within [min_assets, max_assets]
"""

import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence

from mc_pareto.config.simulation_config import SimulationConfig, validate_asset_constraints
from mc_pareto.engine.evaluator import MarketData, evaluate_portfolio
from mc_pareto.engine.portfolio import ACTIVITY_THRESHOLD, Portfolio, count_active_assets
from mc_pareto.exceptions import DimensionMismatch
from mc_pareto.montecarlo.random_source import NumpyRandomSource, RandomSource
from mc_pareto.montecarlo.sampler import PortfolioSampler


@dataclass
class SimulationStats:
    """Counts from the most recent simulate_portfolios() call."""
    generated: int = 0
    accepted: int = 0
    degenerate_draws: int = 0

    @property
    def rejected(self) -> int:
        return self.generated - self.accepted

    @property
    def acceptance_rate(self) -> float:
        return self.accepted / self.generated if self.generated else 0.0


class PortfolioSimulation:
    """
    Build a population of constrained random portfolios.

    Parameters:
    -----------
    market : MarketData
        Expected returns, covariance matrix and transaction cost rate
    num_simulations : int
        Number of portfolios to sample (the population may be smaller)
    min_assets : int
        Minimum number of active assets a kept portfolio may hold
    max_assets : int
        Maximum number of active assets a kept portfolio may hold
    sampler : PortfolioSampler, optional
        Allocation sampler. If None, one is built from random_source.
    random_source : RandomSource, optional
        Used only when sampler is None. If None, clock-seeded.
    activity_threshold : float
        Weight above which an asset counts as active
    legacy_cost_ordering : bool
        If True, net return subtracts the sampler's placeholder cost
        (raw weight total times rate) instead of the evaluated cost
    """

    def __init__(self,
                 market: MarketData,
                 num_simulations: int,
                 min_assets: int,
                 max_assets: int,
                 sampler: Optional[PortfolioSampler] = None,
                 random_source: Optional[RandomSource] = None,
                 activity_threshold: float = ACTIVITY_THRESHOLD,
                 legacy_cost_ordering: bool = False):
        if num_simulations < 1:
            raise ValueError(f"num_simulations must be at least 1, got {num_simulations}")
        validate_asset_constraints(min_assets, max_assets, market.num_assets)

        if sampler is None:
            sampler = PortfolioSampler(
                market.num_assets,
                market.transaction_cost_rate,
                random_source=random_source
            )
        elif sampler.num_assets != market.num_assets:
            raise DimensionMismatch(
                f"Sampler draws {sampler.num_assets} assets but market has {market.num_assets}"
            )

        self.market = market
        self.num_simulations = num_simulations
        self.min_assets = min_assets
        self.max_assets = max_assets
        self.sampler = sampler
        self.activity_threshold = activity_threshold
        self.legacy_cost_ordering = legacy_cost_ordering
        self.stats = SimulationStats()

    @classmethod
    def from_config(cls,
                    config: SimulationConfig,
                    random_source: Optional[RandomSource] = None) -> 'PortfolioSimulation':
        """Create a simulation from a SimulationConfig (seeded from config.seed)."""
        if random_source is None:
            random_source = NumpyRandomSource(config.seed)
        return cls(
            MarketData.from_config(config),
            num_simulations=config.num_simulations,
            min_assets=config.min_assets,
            max_assets=config.max_assets,
            random_source=random_source,
            activity_threshold=config.activity_threshold,
            legacy_cost_ordering=config.legacy_cost_ordering,
        )

    def is_feasible(self, portfolio: Portfolio) -> bool:
        """Check the active-asset count against [min_assets, max_assets]."""
        active = portfolio.active_assets(self.activity_threshold)
        return self.min_assets <= active <= self.max_assets

    def simulate_portfolios(self) -> List[Portfolio]:
        """
        Sample, evaluate and filter num_simulations portfolios.

        Returns:
        --------
        list of Portfolio in generation order
        """
        population = []
        degenerate_before = self.sampler.degenerate_draws

        for _ in range(self.num_simulations):
            sampled = self.sampler.sample()
            prior_cost = sampled.transaction_cost if self.legacy_cost_ordering else None
            portfolio = evaluate_portfolio(sampled.allocations, self.market, prior_transaction_cost=prior_cost)

            if self.is_feasible(portfolio):
                population.append(portfolio)

        self.stats = SimulationStats(
            generated=self.num_simulations,
            accepted=len(population),
            degenerate_draws=self.sampler.degenerate_draws - degenerate_before,
        )
        logging.info(
            f"Simulated {self.stats.generated} portfolios: {self.stats.accepted} kept, "
            f"{self.stats.rejected} rejected by asset-count constraint "
            f"[{self.min_assets}, {self.max_assets}]"
        )
        if self.stats.degenerate_draws:
            logging.warning(f"Resampled {self.stats.degenerate_draws} all-zero weight draws")

        return population


def run(num_simulations: int,
        num_assets: int,
        min_assets: int,
        max_assets: int,
        expected_returns: Sequence[float],
        cov_matrix: Sequence[Sequence[float]],
        transaction_cost_rate: float,
        random_source: Optional[RandomSource] = None,
        legacy_cost_ordering: bool = False) -> List[Portfolio]:
    """
    One-call form of PortfolioSimulation.simulate_portfolios().

    Raises DimensionMismatch if num_assets disagrees with the market inputs
    and InvalidConstraint for impossible asset-count bounds.
    """
    market = MarketData(expected_returns, cov_matrix, transaction_cost_rate)
    if market.num_assets != num_assets:
        raise DimensionMismatch(
            f"num_assets is {num_assets} but expected_returns has {market.num_assets} entries"
        )
    simulation = PortfolioSimulation(
        market,
        num_simulations=num_simulations,
        min_assets=min_assets,
        max_assets=max_assets,
        random_source=random_source,
        legacy_cost_ordering=legacy_cost_ordering,
    )
    return simulation.simulate_portfolios()
