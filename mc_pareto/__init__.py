# Monte Carlo Pareto-Front Portfolio Package
"""
Monte Carlo portfolio simulation with Pareto-front selection.

Subpackages:
- engine: Portfolio value type and return/risk/cost evaluation
- montecarlo: Random sources, allocation sampler, simulation loop
- pareto: Dominance, ParetoFront and the incremental builder
- reporting: Console lines, DataFrames and front summaries
- visualization: Population / front scatter plot
- config: SimulationConfig handling
- data: Bundled example asset universe

Usage:
    from mc_pareto import SimulationConfig, PortfolioSimulation, ParetoFrontBuilder

    config = SimulationConfig(seed=42)
    population = PortfolioSimulation.from_config(config).simulate_portfolios()
    front = ParetoFrontBuilder().build(population)
"""

__version__ = "0.1.0"

# Convenience imports for commonly used classes
from .exceptions import (
    PortfolioSimulationError,
    DimensionMismatch,
    InvalidConstraint,
    DegenerateSample,
    NegativeVariance,
)
from .engine import Portfolio, MarketData, evaluate, evaluate_portfolio
from .montecarlo import PortfolioSampler, PortfolioSimulation, NumpyRandomSource
from .pareto import ParetoFront, ParetoFrontBuilder, dominates, merge_fronts
from .config import SimulationConfig

__all__ = [
    'PortfolioSimulationError',
    'DimensionMismatch',
    'InvalidConstraint',
    'DegenerateSample',
    'NegativeVariance',
    'Portfolio',
    'MarketData',
    'evaluate',
    'evaluate_portfolio',
    'PortfolioSampler',
    'PortfolioSimulation',
    'NumpyRandomSource',
    'ParetoFront',
    'ParetoFrontBuilder',
    'dominates',
    'merge_fronts',
    'SimulationConfig',
]
