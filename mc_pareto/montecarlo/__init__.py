# Monte Carlo simulation package
"""
Monte Carlo portfolio sampling and simulation.

Modules:
- random_source: Injectable random sources (numpy-backed and scripted)
- sampler: Random normalized allocation sampler
- simulation: Sample + evaluate + constraint filter loop
"""

from .random_source import RandomSource, NumpyRandomSource, SequenceRandomSource
from .sampler import PortfolioSampler
from .simulation import (
    PortfolioSimulation,
    SimulationStats,
    count_active_assets,
    run,
)

__all__ = [
    # Random sources
    'RandomSource',
    'NumpyRandomSource',
    'SequenceRandomSource',
    # Sampler
    'PortfolioSampler',
    # Simulation
    'PortfolioSimulation',
    'SimulationStats',
    'count_active_assets',
    'run',
]
