"""
Shared fixtures for the mc_pareto test suite.
"""

import os
import sys

import numpy as np
import pytest

# Add project root to path for imports
PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, PROJECT_ROOT)

import matplotlib
matplotlib.use('Agg')

from mc_pareto.engine.evaluator import MarketData
from mc_pareto.engine.portfolio import Portfolio


def make_portfolio(net_return, volatility, allocations=(1.0,), transaction_cost=0.0):
    """Evaluated portfolio with explicit metrics (allocations are cosmetic)."""
    return Portfolio(
        np.asarray(allocations, dtype=float),
        net_return=net_return,
        volatility=volatility,
        transaction_cost=transaction_cost,
        evaluated=True,
    )


@pytest.fixture
def two_asset_market():
    """Uncorrelated 2-asset market with no transaction costs."""
    return MarketData([0.12, 0.10], [[0.1, 0.0], [0.0, 0.1]], transaction_cost_rate=0.0)


@pytest.fixture
def example_market():
    """The bundled 5-asset universe with a 0.1% cost rate."""
    from mc_pareto.data.example_universe import EXAMPLE_COV_MATRIX, EXAMPLE_EXPECTED_RETURNS
    return MarketData(EXAMPLE_EXPECTED_RETURNS, EXAMPLE_COV_MATRIX, transaction_cost_rate=0.001)


@pytest.fixture
def trade_off_portfolios():
    """Three mutually non-dominated (return, risk) points."""
    return [
        make_portfolio(0.10, 0.30, allocations=(0.5, 0.5)),
        make_portfolio(0.12, 0.35, allocations=(0.8, 0.2)),
        make_portfolio(0.08, 0.20, allocations=(0.2, 0.8)),
    ]
