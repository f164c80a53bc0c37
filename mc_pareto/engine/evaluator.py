#!/usr/bin/env python3
"""
Portfolio Evaluator.

Pure functions computing net return, volatility and transaction cost for an
allocation vector. MarketData bundles the market inputs for one run.
"""

import logging
from typing import Optional, Sequence, Tuple, Union

import numpy as np

from mc_pareto.engine.portfolio import Portfolio
from mc_pareto.exceptions import DimensionMismatch, NegativeVariance


# Largest negative variance treated as floating-point noise
VARIANCE_TOLERANCE = 1e-12

ArrayLike = Union[Sequence[float], np.ndarray]


class MarketData:
    """
    Immutable asset universe for one simulation run.

    Parameters:
    -----------
    expected_returns : array-like
        Expected return per asset (length N)
    cov_matrix : array-like
        Asset covariance matrix (N x N). Assumed symmetric positive
        semi-definite; this is not checked here.
    transaction_cost_rate : float
        Cost per unit of allocated weight
    """

    def __init__(self,
                 expected_returns: ArrayLike,
                 cov_matrix: ArrayLike,
                 transaction_cost_rate: float = 0.0):
        self.expected_returns = np.array(expected_returns, dtype=float)
        self.cov_matrix = np.array(cov_matrix, dtype=float)

        _check_dimensions(self.expected_returns, self.cov_matrix)

        if transaction_cost_rate < 0:
            raise ValueError(f"transaction_cost_rate cannot be negative, got {transaction_cost_rate}")
        self.transaction_cost_rate = float(transaction_cost_rate)

        self.expected_returns.setflags(write=False)
        self.cov_matrix.setflags(write=False)

    @classmethod
    def from_config(cls, config) -> 'MarketData':
        """Create MarketData from a SimulationConfig."""
        return cls(config.expected_returns, config.cov_matrix, config.transaction_cost_rate)

    @property
    def num_assets(self) -> int:
        return len(self.expected_returns)

    def __repr__(self) -> str:
        return (
            f"MarketData(num_assets={self.num_assets}, "
            f"transaction_cost_rate={self.transaction_cost_rate})"
        )


def _check_dimensions(expected_returns: np.ndarray,
                      cov_matrix: np.ndarray,
                      allocations: Optional[np.ndarray] = None) -> None:
    if expected_returns.ndim != 1:
        raise DimensionMismatch(
            f"expected_returns must be one-dimensional, got shape {expected_returns.shape}"
        )
    n = len(expected_returns)
    if cov_matrix.shape != (n, n):
        raise DimensionMismatch(
            f"cov_matrix must be {n}x{n} to match expected_returns, got shape {cov_matrix.shape}"
        )
    if allocations is not None and allocations.shape != (n,):
        raise DimensionMismatch(
            f"allocations must have length {n}, got shape {allocations.shape}"
        )


def portfolio_variance(allocations: np.ndarray, cov_matrix: np.ndarray) -> float:
    """
    Full quadratic form w^T * Sigma * w.

    Raises NegativeVariance when the result is below -VARIANCE_TOLERANCE;
    smaller negative values are rounding noise and clamp to zero.
    """
    total_risk = float(allocations @ cov_matrix @ allocations)
    if total_risk < -VARIANCE_TOLERANCE:
        raise NegativeVariance(total_risk, allocations)
    return max(total_risk, 0.0)


def evaluate(allocations: ArrayLike,
             expected_returns: ArrayLike,
             cov_matrix: ArrayLike,
             transaction_cost_rate: float,
             prior_transaction_cost: Optional[float] = None) -> Tuple[float, float, float]:
    """
    Evaluate an allocation on both objectives.

    Parameters:
    -----------
    allocations : array-like
        Portfolio weights (length N)
    expected_returns : array-like
        Expected return per asset (length N)
    cov_matrix : array-like
        Covariance matrix (N x N)
    transaction_cost_rate : float
        Cost per unit of allocated weight
    prior_transaction_cost : float, optional
        If given, net return is computed from this cost and the transaction
        cost is recomputed afterwards (legacy sequencing). If None, the fresh
        transaction cost is used for net return.

    Returns:
    --------
    tuple: (net_return, volatility, transaction_cost)
    """
    weights = np.asarray(allocations, dtype=float)
    mu = np.asarray(expected_returns, dtype=float)
    sigma = np.asarray(cov_matrix, dtype=float)
    _check_dimensions(mu, sigma, weights)

    expected_return = float(weights @ mu)
    volatility = float(np.sqrt(portfolio_variance(weights, sigma)))
    transaction_cost = transaction_cost_rate * float(weights.sum())

    cost_used = transaction_cost if prior_transaction_cost is None else prior_transaction_cost
    net_return = expected_return - cost_used

    return net_return, volatility, transaction_cost


def evaluate_portfolio(allocations: ArrayLike,
                       market: MarketData,
                       prior_transaction_cost: Optional[float] = None) -> Portfolio:
    """Build a fully evaluated Portfolio for the given allocation."""
    net_return, volatility, transaction_cost = evaluate(
        allocations,
        market.expected_returns,
        market.cov_matrix,
        market.transaction_cost_rate,
        prior_transaction_cost=prior_transaction_cost,
    )
    logging.debug("Evaluated portfolio: return=%.6f, risk=%.6f", net_return, volatility)
    return Portfolio(
        allocations,
        net_return=net_return,
        volatility=volatility,
        transaction_cost=transaction_cost,
        evaluated=True,
    )
