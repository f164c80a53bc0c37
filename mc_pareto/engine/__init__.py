# Engine package - portfolio value type and evaluation
"""
Core portfolio types and evaluation.

Modules:
- portfolio: Portfolio value type (weights + derived metrics)
- evaluator: MarketData and the return/risk/cost evaluation functions
"""

from .portfolio import Portfolio, ACTIVITY_THRESHOLD, count_active_assets
from .evaluator import (
    MarketData,
    evaluate,
    evaluate_portfolio,
    portfolio_variance,
    VARIANCE_TOLERANCE,
)

__all__ = [
    'Portfolio',
    'ACTIVITY_THRESHOLD',
    'count_active_assets',
    'MarketData',
    'evaluate',
    'evaluate_portfolio',
    'portfolio_variance',
    'VARIANCE_TOLERANCE',
]
