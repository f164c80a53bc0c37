#!/usr/bin/env python3
"""
Portfolio Value Type - allocation weights plus the metrics derived from them.

A Portfolio is immutable. The sampler creates unevaluated portfolios
(net return and volatility are zero, transaction cost holds the sampler's
placeholder) and the evaluator builds a new, fully evaluated instance.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Sequence, Tuple

import numpy as np

from mc_pareto.exceptions import DegenerateSample


# Weight above which an asset counts as held
ACTIVITY_THRESHOLD = 0.01


def count_active_assets(allocations: Sequence[float], threshold: float = ACTIVITY_THRESHOLD) -> int:
    """Count weights strictly greater than threshold."""
    return int(np.count_nonzero(np.asarray(allocations, dtype=float) > threshold))


@dataclass(frozen=True, eq=False)
class Portfolio:
    """
    Candidate portfolio for the Pareto search.

    Attributes:
    -----------
    allocations : np.ndarray
        Normalized asset weights (read-only, sums to 1.0)
    net_return : float
        Expected return minus transaction cost
    volatility : float
        Standard deviation of portfolio return
    transaction_cost : float
        Cost incurred to build the allocation
    """

    allocations: np.ndarray
    net_return: float = 0.0
    volatility: float = 0.0
    transaction_cost: float = 0.0
    evaluated: bool = field(default=False, repr=False)

    def __post_init__(self):
        weights = np.array(self.allocations, dtype=float)
        if weights.ndim != 1:
            raise ValueError(f"allocations must be one-dimensional, got shape {weights.shape}")
        weights.setflags(write=False)
        object.__setattr__(self, 'allocations', weights)

    # =========================================================================
    # FACTORY METHODS
    # =========================================================================

    @classmethod
    def from_weights(cls,
                     weights: Sequence[float],
                     transaction_cost: float = 0.0) -> 'Portfolio':
        """
        Create an unevaluated portfolio from raw (unnormalized) weights.

        Parameters:
        -----------
        weights : sequence of float
            Non-negative weights, normalized to sum to 1
        transaction_cost : float
            Placeholder cost carried until evaluation

        Raises:
        -------
        DegenerateSample
            If the weights sum to zero

        Example:
        --------
        >>> Portfolio.from_weights([3, 1]).allocations
        array([0.75, 0.25])
        """
        weights = np.asarray(weights, dtype=float)
        total = weights.sum()
        if total <= 0:
            raise DegenerateSample(f"Raw weights sum to {total:g}; cannot normalize")
        return cls(weights / total, transaction_cost=transaction_cost)

    # =========================================================================
    # DERIVED VALUES
    # =========================================================================

    @property
    def num_assets(self) -> int:
        return len(self.allocations)

    @property
    def metrics(self) -> Tuple[float, float]:
        """The two objectives as a (net_return, volatility) pair."""
        return (self.net_return, self.volatility)

    @property
    def allocation_key(self) -> Tuple[float, ...]:
        """Hashable identity of the allocation vector."""
        return tuple(float(w) for w in self.allocations)

    def active_assets(self, threshold: float = ACTIVITY_THRESHOLD) -> int:
        """Number of assets with weight strictly greater than threshold."""
        return count_active_assets(self.allocations, threshold)

    def to_dict(self, asset_names: Optional[Sequence[str]] = None) -> Dict[str, Any]:
        """Convert to a flat dictionary (one weight entry per asset)."""
        if asset_names is None:
            asset_names = [f'asset_{i}' for i in range(self.num_assets)]
        if len(asset_names) != self.num_assets:
            raise ValueError(
                f"Expected {self.num_assets} asset names, got {len(asset_names)}"
            )
        record = {
            'net_return': self.net_return,
            'volatility': self.volatility,
            'transaction_cost': self.transaction_cost,
        }
        record.update({name: float(w) for name, w in zip(asset_names, self.allocations)})
        return record

    def __repr__(self) -> str:
        return (
            f"Portfolio(net_return={self.net_return:.6f}, volatility={self.volatility:.6f}, "
            f"transaction_cost={self.transaction_cost:.6f}, "
            f"allocations={np.round(self.allocations, 4).tolist()})"
        )
