#!/usr/bin/env python3
"""
Error types raised by the simulation pipeline.

All errors derive from PortfolioSimulationError and also from the builtin
exception a caller would naturally catch (ValueError for bad inputs,
ArithmeticError for numerical failures).
"""

from typing import Optional

import numpy as np


class PortfolioSimulationError(Exception):
    """Base class for all simulation errors."""


class DimensionMismatch(PortfolioSimulationError, ValueError):
    """Allocation, return and covariance sizes are inconsistent."""


class InvalidConstraint(PortfolioSimulationError, ValueError):
    """Asset-count constraints are impossible for the asset universe."""


class DegenerateSample(PortfolioSimulationError, ArithmeticError):
    """All raw weight draws were zero, so the sample cannot be normalized."""

    def __init__(self, message: str, attempts: int = 1):
        super().__init__(message)
        self.attempts = attempts


class NegativeVariance(PortfolioSimulationError, ArithmeticError):
    """
    Portfolio variance came out negative beyond floating tolerance.

    This only happens when the covariance matrix is not positive
    semi-definite. The offending allocations are kept for diagnosis.
    """

    def __init__(self, total_risk: float, allocations: Optional[np.ndarray] = None):
        self.total_risk = total_risk
        self.allocations = None if allocations is None else np.array(allocations, dtype=float)
        weights = '' if self.allocations is None else f" for allocations {np.round(self.allocations, 6).tolist()}"
        super().__init__(
            f"Portfolio variance is negative ({total_risk:.3e}){weights}. "
            f"Check that the covariance matrix is positive semi-definite."
        )
