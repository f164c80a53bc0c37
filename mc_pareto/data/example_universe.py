#!/usr/bin/env python3
"""
Example asset universe for the console demo.

Five assets with fixed annual expected returns and covariance. Used as the
default SimulationConfig inputs.
"""

import numpy as np


EXAMPLE_ASSET_NAMES = ['A1', 'A2', 'A3', 'A4', 'A5']

EXAMPLE_EXPECTED_RETURNS = np.array([
    0.12,   # A1: 12%
    0.10,   # A2: 10%
    0.14,   # A3: 14% (highest return)
    0.08,   # A4: 8% (lowest return)
    0.11,   # A5: 11%
])

EXAMPLE_COV_MATRIX = np.array([
    [0.10, 0.02, 0.04, 0.01, 0.03],  # A1
    [0.02, 0.15, 0.05, 0.02, 0.01],  # A2
    [0.04, 0.05, 0.20, 0.01, 0.02],  # A3
    [0.01, 0.02, 0.01, 0.30, 0.01],  # A4 (highest variance)
    [0.03, 0.01, 0.02, 0.01, 0.25],  # A5
])


def get_example_universe():
    """
    Return copies of the example parameters.

    Returns:
    --------
    tuple: (asset_names, expected_returns, cov_matrix)
    """
    return list(EXAMPLE_ASSET_NAMES), EXAMPLE_EXPECTED_RETURNS.copy(), EXAMPLE_COV_MATRIX.copy()
