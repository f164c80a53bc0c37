# Data package
"""
Fixed example data.

Modules:
- example_universe: 5-asset expected returns and covariance matrix
"""

from .example_universe import (
    EXAMPLE_ASSET_NAMES,
    EXAMPLE_EXPECTED_RETURNS,
    EXAMPLE_COV_MATRIX,
    get_example_universe,
)

__all__ = [
    'EXAMPLE_ASSET_NAMES',
    'EXAMPLE_EXPECTED_RETURNS',
    'EXAMPLE_COV_MATRIX',
    'get_example_universe',
]
