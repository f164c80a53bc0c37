#!/usr/bin/env python3
"""
Configuration for Monte Carlo Pareto-front simulation runs.

This contains every input a run needs:
- Asset universe (expected returns, covariance matrix, transaction cost rate)
- Simulation settings (number of portfolios, asset-count constraints, seed)
- Front settings (uniqueness policy, cost sequencing)
"""

import json
import numbers
from dataclasses import dataclass, field, asdict
from typing import List, Dict, Any, Optional

from mc_pareto.data.example_universe import (
    EXAMPLE_ASSET_NAMES,
    EXAMPLE_COV_MATRIX,
    EXAMPLE_EXPECTED_RETURNS,
)
from mc_pareto.exceptions import DimensionMismatch, InvalidConstraint


VALID_FRONT_UNIQUENESS = ['metrics', 'allocation']
VALID_LOG_LEVELS = ['DEBUG', 'INFO', 'WARNING', 'ERROR']
INTEGER_FIELDS = ['num_assets', 'num_simulations', 'min_assets', 'max_assets']


def _is_integer(value: Any) -> bool:
    return isinstance(value, numbers.Integral) and not isinstance(value, bool)


def validate_asset_constraints(min_assets: int, max_assets: int, num_assets: int) -> None:
    """Raise InvalidConstraint unless 0 <= min_assets <= max_assets <= num_assets."""
    if min_assets < 0 or min_assets > num_assets:
        raise InvalidConstraint(f"min_assets must be between 0 and {num_assets}, got {min_assets}")
    if max_assets < 0 or max_assets > num_assets:
        raise InvalidConstraint(f"max_assets must be between 0 and {num_assets}, got {max_assets}")
    if min_assets > max_assets:
        raise InvalidConstraint(
            f"min_assets ({min_assets}) cannot be greater than max_assets ({max_assets})"
        )


@dataclass
class SimulationConfig:
    """
    Configuration for one simulation run.

    Defaults reproduce the bundled 5-asset example.
    """

    # ============================================================================
    # Asset Universe
    # ============================================================================
    num_assets: int = 5                      # Number of assets in each portfolio
    expected_returns: List[float] = field(default_factory=lambda: EXAMPLE_EXPECTED_RETURNS.tolist())
    cov_matrix: List[List[float]] = field(default_factory=lambda: EXAMPLE_COV_MATRIX.tolist())
    asset_names: Optional[List[str]] = field(default_factory=lambda: list(EXAMPLE_ASSET_NAMES))
    transaction_cost_rate: float = 0.001     # Transaction cost rate (0.1%)

    # ============================================================================
    # Simulation Settings
    # ============================================================================
    num_simulations: int = 10000             # Number of portfolios to simulate
    min_assets: int = 2                      # Minimum number of active assets
    max_assets: int = 4                      # Maximum number of active assets
    activity_threshold: float = 0.01         # Weight above which an asset is active
    seed: Optional[int] = None               # Random seed. If None, seeded from the clock

    # ============================================================================
    # Pareto Front Settings
    # ============================================================================
    front_uniqueness: str = 'metrics'        # 'metrics' (one portfolio per return/risk pair) or 'allocation'
    legacy_cost_ordering: bool = False       # Net return from the sampler's placeholder cost (reference output)

    # ============================================================================
    # Output
    # ============================================================================
    log_level: str = 'INFO'

    # ============================================================================
    # Validation
    # ============================================================================

    def __post_init__(self):
        """Validate configuration parameters."""
        for name in INTEGER_FIELDS:
            value = getattr(self, name)
            if not _is_integer(value):
                raise TypeError(f"{name} must be an integer, got {value!r}")

        if self.seed is not None:
            if not _is_integer(self.seed):
                raise TypeError(f"seed must be an integer or None, got {self.seed!r}")
            if self.seed < 0:
                raise ValueError(f"seed cannot be negative, got {self.seed}")

        if self.num_assets < 1:
            raise ValueError(f"num_assets must be at least 1, got {self.num_assets}")

        if self.num_simulations < 1:
            raise ValueError(f"num_simulations must be at least 1, got {self.num_simulations}")

        if self.transaction_cost_rate < 0:
            raise ValueError(f"transaction_cost_rate cannot be negative, got {self.transaction_cost_rate}")

        if not (0 <= self.activity_threshold < 1):
            raise ValueError(f"activity_threshold must be in [0, 1), got {self.activity_threshold}")

        # Validate dimensions
        if len(self.expected_returns) != self.num_assets:
            raise DimensionMismatch(
                f"expected_returns has {len(self.expected_returns)} entries, expected {self.num_assets}"
            )
        if len(self.cov_matrix) != self.num_assets or any(len(row) != self.num_assets for row in self.cov_matrix):
            raise DimensionMismatch(f"cov_matrix must be {self.num_assets}x{self.num_assets}")
        if self.asset_names is not None and len(self.asset_names) != self.num_assets:
            raise DimensionMismatch(
                f"asset_names has {len(self.asset_names)} entries, expected {self.num_assets}"
            )

        validate_asset_constraints(self.min_assets, self.max_assets, self.num_assets)

        if self.front_uniqueness not in VALID_FRONT_UNIQUENESS:
            raise ValueError(
                f"front_uniqueness must be one of {VALID_FRONT_UNIQUENESS}, got '{self.front_uniqueness}'"
            )

        self.log_level = self.log_level.upper()
        if self.log_level not in VALID_LOG_LEVELS:
            raise ValueError(f"log_level must be one of {VALID_LOG_LEVELS}, got '{self.log_level}'")

    # ============================================================================
    # Serialization
    # ============================================================================

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return asdict(self)

    @classmethod
    def from_dict(cls, config_dict: Dict[str, Any]) -> 'SimulationConfig':
        """Create SimulationConfig from dictionary."""
        return cls(**config_dict)

    @classmethod
    def from_json(cls, filepath: str) -> 'SimulationConfig':
        """Load SimulationConfig from JSON file."""
        with open(filepath, 'r') as f:
            config_dict = json.load(f)
        # Remove comment keys (convention: keys starting with '_')
        config_dict = {k: v for k, v in config_dict.items() if not k.startswith('_')}
        return cls.from_dict(config_dict)

    def to_json(self, filepath: str, indent: int = 2) -> None:
        """Save SimulationConfig to JSON file."""
        with open(filepath, 'w') as f:
            json.dump(self.to_dict(), f, indent=indent)

    # ============================================================================
    # Utility Methods
    # ============================================================================

    def get_asset_names(self) -> List[str]:
        """Asset names, falling back to asset_0 .. asset_{N-1}."""
        if self.asset_names is not None:
            return list(self.asset_names)
        return [f'asset_{i}' for i in range(self.num_assets)]


# ============================================================================
# Default Configuration
# ============================================================================

DEFAULT_SIMULATION_CONFIG = SimulationConfig()


# ============================================================================
# Convenience Functions
# ============================================================================

def load_simulation_config(filepath: str = None) -> SimulationConfig:
    """
    Load simulation configuration from file or return default.

    Parameters:
    -----------
    filepath : str, optional
        Path to JSON config file. If None, returns default config.

    Returns:
    --------
    SimulationConfig instance
    """
    if filepath is None:
        return DEFAULT_SIMULATION_CONFIG
    return SimulationConfig.from_json(filepath)
