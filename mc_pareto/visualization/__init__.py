# Visualization package
"""
Plotting utilities for simulated portfolios.

Modules:
- frontier: Population scatter with the Pareto front overlaid
"""

from .frontier import plot_pareto_front, format_percentage

__all__ = [
    'plot_pareto_front',
    'format_percentage',
]
