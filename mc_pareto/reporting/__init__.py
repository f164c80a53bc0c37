# Reporting package
"""
Output for simulated populations and Pareto fronts.

Modules:
- console: 'Return: R, Risk: V, Transaction Cost: C' lines
- tables: DataFrame conversion and front summaries
"""

from .console import format_portfolio_line, format_pareto_front, print_pareto_front
from .tables import (
    portfolios_to_dataframe,
    front_to_dataframe,
    front_hypervolume,
    summarize_front,
)

__all__ = [
    # Console
    'format_portfolio_line',
    'format_pareto_front',
    'print_pareto_front',
    # Tables
    'portfolios_to_dataframe',
    'front_to_dataframe',
    'front_hypervolume',
    'summarize_front',
]
