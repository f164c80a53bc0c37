# Pareto package
"""
Multi-objective selection over evaluated portfolios.

Modules:
- front: Dominance predicate, ParetoFront container, incremental builder
"""

from .front import (
    ParetoFront,
    ParetoFrontBuilder,
    build_pareto_front,
    dominates,
    merge_fronts,
)

__all__ = [
    'ParetoFront',
    'ParetoFrontBuilder',
    'build_pareto_front',
    'dominates',
    'merge_fronts',
]
