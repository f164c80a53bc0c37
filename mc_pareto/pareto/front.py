#!/usr/bin/env python3
"""
Pareto Front Construction.

Objectives: maximize net return, minimize volatility.

A candidate A dominates B when A is at least as good on both objectives and
strictly better on at least one. The front is maintained incrementally:
each candidate is either rejected (some member dominates it) or inserted
after evicting every member it dominates.
"""

import logging
from typing import Dict, Hashable, Iterable, Iterator, List, Optional, Sequence, Tuple

from mc_pareto.engine.portfolio import Portfolio


VALID_UNIQUENESS = ('metrics', 'allocation')


def dominates(a: Portfolio, b: Portfolio) -> bool:
    """
    Check if portfolio a dominates portfolio b.

    Returns True when a has net return >= b and volatility <= b, with at
    least one of the two strictly better.
    """
    if a.net_return < b.net_return or a.volatility > b.volatility:
        return False
    return a.net_return > b.net_return or a.volatility < b.volatility


def _uniqueness_key(portfolio: Portfolio, uniqueness: str) -> Hashable:
    if uniqueness == 'metrics':
        return portfolio.metrics
    return portfolio.allocation_key


class ParetoFront:
    """
    Set of mutually non-dominated portfolios.

    Iteration order is ascending (net_return, volatility). Membership is
    unique per key:
    - 'metrics': one portfolio per (net_return, volatility) pair; the first
      one seen is kept
    - 'allocation': one portfolio per allocation vector, so distinct
      allocations with identical metrics all survive
    """

    def __init__(self, uniqueness: str = 'metrics'):
        if uniqueness not in VALID_UNIQUENESS:
            raise ValueError(f"uniqueness must be one of {list(VALID_UNIQUENESS)}, got '{uniqueness}'")
        self.uniqueness = uniqueness
        self._members: Dict[Hashable, Portfolio] = {}
        self._ordered: Optional[List[Portfolio]] = None

    def key_of(self, portfolio: Portfolio) -> Hashable:
        return _uniqueness_key(portfolio, self.uniqueness)

    def _sorted(self) -> List[Portfolio]:
        # Rebuilt lazily after _insert/_evict
        if self._ordered is None:
            self._ordered = sorted(self._members.values(), key=lambda p: (p.net_return, p.volatility))
        return self._ordered

    def _entries(self) -> Iterator[Tuple[Hashable, Portfolio]]:
        return iter(self._members.items())

    def _has_key(self, key: Hashable) -> bool:
        return key in self._members

    def _insert(self, key: Hashable, portfolio: Portfolio) -> None:
        self._members[key] = portfolio
        self._ordered = None

    def _evict(self, keys: Sequence[Hashable]) -> None:
        if not keys:
            return
        for key in keys:
            del self._members[key]
        self._ordered = None

    @property
    def portfolios(self) -> List[Portfolio]:
        """Members in ascending (net_return, volatility) order."""
        return list(self._sorted())

    @property
    def is_empty(self) -> bool:
        return not self._members

    def metric_pairs(self) -> List[Tuple[float, float]]:
        return [p.metrics for p in self._sorted()]

    def __len__(self) -> int:
        return len(self._members)

    def __iter__(self) -> Iterator[Portfolio]:
        return iter(self._sorted())

    def __getitem__(self, index: int) -> Portfolio:
        return self._sorted()[index]

    def __contains__(self, portfolio: object) -> bool:
        if not isinstance(portfolio, Portfolio):
            return False
        return self._members.get(self.key_of(portfolio)) is portfolio

    def __repr__(self) -> str:
        return f"ParetoFront(size={len(self)}, uniqueness='{self.uniqueness}')"


class ParetoFrontBuilder:
    """
    Reduce a population to its non-dominated subset.

    Parameters:
    -----------
    uniqueness : str
        Key policy for front membership ('metrics' or 'allocation')
    """

    def __init__(self, uniqueness: str = 'metrics'):
        self.uniqueness = uniqueness
        self.front = ParetoFront(uniqueness)

    def reset(self) -> None:
        self.front = ParetoFront(self.uniqueness)

    def add(self, candidate: Portfolio) -> bool:
        """
        Offer one candidate to the current front.

        Returns:
        --------
        bool: True if the candidate was inserted
        """
        evicted = []
        for key, member in self.front._entries():
            if dominates(member, candidate):
                return False
            if dominates(candidate, member):
                evicted.append(key)

        self.front._evict(evicted)

        key = self.front.key_of(candidate)
        if self.front._has_key(key):
            return False
        self.front._insert(key, candidate)
        return True

    def add_all(self, candidates: Iterable[Portfolio]) -> int:
        """Offer candidates in order; return how many were inserted."""
        return sum(1 for candidate in candidates if self.add(candidate))

    def build(self, population: Iterable[Portfolio]) -> ParetoFront:
        """
        Build a fresh front from a population.

        Parameters:
        -----------
        population : iterable of Portfolio
            Evaluated portfolios, processed in order

        Returns:
        --------
        ParetoFront
        """
        self.reset()
        population = list(population)
        self.add_all(population)
        logging.info(f"Pareto front: {len(self.front)} of {len(population)} portfolios are non-dominated")
        return self.front


def build_pareto_front(population: Iterable[Portfolio], uniqueness: str = 'metrics') -> ParetoFront:
    """Convenience wrapper around ParetoFrontBuilder.build()."""
    return ParetoFrontBuilder(uniqueness).build(population)


def merge_fronts(*fronts: Iterable[Portfolio], uniqueness: str = 'metrics') -> ParetoFront:
    """
    Merge partial fronts into one front.

    Uses the same dominance reduction as build(); the result holds the same
    (net_return, volatility) pairs as building from all populations at once.
    """
    builder = ParetoFrontBuilder(uniqueness)
    for front in fronts:
        builder.add_all(front)
    logging.debug("Merged %d fronts into %d portfolios", len(fronts), len(builder.front))
    return builder.front
