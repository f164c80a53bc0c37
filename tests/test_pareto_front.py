#!/usr/bin/env python3
"""
Pareto Front Tests

Validates dominance semantics and incremental front maintenance:
- Dominance is irreflexive, asymmetric and matches the two-clause form
- Built fronts contain no dominated pair and are idempotent
- Uniqueness policies ('metrics' vs 'allocation')
- Merging partial fronts
"""

import itertools

import numpy as np
import pytest

from conftest import make_portfolio
from mc_pareto.engine.evaluator import evaluate_portfolio
from mc_pareto.montecarlo.random_source import NumpyRandomSource
from mc_pareto.montecarlo.simulation import PortfolioSimulation
from mc_pareto.pareto.front import (
    ParetoFront,
    ParetoFrontBuilder,
    build_pareto_front,
    dominates,
    merge_fronts,
)


def two_clause_dominates(a, b):
    """Unsimplified dominance predicate."""
    return ((a.net_return > b.net_return and a.volatility < b.volatility) or
            (a.net_return >= b.net_return and a.volatility <= b.volatility and
             (a.net_return > b.net_return or a.volatility < b.volatility)))


def random_portfolios(n, seed, grid=None):
    """Random metric pairs; grid snaps values to force ties."""
    rng = np.random.default_rng(seed)
    returns = rng.uniform(0.0, 0.2, n)
    vols = rng.uniform(0.1, 0.5, n)
    if grid is not None:
        returns = np.round(returns / grid) * grid
        vols = np.round(vols / grid) * grid
    return [make_portfolio(r, v, allocations=(i + 1.0, 1.0)) for i, (r, v) in enumerate(zip(returns, vols))]


@pytest.fixture
def simulated_population(example_market):
    return PortfolioSimulation(
        example_market, num_simulations=3000, min_assets=2, max_assets=4,
        random_source=NumpyRandomSource(seed=2024)
    ).simulate_portfolios()


# ============================================================================
# Dominance
# ============================================================================

def test_equal_risk_higher_return_dominates(two_asset_market):
    first = evaluate_portfolio([1.0, 0.0], two_asset_market)
    second = evaluate_portfolio([0.0, 1.0], two_asset_market)

    assert first.volatility == pytest.approx(second.volatility)
    assert dominates(first, second)
    assert not dominates(second, first)

    front = build_pareto_front([first, second])
    assert list(front) == [first]


def test_dominance_irreflexive():
    for portfolio in random_portfolios(100, seed=1):
        assert not dominates(portfolio, portfolio)


def test_dominance_asymmetric():
    portfolios = random_portfolios(60, seed=2, grid=0.05)
    for a, b in itertools.product(portfolios, repeat=2):
        if dominates(a, b):
            assert not dominates(b, a)


@pytest.mark.parametrize("grid", [None, 0.05, 0.1])
def test_simplified_matches_two_clause_form(grid):
    portfolios = random_portfolios(60, seed=3, grid=grid)
    for a, b in itertools.product(portfolios, repeat=2):
        assert dominates(a, b) == two_clause_dominates(a, b)


def test_equal_metrics_do_not_dominate():
    a = make_portfolio(0.1, 0.2, allocations=(0.5, 0.5))
    b = make_portfolio(0.1, 0.2, allocations=(0.3, 0.7))
    assert not dominates(a, b)
    assert not dominates(b, a)


# ============================================================================
# Front construction
# ============================================================================

def test_trade_off_curve_keeps_all(trade_off_portfolios):
    front = build_pareto_front(trade_off_portfolios)

    assert len(front) == 3
    assert front.metric_pairs() == [(0.08, 0.20), (0.10, 0.30), (0.12, 0.35)]


def test_empty_population():
    front = build_pareto_front([])
    assert len(front) == 0
    assert front.is_empty
    assert list(front) == []


def test_all_identical_portfolios_keep_one():
    portfolios = [make_portfolio(0.1, 0.2, allocations=(0.5, 0.5)) for _ in range(10)]

    front = build_pareto_front(portfolios)

    assert len(front) == 1
    assert front[0] is portfolios[0]


def test_later_candidate_evicts_dominated_members():
    weak = make_portfolio(0.05, 0.30)
    weaker = make_portfolio(0.04, 0.35)
    strong = make_portfolio(0.10, 0.20)

    builder = ParetoFrontBuilder()
    assert builder.add(weak)
    assert not builder.add(weaker)
    assert builder.add(strong)

    assert list(builder.front) == [strong]
    assert weak not in builder.front


def test_no_dominated_pair_in_front(simulated_population):
    front = build_pareto_front(simulated_population)

    assert 0 < len(front) < len(simulated_population)
    for a, b in itertools.permutations(front, 2):
        assert not dominates(a, b)


def test_every_excluded_portfolio_is_dominated(simulated_population):
    front = build_pareto_front(simulated_population)
    members = set(id(p) for p in front)

    for portfolio in simulated_population:
        if id(portfolio) in members:
            continue
        assert any(dominates(m, portfolio) for m in front) or portfolio.metrics in front.metric_pairs()


def test_build_is_idempotent(simulated_population):
    front = build_pareto_front(simulated_population)
    rebuilt = build_pareto_front(front)

    assert [id(p) for p in rebuilt] == [id(p) for p in front]


def test_front_sorted_by_return_then_risk():
    portfolios = random_portfolios(500, seed=4)
    pairs = build_pareto_front(portfolios).metric_pairs()
    assert pairs == sorted(pairs)


def test_builder_reset_between_builds(trade_off_portfolios):
    builder = ParetoFrontBuilder()
    builder.build(trade_off_portfolios)
    front = builder.build([make_portfolio(0.01, 0.9)])
    assert len(front) == 1


def test_cached_order_refreshed_after_insert_and_evict():
    builder = ParetoFrontBuilder()
    middle = make_portfolio(0.10, 0.30)
    low = make_portfolio(0.05, 0.20)
    builder.add_all([middle, low])

    assert list(builder.front) == [low, middle]
    assert builder.front[0] is low

    high = make_portfolio(0.15, 0.40)
    builder.add(high)
    assert builder.front.metric_pairs() == [(0.05, 0.20), (0.10, 0.30), (0.15, 0.40)]

    # Dominates low and middle
    best = make_portfolio(0.12, 0.15)
    builder.add(best)
    assert builder.front.portfolios == [best, high]
    assert builder.front[-1] is high
    assert len(builder.front) == 2


def test_iteration_snapshot_survives_mutation(trade_off_portfolios):
    builder = ParetoFrontBuilder()
    builder.add_all(trade_off_portfolios)

    seen = []
    for portfolio in builder.front:
        seen.append(portfolio)
        builder.add(make_portfolio(0.50, 0.01))

    assert seen == sorted(trade_off_portfolios, key=lambda p: p.metrics)
    assert len(builder.front) == 1


def test_portfolios_returns_copy(trade_off_portfolios):
    front = build_pareto_front(trade_off_portfolios)
    front.portfolios.clear()
    assert len(list(front)) == 3


# ============================================================================
# Uniqueness policy
# ============================================================================

def test_metrics_uniqueness_drops_distinct_allocations():
    """Same (return, risk) with different allocations: first one wins."""
    first = make_portfolio(0.1, 0.2, allocations=(0.5, 0.5))
    second = make_portfolio(0.1, 0.2, allocations=(0.4, 0.6))

    front = build_pareto_front([first, second], uniqueness='metrics')

    assert len(front) == 1
    assert first in front
    assert second not in front


def test_allocation_uniqueness_keeps_distinct_allocations():
    first = make_portfolio(0.1, 0.2, allocations=(0.5, 0.5))
    second = make_portfolio(0.1, 0.2, allocations=(0.4, 0.6))
    duplicate = make_portfolio(0.1, 0.2, allocations=(0.5, 0.5))

    front = build_pareto_front([first, second, duplicate], uniqueness='allocation')

    assert len(front) == 2
    assert first in front and second in front
    assert duplicate not in front


def test_invalid_uniqueness():
    with pytest.raises(ValueError, match="uniqueness"):
        ParetoFront(uniqueness='identity')
    with pytest.raises(ValueError):
        ParetoFrontBuilder(uniqueness='weights')


# ============================================================================
# Merging partial fronts
# ============================================================================

def test_merge_matches_single_build(simulated_population):
    chunks = [simulated_population[i::4] for i in range(4)]
    partial_fronts = [build_pareto_front(chunk) for chunk in chunks]

    merged = merge_fronts(*partial_fronts)
    direct = build_pareto_front(simulated_population)

    assert merged.metric_pairs() == direct.metric_pairs()


def test_merge_pairwise_reduction_tree():
    portfolios = random_portfolios(400, seed=5, grid=0.01)
    fronts = [build_pareto_front(portfolios[i::8]) for i in range(8)]

    while len(fronts) > 1:
        fronts = [merge_fronts(*fronts[i:i + 2]) for i in range(0, len(fronts), 2)]

    assert fronts[0].metric_pairs() == build_pareto_front(portfolios).metric_pairs()


def test_merge_no_fronts():
    assert len(merge_fronts()) == 0
