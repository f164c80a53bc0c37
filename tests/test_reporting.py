#!/usr/bin/env python3
"""
Reporting and Visualization Tests
"""

import io

import matplotlib.pyplot as plt
import numpy as np
import pandas as pd
import pytest

from conftest import make_portfolio
from mc_pareto.pareto.front import build_pareto_front
from mc_pareto.reporting.console import format_pareto_front, format_portfolio_line, print_pareto_front
from mc_pareto.reporting.tables import (
    front_hypervolume,
    front_to_dataframe,
    portfolios_to_dataframe,
    summarize_front,
)
from mc_pareto.visualization.frontier import format_percentage, plot_pareto_front


# ============================================================================
# Console
# ============================================================================

def test_portfolio_line_format():
    portfolio = make_portfolio(0.119, 0.316228, transaction_cost=0.001)
    assert format_portfolio_line(portfolio) == "Return: 0.119, Risk: 0.316228, Transaction Cost: 0.001"


def test_front_lines(trade_off_portfolios):
    lines = format_pareto_front(build_pareto_front(trade_off_portfolios))

    assert lines[0] == "Pareto Front:"
    assert lines[1:] == [
        "Return: 0.08, Risk: 0.2, Transaction Cost: 0",
        "Return: 0.1, Risk: 0.3, Transaction Cost: 0",
        "Return: 0.12, Risk: 0.35, Transaction Cost: 0",
    ]


def test_print_pareto_front(trade_off_portfolios):
    stream = io.StringIO()
    print_pareto_front(build_pareto_front(trade_off_portfolios), stream=stream)
    assert stream.getvalue().count('\n') == 4


# ============================================================================
# Tables
# ============================================================================

def test_front_to_dataframe(trade_off_portfolios):
    df = front_to_dataframe(build_pareto_front(trade_off_portfolios), asset_names=['X', 'Y'])

    assert list(df.columns) == ['net_return', 'volatility', 'transaction_cost', 'X', 'Y']
    assert df['net_return'].tolist() == [0.08, 0.10, 0.12]
    assert np.allclose(df[['X', 'Y']].sum(axis=1), 1.0)


def test_empty_dataframe():
    df = portfolios_to_dataframe([], asset_names=['X'])
    assert isinstance(df, pd.DataFrame)
    assert df.empty
    assert 'X' in df.columns


def test_asset_name_count_checked(trade_off_portfolios):
    with pytest.raises(ValueError):
        portfolios_to_dataframe(trade_off_portfolios, asset_names=['only_one'])


def test_hypervolume_two_points():
    front = [make_portfolio(0.10, 0.20), make_portfolio(0.12, 0.35)]
    # Union of [0.2, 0.5] x [0, 0.10] and [0.35, 0.5] x [0, 0.12]
    assert front_hypervolume(front, reference_point=(0.0, 0.5)) == pytest.approx(0.033)


def test_hypervolume_empty():
    assert front_hypervolume([]) == 0.0


def test_summarize_front(trade_off_portfolios):
    summary = summarize_front(trade_off_portfolios)

    assert summary['size'] == 3
    assert summary['min_return'] == pytest.approx(0.08)
    assert summary['max_volatility'] == pytest.approx(0.35)
    assert summary['lowest_risk'].volatility == pytest.approx(0.20)
    assert summary['highest_return'].net_return == pytest.approx(0.12)
    # 0.08 / 0.20 = 0.4 is the best ratio
    assert summary['best_return_to_risk'].net_return == pytest.approx(0.08)
    assert summary['hypervolume'] >= 0


def test_summarize_empty_front():
    assert summarize_front([]) == {'size': 0}


# ============================================================================
# Visualization
# ============================================================================

def test_plot_pareto_front(trade_off_portfolios, tmp_path):
    population = trade_off_portfolios + [make_portfolio(0.05, 0.4)]
    save_path = tmp_path / 'plots' / 'front.png'

    fig = plot_pareto_front(population, build_pareto_front(population), save_path=str(save_path))

    assert save_path.exists()
    ax = fig.axes[0]
    assert ax.get_xlabel() == 'Volatility'
    assert len(ax.lines[0].get_xdata()) == 3
    plt.close(fig)


def test_format_percentage():
    assert format_percentage(0.1234) == '12.3%'
    assert format_percentage(0.05, decimals=0) == '5%'
