#!/usr/bin/env python3
"""
Risk/return scatter of a simulated population with its Pareto front.
"""

import os
import logging
from typing import Iterable, Optional, Tuple

import matplotlib.pyplot as plt
from matplotlib.ticker import FuncFormatter

from mc_pareto.engine.portfolio import Portfolio


POPULATION_COLOR = '#7f7f7f'  # Gray
FRONT_COLOR = '#d62728'       # Red


def format_percentage(value: float, decimals: int = 1) -> str:
    """
    Format value as percentage string.

    Parameters:
    -----------
    value : float
        Value to format (0.05 = 5%)
    decimals : int
        Number of decimal places

    Returns:
    --------
    str: Formatted percentage string
    """
    return f'{value*100:.{decimals}f}%'


def plot_pareto_front(population: Iterable[Portfolio],
                      front: Iterable[Portfolio],
                      title: str = 'Monte Carlo Portfolios and Pareto Front',
                      figsize: Tuple[float, float] = (8, 6),
                      save_path: Optional[str] = None,
                      show: bool = False) -> plt.Figure:
    """
    Plot population (gray) and front (red line) in volatility/return space.

    Parameters:
    -----------
    population : iterable of Portfolio
        All kept portfolios
    front : iterable of Portfolio
        Non-dominated portfolios
    title : str
        Axes title
    figsize : tuple
        Figure size (width, height)
    save_path : str, optional
        If given, the figure is saved there
    show : bool
        Display the figure interactively

    Returns:
    --------
    plt.Figure
    """
    population = list(population)
    front = sorted(front, key=lambda p: p.volatility)

    fig, ax = plt.subplots(figsize=figsize)

    ax.scatter(
        [p.volatility for p in population],
        [p.net_return for p in population],
        s=6, alpha=0.3, color=POPULATION_COLOR, label=f'Population ({len(population)})'
    )
    ax.plot(
        [p.volatility for p in front],
        [p.net_return for p in front],
        marker='o', markersize=4, linewidth=1.5, color=FRONT_COLOR,
        label=f'Pareto front ({len(front)})'
    )

    percent = FuncFormatter(lambda value, _: format_percentage(value))
    ax.xaxis.set_major_formatter(percent)
    ax.yaxis.set_major_formatter(percent)
    ax.set_xlabel('Volatility', fontsize=10)
    ax.set_ylabel('Net Return', fontsize=10)
    ax.set_title(title, fontsize=12, fontweight='bold')
    ax.grid(True, alpha=0.3)
    ax.legend(loc='best', fontsize=9)

    if save_path is not None:
        directory = os.path.dirname(save_path)
        if directory:
            os.makedirs(directory, exist_ok=True)
        fig.savefig(save_path, dpi=150, bbox_inches='tight')
        logging.info(f"Pareto front plot saved to {save_path}")

    if show:
        plt.show(block=False)

    return fig
