#!/usr/bin/env python3
"""
Console output for Pareto fronts.

One line per front member:
    Return: R, Risk: V, Transaction Cost: C
"""

from typing import Iterable, List, TextIO, Optional
import sys

from mc_pareto.engine.portfolio import Portfolio


def _fmt(value: float) -> str:
    # 6 significant digits, as in a default iostream
    return f"{value:g}"


def format_portfolio_line(portfolio: Portfolio) -> str:
    """Render one portfolio as 'Return: R, Risk: V, Transaction Cost: C'."""
    return (
        f"Return: {_fmt(portfolio.net_return)}, "
        f"Risk: {_fmt(portfolio.volatility)}, "
        f"Transaction Cost: {_fmt(portfolio.transaction_cost)}"
    )


def format_pareto_front(front: Iterable[Portfolio], title: str = "Pareto Front:") -> List[str]:
    """Header line followed by one line per portfolio."""
    return [title] + [format_portfolio_line(p) for p in front]


def print_pareto_front(front: Iterable[Portfolio], stream: Optional[TextIO] = None) -> None:
    """Print the front to stream (default: stdout)."""
    stream = stream if stream is not None else sys.stdout
    for line in format_pareto_front(front):
        print(line, file=stream)
