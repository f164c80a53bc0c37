#!/usr/bin/env python3
"""
Tabular views of populations and Pareto fronts.

Converts portfolios to pandas DataFrames and summarizes a front
(extremes, best return-to-risk portfolio, 2D hypervolume).
"""

from typing import Any, Dict, Iterable, List, Optional, Sequence, Tuple

import numpy as np
import pandas as pd

from mc_pareto.engine.portfolio import Portfolio


METRIC_COLUMNS = ['net_return', 'volatility', 'transaction_cost']


def portfolios_to_dataframe(portfolios: Iterable[Portfolio],
                            asset_names: Optional[Sequence[str]] = None) -> pd.DataFrame:
    """
    Convert portfolios to a DataFrame.

    Parameters:
    -----------
    portfolios : iterable of Portfolio
        Portfolios in the order rows should appear
    asset_names : sequence of str, optional
        Weight column names. Defaults to asset_0 .. asset_{N-1}.

    Returns:
    --------
    pd.DataFrame: metric columns followed by one weight column per asset
    """
    portfolios = list(portfolios)
    if not portfolios:
        columns = METRIC_COLUMNS + (list(asset_names) if asset_names is not None else [])
        return pd.DataFrame(columns=columns, dtype=float)

    records = [p.to_dict(asset_names) for p in portfolios]
    return pd.DataFrame.from_records(records)


def front_to_dataframe(front: Iterable[Portfolio],
                       asset_names: Optional[Sequence[str]] = None) -> pd.DataFrame:
    """Front members as a DataFrame sorted by (net_return, volatility)."""
    df = portfolios_to_dataframe(front, asset_names)
    if df.empty:
        return df
    return df.sort_values(['net_return', 'volatility']).reset_index(drop=True)


def front_hypervolume(front: Iterable[Portfolio],
                      reference_point: Optional[Tuple[float, float]] = None) -> float:
    """
    Area dominated by the front in (volatility, net_return) space.

    Parameters:
    -----------
    front : iterable of Portfolio
        Mutually non-dominated portfolios
    reference_point : tuple, optional
        (worst return, worst volatility). Defaults to the front's minimum
        return and maximum volatility.

    Returns:
    --------
    float: hypervolume (0.0 for an empty front)
    """
    points = np.array([(p.net_return, p.volatility) for p in front], dtype=float)
    if len(points) == 0:
        return 0.0

    if reference_point is None:
        reference_point = (points[:, 0].min(), points[:, 1].max())
    ref_return, ref_vol = reference_point

    # Sweep by increasing volatility; each step adds a slab up to the next point
    order = np.argsort(points[:, 1], kind='stable')
    vols = np.minimum(points[order, 1], ref_vol)
    best_returns = np.maximum.accumulate(points[order, 0])
    next_vols = np.append(vols[1:], ref_vol)

    heights = np.clip(best_returns - ref_return, 0.0, None)
    widths = np.clip(next_vols - vols, 0.0, None)
    return float(np.sum(widths * heights))


def summarize_front(front: Iterable[Portfolio]) -> Dict[str, Any]:
    """
    Summary statistics for a front.

    Returns:
    --------
    dict with keys:
        - 'size': number of portfolios
        - 'min_return', 'max_return': net return range
        - 'min_volatility', 'max_volatility': volatility range
        - 'mean_transaction_cost': average cost
        - 'lowest_risk': portfolio with minimum volatility
        - 'highest_return': portfolio with maximum net return
        - 'best_return_to_risk': portfolio maximizing net_return / volatility
        - 'hypervolume': front_hypervolume() with default reference point
    """
    portfolios: List[Portfolio] = list(front)
    if not portfolios:
        return {'size': 0}

    returns = np.array([p.net_return for p in portfolios])
    vols = np.array([p.volatility for p in portfolios])
    costs = np.array([p.transaction_cost for p in portfolios])

    with np.errstate(divide='ignore', invalid='ignore'):
        ratios = np.where(vols > 0, returns / vols, -np.inf)

    return {
        'size': len(portfolios),
        'min_return': float(returns.min()),
        'max_return': float(returns.max()),
        'min_volatility': float(vols.min()),
        'max_volatility': float(vols.max()),
        'mean_transaction_cost': float(costs.mean()),
        'lowest_risk': portfolios[int(np.argmin(vols))],
        'highest_return': portfolios[int(np.argmax(returns))],
        'best_return_to_risk': portfolios[int(np.argmax(ratios))],
        'hypervolume': front_hypervolume(portfolios),
    }
