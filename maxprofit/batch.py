"""Evaluate many independent price series at once."""

from __future__ import annotations

from collections.abc import Mapping

import pandas as pd
from joblib import Parallel, delayed

from .utils import get_max_profit

__all__ = ["compute_max_profits"]


def _series_max_profit(prices):
    if isinstance(prices, pd.Series):
        prices = prices.dropna()
    return get_max_profit(prices)


def compute_max_profits(prices: pd.DataFrame | Mapping, n_jobs: int = -1) -> pd.Series:
    """Max single-trade profit for every series in ``prices``.

    Parameters
    ----------
    prices : DataFrame or mapping
        Either a wide frame (one column per symbol, rows ordered by day) or
        a mapping ``name -> price sequence``.  Missing values in a pandas
        series are dropped before scanning.
    n_jobs : int, optional
        Passed to :class:`joblib.Parallel`, by default ``-1`` (all cores).

    Returns
    -------
    Series
        Profits indexed by series name, in input order.
    """
    if isinstance(prices, pd.DataFrame):
        items = [(name, prices[name]) for name in prices.columns]
    elif isinstance(prices, Mapping):
        items = list(prices.items())
    else:
        raise TypeError(f"expected DataFrame or mapping, got {type(prices).__name__}")

    names = [name for name, _ in items]
    if not items:
        return pd.Series([], index=pd.Index(names), dtype="float64", name="max_profit")

    profits = Parallel(n_jobs=n_jobs)(
        delayed(_series_max_profit)(series) for _, series in items
    )
    return pd.Series(profits, index=pd.Index(names), name="max_profit")
