from itertools import combinations

import numpy as np

__all__ = ["get_max_profit", "brute_force_max_profit"]

_EMPTY = object()


def _native(value):
    """Turn numpy scalars into plain Python numbers."""
    if isinstance(value, np.generic):
        return value.item()
    return value


def get_max_profit(prices):
    """Return max profit from a single buy followed by a later sell.

    ``prices`` can be any iterable of numbers ordered by day (list, numpy
    array, pandas Series, ...).  The input is only read once and never
    modified.  An empty series gives ``0``; a single price or a series that
    never rises gives a zero of the prices' own type (``0.0`` for floats).
    """
    it = iter(prices)
    min_price = next(it, _EMPTY)
    if min_price is _EMPTY:
        return 0
    max_profit = min_price - min_price
    for price in it:
        if price < min_price:
            min_price = price
        profit = price - min_price
        if profit > max_profit:
            max_profit = profit
    return _native(max_profit)


def brute_force_max_profit(prices):
    """O(n²) reference: best ``prices[j] - prices[i]`` over all ``i < j``."""
    prices = list(prices)
    if not prices:
        return 0
    best = prices[0] - prices[0]
    for buy, sell in combinations(prices, 2):
        if sell - buy > best:
            best = sell - buy
    return _native(best)
