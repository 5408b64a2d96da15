"""Best profit from a series of stock prices."""

from __future__ import annotations

from collections.abc import Sequence
from itertools import pairwise


def max_profit(prices: Sequence[int]) -> int:
    """Return the best profit from one purchase followed by one sale."""
    lowest = None
    best = 0
    for price in prices:
        lowest = price if lowest is None else min(lowest, price)
        best = max(best, price - lowest)
    return best


def max_profit_unlimited(prices: Sequence[int]) -> int:
    """Return the best profit when any number of trades may be made."""
    return sum(max(0, later - earlier) for earlier, later in pairwise(prices))