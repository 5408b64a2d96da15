from itertools import combinations

from hypothesis import given
from hypothesis import strategies as st

from twopointers.stocks import max_profit, max_profit_unlimited

price_lists = st.lists(st.integers(min_value=0, max_value=100), max_size=20)


def test_max_profit_example():
    assert max_profit([7, 1, 5, 3, 6, 4]) == 5


@given(price_lists)
def test_max_profit_is_best_single_trade(prices):
    best = max((b - a for a, b in combinations(prices, 2)), default=0)
    assert max_profit(prices) == max(0, best)


def test_max_profit_falling_prices():
    assert max_profit([9, 7, 4, 1]) == 0
    assert max_profit([]) == 0


@given(price_lists)
def test_unlimited_at_least_single_trade(prices):
    assert max_profit_unlimited(prices) >= max_profit(prices)


@given(st.lists(st.integers(min_value=0, max_value=100), min_size=1, max_size=20))
def test_unlimited_on_rising_prices(prices):
    rising = sorted(prices)
    assert max_profit_unlimited(rising) == rising[-1] - rising[0]
    assert max_profit_unlimited(rising[::-1]) == 0