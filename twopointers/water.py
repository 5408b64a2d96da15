"""Water volume problems over bar heights."""

from __future__ import annotations

from collections.abc import Sequence
from itertools import accumulate


def max_area(height: Sequence[int]) -> int:
    """Return the largest area enclosed by two bars and the ground."""
    left, right = 0, len(height) - 1
    best = 0
    while left < right:
        best = max(best, (right - left) * min(height[left], height[right]))
        if height[left] > height[right]:
            right -= 1
        else:
            left += 1
    return best


def trap(height: Sequence[int]) -> int:
    """Return how much rain water collects between the bars."""
    if len(height) < 3:
        return 0
    max_left = list(accumulate(height, max))
    max_right = list(accumulate(reversed(height), max))[::-1]
    return sum(
        min(left, right) - bar
        for left, right, bar in zip(max_left[1:-1], max_right[1:-1], height[1:-1])
    )