"""Pair, triple and quadruple sum searches built on sorted two-pointer scans."""

from __future__ import annotations

from collections.abc import Sequence


def two_sum(nums: Sequence[int], target: int) -> list[int]:
    """Return the original indices of two entries adding up to ``target``.

    The entries are scanned in sorted order from both ends. The index of the
    smaller value comes first. An empty list is returned when no pair exists.
    """
    indexed = sorted((value, index) for index, value in enumerate(nums))
    left, right = 0, len(indexed) - 1
    while left < right:
        total = indexed[left][0] + indexed[right][0]
        if total == target:
            return [indexed[left][1], indexed[right][1]]
        if total < target:
            left += 1
        else:
            right -= 1
    return []


def _pairs_summing_to(
    values: list[int], start: int, target: int
) -> list[tuple[int, int]]:
    """Find distinct value pairs in ``values[start:]`` (sorted) adding to ``target``."""
    pairs: list[tuple[int, int]] = []
    left, right = start, len(values) - 1
    while left < right:
        total = values[left] + values[right]
        if total == target:
            pairs.append((values[left], values[right]))
            while left < right and values[left] == values[left + 1]:
                left += 1
            while left < right and values[right] == values[right - 1]:
                right -= 1
            left += 1
            right -= 1
        elif total < target:
            left += 1
        else:
            right -= 1
    return pairs


def three_sum(nums: Sequence[int]) -> list[list[int]]:
    """Return every distinct ascending triple of entries whose sum is zero."""
    values = sorted(nums)
    result: list[list[int]] = []
    for i, first in enumerate(values):
        if i > 0 and first == values[i - 1]:
            continue
        result.extend(
            [first, low, high] for low, high in _pairs_summing_to(values, i + 1, -first)
        )
    return result


def four_sum(nums: Sequence[int], target: int) -> list[list[int]]:
    """Return every distinct ascending quadruple of entries summing to ``target``."""
    values = sorted(nums)
    size = len(values)
    result: list[list[int]] = []
    for i in range(size - 3):
        if i > 0 and values[i] == values[i - 1]:
            continue
        for j in range(i + 1, size - 2):
            if j > i + 1 and values[j] == values[j - 1]:
                continue
            remaining = target - values[i] - values[j]
            result.extend(
                [values[i], values[j], low, high]
                for low, high in _pairs_summing_to(values, j + 1, remaining)
            )
    return result