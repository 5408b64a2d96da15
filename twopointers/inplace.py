"""In-place list rearrangements and the duplicate-number cycle search."""

from __future__ import annotations

from collections.abc import MutableSequence


def remove_duplicates(nums: MutableSequence[int]) -> int:
    """Compact a sorted list so its distinct values lead; return their count."""
    if not nums:
        return 0
    write = 0
    for value in nums[1:]:
        if value != nums[write]:
            write += 1
            nums[write] = value
    return write + 1


def set_zeroes(matrix: list[list[int]]) -> None:
    """Zero every row and column of ``matrix`` that holds a zero, in place."""
    zero_rows = {i for i, row in enumerate(matrix) if 0 in row}
    zero_cols = {j for row in matrix for j, value in enumerate(row) if value == 0}
    for i, row in enumerate(matrix):
        if i in zero_rows:
            row[:] = [0] * len(row)
        else:
            for j in zero_cols:
                row[j] = 0


def sort_colors(nums: MutableSequence[int]) -> None:
    """Sort a list of 0, 1 and 2 in place with one three-way partition pass."""
    low, mid, high = 0, 0, len(nums) - 1
    while mid <= high:
        if nums[mid] == 0:
            nums[mid], nums[low] = nums[low], nums[mid]
            low += 1
            mid += 1
        elif nums[mid] == 1:
            mid += 1
        else:
            nums[mid], nums[high] = nums[high], nums[mid]
            high -= 1


def merge_sorted(
    nums1: MutableSequence[int], m: int, nums2: MutableSequence[int], n: int
) -> None:
    """Merge the first ``n`` of ``nums2`` into ``nums1`` whose first ``m`` are used.

    ``nums1`` must have room for ``m + n`` values; it is filled from the back.
    """
    first, second, write = m - 1, n - 1, m + n - 1
    while first >= 0 and second >= 0:
        if nums1[first] > nums2[second]:
            nums1[write] = nums1[first]
            first -= 1
        else:
            nums1[write] = nums2[second]
            second -= 1
        write -= 1
    while second >= 0:
        nums1[write] = nums2[second]
        second -= 1
        write -= 1


def move_zeroes(nums: MutableSequence[int]) -> None:
    """Move all zeros to the end in place, keeping the other values in order."""
    write = 0
    for read, value in enumerate(nums):
        if value != 0:
            nums[write], nums[read] = nums[read], nums[write]
            write += 1


def find_duplicate(nums: MutableSequence[int]) -> int:
    """Find the repeated value in a list of ``n + 1`` values drawn from ``1..n``."""
    if not nums:
        raise ValueError("find_duplicate needs a non-empty list")
    slow = fast = nums[0]
    while True:
        slow = nums[slow]
        fast = nums[nums[fast]]
        if slow == fast:
            break
    slow = nums[0]
    while slow != fast:
        slow = nums[slow]
        fast = nums[fast]
    return slow