# twopointers

A small library of classic array and string algorithms. Each one uses two
pointers, a sliding window, a prefix scan or Floyd's cycle detection. The
library needs nothing beyond the standard library. It is a library only and
provides no command-line tool.

## Installation

```
pip install twopointers
```

To run the tests:

```
pip install "twopointers[test]"
pytest
```

## Modules

### `twopointers.ksum`

- `two_sum(nums, target)`: returns the original indices of two entries that
  add up to `target`. The index of the smaller value comes first. If no such
  pair exists, it returns an empty list.
- `three_sum(nums)`: returns every distinct triple that sums to zero. Each
  triple is in ascending order.
- `four_sum(nums, target)`: returns every distinct quadruple that sums to
  `target`. Each quadruple is in ascending order.

These functions sort a copy of the input. They do not change the input.

### `twopointers.inplace`

- `remove_duplicates(nums)`: compacts a sorted list so that its distinct values
  come first. It returns how many distinct values there are. The list is
  changed in place.
- `set_zeroes(matrix)`: zeroes every row and every column that contains a
  zero. The matrix is changed in place.
- `sort_colors(nums)`: sorts a list of 0s, 1s and 2s in place with a single
  three-way partition pass.
- `merge_sorted(nums1, m, nums2, n)`: merges the first `n` values of `nums2`
  into `nums1`. The first `m` values of `nums1` are its real values, and
  `nums1` must have room for `m + n` values. It is filled from the back.
- `move_zeroes(nums)`: moves all zeros to the end in place and keeps the order
  of the other values.
- `find_duplicate(nums)`: returns the repeated value in a list of `n + 1`
  integers drawn from `1..n`. It does not change the list. It raises
  `ValueError` if the list is empty.

### `twopointers.water`

- `max_area(height)`: returns the largest area that two bars and the ground
  enclose.
- `trap(height)`: returns the total rain water that collects between the bars.
  Fewer than three bars hold no water.

### `twopointers.stocks`

- `max_profit(prices)`: returns the best profit from one purchase followed by
  one sale, or 0 if no sale makes a profit.
- `max_profit_unlimited(prices)`: returns the best profit when you may make any
  number of trades.

### `twopointers.text`

- `length_of_longest_substring(s)`: returns the length of the longest substring
  that has no repeated characters.
- `is_palindrome(s)`: reports whether `s` reads the same in both directions.
  Only ASCII letters and digits count, and case is ignored.

## Example

```python
from twopointers.ksum import two_sum, three_sum
from twopointers.water import trap
from twopointers.text import is_palindrome

two_sum([2, 7, 11, 15], 9)                   # [0, 1]
three_sum([-1, 0, 1, 2, -1, -4])             # [[-1, -1, 2], [-1, 0, 1]]
trap([0, 1, 0, 2, 1, 0, 1, 3, 2, 1, 2, 1])   # 6
is_palindrome("A man, a plan, a canal: Panama")  # True
```