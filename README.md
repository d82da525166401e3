# algokit

A small collection of classic algorithms written as ordinary Python functions,
meant for study and practice. It depends on nothing outside the standard
library.

## Installation

```
pip install .
```

## Modules

### `algokit.searching`

- `linear_search(items, key)`: index of the first item equal to `key`, or -1.
- `binary_search(arr, key, start=0, end=None)`: index of `key` in the sorted
  slice `arr[start..end]` (both ends inclusive), or -1.
- `search_range(nums, target)`: `[first, last]` index of `target` in a sorted
  list, with -1 where it is absent.
- `peak_index_in_mountain(arr)`: index of the peak of a mountain array.
- `find_pivot(arr)`: index of the smallest element of a rotated sorted array.
- `search_rotated(nums, target)`: index of `target` in a rotated sorted array,
  or -1.
- `aggressive_cows(stalls, k)`: the largest minimum distance at which `k` cows
  can be placed in the stalls, or -1.
- `find_pages(pages, students)`: book allocation; the smallest possible
  maximum number of pages given to one student, or -1 when there are fewer
  books than students.
- `painter_partition(boards, k)`: the smallest possible largest sum when the
  boards are split into `k` contiguous parts.

Functions that need a non-empty input (`aggressive_cows`, `painter_partition`,
`peak_index_in_mountain`, `find_pivot`) raise `ValueError` otherwise;
`painter_partition` also raises it when `k` is less than 1.

### `algokit.sorting`

`bubble_sort`, `insertion_sort`, `selection_sort`, `heap_sort` and
`quick_sort`. Each takes any iterable and returns a new sorted list; the input
is left unchanged.

### `algokit.bits`

- `get_bit`, `set_bit`, `clear_bit`, `update_bit`: read or change a single bit.
- `count_ones(num)`: number of set bits in the 32-bit two's-complement form.
- `is_power_of_two(num)`: true for positive powers of two.
- `subsets(items)`: a generator of every subset, ordered by bitmask.
- `unique(items)`: the value left over when all others appear in pairs.
- `two_unique(items)`: the two values that appear once when all others appear
  twice, as a tuple; raises `ValueError` if there are none.
- `unique_in_triplets(items)`: the value that appears once when all others
  appear three times (32-bit signed result).

### `algokit.subarrays`

- `kadane_sum(items)`: largest contiguous sum, never below 0.
- `max_circular_sum(items)`: largest contiguous sum when the list wraps around.
- `max_subarray_sum_brute(items)`: largest sum over every non-empty contiguous
  run, checked exhaustively.
- `pair_sum(items, k)`: indices `(i, j)` of the first pair summing to `k`, or
  `None`.
- `all_subarrays(items)`: a generator of every non-empty contiguous run.

### `algokit.brackets`

- `bracket_precedence(char)`: 1 for `[]`, 2 for `{}`, 3 for `()`, 0 otherwise.
- `are_brackets_balanced(expression)`: true when every bracket is matched and
  brackets nest only inside ones of lower or equal precedence (`[` may hold
  `{`, which may hold `(`). Other characters are ignored.

### `algokit.basics`

- `sum_and_difference(a, b)`: `(a + b, abs(a - b))`.
- `extremes(values)`: `(largest, smallest)`; raises `ValueError` when empty.
- `number_grid(n)`: an `n` by `n` grid counting from 1 row by row.
- `sum_of_evens(n)`: sum of the even numbers from 2 up to `n`.

## Example

```python
from algokit.searching import find_pages, search_range
from algokit.sorting import heap_sort
from algokit.bits import unique
from algokit.brackets import are_brackets_balanced

find_pages([12, 34, 67, 90], 2)          # 113
search_range([5, 7, 7, 8, 8, 10], 8)     # [3, 4]
heap_sort([12, 11, 13, 5, 6, 7])         # [5, 6, 7, 11, 12, 13]
unique([2, 4, 6, 3, 4, 6, 2])            # 3
are_brackets_balanced("[{()}]")          # True
```

## What it does not do

There is no command-line program and nothing reads from standard input or
prints results. Everything is a function that takes Python values and returns
them; call it from your own code.

## Running the tests

```
pip install ".[test]"
pytest
```