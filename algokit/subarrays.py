"""Maximum subarray sums, pair search and subarray enumeration."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from itertools import accumulate


def kadane_sum(items: Sequence[int]) -> int:
    """Largest sum of a contiguous run, never less than 0 (an empty run counts)."""
    if not items:
        raise ValueError("at least one element is required")
    best = current = 0
    for value in items:
        current = max(current + value, 0)
        best = max(best, current)
    return best


def max_circular_sum(items: Sequence[int]) -> int:
    """Largest sum of a contiguous run when the sequence wraps around."""
    normal = kadane_sum(items)
    total = sum(items)
    circular = total + kadane_sum([-value for value in items])
    return max(circular, normal)


def max_subarray_sum_brute(items: Sequence[int]) -> int:
    """Largest sum over every non-empty contiguous run, checked exhaustively."""
    if not items:
        raise ValueError("at least one element is required")
    return max(
        max(accumulate(items[start:]))
        for start in range(len(items))
    )


def pair_sum(items: Sequence[int], k: int) -> tuple[int, int] | None:
    """Indices ``(i, j)`` with ``i < j`` of the first pair summing to ``k``, or None."""
    for i, first in enumerate(items):
        for j in range(i + 1, len(items)):
            if first + items[j] == k:
                return i, j
    return None


def all_subarrays(items: Sequence) -> Iterator[list]:
    """Yield every non-empty contiguous run, by start index then by length."""
    for start in range(len(items)):
        for stop in range(start + 1, len(items) + 1):
            yield list(items[start:stop])