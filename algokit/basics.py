"""Small arithmetic exercises: sums, extremes and number grids."""

from __future__ import annotations

from collections.abc import Iterable


def sum_and_difference(a: int, b: int) -> tuple[int, int]:
    """The sum of ``a`` and ``b`` and the absolute value of their difference."""
    return a + b, abs(a - b)


def extremes(values: Iterable[int]) -> tuple[int, int]:
    """The largest and the smallest value, in that order."""
    data = list(values)
    if not data:
        raise ValueError("at least one value is required")
    return max(data), min(data)


def number_grid(n: int) -> list[list[int]]:
    """An ``n`` by ``n`` grid counting from 1 row by row."""
    return [list(range(row * n + 1, row * n + n + 1)) for row in range(n)]


def sum_of_evens(n: int) -> int:
    """Sum of all even numbers from 2 up to ``n``."""
    return sum(range(2, n + 1, 2))