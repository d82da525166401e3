"""Bit manipulation helpers working on 32-bit signed integers."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from functools import reduce
from operator import xor

_WIDTH = 32
_MASK = (1 << _WIDTH) - 1


def get_bit(num: int, pos: int) -> int:
    """1 if bit ``pos`` of ``num`` is set, else 0."""
    return int(num & (1 << pos) != 0)


def set_bit(num: int, pos: int) -> int:
    """``num`` with bit ``pos`` set."""
    return num | (1 << pos)


def clear_bit(num: int, pos: int) -> int:
    """``num`` with bit ``pos`` cleared."""
    return num & ~(1 << pos)


def update_bit(num: int, pos: int, value: int) -> int:
    """``num`` with bit ``pos`` replaced by ``value``."""
    return clear_bit(num, pos) | (value << pos)


def count_ones(num: int) -> int:
    """Number of set bits in the 32-bit two's-complement form of ``num``."""
    num &= _MASK
    count = 0
    while num:
        num &= num - 1
        count += 1
    return count


def is_power_of_two(num: int) -> bool:
    """True when ``num`` is a positive power of two."""
    return bool(num) and not num & (num - 1)


def subsets(items: Sequence) -> Iterator[list]:
    """Yield every subset of ``items``, ordered by bitmask."""
    for mask in range(1 << len(items)):
        yield [item for bit, item in enumerate(items) if mask & (1 << bit)]


def unique(items: Iterable[int]) -> int:
    """The one value appearing an odd number of times when all others pair up."""
    return reduce(xor, items, 0)


def two_unique(items: Sequence[int]) -> tuple[int, int]:
    """The two values that appear once when every other value appears twice."""
    total = unique(items)
    if total == 0:
        raise ValueError("no two distinct unique elements found")
    lowest = total & -total
    first = reduce(xor, (item for item in items if item & lowest), 0)
    return first, first ^ total


def unique_in_triplets(items: Sequence[int]) -> int:
    """The value that appears once when every other value appears three times."""
    result = 0
    for pos in range(_WIDTH):
        if sum(get_bit(item, pos) for item in items) % 3:
            result = set_bit(result, pos)
    if result & (1 << (_WIDTH - 1)):
        result -= 1 << _WIDTH
    return result