"""Linear search and problems solved by binary search over an answer or an index."""

from __future__ import annotations

from collections.abc import Sequence
from functools import lru_cache
from itertools import accumulate


def linear_search(items: Sequence, key) -> int:
    """Return the index of the first item equal to ``key``, or -1."""
    for index, item in enumerate(items):
        if item == key:
            return index
    return -1


def _can_place(stalls: Sequence[int], k: int, gap: int) -> bool:
    count = 1
    last = stalls[0]
    for position in stalls:
        if position - last >= gap:
            count += 1
            if count == k:
                return True
            last = position
    return False


def aggressive_cows(stalls: Sequence[int], k: int) -> int:
    """Largest minimum distance at which ``k`` cows fit in the stalls, or -1."""
    if not stalls:
        raise ValueError("at least one stall is required")
    ordered = sorted(stalls)
    low, high = 0, ordered[-1]
    answer = -1
    while low <= high:
        mid = low + (high - low) // 2
        if _can_place(ordered, k, mid):
            answer = mid
            low = mid + 1
        else:
            high = mid - 1
    return answer


def _pages_fit(pages: Sequence[int], students: int, limit: int) -> bool:
    required = 1
    current = 0
    for count in pages:
        if count > limit:
            return False
        if current + count > limit:
            required += 1
            current = count
            if required > students:
                return False
        else:
            current += count
    return True


def find_pages(pages: Sequence[int], students: int) -> int:
    """Smallest possible maximum of pages given to one student; -1 if too few books."""
    if len(pages) < students:
        return -1
    low, high = 0, sum(pages)
    result = -1
    while low <= high:
        mid = (low + high) // 2
        if _pages_fit(pages, students, mid):
            result = mid
            high = mid - 1
        else:
            low = mid + 1
    return result


def painter_partition(boards: Sequence[int], k: int) -> int:
    """Minimum over splits into ``k`` contiguous parts of the largest part's sum."""
    if k < 1:
        raise ValueError("k must be at least 1")
    if not boards:
        raise ValueError("at least one board is required")
    values = tuple(boards)
    prefix = list(accumulate(values, initial=0))

    @lru_cache(maxsize=None)
    def best(length: int, parts: int) -> int:
        if parts == 1:
            return prefix[length]
        if length == 1:
            return values[0]
        return min(
            max(best(split, parts - 1), prefix[length] - prefix[split])
            for split in range(1, length + 1)
        )

    return best(len(values), k)


def _occurrence(nums: Sequence[int], key: int, first: bool) -> int:
    low, high = 0, len(nums) - 1
    answer = -1
    while low <= high:
        mid = low + (high - low) // 2
        if nums[mid] == key:
            answer = mid
            if first:
                high = mid - 1
            else:
                low = mid + 1
        elif nums[mid] > key:
            high = mid - 1
        else:
            low = mid + 1
    return answer


def search_range(nums: Sequence[int], target: int) -> list[int]:
    """First and last index of ``target`` in sorted ``nums``; -1 where absent."""
    return [_occurrence(nums, target, True), _occurrence(nums, target, False)]


def peak_index_in_mountain(arr: Sequence[int]) -> int:
    """Index of the peak of a mountain array."""
    if not arr:
        raise ValueError("array is empty")
    low, high = 0, len(arr) - 1
    while low < high:
        mid = low + (high - low) // 2
        if arr[mid] < arr[mid + 1]:
            low = mid + 1
        else:
            high = mid
    return low


def find_pivot(arr: Sequence[int]) -> int:
    """Index of the smallest element of a rotated sorted array."""
    if not arr:
        raise ValueError("array is empty")
    low, high = 0, len(arr) - 1
    while low < high:
        mid = low + (high - low) // 2
        if arr[mid] >= arr[0]:
            low = mid + 1
        else:
            high = mid
    return low


def binary_search(arr: Sequence[int], key: int, start: int = 0, end: int | None = None) -> int:
    """Index of ``key`` in the sorted slice ``arr[start..end]`` (inclusive), or -1."""
    if end is None:
        end = len(arr) - 1
    while start <= end:
        mid = start + (end - start) // 2
        if arr[mid] == key:
            return mid
        if key > arr[mid]:
            start = mid + 1
        else:
            end = mid - 1
    return -1


def search_rotated(nums: Sequence[int], target: int) -> int:
    """Index of ``target`` in a rotated sorted array, or -1."""
    if not nums:
        return -1
    pivot = find_pivot(nums)
    last = len(nums) - 1
    if nums[pivot] <= target <= nums[last]:
        return binary_search(nums, target, pivot, last)
    return binary_search(nums, target, 0, pivot - 1)