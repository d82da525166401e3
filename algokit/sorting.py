"""Classic comparison sorts. Each returns a new sorted list."""

from __future__ import annotations

from collections.abc import Iterable


def bubble_sort(items: Iterable) -> list:
    """Bubble sort that stops early once a pass makes no swap."""
    data = list(items)
    n = len(data)
    for done in range(n - 1):
        swapped = False
        for j in range(n - 1 - done):
            if data[j] > data[j + 1]:
                data[j], data[j + 1] = data[j + 1], data[j]
                swapped = True
        if not swapped:
            break
    return data


def _sift_down(data: list, size: int, root: int) -> None:
    while True:
        largest = root
        left, right = 2 * root + 1, 2 * root + 2
        if left < size and data[left] > data[largest]:
            largest = left
        if right < size and data[right] > data[largest]:
            largest = right
        if largest == root:
            return
        data[root], data[largest] = data[largest], data[root]
        root = largest


def heap_sort(items: Iterable) -> list:
    """Heap sort using a max-heap."""
    data = list(items)
    n = len(data)
    for root in range(n // 2 - 1, -1, -1):
        _sift_down(data, n, root)
    for end in range(n - 1, 0, -1):
        data[0], data[end] = data[end], data[0]
        _sift_down(data, end, 0)
    return data


def insertion_sort(items: Iterable) -> list:
    """Insertion sort."""
    data = list(items)
    for i in range(1, len(data)):
        key = data[i]
        j = i - 1
        while j >= 0 and key < data[j]:
            data[j + 1] = data[j]
            j -= 1
        data[j + 1] = key
    return data


def _partition(data: list, start: int, end: int) -> int:
    pivot = data[end]
    boundary = start
    for i in range(start, end):
        if data[i] <= pivot:
            data[i], data[boundary] = data[boundary], data[i]
            boundary += 1
    data[boundary], data[end] = data[end], data[boundary]
    return boundary


def quick_sort(items: Iterable) -> list:
    """Quick sort with the last element of each range as pivot."""
    data = list(items)
    pending = [(0, len(data) - 1)]
    while pending:
        start, end = pending.pop()
        if start < end:
            middle = _partition(data, start, end)
            pending.append((middle + 1, end))
            pending.append((start, middle - 1))
    return data


def selection_sort(items: Iterable) -> list:
    """Selection sort."""
    data = list(items)
    n = len(data)
    for i in range(n - 1):
        smallest = i
        for j in range(i + 1, n):
            if data[j] < data[smallest]:
                smallest = j
        data[i], data[smallest] = data[smallest], data[i]
    return data