import pytest
from hypothesis import given, strategies as st

from algokit.sorting import (
    bubble_sort,
    heap_sort,
    insertion_sort,
    quick_sort,
    selection_sort,
)

SOURCE_ARRAY = [10, 2, 23, -4, 235, 56, 2, 6, 5, 5, 5, 23, -4, 346, -56, 81, 43, 654, 435, -54]
SOURCE_SORTED = [-56, -54, -4, -4, 2, 2, 5, 5, 5, 6, 10, 23, 23, 43, 56, 81, 235, 346, 435, 654]

int_lists = st.lists(st.integers(-1000, 1000), max_size=60)


@given(values=int_lists)
def test_bubble_sort_agrees_with_sorted(values):
    assert bubble_sort(values) == sorted(values)


@given(values=int_lists)
def test_heap_sort_agrees_with_sorted(values):
    assert heap_sort(values) == sorted(values)


@given(values=int_lists)
def test_insertion_sort_agrees_with_sorted(values):
    assert insertion_sort(values) == sorted(values)


@given(values=int_lists)
def test_quick_sort_agrees_with_sorted(values):
    assert quick_sort(values) == sorted(values)


@given(values=int_lists)
def test_selection_sort_agrees_with_sorted(values):
    assert selection_sort(values) == sorted(values)


def test_source_example_all_sorts():
    assert bubble_sort(SOURCE_ARRAY) == SOURCE_SORTED
    assert heap_sort(SOURCE_ARRAY) == SOURCE_SORTED
    assert insertion_sort(SOURCE_ARRAY) == SOURCE_SORTED
    assert quick_sort(SOURCE_ARRAY) == SOURCE_SORTED
    assert selection_sort(SOURCE_ARRAY) == SOURCE_SORTED


def test_heap_sort_source_example():
    assert heap_sort([12, 11, 13, 5, 6, 7]) == [5, 6, 7, 11, 12, 13]


@pytest.mark.parametrize(
    "name",
    ["bubble", "heap", "insertion", "quick", "selection"],
)
def test_input_not_mutated(name):
    values = [12, 11, 13, 5, 6, 7]
    snapshot = list(values)
    if name == "bubble":
        result = bubble_sort(values)
    elif name == "heap":
        result = heap_sort(values)
    elif name == "insertion":
        result = insertion_sort(values)
    elif name == "quick":
        result = quick_sort(values)
    else:
        result = selection_sort(values)
    assert values == snapshot
    assert result == [5, 6, 7, 11, 12, 13]


def test_empty_and_single():
    assert bubble_sort([]) == []
    assert heap_sort([]) == []
    assert insertion_sort([]) == []
    assert quick_sort([]) == []
    assert selection_sort([]) == []
    assert bubble_sort([3]) == [3]
    assert heap_sort([3]) == [3]
    assert insertion_sort([3]) == [3]
    assert quick_sort([3]) == [3]
    assert selection_sort([3]) == [3]


def test_accepts_any_iterable():
    assert bubble_sort(iter((3, 1, 2))) == [1, 2, 3]
    assert heap_sort(iter((3, 1, 2))) == [1, 2, 3]
    assert insertion_sort(iter((3, 1, 2))) == [1, 2, 3]
    assert quick_sort(iter((3, 1, 2))) == [1, 2, 3]
    assert selection_sort(iter((3, 1, 2))) == [1, 2, 3]


def test_quick_sort_large_sorted_input():
    values = list(range(5000))
    assert quick_sort(values) == values