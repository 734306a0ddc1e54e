"""Simple comparison sorts that return new sorted lists."""

from __future__ import annotations

from collections.abc import Iterable


def bubble_sort(items: Iterable[int]) -> list[int]:
    """Return a new list with the items in ascending order, using bubble sort."""
    result = list(items)
    size = len(result)
    for sorted_tail in range(size - 1):
        for j in range(size - sorted_tail - 1):
            if result[j] > result[j + 1]:
                result[j], result[j + 1] = result[j + 1], result[j]
    return result


def insertion_sort(items: Iterable[int]) -> list[int]:
    """Return a new list with the items in ascending order, using insertion sort."""
    result = list(items)
    for i in range(1, len(result)):
        key = result[i]
        j = i - 1
        while j >= 0 and result[j] > key:
            result[j + 1] = result[j]
            j -= 1
        result[j + 1] = key
    return result