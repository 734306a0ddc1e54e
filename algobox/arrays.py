"""Everyday operations on lists of integers."""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from . import searching as _searching
from . import sorting as _sorting

__all__ = [
    "ArrayStats",
    "binary_search",
    "bubble_sort",
    "concatenate",
    "delete_middle",
    "delete_value",
    "find_duplicate",
    "flatten",
    "insert_at",
    "insert_sorted",
    "merge_sorted",
    "second_largest",
    "summarize",
]


@dataclass(frozen=True)
class ArrayStats:
    """Summary figures for a non-empty list of integers."""

    maximum: int
    minimum: int
    total: int
    average: float
    sines: tuple[tuple[int, float], ...]


def flatten(matrix: Iterable[Iterable[int]]) -> list[int]:
    """Return the elements of a two-dimensional matrix in row-major order."""
    return [value for row in matrix for value in row]


def binary_search(items: Sequence[int], target: int):
    """Search an ascending sequence for target by halving the range."""
    return _searching.binary_search(items, target)


def bubble_sort(items: Iterable[int]):
    """Sort items in ascending order by repeated adjacent swaps."""
    return _sorting.bubble_sort(items)


def delete_value(items: Sequence[int], value: int) -> list[int]:
    """Return a copy of items without the first occurrence of value."""
    result = list(items)
    try:
        result.remove(value)
    except ValueError:
        raise ValueError(f"{value} is not in the list") from None
    return result


def delete_middle(items: Sequence[int]) -> tuple[list[int], int]:
    """Remove the element at index len//2; return the remaining list and it."""
    if not items:
        raise IndexError("cannot delete from an empty list")
    middle = len(items) // 2
    result = list(items)
    deleted = result.pop(middle)
    return result, deleted


def find_duplicate(items: Sequence[int]) -> tuple[int, int] | None:
    """Return the first pair of indices holding equal values, or None."""
    first_seen: dict[int, int] = {}
    pairs: dict[int, int] = {}
    for index, value in enumerate(items):
        if value in first_seen:
            pairs.setdefault(first_seen[value], index)
        else:
            first_seen[value] = index
    if not pairs:
        return None
    first = min(pairs)
    return first, pairs[first]


def insert_sorted(items: Sequence[int], value: int) -> list[int]:
    """Insert value before the first element greater than it."""
    position = next(
        (index for index, item in enumerate(items) if item > value), len(items)
    )
    result = list(items)
    result.insert(position, value)
    return result


def insert_at(items: Sequence[int], index: int, value: int) -> list[int]:
    """Return a copy of items with value placed at index."""
    if not 0 <= index <= len(items):
        raise IndexError(f"position {index} is outside 0..{len(items)}")
    result = list(items)
    result.insert(index, value)
    return result


def concatenate(first: Iterable[int], second: Iterable[int]) -> list[int]:
    """Return the elements of first followed by those of second."""
    return [*first, *second]


def merge_sorted(first: Sequence[int], second: Sequence[int]) -> list[int]:
    """Merge two ascending sequences into one ascending list."""
    merged: list[int] = []
    i = j = 0
    while i < len(first) and j < len(second):
        if first[i] < second[j]:
            merged.append(first[i])
            i += 1
        else:
            merged.append(second[j])
            j += 1
    merged.extend(first[i:])
    merged.extend(second[j:])
    return merged


def second_largest(items: Iterable[int]) -> int:
    """Return the largest value below the maximum, or the maximum if all are equal."""
    values = list(items)
    if not values:
        raise ValueError("second_largest() of an empty list")
    largest = max(values)
    return max((value for value in values if value != largest), default=largest)


def summarize(items: Iterable[int]) -> ArrayStats:
    """Compute maximum, minimum, total, average and per-element sines."""
    values = list(items)
    if not values:
        raise ValueError("summarize() of an empty list")
    total = sum(values)
    return ArrayStats(
        maximum=max(values),
        minimum=min(values),
        total=total,
        average=total / len(values),
        sines=tuple((value, math.sin(value)) for value in values),
    )