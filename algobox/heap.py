"""Max-heaps kept in Python lists."""

from __future__ import annotations

from collections.abc import Iterable

__all__ = ["MaxHeap", "build_max_heap"]


def _sift_down(items: list[int], index: int, size: int) -> None:
    while True:
        largest = index
        for child in (2 * index + 1, 2 * index + 2):
            if child < size and items[child] > items[largest]:
                largest = child
        if largest == index:
            return
        items[index], items[largest] = items[largest], items[index]
        index = largest


def build_max_heap(values: Iterable[int]) -> list[int]:
    """Return the values arranged as a max-heap by bottom-up heapify."""
    items = list(values)
    size = len(items)
    for index in range(size // 2 - 1, -1, -1):
        _sift_down(items, index, size)
    return items


class MaxHeap:
    """A binary max-heap supporting insertion and removal of the root."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._items: list[int] = []
        for value in values:
            self.insert(value)

    def __len__(self) -> int:
        return len(self._items)

    @property
    def items(self) -> list[int]:
        """The heap's array, root first."""
        return list(self._items)

    def peek(self) -> int:
        """Return the largest value without removing it."""
        if not self._items:
            raise IndexError("heap is empty")
        return self._items[0]

    def insert(self, value: int) -> None:
        """Add value and restore the heap order upwards."""
        items = self._items
        items.append(value)
        index = len(items) - 1
        while index > 0:
            parent = (index - 1) // 2
            if items[parent] >= items[index]:
                break
            items[parent], items[index] = items[index], items[parent]
            index = parent

    def delete_root(self) -> int:
        """Remove and return the largest value."""
        if not self._items:
            raise IndexError("heap is empty")
        root = self._items[0]
        last = self._items.pop()
        if self._items:
            self._items[0] = last
            _sift_down(self._items, 0, len(self._items))
        return root