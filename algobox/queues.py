"""FIFO queues: a fixed array queue, a circular buffer and an unbounded queue."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from typing import Any

__all__ = [
    "ArrayQueue",
    "CircularQueue",
    "LinkedQueue",
    "QueueEmptyError",
    "QueueFullError",
]


class QueueEmptyError(IndexError):
    """Raised when an item is taken from an empty queue."""


class QueueFullError(OverflowError):
    """Raised when an item is added to a queue with no room left."""


class _DequeQueue:
    """Shared behaviour of queues that keep their items in a deque."""

    def __init__(self) -> None:
        self._items: deque[Any] = deque()

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        """Iterate from the front of the queue to its rear."""
        return iter(list(self._items))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self._items)!r})"

    def _is_empty(self) -> bool:
        return not self._items

    def _peek(self) -> Any:
        if not self._items:
            raise QueueEmptyError("queue is empty")
        return self._items[0]

    def _dequeue(self) -> Any:
        if not self._items:
            raise QueueEmptyError("queue is empty")
        return self._items.popleft()


class ArrayQueue(_DequeQueue):
    """A linear array queue of fixed capacity.

    Slots freed at the front are not reused until the queue becomes empty,
    so the queue can report full while holding fewer than capacity items.
    """

    def __init__(self, capacity: int = 5) -> None:
        if capacity <= 0:
            raise ValueError("capacity must be positive")
        super().__init__()
        self.capacity = capacity
        self._used = 0

    def is_empty(self) -> bool:
        """Return True when the queue holds no items."""
        return self._is_empty()

    def is_full(self) -> bool:
        """Return True when the rear has reached the last slot."""
        return self._used == self.capacity

    def peek(self) -> Any:
        """Return the front item without removing it."""
        return self._peek()

    def enqueue(self, item: Any) -> None:
        """Add item at the rear."""
        if self.is_full():
            raise QueueFullError("queue is full")
        self._items.append(item)
        self._used += 1

    def dequeue(self) -> Any:
        """Remove and return the front item; an emptied queue starts afresh."""
        item = self._dequeue()
        if not self._items:
            self._used = 0
        return item


class CircularQueue(_DequeQueue):
    """A circular buffer queue of fixed capacity."""

    def __init__(self, capacity: int = 5) -> None:
        if capacity <= 0:
            raise ValueError("capacity must be positive")
        super().__init__()
        self.capacity = capacity

    def is_empty(self) -> bool:
        """Return True when the queue holds no items."""
        return self._is_empty()

    def is_full(self) -> bool:
        """Return True when every slot holds an item."""
        return len(self._items) == self.capacity

    def peek(self) -> Any:
        """Return the front item without removing it."""
        return self._peek()

    def enqueue(self, item: Any) -> None:
        """Add item at the rear."""
        if self.is_full():
            raise QueueFullError("queue is full")
        self._items.append(item)

    def dequeue(self) -> Any:
        """Remove and return the front item."""
        return self._dequeue()


class LinkedQueue(_DequeQueue):
    """An unbounded queue."""

    def is_empty(self) -> bool:
        """Return True when the queue holds no items."""
        return self._is_empty()

    def peek(self) -> Any:
        """Return the front item without removing it."""
        return self._peek()

    def enqueue(self, item: Any) -> None:
        """Add item at the rear."""
        self._items.append(item)

    def dequeue(self) -> Any:
        """Remove and return the front item."""
        return self._dequeue()