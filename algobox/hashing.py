"""Hash tables with open addressing and with separate chaining."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

__all__ = [
    "LinearProbingTable",
    "PlusThreeProbingTable",
    "QuadraticProbingTable",
    "SeparateChainingTable",
    "TableFullError",
    "partition_by_mod",
]


class TableFullError(Exception):
    """Raised when no free slot can be found for an item."""


def partition_by_mod(values: Iterable[int], modulus: int = 3) -> dict[int, list[int]]:
    """Group values by their remainder modulo modulus, keeping input order."""
    if modulus <= 0:
        raise ValueError("modulus must be positive")
    buckets: dict[int, list[int]] = {remainder: [] for remainder in range(modulus)}
    for value in values:
        buckets[value % modulus].append(value)
    return buckets


class _OpenAddressingTable:
    """Fixed-size table whose probe sequence is given by subclasses."""

    default_size = 10

    def __init__(self, size: int | None = None) -> None:
        size = self.default_size if size is None else size
        if size <= 0:
            raise ValueError("table size must be positive")
        self.size = size
        self.slots: list[int | None] = [None] * size

    def __len__(self) -> int:
        return sum(slot is not None for slot in self.slots)

    def __contains__(self, item: object) -> bool:
        return isinstance(item, int) and self.search(item) is not None

    def __str__(self) -> str:
        return " ".join("~" if slot is None else str(slot) for slot in self.slots)

    def _probe(self, item: int) -> Iterator[int]:
        raise NotImplementedError

    def insert(self, item: int) -> int:
        """Store item in the first free slot of its probe sequence; return the slot."""
        for index in self._probe(item):
            if self.slots[index] is None:
                self.slots[index] = item
                return index
        raise TableFullError(f"no free slot for {item}")

    def search(self, item: int) -> int | None:
        """Return the slot holding item, or None."""
        return next((index for index in self._probe(item) if self.slots[index] == item), None)

    def delete(self, item: int) -> int:
        """Empty the slot holding item and return it; raise KeyError if absent."""
        index = self.search(item)
        if index is None:
            raise KeyError(item)
        self.slots[index] = None
        return index


class LinearProbingTable(_OpenAddressingTable):
    """Open addressing that steps one slot at a time, wrapping round."""

    def _probe(self, item: int) -> Iterator[int]:
        start = item % self.size
        for step in range(self.size):
            yield (start + step) % self.size

    def insert(self, item: int) -> int:
        """Store item in the next free slot from its home slot; return the slot."""
        return super().insert(item)

    def search(self, item: int) -> int | None:
        """Return the slot holding item, or None."""
        return super().search(item)

    def delete(self, item: int) -> int:
        """Empty the slot holding item and return it; raise KeyError if absent."""
        return super().delete(item)


class QuadraticProbingTable(_OpenAddressingTable):
    """Open addressing that tries slots home + i*i for i in 0..size-1."""

    def _probe(self, item: int) -> Iterator[int]:
        start = item % self.size
        for step in range(self.size):
            yield (start + step * step) % self.size

    def insert(self, item: int) -> int:
        """Store item in the first free quadratic probe slot; return the slot."""
        return super().insert(item)

    def search(self, item: int) -> int | None:
        """Return the slot holding item, or None."""
        return super().search(item)

    def delete(self, item: int) -> int:
        """Empty the slot holding item and return it; raise KeyError if absent."""
        return super().delete(item)


class PlusThreeProbingTable(_OpenAddressingTable):
    """Open addressing that steps three slots at a time until back at home."""

    default_size = 11

    def _probe(self, item: int) -> Iterator[int]:
        start = item % self.size
        yield start
        index = (start + 3) % self.size
        while index != start:
            yield index
            index = (index + 3) % self.size

    def insert(self, item: int) -> int:
        """Store item in the first free slot three steps apart; return the slot."""
        return super().insert(item)


class SeparateChainingTable:
    """Hash table whose buckets are chains of items in insertion order."""

    def __init__(self, size: int = 10) -> None:
        if size <= 0:
            raise ValueError("table size must be positive")
        self.size = size
        self.buckets: list[list[int]] = [[] for _ in range(size)]

    def __len__(self) -> int:
        return sum(len(bucket) for bucket in self.buckets)

    def __contains__(self, item: object) -> bool:
        return isinstance(item, int) and self.search(item) is not None

    def insert(self, item: int) -> int:
        """Append item to its bucket's chain; return the bucket index."""
        index = item % self.size
        self.buckets[index].append(item)
        return index

    def search(self, item: int) -> tuple[int, int] | None:
        """Return (bucket index, 1-based chain position) of item, or None."""
        index = item % self.size
        chain = self.buckets[index]
        if item not in chain:
            return None
        return index, chain.index(item) + 1

    def delete(self, item: int) -> tuple[int, int]:
        """Remove the first occurrence of item; return where it was."""
        location = self.search(item)
        if location is None:
            raise KeyError(item)
        index, position = location
        del self.buckets[index][position - 1]
        return location