"""Factorial, Fibonacci numbers and the Tower of Hanoi."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass


@dataclass(frozen=True)
class Move:
    """One Tower of Hanoi move of a disk between two pegs."""

    disk: int
    source: str
    target: str

    def __str__(self) -> str:
        return f"disk {self.disk} moved from {self.source} to {self.target}"


def factorial(n: int) -> int:
    """Return n! for a non-negative integer n."""
    if n < 0:
        raise ValueError("factorial is defined only for non-negative integers")
    if n == 0:
        return 1
    return n * factorial(n - 1)


def fibonacci(n: int) -> int:
    """Return the n-th Fibonacci number, with fibonacci(0) == 0."""
    if n < 0:
        raise ValueError("fibonacci is defined only for non-negative integers")
    current, following = 0, 1
    for _ in range(n):
        current, following = following, current + following
    return current


def fibonacci_sequence(n: int) -> list[int]:
    """Return the Fibonacci numbers F(0) through F(n)."""
    if n < 0:
        raise ValueError("fibonacci is defined only for non-negative integers")
    sequence = [0, 1]
    while len(sequence) <= n:
        sequence.append(sequence[-1] + sequence[-2])
    return sequence[: n + 1]


def _hanoi(disks: int, start: str, end: str, aux: str) -> Iterator[Move]:
    if disks == 0:
        return
    yield from _hanoi(disks - 1, start, aux, end)
    yield Move(disks, start, end)
    yield from _hanoi(disks - 1, aux, end, start)


def hanoi_moves(
    disks: int, start: str = "a", end: str = "b", aux: str = "c"
) -> Iterator[Move]:
    """Yield the moves that carry a tower of disks from start to end."""
    if disks < 0:
        raise ValueError("number of disks must not be negative")
    return _hanoi(disks, start, end, aux)