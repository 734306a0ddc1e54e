"""A LIFO stack with an optional capacity and an interactive menu."""

from __future__ import annotations

import argparse
from collections.abc import Iterator
from typing import Any

__all__ = ["DEFAULT_CAPACITY", "Stack", "StackEmptyError", "StackFullError", "main"]

DEFAULT_CAPACITY = 100


class StackEmptyError(IndexError):
    """Raised when an item is taken from an empty stack."""


class StackFullError(OverflowError):
    """Raised when an item is pushed onto a full stack."""


class Stack:
    """A stack holding at most capacity items; capacity None means unbounded."""

    def __init__(self, capacity: int | None = DEFAULT_CAPACITY) -> None:
        if capacity is not None and capacity <= 0:
            raise ValueError("capacity must be positive")
        self.capacity = capacity
        self._items: list[Any] = []

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        """Iterate from the top of the stack to its bottom."""
        return iter(self._items[::-1])

    def __repr__(self) -> str:
        return f"Stack({self._items!r}, capacity={self.capacity!r})"

    def is_empty(self) -> bool:
        """Return True when the stack holds no items."""
        return not self._items

    def is_full(self) -> bool:
        """Return True when no further item can be pushed."""
        return self.capacity is not None and len(self._items) >= self.capacity

    def push(self, item: Any) -> None:
        """Place item on top of the stack."""
        if self.is_full():
            raise StackFullError("stack is full")
        self._items.append(item)

    def pop(self) -> Any:
        """Remove and return the top item."""
        if not self._items:
            raise StackEmptyError("stack is empty")
        return self._items.pop()

    def peek(self) -> Any:
        """Return the top item without removing it."""
        if not self._items:
            raise StackEmptyError("stack is empty")
        return self._items[-1]


_MENU = (
    "\nOperations performed by Stack\n"
    "1. Push the element\n"
    "2. Pop the element\n"
    "3. Show\n"
    "4. isEmpty\n"
    "5. isFull\n"
    "6. End"
)


def _parse_int(text: str) -> int | None:
    try:
        return int(text.strip())
    except ValueError:
        return None


def _run_choice(stack: Stack, choice: int | None) -> bool:
    """Carry out one menu choice; return False when the session should end."""
    if choice == 1:
        value = _parse_int(input("Enter a value to push: "))
        if value is None:
            print("invalid value!")
            return True
        try:
            stack.push(value)
        except StackFullError:
            print("Stack is overflow!")
    elif choice == 2:
        try:
            print(f"{stack.pop()} was popped!")
        except StackEmptyError:
            print("stack is Underflow!")
    elif choice == 3:
        if stack.is_empty():
            print("stack underflow!")
        else:
            print(" ".join(str(item) for item in stack))
    elif choice == 4:
        print("stack is Empty!" if stack.is_empty() else "stack is not empty!")
    elif choice == 5:
        print("stack is Full!" if stack.is_full() else "stack is not full!")
    elif choice == 6:
        return False
    else:
        print("invalid choice!")
    return True


def main(argv: list[str] | None = None) -> int:
    """Run the interactive stack menu on standard input and output."""
    parser = argparse.ArgumentParser(
        prog="algobox-stack", description="Interactive stack of integers."
    )
    parser.add_argument(
        "--capacity",
        type=int,
        default=DEFAULT_CAPACITY,
        help="maximum number of items (default: %(default)s)",
    )
    args = parser.parse_args(argv)
    if args.capacity <= 0:
        parser.error("capacity must be positive")

    stack = Stack(args.capacity)
    while True:
        print(_MENU)
        try:
            choice = _parse_int(input("\nEnter the choice: "))
            if not _run_choice(stack, choice):
                return 0
        except EOFError:
            return 0