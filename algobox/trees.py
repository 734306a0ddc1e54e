"""Binary trees: nodes, traversals, a binary search tree and a complete binary tree."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

__all__ = [
    "BinarySearchTree",
    "BinaryTree",
    "Node",
    "inorder",
    "level_order",
    "postorder",
    "preorder",
]


@dataclass
class Node:
    """A binary tree node holding a value and up to two children."""

    value: int
    left: Node | None = None
    right: Node | None = None

    def add_left(self, value: int) -> Node:
        """Attach a new left child holding value and return it."""
        self.left = Node(value)
        return self.left

    def add_right(self, value: int) -> Node:
        """Attach a new right child holding value and return it."""
        self.right = Node(value)
        return self.right


def inorder(node: Node | None) -> list[int]:
    """Return the values of the tree in left, root, right order."""
    result: list[int] = []
    stack: list[Node] = []
    current = node
    while stack or current is not None:
        while current is not None:
            stack.append(current)
            current = current.left
        current = stack.pop()
        result.append(current.value)
        current = current.right
    return result


def preorder(node: Node | None) -> list[int]:
    """Return the values of the tree in root, left, right order."""
    result: list[int] = []
    stack = [node] if node is not None else []
    while stack:
        current = stack.pop()
        result.append(current.value)
        if current.right is not None:
            stack.append(current.right)
        if current.left is not None:
            stack.append(current.left)
    return result


def postorder(node: Node | None) -> list[int]:
    """Return the values of the tree in left, right, root order."""
    reversed_order: list[int] = []
    stack = [node] if node is not None else []
    while stack:
        current = stack.pop()
        reversed_order.append(current.value)
        if current.left is not None:
            stack.append(current.left)
        if current.right is not None:
            stack.append(current.right)
    return reversed_order[::-1]


def _level_nodes(node: Node | None) -> Iterator[Node]:
    queue = deque([node] if node is not None else [])
    while queue:
        current = queue.popleft()
        yield current
        if current.left is not None:
            queue.append(current.left)
        if current.right is not None:
            queue.append(current.right)


def level_order(node: Node | None) -> list[int]:
    """Return the values of the tree level by level, left to right."""
    return [current.value for current in _level_nodes(node)]


class BinarySearchTree:
    """An unbalanced binary search tree.

    Values smaller than a node go to its left. Equal values go to the right
    when allow_duplicates is true and are ignored otherwise.
    """

    def __init__(
        self, values: Iterable[int] = (), *, allow_duplicates: bool = True
    ) -> None:
        self.root: Node | None = None
        self.allow_duplicates = allow_duplicates
        for value in values:
            self.insert(value)

    def __len__(self) -> int:
        return sum(1 for _ in _level_nodes(self.root))

    def __iter__(self) -> Iterator[int]:
        """Iterate over the values in ascending order."""
        return iter(inorder(self.root))

    def __contains__(self, value: object) -> bool:
        current = self.root
        while current is not None:
            if current.value == value:
                return True
            current = current.left if value < current.value else current.right
        return False

    def insert(self, value: int) -> bool:
        """Insert value; return False if it was an ignored duplicate."""
        new_node = Node(value)
        if self.root is None:
            self.root = new_node
            return True
        current = self.root
        while True:
            if value == current.value and not self.allow_duplicates:
                return False
            if value < current.value:
                if current.left is None:
                    current.left = new_node
                    return True
                current = current.left
            else:
                if current.right is None:
                    current.right = new_node
                    return True
                current = current.right

    def min_value(self) -> int:
        """Return the smallest value in the tree."""
        if self.root is None:
            raise ValueError("min_value() of an empty tree")
        current = self.root
        while current.left is not None:
            current = current.left
        return current.value

    def delete(self, value: int) -> None:
        """Remove one occurrence of value; raise KeyError if it is absent.

        A node with two children takes the smallest value of its right
        subtree, and that value's node is removed instead.
        """
        parent: Node | None = None
        node = self.root
        while node is not None and node.value != value:
            parent = node
            node = node.left if value < node.value else node.right
        if node is None:
            raise KeyError(value)

        if node.left is not None and node.right is not None:
            successor_parent = node
            successor = node.right
            while successor.left is not None:
                successor_parent = successor
                successor = successor.left
            node.value = successor.value
            if successor_parent is node:
                node.right = successor.right
            else:
                successor_parent.left = successor.right
            return

        child = node.left if node.left is not None else node.right
        if parent is None:
            self.root = child
        elif parent.left is node:
            parent.left = child
        else:
            parent.right = child


class BinaryTree:
    """A binary tree filled level by level, left to right."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self.root: Node | None = None
        for value in values:
            self.insert(value)

    def __len__(self) -> int:
        return sum(1 for _ in _level_nodes(self.root))

    def __iter__(self) -> Iterator[int]:
        """Iterate over the values in level order."""
        return iter(level_order(self.root))

    def insert(self, value: int) -> Node:
        """Place value in the first free position in level order; return its node."""
        new_node = Node(value)
        if self.root is None:
            self.root = new_node
            return new_node
        for current in _level_nodes(self.root):
            if current.left is None:
                current.left = new_node
                return new_node
            if current.right is None:
                current.right = new_node
                return new_node
        raise AssertionError("a finite tree always has a free position")