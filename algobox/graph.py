"""Graphs stored as adjacency lists, breadth-first search and path matrices."""

from __future__ import annotations

from collections import deque
from collections.abc import Sequence

from .matrix import multiply

__all__ = [
    "Graph",
    "is_strongly_connected",
    "path_count_matrices",
    "path_matrix",
]


class Graph:
    """A graph on vertices 0..vertices-1, directed or undirected."""

    def __init__(self, vertices: int, directed: bool = False) -> None:
        if vertices < 0:
            raise ValueError("number of vertices must not be negative")
        self.vertices = vertices
        self.directed = directed
        self._adjacency: list[list[int]] = [[] for _ in range(vertices)]

    def __len__(self) -> int:
        return self.vertices

    def _check_vertex(self, vertex: int) -> None:
        if not 0 <= vertex < self.vertices:
            raise ValueError(f"invalid vertex {vertex}")

    def add_edge(self, source: int, destination: int) -> None:
        """Add an edge; an undirected graph records it in both directions."""
        self._check_vertex(source)
        self._check_vertex(destination)
        self._adjacency[source].append(destination)
        if not self.directed:
            self._adjacency[destination].append(source)

    def neighbours(self, vertex: int) -> list[int]:
        """Return the vertices reachable from vertex by one edge, in insertion order."""
        self._check_vertex(vertex)
        return list(self._adjacency[vertex])

    def adjacency_matrix(self) -> list[list[int]]:
        """Return the 0/1 adjacency matrix of the graph."""
        matrix = [[0] * self.vertices for _ in range(self.vertices)]
        for source, targets in enumerate(self._adjacency):
            for target in targets:
                matrix[source][target] = 1
        return matrix

    def bfs(self) -> list[int]:
        """Return a breadth-first ordering that covers every component."""
        visited = [False] * self.vertices
        order: list[int] = []
        for start in range(self.vertices):
            if visited[start]:
                continue
            visited[start] = True
            queue = deque([start])
            while queue:
                node = queue.popleft()
                order.append(node)
                for neighbour in self._adjacency[node]:
                    if not visited[neighbour]:
                        visited[neighbour] = True
                        queue.append(neighbour)
        return order


def _require_square(adjacency: Sequence[Sequence[int]]) -> int:
    size = len(adjacency)
    if any(len(row) != size for row in adjacency):
        raise ValueError("adjacency matrix must be square")
    return size


def path_count_matrices(adjacency: Sequence[Sequence[int]]) -> list[list[list[int]]]:
    """Return A, A^2, ..., A^n: entry [k][i][j] counts paths of length k+1."""
    size = _require_square(adjacency)
    if size == 0:
        return []
    base = [list(row) for row in adjacency]
    powers = [base]
    for _ in range(1, size):
        powers.append(multiply(powers[-1], base))
    return powers


def path_matrix(adjacency: Sequence[Sequence[int]]) -> list[list[int]]:
    """Return 1 where some path of length 1..n joins i to j, else 0."""
    size = _require_square(adjacency)
    powers = path_count_matrices(adjacency)
    return [
        [1 if any(power[i][j] for power in powers) else 0 for j in range(size)]
        for i in range(size)
    ]


def is_strongly_connected(adjacency: Sequence[Sequence[int]]) -> bool:
    """Return True when every entry of the path matrix is 1."""
    return all(all(row) for row in path_matrix(adjacency))