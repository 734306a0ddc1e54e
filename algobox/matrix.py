"""Basic matrix arithmetic on lists of lists."""

from __future__ import annotations

from collections.abc import Sequence

Matrix = list[list[float]]


def _shape(matrix: Sequence[Sequence[float]]) -> tuple[int, int]:
    rows = len(matrix)
    cols = len(matrix[0]) if rows else 0
    if any(len(row) != cols for row in matrix):
        raise ValueError("matrix rows have different lengths")
    return rows, cols


def _require_same_shape(first, second) -> None:
    if _shape(first) != _shape(second):
        raise ValueError("matrices must have the same dimensions")


def add(first: Sequence[Sequence[float]], second: Sequence[Sequence[float]]) -> Matrix:
    """Return the element-wise sum of two equally sized matrices."""
    _require_same_shape(first, second)
    return [[a + b for a, b in zip(row_a, row_b)] for row_a, row_b in zip(first, second)]


def subtract(
    first: Sequence[Sequence[float]], second: Sequence[Sequence[float]]
) -> Matrix:
    """Return the element-wise difference of two equally sized matrices."""
    _require_same_shape(first, second)
    return [[a - b for a, b in zip(row_a, row_b)] for row_a, row_b in zip(first, second)]


def multiply(
    first: Sequence[Sequence[float]], second: Sequence[Sequence[float]]
) -> Matrix:
    """Return the matrix product first x second."""
    _, inner = _shape(first)
    rows_second, _ = _shape(second)
    if inner != rows_second:
        raise ValueError("matrix multiplication is not possible for these shapes")
    columns = list(zip(*second))
    return [
        [sum(a * b for a, b in zip(row, column)) for column in columns]
        for row in first
    ]


def transpose(matrix: Sequence[Sequence[float]]) -> Matrix:
    """Return the transpose of a matrix."""
    _shape(matrix)
    return [list(column) for column in zip(*matrix)]


def _require_3x3(matrix: Sequence[Sequence[float]]) -> None:
    if _shape(matrix) != (3, 3):
        raise ValueError("a 3x3 matrix is required")


def _cofactor(matrix: Sequence[Sequence[float]], i: int, j: int) -> float:
    a = matrix
    return (
        a[(i + 1) % 3][(j + 1) % 3] * a[(i + 2) % 3][(j + 2) % 3]
        - a[(i + 1) % 3][(j + 2) % 3] * a[(i + 2) % 3][(j + 1) % 3]
    )


def determinant_3x3(matrix: Sequence[Sequence[float]]) -> float:
    """Return the determinant of a 3x3 matrix."""
    _require_3x3(matrix)
    return sum(matrix[0][j] * _cofactor(matrix, 0, j) for j in range(3))


def inverse_3x3(matrix: Sequence[Sequence[float]]) -> list[list[float]]:
    """Return the inverse of a 3x3 matrix; raise ValueError if it is singular."""
    determinant = determinant_3x3(matrix)
    if determinant == 0:
        raise ValueError("matrix is singular and has no inverse")
    return [
        [_cofactor(matrix, j, i) / determinant for j in range(3)] for i in range(3)
    ]