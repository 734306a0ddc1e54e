import pytest

from algobox.matrix import (
    add,
    determinant_3x3,
    inverse_3x3,
    multiply,
    subtract,
    transpose,
)

IDENTITY = [[1, 0, 0], [0, 1, 0], [0, 0, 1]]
SAMPLE = [[100, 33, 31], [45, 77, 14], [70, 47, 75]]


def test_add_then_subtract_round_trip():
    a = [[1, 2], [3, 4]]
    b = [[5, -6], [7, 0]]
    assert subtract(add(a, b), b) == a


def test_add_is_commutative():
    a = [[1, 2, 3]]
    b = [[4, 5, 6]]
    assert add(a, b) == add(b, a)


def test_subtract_self_is_zero():
    a = [[1, 2], [3, 4]]
    assert subtract(a, a) == [[0, 0], [0, 0]]


@pytest.mark.parametrize("operation", [add, subtract])
def test_shape_mismatch_raises(operation):
    with pytest.raises(ValueError):
        operation([[1, 2]], [[1], [2]])


def test_ragged_matrix_raises():
    with pytest.raises(ValueError):
        transpose([[1, 2], [3]])


def test_multiply_by_identity():
    assert multiply(SAMPLE, IDENTITY) == SAMPLE
    assert multiply(IDENTITY, SAMPLE) == SAMPLE


def test_multiply_shape():
    a = [[1, 2, 3], [4, 5, 6]]
    b = [[1, 2], [3, 4], [5, 6]]
    result = multiply(a, b)
    assert len(result) == 2
    assert all(len(row) == 2 for row in result)


def test_multiply_transpose_identity():
    a = [[1, 2, 3], [4, 5, 6]]
    b = [[7, 8], [9, 10], [11, 12]]
    assert transpose(multiply(a, b)) == multiply(transpose(b), transpose(a))


def test_multiply_incompatible_raises():
    with pytest.raises(ValueError):
        multiply([[1, 2]], [[1, 2]])


def test_transpose_documented_example():
    matrix = [[1, 2, 3], [4, 5, 6], [7, 8, 9]]
    assert transpose(matrix) == [[1, 4, 7], [2, 5, 8], [3, 6, 9]]


def test_transpose_round_trip_non_square():
    matrix = [[1, 2, 3], [4, 5, 6]]
    assert transpose(transpose(matrix)) == matrix
    assert len(transpose(matrix)) == 3


def test_determinant_identity():
    assert determinant_3x3(IDENTITY) == 1


def test_determinant_triangular():
    assert determinant_3x3([[2, 1, 3], [0, 4, 5], [0, 0, 6]]) == 48


def test_determinant_equal_rows_is_zero():
    assert determinant_3x3([[1, 2, 3], [1, 2, 3], [4, 5, 6]]) == 0


def test_inverse_times_matrix_is_identity():
    inverse = inverse_3x3(SAMPLE)
    product = multiply(SAMPLE, inverse)
    for row, expected_row in zip(product, IDENTITY):
        assert row == pytest.approx(expected_row, abs=1e-9)


def test_inverse_singular_raises():
    with pytest.raises(ValueError):
        inverse_3x3([[1, 2, 3], [2, 4, 6], [0, 1, 1]])


def test_inverse_requires_3x3():
    with pytest.raises(ValueError):
        inverse_3x3([[1, 2], [3, 4]])