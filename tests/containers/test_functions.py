"""
Tests for the free functions and factories.
"""

import numpy as np
import pytest

from pymu import DimensionError, Matrix, ValidationError, Vector
from pymu.containers import (
    Matrix2x2,
    Matrix3x3,
    MatrixNxN,
    det,
    diag,
    dot,
    eye,
    ones,
    transpose,
    zeros,
)


# ═══════════════════════════════════════════════════════════════════════
# Free-function forms
# ═══════════════════════════════════════════════════════════════════════


class TestFreeFunctions:

    def test_dot_vectors(self):
        assert dot(Vector[2, int](1, 2), Vector[2, int](3, 4)) == 11

    def test_dot_requested_type(self):
        result = dot(Vector[2, int](1, 2), Vector[2, np.float32](3.5, 4.5), dtype=np.float32)
        assert result == 12.5

    def test_dot_matrices(self, int_matrix):
        b = Matrix[3, 2, int]([3, 4], [5, 6], [7, 8])
        assert dot(int_matrix, b) == Matrix[2, 2, int]([34, 40], [79, 94])

    def test_dot_invalid(self):
        with pytest.raises(ValidationError):
            dot([1, 2], Vector[2, int](1, 2))

    def test_transpose(self, int_matrix):
        assert transpose(int_matrix) == int_matrix.transpose()

    def test_det(self):
        assert det(Matrix[2, 2, int]([4, 7], [2, 6])) == 10


class TestDiag:

    def test_matrix_diagonal(self):
        m = Matrix[3, 3, int]([1, 2, 3], [4, 5, 6], [7, 8, 9])
        assert list(diag(m)) == [1, 5, 9]

    def test_vector_to_matrix(self):
        m = diag(Vector[3, float](1, 2, 3))
        assert type(m) is Matrix[3, 3, float]
        np.testing.assert_array_equal(np.asarray(m), np.diag([1.0, 2.0, 3.0]))

    def test_round_trip(self, int_vector):
        assert diag(diag(int_vector)) == int_vector

    def test_invalid(self):
        with pytest.raises(ValidationError):
            diag(np.eye(2))


# ═══════════════════════════════════════════════════════════════════════
# Factories
# ═══════════════════════════════════════════════════════════════════════


class TestFactories:

    def test_ones_vector(self):
        v = ones(3)
        assert type(v) is Vector[3, int]
        assert list(v) == [1, 1, 1]

    def test_zeros_matrix(self):
        m = zeros(2, 3, dtype=np.float32)
        assert type(m) is Matrix[2, 3, np.float32]
        assert m.sum() == 0

    def test_eye(self):
        np.testing.assert_array_equal(np.asarray(eye(3)), np.eye(3, dtype=int))

    def test_eye_is_identity(self, int_matrix):
        assert int_matrix.dot(eye(3)) == int_matrix

    def test_bad_shape(self):
        with pytest.raises(DimensionError):
            ones(2, 2, 2)
        with pytest.raises(DimensionError):
            zeros()

    def test_square_aliases(self):
        assert Matrix2x2() is Matrix[2, 2, float]
        assert Matrix3x3(np.float32) is Matrix[3, 3, np.float32]
        assert MatrixNxN(4, int) is Matrix[4, 4, int]
