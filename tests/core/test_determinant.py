"""
Tests for the cofactor-expansion determinant.

Validates:
    - Known values for 1x1 through 4x4 matrices
    - Exact integral results and computation in the requested type
    - Agreement with numpy.linalg.det on random floating matrices
    - Rejection of non-square input
"""

import numpy as np
import pytest

from pymu.core.compute import determinant
from pymu.core.exceptions import DimensionError


# ═══════════════════════════════════════════════════════════════════════
# Known values
# ═══════════════════════════════════════════════════════════════════════


class TestKnownValues:

    def test_1x1(self):
        assert determinant([[7]]) == 7

    def test_2x2(self):
        assert determinant([[1, 2], [3, 4]]) == -2

    def test_3x3(self):
        assert determinant([[6, 1, 1], [4, -2, 5], [2, 8, 7]]) == -306

    def test_4x4_identity(self):
        assert determinant(np.eye(4, dtype=int)) == 1

    def test_singular(self):
        assert determinant([[1, 2, 3], [4, 5, 6], [7, 8, 9]]) == 0

    def test_integral_result_type(self):
        result = determinant(np.array([[2, 0], [0, 3]], dtype=np.int16))
        assert result == 6
        assert result.dtype == np.int16

    def test_requested_dtype(self):
        """Input is converted to dtype before expanding: 0.5 becomes 0."""
        assert determinant([[1.5, 0.5], [0.5, 1.5]], np.int64) == 1
        assert determinant([[1.5, 0.5], [0.5, 1.5]], np.float64) == pytest.approx(2.0)

    def test_bool(self):
        result = determinant([[True, True], [False, True]])
        assert result.dtype == np.bool_
        assert bool(result) is True


# ═══════════════════════════════════════════════════════════════════════
# Agreement with numpy
# ═══════════════════════════════════════════════════════════════════════


class TestAgainstNumpy:

    @pytest.mark.parametrize("size", [2, 3, 4, 5])
    def test_random(self, rng, size):
        A = rng.standard_normal((size, size))
        np.testing.assert_allclose(determinant(A), np.linalg.det(A), rtol=1e-10)


# ═══════════════════════════════════════════════════════════════════════
# Errors
# ═══════════════════════════════════════════════════════════════════════


class TestErrors:

    def test_non_square(self):
        with pytest.raises(DimensionError, match="square"):
            determinant([[1, 2, 3], [4, 5, 6]])

    def test_one_dimensional(self):
        with pytest.raises(DimensionError):
            determinant([1, 2, 3])

    def test_empty(self):
        with pytest.raises(DimensionError):
            determinant(np.zeros((0, 0)))
