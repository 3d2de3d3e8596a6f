"""
Free-function forms of the container operations and factory helpers.

    dot(a, b, dtype=None)    vector.vector, vector.matrix, matrix.matrix, matrix.vector
    transpose(m), det(m)
    diag(m)                  main diagonal of a matrix as a vector
    diag(v)                  square matrix with v on the diagonal
    ones(*shape, dtype)      ones(3) -> Vector[3, int64], ones(2, 3) -> Matrix[2, 3, int64]
    zeros(*shape, dtype)
    eye(n, dtype)            identity Matrix[n, n, dtype]
    Matrix2x2(T), Matrix3x3(T), MatrixNxN(n, T)   square specialisations
"""

from __future__ import annotations

from typing import Any

import numpy as np
from numpy.typing import DTypeLike

from pymu.containers._common import FixedContainer
from pymu.containers.matrix import Matrix
from pymu.containers.vector import Vector
from pymu.core.exceptions import DimensionError, ValidationError


def dot(lhs: FixedContainer, rhs: FixedContainer, dtype: DTypeLike | None = None) -> Any:
    """``lhs.dot(rhs, dtype)``; see Vector.dot and Matrix.dot."""
    if not isinstance(lhs, (Vector, Matrix)):
        raise ValidationError(f"lhs: expected a Vector or Matrix, got {type(lhs).__name__}")
    return lhs.dot(rhs, dtype=dtype)


def transpose(matrix: Matrix) -> Matrix:
    return matrix.transpose()


def det(matrix: Matrix) -> Any:
    return matrix.det()


def diag(container: Vector | Matrix) -> Vector | Matrix:
    """Diagonal of a matrix, or the square diagonal matrix of a vector."""
    if isinstance(container, Matrix):
        return container.diag()
    if isinstance(container, Vector):
        size = container.size()
        result = Matrix._specialize((size, size), container.dtype)()
        for index, value in enumerate(container):
            result[index, index] = value
        return result
    raise ValidationError(
        f"container: expected a Vector or Matrix, got {type(container).__name__}"
    )


def _specialisation(shape: tuple[int, ...], dtype: DTypeLike) -> type:
    if len(shape) == 1:
        return Vector._specialize(shape, dtype)
    if len(shape) == 2:
        return Matrix._specialize(shape, dtype)
    raise DimensionError(
        f"shape: expected one (Vector) or two (Matrix) dimensions, got {shape}",
        actual=shape,
    )


def ones(*shape: int, dtype: DTypeLike = np.int64) -> Vector | Matrix:
    return _specialisation(shape, dtype)(1)


def zeros(*shape: int, dtype: DTypeLike = np.int64) -> Vector | Matrix:
    return _specialisation(shape, dtype)(0)


def eye(size: int, dtype: DTypeLike = np.int64) -> Matrix:
    """Identity ``Matrix[size, size, dtype]``."""
    result = Matrix._specialize((size, size), dtype)()
    for index in range(result.rows()):
        result[index, index] = 1
    return result


def Matrix2x2(dtype: DTypeLike = np.float64) -> type:
    """``Matrix[2, 2, dtype]``."""
    return Matrix._specialize((2, 2), dtype)


def Matrix3x3(dtype: DTypeLike = np.float64) -> type:
    """``Matrix[3, 3, dtype]``."""
    return Matrix._specialize((3, 3), dtype)


def MatrixNxN(size: int, dtype: DTypeLike = np.float64) -> type:
    """Square ``Matrix[size, size, dtype]``."""
    return Matrix._specialize((size, size), dtype)
