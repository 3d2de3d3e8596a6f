"""
Fixed-shape containers.

Provides Vector[N, T] and Matrix[N, M, T] with element-wise and
linear-algebra arithmetic, left-anchored mixed-type promotion and tolerant
floating-point equality.

Public API:
    Vector[N, T]        Fixed-length vector
    Matrix[N, M, T]     Fixed-shape matrix of Vector[M, T] rows
    dot(a, b)           Inner / matrix products
    transpose(m)        Transposed matrix
    det(m)              Determinant of a square matrix
    diag(x)             Matrix diagonal / diagonal matrix
    ones, zeros, eye    Factories
    Matrix2x2, Matrix3x3, MatrixNxN   Square specialisations
    reductions          min, max, sum, mean, std, length, flip, sort as functions
"""

from pymu.containers import reductions
from pymu.containers.vector import Vector
from pymu.containers.matrix import Matrix
from pymu.containers.functions import (
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

__all__ = [
    "Vector",
    "Matrix",
    "dot",
    "transpose",
    "det",
    "diag",
    "ones",
    "zeros",
    "eye",
    "Matrix2x2",
    "Matrix3x3",
    "MatrixNxN",
    "reductions",
]
