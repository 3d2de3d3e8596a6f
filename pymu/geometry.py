"""
Two- and three-dimensional helpers built on Vector.

These are collaborators of the generic container, not subclasses: a 2D
vector is simply a ``Vector[2, T]``.

    >>> v = vector2d(1.0, 0.0)
    >>> rotate(v, pi2)          # in place, counter-clockwise
    >>> Axes(v).y
    1.0
"""

from __future__ import annotations

from typing import Any

import numpy as np
from numpy.typing import DTypeLike

from pymu.containers._promotion import float_dtype
from pymu.containers.vector import Vector
from pymu.core.exceptions import DimensionError, ValidationError


def vector2d(x: Any = 0, y: Any = 0, dtype: DTypeLike = np.float64) -> Vector:
    """``Vector[2, dtype](x, y)``."""
    return Vector._specialize((2,), dtype)(x, y)


def vector3d(x: Any = 0, y: Any = 0, z: Any = 0, dtype: DTypeLike = np.float64) -> Vector:
    """``Vector[3, dtype](x, y, z)``."""
    return Vector._specialize((3,), dtype)(x, y, z)


def _require_length(vector: Any, sizes: tuple[int, ...], operation: str) -> None:
    if not isinstance(vector, Vector):
        raise ValidationError(
            f"{operation}: expected a Vector, got {type(vector).__name__}"
        )
    if vector.size() not in sizes:
        raise DimensionError(
            f"{operation}: expected a Vector of length {' or '.join(map(str, sizes))}, "
            f"got length {vector.size()}",
            expected=sizes,
            actual=vector.size(),
        )


class Axes:
    """
    Named component access on an existing 2- or 3-element Vector.

    Reads and writes go straight through to the vector, so
    ``Axes(v).x = 5`` changes ``v[0]`` (converted to the vector's type).

    Parameters
    ----------
    vector : Vector
        ``Vector[2, T]`` or ``Vector[3, T]``.
    """

    def __init__(self, vector: Vector):
        _require_length(vector, (2, 3), "Axes")
        self._vector = vector

    @property
    def vector(self) -> Vector:
        return self._vector

    @property
    def x(self) -> Any:
        return self._vector[0]

    @x.setter
    def x(self, value: Any) -> None:
        self._vector[0] = value

    @property
    def y(self) -> Any:
        return self._vector[1]

    @y.setter
    def y(self, value: Any) -> None:
        self._vector[1] = value

    @property
    def z(self) -> Any:
        self._require_z()
        return self._vector[2]

    @z.setter
    def z(self, value: Any) -> None:
        self._require_z()
        self._vector[2] = value

    def _require_z(self) -> None:
        if self._vector.size() != 3:
            raise DimensionError(
                "z component requires a Vector of length 3",
                expected=3,
                actual=self._vector.size(),
            )

    def __repr__(self) -> str:
        return f"Axes({self._vector!r})"


def rotate(vector: Vector, angle: float) -> None:
    """
    Rotate a 2-element vector in place, counter-clockwise by ``angle`` radians.

    The rotation is computed in floating point (the vector's type if it is
    floating, float64 otherwise) and converted back, so integral vectors
    truncate toward zero. The Euclidean length is preserved up to rounding.

    Raises
    ------
    DimensionError
        If the vector does not have exactly two elements.
    """
    _require_length(vector, (2,), "rotate")
    calc = float_dtype(vector.dtype)
    x, y = vector[0].astype(calc), vector[1].astype(calc)
    cos, sin = calc.type(np.cos(angle)), calc.type(np.sin(angle))
    vector[0] = x * cos - y * sin
    vector[1] = x * sin + y * cos


def rotated(vector: Vector, angle: float) -> Vector:
    """Rotated copy of a 2-element vector; see rotate()."""
    result = vector.copy()
    rotate(result, angle)
    return result
