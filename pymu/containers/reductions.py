"""
Reductions and reorderings over the public container contract.

Every function here uses only what any container exposes: ``shape``,
``dtype``, iteration (elements for a Vector, rows for a Matrix), indexed
assignment and the class constructor. Vector and Matrix methods delegate
here; the functions are also usable directly, e.g.
``reductions.mean(v, dtype=np.float64)``.

The names deliberately shadow the builtins inside this module (as NumPy's
do); the builtins are reached through ``builtins`` where needed.
"""

from __future__ import annotations

import builtins
import functools
import math
from typing import Any, Callable

import numpy as np
from numpy.typing import DTypeLike, NDArray

from pymu.containers._promotion import (
    contract,
    convert,
    elementwise,
    float_dtype,
    result_dtype,
    scalar,
)
from pymu.core.exceptions import DimensionError


Compare = Callable[[Any, Any], bool]


def _values(container: Any) -> NDArray:
    """All elements, row by row, as a flat array of the container's dtype."""
    if len(container.shape) == 1:
        items = iter(container)
    else:
        items = (value for row in container for value in row)
    return np.fromiter(items, dtype=container.dtype, count=math.prod(container.shape))


def _count(container: Any) -> int:
    return math.prod(container.shape)


def _require_vector(container: Any, operation: str) -> None:
    if len(container.shape) != 1:
        raise DimensionError(
            f"{operation} requires a one-dimensional container, got shape {container.shape}",
            actual=container.shape,
        )


def min(container: Any) -> Any:
    """Smallest element, in the container's element type."""
    return _values(container).min()


def max(container: Any) -> Any:
    """Largest element, in the container's element type."""
    return _values(container).max()


def sum(container: Any) -> Any:
    """Sum of all elements, accumulated in the container's element type."""
    return np.add.reduce(_values(container), dtype=container.dtype)


def mean(container: Any, dtype: DTypeLike | None = None) -> Any:
    """
    Arithmetic mean, ``U(sum()) / count``.

    The sum is accumulated in the element type T, converted to U and then
    divided; integral U truncates (mean of int {2, 3} is 2).

    Args:
        container: Vector or Matrix
        dtype: Result type U, defaults to T
    """
    accumulate = result_dtype(container.dtype, dtype)
    total = convert(sum(container), accumulate)
    return scalar(elementwise('/', total, _count(container), accumulate))


def std(container: Any, dtype: DTypeLike | None = None) -> Any:
    """
    Population standard deviation, sqrt(sum((x - mean)^2) / count), in U.

    Squared deviations are formed in floating point; their sum is converted
    to U before dividing by the count, so integral U truncates as mean() does.

    Args:
        container: Vector or Matrix
        dtype: Result type U, defaults to T
    """
    accumulate = result_dtype(container.dtype, dtype)
    calc = float_dtype(accumulate)
    center = calc.type(mean(container, accumulate))
    with np.errstate(over='ignore', invalid='ignore'):
        deviations = _values(container).astype(calc) - center
        total = convert(np.add.reduce(deviations * deviations), accumulate)
        variance = elementwise('/', total, _count(container), accumulate)
        return scalar(convert(np.sqrt(variance.astype(calc)), accumulate))


def length(container: Any, dtype: DTypeLike | None = None) -> Any:
    """
    Euclidean norm, sqrt(sum(x * x)), computed in U.

    Args:
        container: Vector
        dtype: Result and accumulation type U, defaults to T
    """
    _require_vector(container, "length")
    accumulate = result_dtype(container.dtype, dtype)
    values = _values(container)
    squared = contract(values, values, accumulate)
    with np.errstate(invalid='ignore'):
        return scalar(convert(np.sqrt(squared.astype(float_dtype(accumulate))), accumulate))


def flip(vector: Any) -> None:
    """Reverse a vector in place: (1, 2, 3) becomes (3, 2, 1)."""
    _require_vector(vector, "flip")
    for index, value in enumerate(_values(vector)[::-1]):
        vector[index] = value


def flipped(vector: Any) -> Any:
    """Reversed copy of a vector."""
    _require_vector(vector, "flipped")
    return type(vector)(_values(vector)[::-1])


def _ordered(values: NDArray, compare: Compare | None) -> Any:
    if compare is None:
        return np.sort(values, kind='stable')

    def three_way(a: Any, b: Any) -> int:
        if compare(a, b):
            return -1
        if compare(b, a):
            return 1
        return 0

    return builtins.sorted(values, key=functools.cmp_to_key(three_way))


def sort(vector: Any, compare: Compare | None = None) -> None:
    """
    Sort a vector in place.

    Args:
        vector: Vector to reorder
        compare: Strict weak ordering ``compare(a, b) -> bool``, True when a
            must come before b. Defaults to ``<`` (ascending).
    """
    _require_vector(vector, "sort")
    for index, value in enumerate(_ordered(_values(vector), compare)):
        vector[index] = value


def sorted(vector: Any, compare: Compare | None = None) -> Any:
    """Sorted copy of a vector; see sort()."""
    _require_vector(vector, "sorted")
    return type(vector)(np.asarray(_ordered(_values(vector), compare), dtype=vector.dtype))
