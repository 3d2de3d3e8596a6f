"""
Fixed-length vector.

``Vector[N, T]`` holds exactly N elements of element type T. Construction:

    Vector[3, int]()                 # zeros
    Vector[3, int](1, 2, 3)          # N per-element values
    Vector[3, int]([1.9, 2, 3])      # same-length sequence/array/Vector, converted
    Vector[3, int](7)                # broadcast
    Vector[3, int].alias(buffer)     # bind to an external int64 array of shape (3,)

Arithmetic follows pymu.containers._promotion (left-anchored element type).
"""

from __future__ import annotations

from typing import Any, Callable, Iterator

import numpy as np
from numpy.typing import DTypeLike, NDArray

from pymu.containers import reductions
from pymu.containers._common import FixedContainer, as_array, format_element
from pymu.containers._promotion import contract, convert, result_dtype, scalar
from pymu.core.exceptions import DimensionError, ValidationError
from pymu.core.typetraits import mixed_equals
from pymu.core.validation import check_arity, check_shape, is_arithmetic


class Vector(FixedContainer):
    """
    Ordered sequence of exactly N elements of one arithmetic type.

    Specialise with ``Vector[N, T]``; N >= 1, T a bool, integer or floating
    numpy type. Element order is significant and the length never changes.
    """
    _parameters = ('N', 'T')

    def _coerce(self, values: tuple[Any, ...]) -> NDArray:
        if not values:
            return np.zeros(self.shape, dtype=self.dtype)

        if len(values) == 1:
            value = values[0]
            if is_arithmetic(value):
                return self._broadcast(value)
            array = as_array(value, "values")
            check_shape(array, self.shape, "values")
            return convert(array, self.dtype)

        check_arity(len(values), self.shape[0], "values")
        data = np.empty(self.shape, dtype=self.dtype)
        for index, value in enumerate(values):
            if not is_arithmetic(value):
                raise ValidationError(
                    f"values[{index}]: expected an arithmetic scalar, got {type(value).__name__}"
                )
            data[index] = convert(value, self.dtype)
        return data

    # -- access -------------------------------------------------------------

    def size(self) -> int:
        """Number of elements, N."""
        return self.shape[0]

    def __getitem__(self, index: Any) -> Any:
        return self._data[index]

    def __setitem__(self, index: Any, value: Any) -> None:
        self._data[index] = convert(value, self.dtype)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._data)

    # -- reductions ---------------------------------------------------------

    def min(self) -> Any:
        return reductions.min(self)

    def max(self) -> Any:
        return reductions.max(self)

    def sum(self) -> Any:
        return reductions.sum(self)

    def mean(self, dtype: DTypeLike | None = None) -> Any:
        """Mean, ``U(sum()) / N``; U defaults to T (integral U truncates)."""
        return reductions.mean(self, dtype)

    def std(self, dtype: DTypeLike | None = None) -> Any:
        """Population standard deviation computed in U (default T)."""
        return reductions.std(self, dtype)

    def length(self, dtype: DTypeLike | None = None) -> Any:
        """Euclidean norm computed in U (default T)."""
        return reductions.length(self, dtype)

    def flip(self) -> None:
        """Reverse the elements in place."""
        reductions.flip(self)

    def flipped(self) -> Vector:
        return reductions.flipped(self)

    def sort(self, compare: Callable[[Any, Any], bool] | None = None) -> None:
        """
        Sort in place, ascending by ``<`` unless a comparator is given.

        Args:
            compare: Strict weak ordering ``compare(a, b) -> bool`` that is
                True when a must come before b
        """
        reductions.sort(self, compare)

    def sorted(self, compare: Callable[[Any, Any], bool] | None = None) -> Vector:
        return reductions.sorted(self, compare)

    # -- products -----------------------------------------------------------

    def dot(self, other: FixedContainer, dtype: DTypeLike | None = None) -> Any:
        """
        Inner product with a vector, or row-vector times matrix product.

        Parameters
        ----------
        other : Vector or Matrix
            ``Vector[N, T2]`` gives a scalar; ``Matrix[N, P, T2]`` gives a
            ``Vector[P, U]``. T2 may differ from T.
        dtype : numpy dtype, optional
            Accumulation type U. Defaults to this vector's element type.
            Both operands are converted to U before multiplying.

        Raises
        ------
        DimensionError
            If the vector length does not match other's length/row count.
        """
        from pymu.containers.matrix import Matrix

        accumulate = result_dtype(self.dtype, dtype)
        if isinstance(other, Vector):
            if other.shape != self.shape:
                raise DimensionError(
                    f"Vector size mismatch: {self.shape[0]} and {other.shape[0]}",
                    expected=self.shape,
                    actual=other.shape,
                )
            return scalar(contract(self._data, other._data, accumulate))

        if isinstance(other, Matrix):
            rows, cols = other.shape
            if rows != self.shape[0]:
                raise DimensionError(
                    f"Vector-Matrix dimension mismatch: vector size {self.shape[0]} "
                    f"must equal the matrix row count {rows}",
                    expected=self.shape[0],
                    actual=rows,
                )
            product = contract(self._data, other._data, accumulate)
            return Vector._specialize((cols,), accumulate)._wrap(product)

        raise ValidationError(
            f"other: expected a Vector or Matrix, got {type(other).__name__}"
        )

    def __matmul__(self, other: Any) -> Any:
        if not isinstance(other, FixedContainer):
            return NotImplemented
        return self.dot(other)

    # -- equality / formatting ----------------------------------------------

    def _equals(self, other: FixedContainer) -> bool:
        return all(
            mixed_equals(a, b, self.dtype, other.dtype)
            for a, b in zip(self._data, other._data)
        )

    def __str__(self) -> str:
        return '[ ' + ', '.join(format_element(v, self.dtype) for v in self._data) + ' ]'

    def __repr__(self) -> str:
        return f"{type(self).__name__}({', '.join(repr(v) for v in self._data.tolist())})"
