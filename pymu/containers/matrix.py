"""
Fixed-shape matrix.

``Matrix[N, M, T]`` is an ordered sequence of exactly N rows, each a
``Vector[M, T]``. Rows are addressed like vector elements: ``m[i]`` is row i
(an aliasing Vector, so ``m[i][j] = x`` writes through) and ``m[i, j]`` is an
element. Construction:

    Matrix[2, 3, int]()                          # zeros
    Matrix[2, 3, int]([1, 2, 3], [4, 5, 6])      # N rows (sequences or Vector[3, *])
    Matrix[2, 3, int]([[1, 2, 3], [4, 5, 6]])    # one nested sequence / (2, 3) array
    Matrix[2, 3, int](other)                     # same-shape Matrix of any element type
    Matrix[2, 3, int](0)                         # broadcast

Row-wise operations (equality, arithmetic) delegate to the same rules as
Vector.
"""

from __future__ import annotations

from typing import Any, Iterator

import numpy as np
from numpy.typing import DTypeLike, NDArray

from pymu.containers import reductions
from pymu.containers._common import FixedContainer, as_array
from pymu.containers._promotion import contract, convert, result_dtype
from pymu.containers.vector import Vector
from pymu.core.compute.determinant import determinant
from pymu.core.exceptions import DimensionError, ValidationError
from pymu.core.validation import check_arity, check_index, check_shape, is_arithmetic


class Matrix(FixedContainer):
    """
    N rows of ``Vector[M, T]``.

    Specialise with ``Matrix[N, M, T]``; N, M >= 1. Every row has exactly M
    elements.
    """
    _parameters = ('N', 'M', 'T')

    def _coerce(self, values: tuple[Any, ...]) -> NDArray:
        rows, cols = self.shape
        if not values:
            return np.zeros(self.shape, dtype=self.dtype)

        if len(values) == 1:
            value = values[0]
            if is_arithmetic(value):
                return self._broadcast(value)
            array = as_array(value, "rows")
            if rows == 1 and array.shape == (cols,):
                array = array.reshape(1, cols)
            check_shape(array, self.shape, "rows")
            return convert(array, self.dtype)

        check_arity(len(values), rows, "rows")
        data = np.empty(self.shape, dtype=self.dtype)
        for index, row in enumerate(values):
            array = as_array(row, f"rows[{index}]")
            check_shape(array, (cols,), f"rows[{index}]")
            data[index] = convert(array, self.dtype)
        return data

    @classmethod
    def _row_type(cls) -> type:
        return Vector._specialize((cls.shape[1],), cls.dtype)

    # -- access -------------------------------------------------------------

    def size(self) -> tuple[int, int]:
        """Shape as (rows, cols)."""
        return self.shape

    def rows(self) -> int:
        return self.shape[0]

    def cols(self) -> int:
        return self.shape[1]

    def __getitem__(self, index: Any) -> Any:
        if isinstance(index, tuple):
            return self._data[index]
        selected = self._data[index]
        if selected.ndim == 1:
            return self._row_type()._wrap(selected, alias=True)
        return selected

    def __setitem__(self, index: Any, value: Any) -> None:
        if isinstance(index, tuple) or is_arithmetic(value):
            self._data[index] = convert(value, self.dtype)
            return
        array = as_array(value, "row")
        check_shape(array, (self.shape[1],), "row")
        self._data[index] = convert(array, self.dtype)

    def __iter__(self) -> Iterator[Vector]:
        row_type = self._row_type()
        return (row_type._wrap(row, alias=True) for row in self._data)

    def row(self, index: int) -> Vector:
        """Copy of row ``index`` (checked)."""
        position = check_index(index, self.shape[0], "row")
        return self._row_type()._wrap(self._data[position].copy())

    def col(self, index: int) -> Vector:
        """Copy of column ``index`` (checked)."""
        position = check_index(index, self.shape[1], "col")
        column_type = Vector._specialize((self.shape[0],), self.dtype)
        return column_type._wrap(self._data[:, position].copy())

    # -- reductions ---------------------------------------------------------

    def min(self) -> Any:
        return reductions.min(self)

    def max(self) -> Any:
        return reductions.max(self)

    def sum(self) -> Any:
        return reductions.sum(self)

    def mean(self, dtype: DTypeLike | None = None) -> Any:
        """Mean over all N*M elements, ``U(sum()) / (N*M)``."""
        return reductions.mean(self, dtype)

    def std(self, dtype: DTypeLike | None = None) -> Any:
        """Population standard deviation over all elements, computed in U."""
        return reductions.std(self, dtype)

    # -- structure ----------------------------------------------------------

    def diag(self) -> Vector:
        """Main diagonal as a ``Vector[min(N, M), T]``."""
        diagonal = np.diagonal(self._data).copy()
        return Vector._specialize((diagonal.shape[0],), self.dtype)._wrap(diagonal)

    def transpose(self) -> Matrix:
        rows, cols = self.shape
        return Matrix._specialize((cols, rows), self.dtype)._wrap(self._data.T.copy())

    def det(self) -> Any:
        """
        Determinant, computed in T.

        Raises:
            DimensionError: If the matrix is not square
        """
        rows, cols = self.shape
        if rows != cols:
            raise DimensionError(
                f"Matrix dimensions must match to calculate the determinant, got {self.shape}",
                expected=(rows, rows),
                actual=self.shape,
            )
        return determinant(self._data, self.dtype)

    # -- products -----------------------------------------------------------

    def dot(self, other: FixedContainer, dtype: DTypeLike | None = None) -> Any:
        """
        Matrix product or matrix times column-vector product.

        For A = ``Matrix[N, M, T]`` and B = ``Matrix[M, P, T2]`` the result
        C = ``Matrix[N, P, U]`` with c_ij = sum_k a_ik * b_kj. For
        v = ``Vector[M, T2]`` the result is ``Vector[N, U]``.

        Parameters
        ----------
        other : Matrix or Vector
            Right operand; its row count (or length) must equal this
            matrix's column count.
        dtype : numpy dtype, optional
            Accumulation type U, default T. Operands are converted to U
            before multiplying.

        Raises
        ------
        DimensionError
            If the inner dimensions differ.
        """
        rows, cols = self.shape
        accumulate = result_dtype(self.dtype, dtype)

        if isinstance(other, Matrix):
            other_rows, other_cols = other.shape
            if other_rows != cols:
                raise DimensionError(
                    f"Matrix dimension mismatch: columns of the first matrix ({cols}) "
                    f"must equal rows of the second ({other_rows})",
                    expected=cols,
                    actual=other_rows,
                )
            product = contract(self._data, other._data, accumulate)
            return Matrix._specialize((rows, other_cols), accumulate)._wrap(product)

        if isinstance(other, Vector):
            if other.shape[0] != cols:
                raise DimensionError(
                    f"Matrix-Vector dimension mismatch: columns of the matrix ({cols}) "
                    f"must equal the vector size ({other.shape[0]})",
                    expected=cols,
                    actual=other.shape[0],
                )
            product = contract(self._data, other._data, accumulate)
            return Vector._specialize((rows,), accumulate)._wrap(product)

        raise ValidationError(
            f"other: expected a Matrix or Vector, got {type(other).__name__}"
        )

    def __matmul__(self, other: Any) -> Any:
        if not isinstance(other, FixedContainer):
            return NotImplemented
        return self.dot(other)

    # -- equality / formatting ----------------------------------------------

    def _equals(self, other: FixedContainer) -> bool:
        # forward comparison to the Vector rows
        return all(mine == theirs for mine, theirs in zip(self, other))

    def __str__(self) -> str:
        return '[ ' + ',\n  '.join(str(row) for row in self) + ' ]'

    def __repr__(self) -> str:
        rows = ', '.join(repr(row) for row in self._data.tolist())
        return f"{type(self).__name__}({rows})"
