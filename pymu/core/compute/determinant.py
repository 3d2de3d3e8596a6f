"""
Determinant of a square matrix given as nested sequences.

A standalone routine working on dynamically sized input; the fixed-shape
Matrix.det() flattens itself into rows and calls it. The determinant is
computed by cofactor (Laplace) expansion along the first row, entirely in
the element type of the input, so integral matrices get exact integral
determinants. Intended for the small matrices this library targets: the cost
grows factorially with the dimension.
"""

from __future__ import annotations

from typing import Any, Sequence

import numpy as np
from numpy.typing import DTypeLike

from pymu.core.exceptions import DimensionError
from pymu.core.validation import check_array, element_dtype


def _minor(rows: list[list[Any]], column: int) -> list[list[Any]]:
    """Rows 1..n-1 without the given column."""
    return [row[:column] + row[column + 1:] for row in rows[1:]]


def _expand(rows: list[list[Any]], dtype: np.dtype) -> Any:
    size = len(rows)
    if size == 1:
        return rows[0][0]
    if size == 2:
        return dtype.type(rows[0][0] * rows[1][1] - rows[0][1] * rows[1][0])

    total = dtype.type(0)
    sign = 1
    for column in range(size):
        cofactor = rows[0][column] * _expand(_minor(rows, column), dtype)
        total = dtype.type(total + cofactor if sign > 0 else total - cofactor)
        sign = -sign
    return total


def determinant(rows: Sequence[Sequence[Any]], dtype: DTypeLike | None = None) -> Any:
    """
    Determinant of a square matrix.

    Parameters
    ----------
    rows : sequence of sequences
        Square matrix, row by row.
    dtype : numpy dtype, optional
        Element type used for the whole computation. Defaults to the dtype
        of the input.

    Returns
    -------
    Scalar of the element type.

    Raises
    ------
    DimensionError
        If the input is not a non-empty square matrix.
    """
    array = check_array(rows, "rows")
    if array.ndim != 2 or array.shape[0] != array.shape[1] or array.shape[0] == 0:
        raise DimensionError(
            f"rows: determinant requires a non-empty square matrix, got shape {array.shape}",
            actual=array.shape,
        )

    dt = element_dtype(dtype if dtype is not None else array.dtype, "dtype")
    # bool arithmetic has no subtraction; expand in int64 and convert back
    work = np.dtype(np.int64) if dt == np.bool_ else dt
    values = [[work.type(v) for v in row] for row in array.astype(work)]
    with np.errstate(over='ignore', invalid='ignore'):
        result = _expand(values, work)
    return dt.type(result)
