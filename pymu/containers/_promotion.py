"""
Mixed-type arithmetic protocol shared by Vector and Matrix.

Every binary operation between a container and a scalar or another container
follows the same rules:

    1. The result has the shape of the container operand(s).
    2. The result element type is the left (receiving) operand's element
       type. Reductions and inner products (dot, mean, length, std) take an
       explicit ``dtype`` that overrides this default.
    3. Right operands are converted to the result type *before* the
       element-wise operation (float -> int truncates toward zero).
    4. Compound assignment never changes the left operand's element type.

This is not NumPy's "common type" promotion: ``int_vector + float_vector`` is
an integer vector.

Fixed-width semantics are kept on purpose: integral division truncates toward
zero, integral overflow wraps, floating overflow and division by zero follow
IEEE without warnings. Integral division by zero is a fatal contract
violation.
"""

from __future__ import annotations

import operator
from typing import Any, Callable

import numpy as np
from numpy.typing import ArrayLike, DTypeLike, NDArray

from pymu.core.contracts import require_nonzero_divisor
from pymu.core.validation import element_dtype


_OPERATORS: dict[str, Callable[[Any, Any], Any]] = {
    '+': operator.add,
    '-': operator.sub,
    '*': operator.mul,
}


def result_dtype(receiver: np.dtype, dtype: DTypeLike | None = None) -> np.dtype:
    """Receiver's element type unless an explicit dtype is requested."""
    if dtype is None:
        return receiver
    return element_dtype(dtype, "dtype")


def working_dtype(dtype: np.dtype) -> np.dtype:
    """Type the arithmetic is carried out in; booleans compute as int64."""
    if dtype == np.bool_:
        return np.dtype(np.int64)
    return dtype


def float_dtype(dtype: np.dtype) -> np.dtype:
    """Floating type for sqrt/trigonometry on values of dtype."""
    if np.issubdtype(dtype, np.floating):
        return dtype
    return np.dtype(np.float64)


def is_integral(dtype: np.dtype) -> bool:
    return dtype == np.bool_ or np.issubdtype(dtype, np.integer)


def convert(value: ArrayLike, dtype: np.dtype) -> NDArray:
    """
    Explicit conversion to dtype, always returning a new array.

    Follows NumPy casting (C conversion semantics): floating to integral
    truncates toward zero, non-zero to bool is True. Out-of-range and NaN
    conversions are implementation defined and do not warn.
    """
    with np.errstate(invalid='ignore', over='ignore'):
        return np.asarray(value).astype(dtype)


def scalar(array: NDArray) -> Any:
    """Unwrap a 0-d result array into a NumPy scalar."""
    return array[()]


def truncating_divide(lhs: NDArray, rhs: NDArray) -> NDArray:
    """Integral division rounding toward zero (C semantics)."""
    quotient = np.floor_divide(lhs, rhs)
    remainder = lhs - quotient * rhs
    # floor and truncation differ only for inexact quotients of mixed sign
    adjust = (remainder != 0) & ((lhs < 0) != (rhs < 0))
    return quotient + adjust.astype(quotient.dtype)


def elementwise(
    symbol: str,
    lhs: NDArray,
    rhs: ArrayLike,
    dtype: np.dtype,
) -> NDArray:
    """
    Apply ``lhs <symbol> rhs`` element-wise in dtype.

    Parameters
    ----------
    symbol : str
        One of '+', '-', '*', '/'.
    lhs : NDArray
        Left operand, already of dtype.
    rhs : array-like
        Scalar (broadcast) or array of lhs's shape, any arithmetic dtype.
        Converted to dtype before the operation.
    dtype : numpy dtype
        Result element type.

    Returns
    -------
    New array of dtype with lhs's shape.
    """
    work = working_dtype(dtype)
    left = np.asarray(lhs).astype(work, copy=False)
    right = convert(rhs, dtype).astype(work, copy=False)

    with np.errstate(over='ignore', under='ignore', divide='ignore', invalid='ignore'):
        if symbol == '/':
            if is_integral(work):
                require_nonzero_divisor(right, dtype)
                result = truncating_divide(left, right)
            else:
                result = np.true_divide(left, right)
        else:
            result = _OPERATORS[symbol](left, right)

    return convert(result, dtype)


def contract(lhs: NDArray, rhs: NDArray, dtype: np.dtype) -> NDArray:
    """
    Inner-product contraction accumulated in dtype.

    Both operands are converted to dtype first, then contracted over the last
    axis of lhs and the first axis of rhs: vector.vector -> 0-d,
    vector.matrix -> vector, matrix.vector -> vector, matrix.matrix -> matrix.
    Shape agreement is the caller's responsibility.
    """
    work = working_dtype(dtype)
    left = convert(lhs, dtype).astype(work, copy=False)
    right = convert(rhs, dtype).astype(work, copy=False)
    with np.errstate(over='ignore', under='ignore', invalid='ignore'):
        product = np.matmul(left, right)
    return convert(product, dtype)
