"""
Input validation utilities for PyMu.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No silent type coercion (except np.asarray on array-likes)
    - No broadcasting or truncation of mismatched shapes
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

import operator
from typing import Any

import numpy as np
from numpy.typing import ArrayLike, DTypeLike, NDArray

from pymu.constants import FLOATING_EPSILONS
from pymu.core.exceptions import DimensionError, OutOfRangeError, ValidationError


def element_dtype(element_type: DTypeLike, name: str = "T") -> np.dtype:
    """
    Validate and normalise a container element type.

    Accepts anything numpy.dtype() understands (np.float32, float, 'int16',
    ...). Valid element types are booleans, fixed-width integers and the
    floating types that have a comparison epsilon (float32, float64,
    longdouble).

    Args:
        element_type: Requested element type
        name: Parameter name for error messages

    Returns:
        The normalised numpy dtype

    Raises:
        ValidationError: If the type is not an arithmetic element type
    """
    if element_type is None:
        raise ValidationError(f"{name}: element type is required")
    try:
        dtype = np.dtype(element_type)
    except TypeError as e:
        raise ValidationError(f"{name}: not a numeric type: {element_type!r}") from e

    if dtype == np.bool_ or np.issubdtype(dtype, np.integer):
        return dtype
    if dtype in FLOATING_EPSILONS:
        return dtype
    raise ValidationError(
        f"{name}: {dtype} is not an arithmetic element type, expected bool, "
        f"an integer type, float32, float64 or longdouble"
    )


def is_arithmetic(value: Any) -> bool:
    """
    Return True if value is a real arithmetic scalar.

    Python bool/int/float and NumPy boolean, integer and floating scalars
    qualify; complex numbers, strings, sequences and arrays do not.
    """
    return isinstance(value, (bool, int, float, np.bool_, np.integer, np.floating))


def check_dimension(value: Any, name: str) -> int:
    """
    Verify a container dimension is a positive integer.

    Args:
        value: Dimension to check
        name: Parameter name for error messages

    Returns:
        The dimension as a plain int

    Raises:
        DimensionError: If value is not an integer >= 1
    """
    if isinstance(value, (bool, np.bool_)) or not isinstance(value, (int, np.integer)):
        raise DimensionError(f"{name}: dimension must be an integer, got {value!r}")
    if value < 1:
        raise DimensionError(
            f"{name}: dimension cannot be zero or negative, got {value}",
            expected=1,
            actual=int(value),
        )
    return int(value)


def check_arity(count: int, expected: int, name: str) -> None:
    """
    Verify the number of per-element (or per-row) values.

    Args:
        count: Number of values supplied
        expected: Number of values the container holds
        name: Parameter name for error messages

    Raises:
        DimensionError: If count != expected
    """
    if count != expected:
        raise DimensionError(
            f"{name}: expected {expected} values, got {count}",
            expected=expected,
            actual=count,
        )


def check_shape(array: NDArray[Any], shape: tuple[int, ...], name: str) -> None:
    """
    Verify array has exactly the given shape.

    Args:
        array: Array to check
        shape: Required shape
        name: Parameter name for error messages

    Raises:
        DimensionError: If array.shape != shape
    """
    if array.shape != shape:
        raise DimensionError(
            f"{name}: expected shape {shape}, got {array.shape}",
            expected=shape,
            actual=array.shape,
        )


def check_index(index: Any, size: int, name: str) -> int:
    """
    Verify an index addresses one of size positions.

    Negative indices are rejected; the checked accessors do not count from
    the end.

    Args:
        index: Index to check
        size: Number of addressable positions
        name: Parameter name for error messages

    Returns:
        The index as a plain int

    Raises:
        OutOfRangeError: If index is not in [0, size)
    """
    try:
        position = operator.index(index)
    except TypeError as e:
        raise ValidationError(f"{name}: index must be an integer, got {index!r}") from e
    if position < 0 or position >= size:
        raise OutOfRangeError(
            f"{name}: index {position} out of range for size {size}",
            index=position,
            size=size,
        )
    return position


def check_array(value: ArrayLike, name: str) -> NDArray[Any]:
    """
    Validate and convert input to a numeric numpy array.

    Accepts any array-like. Rejects inputs that result in object dtype
    (ragged or mixed data) and non-arithmetic dtypes (strings, complex,
    datetime, ...). The element type is kept as-is; conversion to the
    container element type happens later and explicitly.

    Args:
        value: Input to validate
        name: Parameter name for error messages

    Returns:
        numpy.ndarray with a boolean, integer or floating dtype

    Raises:
        ValidationError: If input cannot be converted to an arithmetic array
    """
    try:
        result = np.asarray(value)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if result.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating ragged or non-numeric data"
        )

    if not (result.dtype == np.bool_
            or np.issubdtype(result.dtype, np.integer)
            or np.issubdtype(result.dtype, np.floating)):
        raise ValidationError(
            f"{name}: non-arithmetic dtype {result.dtype}, expected numeric data"
        )

    return result
