"""
Per-element-type equality.

Integral and boolean values compare exactly. Floating-point values compare
with a type-specific tolerance so that results differing only by rounding
error are treated as equal:

    a == b                                  -> equal (also equal infinities)
    a == 0 or b == 0 or |a - b| < tiny(T)   -> |a - b| < eps(T) * tiny(T)
    otherwise                               -> |a - b| / (|a| + |b|) < eps(T)

tiny(T) is the smallest positive normal value of T. The absolute test near
zero avoids false negatives for denormal results; the relative test avoids
false positives for large magnitudes. NaN is never equal to anything.

The epsilons live in pymu.constants (float32 1e-5, float64 and longdouble
1e-14).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import numpy as np
from numpy.typing import DTypeLike

from pymu.constants import FLOATING_EPSILONS
from pymu.core.validation import element_dtype


def is_floating(dtype: np.dtype) -> bool:
    """True for the floating element types (float32, float64, longdouble)."""
    return np.issubdtype(dtype, np.floating)


def epsilon(dtype: DTypeLike) -> Any:
    """
    Comparison epsilon for an element type.

    Integral and boolean types have no tolerance; their epsilon is 1 in the
    sense that any difference is significant.
    """
    dt = element_dtype(dtype)
    if is_floating(dt):
        return FLOATING_EPSILONS[dt]
    return dt.type(1)


@dataclass(frozen=True)
class TypeTraits:
    """
    Equality strategy for one element type.

    Attributes:
        dtype: The element type
        epsilon: Relative tolerance (floating types) or 1 (integral types)
        tiny: Smallest positive normal value (floating types) or 0
    """
    dtype: np.dtype
    epsilon: Any
    tiny: Any

    @classmethod
    def of(cls, dtype: DTypeLike) -> TypeTraits:
        dt = element_dtype(dtype)
        if is_floating(dt):
            return cls(dt, FLOATING_EPSILONS[dt], np.finfo(dt).smallest_normal)
        return cls(dt, dt.type(1), dt.type(0))

    def equals(self, lhs: Any, rhs: Any) -> bool:
        """Compare two values after converting both to this element type."""
        a = self.dtype.type(lhs)
        b = self.dtype.type(rhs)
        if not is_floating(self.dtype):
            return bool(a == b)

        # short cut, also for infinities
        if a == b:
            return True

        with np.errstate(over='ignore', invalid='ignore'):
            abs_a = abs(a)
            abs_b = abs(b)
            diff = abs(a - b)
            if a == 0 or b == 0 or diff < self.tiny:
                return bool(diff < self.epsilon * self.tiny)
            return bool(diff / (abs_a + abs_b) < self.epsilon)


_TRAITS: dict[np.dtype, TypeTraits] = {}


def traits(dtype: DTypeLike) -> TypeTraits:
    """Cached TypeTraits for an element type."""
    dt = element_dtype(dtype)
    try:
        return _TRAITS[dt]
    except KeyError:
        result = _TRAITS[dt] = TypeTraits.of(dt)
        return result


def mixed_equals(lhs: Any, rhs: Any, lhs_dtype: DTypeLike, rhs_dtype: DTypeLike) -> bool:
    """
    Equality of two values of possibly different element types.

    Two integral (or boolean) values compare exactly by value, whatever their
    width or signedness. When a floating type is involved both values are
    compared with the tolerant rule of the NumPy result type.

    Args:
        lhs: Value of lhs_dtype
        rhs: Value of rhs_dtype
        lhs_dtype: Element type of lhs
        rhs_dtype: Element type of rhs
    """
    left = element_dtype(lhs_dtype, "lhs_dtype")
    right = element_dtype(rhs_dtype, "rhs_dtype")
    if not is_floating(left) and not is_floating(right):
        # int64 with uint64 promotes to float64 in NumPy
        return int(lhs) == int(rhs)
    return traits(np.result_type(left, right)).equals(lhs, rhs)


def equals(lhs: Any, rhs: Any, dtype: DTypeLike | None = None) -> bool:
    """
    Tolerant equality of two scalars.

    Args:
        lhs: First value
        rhs: Second value
        dtype: Element type to compare in. Defaults to the numpy result type
            of the two operands; two integral operands then compare
            exactly, see mixed_equals().

    Returns:
        True if the values are equal under the type's equality rule

    Examples:
        >>> equals(1.0, 1.0 + 4e-15)
        True
        >>> equals(np.float32(1.0), np.float32(1.0001))
        False
    """
    if dtype is None:
        return mixed_equals(lhs, rhs, np.asarray(lhs).dtype, np.asarray(rhs).dtype)
    return traits(dtype).equals(lhs, rhs)
