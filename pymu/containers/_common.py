"""
Fixed-shape storage shared by Vector and Matrix.

A container class is generic until it is specialised with its dimensions
and element type, e.g. ``Vector[3, np.float32]`` or ``Matrix[2, 2, int]``.
Specialisations are created once and cached, so the shape and the element
type are part of the class: ``Vector[3, float] is Vector[3, np.float64]``.

Storage is a NumPy array of exactly ``cls.shape`` and ``cls.dtype``. An
instance either owns its array or, when created through ``alias()``, is
bound to an externally owned array that it reads and writes in place.

Access contract:
    container[i]       unchecked: no validation of its own, storage semantics
                       apply (NumPy bounds errors, negative indices count
                       from the end)
    container.at(i)    checked: OutOfRangeError unless 0 <= i < len(container)
"""

from __future__ import annotations

import logging
from typing import Any, ClassVar

import numpy as np
from numpy.typing import DTypeLike, NDArray

from pymu.containers._promotion import convert, elementwise
from pymu.core.exceptions import DimensionError, ValidationError
from pymu.core.validation import (
    check_array,
    check_dimension,
    check_index,
    element_dtype,
    is_arithmetic,
)


logger = logging.getLogger(__name__)

_SPECIALIZATIONS: dict[tuple[type, tuple[int, ...], np.dtype], type] = {}


def _format_extended(value: Any) -> str:
    """%g-style text of an extended-precision value, without narrowing it to double."""
    if not np.isfinite(value) or value == 0:
        return format(float(value), 'g')
    exponent = int(np.floor(np.log10(np.abs(value))))
    if -4 <= exponent < 16:
        return np.format_float_positional(value, trim='-')
    return np.format_float_scientific(value, trim='-', exp_digits=2)


def format_element(value: Any, dtype: np.dtype) -> str:
    """Format one element the way C++ streams do (%g for floats, 1/0 for bools)."""
    if dtype == np.longdouble:
        return _format_extended(value)
    if np.issubdtype(dtype, np.floating):
        return format(float(value), 'g')
    return str(int(value))


def as_array(value: Any, name: str) -> NDArray:
    """Array view of a container or a validated array of any array-like."""
    if isinstance(value, FixedContainer):
        return value._data
    return check_array(value, name)


def _restore(generic: type, shape: tuple[int, ...], dtype: np.dtype, data: NDArray) -> Any:
    """Unpickle helper: rebuild an owning container from its parts."""
    return generic._specialize(shape, dtype)._wrap(data)


class FixedContainer:
    """
    Base class of the fixed-shape containers.

    Class attributes (set on specialisations only):
        shape: Fixed shape, e.g. (3,) or (2, 2)
        dtype: Element type as a numpy dtype
    """
    shape: ClassVar[tuple[int, ...] | None] = None
    dtype: ClassVar[np.dtype | None] = None
    _generic: ClassVar[type | None] = None
    _parameters: ClassVar[tuple[str, ...]] = ()

    # NumPy scalars on the left of an operator must defer to our reflected
    # operators instead of broadcasting over the container.
    __array_ufunc__ = None

    # mutable
    __hash__ = None  # type: ignore[assignment]

    _data: NDArray
    _alias: bool

    # -- specialisation -----------------------------------------------------

    def __class_getitem__(cls, params: Any) -> type:
        if cls.shape is not None:
            raise ValidationError(f"{cls.__name__} is already specialised")
        if not isinstance(params, tuple) or len(params) != len(cls._parameters):
            raise ValidationError(
                f"{cls.__name__} takes {len(cls._parameters)} parameters: "
                f"{cls.__name__}[{', '.join(cls._parameters)}]"
            )
        *dims, element_type = params
        return cls._specialize(tuple(dims), element_type)

    @classmethod
    def _specialize(cls, shape: tuple[int, ...], element_type: DTypeLike) -> type:
        generic = cls._generic or cls
        dims = tuple(
            check_dimension(d, f"{generic.__name__}.{p}")
            for d, p in zip(shape, generic._parameters)
        )
        dtype = element_dtype(element_type, f"{generic.__name__}.T")
        key = (generic, dims, dtype)
        try:
            return _SPECIALIZATIONS[key]
        except KeyError:
            pass

        name = f"{generic.__name__}[{', '.join(map(str, dims))}, {dtype.name}]"
        specialised = type(generic)(name, (generic,), {
            '__module__': generic.__module__,
            '__qualname__': name,
            'shape': dims,
            'dtype': dtype,
            '_generic': generic,
        })
        _SPECIALIZATIONS[key] = specialised
        logger.debug("created specialisation %s", name)
        return specialised

    @classmethod
    def _require_specialised(cls) -> None:
        if cls.shape is None:
            example = ', '.join(['2'] * (len(cls._parameters) - 1) + ['np.float64'])
            raise ValidationError(
                f"{cls.__name__} must be specialised before use, "
                f"e.g. {cls.__name__}[{example}]"
            )

    # -- construction -------------------------------------------------------

    def __init__(self, *values: Any):
        type(self)._require_specialised()
        self._data = self._coerce(values)
        self._alias = False

    def _coerce(self, values: tuple[Any, ...]) -> NDArray:
        """Build the owned storage array from constructor arguments."""
        raise NotImplementedError("Subclasses must implement _coerce")

    def _broadcast(self, value: Any) -> NDArray:
        return np.full(self.shape, convert(value, self.dtype), dtype=self.dtype)

    @classmethod
    def _wrap(cls, data: NDArray, alias: bool = False) -> Any:
        """Instance around an array that already has the right shape and dtype."""
        instance = cls.__new__(cls)
        instance._data = data
        instance._alias = alias
        return instance

    @classmethod
    def alias(cls, buffer: NDArray) -> Any:
        """
        Bind to externally owned storage without copying.

        The container reads and writes ``buffer`` in place: mutations through
        the container (indexed and compound assignment, flip, sort) are
        visible in the buffer and vice versa. The container does not own the
        buffer and does not manage its lifetime. Binary operators still
        return new, owning containers.

        Args:
            buffer: NumPy array of exactly cls.shape and cls.dtype

        Raises:
            ValidationError: If buffer is not an ndarray of cls.dtype
            DimensionError: If buffer's shape differs from cls.shape
        """
        cls._require_specialised()
        if not isinstance(buffer, np.ndarray):
            raise ValidationError(
                f"buffer: alias requires a numpy.ndarray, got {type(buffer).__name__}"
            )
        if buffer.dtype != cls.dtype:
            raise ValidationError(
                f"buffer: alias requires dtype {cls.dtype}, got {buffer.dtype}"
            )
        if buffer.shape != cls.shape:
            raise DimensionError(
                f"buffer: expected shape {cls.shape}, got {buffer.shape}",
                expected=cls.shape,
                actual=buffer.shape,
            )
        return cls._wrap(buffer, alias=True)

    @property
    def is_alias(self) -> bool:
        """True if the storage is externally owned."""
        return self._alias

    # -- value semantics ----------------------------------------------------

    def copy(self) -> Any:
        """Owning deep copy."""
        return type(self)._wrap(self._data.copy())

    def __copy__(self) -> Any:
        return self.copy()

    def __deepcopy__(self, memo: dict[int, Any]) -> Any:
        return self.copy()

    def __reduce__(self) -> tuple[Any, ...]:
        return (_restore, (self._generic, self.shape, self.dtype, self._data.copy()))

    def __array__(self, dtype: DTypeLike | None = None, copy: bool | None = None) -> NDArray:
        if copy is False:
            raise ValueError(f"{type(self).__name__} can only be exported by copy")
        return self._data.astype(self.dtype if dtype is None else dtype)

    # -- access -------------------------------------------------------------

    def __len__(self) -> int:
        return self.shape[0]

    def at(self, index: int) -> Any:
        """Checked access; raises OutOfRangeError unless 0 <= index < len(self)."""
        position = check_index(index, len(self), "index")
        return self[position]

    # -- element-wise arithmetic --------------------------------------------

    def _operand(self, other: Any) -> Any:
        """Right operand of an element-wise operation, or None if unsupported."""
        if is_arithmetic(other):
            return other
        if isinstance(other, FixedContainer) and other._generic is self._generic:
            if other.shape != self.shape:
                raise DimensionError(
                    f"shape mismatch: {type(self).__name__} and {type(other).__name__}",
                    expected=self.shape,
                    actual=other.shape,
                )
            return other._data
        return None

    def _binary(self, symbol: str, other: Any) -> Any:
        operand = self._operand(other)
        if operand is None:
            return NotImplemented
        return type(self)._wrap(elementwise(symbol, self._data, operand, self.dtype))

    def _inplace(self, symbol: str, other: Any) -> Any:
        operand = self._operand(other)
        if operand is None:
            return NotImplemented
        self._data[...] = elementwise(symbol, self._data, operand, self.dtype)
        return self

    def __add__(self, other: Any) -> Any:
        return self._binary('+', other)

    def __radd__(self, other: Any) -> Any:
        if not is_arithmetic(other):
            return NotImplemented
        return self._binary('+', other)

    def __sub__(self, other: Any) -> Any:
        return self._binary('-', other)

    def __mul__(self, other: Any) -> Any:
        return self._binary('*', other)

    def __rmul__(self, other: Any) -> Any:
        if not is_arithmetic(other):
            return NotImplemented
        return self._binary('*', other)

    def __truediv__(self, other: Any) -> Any:
        return self._binary('/', other)

    def __iadd__(self, other: Any) -> Any:
        return self._inplace('+', other)

    def __isub__(self, other: Any) -> Any:
        return self._inplace('-', other)

    def __imul__(self, other: Any) -> Any:
        return self._inplace('*', other)

    def __itruediv__(self, other: Any) -> Any:
        return self._inplace('/', other)

    # -- equality -----------------------------------------------------------

    def _equals(self, other: FixedContainer) -> bool:
        raise NotImplementedError("Subclasses must implement _equals")

    def __eq__(self, other: object) -> Any:
        if not isinstance(other, FixedContainer) or other._generic is not self._generic:
            return NotImplemented
        if other.shape != self.shape:
            raise DimensionError(
                f"cannot compare {type(self).__name__} with {type(other).__name__}",
                expected=self.shape,
                actual=other.shape,
            )
        return self._equals(other)

    def __ne__(self, other: object) -> Any:
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result
