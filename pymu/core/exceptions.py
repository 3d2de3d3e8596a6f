"""
Exception hierarchy for PyMu.

All exceptions inherit from PyMuError to allow catching any library-specific
error. Container-specific failures inherit from the appropriate base class
here.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information

Integral division by zero is deliberately absent from this hierarchy: it is a
fatal contract violation (see pymu.core.contracts), not an exception.
"""


class PyMuError(Exception):
    """Base exception for all PyMu errors."""
    pass


class ValidationError(PyMuError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks, e.g. a
    non-arithmetic element type, non-numeric data, or an attempt to
    instantiate an unspecialised container class.
    """
    pass


class DimensionError(ValidationError):
    """
    Container dimensions are incorrect or inconsistent.

    Raised when the number of values, the length of a sequence or the shape
    of an operand does not match the fixed shape of a container.

    Attributes:
        expected: The shape (or count) the container requires
        actual: The shape (or count) that was supplied
    """

    def __init__(
        self,
        message: str,
        expected: tuple[int, ...] | int | None = None,
        actual: tuple[int, ...] | int | None = None
    ):
        super().__init__(message)
        self.expected = expected
        self.actual = actual


class OutOfRangeError(PyMuError, IndexError):
    """
    Checked element access outside the container bounds.

    Raised by the checked accessors (at(), row(), col()). Also an IndexError
    so that ordinary Python sequence handling keeps working.

    Attributes:
        index: The rejected index
        size: Number of addressable positions
    """

    def __init__(
        self,
        message: str,
        index: int | None = None,
        size: int | None = None
    ):
        super().__init__(message)
        self.index = index
        self.size = size
