"""
Tests for the PyMu exception hierarchy.

Validates:
    - Inheritance chain (all exceptions catchable via PyMuError)
    - Diagnostic attributes on DimensionError and OutOfRangeError
    - OutOfRangeError is also an IndexError
    - Default attribute values (None for optional attributes)
"""

import pytest

from pymu.core.exceptions import (
    DimensionError,
    OutOfRangeError,
    PyMuError,
    ValidationError,
)


# ═══════════════════════════════════════════════════════════════════════
# Inheritance hierarchy
# ═══════════════════════════════════════════════════════════════════════


class TestInheritance:
    """Every exception is catchable via PyMuError."""

    def test_validation_error_is_pymu_error(self):
        with pytest.raises(PyMuError):
            raise ValidationError("bad input")

    def test_dimension_error_is_validation_error(self):
        with pytest.raises(ValidationError):
            raise DimensionError("wrong shape")

    def test_out_of_range_is_pymu_error(self):
        with pytest.raises(PyMuError):
            raise OutOfRangeError("index 5 out of range")

    def test_out_of_range_is_index_error(self):
        """Plain sequence code catching IndexError keeps working."""
        with pytest.raises(IndexError):
            raise OutOfRangeError("index 5 out of range")

    def test_out_of_range_is_not_validation_error(self):
        assert not isinstance(OutOfRangeError("x"), ValidationError)


# ═══════════════════════════════════════════════════════════════════════
# Diagnostic attributes
# ═══════════════════════════════════════════════════════════════════════


class TestDimensionError:

    def test_attributes(self):
        err = DimensionError("shape mismatch", expected=(3,), actual=(2,))
        assert err.expected == (3,)
        assert err.actual == (2,)

    def test_defaults_are_none(self):
        err = DimensionError("shape mismatch")
        assert err.expected is None
        assert err.actual is None

    def test_message(self):
        assert str(DimensionError("values: expected 3 values, got 2")) == \
            "values: expected 3 values, got 2"


class TestOutOfRangeError:

    def test_attributes(self):
        err = OutOfRangeError("index: index 4 out of range for size 3", index=4, size=3)
        assert err.index == 4
        assert err.size == 3
        assert "out of range" in str(err)

    def test_defaults_are_none(self):
        err = OutOfRangeError("bad index")
        assert err.index is None
        assert err.size is None
