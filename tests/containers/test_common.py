"""
Tests for the FixedContainer base class hooks.
"""

import numpy as np
import pytest

from pymu.containers._common import FixedContainer, format_element


class Bare(FixedContainer):
    """Container that implements none of the subclass hooks."""
    _parameters = ('N', 'T')


class TestSubclassHooks:

    def test_coerce_required(self):
        with pytest.raises(NotImplementedError, match="Subclasses must implement _coerce"):
            Bare[2, int]()

    def test_equals_required(self):
        a = Bare[2, int]._wrap(np.zeros(2, dtype=np.int64))
        b = Bare[2, int]._wrap(np.zeros(2, dtype=np.int64))
        with pytest.raises(NotImplementedError, match="Subclasses must implement _equals"):
            a == b


class TestFormatElement:

    @pytest.mark.parametrize("value, dtype, expected", [
        (1.5, np.float64, "1.5"),
        (2.0, np.float32, "2"),
        (np.longdouble(0.5), np.longdouble, "0.5"),
        (np.inf, np.longdouble, "inf"),
        (True, np.bool_, "1"),
        (-7, np.int16, "-7"),
    ])
    def test_values(self, value, dtype, expected):
        assert format_element(value, np.dtype(dtype)) == expected
