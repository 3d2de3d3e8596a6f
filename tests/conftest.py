"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np

from pymu import Matrix, Vector


FLOATING_TYPES = [np.float32, np.float64, np.longdouble]
INTEGRAL_TYPES = [np.int8, np.int16, np.int32, np.int64,
                  np.uint8, np.uint16, np.uint32, np.uint64]


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture(params=FLOATING_TYPES, ids=lambda t: np.dtype(t).name)
def floating_type(request):
    """Each floating element type."""
    return request.param


@pytest.fixture(params=INTEGRAL_TYPES, ids=lambda t: np.dtype(t).name)
def integral_type(request):
    """Each integral element type."""
    return request.param


@pytest.fixture
def int_vector():
    """Vector[3, int64] holding (1, 2, 3)."""
    return Vector[3, int](1, 2, 3)


@pytest.fixture
def float_vector():
    """Vector[3, float64] holding (0.5, 1.5, 2.5)."""
    return Vector[3, float](0.5, 1.5, 2.5)


@pytest.fixture
def int_matrix():
    """Matrix[2, 3, int64] holding [[1, 2, 3], [4, 5, 6]]."""
    return Matrix[2, 3, int]([1, 2, 3], [4, 5, 6])
