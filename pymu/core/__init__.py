"""
Core infrastructure for PyMu.

This module provides the shared abstractions used by the fixed-shape
containers in pymu.containers.

Key components:
    exceptions: Exception hierarchy
    validation: Input validators
    typetraits: Per-element-type (tolerant) equality
    contracts: Fatal contract violations
    compute: Standalone numeric routines (determinant)
"""

from pymu.core.exceptions import (
    PyMuError,
    ValidationError,
    DimensionError,
    OutOfRangeError,
)
from pymu.core.typetraits import TypeTraits, epsilon, equals, mixed_equals, traits

__all__ = [
    # Exceptions
    "PyMuError",
    "ValidationError",
    "DimensionError",
    "OutOfRangeError",
    # Equality
    "TypeTraits",
    "epsilon",
    "equals",
    "mixed_equals",
    "traits",
]
