"""
PyMu: fixed-shape numeric vectors and matrices for Python.

Small-dimension linear algebra with compile-time-style shapes: the length of
a Vector and the shape of a Matrix are part of its class, element types are
NumPy scalar types, and mixed-type arithmetic keeps the left operand's type.

Submodules:
    containers: Vector, Matrix, reductions and factories
    core: Exceptions, validation, tolerant equality, contracts
    geometry: 2D/3D helpers (axis accessors, rotation)
    constants: Mathematical constants and comparison epsilons
"""

import logging

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

from pymu import constants
from pymu import geometry
from pymu.containers import (
    Matrix,
    Vector,
    det,
    diag,
    dot,
    eye,
    ones,
    transpose,
    zeros,
)
from pymu.core.exceptions import (
    PyMuError,
    ValidationError,
    DimensionError,
    OutOfRangeError,
)

__all__ = [
    "__version__",
    "Vector",
    "Matrix",
    "dot",
    "transpose",
    "det",
    "diag",
    "ones",
    "zeros",
    "eye",
    "PyMuError",
    "ValidationError",
    "DimensionError",
    "OutOfRangeError",
    "constants",
    "geometry",
]
