"""
Shared numeric routines for PyMu.

These work on plain (dynamically sized) nested sequences and know nothing
about the fixed-shape containers that call into them.

Submodules:
    determinant: Cofactor-expansion determinant
"""

from pymu.core.compute.determinant import determinant

__all__ = [
    "determinant",
]
