"""
Mathematical constants and comparison epsilons.

The epsilons are the per-type tolerances used by the tolerant floating-point
equality in pymu.core.typetraits. They are deliberately much looser than
machine epsilon: results that went through a handful of arithmetic steps
should still compare equal to their closed-form value.
"""

import math

import numpy as np


# Mathematical constants
e = math.e                      # euler constant
log2e = math.log2(math.e)       # log2(e)
log10e = math.log10(math.e)     # log10(e)
ln2 = math.log(2.0)             # ln(2)
ln10 = math.log(10.0)           # ln(10)
pi = math.pi                    # pi
pi2 = math.pi / 2.0             # pi/2
pi4 = math.pi / 4.0             # pi/4
inv_pi = 1.0 / math.pi          # 1/pi
sqrt2 = math.sqrt(2.0)          # sqrt(2)
inv_sqrt2 = 1.0 / math.sqrt(2.0)  # 1/sqrt(2)

# Comparison epsilon for single precision ("float")
EPS_FLOAT32 = np.float32(1.0e-5)

# Comparison epsilon for double precision ("double")
EPS_FLOAT64 = np.float64(1.0e-14)

# Comparison epsilon for extended precision ("long double")
EPS_LONGDOUBLE = np.longdouble(1.0e-14)

# Floating dtypes that are valid container element types, with their epsilon
FLOATING_EPSILONS = {
    np.dtype(np.float32): EPS_FLOAT32,
    np.dtype(np.float64): EPS_FLOAT64,
    np.dtype(np.longdouble): EPS_LONGDOUBLE,
}

__all__ = [
    'e',
    'log2e',
    'log10e',
    'ln2',
    'ln10',
    'pi',
    'pi2',
    'pi4',
    'inv_pi',
    'sqrt2',
    'inv_sqrt2',
    'EPS_FLOAT32',
    'EPS_FLOAT64',
    'EPS_LONGDOUBLE',
    'FLOATING_EPSILONS',
]
