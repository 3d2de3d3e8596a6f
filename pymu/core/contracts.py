"""
Fatal contract violations.

Some misuse is not recoverable and must not be turned into an exception that
a caller could swallow. Integral division by zero is the one such case: it
models hardware integer-division semantics, so the process is terminated
abnormally (SIGABRT) after the violation has been logged.

Floating-point division by zero is not a contract violation; it follows IEEE
semantics (inf / nan).
"""

from __future__ import annotations

import logging
import os
from typing import NoReturn

import numpy as np
from numpy.typing import NDArray


logger = logging.getLogger(__name__)


def fatal(message: str) -> NoReturn:
    """Log a contract violation and abort the process."""
    logger.critical("contract violation: %s", message)
    logging.shutdown()
    os.abort()


def require_nonzero_divisor(divisor: NDArray, dtype: np.dtype) -> None:
    """
    Abort if an integral divisor contains a zero.

    Args:
        divisor: Divisor already converted to the integral result type
        dtype: Result element type of the division (for the message)
    """
    if np.any(divisor == 0):
        fatal(f"integral division by zero ({dtype})")
