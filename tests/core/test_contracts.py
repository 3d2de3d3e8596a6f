"""
Tests for fatal contract violations.

Integral division by zero aborts the process, so each case runs in a child
interpreter and the test asserts an abnormal exit.
"""

import os
import signal
import subprocess
import sys
import textwrap
import warnings

import numpy as np

from pymu import Matrix, Vector


ROOT = os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))


def run_child(code: str) -> subprocess.CompletedProcess:
    env = dict(os.environ)
    env['PYTHONPATH'] = os.pathsep.join(filter(None, [ROOT, env.get('PYTHONPATH')]))
    return subprocess.run(
        [sys.executable, '-c', textwrap.dedent(code)],
        capture_output=True,
        cwd=ROOT,
        env=env,
        timeout=60,
    )


def assert_aborted(result: subprocess.CompletedProcess) -> None:
    assert result.returncode != 0
    if os.name == 'posix':
        assert result.returncode == -signal.SIGABRT


# ═══════════════════════════════════════════════════════════════════════
# Fatal integral division
# ═══════════════════════════════════════════════════════════════════════


class TestIntegralDivisionByZero:
    """Integral division by zero terminates the process."""

    def test_vector_by_scalar_zero(self):
        result = run_child("""
            from pymu import Vector
            Vector[2, int](1, 2) / 0
            print("survived")
        """)
        assert_aborted(result)
        assert b"survived" not in result.stdout

    def test_in_place_division(self):
        result = run_child("""
            from pymu import Vector
            v = Vector[3, 'int16'](1, 2, 3)
            v /= 0
        """)
        assert_aborted(result)

    def test_scalar_truncating_to_zero(self):
        """The divisor is converted to the integral type first: 0.5 becomes 0."""
        result = run_child("""
            from pymu import Vector
            Vector[2, int](1, 2) / 0.5
        """)
        assert_aborted(result)

    def test_element_wise_zero(self):
        result = run_child("""
            from pymu import Vector
            Vector[2, int](1, 2) / Vector[2, int](1, 0)
        """)
        assert_aborted(result)

    def test_matrix_by_zero(self):
        result = run_child("""
            from pymu import Matrix
            Matrix[2, 2, 'uint8'](1) / 0
        """)
        assert_aborted(result)

    def test_not_catchable(self):
        result = run_child("""
            from pymu import Vector
            try:
                Vector[1, int](1) / 0
            except BaseException:
                print("caught")
        """)
        assert_aborted(result)
        assert b"caught" not in result.stdout

    def test_logged_before_abort(self):
        result = run_child("""
            import logging
            logging.basicConfig(level=logging.CRITICAL)
            from pymu import Vector
            Vector[2, int](1, 2) / 0
        """)
        assert_aborted(result)
        assert b"integral division by zero" in result.stderr


# ═══════════════════════════════════════════════════════════════════════
# Non-fatal floating division
# ═══════════════════════════════════════════════════════════════════════


class TestFloatingDivisionByZero:
    """Floating division by zero follows IEEE and does not abort."""

    def test_vector_by_zero(self, floating_type):
        result = Vector[2, floating_type](1, -1) / 0
        assert np.isposinf(result[0])
        assert np.isneginf(result[1])

    def test_zero_by_zero_is_nan(self):
        result = Vector[1, float](0) / 0
        assert np.isnan(result[0])

    def test_matrix_by_zero(self):
        result = Matrix[2, 2, np.float32](1) / 0
        assert all(np.isposinf(value) for row in result for value in row)

    def test_no_warning(self):
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            Vector[2, float](1, 2) / 0

    def test_integral_nonzero_division_fine(self):
        assert Vector[2, int](4, 6) / 2 == Vector[2, int](2, 3)
