import math
from unittest import TestCase

import pytest

from pyroots.solve import (BisectionSolver, ConvergenceCriteria,
                           NewtonRaphsonSolver, SolverConfig,
                           ConvergenceError, DivergenceError,
                           InvalidBoundsError, SolverError)

from .scalar_tst_functions import quadratic


# ======================================================================

class TestSolverConfig(TestCase):
    def test_defaults(self):
        config = SolverConfig()
        self.assertEqual(config.tol, 1e-5)
        self.assertEqual(config.maxiter, 100)
        self.assertIs(config.criteria, ConvergenceCriteria.WITHIN_TOLERANCE)
        self.assertTrue(config.within_tolerance)

        config = SolverConfig(
            criteria=ConvergenceCriteria.NUMBER_OF_ITERATIONS)
        self.assertFalse(config.within_tolerance)

    def test_invalid(self):
        for tol in (0.0, -1e-6, math.nan, math.inf):
            with self.assertRaises(ValueError):
                SolverConfig(tol=tol)

        with self.assertRaises(ValueError):
            SolverConfig(maxiter=0)

        with self.assertRaises(TypeError):
            SolverConfig(maxiter=2.5)

        with self.assertRaises(TypeError):
            SolverConfig(criteria='tolerance')

    def test_solver_construction_fails_fast(self):
        # Configuration errors appear from the constructor, not solve().
        with self.assertRaises(ValueError):
            BisectionSolver(quadratic, 5.0, 0.0)

        with self.assertRaises(ValueError):
            BisectionSolver(quadratic, 0.0, math.inf)

        with self.assertRaises(ValueError):
            BisectionSolver(quadratic, 0.0, 5.0, tol=-1.0)

        with self.assertRaises(ValueError):
            BisectionSolver(quadratic, 0.0, 5.0, maxiter=0)

        with self.assertRaises(ValueError):
            NewtonRaphsonSolver(quadratic, x0=math.nan)

        with self.assertRaises(TypeError):
            BisectionSolver(42, 0.0, 5.0)


# ----------------------------------------------------------------------

def test_solver_errors():
    err = InvalidBoundsError(-5.0, 5.0, 26.0, 26.0)
    assert isinstance(err, SolverError)
    assert isinstance(err, RuntimeError)
    assert err.flag == 1
    assert (err.lower, err.upper) == (-5.0, 5.0)
    assert (err.f_lower, err.f_upper) == (26.0, 26.0)
    assert "do not bracket a root" in str(err)
    assert "f_lower -> 26.0" in str(err)

    err = DivergenceError("Derivative is zero at x = 1.0", 3, 1.0)
    assert err.flag == 2
    assert err.iteration == 3
    assert err.last_value == 1.0
    assert str(err).startswith("Derivative is zero")

    err = DivergenceError("Something went wrong")
    assert err.iteration == -1
    assert math.isnan(err.last_value)

    err = ConvergenceError("Failed", 10, 1.5, 1e-6)
    assert err.flag == 3
    assert (err.iterations, err.last_estimate, err.tol) == (10, 1.5, 1e-6)
    assert "Reached maxiter." in str(err)


def test_solver_error_kwargs():
    err = SolverError("Failed", flag=5, details="Extra", value=2.0)
    assert err.value == 2.0
    assert str(err) == "Failed\nflag -> 5\ndetails -> Extra\nvalue -> 2.0"

    with pytest.raises(RuntimeError):
        raise err
