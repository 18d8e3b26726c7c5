import math
from unittest import TestCase

import pytest
from pytest import approx
from scipy.optimize import newton

from pyroots.solve import (ConvergenceCriteria, ConvergenceError,
                           DifferentiationMethod, DivergenceError,
                           NewtonRaphsonSolver, newton_root)

from .scalar_tst_functions import (GOLDEN_ROOT, ddouble_root_dx, dgolden_dx,
                                   double_root, dquadratic_dx, golden,
                                   no_real_roots, quadratic)


# ======================================================================

class TestNewtonRaphson(TestCase):
    def test_newton_root(self):
        # Check normal operation using each type of derivative.
        x = newton_root(golden, 1.0, fprime=dgolden_dx, tol=1e-12)
        self.assertAlmostEqual(x, GOLDEN_ROOT, places=12)

        x = newton_root(golden, 1.0, tol=1e-12)  # Numerical.
        self.assertAlmostEqual(x, GOLDEN_ROOT, places=12)

        x = newton_root("x**2 - x - 1", 1.0, tol=1e-12,
                        method=DifferentiationMethod.SYMBOLIC)
        self.assertAlmostEqual(x, GOLDEN_ROOT, places=12)

        # Default initial guess is 1.0.
        solver = NewtonRaphsonSolver(quadratic, fprime=dquadratic_dx)
        self.assertEqual(solver.x0, 1.0)
        self.assertAlmostEqual(solver.solve(), 2.0, places=6)

    def test_newton_quadratic_convergence(self):
        solver = NewtonRaphsonSolver(quadratic, 1.5, fprime=dquadratic_dx,
                                     tol=1e-10, maxiter=6)
        self.assertEqual(solver.differentiation_method,
                         DifferentiationMethod.PREDEFINED)
        self.assertAlmostEqual(solver.solve(), 2.0, delta=1e-10)

        # Error roughly squares on each step.
        errors = [abs(solver.x0 - 2.0)]
        for n in range(1, 5):
            x = NewtonRaphsonSolver(
                quadratic, 1.5, fprime=dquadratic_dx, maxiter=n,
                criteria=ConvergenceCriteria.NUMBER_OF_ITERATIONS).solve()
            errors.append(abs(x - 2.0))

        for e_prev, e_next in zip(errors[:-1], errors[1:]):
            self.assertLess(e_next, e_prev ** 2)

    def test_newton_zero_derivative(self):
        with self.assertRaises(DivergenceError) as cm:
            newton_root(double_root, 1.0, fprime=ddouble_root_dx)
        self.assertIn("Derivative is zero", str(cm.exception))
        self.assertEqual(cm.exception.iteration, 1)
        self.assertEqual(cm.exception.flag, 2)

    def test_newton_non_finite_derivative(self):
        for bad in (math.nan, math.inf):
            with self.assertRaises(DivergenceError) as cm:
                newton_root(quadratic, 1.0, fprime=lambda x: bad)
            self.assertIn("Derivative is non-finite", str(cm.exception))
            self.assertEqual(cm.exception.iteration, 1)

    def test_newton_step_overflow(self):
        # dx = 2x overflows for x0 near the largest float.
        with self.assertRaises(DivergenceError) as cm:
            newton_root(lambda x: -x, 1e308, fprime=lambda x: 0.5)
        self.assertIn("non-finite value", str(cm.exception))
        self.assertEqual(cm.exception.last_value, 1e308)

    def test_newton_function_tolerance_returns_prior_point(self):
        # |f(x0)| < tol but |dx| is large: x0 itself is returned, not the
        # stepped point.
        x = newton_root(lambda x: 1e-7 * (x - 2.0), 1.0,
                        fprime=lambda x: 1e-7, tol=1e-5)
        self.assertEqual(x, 1.0)

    def test_newton_failure_to_converge(self):
        with self.assertRaises(ConvergenceError) as cm:
            newton_root(no_real_roots, 0.5, fprime=lambda x: 2 * x,
                        maxiter=5)
        self.assertEqual(cm.exception.iterations, 5)

        x = newton_root(no_real_roots, 0.5, fprime=lambda x: 2 * x,
                        maxiter=5,
                        criteria=ConvergenceCriteria.NUMBER_OF_ITERATIONS)
        self.assertNotEqual(x, 0.5)


# ----------------------------------------------------------------------

@pytest.mark.parametrize("func, fprime, x0", [
    (golden, dgolden_dx, 1.0),
    (golden, dgolden_dx, -2.0),
    (quadratic, dquadratic_dx, 0.5),
    (lambda x: x ** 3 - 2 * x - 5, lambda x: 3 * x ** 2 - 2, 3.0)])
def test_newton_matches_scipy(func, fprime, x0):
    expected = newton(func, x0, fprime=fprime, tol=1e-14)
    x = NewtonRaphsonSolver(func, x0, fprime=fprime, tol=1e-12).solve()
    assert x == approx(expected, abs=1e-10)
