import math
from unittest import TestCase

import pytest
from pytest import approx

from pyroots.solve import (ConvergenceCriteria, ConvergenceError,
                           DifferentiationMethod, DivergenceError,
                           NewtonBisectionSolver, newton_bisect_root)

from .scalar_tst_functions import (CountCalls, GOLDEN_ROOT, dgolden_dx,
                                   dquadratic_dx, golden, quadratic)


# ======================================================================

@pytest.mark.parametrize("func, kwargs", [
    (quadratic, {}),
    (quadratic, {'fprime': dquadratic_dx}),
    ("x**2 - 4", {'method': DifferentiationMethod.SYMBOLIC}),
    ("x**2 - 4", {'method': DifferentiationMethod.NUMERICAL, 'h': 1e-3}),
    ("x**2 - 4", {'fprime': "2*x"})])
def test_newton_bisect_derivatives(func, kwargs):
    x = newton_bisect_root(func, 0.0, 5.0, tol=1e-8, **kwargs)
    assert x == approx(2.0, abs=1e-7)


# ----------------------------------------------------------------------

class TestNewtonBisection(TestCase):
    def test_newton_bisect(self):
        x = newton_bisect_root(golden, 1.0, 2.0, fprime=dgolden_dx,
                               tol=1e-12)
        self.assertAlmostEqual(x, GOLDEN_ROOT, places=11)

        x = newton_bisect_root(lambda x: x ** 3 - 2 * x + 2, -5.0, 0.0,
                               tol=1e-10)
        self.assertAlmostEqual(x, -1.7692923542386314, places=8)

        x = newton_bisect_root(lambda x: x ** 2 - 4 * x + 3, 0.5, 1.5,
                               tol=1e-10)
        self.assertAlmostEqual(x, 1.0, places=8)

    def test_newton_bisect_faster_than_bisection(self):
        f = CountCalls(golden)
        newton_bisect_root(f, 1.0, 2.0, fprime=dgolden_dx, tol=1e-12)
        self.assertLess(f.calls, 15)

    def test_newton_bisect_zero_derivative(self):
        # f'(x) = 0 at the first point (midpoint x = 1), so a bisection
        # step is used instead.  f(1) < 0 so the bracket becomes [1, 5],
        # containing only the root 2cos(40 deg).
        def f(x):
            return x ** 3 - 3 * x + 1

        solver = NewtonBisectionSolver(f, -3.0, 5.0,
                                       fprime=lambda x: 3 * x ** 2 - 3,
                                       tol=1e-10)
        self.assertEqual(solver.interval.midpoint(), 1.0)
        x = solver.solve()
        self.assertLess(abs(f(x)), solver.tol)
        self.assertAlmostEqual(x, 1.5320888862613389, places=8)

    def test_newton_bisect_failures(self):
        with self.assertRaises(ConvergenceError) as cm:
            newton_bisect_root(quadratic, 0.0, 5.0, fprime=dquadratic_dx,
                               tol=1e-14, maxiter=1)
        self.assertEqual(cm.exception.iterations, 1)

        # Best effort result instead.
        x = newton_bisect_root(
            quadratic, 0.0, 5.0, fprime=dquadratic_dx, maxiter=1,
            criteria=ConvergenceCriteria.NUMBER_OF_ITERATIONS)
        self.assertAlmostEqual(x, 2.05)

        # Pole at the midpoint.
        with self.assertRaises(DivergenceError):
            newton_bisect_root("1/(x - 1)", 0.0, 2.0)

    def test_newton_bisect_non_finite_value(self):
        # Not a pole: the midpoint 2.5 is finite, but the Newton step lands
        # at x = 2.05 where the function is undefined.
        with self.assertRaises(DivergenceError) as cm:
            newton_bisect_root(
                lambda x: math.nan if 1.9 < x < 2.1 else x * x - 4,
                0.0, 5.0, fprime=lambda x: 2 * x)
        self.assertEqual(cm.exception.iteration, 2)
        self.assertIn("non-finite", str(cm.exception))
