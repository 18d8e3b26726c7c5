import math

import pytest
from pytest import approx
from scipy.optimize import brentq

from pyroots.solve import (BisectionSolver, BrentSolver, ConvergenceCriteria,
                           ConvergenceError, DivergenceError,
                           FalsePositionSolver, InvalidBoundsError,
                           NewtonBisectionSolver, RiddersSolver, brent_root)

from .scalar_tst_functions import (CountCalls, COS_MINUS_X_ROOT, CUBIC_ROOT,
                                   GOLDEN_ROOT, cos_minus_x, cubic, golden,
                                   no_real_roots, quadratic)


# ======================================================================

def test_brent_root():
    assert brent_root(quadratic, 0.0, 5.0, tol=1e-8) == approx(2.0, abs=1e-7)
    assert brent_root(cubic, 2.0, 3.0, tol=1e-12) == approx(CUBIC_ROOT,
                                                            abs=1e-10)
    assert brent_root(golden, 1.0, 2.0, tol=1e-12) == approx(GOLDEN_ROOT,
                                                             abs=1e-10)

    # Exact root at the first step.
    assert brent_root(lambda x: x - 2.0, 0.0, 4.0) == 2.0


@pytest.mark.parametrize("func, lower, upper", [
    (cubic, 2.0, 3.0),
    (golden, 1.0, 2.0),
    (cos_minus_x, 0.0, 1.0),
    (math.sin, 3.0, 4.0),
    (lambda x: math.exp(x) - 2.0, -1.0, 3.0),
    (lambda x: x ** 9 - 0.5, 0.0, 1.5)])  # Flat, poorly scaled.
def test_brent_matches_scipy(func, lower, upper):
    expected = brentq(func, lower, upper, xtol=1e-14)
    x = BrentSolver(func, lower, upper, tol=1e-12).solve()
    assert x == approx(expected, abs=1e-9)


def test_brent_faster_than_bisection():
    f_brent, f_bisect = CountCalls(cos_minus_x), CountCalls(cos_minus_x)
    x_brent = BrentSolver(f_brent, 0.0, 1.0, tol=1e-10).solve()
    x_bisect = BisectionSolver(f_bisect, 0.0, 1.0, tol=1e-10).solve()
    assert x_brent == approx(COS_MINUS_X_ROOT, abs=1e-9)
    assert x_bisect == approx(COS_MINUS_X_ROOT, abs=1e-9)
    assert f_brent.calls < f_bisect.calls


def test_brent_failures():
    with pytest.raises(ConvergenceError) as exc_info:
        BrentSolver(cubic, 2.0, 3.0, tol=1e-12, maxiter=2).solve()
    assert exc_info.value.iterations == 2

    # Best effort result instead.
    x = BrentSolver(cubic, 2.0, 3.0, tol=1e-12, maxiter=2,
                    criteria=ConvergenceCriteria.NUMBER_OF_ITERATIONS).solve()
    assert 2.0 <= x <= 3.0

    # Function undefined over most of the interval (including the root).
    with pytest.raises(DivergenceError):
        BrentSolver(lambda x: math.nan if 0.5 < x < 1.9 else x - 1.5,
                    0.0, 2.0).solve()


@pytest.mark.parametrize("solver_type", [
    BisectionSolver, BrentSolver, FalsePositionSolver, NewtonBisectionSolver,
    RiddersSolver])
def test_bracketing_invalid_bounds(solver_type):
    with pytest.raises(InvalidBoundsError) as exc_info:
        solver_type(no_real_roots, -5.0, 5.0).solve()

    err = exc_info.value
    assert (err.lower, err.upper) == (-5.0, 5.0)
    assert (err.f_lower, err.f_upper) == (26.0, 26.0)
