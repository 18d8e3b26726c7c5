"""
Bisection method for finding a root within a bracketing interval.
"""
from __future__ import annotations

import math

from pyroots.util import Indenter
from .base import RootBracketingMethod
from .bracket import opposite_signs, validate_bounds
from .exception import DivergenceError
from .function import TargetFunction


# ======================================================================

class BisectionSolver(RootBracketingMethod):
    r"""
    Approximate solution of :math:`f(x) = 0` on interval :math:`x \in
    [lower, upper]` by the bisection method.  For bisection to work
    :math:`f(x)` must change sign across the interval, i.e.
    ``func(lower)`` and ``func(upper)`` must return values of opposite
    sign.

    Each iteration halves the interval, so after `n` iterations the
    interval width is :math:`(upper - lower) / 2^n` regardless of `func`.
    Convergence is linear but guaranteed for continuous functions.

    With ``WITHIN_TOLERANCE`` criteria the search ends when the half-width
    of the interval is less than `tol`.  This check is made *before*
    evaluating `func` at the new midpoint, so the root is located to
    within `tol` but :math:`f(x)` itself is not checked.

    Examples
    --------
    >>> BisectionSolver(lambda x: x**3 - 1, 0, 4).solve()  # 2 iterations.
    1.0
    >>> f = lambda x: (2*x - 1)*(x - 3)
    >>> BisectionSolver(f, 0, 1).solve()  # Only 1 it. (soln was in centre).
    0.5

    Parameters
    ----------
    See `RootBracketingMethod` and `EquationSolver`.
    """

    def _solve(self, out: Indenter) -> float:
        out(f"Bisecting Root:")
        a, b = self.lower, self.upper
        f_a, f_b = validate_bounds(self.func, a, b)
        x_m = a

        for it in range(1, self.maxiter + 1):
            # Compute midpoint.
            x_m = (a + b) / 2
            if not math.isfinite(x_m):
                raise DivergenceError("Midpoint evaluation resulted in a "
                                      "non-finite value", it, a)

            # Check interval size before evaluating f(x_m).
            if self.config.within_tolerance and abs(b - a) / 2 < self.tol:
                out(f"... Converged.")
                return x_m

            f_m = self.func(x_m)
            out(f"... Iteration {it}: x = [{a}, {x_m}, {b}], "
                f"f = [{f_a}, {f_m}, {f_b}]")

            if f_m == 0:
                return x_m

            # Check which side root is on, narrow interval.
            if opposite_signs(f_a, f_m):
                b, f_b = x_m, f_m
            else:
                a, f_a = x_m, f_m

        if not self.config.within_tolerance:
            return x_m

        raise self._convergence_error("Bisection method", x_m)


# ----------------------------------------------------------------------

def bisect_root(func: TargetFunction, lower: float, upper: float,
                **kwargs) -> float:
    """
    Shorthand for ``BisectionSolver(func, lower, upper, **kwargs).solve()``.

    Examples
    --------
    >>> bisect_root(lambda x: x**2 - 2, 0, 2, tol=1e-3)
    1.4150390625
    """
    return BisectionSolver(func, lower, upper, **kwargs).solve()
