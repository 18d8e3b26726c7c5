"""
Brent's method for finding a root within a bracketing interval.
"""
from __future__ import annotations

import math

from pyroots.util import Indenter
from .base import RootBracketingMethod
from .bracket import validate_bounds
from .exception import DivergenceError
from .function import TargetFunction


# ======================================================================

class BrentSolver(RootBracketingMethod):
    """
    Find a root within a bracketing interval using Brent's method [1]_,
    which combines inverse quadratic interpolation, the secant method and
    bisection.  At each step the interpolated estimate is only accepted if
    it falls within the bracket and is converging quickly enough,
    otherwise a bisection step is taken.  This gives super-linear
    convergence for smooth functions while retaining the guaranteed
    convergence of bisection.

    With ``WITHIN_TOLERANCE`` criteria the search ends when:

    - The bracket half-width is within :math:`2 tol |b| + tol` (where
      `b` is the current best estimate), or :math:`f(b) = 0`, or
    - Successive estimates differ by less than `tol`.

    Parameters
    ----------
    See `RootBracketingMethod` and `EquationSolver`.

    Raises
    ------
    DivergenceError
        (From `solve`) If the function returns a non-finite value inside
        the bracket, e.g. at a pole.

    References
    ----------
    .. [1] Brent, R. P. *Algorithms for Minimization Without Derivatives*,
       Englewood Cliffs, NJ: Prentice-Hall, 1973. Ch. 3-4.

    Examples
    --------
    >>> x = BrentSolver(lambda x: x**3 - 2*x - 5, 2, 3, tol=1e-12).solve()
    >>> round(x, 9)
    2.094551482
    """

    def _solve(self, out: Indenter) -> float:
        out(f"Brent's Method Root:")
        t = self.tol
        a, b = self.lower, self.upper
        f_a, f_b = validate_bounds(self.func, a, b)

        # Point 'c' is the counterpoint of 'b' with f(c) of opposite sign.
        c, f_c = a, f_a
        d = e = b - a

        for it in range(1, self.maxiter + 1):
            # Keep 'b' as the best estimate.
            if abs(f_c) < abs(f_b):
                a, b, c = b, c, b
                f_a, f_b, f_c = f_b, f_c, f_b

            tol = 2.0 * t * abs(b) + t
            m = 0.5 * (c - b)
            out(f"... Iteration {it}: x = [{b}, {c}], f = [{f_b}, {f_c}]")

            if abs(m) <= tol or f_b == 0:
                out(f"... Converged.")
                return b

            if abs(e) < tol or abs(f_a) <= abs(f_b):
                # Bisection forced.
                d = e = m

            else:
                s = f_b / f_a
                if a == c:
                    # Linear interpolation (secant).
                    p = 2.0 * m * s
                    q = 1.0 - s
                else:
                    # Inverse quadratic interpolation.
                    q = f_a / f_c
                    r = f_b / f_c
                    p = s * (2.0 * m * q * (q - r) - (b - a) * (r - 1.0))
                    q = (q - 1.0) * (r - 1.0) * (s - 1.0)

                if p > 0.0:
                    q = -q
                else:
                    p = -p

                e_prev, e = e, d
                if (2.0 * p < 3.0 * m * q - abs(tol * q) and
                        p < abs(0.5 * e_prev * q)):
                    d = p / q  # Accept interpolation.
                else:
                    d = e = m

            # Step from the previous best estimate.
            a, f_a = b, f_b
            if abs(d) > tol:
                b += d
            else:
                b += math.copysign(tol, m)

            if not math.isfinite(b):
                raise DivergenceError("Estimate became non-finite", it, a)

            if self.config.within_tolerance and abs(b - a) < t:
                out(f"... Converged.")
                return b

            if it == self.maxiter:
                break

            f_b = self.func(b)
            if not math.isfinite(f_b):
                raise DivergenceError(f"Function value non-finite at "
                                      f"x = {b}", it, a)

            if (f_b > 0.0) == (f_c > 0.0):
                # Sign change now lies between 'a' and 'b'.
                c, f_c = a, f_a
                d = e = b - a

        if not self.config.within_tolerance:
            return b

        raise self._convergence_error("Brent's method", b)


# ----------------------------------------------------------------------

def brent_root(func: TargetFunction, lower: float, upper: float,
               **kwargs) -> float:
    """
    Shorthand for ``BrentSolver(func, lower, upper, **kwargs).solve()``.
    """
    return BrentSolver(func, lower, upper, **kwargs).solve()
