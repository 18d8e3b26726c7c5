"""
Ridders' method for finding a root within a bracketing interval.
"""
from __future__ import annotations

import math

from pyroots.util import Indenter
from .base import RootBracketingMethod
from .bracket import opposite_signs, validate_bounds
from .exception import DivergenceError
from .function import TargetFunction


# ======================================================================

class RiddersSolver(RootBracketingMethod):
    r"""
    Find a root within a bracketing interval using Ridders' method [1]_.
    The function is evaluated at the midpoint `c` of the bracket and an
    exponential factor is applied that makes the three points
    :math:`a, c, b` lie on a straight line.  The new estimate is then

    .. math:: x = c + (c - a) \frac{\mathrm{sign}(f(a) - f(b)) f(c)}
              {\sqrt{f(c)^2 - f(a) f(b)}}

    which always lies within the bracket.  Convergence is quadratic for
    smooth functions at the cost of two evaluations per iteration.

    With ``WITHIN_TOLERANCE`` criteria the search ends when successive
    estimates differ by less than `tol`.

    Parameters
    ----------
    See `RootBracketingMethod` and `EquationSolver`.

    Raises
    ------
    DivergenceError
        (From `solve`) If the function returns a non-finite value inside
        the bracket.

    References
    ----------
    .. [1] Ridders, C. J. F. "A new algorithm for computing a single root
       of a real continuous function", *IEEE Transactions on Circuits and
       Systems*, 26(11), 1979, pp. 979-980.

    Examples
    --------
    >>> x = RiddersSolver(lambda x: x**2 - 2, 0, 2, tol=1e-12).solve()
    >>> round(x, 10)
    1.4142135624
    """

    def _solve(self, out: Indenter) -> float:
        out(f"Ridders' Method Root:")
        a, b = self.lower, self.upper
        f_a, f_b = validate_bounds(self.func, a, b)
        x = x_old = b

        for it in range(1, self.maxiter + 1):
            c = 0.5 * (a + b)
            f_c = self._checked_value(c, it)

            # f(a) f(b) < 0 so 's' is positive.
            s = math.sqrt(f_c * f_c - f_a * f_b)
            dx = (c - a) * f_c / s
            if f_a < f_b:
                dx = -dx

            x = c + dx
            if not math.isfinite(x):
                raise DivergenceError("Estimate became non-finite", it, c)

            f_x = self._checked_value(x, it)
            out(f"... Iteration {it}: x = {x}, f = {f_x}, "
                f"bracket = [{a}, {b}]")

            if f_x == 0 or (self.config.within_tolerance and
                            abs(x - x_old) < self.tol):
                out(f"... Converged.")
                return x

            x_old = x

            # Keep the tightest bracket available from a, b, c and x.
            if opposite_signs(f_c, f_x):
                a, f_a, b, f_b = c, f_c, x, f_x
            elif opposite_signs(f_a, f_x):
                b, f_b = x, f_x
            else:
                a, f_a = x, f_x

        if not self.config.within_tolerance:
            return x

        raise self._convergence_error("Ridders' method", x)

    # -- Private Methods -----------------------------------------------

    def _checked_value(self, x: float, it: int) -> float:
        f_x = self.func(x)
        if not math.isfinite(f_x):
            raise DivergenceError(f"Function value non-finite at x = {x}",
                                  it, x)
        return f_x


# ----------------------------------------------------------------------

def ridders_root(func: TargetFunction, lower: float, upper: float,
                 **kwargs) -> float:
    """
    Shorthand for ``RiddersSolver(func, lower, upper, **kwargs).solve()``.
    """
    return RiddersSolver(func, lower, upper, **kwargs).solve()
