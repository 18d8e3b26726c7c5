"""
False position (regula falsi) method for finding a root within a
bracketing interval.
"""
from __future__ import annotations

import math

from pyroots.util import Indenter
from .base import RootBracketingMethod
from .bracket import opposite_signs, validate_bounds
from .exception import DivergenceError
from .function import TargetFunction


# ======================================================================

class FalsePositionSolver(RootBracketingMethod):
    """
    Find a root within a bracketing interval using the false position
    method.  Each new point is where the straight line joining the ends of
    the bracket crosses zero, and the bracket is then narrowed as for
    bisection.  Convergence is usually faster than bisection for smooth
    functions, but may become slow if one end of the bracket never moves
    (e.g. strongly convex functions).

    With ``WITHIN_TOLERANCE`` criteria the search ends when
    :math:`|f(x)| < tol`.

    Parameters
    ----------
    See `RootBracketingMethod` and `EquationSolver`.

    Raises
    ------
    DivergenceError
        (From `solve`) If the function returns a non-finite value inside
        the bracket.

    Examples
    --------
    >>> FalsePositionSolver(lambda x: x - 2, 0, 4).solve()  # Exact.
    2.0
    """

    def _solve(self, out: Indenter) -> float:
        out(f"False Position Root:")
        a, b = self.lower, self.upper
        f_a, f_b = validate_bounds(self.func, a, b)
        x = b

        for it in range(1, self.maxiter + 1):
            # Secant through the bracket ends.
            x = a - (b - a) * f_a / (f_b - f_a)
            if not math.isfinite(x):
                raise DivergenceError("Estimate became non-finite", it, a)

            f_x = self.func(x)
            if not math.isfinite(f_x):
                raise DivergenceError(f"Function value non-finite at "
                                      f"x = {x}", it, a)

            out(f"... Iteration {it}: x = [{a}, {x}, {b}], "
                f"f = [{f_a}, {f_x}, {f_b}]")

            if f_x == 0 or (self.config.within_tolerance and
                            abs(f_x) < self.tol):
                out(f"... Converged.")
                return x

            if opposite_signs(f_a, f_x):
                b, f_b = x, f_x
            else:
                a, f_a = x, f_x

        if not self.config.within_tolerance:
            return x

        raise self._convergence_error("False position method", x)


# ----------------------------------------------------------------------

def false_position_root(func: TargetFunction, lower: float, upper: float,
                        **kwargs) -> float:
    """
    Shorthand for
    ``FalsePositionSolver(func, lower, upper, **kwargs).solve()``.
    """
    return FalsePositionSolver(func, lower, upper, **kwargs).solve()
