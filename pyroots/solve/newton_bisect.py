"""
Hybrid Newton-Raphson / bisection method within a bracketing interval.
"""
from __future__ import annotations

import math

from pyroots.util import Indenter
from .base import RootBracketingMethod
from .bracket import opposite_signs, validate_bounds
from .derivative import (Derivative, DifferentiationMethod, DEFAULT_STEP,
                         make_derivative)
from .exception import DivergenceError
from .function import TargetFunction


# ======================================================================

class NewtonBisectionSolver(RootBracketingMethod):
    """
    Find a root within a bracketing interval by taking Newton-Raphson
    steps where possible and bisection steps otherwise.  The bracket is
    narrowed at every iteration, so unlike `NewtonRaphsonSolver` this
    method cannot wander away from the root.

    A bisection step is taken instead of the Newton step when:

    - :math:`f'(x)` is zero, NaN or infinite, or
    - The Newton step would leave the current bracket.

    With ``WITHIN_TOLERANCE`` criteria the search ends when
    :math:`|f(x)| < tol` or when the last step :math:`|dx| < tol`.

    Parameters
    ----------
    func, lower, upper :
        See `RootBracketingMethod`.
    fprime, method, h :
        Derivative settings, see `NewtonRaphsonSolver`.
    kwargs :
        See `EquationSolver`.

    Raises
    ------
    DivergenceError
        (From `solve`) If the function returns a non-finite value or the
        bracket becomes non-finite.

    Examples
    --------
    >>> x = NewtonBisectionSolver("x**2 - 4", 0, 5, tol=1e-8).solve()
    >>> round(x, 8)
    2.0
    """

    def __init__(self, func: TargetFunction, lower: float, upper: float, *,
                 fprime: TargetFunction = None,
                 method: DifferentiationMethod = None,
                 h: float = DEFAULT_STEP, **kwargs):
        super().__init__(func, lower, upper, **kwargs)
        self._fprime = make_derivative(func, fprime, method, h)

    # -- Public Methods ------------------------------------------------

    @property
    def derivative(self) -> Derivative:
        return self._fprime

    @property
    def differentiation_method(self) -> DifferentiationMethod:
        return self._fprime.method

    # -- Private Methods -----------------------------------------------

    def _solve(self, out: Indenter) -> float:
        out(f"Newton-Bisection Root:")
        a, b = self.lower, self.upper
        f_a, f_b = validate_bounds(self.func, a, b)
        x = self.interval.midpoint()

        for it in range(1, self.maxiter + 1):
            f_x = self.func(x)
            if not math.isfinite(f_x):
                raise DivergenceError(f"Function value non-finite at "
                                      f"x = {x}", it, x)

            if self.config.within_tolerance and abs(f_x) < self.tol:
                out(f"... Converged.")
                return x

            # Narrow bracket.
            if opposite_signs(f_a, f_x):
                b, f_b = x, f_x
            else:
                a, f_a = x, f_x

            if not (math.isfinite(a) and math.isfinite(b)):
                raise DivergenceError("Bracket became non-finite", it, x)

            # Newton step is only attempted with a usable derivative.
            df_x = self._fprime(x)
            x_newt = math.nan
            if df_x != 0 and math.isfinite(df_x):
                x_newt = x - f_x / df_x

            if math.isfinite(x_newt) and a <= x_newt <= b:
                dx = x_newt - x
                x = x_newt
                step = 'Newton'
            else:
                dx = (b - a) / 2
                x = a + dx
                step = 'bisection'

            out(f"... Iteration {it}: {step} step to x = {x}, "
                f"bracket = [{a}, {b}]")

            if self.config.within_tolerance and abs(dx) < self.tol:
                out(f"... Converged.")
                return x

        if not self.config.within_tolerance:
            return x

        raise self._convergence_error("Newton-Bisection method", x)


# ----------------------------------------------------------------------

def newton_bisect_root(func: TargetFunction, lower: float, upper: float,
                       **kwargs) -> float:
    """
    Shorthand for
    ``NewtonBisectionSolver(func, lower, upper, **kwargs).solve()``.
    """
    return NewtonBisectionSolver(func, lower, upper, **kwargs).solve()
