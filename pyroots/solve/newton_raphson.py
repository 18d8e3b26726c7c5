"""
Newton-Raphson method for refining an initial estimate of a root.
"""
from __future__ import annotations

import math

from pyroots.util import Indenter
from .base import RootPolishingMethod
from .config import DEFAULT_INITIAL_GUESS
from .derivative import (Derivative, DifferentiationMethod, DEFAULT_STEP,
                         make_derivative)
from .exception import DivergenceError
from .function import TargetFunction


# ======================================================================

class NewtonRaphsonSolver(RootPolishingMethod):
    r"""
    Refine an initial guess `x0` using the Newton-Raphson iteration:

    .. math:: x_{n+1} = x_n - \frac{f(x_n)}{f'(x_n)}

    Convergence is quadratic near a simple root but is not guaranteed
    away from it.  If :math:`f'(x)` is zero or non-finite at any point the
    iteration cannot continue and `DivergenceError` is raised.

    With ``WITHIN_TOLERANCE`` criteria the search ends when:

    - The step :math:`|dx| < tol`, returning the new point, or
    - :math:`|f(x)| < tol`, returning the point `x` where this was
      evaluated (i.e. before the step is taken).

    Parameters
    ----------
    func :
        See `EquationSolver`.
    x0 : float, default = 1.0
        Initial guess.
    fprime : Callable[[float], float], str or sympy.Expr, optional
        Derivative of `func` if known.
    method : DifferentiationMethod, optional
        How :math:`f'(x)` is obtained, see `make_derivative`.  Defaults to
        ``PREDEFINED`` if `fprime` is given otherwise ``NUMERICAL``.
    h : float, default = 0.01
        Step size for ``NUMERICAL`` differentiation.
    kwargs :
        See `EquationSolver`.

    Examples
    --------
    >>> x = NewtonRaphsonSolver(lambda x: x**2 - 4, 1.5,
    ...                         fprime=lambda x: 2*x, tol=1e-10).solve()
    >>> round(x, 10)
    2.0
    """

    def __init__(self, func: TargetFunction,
                 x0: float = DEFAULT_INITIAL_GUESS, *,
                 fprime: TargetFunction = None,
                 method: DifferentiationMethod = None,
                 h: float = DEFAULT_STEP, **kwargs):
        super().__init__(func, x0, **kwargs)
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
        out(f"Newton-Raphson Root:")
        x = self.x0

        for it in range(1, self.maxiter + 1):
            if not math.isfinite(x):
                raise DivergenceError("Estimate became non-finite", it)

            f_x = self.func(x)
            df_x = self._fprime(x)
            out(f"... Iteration {it}: x = {x}, f = {f_x}, f' = {df_x}")

            if df_x == 0:
                raise DivergenceError(f"Derivative is zero at x = {x}",
                                      it, x)
            if not math.isfinite(df_x):
                raise DivergenceError(f"Derivative is non-finite at "
                                      f"x = {x}", it, x)

            dx = -f_x / df_x
            x_new = x + dx

            if self.config.within_tolerance:
                if abs(dx) < self.tol:
                    out(f"... Converged.")
                    return x_new

                if abs(f_x) < self.tol:
                    out(f"... Converged.")
                    return x

            if not math.isfinite(x_new):
                raise DivergenceError("Step resulted in a non-finite value",
                                      it, x)
            x = x_new

        if not self.config.within_tolerance:
            return x

        raise self._convergence_error("Newton-Raphson method", x)


# ----------------------------------------------------------------------

def newton_root(func: TargetFunction, x0: float = DEFAULT_INITIAL_GUESS,
                **kwargs) -> float:
    """
    Shorthand for ``NewtonRaphsonSolver(func, x0, **kwargs).solve()``.
    """
    return NewtonRaphsonSolver(func, x0, **kwargs).solve()
