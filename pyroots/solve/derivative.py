"""
Derivative strategies used by the Newton based solvers.
"""
from __future__ import annotations

import math
from abc import ABC, abstractmethod
from collections.abc import Callable
from enum import Enum

import sympy as sp

from .function import TargetFunction, as_expression, lambdify_scalar

DEFAULT_STEP = 0.01


# ======================================================================

class DifferentiationMethod(Enum):
    """
    Method used to obtain values of :math:`f'(x)`.

    ============  ==================  =================================
    Method        Accuracy            Use When
    ============  ==================  =================================
    NUMERICAL     Good, O(h⁴)         No derivative available (default)
    SYMBOLIC      Exact               Target given as an expression
    PREDEFINED    Exact               Derivative known a priori
    ============  ==================  =================================
    """
    NUMERICAL = 'numerical'
    SYMBOLIC = 'symbolic'
    PREDEFINED = 'predefined'


# ----------------------------------------------------------------------

class Derivative(ABC):
    """
    Abstract derivative provider; calling the object with `x` returns
    an estimate of :math:`f'(x)`.
    """

    @abstractmethod
    def __call__(self, x: float) -> float:
        raise NotImplementedError

    @property
    @abstractmethod
    def method(self) -> DifferentiationMethod:
        raise NotImplementedError


# ----------------------------------------------------------------------

class NumericalDerivative(Derivative):
    r"""
    Approximates :math:`f'(x)` using the five-point central difference
    stencil:

    .. math:: f'(x) \approx \frac{f(x - 2h) - 8f(x - h) + 8f(x + h)
              - f(x + 2h)}{12h}

    which has truncation error :math:`O(h^4)`.

    Parameters
    ----------
    func : Callable[[float], float]
        Target function.
    h : float, default = 0.01
        Step size; small enough for accuracy but large enough to avoid
        excessive rounding error.
    """

    def __init__(self, func: Callable[[float], float],
                 h: float = DEFAULT_STEP):
        if not (math.isfinite(h) and h > 0):
            raise ValueError(f"Step size must be positive, got: {h}")
        self._func, self._h = func, h

    def __call__(self, x: float) -> float:
        f, h = self._func, self._h
        return (f(x - 2 * h) - 8 * f(x - h) + 8 * f(x + h)
                - f(x + 2 * h)) / (12 * h)

    @property
    def h(self) -> float:
        return self._h

    @property
    def method(self) -> DifferentiationMethod:
        return DifferentiationMethod.NUMERICAL


# ----------------------------------------------------------------------

class SymbolicDerivative(Derivative):
    """
    Exact derivative of an expression, differentiated once at
    construction using SymPy.

    Parameters
    ----------
    expr : str or sympy.Expr
        Target function expression in one variable.
    """

    def __init__(self, expr: str | sp.Expr):
        expr, symbol = as_expression(expr)
        self._expr = sp.diff(expr, symbol)
        self._fprime = lambdify_scalar(self._expr, symbol)

    def __call__(self, x: float) -> float:
        return self._fprime(x)

    @property
    def expr(self) -> sp.Expr:
        """The derivative expression."""
        return self._expr

    @property
    def method(self) -> DifferentiationMethod:
        return DifferentiationMethod.SYMBOLIC


# ----------------------------------------------------------------------

class PredefinedDerivative(Derivative):
    """Derivative supplied by the caller as a callable `fprime`."""

    def __init__(self, fprime: Callable[[float], float]):
        if not callable(fprime):
            raise TypeError("Derivative function must be callable.")
        self._fprime = fprime

    def __call__(self, x: float) -> float:
        return self._fprime(x)

    @property
    def method(self) -> DifferentiationMethod:
        return DifferentiationMethod.PREDEFINED


# ======================================================================

def make_derivative(func: TargetFunction, fprime: TargetFunction = None,
                    method: DifferentiationMethod = None,
                    h: float = DEFAULT_STEP) -> Derivative:
    """
    Build the derivative provider for a Newton type solver.

    Parameters
    ----------
    func : Callable[[float], float], str or sympy.Expr
        Target function.  Must be an expression when
        ``method=SYMBOLIC``.
    fprime : Callable[[float], float], str or sympy.Expr, optional
        Known derivative of `func`.
    method : DifferentiationMethod, optional
        If omitted, ``PREDEFINED`` is used when `fprime` is given and
        ``NUMERICAL`` otherwise.
    h : float, default = 0.01
        Step size for ``NUMERICAL`` differentiation.

    Returns
    -------
    Derivative

    Raises
    ------
    ValueError
        If ``method=PREDEFINED`` and no `fprime` is given, or if `fprime`
        is given together with a different method.
    TypeError
        If ``method=SYMBOLIC`` and `func` is not an expression.
    """
    if method is None:
        method = (DifferentiationMethod.NUMERICAL if fprime is None else
                  DifferentiationMethod.PREDEFINED)

    if not isinstance(method, DifferentiationMethod):
        raise TypeError(f"Differentiation method must be a "
                        f"DifferentiationMethod, got: {method!r}")

    if method is DifferentiationMethod.PREDEFINED:
        if fprime is None:
            raise ValueError("Predefined derivative function has not been "
                             "set.")
        if isinstance(fprime, (str, sp.Expr)):
            fprime = lambdify_scalar(*as_expression(fprime))
        return PredefinedDerivative(fprime)

    if fprime is not None:
        raise ValueError(f"A derivative function was given but the "
                         f"differentiation method is {method.name}.")

    if method is DifferentiationMethod.SYMBOLIC:
        if not isinstance(func, (str, sp.Expr)):
            raise TypeError("Symbolic differentiation requires the target "
                            "function as a str or sympy.Expr.")
        return SymbolicDerivative(func)

    if isinstance(func, (str, sp.Expr)):
        func = lambdify_scalar(*as_expression(func))

    return NumericalDerivative(func, h)
