"""
Conversion of target functions into plain callables.  Any callable
``f(x) -> float`` may be used directly; textual formulas and SymPy
expressions are converted once using SymPy.
"""
from __future__ import annotations

from collections.abc import Callable
from typing import Union

import numpy as np
import sympy as sp

TargetFunction = Union[Callable[[float], float], str, sp.Expr]


# ======================================================================

def as_expression(func: TargetFunction) -> tuple[sp.Expr, sp.Symbol]:
    """
    Return the SymPy expression and its free variable for an expression
    type target function.

    Parameters
    ----------
    func : str or sympy.Expr
        Expression in (at most) one free variable.  A constant
        expression is assigned the variable ``x``.

    Returns
    -------
    expr, symbol : sympy.Expr, sympy.Symbol

    Raises
    ------
    TypeError
        If `func` is an ordinary callable (no expression available).
    ValueError
        If the expression cannot be parsed or has more than one free
        variable.
    """
    if isinstance(func, str):
        try:
            expr = sp.sympify(func)
        except (sp.SympifyError, SyntaxError, TypeError) as exc:
            raise ValueError(f"Could not parse expression '{func}'.") from exc

    elif isinstance(func, sp.Expr):
        expr = func

    else:
        raise TypeError(f"Expected a str or sympy.Expr, got: "
                        f"{type(func).__name__}")

    free = sorted(expr.free_symbols, key=str)
    if len(free) > 1:
        raise ValueError(f"Expression must have one variable, got: "
                         f"{', '.join(str(s) for s in free)}")

    symbol = free[0] if free else sp.Symbol('x')
    return expr, symbol


# ----------------------------------------------------------------------

def lambdify_scalar(expr: sp.Expr,
                    symbol: sp.Symbol) -> Callable[[float], float]:
    """
    Convert `expr` into a scalar function of `symbol` that follows
    IEEE-754 semantics, i.e. division by zero and similar cases return
    ``inf`` or ``nan`` rather than raising an exception.
    """
    numeric = sp.lambdify(symbol, expr, modules='numpy')

    def scalar_func(x: float) -> float:
        with np.errstate(all='ignore'):
            return float(numeric(np.float64(x)))

    scalar_func.__doc__ = f"f({symbol}) = {expr}"
    return scalar_func


# ----------------------------------------------------------------------

def as_function(func: TargetFunction) -> Callable[[float], float]:
    """
    Return `func` as a callable ``f(x) -> float``.  Callables are returned
    unchanged; ``str`` or `sympy.Expr` formulas are converted (see
    `as_expression`).

    Examples
    --------
    >>> f = as_function("x**2 - 4")
    >>> f(3.0)
    5.0
    """
    if isinstance(func, (str, sp.Expr)):
        return lambdify_scalar(*as_expression(func))

    if not callable(func):
        raise TypeError(f"Target function must be callable, got: "
                        f"{type(func).__name__}")

    return func
