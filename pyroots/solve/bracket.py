from __future__ import annotations

import operator
from collections.abc import Callable
from typing import NamedTuple

import numpy as np

from .exception import InvalidBoundsError
from .interval import RootInterval


# ======================================================================

def opposite_signs(f1: float, f2: float) -> bool:
    """
    True if `f1` and `f2` are strictly of opposite sign.  This is
    equivalent to ``f1 * f2 < 0`` but is not affected by underflow or
    overflow of the product.  Returns False if either value is zero or
    NaN.
    """
    return bool(np.sign(f1) * np.sign(f2) < 0)


# ----------------------------------------------------------------------

def validate_bounds(func: Callable[[float], float], lower: float,
                    upper: float) -> tuple[float, float]:
    """
    Check that `lower` and `upper` bracket a root of `func`.

    Returns
    -------
    f_lower, f_upper : float, float
        Function values at each bound, for re-use by the caller.

    Raises
    ------
    InvalidBoundsError
        If `func(lower)` and `func(upper)` are not of strictly opposite
        sign, i.e. either value is zero or NaN or both have the same sign.

    Notes
    -----
    The signs are compared directly (see `opposite_signs`) rather than
    testing ``func(lower) * func(upper) >= 0``.  This gives the same
    result except where the product would underflow to zero; e.g. values
    of ``-1e-200`` and ``+1e-200`` are accepted as a valid bracket.
    """
    f_lower, f_upper = func(lower), func(upper)
    if not opposite_signs(f_lower, f_upper):
        raise InvalidBoundsError(lower, upper, f_lower, f_upper)

    return f_lower, f_upper


# ======================================================================

class GridScan(NamedTuple):
    """Result of `scan_grid`."""
    brackets: list[RootInterval]
    """Sub-intervals with a sign change."""
    zeros: list[float]
    """Grid points where the function is exactly zero."""


def scan_grid(func: Callable[[float], float], lower: float, upper: float,
              subdivisions: int) -> GridScan:
    """
    Divide ``[lower, upper]`` into `subdivisions` equal sub-intervals and
    check each for a change of sign in `func`.  The function is evaluated
    exactly ``subdivisions + 1`` times (once at each grid point).

    Parameters
    ----------
    func : Callable[[float], float]
        Function to scan.
    lower, upper : float
        Finite search range with ``lower < upper``.
    subdivisions : int
        Number of sub-intervals, > 0.

    Returns
    -------
    GridScan
        Sub-intervals where ``f(a) * f(b) < 0`` in ascending order, and
        the grid points where `func` returned exactly zero.

    Raises
    ------
    ValueError
        Illegal range or `subdivisions`.
    """
    RootInterval(lower, upper)  # Validates range.
    subdivisions = operator.index(subdivisions)
    if subdivisions < 1:
        raise ValueError(f"Subdivisions must be positive, got: "
                         f"{subdivisions}")

    brackets, zeros = [], []
    xs = np.linspace(lower, upper, num=subdivisions + 1)
    x_prev = float(xs[0])
    f_prev = func(x_prev)
    if f_prev == 0:
        zeros.append(x_prev)

    for x in xs[1:]:
        x = float(x)
        fx = func(x)

        if fx == 0:
            zeros.append(x)
        elif opposite_signs(f_prev, fx):
            brackets.append(RootInterval(x_prev, x))

        x_prev, f_prev = x, fx

    return GridScan(brackets, zeros)


# ----------------------------------------------------------------------

def find_brackets(func: Callable[[float], float], lower: float,
                  upper: float, subdivisions: int) -> list[RootInterval]:
    """
    Find sub-intervals of ``[lower, upper]`` that may contain roots of
    `func`.  See `scan_grid` for parameters.

    Notes
    -----
    - More subdivisions increase the likelihood of finding all roots but
      require more function evaluations.
    - An even number of roots inside one sub-interval (including double
      roots such as :math:`(x - 1)^2`) produces no sign change and is
      missed.
    - A root lying exactly on a grid point produces no sign change on
      either side; it is reported in ``scan_grid(...).zeros`` instead.

    Examples
    --------
    >>> find_brackets(lambda x: x**2 - 2, -2.0, 2.0, 4)
    [RootInterval[-2, -1], RootInterval[1, 2]]
    """
    return scan_grid(func, lower, upper, subdivisions).brackets
