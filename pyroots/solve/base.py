"""
Common structure of all equation solvers.  Solvers are immutable once
constructed: deriving a solver for a new bracket or guess creates a new
object and `solve()` keeps all working values local, so the same
solver may be used repeatedly or from multiple threads.
"""
from __future__ import annotations

import copy
import math
from abc import ABC, abstractmethod
from collections.abc import Callable

from pyroots.util import Indenter
from .bracket import scan_grid
from .config import (ConvergenceCriteria, SolverConfig, DEFAULT_CRITERIA,
                     DEFAULT_INITIAL_GUESS, DEFAULT_ITERATIONS,
                     DEFAULT_SUBDIVISIONS, DEFAULT_TOLERANCE)
from .exception import ConvergenceError, DivergenceError
from .function import TargetFunction, as_function
from .interval import RootInterval


# ======================================================================

class EquationSolver(ABC):
    """
    Abstract root finding algorithm for scalar equations :math:`f(x) = 0`.

    Parameters
    ----------
    func : Callable[[float], float], str or sympy.Expr
        Target function.  Expressions are converted to a callable using
        SymPy (see `as_function`).
    tol : float, default = 1e-5
        Convergence tolerance (meaning depends on the algorithm, see
        `ConvergenceCriteria`).
    maxiter : int, default = 100
        Maximum number of iterations.
    criteria : ConvergenceCriteria, default = WITHIN_TOLERANCE
        Stopping rule.
    disp : int or bool, default = False
        If > 0, print progress statements.  Values > 1 also print from
        nested solvers used by `solve_all`.

    Raises
    ------
    ValueError, TypeError
        Invalid parameters (checked immediately).
    """

    def __init__(self, func: TargetFunction, *,
                 tol: float = DEFAULT_TOLERANCE,
                 maxiter: int = DEFAULT_ITERATIONS,
                 criteria: ConvergenceCriteria = DEFAULT_CRITERIA,
                 disp: int | bool = False):
        self._func = as_function(func)
        self._config = SolverConfig(tol, maxiter, criteria)
        self._disp = int(disp)

    def __repr__(self):
        return (f"{type(self).__name__}({self._repr_state()}, "
                f"tol={self.tol:.2e}, maxiter={self.maxiter}, "
                f"criteria={self.criteria.name})")

    # -- Public Methods ------------------------------------------------

    @property
    def config(self) -> SolverConfig:
        return self._config

    @property
    def criteria(self) -> ConvergenceCriteria:
        return self._config.criteria

    @property
    def disp(self) -> int:
        return self._disp

    @property
    def func(self) -> Callable[[float], float]:
        """Target function as a callable."""
        return self._func

    @property
    def maxiter(self) -> int:
        return self._config.maxiter

    def solve(self) -> float:
        """
        Find a single root of the target function.

        Returns
        -------
        float
            Estimated root.

        Raises
        ------
        InvalidBoundsError
            Bounds do not bracket a root (bracketing methods only).
        DivergenceError
            A non-finite value or unusable derivative was produced.
        ConvergenceError
            Tolerance not reached within `maxiter` iterations
            (``WITHIN_TOLERANCE`` criteria only).
        """
        return self._solve(Indenter(self._disp))

    @property
    def tol(self) -> float:
        return self._config.tol

    # -- Private Methods -----------------------------------------------

    def _convergence_error(self, name: str, estimate: float):
        return ConvergenceError(
            f"{name} failed to converge within specified tolerance",
            self.maxiter, estimate, self.tol)

    def _replace(self, **attrs) -> EquationSolver:
        # Shallow copy; all shared members are immutable.
        new = copy.copy(self)
        new.__dict__.update(attrs)
        return new

    @abstractmethod
    def _repr_state(self) -> str:
        raise NotImplementedError

    @abstractmethod
    def _solve(self, out: Indenter) -> float:
        raise NotImplementedError


# ----------------------------------------------------------------------

class RootBracketingMethod(EquationSolver, ABC):
    """
    Abstract solver requiring an interval ``[lower, upper]`` where
    :math:`f(lower)` and :math:`f(upper)` have opposite signs.  Convergence
    is guaranteed for continuous functions.

    Parameters
    ----------
    func :
        See `EquationSolver`.
    lower, upper : float
        Ends of the search interval.  Must be finite with
        ``lower < upper``.
    kwargs :
        See `EquationSolver`.
    """

    def __init__(self, func: TargetFunction, lower: float, upper: float,
                 **kwargs):
        super().__init__(func, **kwargs)
        self._interval = RootInterval(float(lower), float(upper))

    # -- Public Methods ------------------------------------------------

    @property
    def interval(self) -> RootInterval:
        return self._interval

    @property
    def lower(self) -> float:
        return self._interval.lower

    def solve_all(self, lower: float = None, upper: float = None,
                  subdivisions: int = DEFAULT_SUBDIVISIONS) -> list[float]:
        """
        Find all roots that can be bracketed within ``[lower, upper]``.

        The range is divided into `subdivisions` equal sub-intervals and
        a new solver (identical settings) is applied to each one showing
        a change of sign.  Sub-intervals where the solver diverges or fails
        to converge are skipped.  Roots closer than ``2 * tol`` to a root
        already found are discarded.

        Parameters
        ----------
        lower, upper : float, optional
            Search range.  Defaults to the solver's own interval.
        subdivisions : int, default = 100
            Number of sub-intervals to check.

        Returns
        -------
        list[float]
            Roots in ascending order (may be empty).

        Notes
        -----
        Roots of even multiplicity (e.g. :math:`(x-1)^2`), or an even
        number of roots within a single sub-interval, do not produce a
        change of sign and are not found.
        """
        lower = self.lower if lower is None else lower
        upper = self.upper if upper is None else upper
        return find_all_roots(self, lower, upper, subdivisions,
                              self.with_interval, 2.0 * self.tol)

    @property
    def upper(self) -> float:
        return self._interval.upper

    def with_interval(self, interval: RootInterval) -> RootBracketingMethod:
        """Return a copy of this solver using a different interval."""
        if not isinstance(interval, RootInterval):
            raise TypeError(f"Expected a RootInterval, got: "
                            f"{type(interval).__name__}")
        return self._replace(_interval=interval)

    # -- Private Methods -----------------------------------------------

    def _repr_state(self) -> str:
        return f"bounds=[{self.lower:.6g}, {self.upper:.6g}]"


# ----------------------------------------------------------------------

class RootPolishingMethod(EquationSolver, ABC):
    """
    Abstract solver that refines an initial guess `x0`.  Convergence is
    typically fast near a root but is not guaranteed; a poor guess may
    diverge.

    Parameters
    ----------
    func :
        See `EquationSolver`.
    x0 : float, default = 1.0
        Initial guess, must be finite.
    kwargs :
        See `EquationSolver`.
    """

    def __init__(self, func: TargetFunction,
                 x0: float = DEFAULT_INITIAL_GUESS, **kwargs):
        super().__init__(func, **kwargs)
        self._x0 = self._check_guess(x0)

    # -- Public Methods ------------------------------------------------

    def solve_all(self, lower: float, upper: float,
                  subdivisions: int = DEFAULT_SUBDIVISIONS) -> list[float]:
        """
        Find all roots within ``[lower, upper]`` using the midpoint of
        each sub-interval showing a change of sign as the initial guess.
        Guesses that diverge or fail to converge are skipped.  Roots
        closer than `tol` to a root already found are discarded.

        See `RootBracketingMethod.solve_all` for parameters and notes.
        """
        return find_all_roots(
            self, lower, upper, subdivisions,
            lambda interval: self.with_guess(interval.midpoint()),
            self.tol)

    def with_guess(self, x0: float) -> RootPolishingMethod:
        """Return a copy of this solver using a different initial
        guess."""
        return self._replace(_x0=self._check_guess(x0))

    @property
    def x0(self) -> float:
        return self._x0

    # -- Private Methods -----------------------------------------------

    @staticmethod
    def _check_guess(x0: float) -> float:
        x0 = float(x0)
        if not math.isfinite(x0):
            raise ValueError(f"Initial guess must be finite, got: {x0}")
        return x0

    def _repr_state(self) -> str:
        return f"x0={self.x0:.6g}"


# ======================================================================

def find_all_roots(solver: EquationSolver, lower: float, upper: float,
                   subdivisions: int,
                   make_solver: Callable[[RootInterval], EquationSolver],
                   min_separation: float) -> list[float]:
    """
    Scan ``[lower, upper]`` for sign changes and solve each candidate with
    a solver produced by ``make_solver(interval)``.  Used by both
    `solve_all` variants.

    Parameters
    ----------
    solver : EquationSolver
        Solver supplying the target function and display level.
    lower, upper, subdivisions :
        Search range and number of sub-intervals (see `scan_grid`).
    make_solver : Callable[[RootInterval], EquationSolver]
        Creates the solver for one candidate sub-interval.
    min_separation : float
        A root within this distance of an accepted root is a duplicate.

    Returns
    -------
    list[float]
        Unique roots in ascending order.
    """
    out = Indenter(solver.disp)
    scan = scan_grid(solver.func, lower, upper, subdivisions)
    out(f"Searching [{lower:.6g}, {upper:.6g}] using {subdivisions} "
        f"subdivisions: {len(scan.brackets)} bracket(s), "
        f"{len(scan.zeros)} exact zero(s).")

    roots: list[float] = []

    def accept(x: float) -> bool:
        if any(abs(x - r) < min_separation for r in roots):
            return False
        roots.append(x)
        return True

    for x in scan.zeros:
        accept(x)

    for interval in scan.brackets:
        try:
            root = make_solver(interval)._solve(out.nested())

        except (DivergenceError, ConvergenceError) as exc:
            # Typically a discontinuity rather than a root.
            out(f"... Skipped {interval}: {type(exc).__name__}.")
            continue

        if accept(root):
            out(f"... Found root x = {root:.10g} in {interval}.")
        else:
            out(f"... Duplicate root x = {root:.10g} in {interval}.")

    return sorted(roots)
