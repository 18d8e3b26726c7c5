import math
import operator
from dataclasses import dataclass
from enum import Enum


# ======================================================================

class ConvergenceCriteria(Enum):
    """
    Defines how convergence is determined in root-finding algorithms.

    The meaning of "within tolerance" depends on the algorithm:

    - Bisection: ``|upper - lower| / 2 < tol`` (half-bracket width).
    - Brent: ``|b - a| < tol`` between successive estimates, or the
      bracket half-width falls below an adaptive tolerance.
    - Newton-Raphson: ``|dx| < tol`` or ``|f(x)| < tol``.
    - Newton-Bisection: ``|f(x)| < tol`` or ``|dx| < tol``.
    """
    NUMBER_OF_ITERATIONS = 'iterations'
    """Stop after `maxiter` iterations and return the current estimate,
    regardless of accuracy."""

    WITHIN_TOLERANCE = 'tolerance'
    """Stop once the tolerance condition holds; raise `ConvergenceError`
    if it does not within `maxiter` iterations."""


DEFAULT_TOLERANCE = 1e-5
DEFAULT_ITERATIONS = 100
DEFAULT_CRITERIA = ConvergenceCriteria.WITHIN_TOLERANCE
DEFAULT_SUBDIVISIONS = 100
DEFAULT_INITIAL_GUESS = 1.0


# ----------------------------------------------------------------------

@dataclass(frozen=True)
class SolverConfig:
    """
    Validated settings common to every solver.

    Parameters
    ----------
    tol : float, default = 1e-5
        Convergence tolerance, must be finite and > 0.
    maxiter : int, default = 100
        Iteration budget, must be > 0.
    criteria : ConvergenceCriteria, default = WITHIN_TOLERANCE
        Stopping rule.

    Raises
    ------
    ValueError
        If `tol` or `maxiter` are out of range.
    TypeError
        If `maxiter` is not an integer or `criteria` is not a
        `ConvergenceCriteria`.
    """
    tol: float = DEFAULT_TOLERANCE
    maxiter: int = DEFAULT_ITERATIONS
    criteria: ConvergenceCriteria = DEFAULT_CRITERIA

    def __post_init__(self):
        if not (math.isfinite(self.tol) and self.tol > 0):
            raise ValueError(f"Tolerance must be positive, got: {self.tol}")

        maxiter = operator.index(self.maxiter)
        if maxiter < 1:
            raise ValueError(f"Iterations must be positive, got: "
                             f"{maxiter}")
        object.__setattr__(self, 'maxiter', maxiter)

        if not isinstance(self.criteria, ConvergenceCriteria):
            raise TypeError(f"Convergence criteria must be a "
                            f"ConvergenceCriteria, got: {self.criteria!r}")

    @property
    def within_tolerance(self) -> bool:
        return self.criteria is ConvergenceCriteria.WITHIN_TOLERANCE
