import math


# ======================================================================

class SolverError(RuntimeError):
    """
    This exception is raised when an algorithm / solver / etc fails to
    converge or find a solution.  Additional information (optional) is
    included to allow the reason for the failure to be determined.

    Notes
    -----
    `SolverError` may also have additional attributes not listed here
    depending on the specific solver being used.  The derived classes
    `InvalidBoundsError`, `DivergenceError` and `ConvergenceError`
    cover the failures of the root finding methods in this package.
    """

    def __init__(self, *args, flag: int = None, details: str = None,
                 **kwargs):
        """
        Parameters
        ----------
        args :
            Passed to `RuntimeError`.
        flag : int, default = None
            Numeric status code giving some information about the
            result. Typically `flag` != 0 as many error code systems
            assume that `flag` == 0 implies that the solution was
            successful.
        details : str, default = None
            Additional text can be included relating to the specific
            type of failure.
        kwargs :
            Additional attributes can be added to the object using
            keyword arguments.
        """
        super().__init__(*args)
        self.flag, self.details = flag, details
        for k, v in kwargs.items():
            setattr(self, k, v)

    def __str__(self):
        """Add additional details below the main failure notice."""
        error_str = super().__str__()
        for k, v in self.__dict__.items():
            if v is not None:
                error_str += f"\n{k} -> {v}"
        return error_str


# ----------------------------------------------------------------------

class InvalidBoundsError(SolverError):
    """
    Raised by bracketing methods when ``f(lower)`` and ``f(upper)`` do not
    have opposite signs, i.e. the interval does not bracket a root.

    Attributes `lower`, `upper`, `f_lower` and `f_upper` hold the bounds
    and the function values computed there.
    """
    FLAG = 1

    def __init__(self, lower: float, upper: float, f_lower: float,
                 f_upper: float):
        super().__init__(
            f"Bounds [{lower:.6g}, {upper:.6g}] do not bracket a root. "
            f"f({lower:.6g}) = {f_lower:.6g} and f({upper:.6g}) = "
            f"{f_upper:.6g} have the same sign.",
            flag=self.FLAG,
            details="f(lower) and f(upper) must have opposite signs.",
            lower=lower, upper=upper, f_lower=f_lower, f_upper=f_upper)


# ----------------------------------------------------------------------

class DivergenceError(SolverError):
    """
    Raised when an iteration produces a non-finite value or an unusable
    (zero, NaN or infinite) derivative.

    Attributes `iteration` (``-1`` if unknown) and `last_value` (the last
    finite estimate, ``nan`` if unknown) are included.
    """
    FLAG = 2

    def __init__(self, message: str, iteration: int = -1,
                 last_value: float = math.nan):
        super().__init__(
            f"{message} (iteration: {iteration}, last finite value: "
            f"{last_value:.10g})",
            flag=self.FLAG, details="Algorithm diverged.",
            iteration=iteration, last_value=last_value)


# ----------------------------------------------------------------------

class ConvergenceError(SolverError):
    """
    Raised when the iteration limit is reached before the tolerance
    condition is satisfied (``WITHIN_TOLERANCE`` criteria only).

    Attributes `iterations`, `last_estimate` and `tol` are included.
    """
    FLAG = 3

    def __init__(self, message: str, iterations: int,
                 last_estimate: float, tol: float):
        super().__init__(
            f"{message} (iterations: {iterations}, last estimate: "
            f"{last_estimate:.10g}, tolerance: {tol:.2e})",
            flag=self.FLAG, details="Reached maxiter.",
            iterations=iterations, last_estimate=last_estimate, tol=tol)
