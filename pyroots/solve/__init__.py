"""
======================================
Root Finding (:mod:`pyroots.solve`)
======================================

.. currentmodule:: pyroots.solve

Solvers for scalar equations :math:`f(x) = 0`.  Each algorithm is an
immutable solver class (for repeated use and multi-root searches) with a
matching one-shot convenience function.

Bracketing Methods
------------------

.. autosummary::
    :toctree:

    BisectionSolver
    BrentSolver
    FalsePositionSolver
    NewtonBisectionSolver
    RiddersSolver
    bisect_root
    brent_root
    false_position_root
    newton_bisect_root
    ridders_root

Polishing Methods
-----------------

.. autosummary::
    :toctree:

    NewtonRaphsonSolver
    newton_root

Supporting Types and Functions
------------------------------

.. autosummary::
    :toctree:

    ConvergenceCriteria
    DifferentiationMethod
    EquationSolver
    RootBracketingMethod
    RootPolishingMethod
    RootInterval
    SolverConfig
    find_brackets
    make_derivative
    validate_bounds

Exceptions
----------

.. autosummary::
    :toctree:

    SolverError
    InvalidBoundsError
    DivergenceError
    ConvergenceError

"""

from .base import EquationSolver, RootBracketingMethod, RootPolishingMethod
from .bisect_root import BisectionSolver, bisect_root
from .bracket import find_brackets, scan_grid, validate_bounds
from .brent import BrentSolver, brent_root
from .config import (ConvergenceCriteria, SolverConfig, DEFAULT_CRITERIA,
                     DEFAULT_ITERATIONS, DEFAULT_SUBDIVISIONS,
                     DEFAULT_TOLERANCE)
from .derivative import (Derivative, DifferentiationMethod,
                         NumericalDerivative, PredefinedDerivative,
                         SymbolicDerivative, make_derivative)
from .exception import (SolverError, InvalidBoundsError, DivergenceError,
                        ConvergenceError)
from .false_position import FalsePositionSolver, false_position_root
from .function import as_function
from .interval import RootInterval
from .newton_bisect import NewtonBisectionSolver, newton_bisect_root
from .newton_raphson import NewtonRaphsonSolver, newton_root
from .ridders import RiddersSolver, ridders_root
