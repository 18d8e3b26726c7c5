#!usr/bin/env python3

# Examples of finding roots of scalar equations.

import numpy as np

from pyroots.solve import (BisectionSolver, BrentSolver, DivergenceError,
                           DifferentiationMethod, FalsePositionSolver,
                           NewtonBisectionSolver, NewtonRaphsonSolver,
                           RiddersSolver)


def cubic(x):
    """Wallis' example, single root in [2, 3]."""
    return x ** 3 - 2 * x - 5


def wavy(x):
    """Several roots in [0, 10] plus a slowly growing offset."""
    return np.sin(x) + 0.05 * x - 0.2


# Compare the bracketing methods on the same problem.
for solver_type in (BisectionSolver, BrentSolver, FalsePositionSolver,
                    NewtonBisectionSolver, RiddersSolver):
    solver = solver_type(cubic, 2.0, 3.0, tol=1e-12)
    print(f"{type(solver).__name__:>22s}: x = {solver.solve():.15f}")

# Newton-Raphson with each kind of derivative.
for method in DifferentiationMethod:
    fprime = "3*x**2 - 2" if method is DifferentiationMethod.PREDEFINED \
        else None
    solver = NewtonRaphsonSolver("x**3 - 2*x - 5", 2.0, fprime=fprime,
                                 method=method, tol=1e-12)
    print(f"Newton-Raphson ({method.name.lower():>10s}): "
          f"x = {solver.solve():.15f}")

# Newton-Raphson fails where f'(x) = 0.
try:
    NewtonRaphsonSolver(lambda x: (x - 1) ** 2, 1.0,
                        fprime=lambda x: 2 * (x - 1)).solve()
except DivergenceError as e:
    print(f"\nExpected failure: {e}")

# Find all roots in a range, showing progress.
print()
roots = BrentSolver(wavy, 0.0, 10.0, tol=1e-10, disp=2).solve_all(
    subdivisions=50)
print("\nRoots = " + np.array2string(np.asarray(roots), precision=6,
                                     separator=', ', floatmode='fixed'))
