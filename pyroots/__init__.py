"""
.. This module acts as the top-level API documentation.

.. module: pyroots

Numerical root finding for scalar equations.  The solvers themselves are
in the `pyroots.solve` subpackage:

.. autosummary::
    :toctree: generated/

    solve
"""

__version__ = "0.1.0"
