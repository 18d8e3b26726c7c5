from __future__ import annotations

import math
from dataclasses import dataclass


# ======================================================================

@dataclass(frozen=True)
class RootInterval:
    r"""
    Immutable closed interval ``[lower, upper]`` that may contain a root.

    For a continuous function :math:`f(x)`, if :math:`f(a) f(b) < 0` then
    there exists at least one :math:`c \in (a, b)` where
    :math:`f(c) = 0` (Intermediate Value Theorem).

    Parameters
    ----------
    lower, upper : float
        Finite bounds with ``lower < upper``.

    Raises
    ------
    ValueError
        If either bound is NaN / infinite or ``lower >= upper``.

    Examples
    --------
    >>> interval = RootInterval(0.0, 2.0)
    >>> interval.midpoint(), interval.width(), interval.contains(1.5)
    (1.0, 2.0, True)
    """
    lower: float
    upper: float

    def __post_init__(self):
        if not math.isfinite(self.lower):
            raise ValueError(f"Lower bound must be finite, got: "
                             f"{self.lower}")
        if not math.isfinite(self.upper):
            raise ValueError(f"Upper bound must be finite, got: "
                             f"{self.upper}")
        if self.lower >= self.upper:
            raise ValueError(f"Lower bound must be less than upper bound, "
                             f"got: [{self.lower:.6g}, {self.upper:.6g}]")

    def __repr__(self):
        return f"RootInterval[{self.lower:.6g}, {self.upper:.6g}]"

    # -- Public Methods ------------------------------------------------

    @classmethod
    def of(cls, lower: float, upper: float) -> RootInterval:
        """Alternate constructor, equivalent to ``RootInterval(lower,
        upper)``."""
        return cls(lower, upper)

    def contains(self, x: float) -> bool:
        """True if ``lower <= x <= upper``."""
        return self.lower <= x <= self.upper

    def midpoint(self) -> float:
        return (self.lower + self.upper) * 0.5

    def overlaps(self, other: RootInterval) -> bool:
        """True if this interval shares at least one point with
        `other`."""
        return self.lower <= other.upper and other.lower <= self.upper

    def width(self) -> float:
        return self.upper - self.lower
