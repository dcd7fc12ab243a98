"""
Scalar formula evaluation

Class II weight equations are products of powers and quotients. Written
naively in Python, a zero denominator raises ZeroDivisionError, a
fractional power of a negative base silently becomes a complex number, and
cos(90 deg) is a tiny positive float that produces an enormous weight.

Formula guards each of those operations. The first undefined operation is
recorded and NaN is returned so the expression can finish evaluating;
result() then turns the recorded problem into an Invalid Geometry failure.
"""

from __future__ import annotations
from typing import Optional
import math

from aeroweight.core.result import Result
from aeroweight.errors import EstimationError, create_geometry_error

# Denominators at or below this are treated as zero
DENOMINATOR_EPSILON = 1e-10


class Formula:
    """
    Guarded arithmetic for one component formula evaluation.

    Usage:
        f = Formula("wing_structure")
        w = 0.0051 * f.power(s_w, 0.649, "s_w") / f.denominator(math.cos(sweep), "cos(sweep_w)")
        return f.result(w)
    """

    def __init__(self, source: str):
        self.source = source
        self.error: Optional[EstimationError] = None

    def _fail(self, message: str, actual: float) -> float:
        if self.error is None:
            self.error = create_geometry_error(message, self.source, actual)
        return math.nan

    def power(self, base: float, exponent: float, label: str) -> float:
        """base ** exponent, defined for base >= 0."""
        if base < 0:
            return self._fail(f"{label} must not be negative (raised to {exponent})", base)
        return base ** exponent

    def positive(self, value: float, label: str) -> float:
        """Pass ``value`` through if it is strictly positive."""
        if not value > DENOMINATOR_EPSILON:
            return self._fail(f"{label} must be positive, got {value!r}", value)
        return value

    def denominator(self, value: float, label: str) -> float:
        """Pass ``value`` through if it is usable as a denominator (> 0)."""
        return self.positive(value, label)

    def ratio(self, numerator: float, denominator: float, label: str) -> float:
        """numerator / denominator with a guarded denominator."""
        den = self.denominator(denominator, label)
        if math.isnan(den):
            return den
        return numerator / den

    def cos(self, angle_rad: float, label: str) -> float:
        """cos(angle) for use as a denominator."""
        return self.denominator(math.cos(angle_rad), f"cos({label})")

    @property
    def failed(self) -> bool:
        return self.error is not None

    def result(self, value: float) -> Result[float]:
        if self.error is not None:
            return Result.fail(self.error)
        return Result.ok(value)
