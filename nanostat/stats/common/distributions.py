"""
nanostat.stats.common.distributions
===================================

Continuous distributions used by the hypothesis tests.

Thin, validated wrappers over `scipy.stats` giving the two operations the
tests need, the cumulative distribution function and its inverse:

- `StudentT`: Student's t distribution with location 0 and scale 1.
- `StandardNormal`: normal distribution with mean 0 and variance 1.

Constructing a `StudentT` with non-finite or non-positive degrees of freedom
raises `DistributionError` instead of letting scipy return ``nan``.

Examples
--------
>>> from nanostat.stats.common.distributions import StudentT, StandardNormal
>>> round(StudentT(6.0).inverse_cdf(0.9), 4)
1.4398
>>> StandardNormal().cdf(0.0)
0.5
"""

from __future__ import annotations
import math
from dataclasses import dataclass

from scipy.stats import norm
from scipy.stats import t as student_t

from nanostat.core.errors import DistributionError, InvalidParameterError


def _check_probability(p: float) -> None:
    if not (0.0 < p < 1.0):
        raise InvalidParameterError(f"Probability must be in (0, 1), got {p}")


@dataclass(frozen=True)
class StudentT:
    """
    Student's t distribution with ``df`` degrees of freedom.

    Attributes:
        df: Degrees of freedom; any finite positive real (need not be an integer)
    """

    df: float

    def __post_init__(self) -> None:
        if not math.isfinite(self.df) or self.df <= 0:
            raise DistributionError(
                f"Degrees of freedom must be finite and positive, got {self.df}"
            )

    def cdf(self, x: float) -> float:
        """P(T <= x)."""
        return float(student_t.cdf(x, self.df))

    def inverse_cdf(self, p: float) -> float:
        """The value t such that P(T <= t) = p."""
        _check_probability(p)
        return float(student_t.ppf(p, self.df))

    def upper_quantile(self, q: float) -> float:
        """The value t such that P(T > t) = q, without forming 1 - q."""
        _check_probability(q)
        return float(student_t.isf(q, self.df))


@dataclass(frozen=True)
class StandardNormal:
    """The standard normal distribution."""

    def cdf(self, x: float) -> float:
        """P(Z <= x)."""
        return float(norm.cdf(x))

    def inverse_cdf(self, p: float) -> float:
        """The value z such that P(Z <= z) = p."""
        _check_probability(p)
        return float(norm.ppf(p))

    def upper_quantile(self, q: float) -> float:
        """The value z such that P(Z > z) = q, without forming 1 - q."""
        _check_probability(q)
        return float(norm.isf(q))
