"""
nanostat.core.summary
=====================

Single-pass statistical summary of a sample.

A `Summary` keeps the first two central moments of a data set: the number of
observations, the arithmetic mean and the sample variance (with Bessel's
correction). It is built once from raw measurements and never updated.

Examples
--------
>>> from nanostat.core.summary import Summary
>>> s = Summary.of([1.0, 2.0, 3.0])
>>> (s.n, s.mean, s.variance)
(3.0, 2.0, 1.0)
"""

from __future__ import annotations
import math
from dataclasses import dataclass
from typing import Iterable, Union, TYPE_CHECKING

if TYPE_CHECKING:
    from nanostat.core.difference import Difference
    from nanostat.stats.common.critical_table import ConfidenceLevel


@dataclass(frozen=True)
class Summary:
    """
    Count, mean and sample variance of a data set.

    Attributes:
        n: Number of measurements. Stored as a float for downstream arithmetic.
        mean: Arithmetic mean of the measurements.
        variance: Sample variance (sum of squared deviations over ``n - 1``).
            ``nan`` when fewer than two measurements were seen.
    """

    n: float
    mean: float
    variance: float

    @classmethod
    def of(cls, values: Iterable[float]) -> "Summary":
        """
        Summarize ``values`` using Welford's one-pass algorithm.

        The iterable is consumed once, left to right. Because this is an
        online reduction, the last bits of the result depend on input order.

        Args:
            values: Any finite iterable of real numbers

        Returns:
            The summary of the sample
        """
        n, mean, s = 0.0, 0.0, 0.0
        for x in values:
            n += 1.0
            delta = x - mean
            mean += delta / n
            s += delta * (x - mean)  # uses the updated mean

        # Bessel's correction; undefined for fewer than two observations.
        variance = s / (n - 1.0) if n > 1.0 else math.nan
        return cls(n=n, mean=float(mean), variance=float(variance))

    @property
    def is_degenerate(self) -> bool:
        """Whether the summary has too few observations to be compared."""
        return self.n < 2.0

    def std_dev(self) -> float:
        """The standard deviation of the sample."""
        return math.sqrt(self.variance)

    def std_err(self) -> float:
        """The standard error of the mean."""
        if self.n == 0.0:
            return math.nan
        return self.std_dev() / math.sqrt(self.n)

    def compare(
        self, other: "Summary", confidence: Union[float, "ConfidenceLevel"]
    ) -> "Difference":
        """
        Compare this summary against ``other`` with a two-tailed Welch's t-test.

        See `nanostat.stats.welch.welch_t_test`.
        """
        from nanostat.stats.welch import welch_t_test

        return welch_t_test(self, other, confidence)


def summarize(values: Iterable[float]) -> Summary:
    """Return the `Summary` of ``values``."""
    return Summary.of(values)
