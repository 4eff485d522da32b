"""
nanostat.stats.welch
====================

Two-tailed Welch's t-test between two summaries.

Welch's test does not assume the two populations share a variance. The
sampling distribution of the difference in means is approximated by a
Student's t distribution whose degrees of freedom come from the
Welch-Satterthwaite equation.

Examples
--------
>>> from nanostat.core.summary import Summary
>>> from nanostat.stats.welch import welch_t_test
>>> a = Summary.of([1.0, 2.0, 3.0, 4.0])
>>> b = Summary.of([10.0, 20.0, 30.0, 40.0])
>>> welch_t_test(a, b, 80.0).is_significant()
True
"""

from __future__ import annotations
import logging
import math
from typing import Union

from nanostat.core.difference import Difference
from nanostat.core.errors import DegenerateSampleError, InvalidParameterError
from nanostat.core.summary import Summary
from nanostat.stats.common.critical_table import ConfidenceLevel
from nanostat.stats.common.distributions import StandardNormal, StudentT

logger = logging.getLogger(__name__)

# The null hypothesis is "no difference", which can fail in either direction.
TAILS = 2.0


def confidence_percent(confidence: Union[float, ConfidenceLevel]) -> float:
    """
    Validate a confidence percentage and return it as a float.

    Raises:
        InvalidParameterError: Unless ``confidence`` is a number in ``(0, 100)``
            or a `ConfidenceLevel`
    """
    if isinstance(confidence, ConfidenceLevel):
        return confidence.percent
    if isinstance(confidence, bool) or not isinstance(confidence, (int, float)):
        raise InvalidParameterError(f"Confidence must be a number, got {confidence!r}")
    if not (0.0 < confidence < 100.0):
        raise InvalidParameterError(f"Confidence must be in (0, 100), got {confidence}")
    return float(confidence)


def check_comparable(summary: Summary, label: str) -> None:
    """Raise `DegenerateSampleError` unless ``summary`` can take part in a test."""
    if summary.is_degenerate:
        raise DegenerateSampleError(
            f"Sample {label} has {summary.n:g} observation(s); at least 2 are required"
        )
    if not (math.isfinite(summary.mean) and math.isfinite(summary.variance)):
        raise DegenerateSampleError(
            f"Sample {label} has non-finite moments "
            f"(mean={summary.mean}, variance={summary.variance})"
        )
    if summary.variance < 0.0:
        raise DegenerateSampleError(
            f"Sample {label} has negative variance {summary.variance}"
        )


def welch_degrees_of_freedom(a: Summary, b: Summary) -> float:
    """Welch-Satterthwaite approximation of the degrees of freedom.

    Computed from the share of the squared standard error contributed by
    ``a``, so the result does not depend on the scale of the measurements.
    Returns ``nan`` when both variances are zero.
    """
    va, vb = a.variance / a.n, b.variance / b.n
    total = va + vb
    if total == 0.0:
        return math.nan
    r = va / total
    return 1.0 / (r * r / (a.n - 1.0) + (1.0 - r) * (1.0 - r) / (b.n - 1.0))


def welch_t_test(
    a: Summary, b: Summary, confidence: Union[float, ConfidenceLevel]
) -> Difference:
    """
    Calculate the statistical difference between two summaries.

    Args:
        a: Summary of the control sample
        b: Summary of the experiment sample
        confidence: Confidence percentage in ``(0, 100)``, or a `ConfidenceLevel`

    Returns:
        The `Difference` between ``a`` and ``b``

    Raises:
        InvalidParameterError: If the confidence is outside ``(0, 100)``
        DegenerateSampleError: If either summary has fewer than two observations
            or non-finite moments
        DistributionError: If the degrees of freedom are not finite and positive,
            e.g. when both samples have zero variance
    """
    percent = confidence_percent(confidence)
    check_comparable(a, "a")
    check_comparable(b, "b")

    # Significance level; stays positive for confidences just under 100.
    alpha = (100.0 - percent) / 100.0

    nu = welch_degrees_of_freedom(a, b)
    dist_st = StudentT(nu)
    logger.debug("welch: n=(%g, %g) nu=%.6g alpha=%.6g", a.n, b.n, nu, alpha)

    # Hypothetical two-tailed t-value for the significance level.
    t_hyp = dist_st.upper_quantile(alpha / TAILS)

    effect = abs(a.mean - b.mean)
    std_err = math.sqrt(a.variance / a.n + b.variance / b.n)

    # Experimental t-value and its two-tailed p-value.
    t_exp = effect / std_err
    p_value = dist_st.cdf(-t_exp) * TAILS

    critical_value = t_hyp * std_err

    # Cohen's d over the mean of the two variances.
    std_dev = math.sqrt((a.variance + b.variance) / 2.0)
    effect_size = effect / std_dev

    # Normal approximation of the power at the observed effect.
    z = effect / (std_dev * math.sqrt(1.0 / a.n + 1.0 / b.n))
    dist_norm = StandardNormal()
    za = dist_norm.upper_quantile(alpha / TAILS)
    beta = dist_norm.cdf(z - za) - dist_norm.cdf(-z - za)

    return Difference(
        effect=effect,
        effect_size=effect_size,
        critical_value=critical_value,
        p_value=p_value,
        alpha=alpha,
        beta=beta,
        degrees_of_freedom=nu,
        confidence=percent,
    )
