"""
nanostat.stats.pooled
=====================

Pooled Student's t-test backed by the static critical-value table.

This is the lower-fidelity alternative to `nanostat.stats.welch`. It assumes
both populations share a variance, uses integer degrees of freedom
``(n_a - 1) + (n_b - 1)`` and only supports the six tabulated confidence
levels. No p-value, effect size or power is produced; callers that need them
should use the Welch test.

Examples
--------
>>> from nanostat.core.summary import Summary
>>> from nanostat.stats.pooled import pooled_t_test
>>> a = Summary.of([1.0, 2.0, 3.0, 4.0])
>>> b = Summary.of([10.0, 20.0, 30.0, 40.0])
>>> pooled_t_test(a, b, "P95").degrees_of_freedom
6
"""

from __future__ import annotations
import logging
import math
from typing import Union

from nanostat.core.difference import PooledDifference
from nanostat.core.summary import Summary
from nanostat.stats.common.critical_table import ConfidenceLevel, as_level, critical_t
from nanostat.stats.welch import check_comparable

logger = logging.getLogger(__name__)


def pooled_t_test(
    a: Summary, b: Summary, level: Union[ConfidenceLevel, str, float]
) -> PooledDifference:
    """
    Compare two summaries with a pooled two-tailed Student's t-test.

    Args:
        a: Summary of the control sample
        b: Summary of the experiment sample
        level: A `ConfidenceLevel`, a level token such as ``"P95"`` or
            ``"99.5%"``, or one of the tabulated percentages

    Returns:
        The `PooledDifference` between ``a`` and ``b``

    Raises:
        InvalidParameterError: If ``level`` is not one of the tabulated levels
        DegenerateSampleError: If either summary has fewer than two observations
            or non-finite moments
    """
    confidence = as_level(level)
    check_comparable(a, "a")
    check_comparable(b, "b")

    df = int(a.n + b.n) - 2
    t = critical_t(df, confidence)

    # Pooled variance weighted by each sample's degrees of freedom.
    variance = ((a.n - 1.0) * a.variance + (b.n - 1.0) * b.variance) / df
    std_dev = math.sqrt(variance)
    critical_value = t * std_dev * math.sqrt(1.0 / a.n + 1.0 / b.n)

    delta = b.mean - a.mean
    if a.mean != 0.0:
        rel_delta, rel_error = delta / a.mean, critical_value / a.mean
    else:
        rel_delta, rel_error = math.nan, math.nan

    logger.debug("pooled: df=%d t=%.6g s=%.6g", df, t, std_dev)
    return PooledDifference(
        effect=abs(delta),
        delta=delta,
        critical_value=critical_value,
        std_dev=std_dev,
        rel_delta=rel_delta,
        rel_error=rel_error,
        degrees_of_freedom=df,
        confidence=confidence,
    )
