"""
nanostat.core.difference
========================

Result types for comparing two summaries.

- `Difference`: outcome of a two-tailed Welch's t-test (continuous
  distributions).
- `PooledDifference`: outcome of the pooled Student's t-test backed by the
  static critical-value table. This is a lower-fidelity mode: it only knows
  six confidence levels and integer degrees of freedom, and it produces no
  p-value, effect size or power.

Both are immutable value types; a significant result is one whose effect is
strictly greater than its critical value.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from nanostat.stats.common.critical_table import ConfidenceLevel


@dataclass(frozen=True)
class Difference:
    """
    The statistical difference between two summaries.

    Attributes:
        effect: Absolute difference between the sample means.
        effect_size: Difference in means normalized by the pooled standard
            deviation (Cohen's d).
        critical_value: Minimum effect required for significance at the
            requested confidence.
        p_value: Probability of observing an effect at least this large if
            the means were in fact equal (two-tailed).
        alpha: Significance level; the maximum allowed p-value.
        beta: Type II error term computed from the normal approximation at
            the observed effect and sample sizes.
        degrees_of_freedom: Welch-Satterthwaite degrees of freedom.
        confidence: Confidence percentage the test was run at.
    """

    effect: float
    effect_size: float
    critical_value: float
    p_value: float
    alpha: float
    beta: float
    degrees_of_freedom: float
    confidence: float

    def is_significant(self) -> bool:
        """Whether or not the difference is statistically significant."""
        return self.effect > self.critical_value


@dataclass(frozen=True)
class PooledDifference:
    """
    The difference between two summaries under a pooled Student's t-test.

    Attributes:
        effect: Absolute difference between the sample means.
        delta: Signed difference, experiment mean minus control mean.
        critical_value: Table t-value times the pooled standard error.
        std_dev: Pooled standard deviation of both samples.
        rel_delta: ``delta`` relative to the control mean (nan if that is 0).
        rel_error: ``critical_value`` relative to the control mean.
        degrees_of_freedom: ``(n_a - 1) + (n_b - 1)``.
        confidence: Table column the critical t-value was read from.
    """

    effect: float
    delta: float
    critical_value: float
    std_dev: float
    rel_delta: float
    rel_error: float
    degrees_of_freedom: int
    confidence: "ConfidenceLevel"

    @property
    def alpha(self) -> float:
        """Significance level implied by the confidence level."""
        return self.confidence.alpha

    def is_significant(self) -> bool:
        """Whether or not the difference is statistically significant."""
        return self.effect > self.critical_value
