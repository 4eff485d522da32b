"""
nanostat.reporting.text
=======================

Human-readable report lines for comparison results.

Examples
--------
>>> from nanostat.api.compare import compare_samples, ComparisonConfig
>>> from nanostat.reporting.text import format_comparison
>>> [c] = compare_samples([1.0, 2.0, 3.0, 4.0], {"b": [1.0, 2.0, 3.0, 4.0]})
>>> format_comparison(c)
['b:', '\\tNo difference at 95% confidence.']
"""

from __future__ import annotations
from typing import Iterable, List, Union

from nanostat.api.compare import Comparison
from nanostat.core.difference import Difference
from nanostat.stats.common.critical_table import ConfidenceLevel


def confidence_label(confidence: Union[float, ConfidenceLevel]) -> str:
    """Format a confidence as a percentage without trailing zeros, e.g. ``99.5%``."""
    if isinstance(confidence, ConfidenceLevel):
        return confidence.label
    return f"{confidence:g}%"


def format_comparison(comparison: Comparison) -> List[str]:
    """Render one comparison as a list of lines (tabs for indentation)."""
    d = comparison.difference
    ctrl, exp = comparison.control, comparison.experiment
    label = confidence_label(d.confidence)

    lines = [f"{comparison.name}:"]
    if not d.is_significant():
        lines.append(f"\tNo difference at {label} confidence.")
        return lines

    lines.append(f"\tDifference at {label} confidence!")
    op = "<" if ctrl.mean < exp.mean else ">"
    lines.append(f"\t\t{ctrl.mean:.6g} {op} {exp.mean:.6g} ± {d.critical_value:.6g}")
    if ctrl.mean != 0.0:
        rel = (exp.mean - ctrl.mean) / abs(ctrl.mean) * 100.0
        rel_err = d.critical_value / abs(ctrl.mean) * 100.0
        lines.append(f"\t\t{rel:+.2f}% ± {rel_err:.2f}%")
    if isinstance(d, Difference):
        lines.append(
            f"\t\t(Welch's t, p = {d.p_value:.6g}, d = {d.effect_size:.6g}, "
            f"beta = {d.beta:.6g})"
        )
    else:
        lines.append(f"\t\t(Student's t, pooled s = {d.std_dev:.6g})")
    return lines


def format_report(comparisons: Iterable[Comparison]) -> str:
    """Render all comparisons, separated by blank lines."""
    return "\n\n".join("\n".join(format_comparison(c)) for c in comparisons)
