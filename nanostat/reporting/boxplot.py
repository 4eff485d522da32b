"""
nanostat.reporting.boxplot
==========================

Box plots of the raw samples behind a comparison.

Examples
--------
>>> from nanostat.reporting.boxplot import build_box_plot
>>> fig = build_box_plot({"control": [1.0, 2.0, 3.0], "new": [2.0, 3.0, 4.0]})
>>> [t.get_text() for t in fig.axes[0].get_xticklabels()]
['control', 'new']
"""

from __future__ import annotations
import logging
from typing import Any

import matplotlib.pyplot as plt

from nanostat.api.compare import NamedSamples, named_samples

logger = logging.getLogger(__name__)


def build_box_plot(samples: NamedSamples, title: str = "") -> Any:
    """
    Draw one box per sample, in input order.

    Args:
        samples: Raw measurements keyed by sample name, or ``(name, values)``
            pairs; the control goes first
        title: Optional figure title

    Returns:
        The matplotlib Figure
    """
    pairs = named_samples(samples)
    names = [name for name, _ in pairs]
    data = [list(values) for _, values in pairs]

    fig, ax = plt.subplots(figsize=(max(4.0, 1.6 * len(names)), 4.2))
    ax.boxplot(data, showmeans=True)
    ax.set_xticks(range(1, len(names) + 1))
    ax.set_xticklabels(names)
    ax.set_ylabel("Value")
    if title:
        ax.set_title(title)
    fig.tight_layout()
    return fig


def save_box_plot(samples: NamedSamples, path: str, title: str = "") -> None:
    """Render ``samples`` as a box plot image at ``path`` (format from the suffix)."""
    pairs = named_samples(samples)
    fig = build_box_plot(pairs, title=title)
    try:
        fig.savefig(path)
        logger.debug("wrote box plot of %d samples to %s", len(pairs), path)
    finally:
        plt.close(fig)
