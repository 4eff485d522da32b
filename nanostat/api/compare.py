"""
nanostat.api.compare
====================

Facade for comparing one control sample against any number of experiments.

The control is summarized once; each experiment is summarized and compared
against it independently. Comparisons share no state, so they can be run on
a thread pool when there are many of them.

Examples
--------
>>> from nanostat.api.compare import ComparisonConfig, compare_samples
>>> results = compare_samples(
...     [1.0, 2.0, 3.0, 4.0],
...     {"fast": [10.0, 20.0, 30.0, 40.0]},
...     ComparisonConfig(confidence=80.0),
... )
>>> results[0].difference.is_significant()
True
"""

from __future__ import annotations
import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import Iterable, List, Literal, Mapping, Optional, Tuple, Union

from nanostat.core.difference import Difference, PooledDifference
from nanostat.core.errors import InvalidParameterError
from nanostat.core.summary import Summary
from nanostat.stats.common.critical_table import ConfidenceLevel, as_level
from nanostat.stats.pooled import pooled_t_test
from nanostat.stats.welch import confidence_percent, welch_t_test

logger = logging.getLogger(__name__)

Method = Literal["welch", "pooled"]

NamedSamples = Union[
    Mapping[str, Iterable[float]], Iterable[Tuple[str, Iterable[float]]]
]


def named_samples(samples: NamedSamples) -> List[Tuple[str, Iterable[float]]]:
    """Normalize a mapping or a sequence of ``(name, values)`` pairs to pairs.

    Pairs may repeat a name; each pair is kept.
    """
    if isinstance(samples, Mapping):
        return list(samples.items())
    return [(name, values) for name, values in samples]


@dataclass
class ComparisonConfig:
    """
    How experiments are compared against the control.

    Parameters
    ----------
    confidence : float or ConfidenceLevel, default=95.0
        Confidence percentage in (0, 100). The pooled method only accepts the
        tabulated levels (80, 90, 95, 98, 99, 99.5).
    method : {"welch", "pooled"}, default="welch"
        - "welch": Welch's t-test with continuous distributions
        - "pooled": pooled Student's t-test read from the critical-value table
    max_workers : int, optional
        Run comparisons on a thread pool of this size. ``None`` or ``1`` runs
        them in the calling thread.

    Examples
    --------
    >>> ComparisonConfig(confidence=99.0, method="pooled").validate()
    """

    confidence: Union[float, ConfidenceLevel] = 95.0
    method: Method = "welch"
    max_workers: Optional[int] = None

    def validate(self) -> None:
        """Validate the configuration."""
        if self.method == "welch":
            confidence_percent(self.confidence)
        elif self.method == "pooled":
            as_level(self.confidence)
        else:
            raise InvalidParameterError(
                f"Method must be 'welch' or 'pooled', got {self.method!r}"
            )
        if self.max_workers is not None and self.max_workers < 1:
            raise InvalidParameterError(
                f"max_workers must be positive, got {self.max_workers}"
            )

    def compare(self, a: Summary, b: Summary) -> Union[Difference, PooledDifference]:
        """Compare two summaries with the configured method."""
        if self.method == "pooled":
            return pooled_t_test(a, b, self.confidence)
        return welch_t_test(a, b, self.confidence)


@dataclass(frozen=True)
class Comparison:
    """
    One experiment compared against the control.

    Attributes
    ----------
    name : str
        Name of the experiment sample (e.g. its file path)
    control : Summary
        Summary of the control sample
    experiment : Summary
        Summary of the experiment sample
    difference : Difference or PooledDifference
        Outcome of the test
    """

    name: str
    control: Summary
    experiment: Summary
    difference: Union[Difference, PooledDifference]


def compare_samples(
    control: Iterable[float],
    experiments: NamedSamples,
    config: Optional[ComparisonConfig] = None,
) -> List[Comparison]:
    """
    Compare a control sample against each experiment sample.

    Parameters
    ----------
    control : iterable of float
        Raw control measurements
    experiments : mapping or iterable of (name, values) pairs
        Raw measurements of each experiment, keyed by name. Pairs may repeat
        a name; every pair is compared
    config : ComparisonConfig, optional
        Test settings; defaults to Welch's t-test at 95% confidence

    Returns
    -------
    list of Comparison
        One result per experiment, in input order

    Raises
    ------
    NanostatError
        Whatever the first failing comparison raised
    """
    if config is None:
        config = ComparisonConfig()
    config.validate()

    control_summary = Summary.of(control)
    jobs: List[Tuple[str, Iterable[float]]] = named_samples(experiments)

    def run(job: Tuple[str, Iterable[float]]) -> Comparison:
        name, values = job
        summary = Summary.of(values)
        difference = config.compare(control_summary, summary)
        logger.debug(
            "%s: effect=%.6g critical=%.6g significant=%s",
            name,
            difference.effect,
            difference.critical_value,
            difference.is_significant(),
        )
        return Comparison(name, control_summary, summary, difference)

    if config.max_workers is None or config.max_workers == 1 or len(jobs) < 2:
        return [run(job) for job in jobs]

    with ThreadPoolExecutor(max_workers=config.max_workers) as pool:
        return list(pool.map(run, jobs))
