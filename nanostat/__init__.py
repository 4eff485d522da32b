"""
nanostat — compare sets of measurements using Welch's t-test.

Benchmarks, latencies and other noisy measurements rarely repeat exactly.
nanostat answers whether two sets of numbers differ by more than sampling
noise explains: each sample is reduced to a `Summary` (count, mean, sample
variance) in a single numerically stable pass, and pairs of summaries are
compared with a two-tailed Welch's t-test that reports the effect, Cohen's d,
the critical value, the p-value and the power of the test.

A pooled Student's t-test backed by a static critical-value table is also
available for the six classic confidence levels.

Example
-------
>>> import nanostat
>>> a = nanostat.summarize([1.0, 2.0, 3.0, 4.0])
>>> b = nanostat.summarize([10.0, 20.0, 30.0, 40.0])
>>> a.compare(b, 95.0).effect
22.5
"""

from nanostat.__version__ import __version__
from nanostat.core.difference import Difference, PooledDifference
from nanostat.core.errors import (
    DegenerateSampleError,
    DistributionError,
    InvalidParameterError,
    NanostatError,
    SampleFileError,
)
from nanostat.core.summary import Summary, summarize
from nanostat.stats.common.critical_table import ConfidenceLevel
from nanostat.stats.pooled import pooled_t_test
from nanostat.stats.welch import welch_t_test

__all__ = [
    "__version__",
    "ConfidenceLevel",
    "DegenerateSampleError",
    "Difference",
    "DistributionError",
    "InvalidParameterError",
    "NanostatError",
    "PooledDifference",
    "SampleFileError",
    "Summary",
    "pooled_t_test",
    "summarize",
    "welch_t_test",
]
