"""
Statistical tests between two summaries.

1. **Common** (nanostat.stats.common):
   Distribution oracles used by the tests: continuous Student's t and normal
   distributions, and the static table of critical t-values.

2. **Tests**:
   - `nanostat.stats.welch`: two-tailed Welch's t-test (default).
   - `nanostat.stats.pooled`: pooled Student's t-test read from the table.

Example:
--------
>>> from nanostat.stats.common.distributions import StudentT
>>> from nanostat.stats.welch import welch_t_test
"""
