"""
nanostat.stats.common
=====================

Distribution oracles shared by the hypothesis tests.

Two strategies are provided: continuous evaluation through scipy
(`distributions`) and a fixed table of two-tailed critical t-values
indexed by integer degrees of freedom and a discrete confidence level
(`critical_table`).
"""
