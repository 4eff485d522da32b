"""
nanostat.core
=============

Value types and errors shared by every part of the package.

- `Summary`: count, mean and variance of a sample (`nanostat.core.summary`)
- `Difference`, `PooledDifference`: comparison results (`nanostat.core.difference`)
- Error taxonomy (`nanostat.core.errors`)
"""
