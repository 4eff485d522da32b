"""
nanostat.core.errors
====================

Error taxonomy shared across the package.

Every failure the library can report is a subclass of `NanostatError`, which
itself derives from `ValueError` so callers that only guard against bad
values keep working.

- `InvalidParameterError`: confidence out of range, unknown confidence token,
  invalid configuration.
- `DegenerateSampleError`: a summary that cannot take part in a comparison
  (fewer than two observations, non-finite moments).
- `DistributionError`: a distribution cannot be built for the requested
  degrees of freedom.
- `SampleFileError`: a sample file could not be read or parsed.

Examples
--------
>>> from nanostat.core.errors import InvalidParameterError, NanostatError
>>> issubclass(InvalidParameterError, NanostatError)
True
"""

from __future__ import annotations


class NanostatError(ValueError):
    """Base class for all errors raised by nanostat."""


class InvalidParameterError(NanostatError):
    """A parameter (usually the confidence level) is outside its domain."""


class DegenerateSampleError(NanostatError):
    """A summary is too small or not finite enough to be compared."""


class DistributionError(NanostatError):
    """A distribution could not be constructed for the given parameters."""


class SampleFileError(NanostatError):
    """A sample file is missing, empty, or contains non-numeric lines."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"{path}: {reason}")
        self.path = path
        self.reason = reason
