"""
nanostat.stats.common.critical_table
====================================

Static table of two-tailed critical t-values.

This is the table-based alternative to `nanostat.stats.common.distributions`.
Rows are indexed by integer degrees of freedom ``1..100``; row ``0`` holds the
standard normal quantiles that stand in for any larger degrees of freedom.
Columns are the discrete `ConfidenceLevel` members in declaration order.

The table is materialised once at import from scipy quantiles and stored as
an immutable tuple of tuples. Lookups afterwards are plain indexing.

Examples
--------
>>> from nanostat.stats.common.critical_table import ConfidenceLevel, critical_t
>>> round(critical_t(10, ConfidenceLevel.P95), 3)
2.228
>>> ConfidenceLevel.parse("99.5%") is ConfidenceLevel.P995
True
"""

from __future__ import annotations
import logging
from enum import Enum
from typing import Tuple, Union

from scipy.stats import norm
from scipy.stats import t as student_t

from nanostat.core.errors import DistributionError, InvalidParameterError

logger = logging.getLogger(__name__)

# Largest degrees of freedom with its own row.
MAX_DF = 100


class ConfidenceLevel(Enum):
    """Confidence levels available in the critical-value table.

    The declaration order is the table's column order.
    """

    P80 = 80.0
    P90 = 90.0
    P95 = 95.0
    P98 = 98.0
    P99 = 99.0
    P995 = 99.5

    @property
    def percent(self) -> float:
        return self.value

    @property
    def alpha(self) -> float:
        """Significance level, ``1 - percent / 100``."""
        return 1.0 - self.value / 100.0

    @property
    def column(self) -> int:
        """Column index of this level in `CRITICAL_VALUES`."""
        return _LEVELS.index(self)

    @property
    def label(self) -> str:
        """Human-readable label, e.g. ``"99.5%"``."""
        return f"{self.value:g}%"

    @classmethod
    def from_percent(cls, percent: float) -> "ConfidenceLevel":
        """Return the level for ``percent``, which must be one of the table's."""
        for level in cls:
            if level.value == percent:
                return level
        raise InvalidParameterError(
            f"Confidence must be one of {[lv.value for lv in cls]}, got {percent}"
        )

    @classmethod
    def parse(cls, text: str) -> "ConfidenceLevel":
        """
        Parse a confidence level from text.

        Accepts member names (``"P95"``, case-insensitive) and percentages with
        or without a trailing ``%`` (``"95"``, ``"99.5%"``). Unrecognized
        tokens are rejected rather than defaulted.

        Raises:
            InvalidParameterError: If ``text`` names no known level
        """
        token = text.strip()
        member = cls.__members__.get(token.upper())
        if member is not None:
            return member

        number = token[:-1] if token.endswith("%") else token
        try:
            percent = float(number)
        except ValueError:
            raise InvalidParameterError(
                f"Unrecognized confidence level: {text!r}"
            ) from None
        return cls.from_percent(percent)


_LEVELS: Tuple[ConfidenceLevel, ...] = tuple(ConfidenceLevel)


def _build_table() -> Tuple[Tuple[float, ...], ...]:
    # Two-tailed: each tail holds alpha / 2 of the probability mass.
    quantiles = [1.0 - level.alpha / 2.0 for level in _LEVELS]
    rows = [tuple(float(norm.ppf(q)) for q in quantiles)]
    for df in range(1, MAX_DF + 1):
        rows.append(tuple(float(student_t.ppf(q, df)) for q in quantiles))
    return tuple(rows)


CRITICAL_VALUES: Tuple[Tuple[float, ...], ...] = _build_table()


def table_row(df: int) -> int:
    """
    Map degrees of freedom to a table row.

    Args:
        df: Integer degrees of freedom (>= 1)

    Returns:
        ``df`` itself up to `MAX_DF`, otherwise ``0`` (normal approximation)
    """
    if df < 1:
        raise DistributionError(f"Degrees of freedom must be at least 1, got {df}")
    if df > MAX_DF:
        logger.debug("df=%d beyond table, using normal approximation", df)
        return 0
    return df


def critical_t(df: int, level: Union[ConfidenceLevel, str, float]) -> float:
    """
    Two-tailed critical t-value for ``df`` degrees of freedom at ``level``.

    Args:
        df: Integer degrees of freedom (>= 1)
        level: A `ConfidenceLevel`, a token accepted by `ConfidenceLevel.parse`,
            or one of the table's percentages

    Returns:
        The critical value read from `CRITICAL_VALUES`
    """
    return CRITICAL_VALUES[table_row(df)][as_level(level).column]


def as_level(level: Union[ConfidenceLevel, str, float]) -> ConfidenceLevel:
    """Coerce ``level`` to a `ConfidenceLevel`."""
    if isinstance(level, ConfidenceLevel):
        return level
    if isinstance(level, str):
        return ConfidenceLevel.parse(level)
    if isinstance(level, (int, float)) and not isinstance(level, bool):
        return ConfidenceLevel.from_percent(float(level))
    raise InvalidParameterError(f"Unsupported confidence level: {level!r}")
