"""Unit tests for the static critical-value table and confidence levels."""

from __future__ import annotations

import pytest

from nanostat.core.errors import DistributionError, InvalidParameterError
from nanostat.stats.common.critical_table import (
    CRITICAL_VALUES,
    MAX_DF,
    ConfidenceLevel,
    as_level,
    critical_t,
    table_row,
)


def test_table_shape() -> None:
    assert len(CRITICAL_VALUES) == MAX_DF + 1
    assert all(len(row) == len(ConfidenceLevel) for row in CRITICAL_VALUES)


@pytest.mark.parametrize(
    "df, level, expected",
    [
        (1, ConfidenceLevel.P80, 3.078),
        (2, ConfidenceLevel.P90, 2.920),
        (10, ConfidenceLevel.P95, 2.228),
        (30, ConfidenceLevel.P99, 2.750),
        (100, ConfidenceLevel.P95, 1.984),
    ],
)
def test_textbook_values(df: int, level: ConfidenceLevel, expected: float) -> None:
    assert critical_t(df, level) == pytest.approx(expected, abs=1e-3)


def test_row_zero_holds_normal_quantiles() -> None:
    assert CRITICAL_VALUES[0][ConfidenceLevel.P95.column] == pytest.approx(1.960, abs=1e-3)
    assert CRITICAL_VALUES[0][ConfidenceLevel.P995.column] == pytest.approx(2.807, abs=1e-3)


def test_rows_increase_with_confidence() -> None:
    for row in CRITICAL_VALUES:
        assert list(row) == sorted(row)


def test_columns_decrease_with_degrees_of_freedom() -> None:
    for column in range(len(ConfidenceLevel)):
        values = [CRITICAL_VALUES[df][column] for df in range(1, MAX_DF + 1)]
        assert values == sorted(values, reverse=True)
        assert values[-1] > CRITICAL_VALUES[0][column]


def test_degrees_of_freedom_beyond_table_use_normal_row() -> None:
    assert table_row(MAX_DF) == MAX_DF
    assert table_row(MAX_DF + 1) == 0
    assert critical_t(5000, ConfidenceLevel.P95) == CRITICAL_VALUES[0][2]


def test_degrees_of_freedom_below_one_are_rejected() -> None:
    with pytest.raises(DistributionError):
        table_row(0)


# ---------------------------------------------------------------------------
# Confidence levels


def test_level_order_is_column_order() -> None:
    assert [level.column for level in ConfidenceLevel] == list(range(6))
    assert [level.percent for level in ConfidenceLevel] == [80.0, 90.0, 95.0, 98.0, 99.0, 99.5]


def test_level_alpha_and_label() -> None:
    assert ConfidenceLevel.P95.alpha == pytest.approx(0.05)
    assert ConfidenceLevel.P995.label == "99.5%"
    assert ConfidenceLevel.P80.label == "80%"


@pytest.mark.parametrize(
    "text, expected",
    [
        ("P95", ConfidenceLevel.P95),
        ("p99", ConfidenceLevel.P99),
        ("P995", ConfidenceLevel.P995),
        ("80", ConfidenceLevel.P80),
        ("99.5%", ConfidenceLevel.P995),
        (" 98 ", ConfidenceLevel.P98),
    ],
)
def test_parse_accepts_names_and_percentages(text: str, expected: ConfidenceLevel) -> None:
    assert ConfidenceLevel.parse(text) is expected


@pytest.mark.parametrize("text", ["", "P96", "ninety", "97", "95%%", "nan"])
def test_parse_rejects_unknown_tokens(text: str) -> None:
    with pytest.raises(InvalidParameterError):
        ConfidenceLevel.parse(text)


def test_as_level_coerces_supported_types() -> None:
    assert as_level(ConfidenceLevel.P90) is ConfidenceLevel.P90
    assert as_level("P90") is ConfidenceLevel.P90
    assert as_level(90.0) is ConfidenceLevel.P90
    assert as_level(90) is ConfidenceLevel.P90
    with pytest.raises(InvalidParameterError):
        as_level(91.0)
    with pytest.raises(InvalidParameterError):
        as_level(True)  # type: ignore[arg-type]
