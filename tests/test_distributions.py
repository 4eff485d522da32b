"""Unit tests for the continuous distribution wrappers."""

from __future__ import annotations

import math

import pytest

from nanostat.core.errors import DistributionError, InvalidParameterError
from nanostat.stats.common.distributions import StandardNormal, StudentT


def test_student_t_known_quantiles() -> None:
    assert StudentT(6.0).inverse_cdf(0.9) == pytest.approx(1.439756, abs=1e-6)
    assert StudentT(10.0).inverse_cdf(0.975) == pytest.approx(2.228139, abs=1e-6)
    assert StudentT(1.0).inverse_cdf(0.75) == pytest.approx(1.0)


def test_student_t_accepts_fractional_degrees_of_freedom() -> None:
    lower = StudentT(6.0).inverse_cdf(0.975)
    upper = StudentT(5.0).inverse_cdf(0.975)
    assert lower < StudentT(5.5).inverse_cdf(0.975) < upper


def test_student_t_cdf_is_symmetric() -> None:
    dist = StudentT(4.3)
    assert dist.cdf(0.0) == pytest.approx(0.5)
    assert dist.cdf(-1.7) == pytest.approx(1.0 - dist.cdf(1.7))


@pytest.mark.parametrize("p", [0.01, 0.2, 0.5, 0.9, 0.999])
def test_student_t_inverse_cdf_inverts_cdf(p: float) -> None:
    dist = StudentT(7.5)
    assert dist.cdf(dist.inverse_cdf(p)) == pytest.approx(p)


@pytest.mark.parametrize("df", [0.0, -1.0, math.nan, math.inf])
def test_student_t_rejects_invalid_degrees_of_freedom(df: float) -> None:
    with pytest.raises(DistributionError):
        StudentT(df)


def test_standard_normal() -> None:
    dist = StandardNormal()
    assert dist.cdf(0.0) == 0.5
    assert dist.inverse_cdf(0.975) == pytest.approx(1.959964, abs=1e-6)
    assert dist.inverse_cdf(0.9) == pytest.approx(1.281552, abs=1e-6)


@pytest.mark.parametrize("p", [0.0, 1.0, -0.1, 1.5])
def test_inverse_cdf_rejects_probabilities_outside_unit_interval(p: float) -> None:
    with pytest.raises(InvalidParameterError):
        StandardNormal().inverse_cdf(p)
    with pytest.raises(InvalidParameterError):
        StudentT(3.0).inverse_cdf(p)


@pytest.mark.parametrize("q", [0.4, 0.05, 0.005])
def test_upper_quantile_matches_inverse_cdf(q: float) -> None:
    assert StudentT(5.5).upper_quantile(q) == pytest.approx(StudentT(5.5).inverse_cdf(1.0 - q))
    assert StandardNormal().upper_quantile(q) == pytest.approx(StandardNormal().inverse_cdf(1.0 - q))


def test_upper_quantile_of_tiny_tail() -> None:
    # 1 - 1e-20 is 1.0 in floating point; the upper quantile never forms it.
    assert StandardNormal().upper_quantile(1e-20) == pytest.approx(9.262340, abs=1e-5)
    assert math.isfinite(StudentT(3.0).upper_quantile(1e-20))


@pytest.mark.parametrize("q", [0.0, 1.0, -0.1, 1.5])
def test_upper_quantile_rejects_probabilities_outside_unit_interval(q: float) -> None:
    with pytest.raises(InvalidParameterError):
        StandardNormal().upper_quantile(q)
    with pytest.raises(InvalidParameterError):
        StudentT(3.0).upper_quantile(q)
