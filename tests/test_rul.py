"""Tests for the RUL estimator, Weibull reliability, risk and maintenance windows."""

import logging
import math
from datetime import date, datetime, timedelta

import pytest

from rulops.core.config import RiskConfig, RULConfig
from rulops.core.types import HealthSample, MaintenanceUrgency, RiskLevel
from rulops.health import (
    WeibullRULModel,
    calculate_mtbf,
    calculate_rul,
    estimate_degradation_rate,
    get_risk_level,
    hazard_rate,
    recommend_maintenance_window,
    weibull_cdf,
)


@pytest.mark.parametrize("beta", [0.5, 1.0, 2.5, 4.0])
def test_weibull_cdf_at_scale(beta: float) -> None:
    assert weibull_cdf(100.0, 100.0, beta) == pytest.approx(1.0 - math.exp(-1.0))


def test_weibull_cdf_guards() -> None:
    assert weibull_cdf(0.0, 100.0, 2.5) == 0.0
    assert weibull_cdf(-5.0, 100.0, 2.5) == 0.0
    assert weibull_cdf(30.0, 0.0, 2.5) == 0.0
    assert weibull_cdf(30.0, -1.0, 2.5) == 0.0


def test_hazard_rate() -> None:
    # Exponential distribution: constant hazard 1/eta
    assert hazard_rate(5.0, 50.0, 1.0) == pytest.approx(0.02)
    assert hazard_rate(10.0, 10.0, 2.5) == pytest.approx(0.25)
    assert hazard_rate(0.0, 10.0, 2.5) == 0.0
    assert hazard_rate(5.0, 0.0, 2.5) == 0.0
    # Wear-out: increasing hazard
    assert hazard_rate(20.0, 100.0, 2.5) > hazard_rate(10.0, 100.0, 2.5)


def test_calculate_mtbf() -> None:
    # beta = 1: Stirling at z = 2 is sqrt(pi) * 4 / e^2
    assert calculate_mtbf(100.0, 1.0) == pytest.approx(100.0 * math.sqrt(math.pi) * 4.0 / math.e ** 2)
    # Close to the exact Gamma function for reporting purposes
    for beta in (1.0, 2.5, 4.0):
        assert calculate_mtbf(1000.0, beta) == pytest.approx(1000.0 * math.gamma(1.0 + 1.0 / beta), rel=0.1)


@pytest.mark.parametrize("rate", [0.0, 0.5, -3.0, 100.0])
def test_calculate_rul_failed_asset(rate: float) -> None:
    est = calculate_rul(15.0, rate)
    assert est.rul_days == 0.0
    assert (est.confidence_low_days, est.confidence_high_days) == (0.0, 0.0)
    assert est.failure_probability_30d == 1.0
    assert calculate_rul(20.0, rate).rul_days == 0.0


def test_calculate_rul_plateau() -> None:
    est = calculate_rul(80.0, 0.0001)
    assert est.rul_days == 3650.0
    assert (est.confidence_low_days, est.confidence_high_days) == (2000.0, 5000.0)
    assert est.failure_probability_30d == 0.01


def test_calculate_rul_linear_extrapolation() -> None:
    est = calculate_rul(80.0, 1.0)
    assert est.rul_days == 60.0
    assert est.confidence_low_days == 42.0
    assert est.confidence_high_days == 78.0
    assert est.failure_probability_30d == pytest.approx(0.162)


def test_calculate_rul_sign_agnostic_and_clamped() -> None:
    assert calculate_rul(80.0, -1.0) == calculate_rul(80.0, 1.0)
    assert calculate_rul(150.0, 1.0).rul_days == 80.0


def test_calculate_rul_band_ordering() -> None:
    for health in (21.0, 35.5, 60.0, 99.9):
        for rate in (0.001, 0.013, 0.2, 1.7, 25.0):
            est = calculate_rul(health, rate)
            assert 0.0 <= est.confidence_low_days <= est.rul_days <= est.confidence_high_days
            assert 0.0 <= est.failure_probability_30d <= 1.0


def test_calculate_rul_custom_config() -> None:
    cfg = RULConfig(weibull_shape=1.0, confidence_multiplier=0.5, failure_threshold=30.0)
    est = calculate_rul(90.0, 1.0, cfg)
    assert est.rul_days == 60.0
    assert (est.confidence_low_days, est.confidence_high_days) == (30.0, 90.0)
    assert est.failure_probability_30d == pytest.approx(round(1 - math.exp(-0.5), 3))


def test_weibull_rul_model() -> None:
    cfg = RULConfig(weibull_shape=3.0)
    model = WeibullRULModel(cfg)
    assert model.estimate(70.0, 0.5) == calculate_rul(70.0, 0.5, cfg)
    assert model.params()["weibull_shape"] == 3.0


@pytest.mark.parametrize(
    "rul, p30, expected",
    [
        (10.0, 0.0, RiskLevel.CRITICAL),
        (400.0, 0.6, RiskLevel.CRITICAL),
        (30.0, 0.1, RiskLevel.HIGH),
        (400.0, 0.35, RiskLevel.HIGH),
        (150.0, 0.05, RiskLevel.MEDIUM),
        (365.0, 0.2, RiskLevel.MEDIUM),
        (365.0, 0.05, RiskLevel.LOW),
    ],
)
def test_get_risk_level(rul: float, p30: float, expected: RiskLevel) -> None:
    assert get_risk_level(rul, p30) is expected


def test_recommend_maintenance_window() -> None:
    today = date(2024, 3, 1)
    immediate = recommend_maintenance_window(10.0, 0.0, today=today)
    assert immediate.urgency is MaintenanceUrgency.IMMEDIATE
    assert immediate.recommended_date == today

    week = recommend_maintenance_window(20.0, 0.1, today=today)
    assert week.urgency is MaintenanceUrgency.WITHIN_WEEK
    assert week.recommended_date == today + timedelta(days=7)

    month = recommend_maintenance_window(60.0, 0.05, today=today)
    assert month.urgency is MaintenanceUrgency.WITHIN_MONTH
    assert month.recommended_date == today + timedelta(days=30)

    scheduled = recommend_maintenance_window(1000.0, 0.01, today=today)
    assert scheduled.urgency is MaintenanceUrgency.SCHEDULED
    assert scheduled.recommended_date == today + timedelta(days=700)
    assert "700 days" in scheduled.description


def test_estimate_degradation_rate() -> None:
    t0 = datetime(2024, 1, 1)
    samples = [
        HealthSample(t0 + timedelta(days=10), 90.0),
        HealthSample(t0, 100.0),
        HealthSample(t0 + timedelta(days=5), 97.0),
    ]
    assert estimate_degradation_rate(samples) == pytest.approx(1.0)
    # Improving asset: negative rate
    assert estimate_degradation_rate([HealthSample(t0, 50.0), HealthSample(t0 + timedelta(days=2), 60.0)]) == pytest.approx(-5.0)


def test_estimate_degradation_rate_guards() -> None:
    t0 = datetime(2024, 1, 1)
    assert estimate_degradation_rate([]) == 0.0
    assert estimate_degradation_rate([HealthSample(t0, 80.0)]) == 0.0
    short = [HealthSample(t0, 80.0), HealthSample(t0 + timedelta(hours=12), 70.0)]
    assert estimate_degradation_rate(short) == 0.0


def test_risk_and_maintenance_use_configured_cutoffs() -> None:
    today = date(2024, 3, 1)
    cfg = RiskConfig(
        critical_rul_days=60.0,
        immediate_rul_days=45.0,
        scheduled_rul_fraction=0.5,
    )
    assert get_risk_level(50.0, 0.0) is RiskLevel.HIGH
    assert get_risk_level(50.0, 0.0, config=cfg) is RiskLevel.CRITICAL

    assert recommend_maintenance_window(40.0, 0.0, today=today).urgency is MaintenanceUrgency.WITHIN_MONTH
    assert recommend_maintenance_window(40.0, 0.0, today=today, config=cfg).urgency is MaintenanceUrgency.IMMEDIATE

    scheduled = recommend_maintenance_window(1000.0, 0.01, today=today, config=cfg)
    assert scheduled.urgency is MaintenanceUrgency.SCHEDULED
    assert scheduled.recommended_date == today + timedelta(days=500)


def test_plateau_branch_is_logged(caplog) -> None:
    with caplog.at_level(logging.DEBUG, logger="rulops.health.rul"):
        est = calculate_rul(80.0, 0.0)
    assert est.rul_days == 3650.0
    assert any("plateau" in r.getMessage() for r in caplog.records)
