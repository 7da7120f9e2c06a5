"""Risk classification and maintenance-window recommendation."""

from datetime import date, timedelta
from typing import Optional

from rulops.core.config import DEFAULT_CONFIG, RiskConfig
from rulops.core.numeric import round_half_up
from rulops.core.types import MaintenanceRecommendation, MaintenanceUrgency, RiskLevel


def get_risk_level(
    rul: float,
    failure_probability_30d: float,
    config: Optional[RiskConfig] = None,
) -> RiskLevel:
    """Classify risk; checks run from critical down and the first match wins."""
    cfg = config if config is not None else DEFAULT_CONFIG.risk
    p = failure_probability_30d
    if p > cfg.critical_probability or rul < cfg.critical_rul_days:
        return RiskLevel.CRITICAL
    if p > cfg.high_probability or rul < cfg.high_rul_days:
        return RiskLevel.HIGH
    if p > cfg.medium_probability or rul < cfg.medium_rul_days:
        return RiskLevel.MEDIUM
    return RiskLevel.LOW


def recommend_maintenance_window(
    rul: float,
    failure_probability_30d: float,
    today: Optional[date] = None,
    config: Optional[RiskConfig] = None,
) -> MaintenanceRecommendation:
    """
    Suggest when to intervene.

    Args:
        rul: remaining useful life in days
        failure_probability_30d: probability of failure within 30 days
        today: reference date (defaults to the current date)
        config: urgency cutoffs (defaults if None)

    Returns:
        MaintenanceRecommendation: immediate, within a week, within a month, or
        scheduled at a fraction (70% by default) of the remaining life.
    """
    cfg = config if config is not None else DEFAULT_CONFIG.risk
    today = today if today is not None else date.today()
    p = failure_probability_30d

    if p > cfg.immediate_probability or rul < cfg.immediate_rul_days:
        return MaintenanceRecommendation(
            urgency=MaintenanceUrgency.IMMEDIATE,
            recommended_date=today,
            description="Immediate maintenance required to prevent failure",
        )
    if p > cfg.within_week_probability or rul < cfg.within_week_rul_days:
        return MaintenanceRecommendation(
            urgency=MaintenanceUrgency.WITHIN_WEEK,
            recommended_date=today + timedelta(days=7),
            description="Schedule maintenance within the next 7 days",
        )
    if p > cfg.within_month_probability or rul < cfg.within_month_rul_days:
        return MaintenanceRecommendation(
            urgency=MaintenanceUrgency.WITHIN_MONTH,
            recommended_date=today + timedelta(days=30),
            description="Schedule maintenance within the next 30 days",
        )

    optimal_days = int(round_half_up(rul * cfg.scheduled_rul_fraction))
    return MaintenanceRecommendation(
        urgency=MaintenanceUrgency.SCHEDULED,
        recommended_date=today + timedelta(days=optimal_days),
        description=f"Schedule preventive maintenance in approximately {optimal_days} days",
    )
