"""Health prognostics: RUL, reliability, risk, degradation rate, forecast."""

from rulops.health.degradation import estimate_degradation_rate
from rulops.health.forecast import generate_forecast
from rulops.health.reliability import calculate_mtbf, hazard_rate, weibull_cdf
from rulops.health.risk import get_risk_level, recommend_maintenance_window
from rulops.health.rul import WeibullRULModel, calculate_rul

__all__ = [
    "calculate_rul",
    "WeibullRULModel",
    "weibull_cdf",
    "hazard_rate",
    "calculate_mtbf",
    "get_risk_level",
    "recommend_maintenance_window",
    "estimate_degradation_rate",
    "generate_forecast",
]
