"""
RULOps: remaining-useful-life prediction for industrial assets
(regression + exponential smoothing + Weibull reliability).
"""

__version__ = "0.1.0"

from rulops.core.config import DEFAULT_CONFIG, PrognosticsConfig
from rulops.core.errors import NumericalSingularity, RULOpsError
from rulops.core.fleet import predict_fleet_rul, risk_distribution
from rulops.core.predictor import RULPredictor, assess_asset, predict_asset_rul
from rulops.core.types import (
    AssetAssessment,
    FleetPrediction,
    FleetSummary,
    ForecastPoint,
    HealthSample,
    HealthSeries,
    HealthTrend,
    MaintenanceUrgency,
    PredictionResult,
    RiskLevel,
)

__all__ = [
    "__version__",
    "predict_asset_rul",
    "predict_fleet_rul",
    "assess_asset",
    "risk_distribution",
    "RULPredictor",
    "PrognosticsConfig",
    "DEFAULT_CONFIG",
    "RULOpsError",
    "NumericalSingularity",
    "HealthSample",
    "HealthSeries",
    "HealthTrend",
    "RiskLevel",
    "MaintenanceUrgency",
    "ForecastPoint",
    "PredictionResult",
    "FleetPrediction",
    "FleetSummary",
    "AssetAssessment",
]
