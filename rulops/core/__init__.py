"""Core: data model, configuration and the prediction pipelines."""

from rulops.core.component import RULModel
from rulops.core.config import (
    DEFAULT_CONFIG,
    InsufficientDataConfig,
    PipelineConfig,
    PrognosticsConfig,
    RiskConfig,
    RULConfig,
)
from rulops.core.errors import NumericalSingularity, RULOpsError
from rulops.core.fleet import predict_fleet_rul, risk_distribution, summarize_fleet
from rulops.core.predictor import RULPredictor, assess_asset, classify_trend, predict_asset_rul

__all__ = [
    "RULModel",
    "RULConfig",
    "PipelineConfig",
    "InsufficientDataConfig",
    "RiskConfig",
    "PrognosticsConfig",
    "DEFAULT_CONFIG",
    "RULOpsError",
    "NumericalSingularity",
    "RULPredictor",
    "predict_asset_rul",
    "assess_asset",
    "classify_trend",
    "predict_fleet_rul",
    "summarize_fleet",
    "risk_distribution",
]
