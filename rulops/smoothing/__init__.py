"""Exponential smoothing for trend detection and short-term forecasting."""

from rulops.smoothing.exponential import (
    ALPHA_GRID,
    BETA_GRID,
    double_exponential_smoothing,
    exponential_smoothing,
    forecast_exponential,
    one_step_mse,
    optimize_parameters,
)

__all__ = [
    "ALPHA_GRID",
    "BETA_GRID",
    "exponential_smoothing",
    "double_exponential_smoothing",
    "forecast_exponential",
    "one_step_mse",
    "optimize_parameters",
]
