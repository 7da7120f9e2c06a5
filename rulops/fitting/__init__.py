"""
Regression fitters for health-score series.

  - linear: ordinary least squares line, prediction, confidence margin
  - polynomial: normal equations solved by Gaussian elimination
"""

from rulops.fitting.linear import confidence_interval, linear_regression, predict_value
from rulops.fitting.polynomial import polynomial_regression, solve_linear_system

__all__ = [
    "linear_regression",
    "predict_value",
    "confidence_interval",
    "polynomial_regression",
    "solve_linear_system",
]
