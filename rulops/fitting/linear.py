"""Ordinary least-squares line fit over a health-score series."""

from typing import Optional, Sequence

import numpy as np

from rulops.core.types import RegressionResult

# Approximate (large-sample) t-values by confidence level
_T_VALUES = {0.90: 1.645, 0.95: 1.96, 0.99: 2.576}
_DEFAULT_T_VALUE = 1.645


def linear_regression(
    y: Sequence[float],
    x: Optional[Sequence[float]] = None,
) -> RegressionResult:
    """
    Best-fit line y = slope * x + intercept.

    Args:
        y: dependent values (e.g. health scores)
        x: independent values; defaults to 0, 1, ..., n-1

    Returns:
        RegressionResult. Degenerate inputs never produce NaN: n=0 gives a zero
        line with r_squared 0, n=1 a flat line through the point with r_squared 1,
        equal x values a zero slope, zero variance in y an r_squared of 0.
    """
    y_arr = np.asarray(y, dtype=float)
    n = y_arr.size
    if x is not None and len(x) != n:
        raise ValueError(f"x and y must have the same length ({len(x)} != {n})")
    if n == 0:
        return RegressionResult(slope=0.0, intercept=0.0, r_squared=0.0, predictions=())
    if n == 1:
        v = float(y_arr[0])
        return RegressionResult(slope=0.0, intercept=v, r_squared=1.0, predictions=(v,))

    x_arr = np.arange(n, dtype=float) if x is None else np.asarray(x, dtype=float)
    x_mean = x_arr.mean()
    y_mean = y_arr.mean()
    dx = x_arr - x_mean
    numerator = float(np.sum(dx * (y_arr - y_mean)))
    denominator = float(np.sum(dx ** 2))

    slope = numerator / denominator if denominator != 0 else 0.0
    intercept = float(y_mean - slope * x_mean)

    predictions = slope * x_arr + intercept
    ss_res = float(np.sum((y_arr - predictions) ** 2))
    ss_tot = float(np.sum((y_arr - y_mean) ** 2))
    r_squared = 1.0 - ss_res / ss_tot if ss_tot != 0 else 0.0

    return RegressionResult(
        slope=float(slope),
        intercept=intercept,
        r_squared=r_squared,
        predictions=tuple(float(p) for p in predictions),
    )


def predict_value(result: RegressionResult, x: float) -> float:
    """Evaluate a fitted line at x."""
    return result.slope * x + result.intercept


def confidence_interval(
    y: Sequence[float],
    predictions: Sequence[float],
    confidence_level: float = 0.95,
) -> float:
    """
    Symmetric margin of error: t * sqrt(SSres / (n - 2)).

    t is 1.645, 1.96 or 2.576 for 90%, 95% and 99%; other levels use 1.645.
    Returns 0 for n <= 2 (no residual degrees of freedom).
    """
    y_arr = np.asarray(y, dtype=float)
    p_arr = np.asarray(predictions, dtype=float)
    n = y_arr.size
    if n <= 2:
        return 0.0
    if p_arr.size != n:
        raise ValueError(f"y and predictions must have the same length ({n} != {p_arr.size})")
    standard_error = float(np.sqrt(np.sum((y_arr - p_arr) ** 2) / (n - 2)))
    t_value = _T_VALUES.get(round(confidence_level, 2), _DEFAULT_T_VALUE)
    return t_value * standard_error
