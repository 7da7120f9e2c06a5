"""Single and double (Holt) exponential smoothing, forecasting and parameter search."""

from typing import List, Sequence

from rulops.core.types import SmoothingParameters, SmoothingResult

# Grid of the parameter search, as exact decimals
ALPHA_GRID = tuple(round(0.1 * i, 1) for i in range(1, 10))
BETA_GRID = tuple(round(0.1 * i, 1) for i in range(1, 6))

# Returned by optimize_parameters when there is nothing to score
_FALLBACK_ALPHA = 0.3
_FALLBACK_BETA = 0.1


def _check_factor(name: str, value: float) -> None:
    if not 0.0 < value <= 1.0:
        raise ValueError(f"{name} must be in (0, 1], got {value}")


def exponential_smoothing(data: Sequence[float], alpha: float = 0.3) -> List[float]:
    """
    s[0] = data[0], s[i] = alpha * data[i] + (1 - alpha) * s[i-1].
    Higher alpha gives more weight to recent observations.
    """
    _check_factor("alpha", alpha)
    if len(data) == 0:
        return []
    smoothed = [float(data[0])]
    for value in data[1:]:
        smoothed.append(alpha * float(value) + (1 - alpha) * smoothed[-1])
    return smoothed


def double_exponential_smoothing(
    data: Sequence[float],
    alpha: float = 0.3,
    beta: float = 0.1,
) -> SmoothingResult:
    """
    Holt's method: tracks a level and a trend.

    Args:
        data: observations
        alpha: level smoothing factor
        beta: trend smoothing factor

    Returns:
        SmoothingResult with smoothed[i] = level_i + trend_i (smoothed[0] = data[0])
        and the final level and trend.
    """
    _check_factor("alpha", alpha)
    _check_factor("beta", beta)
    if len(data) == 0:
        return SmoothingResult(smoothed=(), level=0.0, trend=0.0)
    if len(data) == 1:
        v = float(data[0])
        return SmoothingResult(smoothed=(v,), level=v, trend=0.0)

    level = float(data[0])
    trend = float(data[1]) - float(data[0])
    smoothed = [level]
    for value in data[1:]:
        last_level = level
        level = alpha * float(value) + (1 - alpha) * (level + trend)
        trend = beta * (level - last_level) + (1 - beta) * trend
        smoothed.append(level + trend)
    return SmoothingResult(smoothed=tuple(smoothed), level=level, trend=trend)


def forecast_exponential(
    data: Sequence[float],
    periods: int,
    alpha: float = 0.3,
    beta: float = 0.1,
) -> List[float]:
    """Forecast level + k * trend for k = 1..periods from Holt smoothing of data."""
    return double_exponential_smoothing(data, alpha, beta).forecast(periods)


def one_step_mse(data: Sequence[float], smoothed: Sequence[float]) -> float:
    """Mean squared error of smoothed[i-1] as forecast of data[i]."""
    n = len(data)
    if n < 2:
        return 0.0
    total = 0.0
    for i in range(1, n):
        error = float(data[i]) - smoothed[i - 1]
        total += error * error
    return total / (n - 1)


def optimize_parameters(data: Sequence[float]) -> SmoothingParameters:
    """
    Grid search of (alpha, beta) minimizing the one-step-ahead MSE of Holt smoothing.

    alpha runs over 0.1..0.9 and beta over 0.1..0.5 in steps of 0.1; on ties the
    first pair in grid order wins. Deterministic and intended as an opt-in
    calibration tool, not a general optimizer.
    """
    if len(data) < 2:
        return SmoothingParameters(alpha=_FALLBACK_ALPHA, beta=_FALLBACK_BETA, mse=0.0)

    best = SmoothingParameters(alpha=_FALLBACK_ALPHA, beta=_FALLBACK_BETA, mse=float("inf"))
    for alpha in ALPHA_GRID:
        for beta in BETA_GRID:
            result = double_exponential_smoothing(data, alpha, beta)
            mse = one_step_mse(data, result.smoothed)
            if mse < best.mse:
                best = SmoothingParameters(alpha=alpha, beta=beta, mse=mse)
    return best
