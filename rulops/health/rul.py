"""Remaining Useful Life from current health and degradation rate (Weibull model)."""

import logging
from typing import Any, Dict, Optional

from rulops.core.component import RULModel
from rulops.core.config import DEFAULT_CONFIG, RULConfig
from rulops.core.numeric import clamp, round_half_up
from rulops.core.types import RULEstimate
from rulops.health.reliability import weibull_cdf

logger = logging.getLogger(__name__)


def calculate_rul(
    current_health: float,
    degradation_rate: float,
    config: Optional[RULConfig] = None,
) -> RULEstimate:
    """
    Days until health crosses the failure threshold at the current rate.

    Args:
        current_health: health score, clamped to [0, 100]
        degradation_rate: daily health-point loss; only the magnitude is used
        config: thresholds and Weibull parameters (defaults if None)

    Returns:
        RULEstimate. Already-failed assets get RUL 0 and probability 1; assets
        that are not degrading get the long-horizon plateau estimate. Otherwise
        days are rounded to whole days and the probability to 3 decimals.
    """
    cfg = config if config is not None else DEFAULT_CONFIG.rul
    health = clamp(float(current_health), 0.0, 100.0)
    rate = abs(float(degradation_rate))

    if health <= cfg.failure_threshold:
        logger.debug("Health %.2f at or below failure threshold %.2f", health, cfg.failure_threshold)
        return RULEstimate(
            rul_days=0.0,
            confidence_low_days=0.0,
            confidence_high_days=0.0,
            failure_probability_30d=1.0,
        )

    if rate < cfg.min_degradation_rate:
        logger.debug(
            "Degradation rate %.5f below %.5f, returning plateau estimate",
            rate, cfg.min_degradation_rate,
        )
        return RULEstimate(
            rul_days=cfg.plateau_rul_days,
            confidence_low_days=cfg.plateau_confidence_low_days,
            confidence_high_days=cfg.plateau_confidence_high_days,
            failure_probability_30d=cfg.plateau_failure_probability,
        )

    days_to_failure = (health - cfg.failure_threshold) / rate
    low = round_half_up(days_to_failure * (1 - cfg.confidence_multiplier))
    high = round_half_up(days_to_failure * (1 + cfg.confidence_multiplier))
    probability = weibull_cdf(cfg.probability_horizon_days, days_to_failure, cfg.weibull_shape)

    return RULEstimate(
        rul_days=round_half_up(days_to_failure),
        confidence_low_days=max(0.0, low),
        confidence_high_days=high,
        failure_probability_30d=round_half_up(probability, 3),
    )


class WeibullRULModel(RULModel):
    """
    Linear extrapolation to the failure threshold, with failure probability
    from a Weibull distribution whose scale is the extrapolated life.
    """

    def __init__(self, config: Optional[RULConfig] = None) -> None:
        """
        Args:
            config: thresholds, Weibull shape and confidence multiplier
        """
        self.config = config if config is not None else DEFAULT_CONFIG.rul

    def estimate(self, current_health: float, degradation_rate: float) -> RULEstimate:
        return calculate_rul(current_health, degradation_rate, self.config)

    def params(self) -> Dict[str, Any]:
        return {
            "failure_threshold": self.config.failure_threshold,
            "weibull_shape": self.config.weibull_shape,
            "confidence_multiplier": self.config.confidence_multiplier,
        }
