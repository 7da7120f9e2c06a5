"""Single-asset prognostics pipeline: regression -> smoothing -> RUL -> forecast."""

import logging
from datetime import datetime, timezone
from typing import Optional, Sequence, Union

from rulops.core.component import RULModel
from rulops.core.config import DEFAULT_CONFIG, PrognosticsConfig
from rulops.core.types import (
    AssetAssessment,
    HealthSample,
    HealthSeries,
    HealthTrend,
    PredictionResult,
    sort_samples,
)
from rulops.fitting.linear import linear_regression
from rulops.health.forecast import generate_forecast
from rulops.health.risk import get_risk_level, recommend_maintenance_window
from rulops.health.rul import WeibullRULModel
from rulops.smoothing.exponential import exponential_smoothing

logger = logging.getLogger(__name__)

HealthHistory = Union[HealthSeries, Sequence[HealthSample]]


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def classify_trend(smoothed: Sequence[float], threshold: float = 0.5) -> HealthTrend:
    """Trend from the last-step delta of a smoothed series."""
    if len(smoothed) < 2:
        return HealthTrend.STABLE
    delta = smoothed[-1] - smoothed[-2]
    if delta > threshold:
        return HealthTrend.IMPROVING
    if delta < -threshold:
        return HealthTrend.DECLINING
    return HealthTrend.STABLE


class RULPredictor:
    """
    Prognostics pipeline for one asset.
    Handles the chain: sort history -> degradation rate (OLS slope) ->
    trend (exponential smoothing) -> RUL estimate -> health forecast.
    Stateless: one instance can serve any number of assets and threads.
    """

    def __init__(
        self,
        config: Optional[PrognosticsConfig] = None,
        rul_model: Optional[RULModel] = None,
    ) -> None:
        """
        Args:
            config: domain assumptions (defaults to DEFAULT_CONFIG)
            rul_model: RUL estimator (default: WeibullRULModel built from config.rul)
        """
        self.config = config if config is not None else DEFAULT_CONFIG
        self.rul_model = rul_model if rul_model is not None else WeibullRULModel(self.config.rul)

    def default_prediction(self, asset_id: str, now: datetime) -> PredictionResult:
        """Fixed low-confidence prediction used when the history is too short."""
        d = self.config.insufficient_data
        return PredictionResult(
            asset_id=asset_id,
            predicted_rul_days=d.rul_days,
            degradation_rate=d.degradation_rate,
            confidence_low=d.confidence_low_days,
            confidence_high=d.confidence_high_days,
            failure_probability_30d=d.failure_probability_30d,
            health_trend=HealthTrend.STABLE,
            predicted_at=now,
            health_forecast=generate_forecast(
                d.forecast_health,
                d.degradation_rate,
                self.config.pipeline.forecast_days,
                today=now.date(),
            ),
            insufficient_data=True,
        )

    def predict(
        self,
        asset_id: str,
        health_history: HealthHistory,
        now: Optional[datetime] = None,
    ) -> PredictionResult:
        """
        Predict remaining useful life of one asset.

        Args:
            asset_id: asset identifier, copied to the result
            health_history: health samples in any order
            now: reference instant for predicted_at and forecast dates; the
                clock is read once here if None

        Returns:
            PredictionResult (the default prediction if fewer than
            min_history_points samples are given).
        """
        now = now if now is not None else utc_now()
        samples = health_history.samples if isinstance(health_history, HealthSeries) else health_history
        pipeline = self.config.pipeline

        if len(samples) < pipeline.min_history_points:
            logger.debug(
                "Asset %s: %d health samples (< %d), returning default prediction",
                asset_id, len(samples), pipeline.min_history_points,
            )
            return self.default_prediction(asset_id, now)

        scores = [float(s.health_score) for s in sort_samples(samples)]

        # 1) Degradation rate
        regression = linear_regression(scores)
        degradation_rate = regression.slope

        # 2) Recent trend
        smoothed = exponential_smoothing(scores, pipeline.smoothing_alpha)
        trend = classify_trend(smoothed, pipeline.trend_threshold)

        # 3) RUL
        current_health = scores[-1]
        estimate = self.rul_model.estimate(current_health, abs(degradation_rate))

        # 4) Forecast
        forecast = generate_forecast(
            current_health,
            abs(degradation_rate),
            pipeline.forecast_days,
            today=now.date(),
        )

        logger.debug(
            "Asset %s: health=%.2f rate=%.4f/day r2=%.3f rul=%s p30=%s trend=%s",
            asset_id, current_health, degradation_rate, regression.r_squared,
            estimate.rul_days, estimate.failure_probability_30d, trend.value,
        )
        return PredictionResult(
            asset_id=asset_id,
            predicted_rul_days=estimate.rul_days,
            degradation_rate=abs(degradation_rate),
            confidence_low=estimate.confidence_low_days,
            confidence_high=estimate.confidence_high_days,
            failure_probability_30d=estimate.failure_probability_30d,
            health_trend=trend,
            predicted_at=now,
            health_forecast=forecast,
        )

    def assess(
        self,
        asset_id: str,
        health_history: HealthHistory,
        now: Optional[datetime] = None,
    ) -> AssetAssessment:
        """Prediction plus risk level and maintenance window, on one clock reading."""
        now = now if now is not None else utc_now()
        prediction = self.predict(asset_id, health_history, now=now)
        risk = self.config.risk
        return AssetAssessment(
            prediction=prediction,
            risk_level=get_risk_level(
                prediction.predicted_rul_days, prediction.failure_probability_30d, config=risk,
            ),
            maintenance=recommend_maintenance_window(
                prediction.predicted_rul_days,
                prediction.failure_probability_30d,
                today=now.date(),
                config=risk,
            ),
        )


def predict_asset_rul(
    asset_id: str,
    health_history: HealthHistory,
    config: Optional[PrognosticsConfig] = None,
    now: Optional[datetime] = None,
    rul_model: Optional[RULModel] = None,
) -> PredictionResult:
    """Single-asset entry point. See RULPredictor.predict."""
    return RULPredictor(config, rul_model).predict(asset_id, health_history, now=now)


def assess_asset(
    asset_id: str,
    health_history: HealthHistory,
    config: Optional[PrognosticsConfig] = None,
    now: Optional[datetime] = None,
    rul_model: Optional[RULModel] = None,
) -> AssetAssessment:
    """Single-asset prediction with risk level and maintenance recommendation."""
    return RULPredictor(config, rul_model).assess(asset_id, health_history, now=now)
