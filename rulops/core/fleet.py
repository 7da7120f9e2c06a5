"""Fleet-level prediction: per-asset pipeline fan-out and summary reduction."""

import logging
from concurrent.futures import ThreadPoolExecutor
from datetime import datetime
from typing import Any, Iterable, List, Mapping, Optional, Sequence, Tuple, Union

from rulops.core import predictor as predictor_module
from rulops.core.component import RULModel
from rulops.core.config import DEFAULT_CONFIG, PrognosticsConfig, RiskConfig
from rulops.core.predictor import HealthHistory, RULPredictor
from rulops.core.types import (
    AssetRUL,
    FleetPrediction,
    FleetSummary,
    HealthSeries,
    PredictionResult,
    RiskDistribution,
    RiskLevel,
)
from rulops.health.risk import get_risk_level

logger = logging.getLogger(__name__)

FleetAsset = Union[HealthSeries, Tuple[str, HealthHistory], Mapping[str, Any]]

_ID_KEYS = ("id", "asset_id", "assetId")
_HISTORY_KEYS = ("healthHistory", "health_history")


def _first_key(record: Mapping[str, Any], keys: Sequence[str]) -> Any:
    for key in keys:
        if key in record:
            return record[key]
    raise KeyError(f"Fleet asset record needs one of {list(keys)}, got keys {sorted(record)}")


def _as_pair(asset: FleetAsset) -> Tuple[str, HealthHistory]:
    """Normalize a HealthSeries, an (asset_id, history) pair or an {id, healthHistory} record."""
    if isinstance(asset, HealthSeries):
        return asset.asset_id, asset.samples
    if isinstance(asset, Mapping):
        return str(_first_key(asset, _ID_KEYS)), _first_key(asset, _HISTORY_KEYS)
    if isinstance(asset, (tuple, list)) and len(asset) == 2:
        asset_id, history = asset
        return asset_id, history
    raise TypeError(f"Unsupported fleet asset: {type(asset).__name__}")


def summarize_fleet(
    predictions: Sequence[PredictionResult],
    config: Optional[RiskConfig] = None,
) -> FleetSummary:
    """
    Reduce per-asset predictions.

    avg_rul_days is NaN and worst_asset is None for an empty fleet. The worst
    asset is the first one with the minimum predicted RUL.
    """
    cfg = config if config is not None else DEFAULT_CONFIG.risk
    at_risk = sum(1 for p in predictions if p.failure_probability_30d > cfg.at_risk_probability)
    healthy = sum(1 for p in predictions if p.failure_probability_30d < cfg.healthy_probability)
    if not predictions:
        return FleetSummary(at_risk_count=0, healthy_count=0, avg_rul_days=float("nan"), worst_asset=None)

    avg_rul = sum(p.predicted_rul_days for p in predictions) / len(predictions)
    worst = predictions[0]
    for p in predictions[1:]:
        if p.predicted_rul_days < worst.predicted_rul_days:
            worst = p
    return FleetSummary(
        at_risk_count=at_risk,
        healthy_count=healthy,
        avg_rul_days=avg_rul,
        worst_asset=AssetRUL(asset_id=worst.asset_id, rul_days=worst.predicted_rul_days),
    )


def predict_fleet_rul(
    assets: Iterable[FleetAsset],
    config: Optional[PrognosticsConfig] = None,
    now: Optional[datetime] = None,
    max_workers: Optional[int] = None,
    rul_model: Optional[RULModel] = None,
) -> FleetPrediction:
    """
    Run the single-asset pipeline for every asset and summarize the fleet.

    Args:
        assets: HealthSeries objects, (asset_id, health_history) pairs or
            {"id": ..., "healthHistory": ...} records
        config: domain assumptions shared by all assets
        now: reference instant shared by all assets (clock read once if None)
        max_workers: if > 1, assets are processed on a thread pool
        rul_model: optional alternative RUL estimator

    Returns:
        FleetPrediction with predictions in input order and the FleetSummary.

    Raises:
        TypeError: if an asset has none of the supported shapes
    """
    now = now if now is not None else predictor_module.utc_now()
    predictor = RULPredictor(config, rul_model)
    pairs = [_as_pair(a) for a in assets]

    def run(pair: Tuple[str, HealthHistory]) -> PredictionResult:
        return predictor.predict(pair[0], pair[1], now=now)

    if max_workers is not None and max_workers > 1 and len(pairs) > 1:
        with ThreadPoolExecutor(max_workers=max_workers) as executor:
            predictions: List[PredictionResult] = list(executor.map(run, pairs))
    else:
        predictions = [run(pair) for pair in pairs]

    summary = summarize_fleet(predictions, predictor.config.risk)
    logger.info(
        "Fleet prediction: %d assets, %d at risk, %d healthy, avg RUL %.1f days",
        len(predictions), summary.at_risk_count, summary.healthy_count, summary.avg_rul_days,
    )
    return FleetPrediction(predictions=tuple(predictions), summary=summary)


def risk_distribution(
    predictions: Sequence[PredictionResult],
    critical_limit: Optional[int] = None,
    config: Optional[RiskConfig] = None,
) -> RiskDistribution:
    """
    Count predictions per risk level and list the critical assets, shortest RUL first.

    Args:
        predictions: per-asset predictions
        critical_limit: keep at most this many critical assets (None = all)
        config: risk cutoffs (defaults if None)
    """
    counts = {level: 0 for level in RiskLevel}
    critical: List[AssetRUL] = []
    for p in predictions:
        level = get_risk_level(p.predicted_rul_days, p.failure_probability_30d, config=config)
        counts[level] += 1
        if level is RiskLevel.CRITICAL:
            critical.append(AssetRUL(asset_id=p.asset_id, rul_days=p.predicted_rul_days))
    critical.sort(key=lambda a: a.rul_days)
    if critical_limit is not None:
        critical = critical[:critical_limit]
    return RiskDistribution(counts=counts, total=len(predictions), critical_assets=tuple(critical))
