"""Tests for configuration, JSON serialization and record parsing."""

import json
from datetime import datetime, timezone

import pytest

from conftest import make_history
from rulops import DEFAULT_CONFIG, PrognosticsConfig, predict_asset_rul, predict_fleet_rul
from rulops.core.config import RULConfig
from rulops.io import (
    load_config,
    prediction_to_dict,
    sample_from_record,
    save_config,
    save_predictions,
    series_from_records,
)


def test_default_config_values() -> None:
    assert DEFAULT_CONFIG.rul.failure_threshold == 20.0
    assert DEFAULT_CONFIG.rul.warning_threshold == 40.0
    assert DEFAULT_CONFIG.rul.weibull_shape == 2.5
    assert DEFAULT_CONFIG.rul.confidence_multiplier == 0.3
    assert DEFAULT_CONFIG.pipeline.smoothing_alpha == 0.3
    assert DEFAULT_CONFIG.pipeline.forecast_days == 30
    assert DEFAULT_CONFIG.insufficient_data.rul_days == 365.0


def test_config_roundtrip_json(tmp_path) -> None:
    config = PrognosticsConfig(rul=RULConfig(weibull_shape=3.0, failure_threshold=25.0))
    path = tmp_path / "cfg" / "prognostics.json"
    save_config(config, path)
    assert load_config(path) == config


def test_partial_config_keeps_defaults() -> None:
    config = PrognosticsConfig.from_dict({"rul": {"weibull_shape": 1.5}})
    assert config.rul.weibull_shape == 1.5
    assert config.rul.failure_threshold == 20.0
    assert config.pipeline == DEFAULT_CONFIG.pipeline


def test_unknown_config_keys_rejected() -> None:
    with pytest.raises(ValueError):
        PrognosticsConfig.from_dict({"weibull": {}})
    with pytest.raises(ValueError):
        PrognosticsConfig.from_dict({"rul": {"shape": 2.0}})


def test_prediction_to_dict(declining_history, now) -> None:
    data = prediction_to_dict(predict_asset_rul("motor-7", declining_history, now=now))
    assert data["asset_id"] == "motor-7"
    assert data["health_trend"] == "declining"
    assert data["predicted_at"] == now.isoformat()
    assert data["health_forecast"][0] == {"date": now.date().isoformat(), "predicted_health": 81.0}
    json.dumps(data)


def test_save_predictions(tmp_path, declining_history, now) -> None:
    fleet = predict_fleet_rul([("motor-7", declining_history)], now=now)
    path = tmp_path / "out" / "fleet.json"
    save_predictions(fleet, path)
    data = json.loads(path.read_text(encoding="utf-8"))
    assert data["summary"]["worst_asset"] == {"asset_id": "motor-7", "rul_days": 61.0}
    assert len(data["predictions"]) == 1


def test_records_to_samples(now) -> None:
    s = sample_from_record({"timestamp": "2024-03-01T00:00:00Z", "healthScore": 77})
    assert s.timestamp == datetime(2024, 3, 1, tzinfo=timezone.utc)
    assert s.health_score == 77.0
    assert sample_from_record((now, 50)).health_score == 50.0

    history = make_history([90.0, 89.0, 88.0])
    records = [{"timestamp": h.timestamp.isoformat(), "health_score": h.health_score} for h in history]
    series = series_from_records("a", records)
    assert series.asset_id == "a"
    assert list(series.samples) == history
    assert series.scores() == [90.0, 89.0, 88.0]


def test_unsupported_record() -> None:
    with pytest.raises(TypeError):
        sample_from_record(42)


def test_risk_config_section(tmp_path) -> None:
    assert DEFAULT_CONFIG.risk.critical_probability == 0.5
    assert DEFAULT_CONFIG.risk.scheduled_rul_fraction == 0.7
    assert DEFAULT_CONFIG.risk.at_risk_probability == 0.3
    config = PrognosticsConfig.from_dict({"risk": {"critical_rul_days": 45.0}})
    assert config.risk.critical_rul_days == 45.0
    assert config.risk.high_rul_days == 90.0
    path = tmp_path / "risk.json"
    save_config(config, path)
    assert load_config(path) == config
    with pytest.raises(ValueError):
        PrognosticsConfig.from_dict({"risk": {"critical_days": 45.0}})
