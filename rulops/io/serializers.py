"""Save and load configurations; convert prediction results to JSON-ready dicts."""

import json
from dataclasses import asdict, is_dataclass
from datetime import date, datetime
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Union

from rulops.core.config import PrognosticsConfig
from rulops.core.types import FleetPrediction, PredictionResult


def _convert(obj: Any) -> Any:
    """Recursively turn dates, enums and dataclasses into JSON types."""
    if is_dataclass(obj) and not isinstance(obj, type):
        return _convert(asdict(obj))
    if isinstance(obj, Enum):
        return obj.value
    if isinstance(obj, datetime):
        return obj.isoformat()
    if isinstance(obj, date):
        return obj.isoformat()
    if isinstance(obj, dict):
        return {_convert(k): _convert(v) for k, v in obj.items()}
    if isinstance(obj, (list, tuple)):
        return [_convert(x) for x in obj]
    return obj


def prediction_to_dict(prediction: PredictionResult) -> Dict[str, Any]:
    """
    Plain dict for a prediction: ISO-8601 predicted_at and forecast dates,
    trend as its string value.
    """
    return _convert(prediction)


def fleet_to_dict(fleet: FleetPrediction) -> Dict[str, Any]:
    """Plain dict for a fleet prediction. A NaN average (empty fleet) becomes None."""
    data = _convert(fleet)
    avg = data["summary"]["avg_rul_days"]
    if avg != avg:
        data["summary"]["avg_rul_days"] = None
    return data


def save_predictions(fleet: FleetPrediction, path: Union[str, Path]) -> None:
    """Write a fleet prediction to JSON."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(fleet_to_dict(fleet), f, indent=2, ensure_ascii=False)


def save_config(config: PrognosticsConfig, path: Union[str, Path]) -> None:
    """Save a configuration to JSON."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(config.to_dict(), f, indent=2, ensure_ascii=False)


def load_config(path: Union[str, Path]) -> PrognosticsConfig:
    """Load a configuration from JSON. Missing keys keep their defaults."""
    path = Path(path)
    with open(path, "r", encoding="utf-8") as f:
        return PrognosticsConfig.from_dict(json.load(f))
