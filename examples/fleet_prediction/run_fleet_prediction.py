"""
Example: fleet RUL prediction on synthetic health histories.

Five assets with 90 days of daily health scores, each degrading at its own
rate with uniform noise. Prints per-asset RUL, risk and maintenance window,
the fleet summary, and writes the predictions to JSON.
"""

import logging
import sys
from datetime import datetime, timedelta, timezone
from pathlib import Path
from typing import List

import numpy as np

ROOT = Path(__file__).resolve().parents[2]
sys.path.insert(0, str(ROOT))

from rulops import assess_asset, predict_fleet_rul, risk_distribution
from rulops.core.types import HealthSample
from rulops.io import save_predictions


def generate_health_history(
    now: datetime,
    start_health: float = 85.0,
    degradation_rate: float = 0.1,
    days: int = 90,
    seed: int = 42,
) -> List[HealthSample]:
    """Daily health scores ending at now: linear decay plus uniform noise in [-1, 1]."""
    rng = np.random.default_rng(seed)
    history = []
    health = start_health
    for i in range(days, -1, -1):
        noise = rng.uniform(-1.0, 1.0)
        health = float(np.clip(health - degradation_rate + noise, 0.0, 100.0))
        history.append(HealthSample(timestamp=now - timedelta(days=i), health_score=round(health, 1)))
    return history


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    now = datetime.now(timezone.utc)

    fleet = [
        ("asset-001", generate_health_history(now, 85.0, 0.15, seed=1)),
        ("asset-002", generate_health_history(now, 72.0, 0.25, seed=2)),
        ("asset-003", generate_health_history(now, 95.0, 0.05, seed=3)),
        ("asset-004", generate_health_history(now, 58.0, 0.35, seed=4)),
        ("asset-005", generate_health_history(now, 91.0, 0.08, seed=5)),
    ]

    result = predict_fleet_rul(fleet, now=now, max_workers=4)

    print(f"{'asset':<10} {'health':>7} {'RUL [d]':>8} {'band':>13} {'p30':>6} {'trend':>10} {'risk':>9}  maintenance")
    for asset_id, history in fleet:
        a = assess_asset(asset_id, history, now=now)
        p = a.prediction
        band = f"[{p.confidence_low:.0f}, {p.confidence_high:.0f}]"
        print(
            f"{asset_id:<10} {p.health_forecast[0].predicted_health:7.1f} {p.predicted_rul_days:8.0f} "
            f"{band:>13} {p.failure_probability_30d:6.3f} {p.health_trend.value:>10} "
            f"{a.risk_level.value:>9}  {a.maintenance.urgency.value} ({a.maintenance.recommended_date})"
        )

    s = result.summary
    print(f"\nAt risk: {s.at_risk_count}, healthy: {s.healthy_count}, avg RUL: {s.avg_rul_days:.0f} days")
    print(f"Worst asset: {s.worst_asset.asset_id} ({s.worst_asset.rul_days:.0f} days)")

    dist = risk_distribution(result.predictions)
    print("Risk distribution:", {level.value: n for level, n in dist.counts.items()})

    out_path = Path(__file__).resolve().parent / "fleet_predictions.json"
    save_predictions(result, out_path)
    print(f"Predictions saved to {out_path}")


if __name__ == "__main__":
    main()
