"""Shared fixtures: frozen clock and synthetic health histories."""

from datetime import datetime, timedelta, timezone
from typing import List

import pytest

from rulops.core.types import HealthSample

FROZEN_NOW = datetime(2024, 3, 1, 12, 0, tzinfo=timezone.utc)


def make_history(scores: List[float], start: datetime = None, step_days: float = 1.0) -> List[HealthSample]:
    """Daily samples ending the day before FROZEN_NOW."""
    start = start or FROZEN_NOW - timedelta(days=len(scores))
    return [
        HealthSample(timestamp=start + timedelta(days=i * step_days), health_score=s)
        for i, s in enumerate(scores)
    ]


@pytest.fixture
def now() -> datetime:
    return FROZEN_NOW


@pytest.fixture
def declining_history() -> List[HealthSample]:
    """90 -> 81 over 10 days: 1 point/day."""
    return make_history([90.0 - i for i in range(10)])
