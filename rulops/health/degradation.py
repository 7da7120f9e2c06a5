"""Degradation rate by endpoint differencing of a health history."""

from typing import Sequence

from rulops.core.types import HealthSample, sort_samples

_SECONDS_PER_DAY = 86400.0


def estimate_degradation_rate(samples: Sequence[HealthSample]) -> float:
    """
    (first health - last health) / days between them, after sorting by timestamp.

    Positive means the asset is degrading. Returns 0 for fewer than 2 samples or
    a span shorter than one day.
    """
    if len(samples) < 2:
        return 0.0
    ordered = sort_samples(samples)
    first, last = ordered[0], ordered[-1]
    days = (last.timestamp - first.timestamp).total_seconds() / _SECONDS_PER_DAY
    if days < 1:
        return 0.0
    return (float(first.health_score) - float(last.health_score)) / days
