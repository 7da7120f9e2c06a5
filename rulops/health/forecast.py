"""Day-by-day linear health forecast."""

from datetime import date, timedelta
from typing import Optional, Tuple

from rulops.core.numeric import clamp, round_half_up
from rulops.core.types import ForecastPoint


def generate_forecast(
    current_health: float,
    daily_degradation: float,
    days: int = 30,
    today: Optional[date] = None,
) -> Tuple[ForecastPoint, ...]:
    """
    Project health linearly for day 0..days.

    Each point is current_health - day * |daily_degradation|, clamped to [0, 100]
    and rounded to one decimal, dated today + day. No uncertainty is attached.
    """
    if days < 0:
        raise ValueError(f"days must be >= 0, got {days}")
    today = today if today is not None else date.today()
    rate = abs(float(daily_degradation))
    return tuple(
        ForecastPoint(
            date=today + timedelta(days=day),
            predicted_health=round_half_up(clamp(current_health - day * rate, 0.0, 100.0), 1),
        )
        for day in range(days + 1)
    )
