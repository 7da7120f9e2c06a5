"""Domain assumptions of the prognostics engine, grouped as frozen dataclasses."""

from dataclasses import asdict, dataclass, field, fields
from typing import Any, Dict


@dataclass(frozen=True)
class RULConfig:
    """Remaining-useful-life estimation (thresholds and Weibull reliability model)."""

    # Health score at or below which the asset is considered failed
    failure_threshold: float = 20.0

    # Informational: minimum health for normal operation
    warning_threshold: float = 40.0

    # Weibull shape: 2-4 is typical wear-out of electrical/mechanical equipment
    weibull_shape: float = 2.5

    # Relative half-width of the RUL confidence band
    confidence_multiplier: float = 0.3

    # Below this |rate| (health points/day) degradation is treated as absent
    min_degradation_rate: float = 0.001

    # Horizon of the reported failure probability
    probability_horizon_days: float = 30.0

    # Long-horizon fallback when degradation is absent (10 years)
    plateau_rul_days: float = 3650.0
    plateau_confidence_low_days: float = 2000.0
    plateau_confidence_high_days: float = 5000.0
    plateau_failure_probability: float = 0.01


@dataclass(frozen=True)
class PipelineConfig:
    """Single-asset pipeline: smoothing, trend classification, forecast."""

    smoothing_alpha: float = 0.3

    # Last-step delta of the smoothed series above which the trend is not stable
    trend_threshold: float = 0.5

    forecast_days: int = 30

    # Shorter histories get the insufficient-data default prediction
    min_history_points: int = 3


@dataclass(frozen=True)
class InsufficientDataConfig:
    """Fixed default prediction returned when the history is too short."""

    rul_days: float = 365.0
    confidence_low_days: float = 300.0
    confidence_high_days: float = 450.0
    degradation_rate: float = 0.01
    failure_probability_30d: float = 0.05
    forecast_health: float = 85.0


@dataclass(frozen=True)
class RiskConfig:
    """
    Cutoffs on (RUL days, 30-day failure probability) for risk levels,
    maintenance urgency and fleet counts. A level applies when the probability
    is above its cutoff or the RUL is below its cutoff.
    """

    critical_probability: float = 0.5
    critical_rul_days: float = 30.0
    high_probability: float = 0.3
    high_rul_days: float = 90.0
    medium_probability: float = 0.1
    medium_rul_days: float = 180.0

    immediate_probability: float = 0.5
    immediate_rul_days: float = 14.0
    within_week_probability: float = 0.3
    within_week_rul_days: float = 30.0
    within_month_probability: float = 0.1
    within_month_rul_days: float = 90.0

    # Non-urgent maintenance is scheduled at this fraction of the remaining life
    scheduled_rul_fraction: float = 0.7

    # Fleet counts: p30 above at_risk_probability is at risk, below healthy_probability healthy
    at_risk_probability: float = 0.3
    healthy_probability: float = 0.1


@dataclass(frozen=True)
class PrognosticsConfig:
    rul: RULConfig = field(default_factory=RULConfig)
    pipeline: PipelineConfig = field(default_factory=PipelineConfig)
    insufficient_data: InsufficientDataConfig = field(default_factory=InsufficientDataConfig)
    risk: RiskConfig = field(default_factory=RiskConfig)

    def to_dict(self) -> Dict[str, Dict[str, Any]]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "PrognosticsConfig":
        """
        Build a config from a (possibly partial) nested dict.
        Missing sections and keys keep their defaults; unknown keys raise ValueError.
        """
        sections = {f.name: f for f in fields(cls)}
        unknown = set(data) - set(sections)
        if unknown:
            raise ValueError(f"Unknown config sections: {sorted(unknown)}")
        kwargs: Dict[str, Any] = {}
        for name, value in data.items():
            section_cls = sections[name].default_factory  # type: ignore[misc]
            allowed = {f.name for f in fields(section_cls)}
            bad = set(value) - allowed
            if bad:
                raise ValueError(f"Unknown keys in config section '{name}': {sorted(bad)}")
            kwargs[name] = section_cls(**value)
        return cls(**kwargs)


# Default config used when callers pass None
DEFAULT_CONFIG = PrognosticsConfig()
