"""Value objects exchanged between the prognostics components."""

from dataclasses import dataclass, field
from datetime import date, datetime
from enum import Enum
from typing import Dict, List, Optional, Sequence, Tuple


class HealthTrend(str, Enum):
    """Recent direction of the health score."""

    IMPROVING = "improving"
    STABLE = "stable"
    DECLINING = "declining"


class RiskLevel(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


class MaintenanceUrgency(str, Enum):
    IMMEDIATE = "immediate"
    WITHIN_WEEK = "within_week"
    WITHIN_MONTH = "within_month"
    SCHEDULED = "scheduled"


@dataclass(frozen=True)
class HealthSample:
    """One health score (0-100, lower is worse) observed at a point in time."""

    timestamp: datetime
    health_score: float


@dataclass(frozen=True)
class HealthSeries:
    """
    Health history of one asset.

    Samples are kept in input order; use sorted_samples() for the time-ordered
    view. Sorting is stable, so samples sharing a timestamp keep their input order.
    """

    asset_id: str
    samples: Tuple[HealthSample, ...] = ()

    def __post_init__(self) -> None:
        if not isinstance(self.samples, tuple):
            object.__setattr__(self, "samples", tuple(self.samples))

    def sorted_samples(self) -> List[HealthSample]:
        return sort_samples(self.samples)

    def scores(self) -> List[float]:
        """Health scores in timestamp order."""
        return [float(s.health_score) for s in self.sorted_samples()]

    def __len__(self) -> int:
        return len(self.samples)


def sort_samples(samples: Sequence[HealthSample]) -> List[HealthSample]:
    """Stable sort of health samples by timestamp."""
    return sorted(samples, key=lambda s: s.timestamp)


@dataclass(frozen=True)
class RegressionResult:
    """Least-squares line y = slope * x + intercept."""

    slope: float
    intercept: float
    r_squared: float
    predictions: Tuple[float, ...] = ()

    def predict(self, x: float) -> float:
        return self.slope * x + self.intercept


@dataclass(frozen=True)
class PolynomialResult:
    """Polynomial fit y = c0 + c1*x + c2*x^2 + ..."""

    coefficients: Tuple[float, ...]
    predictions: Tuple[float, ...] = ()

    @property
    def degree(self) -> int:
        return len(self.coefficients) - 1

    def predict(self, x: float) -> float:
        return float(sum(c * x ** i for i, c in enumerate(self.coefficients)))


@dataclass(frozen=True)
class SmoothingResult:
    """
    Output of exponential smoothing. level and trend are the final Holt
    components and are only meaningful for double smoothing.
    """

    smoothed: Tuple[float, ...]
    level: float = 0.0
    trend: float = 0.0

    def forecast(self, periods: int) -> List[float]:
        """Holt forecast level + k * trend for k = 1..periods."""
        return [self.level + k * self.trend for k in range(1, periods + 1)]


@dataclass(frozen=True)
class SmoothingParameters:
    """Best (alpha, beta) pair found by grid search and its one-step-ahead MSE."""

    alpha: float
    beta: float
    mse: float


@dataclass(frozen=True)
class RULEstimate:
    rul_days: float
    confidence_low_days: float
    confidence_high_days: float
    failure_probability_30d: float


@dataclass(frozen=True)
class ForecastPoint:
    date: date
    predicted_health: float


@dataclass(frozen=True)
class MaintenanceRecommendation:
    urgency: MaintenanceUrgency
    recommended_date: date
    description: str


@dataclass(frozen=True)
class PredictionResult:
    """
    Per-asset prediction.

    insufficient_data is True when the history was too short and the fixed
    default prediction was returned; callers should present it as a
    low-confidence estimate.
    """

    asset_id: str
    predicted_rul_days: float
    degradation_rate: float
    confidence_low: float
    confidence_high: float
    failure_probability_30d: float
    health_trend: HealthTrend
    predicted_at: datetime
    health_forecast: Tuple[ForecastPoint, ...] = ()
    insufficient_data: bool = False


@dataclass(frozen=True)
class AssetRUL:
    asset_id: str
    rul_days: float


@dataclass(frozen=True)
class FleetSummary:
    """Fleet-wide reduction of per-asset predictions."""

    at_risk_count: int
    healthy_count: int
    avg_rul_days: float
    worst_asset: Optional[AssetRUL]


@dataclass(frozen=True)
class FleetPrediction:
    predictions: Tuple[PredictionResult, ...]
    summary: FleetSummary


@dataclass(frozen=True)
class AssetAssessment:
    """Prediction enriched with risk classification and maintenance window."""

    prediction: PredictionResult
    risk_level: RiskLevel
    maintenance: MaintenanceRecommendation


@dataclass(frozen=True)
class RiskDistribution:
    """Number of assets per risk level plus the critical ones, shortest RUL first."""

    counts: Dict[RiskLevel, int]
    total: int
    critical_assets: Tuple[AssetRUL, ...] = field(default_factory=tuple)
