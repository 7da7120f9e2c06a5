"""Capability interface for interchangeable RUL estimators."""

from abc import ABC, abstractmethod
from typing import Any, Dict

from rulops.core.types import RULEstimate


class RULModel(ABC):
    """
    Interface for anything that turns current health and a daily degradation
    rate into a remaining-life estimate. The single-asset pipeline depends only
    on this contract, so alternative reliability models can be plugged in.
    """

    @abstractmethod
    def estimate(self, current_health: float, degradation_rate: float) -> RULEstimate:
        """
        Args:
            current_health: latest health score (0-100)
            degradation_rate: daily health-point loss (sign is ignored)

        Returns:
            RULEstimate with remaining days, confidence band and 30-day failure probability.
        """
        pass

    def params(self) -> Dict[str, Any]:
        """
        Parameters of the model for reporting/serialization.
        Override for parametric models.
        """
        return {}
