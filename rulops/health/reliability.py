"""Weibull reliability functions: failure CDF, hazard rate, MTBF."""

import math


def weibull_cdf(t: float, eta: float, beta: float) -> float:
    """
    Probability of failure by time t: P(T <= t) = 1 - exp(-(t/eta)^beta).

    Args:
        t: time to evaluate
        eta: scale parameter (characteristic life)
        beta: shape parameter

    Returns 0 for t <= 0 or eta <= 0.
    """
    if t <= 0 or eta <= 0:
        return 0.0
    return 1.0 - math.exp(-((t / eta) ** beta))


def hazard_rate(t: float, eta: float, beta: float) -> float:
    """Instantaneous failure rate h(t) = (beta/eta) * (t/eta)^(beta-1). 0 for t <= 0 or eta <= 0."""
    if t <= 0 or eta <= 0:
        return 0.0
    return (beta / eta) * (t / eta) ** (beta - 1)


def calculate_mtbf(eta: float, beta: float) -> float:
    """
    Mean time between failures eta * Gamma(1 + 1/beta).

    Gamma uses Stirling's approximation sqrt(2*pi/z) * (z/e)^z: good enough for
    reporting, not for certification-grade reliability figures.
    """
    z = 1.0 + 1.0 / beta
    gamma = math.sqrt(2.0 * math.pi / z) * (z / math.e) ** z
    return eta * gamma
