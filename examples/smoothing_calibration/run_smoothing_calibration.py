"""
Example: calibrate Holt smoothing parameters on a health history and compare
a linear, quadratic and Holt forecast of the next 14 days.
"""

import sys
from pathlib import Path

import numpy as np

ROOT = Path(__file__).resolve().parents[2]
sys.path.insert(0, str(ROOT))

from rulops.fitting import confidence_interval, linear_regression, polynomial_regression
from rulops.smoothing import double_exponential_smoothing, optimize_parameters


def main() -> None:
    rng = np.random.default_rng(7)
    days = np.arange(60, dtype=float)
    # Accelerating wear: quadratic decay plus noise
    health = 95.0 - 0.05 * days - 0.004 * days ** 2 + rng.normal(0.0, 0.6, days.size)
    scores = health.tolist()

    best = optimize_parameters(scores)
    print(f"Best alpha={best.alpha}, beta={best.beta}, one-step MSE={best.mse:.4f}")

    lin = linear_regression(scores)
    margin = confidence_interval(scores, lin.predictions, 0.95)
    quad = polynomial_regression(scores, degree=2)
    holt = double_exponential_smoothing(scores, best.alpha, best.beta)
    print(f"Linear: slope={lin.slope:.4f}/day, R^2={lin.r_squared:.3f}, 95% margin={margin:.2f}")
    print("Quadratic coefficients:", ", ".join(f"{c:.5f}" for c in quad.coefficients))

    horizon = 14
    holt_forecast = holt.forecast(horizon)
    print(f"\n{'day':>4} {'linear':>8} {'quadratic':>10} {'holt':>8}")
    for k in range(1, horizon + 1):
        x = days[-1] + k
        print(f"{int(x):4d} {lin.predict(x):8.2f} {quad.predict(x):10.2f} {holt_forecast[k - 1]:8.2f}")


if __name__ == "__main__":
    main()
