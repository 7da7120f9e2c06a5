"""
Polynomial least-squares fit via normal equations.

The (degree+1) x (degree+1) system A c = b, with A[i][j] = sum(x^(i+j)) and
b[i] = sum(y * x^i), is solved by Gaussian elimination with partial pivoting.
"""

import logging
from typing import Optional, Sequence

import numpy as np

from rulops.core.errors import NumericalSingularity
from rulops.core.types import PolynomialResult

logger = logging.getLogger(__name__)

# Pivots at or below this fraction of the largest matrix entry count as zero
_PIVOT_RTOL = 1e-12


def _normal_equations(x: np.ndarray, y: np.ndarray, degree: int) -> tuple:
    """A (degree+1, degree+1) and b (degree+1,) of the least-squares problem."""
    powers = np.vander(x, 2 * degree + 1, increasing=True)
    sums = powers.sum(axis=0)
    A = np.empty((degree + 1, degree + 1))
    for i in range(degree + 1):
        A[i, :] = sums[i:i + degree + 1]
    b = powers[:, : degree + 1].T @ y
    return A, b


def solve_linear_system(A: Sequence[Sequence[float]], b: Sequence[float]) -> np.ndarray:
    """
    Solve A x = b by Gaussian elimination with partial pivoting.

    Raises:
        NumericalSingularity: if A is singular (zero pivot after row exchange).
    """
    M = np.asarray(A, dtype=float)
    rhs = np.asarray(b, dtype=float)
    n = M.shape[0]
    if M.shape != (n, n) or rhs.shape != (n,):
        raise ValueError(f"Incompatible shapes: A {M.shape}, b {rhs.shape}")
    aug = np.hstack([M, rhs.reshape(-1, 1)])
    scale = float(np.max(np.abs(M))) if M.size else 0.0
    tol = _PIVOT_RTOL * scale

    # Forward elimination
    for i in range(n):
        pivot_row = i + int(np.argmax(np.abs(aug[i:, i])))
        if pivot_row != i:
            aug[[i, pivot_row]] = aug[[pivot_row, i]]
        pivot = aug[i, i]
        if scale == 0.0 or abs(pivot) <= tol:
            logger.warning("Singular normal-equations matrix: zero pivot in column %d of %d", i, n)
            raise NumericalSingularity(f"Singular matrix: zero pivot in column {i}", pivot_index=i)
        factors = aug[i + 1:, i] / pivot
        aug[i + 1:, i:] -= np.outer(factors, aug[i, i:])

    # Back substitution
    x = np.zeros(n)
    for i in range(n - 1, -1, -1):
        x[i] = (aug[i, n] - aug[i, i + 1:n] @ x[i + 1:]) / aug[i, i]
    return x


def polynomial_regression(
    y: Sequence[float],
    degree: int = 2,
    x: Optional[Sequence[float]] = None,
) -> PolynomialResult:
    """
    Fit y = c0 + c1*x + ... + c_degree*x^degree.

    Args:
        y: dependent values
        degree: polynomial degree (default 2, quadratic degradation)
        x: independent values; defaults to 0, 1, ..., n-1

    Raises:
        NumericalSingularity: too few distinct x values for the requested degree.
    """
    if degree < 0:
        raise ValueError(f"degree must be >= 0, got {degree}")
    y_arr = np.asarray(y, dtype=float)
    n = y_arr.size
    if x is not None and len(x) != n:
        raise ValueError(f"x and y must have the same length ({len(x)} != {n})")
    x_arr = np.arange(n, dtype=float) if x is None else np.asarray(x, dtype=float)

    A, b = _normal_equations(x_arr, y_arr, degree)
    coefficients = solve_linear_system(A, b)
    predictions = np.vander(x_arr, degree + 1, increasing=True) @ coefficients
    return PolynomialResult(
        coefficients=tuple(float(c) for c in coefficients),
        predictions=tuple(float(p) for p in predictions),
    )
