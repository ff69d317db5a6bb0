"""Pytest configuration and fixtures for thresholds tests."""

from __future__ import annotations

from typing import Any

import numpy as np
import pytest
from numpy.typing import NDArray

SimulatedData = tuple[
    NDArray[np.floating[Any]], NDArray[np.floating[Any]], NDArray[np.floating[Any]]
]


def simulate_threshold_data(
    rng: np.random.Generator,
    n: int = 200,
    gamma: float | None = 0.6,
    intercept_shift: float = 1.0,
    slope_shift: float = 1.0,
    noise: float = 0.5,
    heteroskedastic: bool = False,
) -> SimulatedData:
    """Simulate y = 1 + 0.5*x + (q > gamma)*(a + b*x) + e with q ~ U(0, 1).

    With ``gamma=None`` there is no threshold.
    """
    q = rng.uniform(size=n)
    x = rng.standard_normal(n)
    scale = noise * (0.5 + np.abs(x)) if heteroskedastic else noise
    y = 1.0 + 0.5 * x + rng.standard_normal(n) * scale
    if gamma is not None:
        y = y + (q > gamma) * (intercept_shift + slope_shift * x)
    return y, x, q


@pytest.fixture
def rng() -> np.random.Generator:
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def threshold_data(
    rng: np.random.Generator,
) -> tuple[
    NDArray[np.floating[Any]],
    NDArray[np.floating[Any]],
    NDArray[np.floating[Any]],
    float,
]:
    """Regression with a coefficient break at q = 0.6.

    Returns
    -------
    tuple
        y, x, q arrays and the true threshold.
    """
    y, x, q = simulate_threshold_data(rng, gamma=0.6)
    return y, x, q, 0.6


@pytest.fixture
def linear_data(
    rng: np.random.Generator,
) -> SimulatedData:
    """Linear regression without a threshold: y = 1 + 0.5*x + e.

    Returns
    -------
    tuple
        y, x, q arrays.
    """
    return simulate_threshold_data(rng, gamma=None)


@pytest.fixture
def heteroskedastic_data(
    rng: np.random.Generator,
) -> SimulatedData:
    """Linear regression without a threshold and with variance rising in |x|.

    Returns
    -------
    tuple
        y, x, q arrays.
    """
    return simulate_threshold_data(rng, gamma=None, heteroskedastic=True)


@pytest.fixture
def partially_degenerate_data(
    rng: np.random.Generator,
) -> SimulatedData:
    """Regressors containing a column that is zero below the 70th percentile of q.

    Every candidate with at most 70 observations has a zero row in its
    covariance matrix; later candidates are full rank.

    Returns
    -------
    tuple
        y (100,), X (100, 2), q (100,) arrays.
    """
    n = 100
    q = rng.permutation(np.arange(n, dtype=float))
    z = rng.standard_normal(n)
    d = (q >= 70) * rng.standard_normal(n)
    y = 1.0 + z + d + rng.standard_normal(n)
    return y, np.column_stack([z, d]), q
