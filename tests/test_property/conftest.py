"""Hypothesis strategies for property-based testing of thresholds.

This module provides reusable data generators for property tests using
the Hypothesis library.
"""

from __future__ import annotations

from typing import Any

import numpy as np
from hypothesis import strategies as st
from numpy.typing import NDArray


@st.composite
def threshold_data(
    draw: st.DrawFn,
    min_n: int = 40,
    max_n: int = 120,
    max_k: int = 2,
    ties: bool = False,
) -> tuple[
    NDArray[np.floating[Any]],
    NDArray[np.floating[Any]] | None,
    NDArray[np.floating[Any]],
]:
    """Generate (y, x, q) for a threshold regression.

    Parameters
    ----------
    draw : st.DrawFn
        Hypothesis draw function.
    min_n : int
        Minimum number of observations.
    max_n : int
        Maximum number of observations.
    max_k : int
        Maximum number of regressors (excluding the intercept).
    ties : bool
        Whether the threshold variable is drawn from a coarse grid with
        repeated values.

    Returns
    -------
    tuple[NDArray, NDArray | None, NDArray]
        y (n,), x (n, k) or None when k is zero, and q (n,).
    """
    n = draw(st.integers(min_value=min_n, max_value=max_n))
    k = draw(st.integers(min_value=0, max_value=max_k))

    # Seeded generator so that the data always have variation
    seed = draw(st.integers(min_value=0, max_value=2**31 - 1))
    rng = np.random.default_rng(seed)

    if ties:
        q = rng.integers(0, 20, size=n).astype(np.float64)
    else:
        q = rng.uniform(size=n)
    x = rng.standard_normal((n, k)) if k else None

    shift = draw(st.floats(min_value=0.0, max_value=2.0))
    gamma = draw(st.floats(min_value=0.3, max_value=0.7))
    noise_scale = draw(st.floats(min_value=0.5, max_value=2.0))

    y = rng.standard_normal(n) * noise_scale
    if x is not None:
        y = y + x @ rng.uniform(-2, 2, size=k)
    y = y + shift * (q > np.quantile(q, gamma))

    return y, x, q
