"""Public API for thresholds package.

This module provides a clean namespace for the most commonly used
classes and functions in the thresholds package, and the one-call
``run_threshold_test`` entry point.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

# Data preparation
from thresholds.data import (
    CandidateGrid,
    ThresholdSample,
    prepare_sample,
    select_columns,
)

# Errors and warnings
from thresholds.exceptions import (
    ConfigurationError,
    DegenerateCandidateWarning,
    SingularDesignError,
    ThresholdError,
    ThresholdWarning,
)

# Models
from thresholds.models import BaselineFit

# Tests
from thresholds.tests import (
    BootstrapDistribution,
    BootstrapMethod,
    HeteroskedasticThresholdTest,
    InverseCache,
    StatisticEngine,
    StatisticSequence,
    ThresholdTestBase,
    ThresholdTestResults,
    ThresholdTestResultsBase,
    fixed_regressor_bootstrap,
)

# Visualization
from thresholds.visualization import plot_lm_sequence

if TYPE_CHECKING:
    from collections.abc import Hashable, Sequence
    from typing import Any

    import numpy as np
    import pandas as pd
    from numpy.typing import ArrayLike, NDArray


def run_threshold_test(
    data: ArrayLike | pd.DataFrame,
    y_index: Hashable,
    x_indices: Sequence[Hashable],
    q_index: Hashable,
    trim_fraction: float,
    replications: int,
    *,
    method: BootstrapMethod = "recompute",
    seed: int | np.random.SeedSequence | None = None,
    n_jobs: int = 1,
) -> tuple[float, float, float, NDArray[np.floating[Any]]]:
    """Test for a threshold and return the core outputs.

    Parameters
    ----------
    data : ArrayLike | pd.DataFrame
        Data matrix (n_obs, n_columns) without missing values.
    y_index : Hashable
        Column of the dependent variable.
    x_indices : Sequence[Hashable]
        Columns of the regressors. Do not include an intercept; one is
        added automatically.
    q_index : Hashable
        Column of the threshold variable.
    trim_fraction : float
        Fraction trimmed from each end of the threshold distribution,
        in (0, 0.5).
    replications : int
        Number of bootstrap replications (1000 or more recommended).
    method : {"recompute", "precompute"}
        Bootstrap discipline. Default is "recompute".
    seed : int | SeedSequence | None
        Seed of the bootstrap random streams.
    n_jobs : int
        Number of threads running bootstrap replications.

    Returns
    -------
    tuple
        ``(test_statistic, p_value, threshold_estimate, statistic_sequence)``.

    Examples
    --------
    >>> import numpy as np
    >>> from thresholds import run_threshold_test
    >>> rng = np.random.default_rng(0)
    >>> q = rng.uniform(size=200)
    >>> x = rng.standard_normal(200)
    >>> y = 1 + x + (q > 0.6) * (1 + x) + rng.standard_normal(200) * 0.5
    >>> data = np.column_stack([y, x, q])
    >>> stat, pval, gamma, seq = run_threshold_test(data, 0, [1], 2, 0.15, 1000)
    """
    test = HeteroskedasticThresholdTest.from_data(data, y_index, x_indices, q_index)
    results = test.fit(
        trim=trim_fraction,
        replications=replications,
        method=method,
        seed=seed,
        n_jobs=n_jobs,
    )
    return (
        results.statistic,
        results.p_value,
        results.threshold,
        results.statistic_sequence,
    )


__all__ = [
    "BaselineFit",
    "BootstrapDistribution",
    "BootstrapMethod",
    "CandidateGrid",
    "ConfigurationError",
    "DegenerateCandidateWarning",
    "HeteroskedasticThresholdTest",
    "InverseCache",
    "SingularDesignError",
    "StatisticEngine",
    "StatisticSequence",
    "ThresholdError",
    "ThresholdSample",
    "ThresholdTestBase",
    "ThresholdTestResults",
    "ThresholdTestResultsBase",
    "ThresholdWarning",
    "fixed_regressor_bootstrap",
    "plot_lm_sequence",
    "prepare_sample",
    "run_threshold_test",
    "select_columns",
]
