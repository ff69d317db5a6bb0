"""thresholds: Testing for an unknown threshold in linear regression.

Computes a heteroskedasticity-robust LM test of the linear model against
a threshold alternative with unknown threshold, with a fixed-regressor
wild bootstrap p-value.

Example
-------
>>> import numpy as np
>>> import thresholds as th
>>>
>>> rng = np.random.default_rng(42)
>>> n = 200
>>> q = rng.uniform(size=n)
>>> x = rng.standard_normal(n)
>>> y = 1 + 0.5 * x + (q > 0.6) * (1 + x) + rng.standard_normal(n) * 0.5
>>>
>>> test = th.HeteroskedasticThresholdTest(y, x, q)
>>> results = test.fit(trim=0.15, replications=1000, seed=0)
>>> print(f"gamma = {results.threshold:.3f}, p = {results.p_value:.3f}")
>>> print(results.summary())
"""

from thresholds._version import __version__
from thresholds.api import (
    BaselineFit,
    BootstrapDistribution,
    BootstrapMethod,
    CandidateGrid,
    ConfigurationError,
    DegenerateCandidateWarning,
    HeteroskedasticThresholdTest,
    InverseCache,
    SingularDesignError,
    StatisticEngine,
    StatisticSequence,
    ThresholdError,
    ThresholdSample,
    ThresholdTestBase,
    ThresholdTestResults,
    ThresholdTestResultsBase,
    ThresholdWarning,
    fixed_regressor_bootstrap,
    plot_lm_sequence,
    prepare_sample,
    run_threshold_test,
    select_columns,
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
    "__version__",
    "fixed_regressor_bootstrap",
    "plot_lm_sequence",
    "prepare_sample",
    "run_threshold_test",
    "select_columns",
]
