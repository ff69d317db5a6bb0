"""Threshold tests and their computational engines."""

from thresholds.tests.base import ThresholdTestBase, ThresholdTestResultsBase
from thresholds.tests.bootstrap import (
    BootstrapDistribution,
    BootstrapMethod,
    fixed_regressor_bootstrap,
)
from thresholds.tests.statistic import (
    InverseCache,
    StatisticEngine,
    StatisticSequence,
)
from thresholds.tests.threshold import (
    HeteroskedasticThresholdTest,
    ThresholdTestResults,
)

__all__ = [
    "BootstrapDistribution",
    "BootstrapMethod",
    "HeteroskedasticThresholdTest",
    "InverseCache",
    "StatisticEngine",
    "StatisticSequence",
    "ThresholdTestBase",
    "ThresholdTestResults",
    "ThresholdTestResultsBase",
    "fixed_regressor_bootstrap",
]
