"""Exception and warning classes for the thresholds package.

Errors split into two families. Problems that make the test impossible to
run at all (bad configuration, a singular design matrix) are raised as
subclasses of :class:`ThresholdError` before any statistic is computed.
Problems confined to individual candidate thresholds are absorbed by the
computation and reported through :class:`DegenerateCandidateWarning`.

Examples
--------
Catch any package error:

>>> from thresholds import ThresholdError
>>> try:
...     results = test.fit(trim=0.7)  # doctest: +SKIP
... except ThresholdError as exc:
...     print(exc)

Silence the per-candidate warning:

>>> import warnings
>>> from thresholds import DegenerateCandidateWarning
>>> warnings.filterwarnings("ignore", category=DegenerateCandidateWarning)
"""

from __future__ import annotations

import numpy as np


class ThresholdError(Exception):
    """Base exception class for all thresholds package errors."""


class ConfigurationError(ThresholdError, ValueError):
    """Raised when the test cannot be configured as requested.

    Common triggers:

    - trimming fraction outside the open interval (0, 0.5)
    - non-positive number of bootstrap replications
    - the threshold column coinciding with the dependent variable or
      with one of the regressors
    - an intercept column passed among the regressors
    - an empty candidate grid after trimming
    """


class SingularDesignError(ThresholdError, np.linalg.LinAlgError):
    """Raised when the full-sample regressor cross-product is not invertible.

    Usually caused by collinear regressors. Also raised when the robust
    covariance matrix is singular at every candidate threshold, in which
    case no statistic can be produced.
    """


class ThresholdWarning(UserWarning):
    """Base warning class for all thresholds package warnings."""


class DegenerateCandidateWarning(ThresholdWarning):
    """Warning raised when candidate thresholds have a singular covariance.

    The statistic at such a candidate is recorded as zero and the
    candidate cannot be selected as the threshold estimate. The run
    itself continues.
    """
