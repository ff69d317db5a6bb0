"""Full-sample OLS fit shared by every candidate threshold.

Under the null of no threshold the model is estimated once on the whole
sample. The inverse cross-product matrix, the residual scores ``x_i e_i``
and their outer-product sum (the White "meat" matrix) are the building
blocks of the robust statistic at every candidate.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

import numpy as np

from thresholds.exceptions import SingularDesignError

if TYPE_CHECKING:
    from numpy.typing import ArrayLike, NDArray


@dataclass
class BaselineFit:
    """Restricted (no-threshold) OLS fit.

    Attributes
    ----------
    exog : NDArray
        Regressor matrix (n_obs, k), intercept included.
    xtx_inv : NDArray
        Inverse cross-product matrix (X'X)^{-1}, shape (k, k).
    params : NDArray
        OLS coefficients (k,).
    resid : NDArray
        Residuals e = y - X beta (n_obs,).
    scores : NDArray
        Row-wise products x_i * e_i, shape (n_obs, k).
    score_outer : NDArray
        Sum of outer products of the scores, shape (k, k).
    """

    exog: NDArray[np.floating[Any]]
    xtx_inv: NDArray[np.floating[Any]]
    params: NDArray[np.floating[Any]]
    resid: NDArray[np.floating[Any]]
    scores: NDArray[np.floating[Any]]
    score_outer: NDArray[np.floating[Any]]

    @classmethod
    def from_sample(cls, endog: ArrayLike, exog: ArrayLike) -> BaselineFit:
        """Fit OLS through the normal equations.

        Parameters
        ----------
        endog : ArrayLike
            Dependent variable (n_obs,).
        exog : ArrayLike
            Regressor matrix (n_obs, k), intercept included.

        Returns
        -------
        BaselineFit
            The fitted baseline.

        Raises
        ------
        SingularDesignError
            If X'X is rank deficient (collinear regressors).
        """
        y = np.asarray(endog, dtype=np.float64)
        x = np.asarray(exog, dtype=np.float64)
        k = x.shape[1]

        xtx = x.T @ x
        if len(y) <= k or np.linalg.matrix_rank(xtx) < k:
            raise SingularDesignError(
                f"Regressor cross-product matrix is singular (k={k}, n={len(y)}); "
                "check for collinear regressors"
            )
        xtx_inv = np.linalg.inv(xtx)
        params = xtx_inv @ (x.T @ y)
        resid = y - x @ params
        scores = x * resid[:, None]

        return cls(
            exog=x,
            xtx_inv=xtx_inv,
            params=params,
            resid=resid,
            scores=scores,
            score_outer=scores.T @ scores,
        )

    @property
    def nobs(self) -> int:
        """Number of observations."""
        return self.exog.shape[0]

    @property
    def k(self) -> int:
        """Number of regressors, intercept included."""
        return self.exog.shape[1]

    def residualize(
        self, endog: NDArray[np.floating[Any]]
    ) -> NDArray[np.floating[Any]]:
        """Residuals of ``endog`` regressed on the fixed regressors."""
        return endog - self.exog @ (self.xtx_inv @ (self.exog.T @ endog))

    def scores_for(
        self, endog: NDArray[np.floating[Any]]
    ) -> tuple[NDArray[np.floating[Any]], NDArray[np.floating[Any]]]:
        """Scores and their outer-product sum for a pseudo dependent variable.

        Returns
        -------
        tuple[NDArray, NDArray]
            ``x_i * e_i`` rows (n_obs, k) and their outer-product sum (k, k).
        """
        scores = self.exog * self.residualize(endog)[:, None]
        return scores, scores.T @ scores
