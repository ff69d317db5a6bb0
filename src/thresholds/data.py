"""Sample preparation for threshold testing.

This module turns raw data into the sorted design used by the threshold
test: observations ordered by the threshold variable, an intercept
prepended to the regressors, and the trimmed grid of candidate
thresholds expressed as cumulative observation counts.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

import numpy as np
import pandas as pd

from thresholds.exceptions import ConfigurationError

if TYPE_CHECKING:
    from collections.abc import Hashable, Sequence

    from numpy.typing import ArrayLike, NDArray


@dataclass(frozen=True)
class CandidateGrid:
    """Trimmed grid of candidate thresholds.

    Attributes
    ----------
    values : NDArray
        Distinct threshold values kept after trimming, ascending.
    counts : NDArray
        Number of observations with ``q <= values[r]``, for each candidate.
        Strictly increasing.
    nobs : int
        Total number of observations.
    trim : float
        Trimming fraction used to build the grid.
    """

    values: NDArray[np.floating[Any]]
    counts: NDArray[np.intp]
    nobs: int
    trim: float

    def __len__(self) -> int:
        return len(self.values)

    @property
    def bounds(self) -> tuple[int, int]:
        """Admissible cumulative counts, ``floor(n*trim)`` to ``floor(n*(1-trim))``."""
        return trim_bounds(self.nobs, self.trim)


@dataclass
class ThresholdSample:
    """Observations sorted by the threshold variable.

    Attributes
    ----------
    endog : NDArray
        Dependent variable, sorted by ``threshold``.
    exog : NDArray
        Regressors with a leading intercept column, sorted by ``threshold``.
    threshold : NDArray
        Threshold variable, ascending.
    order : NDArray
        Permutation that sorts the original observations.
    grid : CandidateGrid
        Trimmed candidate grid.
    exog_names : list[str]
        Names of the columns of ``exog``.
    """

    endog: NDArray[np.floating[Any]]
    exog: NDArray[np.floating[Any]]
    threshold: NDArray[np.floating[Any]]
    order: NDArray[np.intp]
    grid: CandidateGrid
    exog_names: list[str] = field(default_factory=list)

    @property
    def nobs(self) -> int:
        """Number of observations."""
        return len(self.endog)

    @property
    def k(self) -> int:
        """Number of regressors, intercept included."""
        return self.exog.shape[1]


def validate_trim(trim: float) -> float:
    """Check that the trimming fraction lies in the open interval (0, 0.5)."""
    try:
        trim = float(trim)
    except (TypeError, ValueError) as exc:
        raise ConfigurationError(f"trim must be a number, got {trim!r}") from exc
    if not 0.0 < trim < 0.5:
        raise ConfigurationError(f"trim must be in (0, 0.5), got {trim}")
    return trim


def trim_bounds(nobs: int, trim: float) -> tuple[int, int]:
    """Lower and upper admissible cumulative counts for a trimming fraction."""
    return int(np.floor(nobs * trim)), int(np.floor(nobs * (1.0 - trim)))


def build_grid(threshold: NDArray[np.floating[Any]], trim: float) -> CandidateGrid:
    """Build the trimmed candidate grid from a sorted threshold variable.

    Parameters
    ----------
    threshold : NDArray
        Threshold variable sorted ascending.
    trim : float
        Fraction of the sample trimmed from each end.

    Returns
    -------
    CandidateGrid
        Distinct values whose cumulative count lies within the trimming
        bounds.

    Raises
    ------
    ConfigurationError
        If no candidate survives the trimming.
    """
    trim = validate_trim(trim)
    n = len(threshold)
    values, group_sizes = np.unique(threshold, return_counts=True)
    counts = np.cumsum(group_sizes)

    lower, upper = trim_bounds(n, trim)
    keep = (counts >= lower) & (counts <= upper)
    if not np.any(keep):
        raise ConfigurationError(
            f"No candidate thresholds remain after trimming {trim} from each end "
            f"of {n} observations (admissible counts [{lower}, {upper}], "
            f"{len(values)} distinct threshold values)"
        )
    return CandidateGrid(
        values=values[keep].astype(np.float64),
        counts=counts[keep].astype(np.intp),
        nobs=n,
        trim=trim,
    )


def prepare_sample(
    endog: ArrayLike,
    exog: ArrayLike | None,
    threshold: ArrayLike,
    trim: float,
    exog_names: Sequence[str] | None = None,
) -> ThresholdSample:
    """Sort observations by the threshold variable and build the design.

    Parameters
    ----------
    endog : ArrayLike
        Dependent variable (n_obs,).
    exog : ArrayLike | None
        Regressors (n_obs, p) without an intercept column. None for a
        mean-only model.
    threshold : ArrayLike
        Threshold variable (n_obs,).
    trim : float
        Fraction of the sample trimmed from each end of the threshold
        distribution.
    exog_names : Sequence[str] | None
        Names for the columns of ``exog``.

    Returns
    -------
    ThresholdSample
        Sorted sample with the intercept prepended and the candidate grid.

    Raises
    ------
    ConfigurationError
        On invalid trimming, constant regressor columns, non-finite
        values, or an empty candidate grid.
    """
    trim = validate_trim(trim)
    y = np.asarray(endog, dtype=np.float64)
    q = np.asarray(threshold, dtype=np.float64)
    n = len(y)

    if exog is None:
        x = np.empty((n, 0))
    else:
        x = np.asarray(exog, dtype=np.float64)
        if x.ndim == 1:
            x = x.reshape(-1, 1)

    if len(q) != n or len(x) != n:
        raise ConfigurationError("endog, exog and threshold must have the same length")
    for name, arr in (("endog", y), ("exog", x), ("threshold", q)):
        if not np.all(np.isfinite(arr)):
            raise ConfigurationError(f"{name} contains missing or non-finite values")

    if x.shape[1] > 0:
        constant = np.ptp(x, axis=0) == 0
        if np.any(constant):
            cols = np.flatnonzero(constant).tolist()
            raise ConfigurationError(
                f"exog columns {cols} are constant; do not include an intercept, "
                "one is added automatically"
            )

    if exog_names is None:
        names = [f"x{i + 1}" for i in range(x.shape[1])]
    else:
        names = [str(name) for name in exog_names]
        if len(names) != x.shape[1]:
            raise ConfigurationError(
                f"Expected {x.shape[1]} exog names, got {len(names)}"
            )

    # Stable sort: tied threshold values keep their input order
    order = np.argsort(q, kind="mergesort")
    q_sorted = q[order]
    design = np.column_stack([np.ones(n), x[order]])

    return ThresholdSample(
        endog=y[order],
        exog=design,
        threshold=q_sorted,
        order=order,
        grid=build_grid(q_sorted, trim),
        exog_names=["const", *names],
    )


def _resolve_column(frame: pd.DataFrame, selector: Hashable) -> int:
    """Position of a column given by label, or by integer position."""
    if selector in frame.columns:
        loc = frame.columns.get_loc(selector)
        if not isinstance(loc, int):
            raise ConfigurationError(f"Column label {selector!r} is not unique")
        return loc
    if isinstance(selector, (int, np.integer)) and not isinstance(selector, bool):
        pos = int(selector)
        if 0 <= pos < frame.shape[1]:
            return pos
    raise ConfigurationError(
        f"Column {selector!r} not found in data with {frame.shape[1]} columns"
    )


def select_columns(
    data: ArrayLike | pd.DataFrame,
    y_index: Hashable,
    x_indices: Sequence[Hashable],
    q_index: Hashable,
) -> tuple[
    NDArray[np.floating[Any]],
    NDArray[np.floating[Any]] | None,
    NDArray[np.floating[Any]],
    list[str],
]:
    """Extract the dependent, regressor and threshold columns from a data set.

    Parameters
    ----------
    data : ArrayLike | pd.DataFrame
        Data matrix (n_obs, n_columns). DataFrame columns may be selected
        by label or by position; arrays by position.
    y_index : Hashable
        Column of the dependent variable.
    x_indices : Sequence[Hashable]
        Columns of the regressors, excluding any intercept.
    q_index : Hashable
        Column of the threshold variable.

    Returns
    -------
    tuple
        ``(endog, exog, threshold, exog_names)``; ``exog`` is None when
        ``x_indices`` is empty.

    Raises
    ------
    ConfigurationError
        If selectors overlap, repeat, or fall outside the data.
    """
    if isinstance(data, pd.DataFrame):
        frame = data
    else:
        arr = np.asarray(data)
        if arr.ndim != 2:
            raise ConfigurationError(f"data must be 2-dimensional, got {arr.ndim}")
        frame = pd.DataFrame(arr)

    if isinstance(x_indices, (str, int, np.integer)):
        x_indices = [x_indices]
    y_pos = _resolve_column(frame, y_index)
    q_pos = _resolve_column(frame, q_index)
    x_pos = [_resolve_column(frame, col) for col in x_indices]

    if q_pos == y_pos:
        raise ConfigurationError("q_index must differ from y_index")
    if q_pos in x_pos:
        raise ConfigurationError("q_index must not appear in x_indices")
    if y_pos in x_pos:
        raise ConfigurationError("y_index must not appear in x_indices")
    if len(set(x_pos)) != len(x_pos):
        raise ConfigurationError("x_indices contains duplicate columns")

    try:
        values = frame.iloc[:, [y_pos, q_pos, *x_pos]].to_numpy(dtype=np.float64)
    except (TypeError, ValueError) as exc:
        raise ConfigurationError("Selected columns must be numeric") from exc

    names = [str(frame.columns[pos]) for pos in x_pos]
    exog = values[:, 2:] if x_pos else None
    return values[:, 0], exog, values[:, 1], names
