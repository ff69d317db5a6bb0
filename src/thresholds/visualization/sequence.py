"""Visualization of the LM statistic sequence.

Plots the robust LM statistic against the candidate thresholds together
with the bootstrap critical value. Linearity is rejected where the
sequence exceeds the critical line.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import numpy as np

from thresholds.visualization.style import THRESHOLD_COLORS, use_style

if TYPE_CHECKING:
    from matplotlib.axes import Axes
    from matplotlib.figure import Figure
    from numpy.typing import ArrayLike

    from thresholds.tests.threshold import ThresholdTestResults


def plot_lm_sequence(
    results: ThresholdTestResults | ArrayLike,
    candidates: ArrayLike | None = None,
    critical_value: float | None = None,
    confidence: float = 0.95,
    ax: Axes | None = None,
    title: str | None = None,
    xlabel: str = "gamma",
    ylabel: str = "LMn(gamma)",
    statistic_color: str | None = None,
    critical_color: str | None = None,
    show_estimate: bool = True,
    estimate_color: str | None = None,
    figsize: tuple[float, float] = (10, 5),
) -> tuple[Figure, Axes]:
    """Plot the LM statistic sequence over the candidate thresholds.

    Parameters
    ----------
    results : ThresholdTestResults | ArrayLike
        Results of a threshold test, or the statistic sequence itself.
    candidates : ArrayLike | None
        Candidate threshold values. Required when ``results`` is a plain
        sequence.
    critical_value : float | None
        Critical value drawn as a horizontal line. Taken from the results
        when not given; omitted when neither is available.
    confidence : float
        Confidence level used in the legend. Taken from the results when
        available.
    ax : Axes | None
        Axes to plot on. If None, creates a new figure.
    title : str | None
        Plot title. Defaults to "LM test for threshold".
    xlabel : str
        X-axis label. Default is "gamma".
    ylabel : str
        Y-axis label. Default is "LMn(gamma)".
    statistic_color : str | None
        Color for the sequence. Defaults to THRESHOLD_COLORS["blue"].
    critical_color : str | None
        Color for the critical line. Defaults to THRESHOLD_COLORS["red"].
    show_estimate : bool
        Whether to mark the threshold estimate with a vertical line.
    estimate_color : str | None
        Color for the estimate marker. Defaults to THRESHOLD_COLORS["grey"].
    figsize : tuple[float, float]
        Figure size. Default is (10, 5).

    Returns
    -------
    tuple[Figure, Axes]
        The matplotlib figure and axes.

    Raises
    ------
    ValueError
        If the candidates are missing or do not match the sequence.
    """
    import matplotlib.pyplot as plt

    from thresholds.tests.threshold import ThresholdTestResults

    if statistic_color is None:
        statistic_color = THRESHOLD_COLORS["blue"]
    if critical_color is None:
        critical_color = THRESHOLD_COLORS["red"]
    if estimate_color is None:
        estimate_color = THRESHOLD_COLORS["grey"]

    estimate = None
    if isinstance(results, ThresholdTestResults):
        sequence = np.asarray(results.statistic_sequence)
        if candidates is None:
            candidates = results.candidates
        if critical_value is None:
            critical_value = results.critical_value
        confidence = results.confidence
        estimate = results.threshold
    else:
        sequence = np.asarray(results, dtype=np.float64)

    if candidates is None:
        raise ValueError("candidates are required when plotting a raw sequence")
    grid = np.asarray(candidates, dtype=np.float64)
    if grid.shape != sequence.shape:
        raise ValueError(
            f"candidates ({len(grid)}) and sequence ({len(sequence)}) differ in length"
        )

    with use_style():
        if ax is None:
            fig, ax = plt.subplots(figsize=figsize)
        else:
            fig = ax.get_figure()  # type: ignore[union-attr]

        ax.plot(grid, sequence, color=statistic_color, linewidth=2.0, label=ylabel)

        if critical_value is not None and np.isfinite(critical_value):
            ax.axhline(
                y=critical_value,
                color=critical_color,
                linewidth=1.0,
                linestyle="--",
                label=f"{confidence * 100:g}% Critical",
            )

        if show_estimate and estimate is not None:
            ax.axvline(
                x=estimate,
                color=estimate_color,
                linewidth=0.8,
                linestyle=":",
                alpha=0.7,
            )

        ax.set_title(title or "LM test for threshold")
        ax.set_xlabel(xlabel)
        ax.set_ylabel(ylabel)
        ax.legend(loc="lower right", frameon=False)

    return fig, ax  # type: ignore[return-value]
