"""Visualization utilities for threshold tests."""

from thresholds.visualization.sequence import plot_lm_sequence
from thresholds.visualization.style import (
    THRESHOLD_COLOR_CYCLE,
    THRESHOLD_COLORS,
    get_style,
    set_style,
    use_style,
)

__all__ = [
    "THRESHOLD_COLORS",
    "THRESHOLD_COLOR_CYCLE",
    "get_style",
    "plot_lm_sequence",
    "set_style",
    "use_style",
]
