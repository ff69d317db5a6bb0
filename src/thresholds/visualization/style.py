"""Plot styling for the thresholds package.

Provides the package palette and a matplotlib rcParams set applied to
every figure the package draws.
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Iterator

THRESHOLD_COLORS: dict[str, str] = {
    "blue": "#006BA2",
    "red": "#DB444B",
    "teal": "#3EBCD2",
    "green": "#379A8B",
    "gold": "#EBB434",
    "grey": "#758D99",
    "mauve": "#9A607F",
    "light_grey": "#D9D9D9",
    "near_black": "#0C0C0C",
}

THRESHOLD_COLOR_CYCLE: list[str] = [
    THRESHOLD_COLORS["blue"],
    THRESHOLD_COLORS["red"],
    THRESHOLD_COLORS["teal"],
    THRESHOLD_COLORS["green"],
    THRESHOLD_COLORS["gold"],
    THRESHOLD_COLORS["grey"],
    THRESHOLD_COLORS["mauve"],
]


def get_style() -> dict[str, Any]:
    """Return the package rcParams as a dictionary."""
    from matplotlib import cycler

    return {
        "figure.figsize": (10, 5),
        "figure.dpi": 150,
        "axes.spines.top": False,
        "axes.spines.right": False,
        "axes.spines.left": True,
        "axes.spines.bottom": True,
        "axes.grid": True,
        "axes.grid.axis": "y",
        "axes.prop_cycle": cycler(color=THRESHOLD_COLOR_CYCLE),
        "grid.color": THRESHOLD_COLORS["light_grey"],
        "grid.linewidth": 0.6,
        "font.family": "sans-serif",
        "font.size": 10,
        "xtick.major.size": 0,
        "ytick.major.size": 0,
        "legend.frameon": False,
        "savefig.dpi": 300,
        "savefig.bbox": "tight",
    }


def set_style() -> None:
    """Apply the package style globally."""
    import matplotlib as mpl

    mpl.rcParams.update(get_style())


@contextmanager
def use_style() -> Iterator[None]:
    """Apply the package style within a ``with`` block only."""
    import matplotlib as mpl

    with mpl.rc_context(get_style()):
        yield
