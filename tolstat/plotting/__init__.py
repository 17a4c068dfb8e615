"""
Plotting utilities for interval results.

All plotting functions accept precomputed results and do not perform any
statistics.

Modules:
    interval_plots:
        One-axis figure with the sample points and horizontal bars for the
        confidence interval, tolerance interval and TOST bounds.

    style:
        Shared rcParams, colors, row positions and multi-format saving.
"""

from .interval_plots import plot_intervals
from .style import save_figure, set_global_style

__all__ = ["plot_intervals", "save_figure", "set_global_style"]
