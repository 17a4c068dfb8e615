"""Sample points with CI, TI and TOST bars on a shared value axis."""

from __future__ import annotations

import os
from typing import Sequence

import matplotlib.pyplot as plt
import numpy as np

from ..reporting import confidence_percent
from ..schema import AnalysisResult
from .style import (
    DATA_ROW,
    INTERVAL_COLORS,
    INTERVAL_ROWS,
    OUTPUT_FORMATS,
    STYLE,
    sanitize_filename,
    save_figure,
    set_global_style,
)


def plot_intervals(
    result: AnalysisResult,
    output_dir: str = "output",
    filename: str = "intervals",
    formats: Sequence[str] = OUTPUT_FORMATS,
) -> str:
    """Plot the sample and every interval present in ``result``.

    Args:
        result (AnalysisResult): Output of ``analyze_sample``. Only the
            procedures that were run are drawn.
        output_dir (str): Directory for the figure bundle.
        filename (str): Extensionless file stem.
        formats (Sequence[str]): Extensions to write; PNG is always the
            returned path.

    Returns:
        str: Path of the saved PNG.

    Note:
        Rows, bottom to top: data points, CI, TI, TOST. The TOST bar is
        dashed, purple when equivalent and gray otherwise. The y axis carries
        no meaning and is hidden.
    """
    set_global_style()
    conf = confidence_percent(result.config.alpha)
    sample = np.asarray(result.sample, dtype=float)

    fig, ax = plt.subplots(figsize=STYLE.FIGSIZE_SINGLE)
    ax.scatter(
        sample,
        np.full(sample.shape, DATA_ROW),
        color=INTERVAL_COLORS["data"],
        alpha=STYLE.ALPHA_POINTS,
        s=STYLE.MARKERSIZE**2,
        label="Data",
        zorder=3,
    )

    ci = result.confidence_interval
    if ci is not None:
        y = INTERVAL_ROWS["ci"]
        ax.plot(
            [ci.lower, ci.upper],
            [y, y],
            color=INTERVAL_COLORS["ci"],
            linewidth=STYLE.LINEWIDTH_THICK,
            label=f"{conf}% CI",
        )

    ti = result.tolerance_interval
    if ti is not None:
        y = INTERVAL_ROWS["ti"]
        ax.plot(
            [ti.lower, ti.upper],
            [y, y],
            color=INTERVAL_COLORS["ti"],
            linewidth=STYLE.LINEWIDTH_THICK,
            label=f"{conf}% TI",
        )

    tost = result.tost
    if tost is not None:
        y = INTERVAL_ROWS["tost"]
        color_key = "tost_equivalent" if tost.equivalent else "tost_rejected"
        ax.plot(
            [tost.lower, tost.upper],
            [y, y],
            color=INTERVAL_COLORS[color_key],
            linestyle="--",
            linewidth=STYLE.LINEWIDTH_THICK,
            label="TOST Interval",
        )

    ax.set_title("Data & Intervals")
    ax.set_xlabel("Value")
    ax.get_yaxis().set_visible(False)
    ax.set_ylim(DATA_ROW - 0.1, INTERVAL_ROWS["tost"] + 0.1)
    ax.legend(loc="upper left", bbox_to_anchor=(1.01, 1.0))
    fig.tight_layout()

    base = os.path.join(output_dir, sanitize_filename(filename))
    png_path = save_figure(fig, base, formats=formats)
    plt.close(fig)
    return str(png_path)
