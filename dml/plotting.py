"""
Plotting utilities for column distributions and rescaled vectors.

Functions receive precomputed tables or vectors and only render them; every
statistic shown comes from ``dml.stats``.
"""

from __future__ import annotations

import os
from dataclasses import dataclass

import matplotlib.pyplot as plt
import numpy as np
from matplotlib.ticker import MaxNLocator

from .data_processing import Table
from .stats.descriptive import mean, median

FIGURE_DPI = 300
_STYLE_STATE = {"initialized": False}


@dataclass(frozen=True)
class StyleConfig:
    BASE_FONTSIZE: float = 12.0
    TITLE_FONTSIZE: float = 14.0
    LABEL_FONTSIZE: float = 12.0
    TICK_FONTSIZE: float = 11.0
    LEGEND_FONTSIZE: float = 11.0
    LINEWIDTH: float = 2.0
    LINEWIDTH_THIN: float = 1.2
    MARKERSIZE: float = 6.0
    ALPHA_BARS: float = 0.75
    FIGSIZE_SINGLE: tuple[float, float] = (7.0, 4.2)


STYLE = StyleConfig()

DATA_COLOR = "#004371"
MEAN_COLOR = "#a50f15"
MEDIAN_COLOR = "#4A4A4A"


def apply_global_style(font_scale: float = 1.0) -> None:
    """Apply global Matplotlib rcParams scaled by ``font_scale``."""
    scale = float(font_scale)
    plt.rcParams.update(
        {
            "font.family": "STIXGeneral",
            "font.size": STYLE.BASE_FONTSIZE * scale,
            "axes.titlesize": STYLE.TITLE_FONTSIZE * scale,
            "axes.labelsize": STYLE.LABEL_FONTSIZE * scale,
            "xtick.labelsize": STYLE.TICK_FONTSIZE * scale,
            "ytick.labelsize": STYLE.TICK_FONTSIZE * scale,
            "legend.fontsize": STYLE.LEGEND_FONTSIZE * scale,
            "mathtext.fontset": "stix",
            "axes.linewidth": STYLE.LINEWIDTH_THIN,
            "axes.spines.top": False,
            "axes.spines.right": False,
            "legend.frameon": False,
            "lines.linewidth": STYLE.LINEWIDTH,
            "lines.markersize": STYLE.MARKERSIZE,
            "figure.dpi": 120,
            "savefig.dpi": FIGURE_DPI,
            "savefig.bbox": "tight",
            "savefig.pad_inches": 0.12,
        }
    )


def setup_plot_style():
    """Apply the project plotting style once per process."""
    if not _STYLE_STATE["initialized"]:
        apply_global_style()
        _STYLE_STATE["initialized"] = True


def _slug(label: str) -> str:
    return "".join(ch if ch.isalnum() else "_" for ch in str(label)).strip("_") or "column"


def plot_column_distribution(table: Table, col, output_dir: str = "output", bins: int = 20) -> str:
    """Render a histogram of one column with mean and median guides.

    Args:
        table (Table): Source table.
        col (int | str): Column index or label.
        output_dir (str, optional): Directory for the PNG. Defaults to ``"output"``.
        bins (int, optional): Number of histogram bins. Defaults to ``20``.

    Returns:
        str: Path to the saved PNG file.
    """
    idx = table.column_index(col)
    values = table.column(idx)
    mean_val = mean(table, idx)
    median_val = median(table, idx)
    label = table.columns[idx]

    setup_plot_style()
    os.makedirs(output_dir, exist_ok=True)

    fig, ax = plt.subplots(figsize=STYLE.FIGSIZE_SINGLE)
    ax.hist(values, bins=bins, color=DATA_COLOR, alpha=STYLE.ALPHA_BARS)
    ax.axvline(mean_val, color=MEAN_COLOR, linestyle="--", label=f"Mean = {mean_val:.3f}")
    ax.axvline(median_val, color=MEDIAN_COLOR, linestyle=":", label=f"Median = {median_val:.3f}")
    ax.set_xlabel(label)
    ax.set_ylabel("Count")
    ax.set_title(f"Distribution of {label} (n={table.rows})")
    ax.yaxis.set_major_locator(MaxNLocator(integer=True))
    ax.legend(loc="best")

    png_path = os.path.join(output_dir, f"distribution_{_slug(label)}.png")
    fig.savefig(png_path)
    plt.close(fig)
    return png_path


def plot_scaled_vector(original, scaled, output_dir: str = "output", name: str = "scaled_vector") -> str:
    """Render original against rescaled values for one affine transform.

    Raises:
        ValueError: If the two vectors differ in length.
    """
    x = np.asarray(original, dtype=float)
    y = np.asarray(scaled, dtype=float)
    if x.shape != y.shape:
        raise ValueError(f"original and scaled must have the same shape, got {x.shape} and {y.shape}")

    setup_plot_style()
    os.makedirs(output_dir, exist_ok=True)

    fig, ax = plt.subplots(figsize=STYLE.FIGSIZE_SINGLE)
    ax.scatter(x, y, s=18, color=DATA_COLOR)
    if len(x):
        order = np.argsort(x)
        ax.plot(x[order], y[order], color=MEAN_COLOR, linewidth=STYLE.LINEWIDTH_THIN)
    ax.set_xlabel("Original value")
    ax.set_ylabel("Rescaled value")
    ax.set_title(f"Rescaled vector (n={len(x)})")

    png_path = os.path.join(output_dir, f"{_slug(name)}.png")
    fig.savefig(png_path)
    plt.close(fig)
    return png_path
