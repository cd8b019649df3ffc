"""Figure style for matrix plots and the PNG + SVG writer.

Heatmaps are square and carry per-cell annotations, so the style uses a
plain white theme (no grid lines over the cells) and small tick labels.
"""

import matplotlib
matplotlib.use("Agg")  # Non-interactive backend for headless rendering

from pathlib import Path

import matplotlib.pyplot as plt
import seaborn as sns

DISTANCE_CMAP = "viridis_r"  # short distances dark, long distances light
UNREACHABLE_COLOR = (0.85, 0.85, 0.85)  # light gray behind masked cells

FIGURE_FORMATS = ("png", "svg")

_RC_PARAMS = {
    "figure.dpi": 150,
    "savefig.dpi": 300,
    "font.size": 10,
    "axes.titlesize": 12,
    "axes.labelsize": 11,
    "xtick.labelsize": 8,
    "ytick.labelsize": 8,
    "svg.fonttype": "none",  # keep text editable in SVG output
}


def apply_style() -> None:
    """Apply the project matplotlib/seaborn style. Idempotent."""
    sns.set_theme(style="white")
    plt.rcParams.update(_RC_PARAMS)


def save_figure(fig: plt.Figure, output_dir: Path, name: str) -> tuple[Path, Path]:
    """Write fig as output_dir/name.png and output_dir/name.svg, then close it.

    Args:
        fig: Matplotlib figure to save.
        output_dir: Target directory, created if absent.
        name: Base filename (without extension).

    Returns:
        Tuple of (png_path, svg_path).
    """
    output_dir = Path(output_dir)
    paths = [output_dir / f"{name}.{ext}" for ext in FIGURE_FORMATS]
    try:
        output_dir.mkdir(parents=True, exist_ok=True)
        for path in paths:
            fig.savefig(path, bbox_inches="tight")
    finally:
        plt.close(fig)
    png_path, svg_path = paths
    return png_path, svg_path
