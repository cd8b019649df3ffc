"""Distance matrix heatmap with unreachable pairs masked."""

from pathlib import Path

import matplotlib.pyplot as plt
import numpy as np
import seaborn as sns

from apsp.graph.matrix import Graph
from apsp.visualization.style import DISTANCE_CMAP, UNREACHABLE_COLOR, apply_style, save_figure

# Above this size cell annotations become unreadable
_ANNOTATE_MAX_VERTICES = 15


def plot_distance_heatmap(graph: Graph | None, title: str = "Shortest distances") -> plt.Figure:
    """Plot the graph's current distance matrix.

    Unreachable cells are masked and show the gray background. An invalid
    graph yields a placeholder figure rather than an error.
    """
    if graph is None or not graph.initialized:
        fig, ax = plt.subplots(figsize=(6, 5))
        ax.text(
            0.5, 0.5, "No distance data available",
            transform=ax.transAxes, ha="center", va="center",
            fontsize=12, color="gray",
        )
        ax.set_axis_off()
        ax.set_title(title)
        return fig

    matrix = graph.distance
    n = graph.vertex_count
    mask = ~np.isfinite(matrix)
    side = min(12.0, max(5.0, n * 0.4))

    fig, ax = plt.subplots(figsize=(side + 1, side))
    ax.set_facecolor(UNREACHABLE_COLOR)
    sns.heatmap(
        np.where(mask, np.nan, matrix),
        mask=mask,
        annot=n <= _ANNOTATE_MAX_VERTICES,
        fmt=".1f",
        cmap=DISTANCE_CMAP,
        cbar_kws={"label": "Distance"},
        square=True,
        xticklabels=n <= 50,
        yticklabels=n <= 50,
        ax=ax,
    )
    ax.set_xlabel("Destination vertex")
    ax.set_ylabel("Source vertex")
    n_unreachable = int(mask.sum())
    ax.set_title(f"{title} ({n} vertices, {n_unreachable} unreachable pairs)")

    fig.tight_layout()
    return fig


def render_distance_heatmap(graph: Graph, output_dir: str | Path) -> tuple[Path, Path]:
    """Style, plot and save the heatmap as distance_heatmap.{png,svg}."""
    apply_style()
    fig = plot_distance_heatmap(graph)
    return save_figure(fig, Path(output_dir), "distance_heatmap")
