"""Figures for distance matrices."""

from apsp.visualization.heatmap import plot_distance_heatmap, render_distance_heatmap
from apsp.visualization.style import apply_style, save_figure

__all__ = [
    "apply_style",
    "plot_distance_heatmap",
    "render_distance_heatmap",
    "save_figure",
]
