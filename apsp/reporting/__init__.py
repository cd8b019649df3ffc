"""Human-readable rendering of graphs, execution reports and paths."""

from apsp.reporting.text import (
    format_distances,
    format_execution_report,
    format_graph,
    format_path,
    format_route,
    matrix_lines,
    render_results,
    write_results,
)

__all__ = [
    "format_distances",
    "format_execution_report",
    "format_graph",
    "format_path",
    "format_route",
    "matrix_lines",
    "render_results",
    "write_results",
]
