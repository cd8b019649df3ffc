"""Plain-text rendering of graphs, execution reports, paths and result files.

Matrix layout: a header of %8d column indices, then one "%4d: " row label
per vertex followed by %8.2f distances, or INF for unreachable entries.
"""

import logging
from pathlib import Path
from typing import Any

import numpy as np
from jinja2 import Environment, FileSystemLoader, select_autoescape

from apsp.engine.paths import get_path
from apsp.engine.types import ExecutionReport
from apsp.graph.matrix import Graph
from apsp.graph.tolerance import UNREACHABLE

log = logging.getLogger(__name__)

# Template directory relative to this file
_TEMPLATE_DIR = Path(__file__).parent / "templates"

INVALID_GRAPH = "Invalid or uninitialized graph"


def _environment() -> Environment:
    return Environment(
        loader=FileSystemLoader(str(_TEMPLATE_DIR)),
        autoescape=select_autoescape(enabled_extensions=("html",)),
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=True,
    )


def format_cell(value: float) -> str:
    if not value < UNREACHABLE:
        return "     INF"
    return f"{value:8.2f}"


def matrix_lines(matrix: np.ndarray) -> list[str]:
    """Header row plus one labelled row per vertex."""
    n = matrix.shape[0]
    lines = ["      " + "".join(f"{j:8d}" for j in range(n))]
    for i in range(n):
        lines.append(f"{i:4d}: " + "".join(format_cell(v) for v in matrix[i]))
    return lines


def format_graph(graph: Graph | None) -> str:
    """Current weights of graph, titled as an adjacency matrix."""
    if graph is None or not graph.initialized:
        return INVALID_GRAPH + "\n"
    lines = [
        f"Graph with {graph.vertex_count} vertices:",
        "Adjacency Matrix (weights):",
        *matrix_lines(graph.distance),
    ]
    return "\n".join(lines) + "\n\n"


def format_distances(graph: Graph | None) -> str:
    """Current distances of graph, titled as the shortest distance matrix."""
    if graph is None or not graph.initialized:
        return INVALID_GRAPH + "\n"
    lines = ["=== Shortest Distance Matrix ===", *matrix_lines(graph.distance)]
    return "\n".join(lines) + "\n\n"


def format_execution_report(report: ExecutionReport) -> str:
    lines = [
        "=== Floyd-Warshall Algorithm Execution Result ===",
        f"Algorithm: {report.algorithm}",
        f"Execution successful: {'Yes' if report.success else 'No'}",
        f"Execution time: {report.elapsed_time:.6f} seconds",
        f"Iterations performed: {report.iterations}",
        f"Negative cycle detected: {'Yes' if report.has_negative_cycle else 'No'}",
    ]
    if report.has_negative_cycle and report.negative_cycle_vertex is not None:
        lines.append(f"Negative cycle location: vertex {report.negative_cycle_vertex}")
    return "\n".join(lines) + "\n\n"


def format_route(path: list[int]) -> str:
    return " -> ".join(str(v) for v in path)


def format_path(graph: Graph | None, start: int, end: int) -> str:
    """Distance and route from start to end, as printed for a -p query."""
    if graph is None or not graph.initialized:
        return "Invalid graph\n"
    if not (graph.contains(start) and graph.contains(end)):
        return "Invalid start or end vertex\n"

    distance = graph.get_edge_weight(start, end)
    head = f"Shortest distance from {start} to {end}: "
    if not graph.tolerance.is_reachable(distance):
        return head + "No path exists\n"

    path = get_path(graph, start, end)
    if path is None:
        return head + f"{distance:.2f}\nPath reconstruction failed\n"
    return head + f"{distance:.2f}\nPath: {format_route(path)}\n"


def _path_entries(graph: Graph) -> list[dict[str, Any]]:
    entries = []
    for start, end, distance in graph.edges():
        path = get_path(graph, start, end)
        entries.append({
            "start": start,
            "end": end,
            "distance": distance,
            "route": format_route(path) if path is not None else "Path reconstruction failed",
        })
    return entries


def render_results(graph: Graph, report: ExecutionReport | None = None) -> str:
    """Render the results file: distance matrix then every reachable path.

    Raises:
        ValueError: If the graph fails validation.
    """
    errors = graph.validate()
    if errors:
        raise ValueError("Cannot render results for invalid graph: " + "; ".join(errors))

    template = _environment().get_template("results.txt.j2")
    return template.render(
        vertex_count=graph.vertex_count,
        report=report,
        matrix_lines=matrix_lines(graph.distance),
        paths=_path_entries(graph),
    )


def write_results(
    graph: Graph, path: str | Path, report: ExecutionReport | None = None
) -> Path:
    """Write render_results() output to path and return it."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(render_results(graph, report))
    log.info("Results written to %s", path)
    return path
