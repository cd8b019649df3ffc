"""Graph text files: validation, loading, writing and random samples.

File format (whitespace separated, line breaks not significant)::

    <vertex_count>
    <edge_count>
    <from> <to> <weight>     # edge_count times

Tokens after the last declared edge are ignored.
"""

import logging
import math
from pathlib import Path

import numpy as np

from apsp.config.settings import EngineConfig
from apsp.graph.generator import sample_edges
from apsp.graph.matrix import DEFAULT_MAX_VERTICES, Graph

log = logging.getLogger(__name__)

Edge = tuple[int, int, float]


class GraphFileError(ValueError):
    """Raised when a graph file is missing, malformed or describes an invalid graph."""


def _parse(path: Path) -> tuple[int, list[Edge]]:
    """Tokenize a graph file into its vertex count and edge triples.

    Raises:
        GraphFileError: On a missing file or malformed / truncated content.
    """
    try:
        tokens = path.read_text().split()
    except FileNotFoundError as exc:
        raise GraphFileError(f"Cannot open file {path}") from exc
    except (OSError, UnicodeDecodeError) as exc:
        raise GraphFileError(f"Cannot read file {path}: {exc}") from exc

    if len(tokens) < 2:
        raise GraphFileError(f"Missing vertex/edge count header in file {path}")
    try:
        vertices = int(tokens[0])
    except ValueError as exc:
        raise GraphFileError(f"Invalid number of vertices in file {path}") from exc
    try:
        n_edges = int(tokens[1])
    except ValueError as exc:
        raise GraphFileError(f"Invalid number of edges in file {path}") from exc
    if n_edges < 0:
        raise GraphFileError(f"Invalid number of edges in file {path}: {n_edges}")

    edges: list[Edge] = []
    for idx in range(n_edges):
        fields = tokens[2 + 3 * idx : 5 + 3 * idx]
        if len(fields) != 3:
            raise GraphFileError(
                f"Invalid edge format in file {path} at edge {idx + 1}: "
                f"expected {n_edges} edges, found {idx}"
            )
        try:
            edges.append((int(fields[0]), int(fields[1]), float(fields[2])))
        except ValueError as exc:
            raise GraphFileError(
                f"Invalid edge format in file {path} at edge {idx + 1}: "
                f"{' '.join(fields)!r}"
            ) from exc
    return vertices, edges


def _content_errors(vertices: int, edges: list[Edge], max_vertices: int) -> list[str]:
    errors: list[str] = []
    if not 0 < vertices <= max_vertices:
        errors.append(
            f"Vertex count {vertices} outside allowed range 1..{max_vertices}"
        )
        return errors
    for idx, (source, target, weight) in enumerate(edges, start=1):
        if not (0 <= source < vertices and 0 <= target < vertices):
            errors.append(
                f"Edge {idx} ({source}, {target}) has a vertex outside 0..{vertices - 1}"
            )
        elif not math.isfinite(weight):
            errors.append(f"Edge {idx} ({source}, {target}) has non-finite weight {weight}")
    return errors


def validate_graph_file(
    path: str | Path, max_vertices: int = DEFAULT_MAX_VERTICES
) -> list[str]:
    """Check a graph file without building a Graph.

    Returns:
        List of problems found (empty = valid file).
    """
    try:
        vertices, edges = _parse(Path(path))
    except GraphFileError as exc:
        return [str(exc)]
    return _content_errors(vertices, edges, max_vertices)


def load_graph_file(
    path: str | Path, engine: EngineConfig | None = None
) -> Graph:
    """Build a Graph from a graph file.

    Duplicate edges follow add_edge semantics: the last weight wins.

    Args:
        path: Graph file to read.
        engine: Vertex limit and tolerance for the new Graph.

    Returns:
        The populated, initialized Graph.

    Raises:
        GraphFileError: If the file is missing, malformed or invalid.
    """
    engine = engine or EngineConfig()
    path = Path(path)
    vertices, edges = _parse(path)

    errors = _content_errors(vertices, edges, engine.max_vertices)
    if errors:
        raise GraphFileError(
            f"Invalid graph file {path}:\n" + "\n".join(f"  - {e}" for e in errors)
        )

    graph = Graph.create(
        vertices, max_vertices=engine.max_vertices, tolerance=engine.tolerance()
    )
    if graph is None:
        raise GraphFileError(f"Failed to create graph with {vertices} vertices")

    for source, target, weight in edges:
        if not graph.add_edge(source, target, weight):
            raise GraphFileError(
                f"Failed to add edge ({source}, {target}) with weight {weight:.2f}"
            )

    log.info("Loaded %s: %d vertices, %d edges", path, vertices, len(edges))
    return graph


def save_graph_file(graph: Graph, path: str | Path) -> int:
    """Write every reachable off-diagonal entry of graph as an edge.

    Returns:
        Number of edges written.

    Raises:
        GraphFileError: If the graph fails validation.
    """
    errors = graph.validate()
    if errors:
        raise GraphFileError("Cannot save invalid graph: " + "; ".join(errors))

    edges = list(graph.edges())
    lines = [f"{graph.vertex_count}", f"{len(edges)}"]
    lines.extend(f"{source} {target} {weight:.6f}" for source, target, weight in edges)
    Path(path).write_text("\n".join(lines) + "\n")

    log.info("Graph written to %s (%d edges)", path, len(edges))
    return len(edges)


def generate_sample_graph_file(
    path: str | Path,
    vertices: int,
    density: float,
    rng: np.random.Generator,
    min_weight: int = 1,
    max_weight: int = 100,
    max_vertices: int = DEFAULT_MAX_VERTICES,
) -> int:
    """Write a random graph with int(n * (n - 1) * density) distinct edges.

    Returns:
        Number of edges written.

    Raises:
        ValueError: If vertices, density or the weight range are invalid.
    """
    if not 0 < vertices <= max_vertices:
        raise ValueError(
            f"vertices must be in 1..{max_vertices}, got {vertices}"
        )
    edges = sample_edges(vertices, density, rng, min_weight, max_weight)

    lines = [f"{vertices}", f"{len(edges)}"]
    lines.extend(f"{source} {target} {weight:.2f}" for source, target, weight in edges)
    Path(path).write_text("\n".join(lines) + "\n")

    log.info("Sample graph written to %s: %d vertices, %d edges", path, vertices, len(edges))
    return len(edges)
