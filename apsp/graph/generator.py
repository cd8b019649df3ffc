"""Random weighted digraph generation for sample files and benchmarks."""

import logging

import numpy as np

from apsp.graph.matrix import DEFAULT_MAX_VERTICES, Graph
from apsp.graph.tolerance import DEFAULT_TOLERANCE, Tolerance

log = logging.getLogger(__name__)


def _check_args(vertices: int, density: float, min_weight: int, max_weight: int) -> None:
    if vertices <= 0:
        raise ValueError(f"vertices must be positive, got {vertices}")
    if not 0.0 <= density <= 1.0:
        raise ValueError(f"density must be in [0, 1], got {density}")
    if min_weight > max_weight:
        raise ValueError(
            f"min_weight ({min_weight}) must be <= max_weight ({max_weight})"
        )


def sample_edges(
    vertices: int,
    density: float,
    rng: np.random.Generator,
    min_weight: int = 1,
    max_weight: int = 100,
) -> list[tuple[int, int, float]]:
    """Draw exactly int(n * (n - 1) * density) distinct off-diagonal edges.

    Weights are integers drawn uniformly from [min_weight, max_weight].

    Args:
        vertices: Number of vertices n.
        density: Fraction of the n * (n - 1) possible edges to draw.
        rng: numpy random Generator for reproducibility.
        min_weight: Smallest edge weight.
        max_weight: Largest edge weight.

    Returns:
        List of (source, target, weight) in draw order.
    """
    _check_args(vertices, density, min_weight, max_weight)
    max_edges = vertices * (vertices - 1)
    target_edges = int(max_edges * density)
    if target_edges == 0:
        return []

    # Enumerate off-diagonal slots row-major and pick without replacement
    slots = rng.choice(max_edges, size=target_edges, replace=False)
    sources = slots // (vertices - 1)
    offsets = slots % (vertices - 1)
    targets = offsets + (offsets >= sources)  # skip the diagonal
    weights = rng.integers(min_weight, max_weight, size=target_edges, endpoint=True)

    return [
        (int(s), int(t), float(w)) for s, t, w in zip(sources, targets, weights)
    ]


def random_graph(
    vertices: int,
    density: float,
    rng: np.random.Generator,
    min_weight: int = 1,
    max_weight: int = 100,
    max_vertices: int = DEFAULT_MAX_VERTICES,
    tolerance: Tolerance = DEFAULT_TOLERANCE,
) -> Graph:
    """Build a Graph where each off-diagonal edge exists with probability density.

    Each potential edge (i, j), i != j, is sampled independently as
    Bernoulli(density) with an integer weight in [min_weight, max_weight].

    Raises:
        ValueError: If the arguments are out of range or the vertex count
            exceeds max_vertices.
    """
    _check_args(vertices, density, min_weight, max_weight)
    graph = Graph.create(vertices, max_vertices=max_vertices, tolerance=tolerance)
    if graph is None:
        raise ValueError(
            f"Cannot create a graph with {vertices} vertices "
            f"(maximum {max_vertices})"
        )

    uniform = rng.random((vertices, vertices))
    present = uniform < density
    np.fill_diagonal(present, False)
    weights = rng.integers(
        min_weight, max_weight, size=(vertices, vertices), endpoint=True
    )

    for source, target in zip(*np.nonzero(present)):
        graph.add_edge(int(source), int(target), float(weights[source, target]))

    log.debug(
        "Random graph: n=%d, density=%.3f, edges=%d",
        vertices, density, int(present.sum()),
    )
    return graph
