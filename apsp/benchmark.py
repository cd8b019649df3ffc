"""Standard vs. optimized Floyd-Warshall timing over random graphs.

For each size a random graph is built, copied, and each variant runs on its
own copy so neither sees the other's relaxations. scipy's csgraph
Floyd-Warshall on the same input provides a reference time and checks the
standard variant's distances.
"""

import logging
import time
from collections.abc import Sequence
from dataclasses import dataclass

import numpy as np
from scipy.sparse.csgraph import floyd_warshall as csgraph_floyd_warshall

from apsp.engine.floyd_warshall import execute, execute_optimized
from apsp.graph.generator import random_graph
from apsp.graph.matrix import DEFAULT_MAX_VERTICES
from apsp.graph.memory import memory_usage
from apsp.graph.tolerance import DEFAULT_TOLERANCE, Tolerance

log = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class BenchmarkRow:
    """Timings and iteration counts for one graph size."""

    vertices: int
    edges: int
    standard_time: float  # seconds
    optimized_time: float  # seconds
    reference_time: float  # seconds, scipy csgraph
    standard_iterations: int
    optimized_iterations: int
    memory_kb: float  # both graph copies
    variants_agree: bool  # optimized matches standard
    matches_reference: bool  # standard matches scipy


def matrices_agree(
    a: np.ndarray | None,
    b: np.ndarray | None,
    tolerance: Tolerance = DEFAULT_TOLERANCE,
) -> bool:
    """True if both distance matrices match entry by entry under tolerance.

    Unreachable (infinite) entries must be unreachable in both.
    """
    if a is None or b is None or a.shape != b.shape:
        return False
    return bool(np.all(tolerance.isclose(a, b)))


def run_benchmark(
    sizes: Sequence[int],
    density: float,
    rng: np.random.Generator,
    max_vertices: int = DEFAULT_MAX_VERTICES,
    tolerance: Tolerance = DEFAULT_TOLERANCE,
) -> list[BenchmarkRow]:
    """Time both variants and the scipy reference on one random graph per size.

    Raises:
        ValueError: If a size or the density is out of range.
    """
    rows: list[BenchmarkRow] = []
    for size in sizes:
        standard_graph = random_graph(
            size, density, rng, max_vertices=max_vertices, tolerance=tolerance
        )
        optimized_graph = standard_graph.copy()
        adjacency = standard_graph.to_csr()
        memory = memory_usage(standard_graph, optimized_graph)

        t0 = time.perf_counter()
        reference = csgraph_floyd_warshall(adjacency, directed=True)
        reference_time = time.perf_counter() - t0

        standard = execute(standard_graph)
        optimized = execute_optimized(optimized_graph)

        row = BenchmarkRow(
            vertices=size,
            edges=adjacency.nnz,
            standard_time=standard.elapsed_time,
            optimized_time=optimized.elapsed_time,
            reference_time=reference_time,
            standard_iterations=standard.iterations,
            optimized_iterations=optimized.iterations,
            memory_kb=memory.total_kb,
            variants_agree=matrices_agree(
                standard_graph.distance, optimized_graph.distance, tolerance
            ),
            matches_reference=matrices_agree(
                standard_graph.distance, reference, tolerance
            ),
        )
        log.info(
            "n=%d: standard %.6fs (%d it), optimized %.6fs (%d it), "
            "variants_agree=%s, matches_reference=%s",
            size, row.standard_time, row.standard_iterations,
            row.optimized_time, row.optimized_iterations,
            row.variants_agree, row.matches_reference,
        )
        rows.append(row)
    return rows


def format_benchmark(rows: Sequence[BenchmarkRow], density: float) -> str:
    """Fixed-width benchmark table."""
    lines = [
        "Floyd-Warshall Algorithm Performance Benchmark",
        "==============================================",
        "",
        f"Graph Density: {density * 100:.1f}%",
        f"{'Vertices':<10} {'Std Time(s)':<13} {'Opt Time(s)':<13} {'SciPy(s)':<11} "
        f"{'Memory(KB)':<12} {'Iterations':<22} {'Agree':<6} {'Ref':<4}",
        "-" * 97,
    ]
    for row in rows:
        iterations = f"{row.standard_iterations}/{row.optimized_iterations}"
        lines.append(
            f"{row.vertices:<10d} {row.standard_time:<13.6f} {row.optimized_time:<13.6f} "
            f"{row.reference_time:<11.6f} {row.memory_kb:<12.1f} {iterations:<22} "
            f"{'yes' if row.variants_agree else 'no':<6} "
            f"{'ok' if row.matches_reference else 'FAIL':<4}"
        )
    return "\n".join(lines) + "\n"
