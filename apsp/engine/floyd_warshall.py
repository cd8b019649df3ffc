"""Floyd-Warshall all-pairs shortest paths over a dense Graph.

Two variants share one relaxation rule:

- execute(): every intermediate vertex k = 0..n-1 is tried and a pair is
  updated when candidate < distance[i][j].
- execute_optimized(): a pair is updated only when
  candidate < distance[i][j] - epsilon, and iteration stops after the first
  k pass that changed nothing. This stricter threshold is deliberate; on
  graphs where an early pass is quiet the two variants return different
  iteration counts and can return different distances.

Both mutate the given Graph in place and return an ExecutionReport. Neither
raises for an invalid graph; the report carries success=False instead.

Each k pass is evaluated on whole matrices with numpy when
distance[k][k] >= 0. In that case no candidate through k can improve row k
or column k, so every candidate in the pass reads the same values the
sequential i, j loop would read and the result is identical. When the
diagonal entry is already negative the pass falls back to the sequential
loop, which reproduces the in-pass feedback exactly.
"""

import logging
import time

import numpy as np

from apsp.engine.types import OPTIMIZED, STANDARD, ExecutionReport
from apsp.graph.matrix import Graph
from apsp.graph.tolerance import UNREACHABLE

log = logging.getLogger(__name__)


def _relax_pass_vectorized(
    distance: np.ndarray, successor: np.ndarray, k: int, margin: float
) -> int:
    """Relax every (i, j) through k at once. Requires distance[k, k] >= 0."""
    via_k = distance[:, k]
    from_k = distance[k, :]
    reachable = (via_k < UNREACHABLE)[:, None] & (from_k < UNREACHABLE)[None, :]

    with np.errstate(over="ignore", invalid="ignore"):
        candidate = via_k[:, None] + from_k[None, :]
        improved = reachable & (candidate < distance - margin)

    n_updates = int(np.count_nonzero(improved))
    if n_updates:
        next_hop = np.broadcast_to(successor[:, k : k + 1], successor.shape)[improved]
        distance[improved] = candidate[improved]
        successor[improved] = next_hop
    return n_updates


def _relax_pass_sequential(
    distance: np.ndarray, successor: np.ndarray, k: int, margin: float
) -> int:
    """Relax (i, j) through k in i-major, j-minor order, reading live values."""
    n = distance.shape[0]
    from_k = distance[k]
    n_updates = 0

    with np.errstate(over="ignore", invalid="ignore"):
        for i in range(n):
            row = distance[i]
            # row[k] can only decrease within the pass, so an unreachable
            # row[k] stays unreachable for every j
            if not row[k] < UNREACHABLE:
                continue
            for j in range(n):
                if from_k[j] < UNREACHABLE:
                    candidate = row[k] + from_k[j]
                    if candidate < row[j] - margin:
                        row[j] = candidate
                        successor[i, j] = successor[i, k]
                        n_updates += 1
    return n_updates


def relax_through(graph: Graph | None, k: int, early_termination: bool = False) -> int:
    """Run one full relaxation pass with k as the intermediate vertex.

    Args:
        graph: Initialized graph, mutated in place.
        k: Intermediate vertex index.
        early_termination: Use the optimized variant's epsilon threshold.

    Returns:
        Number of (i, j) entries updated; 0 when graph is missing or
        uninitialized or k is not one of its vertices.
    """
    if graph is None or not graph.contains(k):
        return 0
    margin = graph.tolerance.relaxation_margin(early_termination)
    if graph.distance[k, k] >= 0.0:
        return _relax_pass_vectorized(graph.distance, graph.successor, k, margin)
    return _relax_pass_sequential(graph.distance, graph.successor, k, margin)


def find_negative_cycle_vertex(graph: Graph | None) -> int | None:
    """Lowest vertex whose diagonal distance is below -epsilon, or None."""
    if graph is None or not graph.initialized or graph.distance is None:
        return None
    diagonal = np.diagonal(graph.distance)
    negative = np.flatnonzero(graph.tolerance.is_negative(diagonal))
    if negative.size == 0:
        return None
    return int(negative[0])


def detect_negative_cycle(graph: Graph | None) -> bool:
    """Re-scan the diagonal for a negative entry.

    Meaningful only after a relaxation run; on a freshly built graph the
    diagonal is zero and this returns False.
    """
    return find_negative_cycle_vertex(graph) is not None


def get_distance(graph: Graph | None, start: int, end: int) -> float:
    """Current distance from start to end, UNREACHABLE for invalid input."""
    if graph is None:
        return UNREACHABLE
    return graph.get_edge_weight(start, end)


def _run(graph: Graph | None, early_termination: bool) -> ExecutionReport:
    algorithm = OPTIMIZED if early_termination else STANDARD

    if graph is None:
        log.debug("%s run rejected: no graph", algorithm)
        return ExecutionReport(algorithm=algorithm)
    errors = graph.validate()
    if errors:
        log.debug("%s run rejected: %s", algorithm, "; ".join(errors))
        return ExecutionReport(algorithm=algorithm)

    n = graph.vertex_count
    iterations = 0
    total_updates = 0
    t0 = time.perf_counter()

    for k in range(n):
        n_updates = relax_through(graph, k, early_termination)
        iterations += n * n
        total_updates += n_updates
        if early_termination and n_updates == 0:
            log.debug("No progress at k=%d, stopping after %d passes", k, k + 1)
            break

    cycle_vertex = find_negative_cycle_vertex(graph)
    elapsed = time.perf_counter() - t0

    log.debug(
        "%s run: n=%d, iterations=%d, updates=%d, elapsed=%.6fs",
        algorithm, n, iterations, total_updates, elapsed,
    )
    if cycle_vertex is not None:
        log.debug("Negative cycle through vertex %d", cycle_vertex)

    return ExecutionReport(
        success=True,
        elapsed_time=elapsed,
        iterations=iterations,
        has_negative_cycle=cycle_vertex is not None,
        negative_cycle_vertex=cycle_vertex,
        algorithm=algorithm,
    )


def execute(graph: Graph | None) -> ExecutionReport:
    """Standard Floyd-Warshall: all n passes, strict-improvement rule."""
    return _run(graph, early_termination=False)


def execute_optimized(graph: Graph | None) -> ExecutionReport:
    """Floyd-Warshall that stops after the first pass with no epsilon-significant change."""
    return _run(graph, early_termination=True)
