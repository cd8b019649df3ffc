"""Path reconstruction from the successor matrix."""

import logging

from apsp.graph.matrix import AllocationError, Graph
from apsp.graph.tolerance import NO_VERTEX, UNREACHABLE

log = logging.getLogger(__name__)


def get_path(graph: Graph | None, start: int, end: int) -> list[int] | None:
    """Reconstruct the shortest path from start to end.

    Follows current = successor[current][end] from start until end is
    reached. A walk that hits NO_VERTEX, or runs longer than n vertices
    without reaching end, means the successor matrix is stale (queried
    before relaxation, or after a negative cycle) and yields None rather
    than a truncated path.

    Args:
        graph: Graph after an engine run.
        start: Source vertex.
        end: Destination vertex.

    Returns:
        Vertices from start to end inclusive, or None if there is no path
        or the graph / indices are invalid.

    Raises:
        AllocationError: If the path list cannot be grown.
    """
    if graph is None or not (graph.contains(start) and graph.contains(end)):
        return None
    if not graph.tolerance.is_reachable(graph.distance[start, end]):
        return None

    successor = graph.successor
    start, end = int(start), int(end)
    limit = graph.vertex_count
    try:
        path = [start]
        current = start
        while current != end:
            current = int(successor[current, end])
            if current == NO_VERTEX:
                log.debug("Successor chain %d -> %d broken at %d", start, end, path[-1])
                return None
            path.append(current)
            if len(path) > limit:
                log.debug("Successor chain %d -> %d does not terminate", start, end)
                return None
    except MemoryError as exc:
        raise AllocationError(
            f"Cannot allocate path array for {start} -> {end}"
        ) from exc
    return path


def path_weight(graph: Graph | None, path: list[int] | None) -> float:
    """Sum of graph distances between consecutive path vertices.

    Pass a copy taken before the engine run to sum the original edge
    weights. Returns UNREACHABLE if the path is None or any hop is missing.
    """
    if graph is None or not path:
        return UNREACHABLE
    total = 0.0
    for source, target in zip(path, path[1:]):
        weight = graph.get_edge_weight(source, target)
        if not graph.tolerance.is_reachable(weight):
            return UNREACHABLE
        total += weight
    return total
