"""Per-graph matrix memory accounting.

Reports what one Graph's matrices occupy, computed on demand from the arrays
themselves rather than tracked in process-wide counters.
"""

from dataclasses import dataclass

from apsp.graph.matrix import Graph


@dataclass(frozen=True, slots=True)
class MemoryStats:
    """Bytes held by a graph's distance and successor matrices."""

    distance_bytes: int
    successor_bytes: int
    allocations: int  # number of matrices currently allocated

    @property
    def total_bytes(self) -> int:
        return self.distance_bytes + self.successor_bytes

    @property
    def total_kb(self) -> float:
        return self.total_bytes / 1024


def memory_usage(*graphs: Graph | None) -> MemoryStats:
    """Sum the matrix memory of one or more graphs (None entries skipped)."""
    distance_bytes = 0
    successor_bytes = 0
    allocations = 0
    for graph in graphs:
        if graph is None:
            continue
        if graph.distance is not None:
            distance_bytes += graph.distance.nbytes
            allocations += 1
        if graph.successor is not None:
            successor_bytes += graph.successor.nbytes
            allocations += 1
    return MemoryStats(
        distance_bytes=distance_bytes,
        successor_bytes=successor_bytes,
        allocations=allocations,
    )
