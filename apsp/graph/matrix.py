"""Dense distance/successor matrix model for all-pairs shortest paths.

A Graph owns two C-contiguous (n x n) numpy arrays: float64 distances and
int64 successors. Invalid input never raises; operations report failure
through sentinel results (None graph, False, UNREACHABLE, error lists).
The one exception is AllocationError when numpy cannot reserve a matrix.
"""

import logging
import math
from collections.abc import Iterator

import numpy as np
import scipy.sparse

from apsp.graph.tolerance import DEFAULT_TOLERANCE, NO_VERTEX, UNREACHABLE, Tolerance

log = logging.getLogger(__name__)

DEFAULT_MAX_VERTICES = 1000


class AllocationError(MemoryError):
    """Raised when a matrix or path array cannot be allocated."""


def _allocate(shape: tuple[int, int], dtype: type, what: str) -> np.ndarray:
    try:
        return np.empty(shape, dtype=dtype, order="C")
    except MemoryError as exc:
        raise AllocationError(
            f"Cannot allocate {what} matrix of shape {shape}"
        ) from exc


class Graph:
    """Weighted directed graph stored as dense distance and successor matrices.

    Build one with Graph.create(); the bare constructor leaves the graph
    unallocated and uninitialized, which every other operation treats as an
    invalid operand.

    Attributes:
        vertex_count: Number of vertices n, fixed at creation.
        max_vertices: Upper bound the vertex count was checked against.
        tolerance: Comparison rules shared with the engine.
        distance: (n, n) float64 array, UNREACHABLE where no path is known.
        successor: (n, n) int64 array, NO_VERTEX where no path is known.
        initialized: True once both matrices hold the reset pattern.
    """

    def __init__(
        self,
        vertex_count: int,
        max_vertices: int = DEFAULT_MAX_VERTICES,
        tolerance: Tolerance = DEFAULT_TOLERANCE,
    ) -> None:
        self.vertex_count = vertex_count
        self.max_vertices = max_vertices
        self.tolerance = tolerance
        self.distance: np.ndarray | None = None
        self.successor: np.ndarray | None = None
        self.initialized = False

    @classmethod
    def create(
        cls,
        vertex_count: int,
        max_vertices: int = DEFAULT_MAX_VERTICES,
        tolerance: Tolerance = DEFAULT_TOLERANCE,
    ) -> "Graph | None":
        """Allocate and initialize a graph with vertex_count vertices.

        Returns:
            The new Graph, or None if vertex_count <= 0 or > max_vertices.

        Raises:
            AllocationError: If numpy cannot allocate the matrices.
        """
        if not _is_index(vertex_count) or not 0 < vertex_count <= max_vertices:
            log.debug(
                "Rejected vertex count %r (allowed 1..%d)", vertex_count, max_vertices
            )
            return None

        graph = cls(int(vertex_count), max_vertices, tolerance)
        shape = (graph.vertex_count, graph.vertex_count)
        graph.distance = _allocate(shape, np.float64, "distance")
        graph.successor = _allocate(shape, np.int64, "successor")
        graph.initialize()
        return graph

    def initialize(self) -> bool:
        """Reset to zero diagonal, unreachable elsewhere, no successors."""
        if self.distance is None or self.successor is None:
            return False
        self.distance.fill(UNREACHABLE)
        np.fill_diagonal(self.distance, 0.0)
        self.successor.fill(NO_VERTEX)
        self.initialized = True
        return True

    def release(self) -> None:
        """Drop both matrices; the graph becomes an invalid operand."""
        self.distance = None
        self.successor = None
        self.initialized = False

    def contains(self, vertex: int) -> bool:
        """True if vertex is a valid index into an initialized graph."""
        return self.initialized and _is_index(vertex) and 0 <= vertex < self.vertex_count

    def add_edge(self, source: int, target: int, weight: float) -> bool:
        """Set the weight of edge (source, target), replacing any earlier value.

        Self-loops are accepted; a non-zero self weight breaks the zero
        diagonal and makes validate() fail.

        Returns:
            False without touching the matrices if the graph is
            uninitialized, an index is out of range or the weight is not a
            finite number.
        """
        if not (self.contains(source) and self.contains(target)):
            return False
        try:
            weight = float(weight)
        except (TypeError, ValueError):
            return False
        if not math.isfinite(weight):
            return False

        self.distance[source, target] = weight
        self.successor[source, target] = target
        return True

    def get_edge_weight(self, source: int, target: int) -> float:
        """Stored distance for (source, target), UNREACHABLE for invalid input."""
        if not (self.contains(source) and self.contains(target)):
            return UNREACHABLE
        return float(self.distance[source, target])

    def has_edge(self, source: int, target: int) -> bool:
        return self.tolerance.is_reachable(self.get_edge_weight(source, target))

    def validate(self) -> list[str]:
        """Check the graph is a valid engine operand.

        Returns:
            List of problems found (empty = valid).
        """
        if not self.initialized:
            return ["Graph is not initialized"]

        errors: list[str] = []
        n = self.vertex_count
        if not 0 < n <= self.max_vertices:
            errors.append(
                f"Vertex count {n} outside allowed range 1..{self.max_vertices}"
            )
        if self.distance is None:
            errors.append("Distance matrix is missing")
        if self.successor is None:
            errors.append("Successor matrix is missing")
        if errors:
            return errors

        for name, matrix in (("distance", self.distance), ("successor", self.successor)):
            if matrix.shape != (n, n):
                errors.append(
                    f"{name.capitalize()} matrix has shape {matrix.shape}, expected {(n, n)}"
                )
        if errors:
            return errors

        diagonal = np.diagonal(self.distance)
        bad = np.flatnonzero(~self.tolerance.is_zero(diagonal))
        for vertex in bad[:5]:
            errors.append(
                f"Diagonal distance at vertex {vertex} is {diagonal[vertex]!r}, expected 0"
            )
        if len(bad) > 5:
            errors.append(f"... {len(bad) - 5} more non-zero diagonal entries")
        return errors

    def is_valid(self) -> bool:
        return not self.validate()

    def copy(self) -> "Graph | None":
        """Independent deep copy of both matrices, None if uninitialized."""
        if not self.initialized or self.distance is None or self.successor is None:
            return None

        clone = type(self)(self.vertex_count, self.max_vertices, self.tolerance)
        try:
            clone.distance = self.distance.copy(order="C")
            clone.successor = self.successor.copy(order="C")
        except MemoryError as exc:
            raise AllocationError(
                f"Cannot copy matrices of a {self.vertex_count}-vertex graph"
            ) from exc
        clone.initialized = True
        return clone

    def edges(self) -> Iterator[tuple[int, int, float]]:
        """Yield (source, target, weight) for reachable off-diagonal entries.

        Row-major order. After an engine run this lists shortest-path
        distances rather than the inserted edges.
        """
        if not self.initialized or self.distance is None:
            return
        mask = np.isfinite(self.distance)
        np.fill_diagonal(mask, False)
        for source, target in zip(*np.nonzero(mask)):
            yield int(source), int(target), float(self.distance[source, target])

    def to_csr(self) -> scipy.sparse.csr_matrix:
        """Reachable off-diagonal entries as a sparse (n x n) weight matrix.

        Zero-weight entries are stored explicitly so they stay edges.
        """
        rows, cols, weights = [], [], []
        for source, target, weight in self.edges():
            rows.append(source)
            cols.append(target)
            weights.append(weight)
        n = self.vertex_count
        return scipy.sparse.csr_matrix(
            (
                np.asarray(weights, dtype=np.float64),
                (np.asarray(rows, dtype=np.int64), np.asarray(cols, dtype=np.int64)),
            ),
            shape=(n, n),
        )

    @property
    def edge_count(self) -> int:
        return sum(1 for _ in self.edges())

    def __repr__(self) -> str:
        if not self.initialized:
            return f"Graph(vertex_count={self.vertex_count}, initialized=False)"
        return f"Graph(vertex_count={self.vertex_count}, edges={self.edge_count})"


def _is_index(value: object) -> bool:
    return isinstance(value, (int, np.integer)) and not isinstance(value, bool)
