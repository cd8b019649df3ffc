"""Dense graph model: distance/successor matrices and shared comparison rules."""

from apsp.graph.generator import random_graph, sample_edges
from apsp.graph.matrix import DEFAULT_MAX_VERTICES, AllocationError, Graph
from apsp.graph.memory import MemoryStats, memory_usage
from apsp.graph.tolerance import (
    DEFAULT_EPSILON,
    DEFAULT_TOLERANCE,
    NO_VERTEX,
    UNREACHABLE,
    Tolerance,
)

__all__ = [
    "AllocationError",
    "DEFAULT_EPSILON",
    "DEFAULT_MAX_VERTICES",
    "DEFAULT_TOLERANCE",
    "Graph",
    "MemoryStats",
    "NO_VERTEX",
    "Tolerance",
    "UNREACHABLE",
    "memory_usage",
    "random_graph",
    "sample_edges",
]
