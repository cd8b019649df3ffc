"""Floyd-Warshall execution engine: relaxation, cycle detection, path queries."""

from apsp.engine.floyd_warshall import (
    detect_negative_cycle,
    execute,
    execute_optimized,
    find_negative_cycle_vertex,
    get_distance,
    relax_through,
)
from apsp.engine.paths import get_path, path_weight
from apsp.engine.types import OPTIMIZED, STANDARD, ExecutionReport

__all__ = [
    "ExecutionReport",
    "OPTIMIZED",
    "STANDARD",
    "detect_negative_cycle",
    "execute",
    "execute_optimized",
    "find_negative_cycle_vertex",
    "get_distance",
    "get_path",
    "path_weight",
    "relax_through",
]
