"""Result schema validation, writing, and run ID generation."""

from apsp.results.run_id import generate_run_id
from apsp.results.schema import (
    build_result,
    distances_to_lists,
    load_result,
    validate_result,
    write_result,
)

__all__ = [
    "build_result",
    "distances_to_lists",
    "generate_run_id",
    "load_result",
    "validate_result",
    "write_result",
]
