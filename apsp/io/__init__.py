"""Graph text-file reading, writing and sample generation."""

from apsp.io.graph_file import (
    GraphFileError,
    generate_sample_graph_file,
    load_graph_file,
    save_graph_file,
    validate_graph_file,
)

__all__ = [
    "GraphFileError",
    "generate_sample_graph_file",
    "load_graph_file",
    "save_graph_file",
    "validate_graph_file",
]
