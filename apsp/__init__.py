"""Dense all-pairs shortest paths with the Floyd-Warshall algorithm."""

__version__ = "0.1.0"
