"""Default run configuration, the single source of default parameters."""

from apsp.config.settings import RunConfig

# All-default values: max_vertices=1000, epsilon=1e-9, standard variant,
# 10-vertex samples at density 0.3 with weights 1..100, seed=42.
DEFAULT_CONFIG = RunConfig()
