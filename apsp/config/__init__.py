"""Run configuration system with frozen, hashable, serializable dataclasses."""

from apsp.config.defaults import DEFAULT_CONFIG
from apsp.config.hashing import config_hash, engine_config_hash
from apsp.config.serialization import config_from_json, config_to_json, load_config
from apsp.config.settings import BenchmarkConfig, EngineConfig, RunConfig, SampleConfig

__all__ = [
    "BenchmarkConfig",
    "DEFAULT_CONFIG",
    "EngineConfig",
    "RunConfig",
    "SampleConfig",
    "config_from_json",
    "config_hash",
    "config_to_json",
    "engine_config_hash",
    "load_config",
]
