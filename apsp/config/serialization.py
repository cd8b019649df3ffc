"""JSON serialization and deserialization for run configs."""

import json
from dataclasses import asdict
from pathlib import Path

from dacite import Config as DaciteConfig
from dacite import from_dict

from apsp.config.settings import RunConfig

_DACITE_CONFIG = DaciteConfig(
    cast=[tuple],
    check_types=True,
    strict=True,
)


def config_to_json(config: RunConfig) -> str:
    """Serialize a RunConfig to a JSON string.

    Uses sorted keys and 2-space indent for human readability and diffability.
    """
    return json.dumps(asdict(config), indent=2, sort_keys=True)


def config_from_json(json_str: str) -> RunConfig:
    """Deserialize a JSON string to a RunConfig.

    Uses dacite with strict=True to reject unknown keys and cast=[tuple] to
    convert JSON arrays back to tuples for the benchmark sizes.
    """
    return from_dict(data_class=RunConfig, data=json.loads(json_str), config=_DACITE_CONFIG)


def load_config(path: str | Path) -> RunConfig:
    """Read a RunConfig from a JSON file."""
    return config_from_json(Path(path).read_text())
