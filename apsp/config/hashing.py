"""Deterministic config hashing using SHA-256 over sorted JSON."""

import hashlib
import json
from dataclasses import asdict
from typing import Any

from apsp.config.settings import RunConfig

HASH_LENGTH = 16


def _canonical_json(config: Any) -> str:
    # compact, key-sorted, ASCII: identical configs give identical bytes
    return json.dumps(asdict(config), sort_keys=True, ensure_ascii=True, separators=(",", ":"))


def config_hash(config: Any) -> str:
    """First HASH_LENGTH hex characters of the SHA-256 of a dataclass config."""
    digest = hashlib.sha256(_canonical_json(config).encode("utf-8"))
    return digest.hexdigest()[:HASH_LENGTH]


def engine_config_hash(config: RunConfig) -> str:
    """Hash of the settings that can change computed distances.

    Two configs differing only in seed, sample or benchmark settings share
    this hash, so results from them are directly comparable.
    """
    return config_hash(config.engine)
