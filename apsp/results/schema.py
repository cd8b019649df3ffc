"""result.json assembly, validation and storage.

A result records one engine run: the config that produced it, the
ExecutionReport, and the final distance matrix with unreachable pairs as
JSON null. Validation is plain Python returning error strings; nothing is
written or returned from disk without passing it.
"""

import json
import logging
import math
from dataclasses import asdict
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from apsp.config.hashing import config_hash, engine_config_hash
from apsp.config.settings import RunConfig
from apsp.engine.types import ExecutionReport
from apsp.graph.matrix import Graph
from apsp.reproducibility.git_hash import get_git_hash
from apsp.results.run_id import generate_run_id

log = logging.getLogger(__name__)

SCHEMA_VERSION = "1.0"

REQUIRED_TOP_FIELDS = frozenset({
    "schema_version",
    "run_id",
    "timestamp",
    "description",
    "config",
    "report",
    "vertex_count",
    "distances",
})

# Mirrors the ExecutionReport fields
REQUIRED_REPORT_FIELDS = frozenset({
    "success",
    "elapsed_time",
    "iterations",
    "has_negative_cycle",
    "negative_cycle_vertex",
    "algorithm",
})


def distances_to_lists(graph: Graph) -> list[list[float | None]]:
    """Distance matrix as nested lists with None (JSON null) for unreachable.

    Distances that overflowed to -inf on a negative cycle are also None,
    so the output is always strict JSON.
    """
    return [[float(v) if math.isfinite(v) else None for v in row] for row in graph.distance]


def build_result(
    config: RunConfig,
    graph: Graph,
    report: ExecutionReport,
    graph_file: str | None = None,
) -> dict[str, Any]:
    """Assemble the result dict for one engine run on graph."""
    return {
        "schema_version": SCHEMA_VERSION,
        "run_id": generate_run_id(config, graph.vertex_count),
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "description": config.description,
        "config": asdict(config),
        "report": report.to_dict(),
        "vertex_count": graph.vertex_count,
        "distances": distances_to_lists(graph),
        "metadata": {
            "code_hash": get_git_hash(),
            "config_hash": config_hash(config),
            "engine_config_hash": engine_config_hash(config),
            "graph_file": graph_file,
        },
    }


def _header_errors(result: dict[str, Any]) -> list[str]:
    errors = []
    missing = REQUIRED_TOP_FIELDS.difference(result)
    if missing:
        errors.append(f"Missing required top-level fields: {sorted(missing)}")

    for name, expected in (("schema_version", str), ("run_id", str), ("config", dict)):
        if name in result and not isinstance(result[name], expected):
            errors.append(f"{name} must be a {expected.__name__}")

    timestamp = result.get("timestamp")
    if timestamp is not None:
        try:
            datetime.fromisoformat(timestamp)
        except (TypeError, ValueError):
            errors.append("timestamp must be in ISO 8601 format")
    return errors


def _report_errors(report: Any) -> list[str]:
    if not isinstance(report, dict):
        return ["report must be a dict"]
    missing = REQUIRED_REPORT_FIELDS.difference(report)
    if missing:
        return [f"report missing fields: {sorted(missing)}"]
    return []


def _distance_errors(n: Any, distances: Any) -> list[str]:
    if not isinstance(n, int) or isinstance(n, bool) or n <= 0:
        return ["vertex_count must be a positive int"]
    if not isinstance(distances, list) or len(distances) != n:
        return [f"distances must be a list of {n} rows"]
    for i, row in enumerate(distances):
        if not isinstance(row, list) or len(row) != n:
            return [f"distances row {i} must have {n} entries"]
        if any(v is not None and not isinstance(v, (int, float)) for v in row):
            return [f"distances row {i} has non-numeric entries"]
        if any(isinstance(v, float) and not math.isfinite(v) for v in row):
            return [f"distances row {i} has non-finite entries"]
    return []


def validate_result(result: dict[str, Any]) -> list[str]:
    """Check a result dict against the schema.

    Checks required fields and their types, the report's ExecutionReport
    fields, and that distances is a vertex_count x vertex_count matrix of
    finite numbers or null.

    Returns:
        List of problems found (empty = valid).
    """
    errors = _header_errors(result)
    if "report" in result:
        errors.extend(_report_errors(result["report"]))
    if "vertex_count" in result:
        errors.extend(_distance_errors(result["vertex_count"], result.get("distances")))
    return errors


def _require_valid(result: dict[str, Any], source: str) -> None:
    errors = validate_result(result)
    if errors:
        raise ValueError(
            f"Result validation failed{source}:\n"
            + "\n".join(f"  - {e}" for e in errors)
        )


def write_result(result: dict[str, Any], results_dir: str | Path = "results") -> Path:
    """Validate result and write it to results_dir/{run_id}/result.json.

    Returns:
        Path of the written result.json.

    Raises:
        ValueError: If the result fails validation.
    """
    _require_valid(result, "")

    result_path = Path(results_dir) / result["run_id"] / "result.json"
    result_path.parent.mkdir(parents=True, exist_ok=True)
    result_path.write_text(json.dumps(result, indent=2, allow_nan=False))

    log.info("Result written to %s", result_path)
    return result_path


def load_result(result_path: str | Path) -> dict[str, Any]:
    """Read a result.json file and validate it.

    Raises:
        FileNotFoundError: If the file doesn't exist.
        ValueError: If the loaded result fails validation.
    """
    path = Path(result_path)
    result = json.loads(path.read_text())
    _require_valid(result, f" for {path}")
    return result
