"""Run ID generation with scannable parameter slug format."""

from datetime import datetime, timezone

from apsp.config.settings import RunConfig


def generate_run_id(config: RunConfig, vertex_count: int) -> str:
    """Generate a scannable run ID from the graph size and config.

    Format: n{vertices}_{std|opt}_s{seed}_{YYYYMMDD}_{HHMMSS}
    Example: n120_std_s42_20260224_143012
    """
    ts = datetime.now(timezone.utc)
    variant = "opt" if config.engine.optimized else "std"
    return (
        f"n{vertex_count}"
        f"_{variant}"
        f"_s{config.seed}"
        f"_{ts.strftime('%Y%m%d_%H%M%S')}"
    )
