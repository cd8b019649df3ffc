"""Result record produced by one Floyd-Warshall execution."""

from dataclasses import asdict, dataclass
from typing import Any

STANDARD = "standard"
OPTIMIZED = "optimized"


@dataclass(frozen=True, slots=True)
class ExecutionReport:
    """Outcome of a single execute() / execute_optimized() call.

    elapsed_time is informational only and never feeds a correctness
    decision. negative_cycle_vertex is the lowest vertex whose diagonal
    distance went below -epsilon, or None.
    """

    success: bool = False
    elapsed_time: float = 0.0  # seconds
    iterations: int = 0  # inner relaxation steps actually executed
    has_negative_cycle: bool = False
    negative_cycle_vertex: int | None = None
    algorithm: str = STANDARD

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)
