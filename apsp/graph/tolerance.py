"""Shared float comparison rules for validation, relaxation and cycle scanning.

Every epsilon-tolerant comparison in the project goes through a Tolerance so
the diagonal check, the two relaxation rules and the negative-cycle scan can
never drift apart.
"""

import math
from dataclasses import dataclass

import numpy as np

# Explicit "no known path" marker. A real edge weight can never compare equal
# to it, so strict less-than is an exact reachability test.
UNREACHABLE: float = math.inf

# Successor entry meaning "no next hop known".
NO_VERTEX: int = -1

DEFAULT_EPSILON: float = 1e-9


@dataclass(frozen=True, slots=True)
class Tolerance:
    """Epsilon-tolerant comparisons on distance values.

    The comparison methods accept scalars or numpy arrays and work
    element-wise on arrays.
    """

    epsilon: float = DEFAULT_EPSILON

    def __post_init__(self) -> None:
        if not (self.epsilon >= 0.0 and math.isfinite(self.epsilon)):
            raise ValueError(
                f"epsilon must be a finite non-negative float, got {self.epsilon}"
            )

    @staticmethod
    def is_reachable(value: float) -> bool:
        return value < UNREACHABLE

    def is_zero(self, value: float | np.ndarray) -> bool | np.ndarray:
        """True if value deviates from 0 by at most epsilon."""
        return abs(value) <= self.epsilon

    def is_negative(self, value: float | np.ndarray) -> bool | np.ndarray:
        """True if value is below -epsilon (the negative-cycle signal)."""
        return value < -self.epsilon

    def isclose(
        self, a: float | np.ndarray, b: float | np.ndarray
    ) -> bool | np.ndarray:
        """True where a and b differ by at most epsilon.

        Non-finite values only match themselves, so an unreachable entry
        never matches a finite one however large.
        """
        a, b = np.asarray(a, dtype=float), np.asarray(b, dtype=float)
        with np.errstate(invalid="ignore"):
            close = (a == b) | (np.abs(a - b) <= self.epsilon)
        return close if close.ndim else bool(close)

    def relaxation_margin(self, early_termination: bool) -> float:
        """Amount a candidate must undercut the current distance by.

        The standard pass accepts any strict improvement (margin 0). The
        early-terminating pass demands an improvement larger than epsilon,
        so a pass of epsilon-negligible changes reports no progress.
        """
        return self.epsilon if early_termination else 0.0


DEFAULT_TOLERANCE = Tolerance()
