"""Run configuration dataclasses, all frozen and slotted."""

import math
from dataclasses import dataclass, field

from apsp.graph.matrix import DEFAULT_MAX_VERTICES
from apsp.graph.tolerance import DEFAULT_EPSILON, Tolerance


@dataclass(frozen=True, slots=True)
class EngineConfig:
    """Graph limits and relaxation settings."""

    max_vertices: int = DEFAULT_MAX_VERTICES
    epsilon: float = DEFAULT_EPSILON
    optimized: bool = False  # early-terminating variant

    def tolerance(self) -> Tolerance:
        return Tolerance(self.epsilon)


@dataclass(frozen=True, slots=True)
class SampleConfig:
    """Random sample graph parameters."""

    vertices: int = 10
    density: float = 0.3  # fraction of the n * (n - 1) possible edges
    min_weight: int = 1
    max_weight: int = 100


@dataclass(frozen=True, slots=True)
class BenchmarkConfig:
    """Standard-vs-optimized benchmark parameters."""

    sizes: tuple[int, ...] = (10, 25, 50, 100, 200)
    density: float = 0.3


@dataclass(frozen=True, slots=True)
class RunConfig:
    """Top-level configuration composing all sub-configs.

    Cross-parameter validation runs in __post_init__ to reject invalid
    configurations early.
    """

    engine: EngineConfig = field(default_factory=EngineConfig)
    sample: SampleConfig = field(default_factory=SampleConfig)
    benchmark: BenchmarkConfig = field(default_factory=BenchmarkConfig)
    seed: int = 42
    description: str = ""

    def __post_init__(self) -> None:
        if self.engine.max_vertices <= 0:
            raise ValueError(
                f"max_vertices must be positive, got {self.engine.max_vertices}"
            )
        if not (math.isfinite(self.engine.epsilon) and self.engine.epsilon >= 0.0):
            raise ValueError(
                f"epsilon must be finite and >= 0, got {self.engine.epsilon}"
            )
        if not 0 < self.sample.vertices <= self.engine.max_vertices:
            raise ValueError(
                f"sample vertices ({self.sample.vertices}) must be in "
                f"1..max_vertices ({self.engine.max_vertices})"
            )
        for name, density in (
            ("sample density", self.sample.density),
            ("benchmark density", self.benchmark.density),
        ):
            if not 0.0 <= density <= 1.0:
                raise ValueError(f"{name} must be in [0, 1], got {density}")
        if self.sample.min_weight > self.sample.max_weight:
            raise ValueError(
                f"min_weight ({self.sample.min_weight}) must be "
                f"<= max_weight ({self.sample.max_weight})"
            )
        if not self.benchmark.sizes:
            raise ValueError("benchmark sizes must not be empty")
        for size in self.benchmark.sizes:
            if not 0 < size <= self.engine.max_vertices:
                raise ValueError(
                    f"benchmark size {size} must be in "
                    f"1..max_vertices ({self.engine.max_vertices})"
                )
