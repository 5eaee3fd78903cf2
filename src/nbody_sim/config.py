# MIT License (see LICENSE)
"""
Simulation configuration.

All tunables of a run live in one immutable SimulationConfig passed to the
Simulation, rather than in module-level globals.

Trade-off of the softening floor (min_distance):
    with floor (min_distance > 0): stabilizes close encounters but biases them,
        the force stops growing once bodies are closer than the floor.
    without floor (min_distance = 0): physically accurate inverse-square law,
        but near misses can eject bodies at extreme velocity.
The default keeps the floor on together with collisions.
"""
from __future__ import annotations
from dataclasses import dataclass, replace as _replace
import math

from .constants import (
    DEFAULT_DT,
    DEFAULT_G,
    DEFAULT_MIN_DISTANCE,
    INTEGRATORS,
    OVERLAP_POLICIES,
)


@dataclass(frozen=True)
class SimulationConfig:
    """
    Tunable constants for a simulation run.

    Attributes:
        dt: Fixed simulation step. Must be > 0.
        G: Gravitational constant (a scale factor).
        min_distance: Softening floor for the force law; 0 disables it.
        enable_collisions: Run the continuous collision resolver each step.
        integrator: "verlet" (velocity Verlet, two force passes per step) or
            "euler" (reduced-fidelity semi-implicit Euler, one force pass).
        overlap_policy: What the resolver does with a pair that is already
            overlapping at the start of a step. "separate" pushes the pair
            apart to contact distance and treats the step start as the impact;
            "ignore" leaves such pairs alone.
    """
    dt: float = DEFAULT_DT
    G: float = DEFAULT_G
    min_distance: float = DEFAULT_MIN_DISTANCE
    enable_collisions: bool = True
    integrator: str = "verlet"
    overlap_policy: str = "separate"

    def __post_init__(self) -> None:
        if not math.isfinite(self.dt) or self.dt <= 0:
            raise ValueError(f"dt must be a finite positive number, got {self.dt}")
        if not math.isfinite(self.G):
            raise ValueError(f"G must be finite, got {self.G}")
        if not math.isfinite(self.min_distance) or self.min_distance < 0:
            raise ValueError(f"min_distance must be >= 0, got {self.min_distance}")
        if self.integrator not in INTEGRATORS:
            raise ValueError(
                f"Unknown integrator: {self.integrator!r} (expected one of {INTEGRATORS})"
            )
        if self.overlap_policy not in OVERLAP_POLICIES:
            raise ValueError(
                f"Unknown overlap policy: {self.overlap_policy!r} (expected one of {OVERLAP_POLICIES})"
            )

    def replace(self, **changes) -> "SimulationConfig":
        """Return a copy with the given fields changed (validated again)."""
        return _replace(self, **changes)
