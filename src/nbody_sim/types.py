# MIT License (see LICENSE)
"""
Core type definitions for the N-body simulation.

Defines the Body record held by the simulation registry. A body is a
point mass (radius 0) or a disc that can collide with other discs.

Equations of motion for each body:
  dx/dt = v
  dv/dt = F/m
where F is the sum of pairwise gravitational forces from all other bodies.
"""
from __future__ import annotations
from dataclasses import dataclass, field

import numpy as np

from .util import f64, vec2


Color = tuple[int, int, int]


@dataclass(eq=False)
class Body:
    """
    A simulated point or disc mass.

    Attributes:
        mass: Mass, must be > 0.
        position: Current center [x, y].
        velocity: Current velocity [vx, vy].
        radius: Disc radius, >= 0. Zero means a point mass that never collides.
        color: RGB tuple for the presentation layer. Not read by the physics.
        previous_position: Position at the start of the current step. Only
            used by the collision resolver to solve for the time of impact.
        acceleration: Acceleration sampled at the most recent force evaluation.
        previous_acceleration: Acceleration from the force evaluation before it.
        force: Per-step force accumulator, reset before every force pass.
        id: Identifier assigned by Simulation.add_body().

    Raises:
        ValueError: On construction if mass or radius violate their bounds, or
            if a field cannot be read as numbers.
    """
    mass: float
    position: np.ndarray | tuple[float, float] = (0.0, 0.0)
    velocity: np.ndarray | tuple[float, float] = (0.0, 0.0)
    radius: float = 0.0
    color: Color = (255, 255, 255)

    # Runtime state (not user-specified)
    previous_position: np.ndarray = field(default=None, repr=False)
    acceleration: np.ndarray = field(default_factory=lambda: np.zeros(2, dtype=np.float64), repr=False)
    previous_acceleration: np.ndarray = field(default_factory=lambda: np.zeros(2, dtype=np.float64), repr=False)
    force: np.ndarray = field(default_factory=lambda: np.zeros(2, dtype=np.float64), repr=False)
    id: int = -1

    def __post_init__(self) -> None:
        try:
            self.mass = float(self.mass)
            self.radius = float(self.radius)
            self.color = tuple(int(c) for c in self.color)
        except (TypeError, ValueError) as exc:
            raise ValueError(f"Invalid body mass, radius or color: {exc}") from exc
        if not np.isfinite(self.mass) or self.mass <= 0:
            raise ValueError(f"Body mass must be a finite positive number, got {self.mass}")
        if not np.isfinite(self.radius) or self.radius < 0:
            raise ValueError(f"Body radius must be a finite non-negative number, got {self.radius}")

        self.position = vec2(self.position, "position")
        self.velocity = vec2(self.velocity, "velocity")
        if self.previous_position is None:
            self.previous_position = self.position.copy()
        else:
            self.previous_position = vec2(self.previous_position, "previous_position")
        self.acceleration = f64(self.acceleration)
        self.previous_acceleration = f64(self.previous_acceleration)
        self.force = f64(self.force)

    @property
    def inv_mass(self) -> float:
        """Inverse mass (1/m)."""
        return 1.0 / self.mass

    def clear_force(self) -> None:
        """Reset the accumulated force to zero for the next force pass."""
        self.force[:] = 0.0

    def is_finite(self) -> bool:
        """True if position and velocity hold no NaN or infinity."""
        return bool(np.all(np.isfinite(self.position)) and np.all(np.isfinite(self.velocity)))


@dataclass(frozen=True)
class RenderItem:
    """
    What the presentation layer needs to draw one body.

    A snapshot: position is a copy, so holding a RenderItem never exposes
    the live body state.
    """
    id: int
    position: tuple[float, float]
    radius: float
    color: Color

    @classmethod
    def from_body(cls, body: Body) -> "RenderItem":
        return cls(
            id=body.id,
            position=(float(body.position[0]), float(body.position[1])),
            radius=body.radius,
            color=body.color,
        )
