# MIT License (see LICENSE)
"""
The simulation world and its fixed-step loop.

The Simulation owns the body registry and advances it one fixed step per
call to step(). A step is a strict sequential pipeline:

    1. Force pass at the current positions, a(t) = F/m.
    2. Position half of velocity Verlet (saves previous_position).
    3. Continuous collision resolution (if enabled).
    4. Force pass at the new positions, a(t+dt) = F/m.
    5. Velocity half of velocity Verlet.
    6. Center-of-mass diagnostic.

With integrator="euler" steps 2, 4 and 5 collapse into a single
semi-implicit Euler update using the forces from step 1.

The simulation never reads the wall clock: the caller (a fixed-timestep
scheduler, a test, a render loop) decides when to call step().

Structure:
    - User builds Body records and a SimulationConfig.
    - User creates Simulation(bodies, config).
    - User calls sim.step() at the fixed cadence and reads render_items().
"""
from __future__ import annotations
from contextlib import nullcontext
from dataclasses import dataclass, field
import logging

import numpy as np

from .config import SimulationConfig
from .profiler import Profiler
from .types import Body, RenderItem
from .core.forces import accumulate_gravity
from .core.integrators import (
    euler_step,
    update_accelerations,
    verlet_positions,
    verlet_velocities,
)
from .core.invariants import (
    center_of_mass,
    kinetic_energy,
    linear_momentum,
    total_energy,
)
from .collision.resolver import CollisionEvent, resolve_collisions

logger = logging.getLogger(__name__)


@dataclass
class Simulation:
    """
    N-body simulation world.

    Attributes:
        bodies: Initial bodies. The registry is fixed once the first step
            runs: no spawning, no removal, no merging.
        config: Simulation constants (dt, G, softening floor, flags).
        profiler: Optional Profiler for per-phase timings.
        time: Simulated time elapsed.
        step_count: Number of completed steps.
        center_of_mass: Mass-weighted mean position after the last step
            (None while there are no bodies).
        last_collisions: Collisions resolved during the last step.
    """
    bodies: list[Body] = field(default_factory=list)
    config: SimulationConfig = field(default_factory=SimulationConfig)
    profiler: Profiler | None = None

    # Internal state
    time: float = 0.0
    step_count: int = 0
    center_of_mass: np.ndarray | None = None
    last_collisions: list[CollisionEvent] = field(default_factory=list)

    def __post_init__(self) -> None:
        initial = list(self.bodies)
        self.bodies = []
        self._next_id = 1
        self._diverged = False
        for body in initial:
            self.add_body(body)
        logger.info(
            "Simulation created with %d bodies (integrator=%s, collisions=%s, dt=%g)",
            len(self.bodies),
            self.config.integrator,
            "on" if self.config.enable_collisions else "off",
            self.config.dt,
        )

    def add_body(self, body: Body) -> int:
        """
        Add a body before the simulation starts.

        Args:
            body: A validated Body.

        Returns:
            The id assigned to the body.

        Raises:
            TypeError: If body is not a Body.
            RuntimeError: If the simulation has already stepped.
            ValueError: If the body already belongs to a simulation. Each
                simulation owns its bodies; build fresh ones for another run.
        """
        if not isinstance(body, Body):
            raise TypeError(f"Expected Body, got {type(body).__name__}")
        if self.step_count > 0:
            raise RuntimeError("Bodies can only be added before the first step")
        if body.id != -1 or any(b is body for b in self.bodies):
            raise ValueError(f"Body is already registered (id={body.id})")
        body.id = self._next_id
        self._next_id += 1
        self.bodies.append(body)
        self.center_of_mass = center_of_mass(self.bodies)
        return body.id

    def _section(self, name: str):
        if self.profiler is None:
            return nullcontext()
        return self.profiler.section(name)

    def _forces(self) -> None:
        with self._section("forces"):
            accumulate_gravity(self.bodies, self.config.G, self.config.min_distance)
            update_accelerations(self.bodies)

    def _collide(self) -> None:
        if not self.config.enable_collisions:
            self.last_collisions = []
            return
        with self._section("collisions"):
            self.last_collisions = resolve_collisions(
                self.bodies,
                self.config.dt,
                self.config.overlap_policy,
                carry_acceleration=self.config.integrator == "verlet",
            )

    def step(self) -> None:
        """
        Advance the simulation by one fixed step of config.dt.
        """
        dt = self.config.dt

        if self.config.integrator == "euler":
            with self._section("forces"):
                accumulate_gravity(self.bodies, self.config.G, self.config.min_distance)
            with self._section("integrate"):
                euler_step(self.bodies, dt)
            self._collide()
        else:
            self._forces()
            with self._section("integrate"):
                verlet_positions(self.bodies, dt)
            self._collide()
            self._forces()
            with self._section("integrate"):
                verlet_velocities(self.bodies, dt)

        with self._section("diagnostics"):
            if self.bodies:
                self.center_of_mass = center_of_mass(self.bodies)
            self._check_divergence()

        self.time += dt
        self.step_count += 1

    def run(self, steps: int) -> None:
        """Advance `steps` fixed steps."""
        for _ in range(steps):
            self.step()

    def _check_divergence(self) -> None:
        # Divergence is reported once, never corrected.
        if self._diverged:
            return
        bad = [b.id for b in self.bodies if not b.is_finite()]
        if bad:
            self._diverged = True
            logger.warning(
                "Non-finite body state after step %d (bodies %s); check dt and min_distance",
                self.step_count + 1,
                bad,
            )

    @property
    def diverged(self) -> bool:
        """True once any body has reached a non-finite position or velocity."""
        return self._diverged

    def render_items(self) -> list[RenderItem]:
        """Snapshot of (id, position, radius, color) for every body."""
        return [RenderItem.from_body(b) for b in self.bodies]

    def body(self, body_id: int) -> Body:
        """
        Look up a body by id.

        Raises:
            KeyError: If no body has that id.
        """
        for b in self.bodies:
            if b.id == body_id:
                return b
        raise KeyError(body_id)

    def kinetic_energy(self) -> float:
        return kinetic_energy(self.bodies)

    def total_energy(self) -> float:
        """Kinetic plus softened gravitational potential energy."""
        return total_energy(self.bodies, self.config.G, self.config.min_distance)

    def momentum(self) -> np.ndarray:
        return linear_momentum(self.bodies)
