# MIT License (see LICENSE)
"""
Fixed-step integrators for the N-body system.

Velocity Verlet is split into its two halves so the simulation can run the
collision resolver and a second force pass in between:

    x(t+dt) = x(t) + v(t)*dt + 0.5*a(t)*dt²          (verlet_positions)
    a(t+dt) = F(x(t+dt)) / m                          (update_accelerations)
    v(t+dt) = v(t) + 0.5*(a(t) + a(t+dt))*dt          (verlet_velocities)

The ordering must be kept: previous_acceleration is captured before
acceleration is overwritten, and previous_position before position.

euler_step is the reduced-fidelity alternative: one force pass, then
a -> v -> x with no half steps.

Reference:
    https://en.wikipedia.org/wiki/Verlet_integration#Velocity_Verlet
"""
from __future__ import annotations

from ..types import Body


def update_accelerations(bodies: list[Body]) -> None:
    """
    Shift acceleration into previous_acceleration, then set a = F/m.

    Must run right after a force pass.
    """
    for b in bodies:
        b.previous_acceleration[:] = b.acceleration
        b.acceleration = b.force * b.inv_mass


def verlet_positions(bodies: list[Body], dt: float) -> None:
    """
    First Verlet half: move every body using its velocity and current acceleration.

    The old position is saved in previous_position for the collision resolver.
    """
    half_dt2 = 0.5 * dt * dt
    for b in bodies:
        b.previous_position[:] = b.position
        b.position = b.position + b.velocity * dt + b.acceleration * half_dt2


def verlet_velocities(bodies: list[Body], dt: float) -> None:
    """Second Verlet half: average the two acceleration samples into the velocity."""
    for b in bodies:
        b.velocity = b.velocity + 0.5 * (b.acceleration + b.previous_acceleration) * dt


def euler_step(bodies: list[Body], dt: float) -> None:
    """
    Semi-implicit Euler step using the forces already accumulated.

        a = F/m,  v += a*dt,  x += v*dt

    previous_position is still recorded, so collisions work in this mode too.
    """
    update_accelerations(bodies)
    for b in bodies:
        b.velocity = b.velocity + b.acceleration * dt
        b.previous_position[:] = b.position
        b.position = b.position + b.velocity * dt
