# MIT License (see LICENSE)
"""
Conserved quantities and aggregate diagnostics.

These are read-only projections of the body registry; nothing here feeds
back into the physics. In a closed system (gravity and elastic collisions
only) total momentum is conserved and the center of mass moves at constant
velocity, up to integration and floating-point error.
"""
from __future__ import annotations
import numpy as np

from ..types import Body
from ..util import norm


def total_mass(bodies: list[Body]) -> float:
    return float(sum(b.mass for b in bodies))


def kinetic_energy(bodies: list[Body]) -> float:
    """
    Total kinetic energy T = Σ 0.5 * m * v².
    """
    ke = 0.0
    for b in bodies:
        ke += 0.5 * b.mass * float(np.dot(b.velocity, b.velocity))
    return ke


def potential_energy(bodies: list[Body], G: float, min_distance: float = 0.0) -> float:
    """
    Total gravitational potential energy U = -Σ_{i<j} G m_i m_j / d_ij.

    Uses the same softened distance d = max(|r|, min_distance) as the force
    law. Exactly coincident pairs without a floor contribute nothing.
    """
    u = 0.0
    n = len(bodies)
    for i in range(n):
        for j in range(i + 1, n):
            d = max(norm(bodies[j].position - bodies[i].position), min_distance)
            if d > 0:
                u -= G * bodies[i].mass * bodies[j].mass / d
    return u


def total_energy(bodies: list[Body], G: float, min_distance: float = 0.0) -> float:
    """Kinetic plus potential energy."""
    return kinetic_energy(bodies) + potential_energy(bodies, G, min_distance)


def linear_momentum(bodies: list[Body]) -> np.ndarray:
    """
    Total linear momentum P = Σ m * v.
    """
    p = np.zeros(2, dtype=np.float64)
    for b in bodies:
        p += b.mass * b.velocity
    return p


def center_of_mass(bodies: list[Body]) -> np.ndarray:
    """
    Mass-weighted average position Σ(m x) / Σm.

    Raises:
        AssertionError: If the total mass is not positive (including an
            empty body list). Body validation makes this unreachable for
            valid input.
    """
    m = total_mass(bodies)
    assert m > 0, f"center of mass undefined for total mass {m}"
    c = np.zeros(2, dtype=np.float64)
    for b in bodies:
        c += b.mass * b.position
    return c / m


def center_of_mass_velocity(bodies: list[Body]) -> np.ndarray:
    """Velocity of the center of mass, P / Σm."""
    m = total_mass(bodies)
    assert m > 0, f"center of mass undefined for total mass {m}"
    return linear_momentum(bodies) / m
