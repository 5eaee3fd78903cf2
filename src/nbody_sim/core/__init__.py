# MIT License (see LICENSE)
"""
Core N-body physics components.

This subpackage provides:
    - Force accumulation: pairwise softened gravity.
    - Integrators: split velocity Verlet and semi-implicit Euler.
    - Invariants: energy, momentum and center-of-mass diagnostics.

Typical usage:
    from nbody_sim.core import accumulate_gravity, update_accelerations

    accumulate_gravity(bodies, G=1e5, min_distance=100.0)
    update_accelerations(bodies)
"""
from .forces import accumulate_gravity, clear_forces, pair_force
from .integrators import (
    euler_step,
    update_accelerations,
    verlet_positions,
    verlet_velocities,
)
from .invariants import (
    center_of_mass,
    center_of_mass_velocity,
    kinetic_energy,
    linear_momentum,
    potential_energy,
    total_energy,
    total_mass,
)

__all__ = [
    # Forces
    "accumulate_gravity",
    "clear_forces",
    "pair_force",
    # Integrators
    "euler_step",
    "update_accelerations",
    "verlet_positions",
    "verlet_velocities",
    # Invariants
    "center_of_mass",
    "center_of_mass_velocity",
    "kinetic_energy",
    "linear_momentum",
    "potential_energy",
    "total_energy",
    "total_mass",
]
