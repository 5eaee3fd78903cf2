# MIT License (see LICENSE)
"""
nbody_sim - A 2D N-body gravity simulator with continuous collisions.

Bodies attract each other pairwise and are integrated with a split
velocity Verlet scheme. Discs with a radius are checked for collisions
between step samples (time of impact), rolled back to the impact, bounced
elastically and advanced for the rest of the step.

Main entry points:
    - Simulation: The world holding the bodies and the fixed-step loop.
    - Body: A point or disc mass.
    - SimulationConfig: dt, G, softening floor and feature flags.

Submodules:
    - core: Force accumulation, integrators, invariants.
    - collision: Time of impact, elastic response, per-step resolver.
    - io: JSON loading of initial conditions.
    - renderer: Optional visualization adapters.

Example:
    from nbody_sim import Simulation, Body, SimulationConfig

    sim = Simulation(
        bodies=[
            Body(mass=100, position=(200, 0), velocity=(0, 100), radius=20),
            Body(mass=100, position=(-200, 0), velocity=(0, -100), radius=20),
        ],
        config=SimulationConfig(dt=0.05),
    )
    sim.step()
"""
from .config import SimulationConfig
from .simulation import Simulation
from .types import Body, RenderItem

__all__ = [
    # Core simulation
    "Simulation",
    "SimulationConfig",
    # Data
    "Body",
    "RenderItem",
]
