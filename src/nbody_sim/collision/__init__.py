# MIT License (see LICENSE)
"""
Collision detection and response subsystem.

This subpackage provides:
    - CCD: Time-of-impact solving for moving discs.
    - Response: Elastic impulse and overlap separation.
    - Resolver: Per-step pairwise rollback / respond / advance pass.

Typical usage:
    from nbody_sim.collision import resolve_collisions

    events = resolve_collisions(bodies, dt)
    for e in events:
        print(e.a, e.b, e.time)
"""
from .ccd import circle_toi
from .response import elastic_response, is_closing, separate_overlap
from .resolver import CollisionEvent, resolve_collisions, resolve_pair

__all__ = [
    # CCD
    "circle_toi",
    # Response
    "elastic_response",
    "is_closing",
    "separate_overlap",
    # Resolver
    "CollisionEvent",
    "resolve_collisions",
    "resolve_pair",
]
