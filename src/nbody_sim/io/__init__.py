# MIT License (see LICENSE)
"""
Input utilities for setting up simulations.

This subpackage provides:
    - JSON loading of a configuration plus initial bodies.

Typical usage:
    from nbody_sim.io import load_simulation

    sim = load_simulation("two_body.json")
    sim.run(600)
"""
from .json_io import (
    load_simulation,
    load_simulation_raw,
    simulation_from_json,
    config_from_json,
    body_from_json,
)

__all__ = [
    "load_simulation",
    "load_simulation_raw",
    "simulation_from_json",
    "config_from_json",
    "body_from_json",
]
