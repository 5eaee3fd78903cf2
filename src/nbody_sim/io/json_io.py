# MIT License (see LICENSE)
"""
Build simulations from JSON initial-condition files.

Only initial conditions are read; running state is never written back.

JSON Schema Overview:
---------------------
{
  "dt": float,                     # Default: 1/64
  "G": float,                      # Default: 100000
  "min_distance": float,           # Softening floor, 0 disables. Default: 100
  "enable_collisions": bool,       # Default: true
  "integrator": string,            # "verlet" or "euler"
  "overlap_policy": string,        # "separate" or "ignore"
  "bodies": [
    {
      "mass": float,               # Required, > 0
      "position": [x, y],          # Default: [0, 0]
      "velocity": [vx, vy],        # Default: [0, 0]
      "radius": float,             # Default: 0 (point mass)
      "color": [r, g, b]           # Default: [255, 255, 255]
    }
  ]
}
Unknown keys are ignored.
"""
from __future__ import annotations
import json
import logging
from typing import TYPE_CHECKING, Any

from ..config import SimulationConfig
from ..types import Body

if TYPE_CHECKING:
    from ..simulation import Simulation

logger = logging.getLogger(__name__)

_CONFIG_KEYS = ("dt", "G", "min_distance", "enable_collisions", "integrator", "overlap_policy")


def load_simulation_raw(path: str) -> dict[str, Any]:
    """
    Load raw JSON data from a scene file without object construction.
    """
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


def config_from_json(d: dict[str, Any]) -> SimulationConfig:
    """
    Build a SimulationConfig from the top-level keys of a scene dict.

    Missing keys keep their defaults.
    """
    kwargs: dict[str, Any] = {}
    for key in _CONFIG_KEYS:
        if key not in d:
            continue
        value = d[key]
        if key == "enable_collisions":
            if not isinstance(value, bool):
                raise ValueError(f"'enable_collisions' must be true or false, got {value!r}")
            kwargs[key] = value
        elif key in ("integrator", "overlap_policy"):
            kwargs[key] = str(value)
        else:
            kwargs[key] = float(value)
    return SimulationConfig(**kwargs)


def body_from_json(d: dict[str, Any]) -> Body:
    """
    Parse a single body definition.

    Raises:
        ValueError: If 'mass' is missing or any value violates Body's bounds.
    """
    if "mass" not in d:
        raise ValueError("Body definition missing required 'mass' field.")

    return Body(
        mass=d["mass"],
        position=d.get("position", (0.0, 0.0)),
        velocity=d.get("velocity", (0.0, 0.0)),
        radius=d.get("radius", 0.0),
        color=d.get("color", (255, 255, 255)),
    )


def simulation_from_json(d: dict[str, Any]) -> "Simulation":
    """
    Construct a ready-to-run Simulation from a scene dict.
    """
    # Import locally to avoid a circular import at package init
    from ..simulation import Simulation

    config = config_from_json(d)
    bodies = [body_from_json(b) for b in d.get("bodies", [])]
    return Simulation(bodies=bodies, config=config)


def load_simulation(path: str) -> "Simulation":
    """
    Load a JSON scene file and construct its Simulation.

    Raises:
        FileNotFoundError: If the file cannot be found.
        json.JSONDecodeError: If the file is not valid JSON.
        ValueError: If the config or a body is invalid.
    """
    sim = simulation_from_json(load_simulation_raw(path))
    logger.info("Loaded %d bodies from %s", len(sim.bodies), path)
    return sim
