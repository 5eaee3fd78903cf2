"""
Open a window on a scene file (needs the `viewer` extra).
Run:
  python examples/viewer.py examples/scenes/three_discs.json
"""
import logging
import sys

from nbody_sim.io import load_simulation
from nbody_sim.renderer.pygame_view import run_viewer

logging.basicConfig(level=logging.INFO)

path = sys.argv[1] if len(sys.argv) > 1 else "examples/scenes/three_discs.json"
run_viewer(load_simulation(path), scale=1.0)
