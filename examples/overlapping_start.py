from nbody_sim import Simulation, Body, SimulationConfig
from nbody_sim.renderer import DebugRenderer
import numpy as np

# Two discs that start overlapping: the first step pushes them apart to contact.
sim = Simulation(
    bodies=[
        Body(mass=100.0, position=(30.0, 0.0), radius=40.0, color=(255, 204, 0)),
        Body(mass=100.0, position=(-30.0, 0.0), radius=40.0, color=(51, 153, 255)),
    ],
    config=SimulationConfig(),
)
renderer = DebugRenderer()

for _ in range(5):
    sim.step()
    renderer.render_simulation(sim)
    a, b = sim.bodies
    print("distance:", float(np.linalg.norm(a.position - b.position)), "events:", sim.last_collisions)
