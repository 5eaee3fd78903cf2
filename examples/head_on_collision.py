from nbody_sim import Simulation, Body, SimulationConfig
import numpy as np

# No gravity: a pure elastic collision
sim = Simulation(
    bodies=[
        Body(mass=1.0, position=(-100.0, 0.0), velocity=(300.0, 0.0), radius=10.0),
        Body(mass=2.0, position=(100.0, 0.0), velocity=(-100.0, 0.0), radius=10.0),
    ],
    config=SimulationConfig(G=0.0),
)
a, b = sim.bodies

p0 = sim.momentum()
ke0 = sim.kinetic_energy()

for _ in range(64):
    sim.step()
    for e in sim.last_collisions:
        print(f"step {sim.step_count}: bodies {e.a},{e.b} hit at t+{e.time:.5f}")

print("p0", p0, "p1", sim.momentum())
print("ke0", ke0, "ke1", sim.kinetic_energy())
print("v_final a,b:", a.velocity, b.velocity, "gap:", float(np.linalg.norm(a.position - b.position)))
