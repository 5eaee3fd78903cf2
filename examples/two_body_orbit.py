# examples/two_body_orbit.py
from nbody_sim import Simulation, Body, SimulationConfig

sim = Simulation(
    bodies=[
        Body(mass=100.0, position=(200.0, 0.0), velocity=(0.0, 100.0), radius=10.0),
        Body(mass=100.0, position=(-200.0, 0.0), velocity=(0.0, -100.0), radius=10.0),
    ],
    config=SimulationConfig(G=100000.0, min_distance=100.0),
)

e0 = sim.total_energy()
while sim.time < 10.0:
    sim.step()

print("t:", sim.time)
print("positions:", [item.position for item in sim.render_items()])
print("energy drift:", (sim.total_energy() - e0) / abs(e0))
print("center of mass:", sim.center_of_mass)
