"""
Microbenchmark: time per step vs number of bodies.
Run:
  python benchmarks/bench_steps.py
"""
import time
import numpy as np
from nbody_sim import Simulation, Body, SimulationConfig
from nbody_sim.profiler import Profiler

def run(n: int, steps: int = 300, collisions: bool = True):
    prof = Profiler()
    rng = np.random.default_rng(12345)  # determinism (no randomness elsewhere)

    # spawn discs on a grid with small random jitter
    side = int(np.ceil(np.sqrt(n)))
    bodies = []
    for k in range(n):
        iy, ix = divmod(k, side)
        x = 120.0 * ix + 5.0 * float(rng.normal())
        y = 120.0 * iy + 5.0 * float(rng.normal())
        v = tuple(20.0 * rng.normal(size=2))
        bodies.append(Body(mass=10.0, position=(x, y), velocity=v, radius=10.0))

    sim = Simulation(
        bodies=bodies,
        config=SimulationConfig(G=1000.0, enable_collisions=collisions),
        profiler=prof,
    )

    # warmup
    sim.run(30)
    prof.reset()

    t0 = time.perf_counter()
    sim.run(steps)
    t1 = time.perf_counter()

    per_step = (t1 - t0) / steps
    return per_step, prof.stats.summary()

if __name__ == "__main__":
    for n in [2, 10, 25, 50, 100]:
        per_step, summary = run(n)
        print(f"N={n:4d}  step={1e3*per_step:8.3f} ms  steps/s={1/per_step:8.1f}")
        for k in ["forces", "integrate", "collisions", "diagnostics"]:
            if k in summary:
                print(" ", k, summary[k])
        print()
