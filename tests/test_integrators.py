import numpy as np
import pytest
from nbody_sim.core.forces import accumulate_gravity
from nbody_sim.core.integrators import (
    euler_step,
    update_accelerations,
    verlet_positions,
    verlet_velocities,
)
from nbody_sim.config import SimulationConfig
from nbody_sim.simulation import Simulation
from nbody_sim.types import Body


def test_verlet_position_half():
    """
    x(t+dt) = x + v dt + 0.5 a dt^2, previous_position keeps x.
    """
    b = Body(mass=1.0, position=(1.0, 1.0), velocity=(1.0, 2.0))
    b.acceleration[:] = (2.0, 0.0)

    verlet_positions([b], 0.5)

    assert b.previous_position == pytest.approx([1.0, 1.0])
    assert b.position == pytest.approx([1.0 + 0.5 + 0.25, 1.0 + 1.0])


def test_acceleration_shift_then_velocity_average():
    """
    a_prev <- a, a <- F/m, v += 0.5 (a + a_prev) dt
    """
    b = Body(mass=2.0, velocity=(0.0, 0.0))
    b.acceleration[:] = (1.0, 0.0)
    b.force[:] = (6.0, -4.0)

    update_accelerations([b])
    assert b.previous_acceleration == pytest.approx([1.0, 0.0])
    assert b.acceleration == pytest.approx([3.0, -2.0])

    verlet_velocities([b], 0.1)
    assert b.velocity == pytest.approx([0.5 * 4.0 * 0.1, 0.5 * -2.0 * 0.1])


def test_euler_step_order():
    """
    a = F/m, v += a dt, x += v dt (velocity first).
    """
    b = Body(mass=1.0, position=(0.0, 0.0), velocity=(1.0, 0.0))
    b.force[:] = (0.0, 10.0)

    euler_step([b], 0.1)

    assert b.velocity == pytest.approx([1.0, 1.0])
    assert b.position == pytest.approx([0.1, 0.1])
    assert b.previous_position == pytest.approx([0.0, 0.0])


@pytest.mark.parametrize("integrator", ["verlet", "euler"])
def test_single_body_moves_in_straight_line(integrator):
    """
    No other bodies: zero force, x(t) = x0 + v0 t.
    """
    cfg = SimulationConfig(dt=0.05, integrator=integrator)
    b = Body(mass=10.0, position=(3.0, -2.0), velocity=(4.0, 1.5), radius=5.0)
    sim = Simulation(bodies=[b], config=cfg)

    n = 200
    sim.run(n)

    T = n * cfg.dt
    assert np.array_equal(b.force, np.zeros(2))
    assert b.position == pytest.approx([3.0 + 4.0 * T, -2.0 + 1.5 * T], rel=1e-12)
    assert b.velocity == pytest.approx([4.0, 1.5], rel=1e-12)
    assert sim.time == pytest.approx(T)


def test_step_keeps_start_and_end_accelerations():
    """
    After one Verlet step: previous_acceleration = F(x0)/m, acceleration = F(x1)/m.
    """
    cfg = SimulationConfig(dt=0.05, G=100000.0, min_distance=100.0, enable_collisions=False)
    a = Body(mass=100.0, position=(200.0, 0.0), velocity=(0.0, 100.0))
    b = Body(mass=100.0, position=(-200.0, 0.0), velocity=(0.0, -100.0))

    start = [Body(mass=100.0, position=(200.0, 0.0)), Body(mass=100.0, position=(-200.0, 0.0))]
    accumulate_gravity(start, cfg.G, cfg.min_distance)
    a0 = start[0].force / 100.0

    sim = Simulation(bodies=[a, b], config=cfg)
    sim.step()

    assert a.previous_acceleration == pytest.approx(a0)
    assert a.acceleration == pytest.approx(a.force / a.mass)
    assert a.previous_position == pytest.approx([200.0, 0.0])
    v_expected = np.array([0.0, 100.0]) + 0.5 * (a.acceleration + a.previous_acceleration) * cfg.dt
    assert a.velocity == pytest.approx(v_expected)


def test_verlet_orbit_energy_and_momentum():
    """
    Two equal masses on an eccentric bound orbit (e = 0.2, periapsis ~267 > floor).
    Velocity Verlet keeps the total energy bounded; momentum stays zero.
    """
    cfg = SimulationConfig(G=100000.0, min_distance=100.0)
    a = Body(mass=100.0, position=(200.0, 0.0), velocity=(0.0, 100.0), radius=10.0)
    b = Body(mass=100.0, position=(-200.0, 0.0), velocity=(0.0, -100.0), radius=10.0)
    sim = Simulation(bodies=[a, b], config=cfg)

    e0 = sim.total_energy()
    max_rel = 0.0
    for _ in range(1200):
        sim.step()
        max_rel = max(max_rel, abs(sim.total_energy() - e0) / abs(e0))

    print("max relative energy error", max_rel)
    assert max_rel < 1e-2
    assert np.linalg.norm(sim.momentum()) < 1e-6
    assert not sim.last_collisions


def test_euler_drifts_more_than_verlet():
    def run(integrator):
        cfg = SimulationConfig(G=100000.0, min_distance=100.0, integrator=integrator, dt=1 / 32)
        sim = Simulation(
            bodies=[
                Body(mass=100.0, position=(200.0, 0.0), velocity=(0.0, 100.0)),
                Body(mass=100.0, position=(-200.0, 0.0), velocity=(0.0, -100.0)),
            ],
            config=cfg,
        )
        e0 = sim.total_energy()
        worst = 0.0
        for _ in range(600):
            sim.step()
            worst = max(worst, abs(sim.total_energy() - e0) / abs(e0))
        return worst

    assert run("verlet") < run("euler")
