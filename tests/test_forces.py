import numpy as np
import pytest
from nbody_sim.core.forces import accumulate_gravity, pair_force
from nbody_sim.simulation import Simulation
from nbody_sim.config import SimulationConfig
from nbody_sim.types import Body


def test_two_body_force_matches_inverse_square():
    """
    F_1 = G m1 m2 (x2 - x1) / max(|x2 - x1|, d_min)^3
    With m=100, |r|=400, G=1e5: coefficient 1e5*1e4/400^3 = 15.625, F_1 = (-6250, 0).
    """
    a = Body(mass=100.0, position=(200.0, 0.0), velocity=(0.0, 100.0))
    b = Body(mass=100.0, position=(-200.0, 0.0), velocity=(0.0, -100.0))

    accumulate_gravity([a, b], G=100000.0, min_distance=100.0)

    assert a.force == pytest.approx([-6250.0, 0.0])
    assert b.force == pytest.approx([6250.0, 0.0])


def test_pair_forces_are_exact_negatives():
    a = Body(mass=3.7, position=(12.3, -4.1))
    b = Body(mass=0.9, position=(-7.7, 15.2))

    accumulate_gravity([a, b], G=6.674, min_distance=0.0)

    # Same vector applied with opposite sign, not recomputed
    assert np.array_equal(a.force, -b.force)


def test_net_force_sums_to_zero():
    rng = np.random.default_rng(7)
    bodies = [
        Body(mass=float(rng.uniform(1, 50)), position=tuple(rng.uniform(-500, 500, size=2)))
        for _ in range(6)
    ]

    accumulate_gravity(bodies, G=100000.0, min_distance=10.0)

    total = sum(b.force for b in bodies)
    scale = max(np.linalg.norm(b.force) for b in bodies)
    assert np.linalg.norm(total) <= 1e-9 * scale


def test_force_after_one_step_points_at_other_body():
    """
    After a step, the last force pass ran at the final positions:
      F_1 = G m m (x2 - x1) / max(|x2 - x1|, d_min)^3
    """
    cfg = SimulationConfig(dt=0.05, G=100000.0, min_distance=100.0, enable_collisions=False)
    a = Body(mass=100.0, position=(200.0, 0.0), velocity=(0.0, 100.0))
    b = Body(mass=100.0, position=(-200.0, 0.0), velocity=(0.0, -100.0))
    sim = Simulation(bodies=[a, b], config=cfg)

    sim.step()

    r = b.position - a.position
    d = max(np.linalg.norm(r), cfg.min_distance)
    expected = r * (cfg.G * 100.0 * 100.0 / d**3)
    assert a.force == pytest.approx(expected, rel=1e-12)
    # Direction: from body 1 toward body 2
    assert np.dot(a.force, r) > 0


def test_softening_floor_caps_close_range_force():
    """
    At |r| = 50 < d_min = 100 the floor replaces the distance in the cube:
      with floor:    |F| = G m m * 50 / 100^3
      without floor: |F| = G m m / 50^2
    """
    G, m = 1000.0, 2.0

    a = Body(mass=m, position=(0.0, 0.0))
    b = Body(mass=m, position=(50.0, 0.0))
    accumulate_gravity([a, b], G=G, min_distance=100.0)
    assert a.force[0] == pytest.approx(G * m * m * 50.0 / 100.0**3)

    accumulate_gravity([a, b], G=G, min_distance=0.0)
    assert a.force[0] == pytest.approx(G * m * m / 50.0**2)


def test_coincident_bodies_without_floor_feel_no_force():
    a = Body(mass=1.0, position=(5.0, 5.0))
    b = Body(mass=1.0, position=(5.0, 5.0))

    accumulate_gravity([a, b], G=100000.0, min_distance=0.0)

    assert np.all(np.isfinite(a.force))
    assert np.array_equal(a.force, np.zeros(2))
    assert np.array_equal(pair_force(a, b, 1.0, 0.0), np.zeros(2))


def test_single_and_empty_body_lists():
    accumulate_gravity([], G=1.0, min_distance=0.0)

    lonely = Body(mass=10.0, position=(3.0, 4.0))
    lonely.force[:] = (99.0, -99.0)
    accumulate_gravity([lonely], G=1.0, min_distance=0.0)
    assert np.array_equal(lonely.force, np.zeros(2))


def test_accumulator_is_cleared_between_passes():
    a = Body(mass=5.0, position=(0.0, 0.0))
    b = Body(mass=5.0, position=(0.0, 200.0))

    accumulate_gravity([a, b], G=1.0, min_distance=0.0)
    first = a.force.copy()
    accumulate_gravity([a, b], G=1.0, min_distance=0.0)

    assert np.array_equal(a.force, first)
