import pytest
from nbody_sim import Body, Simulation, SimulationConfig
from nbody_sim.scheduler import FixedStepScheduler


def _sim(dt=0.1):
    return Simulation(bodies=[Body(mass=1.0, velocity=(1.0, 0.0))], config=SimulationConfig(dt=dt))


def test_runs_whole_steps_and_carries_remainder():
    sched = FixedStepScheduler(_sim())

    assert sched.advance(0.25) == 2
    assert sched.accumulator == pytest.approx(0.05)
    assert sched.advance(0.06) == 1
    assert sched.sim.step_count == 3
    assert 0.0 <= sched.alpha < 1.0


def test_frame_time_does_not_change_step_size():
    """
    Same simulated time through different frame cadences gives the same state.
    """
    fast = FixedStepScheduler(_sim(dt=0.0625))
    slow = FixedStepScheduler(_sim(dt=0.0625))

    for _ in range(40):
        fast.advance(0.03125)
    for _ in range(5):
        slow.advance(0.25)

    assert fast.sim.step_count == slow.sim.step_count == 20
    assert fast.sim.bodies[0].position == pytest.approx(slow.sim.bodies[0].position)


def test_pause_and_catch_up_cap():
    sched = FixedStepScheduler(_sim(), max_steps_per_frame=10)

    sched.paused = True
    assert sched.advance(1.0) == 0
    assert sched.accumulator == 0.0

    sched.paused = False
    assert sched.advance(5.0) == 10
    assert sched.accumulator == 0.0


def test_scheduler_validation():
    with pytest.raises(ValueError):
        FixedStepScheduler(_sim(), max_steps_per_frame=0)
    with pytest.raises(ValueError):
        FixedStepScheduler(_sim(), time_scale=0.0)
