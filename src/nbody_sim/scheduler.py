# MIT License (see LICENSE)
"""
Fixed-timestep scheduling for interactive front ends.

Render loops run at whatever frame rate the machine manages; physics must
advance in constant steps of config.dt. The scheduler accumulates elapsed
frame time and runs as many whole steps as fit, carrying the remainder to
the next frame.
"""
from __future__ import annotations
from dataclasses import dataclass
import logging

from .simulation import Simulation

logger = logging.getLogger(__name__)


@dataclass
class FixedStepScheduler:
    """
    Drives a Simulation at its fixed dt from variable frame times.

    Attributes:
        sim: The simulation to advance.
        max_steps_per_frame: Cap on steps per frame, so a long stall does not
            freeze the application catching up. Time beyond the cap is dropped.
        time_scale: Simulated seconds per real second.
        paused: While paused, advance() runs no steps and accumulates nothing.
    """
    sim: Simulation
    max_steps_per_frame: int = 10
    time_scale: float = 1.0
    paused: bool = False
    accumulator: float = 0.0

    def __post_init__(self) -> None:
        if self.max_steps_per_frame < 1:
            raise ValueError(f"max_steps_per_frame must be >= 1, got {self.max_steps_per_frame}")
        if self.time_scale <= 0:
            raise ValueError(f"time_scale must be > 0, got {self.time_scale}")

    def advance(self, frame_seconds: float) -> int:
        """
        Account for one rendered frame and run the steps that are due.

        Args:
            frame_seconds: Real time since the previous frame.

        Returns:
            Number of simulation steps executed.
        """
        if self.paused:
            return 0

        dt = self.sim.config.dt
        self.accumulator += max(frame_seconds, 0.0) * self.time_scale
        steps = 0
        while self.accumulator >= dt and steps < self.max_steps_per_frame:
            self.sim.step()
            self.accumulator -= dt
            steps += 1

        if self.accumulator >= dt:
            logger.debug("Dropping %.4fs of simulation time after %d steps", self.accumulator, steps)
            self.accumulator = 0.0
        return steps

    @property
    def alpha(self) -> float:
        """Fraction of a step left in the accumulator, in [0, 1)."""
        return self.accumulator / self.sim.config.dt
