# MIT License (see LICENSE)
"""
Lightweight per-phase timing for the simulation step.

Example:
    profiler = Profiler()
    sim = Simulation(bodies, profiler=profiler)
    sim.run(100)
    print(profiler.stats.summary()["forces"])
"""
from __future__ import annotations
from contextlib import contextmanager
from dataclasses import dataclass, field
import time


@dataclass
class ProfileStats:
    """
    Timing samples (seconds) per named phase.
    """
    samples: dict[str, list[float]] = field(default_factory=dict)

    def add(self, name: str, dt: float) -> None:
        self.samples.setdefault(name, []).append(dt)

    def total(self, name: str) -> float:
        """Total seconds spent in a phase (0 if never recorded)."""
        return float(sum(self.samples.get(name, ())))

    def summary(self) -> dict[str, dict[str, float]]:
        """
        Summary statistics per phase.

        Returns:
            Dict mapping phase name to {'n', 'mean_ms', 'max_ms'}.
        """
        out = {}
        for name, times in self.samples.items():
            n = len(times)
            out[name] = {
                "n": n,
                "mean_ms": 1e3 * (sum(times) / n),
                "max_ms": 1e3 * max(times),
            }
        return out


class Profiler:
    """
    Context-manager based profiler.

    Usage:
        with profiler.section("forces"):
            accumulate_gravity(bodies, G, min_distance)
    """

    def __init__(self) -> None:
        self.stats = ProfileStats()

    @contextmanager
    def section(self, name: str):
        t0 = time.perf_counter()
        try:
            yield
        finally:
            self.stats.add(name, time.perf_counter() - t0)

    def reset(self) -> None:
        self.stats = ProfileStats()
