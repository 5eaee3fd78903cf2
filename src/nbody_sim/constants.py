# MIT License (see LICENSE)
"""
Default simulation constants.

These are scale factors for a screen-sized toy universe, not calibrated SI
values. They are only defaults: every run reads its constants from a
SimulationConfig, so several configurations can coexist in one process.
"""
from __future__ import annotations

# Fixed simulation step in seconds (64 Hz), independent of render frame rate.
DEFAULT_DT: float = 1 / 64

# Gravitational constant. Chosen so that masses of ~100 a few hundred
# length-units apart produce visible motion within a few seconds.
DEFAULT_G: float = 100000.0

# Softening floor substituted for the pair distance in the force law.
# A value of 0 disables the floor.
DEFAULT_MIN_DISTANCE: float = 100.0

# Threshold below which squared lengths / quadratic coefficients are
# treated as exactly zero (zero relative velocity, coincident centers).
EPS_DEGENERATE: float = 1e-12

INTEGRATORS: tuple[str, ...] = ("verlet", "euler")
OVERLAP_POLICIES: tuple[str, ...] = ("separate", "ignore")
