# MIT License (see LICENSE)
"""
Continuous Collision Detection (CCD) for moving discs.

Discrete stepping can let two fast discs pass through each other between
samples (tunneling). Instead of testing overlap only at the end of a step,
we solve for the time at which the distance between the straight-line
trajectories first equals the sum of the radii.

Key concepts:
- TOI (Time of Impact): the earliest time within the step at which the
  two discs touch.
- Only closing pairs can collide. A pair that is moving apart, or has no
  relative motion, never produces an impact.
"""
from __future__ import annotations

import numpy as np

from ..constants import EPS_DEGENERATE


def circle_toi(
    p0: np.ndarray,
    v0: np.ndarray,
    r0: float,
    p1: np.ndarray,
    v1: np.ndarray,
    r1: float,
    dt: float,
) -> float | None:
    """
    Compute the time of impact between two moving discs.

    Solves ||(p0 - p1) + t*(v0 - v1)|| = r0 + r1, i.e. a*t² + b*t + c = 0 with
        a = dv·dv,  b = 2 dp·dv,  c = dp·dp - (r0 + r1)²

    Args:
        p0: Position of disc 0 at the start of the step.
        v0: Velocity of disc 0.
        r0: Radius of disc 0.
        p1: Position of disc 1 at the start of the step.
        v1: Velocity of disc 1.
        r1: Radius of disc 1.
        dt: Length of the step.

    Returns:
        The smaller root t if the discs are closing and |t| <= dt.
        0.0 if the discs already overlap at the start of the step.
        None otherwise (negative discriminant, zero relative velocity,
        separating pair, or impact beyond the step).
    """
    dp = p0 - p1
    dv = v0 - v1
    R = r0 + r1

    a = float(np.dot(dv, dv))
    b = 2.0 * float(np.dot(dp, dv))
    c = float(np.dot(dp, dp)) - R * R

    # Already overlapping
    if c < 0:
        return 0.0

    # No relative motion
    if a < EPS_DEGENERATE:
        return None

    # Moving apart (or sliding past tangentially)
    if b >= 0:
        return None

    disc = b * b - 4 * a * c
    if disc < 0:
        return None

    t = (-b - float(np.sqrt(disc))) / (2 * a)
    if abs(t) > dt:
        return None
    return t
