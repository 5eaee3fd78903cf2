# MIT License (see LICENSE)
"""
Pairwise gravitational force accumulation.

Forces are accumulated in body.force. Every pass first clears all
accumulators, then visits each unordered pair (i, j), i < j, exactly once:
  F_ij = G * m_i * m_j * r / d³,   r = x_j - x_i,   d = max(|r|, min_distance)
F_ij is added to body i and subtracted from body j. Both bodies receive the
same computed vector with opposite sign (Newton's third law), so total
momentum is conserved up to floating-point error.

Complexity: O(N²). Intended for small N.
"""
from __future__ import annotations

import numpy as np

from ..constants import EPS_DEGENERATE
from ..types import Body
from ..util import norm


def clear_forces(bodies: list[Body]) -> None:
    """Reset every body's force accumulator to zero."""
    for b in bodies:
        b.clear_force()


def pair_force(bi: Body, bj: Body, G: float, min_distance: float) -> np.ndarray:
    """
    Gravitational force exerted on bi by bj.

    Returns the zero vector for exactly coincident bodies when the softening
    floor is disabled, since the direction is undefined.
    """
    r = bj.position - bi.position
    d = max(norm(r), min_distance)
    if d < EPS_DEGENERATE:
        return np.zeros(2, dtype=np.float64)
    return r * (G * bi.mass * bj.mass / (d * d * d))


def accumulate_gravity(bodies: list[Body], G: float, min_distance: float) -> None:
    """
    Compute the net gravitational force on every body.

    Args:
        bodies: All bodies of the system. Zero or one body is a no-op
            (every force stays zero).
        G: Gravitational constant.
        min_distance: Softening floor; 0 disables it.

    Note:
        Clears all accumulators first, so it is safe to call more than once
        per step.
    """
    clear_forces(bodies)
    n = len(bodies)
    for i in range(n):
        bi = bodies[i]
        for j in range(i + 1, n):
            bj = bodies[j]
            f = pair_force(bi, bj, G, min_distance)

            # Newton's third law
            bi.force += f
            bj.force -= f
