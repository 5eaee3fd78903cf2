# MIT License (see LICENSE)
"""
Elastic collision response and overlap separation for disc pairs.

The response is the standard two-body elastic impulse along the line of
centers (d = p_a - p_b):

    Δv_a = -(2 m_b / (m_a + m_b)) * ((v_a - v_b)·d / |d|²) * d
    Δv_b = +(2 m_a / (m_a + m_b)) * ((v_a - v_b)·d / |d|²) * d

The relative term is computed once and applied with opposite signs, so
momentum and kinetic energy are conserved up to rounding.
"""
from __future__ import annotations

import numpy as np

from ..constants import EPS_DEGENERATE
from ..types import Body
from ..util import norm, norm2


def is_closing(a: Body, b: Body) -> bool:
    """True if the two centers are approaching each other."""
    return float(np.dot(a.velocity - b.velocity, a.position - b.position)) < 0.0


def elastic_response(a: Body, b: Body) -> bool:
    """
    Apply the elastic impulse to both bodies at their current positions.

    Returns:
        False (and leaves velocities untouched) if the centers coincide,
        True otherwise.
    """
    d = a.position - b.position
    d2 = norm2(d)
    if d2 <= EPS_DEGENERATE:
        return False

    rel = float(np.dot(a.velocity - b.velocity, d)) / d2
    m_sum = a.mass + b.mass
    a.velocity = a.velocity - (2.0 * b.mass / m_sum * rel) * d
    b.velocity = b.velocity + (2.0 * a.mass / m_sum * rel) * d
    return True


def separate_overlap(a: Body, b: Body, distance: float) -> None:
    """
    Push two overlapping bodies apart so their centers are `distance` apart.

    The correction runs along the line of centers and is split by inverse
    mass, so the center of mass of the pair does not move. Exactly coincident
    centers are separated along +x.
    """
    d = a.position - b.position
    length = norm(d)
    if length * length <= EPS_DEGENERATE:
        n = np.array([1.0, 0.0], dtype=np.float64)
    else:
        n = d / length

    depth = distance - length
    if depth <= 0:
        return
    w = a.inv_mass + b.inv_mass
    a.position = a.position + n * (depth * a.inv_mass / w)
    b.position = b.position - n * (depth * b.inv_mass / w)
