# MIT License (see LICENSE)
"""
Continuous collision resolution for one simulation step.

Runs after the integrator has moved every body from previous_position to
position. For each unordered pair (i, j), i < j:

    1. Solve for the time of impact t along the straight-line trajectories
       previous_position + velocity * t.
    2. If an impact falls inside the step, roll both bodies back to their
       positions at t (discarding wherever the integrator put them).
    3. Apply the elastic response along the line of centers.
    4. Advance both bodies for the remaining dt - t with the new velocities.
    5. Under velocity Verlet, shift the pair by the 0.5 a dt^2 term of its
       center of mass, so outside pulls on the pair are not lost.

Pairs are resolved one at a time in index order. A body hit by two others in
the same step is handled sequentially, not simultaneously, so results can
depend on body order. This is a known approximation; there is no global
contact pass.
"""
from __future__ import annotations
from dataclasses import dataclass
import logging

from ..types import Body
from ..util import norm2
from .ccd import circle_toi
from .response import elastic_response, is_closing, separate_overlap

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CollisionEvent:
    """
    A collision resolved during a step.

    Attributes:
        a: id of the first body (lower index).
        b: id of the second body.
        time: Impact time measured from the start of the step.
        kind: "impact" for a time-of-impact hit, "overlap" for a pair that
            was already overlapping at the start of the step.
        responded: False if the velocities were left untouched (pair not
            closing or centers coincident).
    """
    a: int
    b: int
    time: float
    kind: str
    responded: bool


def _advance(body: Body, t: float) -> None:
    body.position = body.position + body.velocity * t


def _carry_external_drift(bi: Body, bj: Body, dt: float) -> None:
    """
    Shift the pair by the 0.5 a dt^2 displacement of its own center of mass.

    The straight-line rollback drops the integrator's acceleration term.
    Within the pair the mutual pulls cancel, but a third body's pull does
    not; moving both bodies by the pair's mass-weighted term keeps
    sum(m * dx) equal to the uncollided step without changing their
    separation.
    """
    m = bi.mass + bj.mass
    shift = 0.5 * dt * dt * (bi.mass * bi.acceleration + bj.mass * bj.acceleration) / m
    bi.position = bi.position + shift
    bj.position = bj.position + shift


def resolve_pair(
    bi: Body,
    bj: Body,
    dt: float,
    overlap_policy: str = "separate",
    carry_acceleration: bool = False,
) -> CollisionEvent | None:
    """
    Detect and resolve a collision between two bodies within one step.

    Args:
        bi: First body; previous_position and position already set by the
            integrator for this step.
        bj: Second body.
        dt: Step length.
        overlap_policy: "separate" or "ignore", for pairs overlapping at the
            start of the step.
        carry_acceleration: Set when the integrator moved positions with a
            0.5 a dt^2 term (velocity Verlet). The pair then keeps the
            center-of-mass part of that term after the rollback.

    Returns:
        The resolved event, or None if nothing happened.
    """
    R = bi.radius + bj.radius
    if R <= 0:
        return None

    dp = bi.previous_position - bj.previous_position
    if norm2(dp) < R * R:
        if overlap_policy == "ignore":
            return None

        # Treat the start of the step as the impact instant.
        bi.position = bi.previous_position.copy()
        bj.position = bj.previous_position.copy()
        separate_overlap(bi, bj, R)
        bi.previous_position[:] = bi.position
        bj.previous_position[:] = bj.position

        responded = is_closing(bi, bj) and elastic_response(bi, bj)
        _advance(bi, dt)
        _advance(bj, dt)
        if carry_acceleration:
            _carry_external_drift(bi, bj, dt)
        logger.debug("Separated overlapping bodies %d and %d", bi.id, bj.id)
        return CollisionEvent(bi.id, bj.id, 0.0, "overlap", responded)

    t = circle_toi(
        bi.previous_position, bi.velocity, bi.radius,
        bj.previous_position, bj.velocity, bj.radius,
        dt,
    )
    if t is None:
        return None

    # Roll back to the moment of impact
    bi.position = bi.previous_position + bi.velocity * t
    bj.position = bj.previous_position + bj.velocity * t

    responded = elastic_response(bi, bj)

    remaining = dt - t
    _advance(bi, remaining)
    _advance(bj, remaining)
    if carry_acceleration:
        _carry_external_drift(bi, bj, dt)
    logger.debug("Collision between bodies %d and %d at t=%.6g", bi.id, bj.id, t)
    return CollisionEvent(bi.id, bj.id, t, "impact", responded)


def resolve_collisions(
    bodies: list[Body],
    dt: float,
    overlap_policy: str = "separate",
    carry_acceleration: bool = False,
) -> list[CollisionEvent]:
    """
    Resolve every pairwise collision of the current step, in i < j order.

    Returns:
        Events in the order they were resolved.
    """
    events = []
    n = len(bodies)
    for i in range(n):
        for j in range(i + 1, n):
            event = resolve_pair(bodies[i], bodies[j], dt, overlap_policy, carry_acceleration)
            if event is not None:
                events.append(event)
    return events
