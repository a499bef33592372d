"""
Force terms: convert chain geometry into per-point velocity changes.

Every term is a pure function of positions and parameters returning an
array of velocity deltas with the same shape as `points`. The caller
accumulates them into the chain before integrating, so terms never see
each other's output within a tick.

Terms:
- spring_corrections: single-step half correction toward target lengths
- head_reach_correction: head spring with a forward reach offset
- repulsion_corrections: keeps non-adjacent points from overlapping
- contraction_propulsion: forward thrust from shrinking segments
- head_lead: standing forward velocity on the head and its followers

NOTE: the spring term is ONE relaxation step per tick, not an iterative
solve. Convergence comes from repeated ticks under damping.
"""

from __future__ import annotations

import numpy as np

# Below target / PROXIMITY_RATIO the spring correction is boosted
PROXIMITY_RATIO = 5.0

# Points after the head that receive part of the head lead
HEAD_LEAD_SPAN = 3


def spring_corrections(
    points: np.ndarray,
    target_lengths: np.ndarray,
    restore_force: float,
    dt: float,
) -> np.ndarray:
    """
    Pull each follower point toward its target distance from its leader.

    For each pair (i-1, i):
        target_pos = p[i-1] + unit(p[i] - p[i-1]) * target[i-1]
        dv[i] = (target_pos - p[i]) * 0.5 * restore_force * dt * boost

    boost = target / (5 * dist) when the segment has collapsed below a
    fifth of its target, else 1. Zero-length segments are skipped.

    Args:
        points: Positions, shape (n, 2)
        target_lengths: Desired segment lengths, shape (n - 1,)
        restore_force: Correction gain
        dt: Time step

    Returns:
        Velocity deltas, shape (n, 2). Row 0 (the head) is always zero.
    """
    deltas = np.zeros_like(points)

    for i in range(1, len(points)):
        direction = points[i] - points[i - 1]
        dist = np.hypot(direction[0], direction[1])
        if dist == 0.0:
            continue

        target = target_lengths[i - 1]
        target_pos = points[i - 1] + direction / dist * target
        correction = (target_pos - points[i]) * 0.5

        if dist < target / PROXIMITY_RATIO:
            boost = target / (PROXIMITY_RATIO * dist)
        else:
            boost = 1.0

        deltas[i] += correction * (restore_force * dt * boost)

    return deltas


def head_reach_correction(
    points: np.ndarray,
    head_target_length: float,
    direction: np.ndarray,
    head_forward_force: float,
    restore_force: float,
    dt: float,
) -> np.ndarray:
    """
    Spring the head away from point 1, reaching along `direction`.

    The head's target is the usual spring target plus
    `direction * head_forward_force`. Pass a zero reach to get a plain
    spring on the head segment.

    Returns:
        Velocity deltas, shape (n, 2), non-zero only in row 0.
    """
    deltas = np.zeros_like(points)

    offset = points[0] - points[1]
    dist = np.hypot(offset[0], offset[1])
    if dist == 0.0:
        return deltas

    target_pos = points[1] + offset / dist * head_target_length + direction * head_forward_force
    correction = (target_pos - points[0]) * 0.5
    deltas[0] = correction * (restore_force * dt)
    return deltas


def repulsion_corrections(
    points: np.ndarray,
    nominal_length: float,
    strength: float,
    dt: float,
    neighbor_divider: float = 10.0,
    divider: float = 5.0,
) -> np.ndarray:
    """
    Push every non-head point away from points that crowd it.

    Point i > 0 is pushed along unit(p[i] - p[j]) when
    |p[i] - p[j]| < nominal_length / d, with d = neighbor_divider for
    topological neighbors (|i - j| == 1) and d = divider otherwise.
    The push scales with threshold / distance, so it grows as the gap
    closes. Coincident points have no direction and are skipped.

    Args:
        points: Positions, shape (n, 2)
        nominal_length: Length scale of the chain (mean natural length)
        strength: Repulsion gain
        dt: Time step
        neighbor_divider: Threshold divider for adjacent points
        divider: Threshold divider for non-adjacent points

    Returns:
        Velocity deltas, shape (n, 2). Row 0 (the head) is always zero.
    """
    deltas = np.zeros_like(points)
    n = len(points)

    for i in range(1, n):
        for j in range(n):
            if j == i:
                continue

            away = points[i] - points[j]
            dist = np.hypot(away[0], away[1])
            if dist == 0.0:
                continue

            d = neighbor_divider if abs(i - j) == 1 else divider
            threshold = nominal_length / d
            if dist >= threshold:
                continue

            deltas[i] += away / dist * (threshold / dist) * (strength * dt)

    return deltas


def contraction_propulsion(
    points: np.ndarray,
    target_lengths: np.ndarray,
    direction: np.ndarray,
    contraction_strength: float,
    dt: float,
) -> np.ndarray:
    """
    Forward thrust from segments that are longer than their target.

    A segment i whose length exceeds its target is contracting. It adds
    direction * contraction_strength * |excess| * dt, scaled by
    (i + 1) / (n - 1) so rear segments push harder, split 30/70 between
    its front and rear point.

    Returns:
        Velocity deltas, shape (n, 2).
    """
    deltas = np.zeros_like(points)
    n = len(points)

    for i in range(n - 1):
        segment = points[i + 1] - points[i]
        current = np.hypot(segment[0], segment[1])
        if current == 0.0:
            continue

        length_diff = target_lengths[i] - current
        if length_diff >= 0:
            continue

        thrust = direction * (contraction_strength * abs(length_diff) * dt)
        factor = (i + 1) / (n - 1)
        deltas[i] += thrust * (factor * 0.3)
        deltas[i + 1] += thrust * (factor * 0.7)

    return deltas


def head_lead(
    n_points: int,
    direction: np.ndarray,
    head_forward_force: float,
    influence: float,
    dt: float,
) -> np.ndarray:
    """
    Standing forward push on the head, fading over the next two points.

    Point i in 1..2 receives head_push * influence * (1 - i / 3).

    Returns:
        Velocity deltas, shape (n_points, 2).
    """
    deltas = np.zeros((n_points, 2), dtype=np.float64)
    push = direction * (head_forward_force * dt)
    deltas[0] += push

    for i in range(1, min(HEAD_LEAD_SPAN, n_points)):
        deltas[i] += push * (influence * (1.0 - i / HEAD_LEAD_SPAN))

    return deltas


def integrate(
    points: np.ndarray,
    velocities: np.ndarray,
    dt: float,
    dampening: float,
) -> None:
    """
    Explicit step in place: p += v * dt, then v *= dampening.

    Stable for dampening < 1 since every step bleeds energy.
    """
    points += velocities * dt
    velocities *= dampening
