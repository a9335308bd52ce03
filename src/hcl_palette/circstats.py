"""Statistics over periodic angle data (degrees, period 360).

Hue angles wrap at 0/360, so ordinary means and differences give nonsense
near the seam: the arithmetic mean of 350 and 10 is 180, the circular mean
is 0.  Everything here works on unit vectors or modular arcs instead.
"""

from __future__ import annotations

from typing import Iterable, List, Tuple

import numpy as np

Degrees = float

FULL_TURN: Degrees = 360.0
_EPS = 1e-12


def normalize_angle(a: Degrees) -> Degrees:
    a = float(a) % FULL_TURN
    # tiny negatives round up to exactly 360.0
    return 0.0 if a >= FULL_TURN else a


def circular_mean(angles: Iterable[Degrees]) -> Degrees:
    """Mean direction of ``angles``, in [0, 360).

    The sine and cosine components are averaged separately and the angle is
    recovered with the two-argument arctangent, which keeps the quadrant
    (a plain ``atan(sin/cos)`` folds 90..270 onto -90..90).  When the
    components cancel out, e.g. ``[0, 180]``, there is no mean direction
    and 0 is returned.
    """
    rad = np.deg2rad(np.asarray(list(angles), dtype=np.float64))
    if rad.size == 0:
        raise ValueError("circular mean of an empty sequence")
    s = float(np.mean(np.sin(rad)))
    c = float(np.mean(np.cos(rad)))
    if abs(s) < _EPS and abs(c) < _EPS:
        return 0.0
    return normalize_angle(np.rad2deg(np.arctan2(s, c)))


def circular_distance(a: Degrees, b: Degrees) -> Degrees:
    """Shorter way round between two angles, in [0, 180]."""
    d = abs(float(a) - float(b)) % FULL_TURN
    return min(d, FULL_TURN - d)


def arc_length(start: Degrees, end: Degrees) -> Degrees:
    """Forward (counter-clockwise) arc from ``start`` to ``end``, in [0, 360)."""
    return normalize_angle(float(end) - float(start))


def widest_gap(angles: Iterable[Degrees]) -> Tuple[Degrees, Degrees]:
    """Find the middle of the widest empty arc between ``angles``.

    Returns ``(angle, half_gap)``.  Angles are visited in ascending order;
    for each one the gap to its forward neighbour is considered before the
    gap to its backward neighbour, and a candidate only wins when strictly
    wider than the best so far.  Equal gaps therefore go to the first one
    met, which for ``[0, 90, 180]`` is the backward gap of 0 (midpoint 270).

    No angles gives ``(0.0, 0.0)``.  A single angle, or a set of identical
    angles, leaves one full-turn gap.
    """
    ordered: List[Degrees] = sorted(normalize_angle(a) for a in angles)
    n = len(ordered)
    if n == 0:
        return 0.0, 0.0

    # gaps[i] is the forward arc from ordered[i] to ordered[i + 1] (cyclic)
    gaps = [arc_length(ordered[i], ordered[(i + 1) % n]) for i in range(n)]
    if sum(gaps) < _EPS:
        gaps[-1] = FULL_TURN

    best_half = 0.0
    best_angle = 0.0
    for i, a in enumerate(ordered):
        fwd_half = gaps[i] / 2.0
        bkwd_half = gaps[i - 1] / 2.0
        if fwd_half > best_half:
            best_half = fwd_half
            best_angle = normalize_angle(a + fwd_half)
        if bkwd_half > best_half:
            best_half = bkwd_half
            best_angle = normalize_angle(a - bkwd_half)
    return best_angle, best_half


__all__ = [
    "arc_length",
    "circular_distance",
    "circular_mean",
    "normalize_angle",
    "widest_gap",
]
