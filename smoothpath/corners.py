"""Angle test deciding whether a corner gets smoothed."""

import math

import numpy as np

from .settings import SmoothingSettings


def corner_angle(prev: np.ndarray, cur: np.ndarray, nxt: np.ndarray) -> float:
    """
    Angle at `cur` between the segments coming from `prev` and going to `nxt`.

    Parameters
    ----------
    prev, cur, nxt : np.ndarray
        Three consecutive (x, y) anchor positions.

    Returns
    -------
    float
        The angle in degrees: 180 for a straight line and 0 when the path
        turns back on itself. A zero-length segment gives 180.

    """
    v1x, v1y = cur[0] - prev[0], cur[1] - prev[1]
    v2x, v2y = nxt[0] - cur[0], nxt[1] - cur[1]

    turn = math.atan2(-v1y * v2x + v1x * v2y, v1x * v2x + v1y * v2y)

    return 180 - abs(math.degrees(turn))


def in_angle_range(angle: float, settings: SmoothingSettings) -> bool:
    """Apply the angle filter; both bounds are exclusive."""
    if settings.angle_max > settings.angle_min:
        return settings.angle_min < angle < settings.angle_max
    else:
        return angle < settings.angle_max or angle > settings.angle_min


def classify(
    prev: np.ndarray,
    cur: np.ndarray,
    nxt: np.ndarray,
    settings: SmoothingSettings,
) -> bool:
    """
    Whether the corner at `cur` qualifies for smoothing.

    Every corner qualifies when `settings.restrict_to_corners` is off.

    """
    if not settings.restrict_to_corners:
        return True

    return in_angle_range(corner_angle(prev, cur, nxt), settings)
