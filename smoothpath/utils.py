"""Utility functions, varied."""

from collections.abc import Iterable

import numpy as np

from .dtypes import Neighbours


def _get_iterable(x):
    """Utility function."""
    out = x if isinstance(x, Iterable) and not isinstance(x, str) else (x,)

    return out


def neighbours(points: np.ndarray, i: int, closed: bool) -> Neighbours:
    """
    Previous and next point around index `i`.

    Parameters
    ----------
    points : np.ndarray
        The (x, y) anchor coordinates, one row per anchor.
    i : int
        The index of the corner.
    closed : bool
        Whether the indices wrap around.

    Returns
    -------
    (np.ndarray, np.ndarray) or None
        None for the two endpoints of an open stroke, which have no
        neighbour on one side.

    """
    n = len(points)

    if not closed and (i == 0 or i == n - 1):
        return None

    return points[(i - 1) % n], points[(i + 1) % n]
