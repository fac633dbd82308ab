"""Natural cubic spline fit of anchor coordinates, one axis at a time.

The anchor values `a` are interpolated by a cubic spline whose B-spline
nodes `b` satisfy

    b[i - 1] + 4 b[i] + b[i + 1] = 6 a[i]

at every interior anchor, with `b` equal to `a` at both ends. Each segment
of the spline is then the cubic Bezier curve whose interior control points
sit one and two thirds of the way between consecutive nodes.

Every function works on a 1D array (a single axis) or on an (m, 2) array,
in which case the columns are fitted independently.
"""

from typing import Tuple

import numpy as np

from .matrices import tridiagonal_solve


def pad_closed(values: np.ndarray) -> np.ndarray:
    """Wrap a closed stroke: prepend the last value and append the first two."""
    values = np.asarray(values, dtype=float)

    return np.concatenate((values[-1:], values, values[:2]))


def spline_nodes(values: np.ndarray) -> np.ndarray:
    """
    Calculate the spline nodes of a sequence of anchor values.

    Parameters
    ----------
    values : np.ndarray
        The anchor values, at least 3 of them.

    Returns
    -------
    np.ndarray
        The nodes, same shape as `values`; the first and last entries
        equal the first and last anchor values.

    """
    a = np.asarray(values, dtype=float)
    assert len(a) >= 3, "need at least three anchor values"

    k = len(a) - 2  # interior anchors

    if k == 1:
        interior = 1.5 * a[1:2] - 0.25 * a[0:1] - 0.25 * a[2:3]
    else:
        rhs = 6 * a[1:-1]
        rhs[0] -= a[0]
        rhs[-1] -= a[-1]
        interior = tridiagonal_solve(rhs)

    return np.concatenate((a[:1], interior, a[-1:]))


def control_points(nodes: np.ndarray) -> Tuple[np.ndarray, np.ndarray]:
    """
    Interior Bezier control points of every segment between the nodes.

    Parameters
    ----------
    nodes : np.ndarray
        The spline nodes.

    Returns
    -------
    con1, con2 : np.ndarray
        The first and second control point of each segment (one fewer
        entry than `nodes`).

    """
    b = np.asarray(nodes, dtype=float)

    con1 = (2 * b[:-1] + b[1:]) / 3
    con2 = (b[:-1] + 2 * b[1:]) / 3

    return con1, con2


def solve_axis(
    values: np.ndarray, closed: bool = False
) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
    """
    Fit the spline and compute the control points of each segment.

    Parameters
    ----------
    values : np.ndarray
        The anchor values along one axis (or both, as columns).
    closed : bool, optional
        Whether the stroke wraps around (default is False).

    Returns
    -------
    b : np.ndarray
        The spline nodes (of the padded values when `closed`).
    con1, con2 : np.ndarray
        The control points; one pair per segment, including the segment
        from the last anchor back to the first when `closed`.

    """
    a = pad_closed(values) if closed else np.asarray(values, dtype=float)

    b = spline_nodes(a)
    con1, con2 = control_points(b)

    if closed:
        # Only the segments between real anchors are kept
        con1, con2 = con1[1:-1], con2[1:-1]

    return b, con1, con2
