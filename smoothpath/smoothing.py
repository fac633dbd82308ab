"""Path smoothing functionality."""

from typing import Iterable, List, Union

import numpy as np

from .corners import classify
from .settings import SmoothingSettings
from .spline import solve_axis
from .stroke import PathStroke
from .utils import _get_iterable, neighbours


def corner_mask(stroke: PathStroke, settings: SmoothingSettings) -> np.ndarray:
    """
    Flag the anchors whose control points will be replaced.

    Parameters
    ----------
    stroke : PathStroke
        The input stroke.
    settings : SmoothingSettings
        The corner filter.

    Returns
    -------
    np.ndarray
        Boolean array with one entry per anchor.

    """
    anchors = stroke.anchors
    out = np.zeros(len(anchors), dtype=bool)

    for i, cur in enumerate(anchors):
        nbrs = neighbours(anchors, i, stroke.closed)

        if nbrs is None:
            # The ends of an open stroke have no angle to filter on
            out[i] = not settings.restrict_to_corners
        else:
            prev, nxt = nbrs
            out[i] = classify(prev, cur, nxt, settings)

    return out


def smooth(stroke: PathStroke, settings: SmoothingSettings = None) -> PathStroke:
    """
    Return the stroke interpolated by a natural cubic spline.

    The anchors stay in place; the control points around every corner that
    passes the filter in `settings` are replaced so that the curve is
    twice continuously differentiable there. Strokes with fewer than 3
    anchors are returned unchanged.

    Parameters
    ----------
    stroke : PathStroke
        The input stroke, which is not modified.
    settings : SmoothingSettings, optional
        The corner filter (default smooths every corner).

    Returns
    -------
    PathStroke
        A new stroke.

    """
    if settings is None:
        settings = SmoothingSettings()

    out = stroke.copy()
    n = len(stroke)

    if n < 3:
        return out

    # Both axes are fitted at once, column-wise
    _, con1, con2 = solve_axis(stroke.anchors, closed=stroke.closed)
    mask = corner_mask(stroke, settings)

    # Segment j goes from anchor j to anchor j + 1 (mod n when closed)
    nb_segments = len(con1)
    idx = np.arange(n)

    has_out = mask & (idx < nb_segments)
    out.points[has_out, 2] = con1[idx[has_out]]

    seg_in = idx - 1 if not stroke.closed else (idx - 1) % n
    has_in = mask & (seg_in >= 0)
    out.points[has_in, 0] = con2[seg_in[has_in]]

    return out


def smooth_strokes(
    strokes: Union[PathStroke, Iterable[PathStroke]],
    settings: SmoothingSettings = None,
    verbose: bool = False,
) -> List[PathStroke]:
    """
    Smooth every stroke of a path.

    Parameters
    ----------
    strokes : PathStroke or Iterable[PathStroke]
        The strokes making up the path.
    settings : SmoothingSettings, optional
        The corner filter, shared by all strokes.
    verbose : bool, optional
        Print how many strokes were too short to smooth (default is False).

    Returns
    -------
    List[PathStroke]

    """
    out = [smooth(s, settings) for s in _get_iterable(strokes)]

    if verbose:
        skipped = sum(len(s) < 3 for s in out)
        print(f"Smoothed: {len(out) - skipped} strokes ({skipped} too short)")

    return out
