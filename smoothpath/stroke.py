"""Container for a single Bezier stroke."""

import numpy as np

from .dtypes import AnchorPoint, FlatStroke, Point


class PathStroke(object):
    """
    A sequence of anchors, each with an incoming and an outgoing control point.

    The outgoing control point of anchor `i` and the incoming control point
    of anchor `i + 1` are the interior control points of the Bezier segment
    joining them. When `closed`, the last anchor is joined to the first.

    Attributes
    ----------
    points : np.ndarray
        Array of shape (n, 3, 2); for each anchor the rows are the incoming
        control point, the anchor and the outgoing control point.
    closed : bool

    """

    def __init__(self, points: np.ndarray, closed: bool = False):
        points = np.array(points, dtype=float)

        if points.ndim != 3 or points.shape[1:] != (3, 2):
            raise ValueError(f"points must have shape (n, 3, 2), got {points.shape}")

        self.points = points
        self.closed = bool(closed)

    @classmethod
    def from_flat(cls, values: FlatStroke, closed: bool = False) -> "PathStroke":
        """
        Build a stroke from 6 scalars per anchor.

        The order is in.x, in.y, anchor.x, anchor.y, out.x, out.y.

        """
        values = np.asarray(values, dtype=float).ravel()

        if len(values) % 6:
            raise ValueError(f"expected 6 values per anchor, got {len(values)} values")

        return cls(values.reshape(-1, 3, 2), closed=closed)

    @classmethod
    def from_anchors(cls, anchors: np.ndarray, closed: bool = False) -> "PathStroke":
        """Build a polyline stroke, every control point on its anchor."""
        anchors = np.asarray(anchors, dtype=float)

        return cls(np.repeat(anchors[:, np.newaxis, :], 3, axis=1), closed=closed)

    def __len__(self):
        return len(self.points)

    def __getitem__(self, i) -> AnchorPoint:
        return AnchorPoint(*(Point(*map(float, row)) for row in self.points[i]))

    def __eq__(self, other):
        if not isinstance(other, PathStroke):
            return NotImplemented

        return self.closed == other.closed and np.array_equal(self.points, other.points)

    def __repr__(self):
        kind = "closed" if self.closed else "open"
        return f"PathStroke({len(self)} anchors, {kind})"

    @property
    def anchors(self) -> np.ndarray:
        return self.points[:, 1]

    @property
    def controls_in(self) -> np.ndarray:
        return self.points[:, 0]

    @property
    def controls_out(self) -> np.ndarray:
        return self.points[:, 2]

    def to_flat(self) -> np.ndarray:
        """Inverse of `from_flat`."""
        return self.points.ravel().copy()

    def copy(self) -> "PathStroke":
        return PathStroke(self.points, closed=self.closed)
