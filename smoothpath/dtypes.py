"""Common dtypes."""

from typing import Iterable, NamedTuple, Optional, Tuple
import numpy as np


class Point(NamedTuple):
    x: float
    y: float


class AnchorPoint(NamedTuple):
    """An anchor with the control points on either side of it."""

    control_in: Point
    anchor: Point
    control_out: Point


Neighbours = Optional[Tuple[np.ndarray, np.ndarray]]
FlatStroke = Iterable[float]
