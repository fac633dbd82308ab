"""smoothpath - Natural cubic spline smoothing of Bezier path strokes."""

from smoothpath.dtypes import Point, AnchorPoint

from smoothpath.stroke import PathStroke

from smoothpath.settings import SmoothingSettings

from smoothpath.corners import corner_angle, in_angle_range, classify

from smoothpath.matrices import tridiagonal_solve, spline_matrix

from smoothpath.spline import (
    pad_closed,
    spline_nodes,
    control_points,
    solve_axis,
)

from smoothpath.smoothing import smooth, smooth_strokes, corner_mask

from smoothpath.proc import PathSmoother
