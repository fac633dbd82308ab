"""Settings that select which corners get smoothed."""

from typing import NamedTuple
import warnings


class SmoothingSettings(NamedTuple):
    """
    Corner filter used when smoothing a stroke.

    Attributes
    ----------
    restrict_to_corners : bool
        Only smooth the corners whose angle passes the filter (default is
        False, every corner is smoothed).
    angle_min, angle_max : float
        Bounds of the filter in degrees, within [0, 180]. When
        `angle_max > angle_min` an angle must lie strictly between them,
        otherwise it must lie strictly outside [angle_max, angle_min].

    """

    restrict_to_corners: bool = False
    angle_min: float = 60.0
    angle_max: float = 120.0

    @classmethod
    def from_params(
        cls, restrict_to_corners: bool, angle_min: float, angle_max: float
    ) -> "SmoothingSettings":
        """Validate explicit parameters, as given by a non-interactive caller."""
        for name, val in (("angle_min", angle_min), ("angle_max", angle_max)):
            if not 0 <= val <= 180:
                raise ValueError(f"{name} must be within [0, 180], got {val}")

        if restrict_to_corners and angle_min == angle_max:
            warnings.warn(
                f"angle_min equals angle_max ({angle_min}): every corner except "
                "that exact angle will be smoothed"
            )

        return cls(bool(restrict_to_corners), float(angle_min), float(angle_max))
