"""Smoother keeping its settings between calls."""

from typing import Iterable, List, Union

from .settings import SmoothingSettings
from .smoothing import smooth, smooth_strokes
from .stroke import PathStroke


class PathSmoother(object):
    """
    Smooth strokes with the last settings that were given.

    The hyperparameters are the fields of `SmoothingSettings`; those not
    given keep their default values.

    """

    def __init__(self, **kwargs):
        self.settings = SmoothingSettings()
        self.update(**kwargs)

    def __str__(self):
        s = self.settings
        if not s.restrict_to_corners:
            return "Smoother: all corners"

        return f"Smoother: corners {s.angle_min:g} - {s.angle_max:g}"

    def update(self, **kwargs) -> SmoothingSettings:
        """Replace some of the hyperparameters and return the new settings."""
        for key in kwargs:
            if key not in SmoothingSettings._fields:
                raise ValueError(f"unknown hyperparameter: '{key}'")

        params = self.settings._replace(**kwargs)
        self.settings = SmoothingSettings.from_params(*params)

        return self.settings

    def smooth(self, stroke: PathStroke) -> PathStroke:
        return smooth(stroke, self.settings)

    def smooth_strokes(
        self, strokes: Union[PathStroke, Iterable[PathStroke]], verbose: bool = False
    ) -> List[PathStroke]:
        return smooth_strokes(strokes, self.settings, verbose=verbose)
