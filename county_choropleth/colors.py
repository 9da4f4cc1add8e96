# county_choropleth/colors.py

import logging
import math
from typing import Iterable, Tuple

import numpy as np
from plotly.colors import find_intermediate_color, hex_to_rgb

from .config import Config
from .models import EducationRecord

logger = logging.getLogger(__name__)

def rgb_to_hex(rgb: Tuple[float, float, float]) -> str:
    """Formats an RGB triple as '#rrggbb', rounding each channel half-up."""
    return '#' + ''.join(f"{int(math.floor(channel + 0.5)):02x}" for channel in rgb)

class ColorScale:
    """
    Piecewise-linear color scale with three control points.

    The domain is (minimum, mean, maximum) of the education percentages and the range is
    (low, pivot, high). Values between two control points are interpolated per RGB channel;
    values outside [minimum, maximum] are clamped. Because the pivot sits at the mean rather
    than the midpoint, the two halves of the scale stretch by different amounts.
    """

    def __init__(self, minimum: float, mean: float, maximum: float,
                 low_color: str = None, pivot_color: str = None, high_color: str = None):
        if not minimum <= mean <= maximum:
            raise ValueError(f"Control points must be ordered: {minimum}, {mean}, {maximum}.")
        self.minimum = minimum
        self.mean = mean
        self.maximum = maximum
        self.low_color = (low_color or Config.LOW_COLOR).lower()
        self.pivot_color = (pivot_color or Config.PIVOT_COLOR).lower()
        self.high_color = (high_color or Config.HIGH_COLOR).lower()
        self._low = hex_to_rgb(self.low_color)
        self._pivot = hex_to_rgb(self.pivot_color)
        self._high = hex_to_rgb(self.high_color)

    @classmethod
    def from_values(cls, values: Iterable[float], **colors) -> 'ColorScale':
        values = np.asarray(list(values), dtype=float)
        if values.size == 0:
            raise ValueError("Cannot build a color scale from an empty dataset.")
        minimum, mean, maximum = float(values.min()), float(values.mean()), float(values.max())
        # Guard the ordering against float error in the mean of identical values.
        mean = min(max(mean, minimum), maximum)
        logger.info(f"Color scale control points: min={minimum}, mean={mean:.2f}, max={maximum}.")
        return cls(minimum, mean, maximum, **colors)

    @classmethod
    def from_records(cls, records: Iterable[EducationRecord], **colors) -> 'ColorScale':
        return cls.from_values((record.bachelorsOrHigher for record in records), **colors)

    def color_of(self, percentage: float) -> str:
        if percentage <= self.minimum:
            return self.low_color
        if percentage >= self.maximum:
            return self.high_color
        if percentage == self.mean:
            return self.pivot_color

        if percentage < self.mean:
            start, end = self._low, self._pivot
            t = (percentage - self.minimum) / (self.mean - self.minimum)
        else:
            start, end = self._pivot, self._high
            t = (percentage - self.mean) / (self.maximum - self.mean)
        return rgb_to_hex(find_intermediate_color(start, end, t, colortype='tuple'))
