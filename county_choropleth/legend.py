# county_choropleth/legend.py

import logging
from decimal import Decimal, ROUND_HALF_UP
from typing import List

from .colors import ColorScale
from .surface import SvgSurface, format_number

logger = logging.getLogger(__name__)

SWATCH_WIDTH = 10
LABEL_OFFSET = 15  # Horizontal gap between a swatch and its label

def round_one_decimal(value: float) -> float:
    """Rounds to one decimal place, ties away from zero."""
    return float(Decimal(value).quantize(Decimal('0.1'), rounding=ROUND_HALF_UP))

def legend_thresholds(minimum: float, maximum: float, step_count: int = 10) -> List[float]:
    """
    Computes the legend's threshold values.

    Args:
        minimum (float): Lowest percentage in the dataset.
        maximum (float): Highest percentage in the dataset.
        step_count (int): Number of legend swatches.

    Returns:
        List[float]: `step_count + 1` non-decreasing values: the minimum, the evenly spaced
        interior steps rounded to one decimal, and the maximum.

    Raises:
        ValueError: If step_count is not a positive integer or minimum exceeds maximum.
    """
    if isinstance(step_count, bool) or not isinstance(step_count, int) or step_count <= 0:
        raise ValueError(f"Legend step count must be a positive integer, got {step_count!r}.")
    if minimum > maximum:
        raise ValueError(f"Legend minimum {minimum} exceeds maximum {maximum}.")

    step_size = (maximum - minimum) / step_count
    interior = [round_one_decimal(i * step_size + minimum) for i in range(1, step_count)]
    # Rounding can step outside the data range when the range is narrower than 0.1.
    interior = [min(max(value, minimum), maximum) for value in interior]
    return [minimum] + interior + [maximum]

def render_legend(surface: SvgSurface, scale: ColorScale, thresholds: List[float],
                  x: float, y: float, height: float):
    """
    Draws the legend with its lowest value at (x, y), stacking swatches upwards.

    One swatch is drawn per threshold except the last, filled with the color of its lower
    bound, and one label per threshold including the maximum.

    Returns:
        The legend group element.
    """
    swatch_count = len(thresholds) - 1
    swatch_height = height / swatch_count
    legend = surface.append(surface.svg, 'g', {
        'id': 'legend',
        'transform': f"translate({format_number(x)}, {format_number(y)})",
    })

    for i, value in enumerate(thresholds[:-1]):
        surface.append(legend, 'rect', {
            'class': 'legend-rect',
            'y': -i * swatch_height - swatch_height,
            'width': SWATCH_WIDTH,
            'height': swatch_height,
            'fill': scale.color_of(value),
            'stroke': 'white',
            'data-value': value,
        })

    axis = surface.append(legend, 'g', {'id': 'legend-axis'})
    for i, value in enumerate(thresholds):
        surface.append_text(axis, f"{format_number(value)}%", {
            'class': 'legend-label',
            'y': -i * swatch_height,
            'transform': f"translate({LABEL_OFFSET}, 0)",
        })

    logger.info(f"Legend rendered with {swatch_count} swatches.")
    return legend
