# county_choropleth/regions.py

import logging
from typing import List, Sequence, Tuple

from .colors import ColorScale
from .config import Config
from .join import JoinIndex
from .models import CountyGeometry
from .surface import SvgSurface, format_number, path_data
from .tooltip import TooltipController

logger = logging.getLogger(__name__)

def _group(surface: SvgSurface, group_id: str, offset: Tuple[float, float]):
    return surface.append(surface.svg, 'g', {
        'id': group_id,
        'transform': f"translate({format_number(offset[0])}, {format_number(offset[1])})",
    })

def render_counties(surface: SvgSurface, counties: Sequence[CountyGeometry], index: JoinIndex,
                    scale: ColorScale, tooltip: TooltipController, offset: Tuple[float, float]) -> List:
    """
    Draws one filled path per county, colored by its education percentage.

    Every county is joined before anything is drawn, so a missing education record
    raises JoinMismatchError with the surface untouched.

    Returns:
        List: The county path elements, in geometry order.
    """
    joined = [(county, index.lookup(county.id)) for county in counties]

    group = _group(surface, 'counties', offset)
    elements = []
    for county, record in joined:
        element = surface.append(group, 'path', {
            'class': 'county',
            'd': path_data(county.geometry),
            'data-fips': county.id,
            'data-education': record.bachelorsOrHigher,
            'data-name': record.area_name,
            'data-state': record.state,
            'fill': scale.color_of(record.bachelorsOrHigher),
        })
        tooltip.bind(element)
        elements.append(element)
    logger.info(f"Rendered {len(elements)} counties.")
    return elements

def render_states(surface: SvgSurface, boundaries: Sequence[Tuple[int, object]],
                  offset: Tuple[float, float], stroke: str = None) -> List:
    """
    Draws the state outlines on top of the counties. Outlines are unfilled and carry no data.
    """
    group = _group(surface, 'states', offset)
    elements = [
        surface.append(group, 'path', {
            'class': 'state',
            'd': path_data(geometry),
            'fill': 'none',
            'stroke': stroke or Config.STATE_STROKE_COLOR,
        })
        for _, geometry in boundaries
    ]
    logger.info(f"Rendered {len(elements)} state boundaries.")
    return elements
