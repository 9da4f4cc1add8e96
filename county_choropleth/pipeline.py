# county_choropleth/pipeline.py

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List

from .colors import ColorScale
from .config import Config
from .exceptions import JoinMismatchError
from .join import JoinIndex
from .legend import legend_thresholds, render_legend
from .loader import parse_education_records
from .regions import render_counties, render_states
from .surface import SvgSurface, format_number
from .tooltip import TooltipController
from .topology import TopologyDecoder, decode_counties, decode_state_boundaries

logger = logging.getLogger(__name__)

TITLE = "Higher Education Rates by US county"
SUBTITLE = "Adults age above 24 with a bachelor's degree or higher (2010-2014)"

@dataclass
class Layout:
    """Canvas geometry: the map area plus padding on each side."""
    map_width: float = 1000
    map_height: float = 600
    padding: Dict[str, float] = field(default_factory=lambda: {'top': 40, 'left': 20, 'right': 60, 'bottom': 20})

    @property
    def width(self) -> float:
        return self.map_width + self.padding['left'] + self.padding['right']

    @property
    def height(self) -> float:
        return self.map_height + self.padding['top'] + self.padding['bottom']

    @property
    def map_offset(self):
        return (self.padding['left'], self.padding['top'])

@dataclass
class ChoroplethMap:
    """Everything produced by one render pass."""
    surface: SvgSurface
    scale: ColorScale
    index: JoinIndex
    tooltip: TooltipController
    thresholds: List[float]
    counties: List[Any]
    states: List[Any]

def _render_heading(surface: SvgSurface, scale: ColorScale, layout: Layout) -> None:
    center = format_number(layout.width / 2)
    top = layout.padding['top']
    surface.append_text(surface.svg, TITLE, {
        'id': 'title',
        'transform': f"translate({center}, {format_number(top)})",
        'text-anchor': 'middle',
    })
    surface.append_text(surface.svg, SUBTITLE, {
        'id': 'description',
        'class': 'description',
        'transform': f"translate({center}, {format_number(1.7 * top)})",
        'text-anchor': 'middle',
    })
    summary = (f"Lowest {format_number(scale.minimum)}% - Mean: {scale.mean:.1f}% "
               f"- Highest: {format_number(scale.maximum)}%")
    surface.append_text(surface.svg, summary, {
        'class': 'description',
        'transform': f"translate({center}, {format_number(2.2 * top)})",
        'text-anchor': 'middle',
    })

def render_choropleth(education_data: List[Dict[str, Any]], topology: Dict[str, Any],
                      legend_step_count: int = None, layout: Layout = None,
                      colors: Dict[str, str] = None) -> ChoroplethMap:
    """
    Joins the education dataset to the county topology and draws the full map.

    Args:
        education_data (List[Dict]): Raw education records as served by the dataset URL.
        topology (Dict): TopoJSON payload with a `counties` object.
        legend_step_count (int): Number of legend swatches. Defaults to Config.LEGEND_STEP_COUNT.
        layout (Layout): Canvas geometry. Defaults to the 1000x600 map with standard padding.
        colors (Dict[str, str]): Optional low_color / pivot_color / high_color overrides.

    Returns:
        ChoroplethMap: The rendered surface and the pieces used to build it.

    Raises:
        JoinMismatchError: If any county has no education record. Nothing is rendered.
        TopologyError: If the topology cannot be decoded.
    """
    layout = layout or Layout()
    step_count = legend_step_count if legend_step_count is not None else Config.LEGEND_STEP_COUNT

    records = parse_education_records(education_data)
    index = JoinIndex.from_records(records)
    decoder = TopologyDecoder(topology)
    counties = decode_counties(topology, decoder=decoder)

    missing = [county.id for county in counties if county.id not in index]
    if missing:
        logger.error(f"{len(missing)} counties have no education record: {missing}")
        raise JoinMismatchError(f"No education record for county FIPS {', '.join(map(str, missing))}.")

    boundaries = decode_state_boundaries(topology, decoder=decoder)
    scale = ColorScale.from_records(records, **(colors or {}))
    thresholds = legend_thresholds(scale.minimum, scale.maximum, step_count)

    surface = SvgSurface(layout.width, layout.height)
    _render_heading(surface, scale, layout)
    tooltip = TooltipController(surface)
    render_legend(
        surface, scale, thresholds,
        x=layout.width - layout.padding['left'] - layout.padding['right'],
        y=layout.height - layout.padding['bottom'],
        height=layout.map_height,
    )
    county_elements = render_counties(surface, counties, index, scale, tooltip, layout.map_offset)
    state_elements = render_states(surface, boundaries, layout.map_offset)

    logger.info("Choropleth map rendered.")
    return ChoroplethMap(
        surface=surface,
        scale=scale,
        index=index,
        tooltip=tooltip,
        thresholds=thresholds,
        counties=county_elements,
        states=state_elements,
    )
