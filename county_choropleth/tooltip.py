# county_choropleth/tooltip.py

import logging

from .models import EducationRecord
from .surface import SvgSurface, format_number

logger = logging.getLogger(__name__)

POINTER_OFFSET = 10  # Pixels between the pointer and the panel's top-left corner

class TooltipController:
    """
    Owns the single tooltip panel of a rendered map.

    The panel is created once, hidden, and then toggled between two states: hidden, or
    visible for one region. Entering another region retargets the same panel.
    """

    def __init__(self, surface: SvgSurface):
        self.surface = surface
        self.element = surface.append(surface.root, 'div', {'id': 'tooltip'})
        self.region = None
        self.hide_panel()

    @property
    def visible(self) -> bool:
        return self.region is not None

    def bind(self, region_element) -> None:
        """Hooks a region's pointer events to the page script's enter/leave handlers."""
        self.surface.set_attribute(region_element, 'onmouseenter', 'showTooltip(event)')
        self.surface.set_attribute(region_element, 'onmouseleave', 'hideTooltip()')

    def enter(self, region_element, record: EducationRecord, page_x: float, page_y: float) -> None:
        """
        Shows the panel next to the pointer for the given region.

        Args:
            region_element: The county path the pointer entered.
            record (EducationRecord): The county's joined education record.
            page_x (float): Pointer x position on the page.
            page_y (float): Pointer y position on the page.
        """
        surface = self.surface
        surface.set_style(self.element, 'top', f"{format_number(page_y + POINTER_OFFSET)}px")
        surface.set_style(self.element, 'left', f"{format_number(page_x + POINTER_OFFSET)}px")
        surface.set_attribute(self.element, 'data-education', record.bachelorsOrHigher)
        surface.set_style(self.element, 'background', region_element.get('fill'))
        surface.set_lines(self.element, [
            f"{record.area_name}, {record.state}",
            f"{format_number(record.bachelorsOrHigher)}%",
        ])
        surface.set_style(self.element, 'visibility', 'visible')
        self.region = region_element

    def leave(self) -> None:
        self.hide_panel()

    def hide_panel(self) -> None:
        self.surface.set_style(self.element, 'visibility', 'hidden')
        self.region = None
