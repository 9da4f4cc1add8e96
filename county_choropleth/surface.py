# county_choropleth/surface.py

import xml.etree.ElementTree as ET
from typing import Dict, List, Optional, Sequence

SVG_NAMESPACE = 'http://www.w3.org/2000/svg'

def format_number(value) -> str:
    """
    Formats a number the way it should read in markup and labels: integral floats drop
    their trailing '.0' and everything else keeps its shortest repr.
    """
    if isinstance(value, float):
        if value.is_integer():
            return str(int(value))
        return repr(value)
    return str(value)

def path_data(geometry, precision: int = 3) -> str:
    """
    Builds an SVG path 'd' string for a planar shapely geometry. Points and empty
    geometries produce an empty string.
    """
    if geometry is None or geometry.is_empty:
        return ''

    def ring(coords, closed):
        points = [f"{format_number(round(x, precision))},{format_number(round(y, precision))}"
                  for x, y in coords]
        return 'M' + 'L'.join(points) + ('Z' if closed else '')

    kind = geometry.geom_type
    if kind == 'Polygon':
        return ''.join(ring(r.coords, True) for r in [geometry.exterior, *geometry.interiors])
    if kind == 'LineString':
        return ring(geometry.coords, False)
    if kind in ('MultiPolygon', 'MultiLineString', 'GeometryCollection'):
        return ''.join(path_data(part, precision) for part in geometry.geoms)
    return ''

class SvgSurface:
    """
    A vector drawing surface backed by an ElementTree.

    The surface owns a `div#canvas` root that holds the `svg#chart` element; HTML
    elements such as the tooltip panel are appended to the root next to the SVG.
    """

    def __init__(self, width: float, height: float):
        self.width = width
        self.height = height
        self.root = ET.Element('div', {'id': 'canvas'})
        self.svg = self.append(self.root, 'svg', {
            'xmlns': SVG_NAMESPACE,
            'id': 'chart',
            'width': width,
            'height': height,
        })

    def append(self, parent: ET.Element, tag: str, attributes: Optional[Dict] = None,
               text: Optional[str] = None) -> ET.Element:
        element = ET.SubElement(parent, tag)
        for name, value in (attributes or {}).items():
            self.set_attribute(element, name, value)
        if text is not None:
            element.text = text
        return element

    def append_text(self, parent: ET.Element, text: str, attributes: Optional[Dict] = None) -> ET.Element:
        return self.append(parent, 'text', attributes, text)

    def set_attribute(self, element: ET.Element, name: str, value) -> None:
        element.set(name, format_number(value))

    def styles(self, element: ET.Element) -> Dict[str, str]:
        declarations = [item.split(':', 1) for item in element.get('style', '').split(';') if ':' in item]
        return {key.strip(): value.strip() for key, value in declarations}

    def set_style(self, element: ET.Element, name: str, value) -> None:
        styles = self.styles(element)
        styles[name] = format_number(value)
        element.set('style', '; '.join(f"{key}: {val}" for key, val in styles.items()))

    def set_lines(self, element: ET.Element, lines: Sequence[str]) -> None:
        """Replaces the element's content with the given lines separated by <br> tags."""
        for child in list(element):
            element.remove(child)
        element.text = lines[0] if lines else None
        for line in lines[1:]:
            br = ET.SubElement(element, 'br')
            br.tail = line

    def find_all(self, tag: Optional[str] = None, class_name: Optional[str] = None) -> List[ET.Element]:
        return [
            element for element in self.root.iter(tag)
            if class_name is None or class_name in element.get('class', '').split()
        ]

    def find_by_id(self, element_id: str) -> Optional[ET.Element]:
        for element in self.root.iter():
            if element.get('id') == element_id:
                return element
        return None

    def to_markup(self) -> str:
        return ET.tostring(self.root, encoding='unicode', method='html')
