# county_choropleth/topology.py

"""
Decoding of TopoJSON payloads into shapely geometries.

TopoJSON stores every shared border once as an "arc" and describes each shape as a list
of arc references. A negative reference ``~i`` means arc ``i`` walked backwards. When the
topology is quantized, arc positions are delta-encoded integers that the ``transform``
block scales and translates back into coordinates.

The county payload served by freeCodeCamp is already projected to screen space, so the
decoded coordinates are drawn as-is.
"""

import logging
from collections import Counter, OrderedDict
from typing import Any, Dict, List, Sequence, Tuple

from shapely.geometry import (
    GeometryCollection, LineString, MultiLineString, MultiPolygon, Point, Polygon
)

from .exceptions import TopologyError
from .models import CountyGeometry

logger = logging.getLogger(__name__)

Position = Tuple[float, float]

def decode_arcs(topology: Dict[str, Any]) -> List[List[Position]]:
    """
    Returns the topology's arcs as absolute coordinates.

    Raises:
        TopologyError: If the payload has no arcs.
    """
    if 'arcs' not in topology:
        raise TopologyError("Topology has no 'arcs' member.")

    transform = topology.get('transform')
    if not transform:
        return [[(float(p[0]), float(p[1])) for p in arc] for arc in topology['arcs']]

    (sx, sy), (tx, ty) = transform['scale'], transform['translate']
    decoded = []
    for arc in topology['arcs']:
        x = y = 0
        points = []
        for position in arc:
            x += position[0]
            y += position[1]
            points.append((x * sx + tx, y * sy + ty))
        decoded.append(points)
    return decoded

class TopologyDecoder:
    """
    Turns the geometry objects of one topology into shapely geometries.
    """

    def __init__(self, topology: Dict[str, Any]):
        self.topology = topology
        self.arcs = decode_arcs(topology)
        self.transform = topology.get('transform')

    def object(self, name: str) -> Dict[str, Any]:
        try:
            return self.topology['objects'][name]
        except (KeyError, TypeError):
            raise TopologyError(f"Topology has no '{name}' object.") from None

    def members(self, name: str) -> List[Dict[str, Any]]:
        obj = self.object(name)
        if obj.get('type') == 'GeometryCollection':
            return obj.get('geometries', [])
        return [obj]

    def _arc(self, index: int) -> List[Position]:
        try:
            if index < 0:
                return list(reversed(self.arcs[~index]))
            return self.arcs[index]
        except IndexError:
            raise TopologyError(f"Arc reference {index} is out of range.") from None

    def line(self, indexes: Sequence[int]) -> List[Position]:
        # Consecutive arcs share their junction point; keep it once.
        points = []
        for index in indexes:
            arc = self._arc(index)
            points.extend(arc[1:] if points else arc)
        return points

    def _point(self, position) -> Position:
        if self.transform:
            (sx, sy), (tx, ty) = self.transform['scale'], self.transform['translate']
            return (position[0] * sx + tx, position[1] * sy + ty)
        return (float(position[0]), float(position[1]))

    def _polygon(self, rings) -> Polygon:
        rings = [self.line(ring) for ring in rings]
        if not rings:
            return Polygon()
        return Polygon(rings[0], rings[1:])

    def geometry(self, obj: Dict[str, Any]):
        """
        Decodes one TopoJSON geometry object. Null geometries decode to None.
        """
        kind = obj.get('type')
        try:
            if kind is None:
                return None
            if kind == 'Polygon':
                return self._polygon(obj['arcs'])
            if kind == 'MultiPolygon':
                return MultiPolygon([self._polygon(rings) for rings in obj['arcs']])
            if kind == 'LineString':
                return LineString(self.line(obj['arcs']))
            if kind == 'MultiLineString':
                return MultiLineString([self.line(arcs) for arcs in obj['arcs']])
            if kind == 'Point':
                return Point(self._point(obj['coordinates']))
            if kind == 'GeometryCollection':
                parts = [self.geometry(member) for member in obj.get('geometries', [])]
                return GeometryCollection([part for part in parts if part is not None])
        except (KeyError, ValueError) as e:
            raise TopologyError(f"Cannot decode {kind} geometry {obj.get('id')}: {e}") from e
        raise TopologyError(f"Unsupported geometry type: {kind}")

def _arc_ids(arcs) -> List[int]:
    """Flattens the nested arc references of a geometry, normalising reversed arcs."""
    if isinstance(arcs, int):
        return [arcs if arcs >= 0 else ~arcs]
    ids = []
    for item in arcs:
        ids.extend(_arc_ids(item))
    return ids

def decode_counties(topology: Dict[str, Any], object_name: str = 'counties',
                    decoder: TopologyDecoder = None) -> List[CountyGeometry]:
    """
    Decodes the per-county shapes of the topology's `counties` object. Pass `decoder` to
    reuse arcs already decoded for the same topology.

    Raises:
        TopologyError: If the object is missing or a member is malformed.
    """
    decoder = decoder or TopologyDecoder(topology)
    counties = []
    for member in decoder.members(object_name):
        if 'id' not in member:
            raise TopologyError(f"A '{object_name}' geometry has no id.")
        try:
            county_id = int(member['id'])
        except (TypeError, ValueError):
            raise TopologyError(f"County id {member['id']!r} is not numeric.") from None
        counties.append(CountyGeometry(id=county_id, geometry=decoder.geometry(member)))
    logger.info(f"Decoded {len(counties)} county geometries.")
    return counties

def decode_state_boundaries(topology: Dict[str, Any], object_name: str = 'counties',
                            decoder: TopologyDecoder = None) -> List[Tuple[int, MultiLineString]]:
    """
    Derives one outline per state from the county topology.

    A state's outline is made of the arcs its counties use exactly once: an arc shared by
    two counties of the same state is an internal county border and is left out. States
    are keyed by the first two digits of the county FIPS code.

    Returns:
        List[Tuple[int, MultiLineString]]: (state code, outline) pairs ordered by state code.
    """
    decoder = decoder or TopologyDecoder(topology)
    usage: Dict[int, Counter] = {}
    order: Dict[int, OrderedDict] = {}
    for member in decoder.members(object_name):
        if 'arcs' not in member or 'id' not in member:
            continue
        state_code = int(member['id']) // 1000
        ids = _arc_ids(member['arcs'])
        usage.setdefault(state_code, Counter()).update(ids)
        seen = order.setdefault(state_code, OrderedDict())
        for arc_id in ids:
            seen.setdefault(arc_id, None)

    boundaries = []
    for state_code in sorted(usage):
        outline = [arc_id for arc_id in order[state_code] if usage[state_code][arc_id] == 1]
        boundaries.append((state_code, MultiLineString([decoder.line([arc_id]) for arc_id in outline])))
    logger.info(f"Derived {len(boundaries)} state boundaries.")
    return boundaries
