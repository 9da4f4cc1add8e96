# tests/test_topology.py

import unittest
from shapely.geometry import MultiLineString, Polygon
from county_choropleth.exceptions import TopologyError
from county_choropleth.surface import path_data
from county_choropleth.topology import decode_arcs, decode_counties, decode_state_boundaries, TopologyDecoder
from county_choropleth.tests import sample_data

class TestTopology(unittest.TestCase):
    def setUp(self):
        self.topology = sample_data.topology()

    def test_decode_quantized_arcs(self):
        topology = {
            'transform': {'scale': [0.5, 2], 'translate': [1, 1]},
            'arcs': [[[0, 0], [2, 0], [0, 3]]],
        }
        self.assertEqual(decode_arcs(topology), [[(1, 1), (2, 1), (2, 7)]])

    def test_decode_counties(self):
        counties = decode_counties(self.topology)
        self.assertEqual([county.id for county in counties], [1, 2, 3])
        for county in counties:
            self.assertIsInstance(county.geometry, Polygon)
            self.assertAlmostEqual(county.geometry.area, 100.0)

    def test_reversed_arcs_are_stitched(self):
        middle = decode_counties(self.topology)[1].geometry
        self.assertEqual(list(middle.exterior.coords),
                         [(10, 0), (20, 0), (20, 10), (10, 10), (10, 0)])

    def test_state_boundary_skips_shared_county_borders(self):
        boundaries = decode_state_boundaries(self.topology)
        self.assertEqual(len(boundaries), 1)
        state_code, outline = boundaries[0]
        self.assertEqual(state_code, 0)
        self.assertIsInstance(outline, MultiLineString)
        self.assertEqual(len(outline.geoms), 4)
        self.assertAlmostEqual(outline.length, 80.0)

    def test_counties_in_different_states_keep_their_shared_border(self):
        self.topology['objects']['counties']['geometries'][2]['id'] = 2001
        boundaries = dict(decode_state_boundaries(self.topology))
        self.assertEqual(sorted(boundaries), [0, 2])
        self.assertAlmostEqual(boundaries[0].length, 60.0)
        self.assertAlmostEqual(boundaries[2].length, 40.0)

    def test_missing_counties_object(self):
        with self.assertRaises(TopologyError):
            decode_counties({'type': 'Topology', 'objects': {}, 'arcs': []})

    def test_out_of_range_arc(self):
        self.topology['objects']['counties']['geometries'][0]['arcs'] = [[42]]
        with self.assertRaises(TopologyError):
            decode_counties(self.topology)

    def test_null_geometry_renders_empty_path(self):
        decoder = TopologyDecoder(self.topology)
        self.assertIsNone(decoder.geometry({'type': None, 'id': 9}))
        self.assertEqual(path_data(None), '')

    def test_path_data(self):
        square = Polygon([(0, 0), (10, 0), (10, 10), (0, 10)])
        self.assertEqual(path_data(square), 'M0,0L10,0L10,10L0,10L0,0Z')

if __name__ == '__main__':
    unittest.main()
