# tests/test_pipeline.py

import unittest
from unittest import mock
from county_choropleth.exceptions import JoinMismatchError
from county_choropleth.pipeline import render_choropleth
from county_choropleth.tests import sample_data
from county_choropleth.topology import decode_arcs

LOW, PIVOT, HIGH = '#c21d00', '#ffff33', '#00941b'

class TestRenderChoropleth(unittest.TestCase):
    def setUp(self):
        self.choropleth = render_choropleth(
            sample_data.education(), sample_data.topology(),
            legend_step_count=10,
            colors={'low_color': LOW, 'pivot_color': PIVOT, 'high_color': HIGH}
        )
        self.surface = self.choropleth.surface

    def test_three_filled_regions(self):
        counties = self.surface.find_all('path', 'county')
        self.assertEqual(len(counties), 3)
        self.assertEqual([c.get('fill') for c in counties], [LOW, PIVOT, HIGH])

    def test_region_metadata(self):
        counties = self.surface.find_all('path', 'county')
        self.assertEqual([c.get('data-fips') for c in counties], ['1', '2', '3'])
        self.assertEqual([c.get('data-education') for c in counties], ['10', '50', '90'])
        self.assertEqual(counties[0].get('data-name'), 'Autauga County')
        self.assertTrue(counties[0].get('d').startswith('M10,0L10,10'))

    def test_state_outlines_are_unfilled(self):
        states = self.surface.find_all('path', 'state')
        self.assertEqual(len(states), 1)
        self.assertEqual(states[0].get('fill'), 'none')
        self.assertEqual(states[0].get('stroke'), '#322a2a')
        self.assertNotIn('data-fips', states[0].attrib)

    def test_legend(self):
        self.assertEqual(len(self.choropleth.thresholds), 11)
        self.assertEqual(len(self.surface.find_all('rect', 'legend-rect')), 10)
        self.assertEqual(len(self.surface.find_all('text', 'legend-label')), 11)

    def test_heading(self):
        self.assertEqual(self.surface.find_by_id('title').text, 'Higher Education Rates by US county')
        descriptions = [element.text for element in self.surface.find_all('text', 'description')]
        self.assertIn('Lowest 10% - Mean: 50.0% - Highest: 90%', descriptions)

    def test_canvas_size(self):
        self.assertEqual(self.surface.svg.get('width'), '1080')
        self.assertEqual(self.surface.svg.get('height'), '660')

    def test_hover_region_two(self):
        region = self.surface.find_all('path', 'county')[1]
        record = self.choropleth.index.lookup(int(region.get('data-fips')))
        tooltip = self.choropleth.tooltip

        tooltip.enter(region, record, 40, 40)
        self.assertTrue(tooltip.visible)
        self.assertEqual(self.surface.styles(tooltip.element)['background'], PIVOT)
        tooltip.leave()
        self.assertFalse(tooltip.visible)
        self.assertEqual(len(self.surface.find_all('div')), 2)  # canvas and tooltip

    def test_markup(self):
        markup = self.surface.to_markup()
        self.assertIn('<svg', markup)
        self.assertIn('id="tooltip"', markup)

    def test_arcs_are_decoded_once_per_render(self):
        with mock.patch('county_choropleth.topology.decode_arcs', wraps=decode_arcs) as decode:
            render_choropleth(sample_data.education(), sample_data.topology())
        self.assertEqual(decode.call_count, 1)

class TestJoinMismatch(unittest.TestCase):
    def test_unmatched_county_aborts_render(self):
        with self.assertRaises(JoinMismatchError) as context:
            render_choropleth(sample_data.education(), sample_data.topology(extra_county_ids=[4]))
        self.assertIn('4', str(context.exception))

if __name__ == '__main__':
    unittest.main()
