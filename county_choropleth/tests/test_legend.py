# tests/test_legend.py

import unittest
from county_choropleth.colors import ColorScale
from county_choropleth.legend import legend_thresholds, render_legend, round_one_decimal
from county_choropleth.surface import SvgSurface

class TestLegendThresholds(unittest.TestCase):
    def test_default_step_count(self):
        thresholds = legend_thresholds(2.6, 75.1)
        self.assertEqual(len(thresholds), 11)
        self.assertEqual(thresholds[0], 2.6)
        self.assertEqual(thresholds[-1], 75.1)

    def test_interior_steps_are_evenly_spaced(self):
        self.assertEqual(legend_thresholds(0.0, 55.0, 10),
                         [0.0, 5.5, 11.0, 16.5, 22.0, 27.5, 33.0, 38.5, 44.0, 49.5, 55.0])

    def test_sequence_is_non_decreasing(self):
        for minimum, maximum, steps in [(0.0, 100.0, 7), (2.6, 75.1, 10), (0.11, 0.13, 10), (5.0, 5.0, 4)]:
            thresholds = legend_thresholds(minimum, maximum, steps)
            self.assertEqual(len(thresholds), steps + 1)
            self.assertEqual(thresholds[0], minimum)
            self.assertEqual(thresholds[-1], maximum)
            self.assertEqual(thresholds, sorted(thresholds))

    def test_single_step(self):
        self.assertEqual(legend_thresholds(1.0, 9.0, 1), [1.0, 9.0])

    def test_rejects_invalid_step_count(self):
        for steps in (0, -3, 2.5, True):
            with self.assertRaises(ValueError):
                legend_thresholds(0.0, 10.0, steps)

    def test_round_one_decimal_rounds_ties_up(self):
        self.assertEqual(round_one_decimal(0.25), 0.3)
        self.assertEqual(round_one_decimal(12.34), 12.3)

class TestRenderLegend(unittest.TestCase):
    def setUp(self):
        self.surface = SvgSurface(1080, 660)
        self.scale = ColorScale(10.0, 50.0, 90.0)
        self.thresholds = legend_thresholds(10.0, 90.0, 4)
        render_legend(self.surface, self.scale, self.thresholds, x=1000, y=640, height=600)

    def test_one_swatch_per_step(self):
        swatches = self.surface.find_all('rect', 'legend-rect')
        self.assertEqual(len(swatches), 4)
        self.assertEqual([s.get('fill') for s in swatches],
                         [self.scale.color_of(value) for value in self.thresholds[:-1]])

    def test_swatches_stack_upwards_from_baseline(self):
        swatches = self.surface.find_all('rect', 'legend-rect')
        self.assertEqual([s.get('y') for s in swatches], ['-150', '-300', '-450', '-600'])
        self.assertTrue(all(s.get('height') == '150' for s in swatches))

    def test_one_label_per_threshold(self):
        labels = self.surface.find_all('text', 'legend-label')
        self.assertEqual([label.text for label in labels], ['10%', '30%', '50%', '70%', '90%'])
        self.assertEqual(labels[-1].get('y'), '-600')

    def test_legend_group_is_placed_at_baseline(self):
        legend = self.surface.find_by_id('legend')
        self.assertEqual(legend.get('transform'), 'translate(1000, 640)')

if __name__ == '__main__':
    unittest.main()
