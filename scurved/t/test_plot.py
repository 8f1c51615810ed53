
from unittest import TestCase, mock

import plotly.graph_objs as go

from scurved.core.calc_methods.winkler_bach import compute_curved_beam
from scurved.core.postprocessing.plot import CurvedBeamPlot
from scurved.core.preprocessing.section import TSection


class TestCurvedBeamPlot(TestCase):

    def setUp(self):
        params = dict(r1=0.05, t1=0.01, b1=0.06, r2=0.06, t2=0.04, b2=0.01)
        self.result = compute_curved_beam('tsection', params, moment=1000)
        self.profile = TSection(**params).profile()

    def test_stress_figure(self):
        fig = CurvedBeamPlot(self.result).stress_figure()
        self.assertIsInstance(fig, go.Figure)
        self.assertEqual(len(fig.data), 3)
        self.assertEqual(len(fig.data[0].x), len(self.result.r))
        self.assertEqual(list(fig.data[2].x),
                         [self.result.r_n, self.result.r_n])

    def test_section_figure(self):
        fig = CurvedBeamPlot(self.result, self.profile).section_figure(n=20)
        self.assertEqual(len(fig.data), 5)
        self.assertEqual(len(fig.data[0].x), 41)
        self.assertEqual(fig.layout.yaxis.autorange, 'reversed')

    def test_section_figure_requires_profile(self):
        with self.assertRaises(ValueError):
            CurvedBeamPlot(self.result).section_figure()

    def test_show(self):
        plot = CurvedBeamPlot(self.result, self.profile)
        with mock.patch.object(go.Figure, 'show') as show:
            plot.show('section')
        show.assert_called_once_with(renderer='browser')
        with self.assertRaises(ValueError):
            plot.show('moment')
