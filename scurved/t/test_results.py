
from dataclasses import FrozenInstanceError
from unittest import TestCase

import numpy as np
from numpy.testing import assert_allclose

from scurved.core.calc_methods.winkler_bach import compute_curved_beam
from scurved.core.errors import FailureKind
from scurved.core.postprocessing.results import (
    CurvedBeamFailure, StressExtremum, winkler_bach_stress
)


class TestWinklerBachStress(TestCase):

    def test_neutral_axis(self):
        self.assertEqual(winkler_bach_stress(1000, 4e-4, 5e-4, 0.06, 0.06),
                         0.0)

    def test_vectorised(self):
        r = np.array([0.05, 0.06, 0.075])
        sigma = winkler_bach_stress(1000, 4e-4, 5e-4, 0.06, r)
        assert_allclose(sigma, 5e6 * (0.06 / r - 1))
        self.assertGreater(sigma[0], 0)
        self.assertLess(sigma[2], 0)


class TestCurvedBeamResult(TestCase):

    def setUp(self):
        self.res = compute_curved_beam(
            'rectangular', {'b': 0.02, 't': 0.02}, ri=0.05, moment=1000,
            samples=5
        )

    def test_to_dict(self):
        d = self.res.to_dict()
        self.assertEqual(
            set(d),
            {'ok', 'A', 'ybar', 'yn', 'e', 'Rn', 'Rc', 'rInner', 'rOuter',
             'sigmaInner', 'sigmaOuter', 'maxTension', 'maxCompression',
             'r', 'sigma'}
        )
        self.assertIs(d['ok'], True)
        self.assertEqual(d['maxTension'],
                         {'value': self.res.sigma_inner, 'atR': 0.05,
                          'side': 'inner'})
        self.assertEqual(d['maxCompression']['side'], 'outer')
        self.assertIsInstance(d['r'], list)
        self.assertEqual(len(d['sigma']), 5)

    def test_immutable(self):
        with self.assertRaises(FrozenInstanceError):
            self.res.area = 1.0
        with self.assertRaises(ValueError):
            self.res.sigma[0] = 0.0
        with self.assertRaises(ValueError):
            self.res.r[:] = 0.0

    def test_stress(self):
        assert_allclose(self.res.stress(self.res.r), self.res.sigma)
        assert_allclose(self.res.stress(self.res.r_n), 0.0, atol=1e-6)

    def test_table(self):
        table = self.res.table()
        for text in ('Quantity', 'Eccentricity', 'R_n',
                     'Max. tension (inner)', 'Max. compression (outer)'):
            self.assertIn(text, table)

    def test_samples_table(self):
        table = self.res.samples_table()
        self.assertIn('σ(r)', table)
        self.assertIn('Nr.', table)
        # header plus five stations
        rows = [line for line in table.splitlines()
                if line.startswith('|')]
        self.assertEqual(len(rows), 6)


class TestCurvedBeamFailure(TestCase):

    def test_failure(self):
        failure = CurvedBeamFailure(FailureKind.MISSING_LOAD,
                                    'Provide bending moment M or both P and d')
        self.assertFalse(failure.ok)
        self.assertEqual(
            failure.to_dict(),
            {'ok': False, 'kind': 'missing_load',
             'message': 'Provide bending moment M or both P and d'}
        )

    def test_extremum(self):
        ext = StressExtremum(-3.0, 0.07, 'outer')
        self.assertEqual(ext.to_dict(),
                         {'value': -3.0, 'atR': 0.07, 'side': 'outer'})
