
import math
from unittest import TestCase

from numpy.testing import assert_allclose

from scurved.core.calc_methods.straight_beam import SimplySupportedBeam


class TestSimplySupportedBeam(TestCase):

    def setUp(self):
        self.beam = SimplySupportedBeam(4.0, n_disc=4)

    def test_max_moments(self):
        self.assertEqual(self.beam.max_moment_udl(10.0), 20.0)
        self.assertEqual(self.beam.max_moment_point_mid(10.0), 10.0)

    def test_deflection(self):
        assert_allclose(
            self.beam.max_deflection_udl(10.0, 2e8, 1e-4),
            5 * 10 * 4 ** 4 / (384 * 2e8 * 1e-4),
            err_msg='Mid-span deflection under a uniform load.'
        )
        assert_allclose(self.beam.max_deflection_udl(10.0, 2e8, 1e-4),
                        1.6667e-3, rtol=1e-4)

    def test_stations(self):
        assert_allclose(self.beam.x, [0.0, 1.0, 2.0, 3.0, 4.0])

    def test_udl_forces(self):
        forces = self.beam.udl_forces_disc(10.0)
        self.assertEqual(forces.shape, (5, 2))
        assert_allclose(forces[:, 0], [20.0, 10.0, 0.0, -10.0, -20.0])
        assert_allclose(forces[:, 1], [0.0, 15.0, 20.0, 15.0, 0.0],
                        atol=1e-12)

    def test_point_mid_forces(self):
        forces = self.beam.point_mid_forces_disc(10.0)
        assert_allclose(forces[:, 0], [5.0, 5.0, -5.0, -5.0, -5.0])
        assert_allclose(forces[:, 1], [0.0, 5.0, 10.0, 5.0, 0.0])

    def test_invalid(self):
        for length in (0.0, -1.0, math.inf, math.nan):
            with self.assertRaises(ValueError):
                SimplySupportedBeam(length)
        with self.assertRaises(ValueError):
            SimplySupportedBeam(4.0, n_disc=0)
        with self.assertRaises(ValueError):
            self.beam.max_moment_udl(math.nan)
        with self.assertRaises(ValueError):
            self.beam.max_deflection_udl(10.0, 0.0, 1e-4)
        with self.assertRaises(ValueError):
            self.beam.max_deflection_udl(10.0, 2e8, -1e-4)
