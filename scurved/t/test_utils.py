
import math
from unittest import TestCase

import numpy as np
from numpy.testing import assert_allclose as numpy_allclose

from scurved.core.utils import integrate, to_number


def assert_allclose(actual, desired, err_msg='', rtol=1e-7):
    numpy_allclose(actual, desired, err_msg=err_msg, atol=1e-10, rtol=rtol)


class TestIntegrate(TestCase):

    def test_polynomials(self):
        assert_allclose(
            integrate(2.0, lambda y: 3.0), 6.0,
            err_msg='A scalar integrand must be broadcast over all '
                    'abscissae.'
        )
        assert_allclose(
            integrate(0.02, lambda y: 0.5 * y + 1.0), 0.0201,
            err_msg='The trapezoidal rule must be exact for linear '
                    'integrands.'
        )
        assert_allclose(
            integrate(1.0, lambda y: y ** 2), 1 / 3, rtol=1e-5,
            err_msg='The default density must integrate smooth functions '
                    'accurately.'
        )

    def test_weights(self):
        self.assertAlmostEqual(
            integrate(1.0, lambda y: y ** 2, n=4), 0.34375, places=14,
            msg='End points are weighted 1/2, interior points 1.'
        )

    def test_non_positive_interval(self):
        for t in (0.0, -1.0, math.nan):
            self.assertEqual(integrate(t, lambda y: y), 0.0)

    def test_invalid_n(self):
        with self.assertRaises(ValueError):
            integrate(1.0, lambda y: y, n=0)

    def test_non_finite_propagates(self):
        self.assertTrue(math.isnan(integrate(1.0, lambda y: np.nan * y)))


class TestToNumber(TestCase):

    def test_numbers_and_strings(self):
        self.assertEqual(to_number(3), 3.0)
        self.assertEqual(to_number('0.05'), 0.05)
        self.assertEqual(to_number(' 1e3 '), 1000.0)

    def test_default(self):
        for value in (None, '', '   ', 'abc', math.inf, '-inf', 'nan',
                      [1, 2]):
            self.assertTrue(math.isnan(to_number(value)),
                            msg=f'{value!r} must not be coerced.')
        self.assertEqual(to_number('', default=0.0), 0.0)
