
from unittest import TestCase

from scurved.core.errors import (
    FailureKind, InvalidParameterError, UnsupportedShapeError
)
from scurved.core.preprocessing.section import (
    SectionType, TriangularSection, TSection
)
from scurved.core.preprocessing.validation import (
    SECTION_SPECS, build_section, validate
)


class TestValidate(TestCase):

    def test_unsupported_shape(self):
        for shape in ('hexagonal', None, 42):
            result = validate(shape, {'b': 1, 't': 1})
            self.assertFalse(result.ok)
            self.assertEqual(result.kind, FailureKind.UNSUPPORTED_SHAPE)
            self.assertEqual(result.message, 'Unsupported shape')

    def test_shape_identifiers(self):
        params = {'b': 0.02, 't': 0.02}
        self.assertTrue(validate('rectangular', params).ok)
        self.assertTrue(validate(SectionType.RECTANGULAR, params).ok)

    def test_positive(self):
        result = validate('rectangular', {'b': 0.02, 't': 0})
        self.assertFalse(result.ok)
        self.assertEqual(result.kind, FailureKind.INVALID_PARAMETER)
        self.assertEqual(result.message, 'Thickness t must be > 0')

    def test_first_violation_reported(self):
        result = validate('rectangular', {'b': -1, 't': -1})
        self.assertEqual(result.message, 'Width b must be > 0')

    def test_missing_and_non_numeric(self):
        for params in ({'b': 0.02}, {'b': 0.02, 't': 'abc'},
                       {'b': 0.02, 't': float('nan')},
                       {'b': 0.02, 't': ''}, None):
            result = validate('rectangular', params)
            self.assertFalse(result.ok, msg=f'{params!r} must be rejected.')
            self.assertEqual(result.kind, FailureKind.INVALID_PARAMETER)

    def test_params_not_mapping(self):
        for params in ([0.02, 0.02], ('b', 't'), '0.02', 0.02):
            result = validate('rectangular', params)
            self.assertFalse(result.ok, msg=f'{params!r} must be rejected.')
            self.assertEqual(result.kind, FailureKind.INVALID_PARAMETER)
            self.assertEqual(result.message,
                             'Section parameters must be given by name')
        with self.assertRaises(InvalidParameterError):
            build_section('rectangular', [0.02, 0.02])

    def test_numeric_strings(self):
        self.assertTrue(validate('rectangular', {'b': '0.02', 't': '2e-2'}).ok)

    def test_triangular(self):
        self.assertTrue(
            validate('triangular',
                     {'b_inner': 0, 'b_outer': 0.03, 't': 0.02}).ok,
            msg='A triangle with one zero side must be accepted.'
        )
        self.assertTrue(
            validate('triangular',
                     {'b_inner': 0.03, 'b_outer': 0, 't': 0.02}).ok
        )
        result = validate('triangular',
                          {'b_inner': 0, 'b_outer': 0, 't': 0.02})
        self.assertFalse(result.ok)
        self.assertEqual(result.kind, FailureKind.INVALID_PARAMETER)
        self.assertEqual(result.message,
                         'At least one of b_inner or b_outer must be > 0')
        result = validate('triangular',
                          {'b_inner': -0.01, 'b_outer': 0.03, 't': 0.02})
        self.assertEqual(result.message, 'Inner width b_inner must be ≥ 0')

    def test_trapezoidal_requires_positive_widths(self):
        result = validate('trapezoidal',
                          {'b_inner': 0, 'b_outer': 0.03, 't': 0.02})
        self.assertFalse(result.ok)

    def test_circular(self):
        self.assertTrue(validate('circular', {'d': 0.04}).ok)
        for d in (0, -0.04):
            result = validate('circular', {'d': d})
            self.assertFalse(result.ok)
            self.assertEqual(result.message, 'Diameter d must be > 0')

    def test_tsection(self):
        params = dict(r1=0.05, t1=0.01, b1=0.06, r2=0.06, t2=0.04, b2=0.01)
        self.assertTrue(validate('tsection', params).ok)
        for key in params:
            result = validate('tsection', {**params, key: 0})
            self.assertFalse(result.ok, msg=f'{key} = 0 must be rejected.')
            self.assertIn(key, result.message)

    def test_specs_cover_all_shapes(self):
        self.assertEqual(set(SECTION_SPECS), set(SectionType))
        for shape, spec in SECTION_SPECS.items():
            self.assertEqual(spec.section_cls.shape, shape)


class TestBuildSection(TestCase):

    def test_build(self):
        section = build_section(
            'triangular', {'b_inner': '0', 'b_outer': 0.03, 't': 0.02}
        )
        self.assertIsInstance(section, TriangularSection)
        self.assertEqual(section.b_inner, 0.0)
        section = build_section(
            SectionType.T_SECTION,
            dict(r1=0.05, t1=0.01, b1=0.06, r2=0.06, t2=0.04, b2=0.01)
        )
        self.assertIsInstance(section, TSection)

    def test_errors(self):
        with self.assertRaises(UnsupportedShapeError):
            build_section('hexagonal', {})
        with self.assertRaises(InvalidParameterError):
            build_section('circular', {'d': -1})
