
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Literal, Optional, Tuple, Type

from scurved.core.errors import (
    FailureKind, InvalidParameterError, UnsupportedShapeError
)
from scurved.core.preprocessing.section import (
    CircularSection, RectangularSection, Section, SectionType, TSection,
    TrapezoidalSection, TriangularSection
)
from scurved.core.utils import to_number


@dataclass(frozen=True)
class ParamSpec:
    """Declarative rule for one raw section parameter.

    Parameters
    ----------
    key : :any:`str`
        Name of the parameter and of the section field it fills.
    label : :any:`str`
        Human readable name used in messages and input forms.
    constraint : {'positive', 'non_negative'}
        Required sign of the value.
    """

    key: str
    label: str
    constraint: Literal['positive', 'non_negative'] = 'positive'

    def check(self, value: float) -> Optional[str]:
        """Message describing the violation or ``None``."""
        if self.constraint == 'positive' and not value > 0:
            return f'{self.label} must be > 0'
        if self.constraint == 'non_negative' and not value >= 0:
            return f'{self.label} must be ≥ 0'
        return None


@dataclass(frozen=True)
class SectionSpec:
    """Parameter table, display label and variant class of a section."""

    label: str
    params: Tuple[ParamSpec, ...]
    section_cls: Type[Section]
    note: Optional[str] = None


SECTION_SPECS: Mapping[SectionType, SectionSpec] = {
    SectionType.RECTANGULAR: SectionSpec(
        label='Rectangular',
        params=(
            ParamSpec('b', 'Width b'),
            ParamSpec('t', 'Thickness t'),
        ),
        section_cls=RectangularSection,
    ),
    SectionType.TRAPEZOIDAL: SectionSpec(
        label='Trapezoidal',
        params=(
            ParamSpec('b_inner', 'Inner width b_inner'),
            ParamSpec('b_outer', 'Outer width b_outer'),
            ParamSpec('t', 'Thickness t'),
        ),
        section_cls=TrapezoidalSection,
    ),
    SectionType.TRIANGULAR: SectionSpec(
        label='Triangular',
        params=(
            ParamSpec('b_inner', 'Inner width b_inner', 'non_negative'),
            ParamSpec('b_outer', 'Outer width b_outer', 'non_negative'),
            ParamSpec('t', 'Thickness t'),
        ),
        section_cls=TriangularSection,
        note='Set one of b_inner or b_outer to 0 for a true triangle',
    ),
    SectionType.CIRCULAR: SectionSpec(
        label='Circular (solid)',
        params=(
            ParamSpec('d', 'Diameter d'),
        ),
        section_cls=CircularSection,
    ),
    SectionType.T_SECTION: SectionSpec(
        label='T-section (two rectangles)',
        params=(
            ParamSpec('r1', 'Rect 1 inner radius r1'),
            ParamSpec('t1', 'Rect 1 thickness t1'),
            ParamSpec('b1', 'Rect 1 width b1'),
            ParamSpec('r2', 'Rect 2 inner radius r2'),
            ParamSpec('t2', 'Rect 2 thickness t2'),
            ParamSpec('b2', 'Rect 2 width b2'),
        ),
        section_cls=TSection,
    ),
}


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of :func:`validate`."""

    ok: bool
    message: Optional[str] = None
    kind: Optional[FailureKind] = None

    def raise_if_failed(self):
        """Raise the :class:`CurvedBeamError` matching :py:attr:`kind`."""
        if self.ok:
            return
        if self.kind == FailureKind.UNSUPPORTED_SHAPE:
            raise UnsupportedShapeError(self.message)
        raise InvalidParameterError(self.message)


def resolve_shape(shape) -> Optional[SectionType]:
    """Map a :class:`SectionType` or its string value to the member."""
    try:
        return SectionType(shape)
    except ValueError:
        return None


def validate(shape, params: Optional[Mapping] = None) -> ValidationResult:
    """Check raw section parameters against :data:`SECTION_SPECS`.

    Only the raw inputs are inspected. Degeneracy that shows up during
    integration is left to the solver.

    Parameters
    ----------
    shape : :class:`SectionType` or :any:`str`
        Section identifier.
    params : mapping, optional
        Raw parameters. Values may be numbers or numeric strings; missing or
        non-numeric values fail their constraint. Anything that is not a
        mapping fails as a whole.

    Returns
    -------
    :class:`ValidationResult`
        ``ok=True`` or the first violation found.

    Examples
    --------
    >>> validate('triangular', {'b_inner': 0, 'b_outer': 0.03, 't': 0.02})
    ValidationResult(ok=True, message=None, kind=None)
    >>> validate('rectangular', {'b': 0.02}).message
    'Thickness t must be > 0'
    """
    section_type = resolve_shape(shape)
    if section_type is None:
        return ValidationResult(
            False, 'Unsupported shape', FailureKind.UNSUPPORTED_SHAPE
        )
    spec = SECTION_SPECS[section_type]
    if params is None:
        params = {}
    elif not isinstance(params, Mapping):
        return ValidationResult(
            False, 'Section parameters must be given by name',
            FailureKind.INVALID_PARAMETER
        )

    for param in spec.params:
        message = param.check(to_number(params.get(param.key)))
        if message is not None:
            return ValidationResult(
                False, message, FailureKind.INVALID_PARAMETER
            )

    if section_type == SectionType.TRIANGULAR:
        b_inner = to_number(params.get('b_inner'), 0.0)
        b_outer = to_number(params.get('b_outer'), 0.0)
        if b_inner <= 0 and b_outer <= 0:
            return ValidationResult(
                False, 'At least one of b_inner or b_outer must be > 0',
                FailureKind.INVALID_PARAMETER
            )
    return ValidationResult(True)


def build_section(shape, params: Optional[Mapping] = None) -> Section:
    """Validate raw parameters and create the matching section variant.

    Raises
    ------
    UnsupportedShapeError
        For unknown shape identifiers.
    InvalidParameterError
        For parameters violating their constraints.
    """
    validate(shape, params).raise_if_failed()
    spec = SECTION_SPECS[SectionType(shape)]
    return spec.section_cls(
        **{p.key: to_number(params[p.key]) for p in spec.params}
    )
