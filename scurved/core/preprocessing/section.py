
import abc
from dataclasses import dataclass, fields
from enum import Enum
from typing import Callable, ClassVar, Optional

import numpy as np

from scurved.core.defaults import DEFAULT_OUTLINE_N


class SectionType(str, Enum):
    """Closed set of supported cross-section families."""

    RECTANGULAR = 'rectangular'
    TRAPEZOIDAL = 'trapezoidal'
    TRIANGULAR = 'triangular'
    CIRCULAR = 'circular'
    T_SECTION = 'tsection'


@dataclass(frozen=True, eq=False)
class WidthProfile:
    r"""Width of a cross-section as a function of the radial offset.

    Parameters
    ----------
    func : callable
        Vectorised width function :math:`b(y)` for
        :math:`0 \le y \le t`, where :math:`y` is measured from the inner
        surface towards the outer surface.
    thickness : :any:`float`
        Radial extent :math:`t` of the section.
    r_inner : :any:`float`, optional
        Absolute inner radius fixed by the section itself. Only composite
        sections placed at absolute radii set it; it replaces the inner
        radius supplied with the load case.
    r_outer : :any:`float`, optional
        Absolute outer radius fixed by the section itself.

    Examples
    --------
    >>> from scurved.core.preprocessing import RectangularSection
    >>> profile = RectangularSection(b=0.02, t=0.04).profile()
    >>> profile(0.01)
    0.02
    >>> profile.thickness
    0.04
    """

    func: Callable[[np.ndarray], np.ndarray]
    thickness: float
    r_inner: Optional[float] = None
    r_outer: Optional[float] = None

    def __call__(self, y):
        y = np.asarray(y, dtype=float)
        b = np.broadcast_to(np.asarray(self.func(y), dtype=float), y.shape)
        if b.ndim == 0:
            return float(b)
        return np.array(b)

    def outline(self, n: int = DEFAULT_OUTLINE_N):
        """Closed outline of the section, symmetric about ``x = 0``.

        Parameters
        ----------
        n : :any:`int`, default=80
            Number of stations along the thickness.

        Returns
        -------
        tuple of :any:`numpy.ndarray`
            ``(x, y)`` coordinates running down the right edge and back up
            the left edge, with the first point repeated at the end. ``y`` is
            the radial offset from the inner surface.
        """
        if n < 2:
            raise ValueError('"n" has to be at least 2.')
        ys = np.linspace(0.0, self.thickness, n)
        half = np.maximum(0.0, self(ys)) / 2
        x = np.concatenate([half, -half[::-1], half[:1]])
        y = np.concatenate([ys, ys[::-1], ys[:1]])
        return x, y


@dataclass(frozen=True)
class Section(abc.ABC):
    """Base class of all cross-section variants.

    Subclasses hold the raw dimensions of one :class:`SectionType` and turn
    them into a :class:`WidthProfile`. The dimensions are checked against the
    declarative rules in :data:`SECTION_SPECS` on construction.

    Raises
    ------
    InvalidParameterError
        If a dimension violates its sign constraint.
    """

    shape: ClassVar[SectionType]

    def __post_init__(self):
        from scurved.core.preprocessing.validation import validate
        validate(self.shape, self.params).raise_if_failed()

    @property
    def params(self) -> dict:
        """Dimensions keyed by field name."""
        return {f.name: getattr(self, f.name) for f in fields(self)}

    @abc.abstractmethod
    def profile(self) -> WidthProfile:
        """Width profile of the section."""


@dataclass(frozen=True)
class RectangularSection(Section):
    """Rectangle of constant width ``b`` and radial thickness ``t``."""

    b: float
    t: float

    shape: ClassVar[SectionType] = SectionType.RECTANGULAR

    def _width(self, y):
        return np.full_like(y, self.b, dtype=float)

    def profile(self) -> WidthProfile:
        return WidthProfile(self._width, self.t)


@dataclass(frozen=True)
class TrapezoidalSection(Section):
    """Trapezoid with linear width change from ``b_inner`` to ``b_outer``."""

    b_inner: float
    b_outer: float
    t: float

    shape: ClassVar[SectionType] = SectionType.TRAPEZOIDAL

    @property
    def slope(self) -> float:
        return (self.b_outer - self.b_inner) / self.t

    def _width(self, y):
        return self.b_inner + self.slope * y

    def profile(self) -> WidthProfile:
        return WidthProfile(self._width, self.t)


@dataclass(frozen=True)
class TriangularSection(TrapezoidalSection):
    """Linear width profile clamped at zero.

    One of ``b_inner`` or ``b_outer`` may be zero, which gives a true
    triangle with its apex on the inner or the outer surface.
    """

    shape: ClassVar[SectionType] = SectionType.TRIANGULAR

    def _width(self, y):
        return np.maximum(0.0, super()._width(y))


@dataclass(frozen=True)
class CircularSection(Section):
    r"""Solid circle of diameter ``d``.

    The inner surface touches the circle at :math:`y = 0`, so the width is
    the chord

    .. math::
        b(y) = 2 \sqrt{a^2 - (y - a)^2}, \quad a = d / 2,

    which vanishes at both tangent points :math:`y = 0` and :math:`y = d`.
    """

    d: float

    shape: ClassVar[SectionType] = SectionType.CIRCULAR

    def _width(self, y):
        a = self.d / 2
        return 2 * np.sqrt(np.maximum(0.0, a * a - (y - a) ** 2))

    def profile(self) -> WidthProfile:
        return WidthProfile(self._width, self.d)


@dataclass(frozen=True)
class TSection(Section):
    """Composite of two rectangles placed at absolute radii.

    Rectangle 1 covers the radii ``[r1, r1 + t1]`` with width ``b1``,
    rectangle 2 covers ``[r2, r2 + t2]`` with width ``b2``. Where the two
    ranges overlap their widths add up. The section fixes its own inner and
    outer radius, so no separate inner radius is needed.

    Examples
    --------
    Flange on the inside, web on the outside:

    >>> ts = TSection(r1=0.05, t1=0.01, b1=0.06, r2=0.06, t2=0.04, b2=0.01)
    >>> ts.r_inner, ts.r_outer
    (0.05, 0.1)
    """

    r1: float
    t1: float
    b1: float
    r2: float
    t2: float
    b2: float

    shape: ClassVar[SectionType] = SectionType.T_SECTION

    @property
    def r_inner(self) -> float:
        return min(self.r1, self.r2)

    @property
    def r_outer(self) -> float:
        return max(self.r1 + self.t1, self.r2 + self.t2)

    def _width(self, y):
        r = self.r_inner + y
        w = np.where((r >= self.r1) & (r <= self.r1 + self.t1), self.b1, 0.0)
        return w + np.where(
            (r >= self.r2) & (r <= self.r2 + self.t2), self.b2, 0.0
        )

    def profile(self) -> WidthProfile:
        return WidthProfile(
            self._width, self.r_outer - self.r_inner,
            r_inner=self.r_inner, r_outer=self.r_outer
        )
