
import math
from dataclasses import dataclass
from functools import cached_property
from typing import Mapping, Optional, Union

import numpy as np

from scurved.core.defaults import (
    DEFAULT_QUADRATURE_N, DEFAULT_SAMPLES, ECCENTRICITY_TOL, ECCENTRICITY_ULPS
)
from scurved.core.errors import (
    CurvedBeamError, DegenerateGeometryError, InvalidParameterError,
    VanishingEccentricityError
)
from scurved.core.logger_mixin import LoggerMixin
from scurved.core.postprocessing.results import (
    CurvedBeamFailure, CurvedBeamResult, GeometryIntegrals, StressExtremum,
    winkler_bach_stress
)
from scurved.core.preprocessing.loads import BendingLoad
from scurved.core.preprocessing.section import Section, WidthProfile
from scurved.core.preprocessing.validation import build_section, validate
from scurved.core.utils import integrate, to_number


def _is_count(value, minimum: int) -> bool:
    return (isinstance(value, (int, np.integer))
            and not isinstance(value, bool) and value >= minimum)


@dataclass(eq=False)
class WinklerBach(LoggerMixin):
    r"""Stresses of a curved beam in pure bending after Winkler and Bach.

    The cross-section enters through its width profile :math:`b(y)` only.
    Three integrals over the thickness

    .. math::
        A = \int_0^t b\,dy, \quad
        Q_y = \int_0^t y\,b\,dy, \quad
        S = \int_0^t \frac{b}{r_i + y}\,dy

    locate the centroid :math:`\bar{y} = Q_y / A` and the neutral axis
    :math:`R_n = A / S`, which lies closer to the centre of curvature than
    the centroid. With the eccentricity :math:`e = \bar{y} - y_n` the
    normal stress varies hyperbolically over the radius:

    .. math::
        \sigma(r) = \frac{M}{A e} \left(\frac{R_n}{r} - 1\right).

    Parameters
    ----------
    section : :class:`Section`
        Cross-section of the beam.
    load : :class:`BendingLoad`
        Applied bending moment or force and lever arm.
    ri : :any:`float`, optional
        Radius of the inner surface. Ignored for sections that fix their own
        radii (:class:`TSection`).
    samples : :any:`int`, default=201
        Number of stress samples from the inner to the outer surface.
    n_quad : :any:`int`, default=800
        Sub-intervals of the trapezoidal rule.
    debug : :any:`bool`, default=False
        Enables debug logging.

    Raises
    ------
    InvalidParameterError
        If ``samples`` is not an integer >= 2 or ``n_quad`` not an integer
        >= 1.

    Examples
    --------
    >>> from scurved.core.preprocessing import BendingLoad, RectangularSection
    >>> solver = WinklerBach(RectangularSection(b=0.02, t=0.02),
    ...                      BendingLoad(moment=1000), ri=0.05)
    >>> result = solver.solve()
    >>> result.max_tension.side
    'inner'
    """

    section: Section
    load: BendingLoad
    ri: Optional[float] = None
    samples: int = DEFAULT_SAMPLES
    n_quad: int = DEFAULT_QUADRATURE_N
    debug: bool = False

    def __post_init__(self):
        if not _is_count(self.samples, 2):
            self.logger.error("Invalid number of samples: %r", self.samples)
            raise InvalidParameterError('samples must be an integer >= 2')
        if not _is_count(self.n_quad, 1):
            self.logger.error("Invalid quadrature density: %r", self.n_quad)
            raise InvalidParameterError('n_quad must be an integer >= 1')

    @cached_property
    def profile(self) -> WidthProfile:
        """Width profile of :py:attr:`section`.

        Raises
        ------
        DegenerateGeometryError
            If the thickness is not strictly positive.
        """
        profile = self.section.profile()
        t = profile.thickness
        if not (math.isfinite(t) and t > 0):
            self.logger.error("Section thickness t=%s", t)
            raise DegenerateGeometryError('Section thickness t must be > 0')
        return profile

    @cached_property
    def r_inner(self) -> float:
        """Inner radius, fixed by the section if it defines one."""
        if self.profile.r_inner is not None:
            ri = self.profile.r_inner
        else:
            ri = to_number(self.ri)
        if not (math.isfinite(ri) and ri > 0):
            self.logger.error("Inner radius ri=%s", ri)
            raise InvalidParameterError('ri must be a positive number')
        return ri

    @cached_property
    def r_outer(self) -> float:
        if self.profile.r_outer is not None:
            return self.profile.r_outer
        return self.r_inner + self.profile.thickness

    @cached_property
    def moment(self) -> float:
        try:
            return self.load.resolve()
        except CurvedBeamError as exc:
            self.logger.error(exc.message)
            raise

    @cached_property
    def integrals(self) -> GeometryIntegrals:
        """Area, first moment and Winkler integral of the profile.

        Raises
        ------
        DegenerateGeometryError
            If the area or the Winkler integral is not strictly positive.
        """
        b, ri, n = self.profile, self.r_inner, self.n_quad
        t = b.thickness
        integrals = GeometryIntegrals(
            area=integrate(t, b, n),
            first_moment=integrate(t, lambda y: y * b(y), n),
            winkler=integrate(t, lambda y: b(y) / (ri + y), n),
            winkler_first_moment=integrate(
                t, lambda y: y * b(y) / (ri + y), n
            ),
        )
        self.logger.debug(
            "A=%s, Qy=%s, S=%s", integrals.area, integrals.first_moment,
            integrals.winkler
        )
        if not (integrals.area > 0 and integrals.winkler > 0):
            self.logger.error("Degenerate integrals: %s", integrals)
            raise DegenerateGeometryError(
                'Invalid geometry leading to zero/negative area or integral'
            )
        return integrals

    def solve(self) -> CurvedBeamResult:
        """Run the analysis.

        Returns
        -------
        :class:`CurvedBeamResult`
            Section values, surface stresses, extremes and stress samples.

        Raises
        ------
        CurvedBeamError
            The subclass names the reason: degenerate geometry, invalid
            inner radius, missing load or vanishing eccentricity.
        """
        t = self.profile.thickness
        ri, ro = self.r_inner, self.r_outer
        m = self.moment
        area = self.integrals.area

        y_bar = self.integrals.first_moment / area
        # y_n = A / S - ri, evaluated without cancellation for large ri
        y_n = self.integrals.winkler_first_moment / self.integrals.winkler
        r_n = ri + y_n
        e = y_bar - y_n
        r_c = ri + y_bar
        self.logger.debug("y_bar=%s, y_n=%s, e=%s, R_n=%s", y_bar, y_n, e, r_n)

        tol = max(ECCENTRICITY_TOL,
                  ECCENTRICITY_ULPS * np.finfo(float).eps * abs(r_c))
        if not math.isfinite(e) or abs(e) < tol:
            self.logger.error("Eccentricity e=%s for R_c=%s", e, r_c)
            raise VanishingEccentricityError(
                'Eccentricity too small; check geometry (ri, t) and section '
                'parameters.'
            )

        r = ri + np.linspace(0.0, t, self.samples)
        sigma = winkler_bach_stress(m, area, e, r_n, r)
        sigma_inner = winkler_bach_stress(m, area, e, r_n, ri)
        sigma_outer = winkler_bach_stress(m, area, e, r_n, ro)

        if sigma_inner >= sigma_outer:
            max_tension = StressExtremum(sigma_inner, ri, 'inner')
        else:
            max_tension = StressExtremum(sigma_outer, ro, 'outer')
        if sigma_inner <= sigma_outer:
            max_compression = StressExtremum(sigma_inner, ri, 'inner')
        else:
            max_compression = StressExtremum(sigma_outer, ro, 'outer')
        self.logger.debug(
            "Max. tension %s, max. compression %s", max_tension,
            max_compression
        )

        return CurvedBeamResult(
            area=area,
            y_bar=y_bar,
            y_n=y_n,
            e=e,
            r_n=r_n,
            r_c=r_c,
            r_inner=ri,
            r_outer=ro,
            sigma_inner=sigma_inner,
            sigma_outer=sigma_outer,
            max_tension=max_tension,
            max_compression=max_compression,
            r=r,
            sigma=sigma,
            moment=m,
            integrals=self.integrals,
        )


def compute_curved_beam(
        shape,
        params: Optional[Mapping] = None,
        ri: Optional[float] = None,
        moment: Optional[float] = None,
        force: Optional[float] = None,
        lever_arm: Optional[float] = None,
        samples: int = DEFAULT_SAMPLES,
        n_quad: int = DEFAULT_QUADRATURE_N,
        debug: bool = False,
) -> Union[CurvedBeamResult, CurvedBeamFailure]:
    """Analyse a curved beam from raw inputs without raising.

    Parameters
    ----------
    shape : :class:`SectionType` or :any:`str`
        Section identifier, e.g. ``'rectangular'``.
    params : mapping
        Raw section parameters, see :data:`SECTION_SPECS`.
    ri : :any:`float`, optional
        Inner radius. Required unless the shape is a T-section.
    moment : :any:`float`, optional
        Bending moment :math:`M`. Required unless ``force`` and
        ``lever_arm`` are both given.
    force, lever_arm : :any:`float`, optional
        Force :math:`P` and lever arm :math:`d`; their product overrides
        ``moment`` when both are finite.
    samples : :any:`int`, default=201
        Number of stress samples.
    n_quad : :any:`int`, default=800
        Sub-intervals of the trapezoidal rule.
    debug : :any:`bool`, default=False
        Enables debug logging of the solver.

    Returns
    -------
    :class:`CurvedBeamResult` or :class:`CurvedBeamFailure`
        The result, or a failure record naming the reason. Check ``ok``.

    Examples
    --------
    >>> res = compute_curved_beam(
    ...     'rectangular', {'b': 0.02, 't': 0.02}, ri=0.05, moment=1000
    ... )
    >>> res.ok
    True
    >>> compute_curved_beam('hexagonal', {}, ri=0.05, moment=1000).message
    'Unsupported shape'
    """
    validation = validate(shape, params)
    if not validation.ok:
        return CurvedBeamFailure(validation.kind, validation.message)
    try:
        section = build_section(shape, params)
        solver = WinklerBach(
            section,
            BendingLoad(moment=moment, force=force, lever_arm=lever_arm),
            ri=ri, samples=samples, n_quad=n_quad, debug=debug
        )
        return solver.solve()
    except CurvedBeamError as exc:
        return CurvedBeamFailure(exc.kind, exc.message)
