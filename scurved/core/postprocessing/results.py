
from dataclasses import dataclass, field
from typing import Literal, Optional

import numpy as np

from scurved.core.errors import FailureKind
from scurved.core.logger_mixin import table_columns, table_scalars


def winkler_bach_stress(moment, area, e, r_n, r):
    r"""Normal stress of a curved beam in pure bending.

    .. math::
        \sigma(r) = \frac{M}{A e} \left(\frac{R_n}{r} - 1\right)

    Parameters
    ----------
    moment, area, e, r_n : :any:`float`
        Bending moment, area, eccentricity and neutral-axis radius.
    r : :any:`float` or :any:`numpy.ndarray`
        Radius of the fibre(s).

    Returns
    -------
    :any:`float` or :any:`numpy.ndarray`
        Stress at ``r``; positive values are tension.
    """
    return (moment / (area * e)) * (r_n / r - 1)


@dataclass(frozen=True)
class GeometryIntegrals:
    r"""The three defining integrals of a width profile at an inner radius.

    Parameters
    ----------
    area : :any:`float`
        :math:`A = \int_0^t b(y)\,dy`.
    first_moment : :any:`float`
        :math:`Q_y = \int_0^t y\,b(y)\,dy`, taken about the inner surface.
    winkler : :any:`float`
        :math:`S = \int_0^t b(y) / (r_i + y)\,dy`.
    winkler_first_moment : :any:`float`
        :math:`\int_0^t y\,b(y) / (r_i + y)\,dy = A - r_i S`. Divided by
        :math:`S` it gives the neutral-axis offset without cancelling
        :math:`r_i` out of :math:`A / S`.
    """

    area: float
    first_moment: float
    winkler: float
    winkler_first_moment: float


@dataclass(frozen=True)
class StressExtremum:
    """Extreme fibre stress and the surface it occurs on."""

    value: float
    at_r: float
    side: Literal['inner', 'outer']

    def to_dict(self) -> dict:
        return {'value': self.value, 'atR': self.at_r, 'side': self.side}


@dataclass(frozen=True, eq=False)
class CurvedBeamResult:
    r"""Result of a Winkler-Bach analysis.

    All offsets (``y_bar``, ``y_n``) are measured from the inner surface,
    all radii from the centre of curvature. Instances are immutable; the
    sample arrays are read-only.

    Parameters
    ----------
    area : :any:`float`
        Cross-sectional area :math:`A`.
    y_bar : :any:`float`
        Centroid offset :math:`\bar{y}`.
    y_n : :any:`float`
        Neutral-axis offset :math:`y_n`.
    e : :any:`float`
        Eccentricity :math:`e = \bar{y} - y_n`.
    r_n : :any:`float`
        Neutral-axis radius :math:`R_n`.
    r_c : :any:`float`
        Centroid radius :math:`R_c`.
    r_inner, r_outer : :any:`float`
        Radii of the inner and outer surface.
    sigma_inner, sigma_outer : :any:`float`
        Stresses at the inner and outer surface.
    max_tension, max_compression : :class:`StressExtremum`
        Larger and smaller of the two surface stresses.
    r, sigma : :any:`numpy.ndarray`
        Sampled radii and stresses from the inner to the outer surface.
    moment : :any:`float`
        Applied bending moment.
    integrals : :class:`GeometryIntegrals`
        Integrals the result was derived from.
    """

    area: float
    y_bar: float
    y_n: float
    e: float
    r_n: float
    r_c: float
    r_inner: float
    r_outer: float
    sigma_inner: float
    sigma_outer: float
    max_tension: StressExtremum
    max_compression: StressExtremum
    r: np.ndarray = field(repr=False)
    sigma: np.ndarray = field(repr=False)
    moment: float = 0.0
    integrals: Optional[GeometryIntegrals] = field(default=None, repr=False)

    def __post_init__(self):
        for name in ('r', 'sigma'):
            arr = np.array(getattr(self, name), dtype=float)
            arr.flags.writeable = False
            object.__setattr__(self, name, arr)

    @property
    def ok(self) -> bool:
        return True

    def stress(self, r):
        """Stress at arbitrary radii between the two surfaces."""
        return winkler_bach_stress(self.moment, self.area, self.e, self.r_n,
                                   np.asarray(r, dtype=float))

    def to_dict(self) -> dict:
        """Result record keyed the way the presentation layer expects."""
        return {
            'ok': True,
            'A': self.area,
            'ybar': self.y_bar,
            'yn': self.y_n,
            'e': self.e,
            'Rn': self.r_n,
            'Rc': self.r_c,
            'rInner': self.r_inner,
            'rOuter': self.r_outer,
            'sigmaInner': self.sigma_inner,
            'sigmaOuter': self.sigma_outer,
            'maxTension': self.max_tension.to_dict(),
            'maxCompression': self.max_compression.to_dict(),
            'r': self.r.tolist(),
            'sigma': self.sigma.tolist(),
        }

    def table(self, decimals: int = 6) -> str:
        rows = [
            ('Area', 'A', self.area),
            ('Centroid offset', 'ȳ', self.y_bar),
            ('Neutral axis offset', 'y_n', self.y_n),
            ('Eccentricity', 'e', self.e),
            ('Centroid radius', 'R_c', self.r_c),
            ('Neutral axis radius', 'R_n', self.r_n),
            ('Inner radius', 'r_i', self.r_inner),
            ('Outer radius', 'r_o', self.r_outer),
            ('Bending moment', 'M', self.moment),
            ('Inner fibre stress', 'σ_i', self.sigma_inner),
            ('Outer fibre stress', 'σ_o', self.sigma_outer),
            (f'Max. tension ({self.max_tension.side})', 'σ_t',
             self.max_tension.value),
            (f'Max. compression ({self.max_compression.side})', 'σ_c',
             self.max_compression.value),
        ]
        return table_scalars(rows, decimals)

    def samples_table(self, decimals: int = 6) -> str:
        return table_columns([self.r, self.sigma], ['r', 'σ(r)'], decimals)


@dataclass(frozen=True)
class CurvedBeamFailure:
    """Terminal failure of a curved-beam computation.

    Parameters
    ----------
    kind : :class:`FailureKind`
        Category of the failure.
    message : :any:`str`
        Human readable reason, suitable to show next to the input form.
    """

    kind: FailureKind
    message: str

    @property
    def ok(self) -> bool:
        return False

    def to_dict(self) -> dict:
        return {'ok': False, 'kind': self.kind.value, 'message': self.message}
