
import math
from dataclasses import dataclass
from functools import cached_property

import numpy as np


def _require_finite(**values):
    for name, value in values.items():
        if not math.isfinite(value):
            raise ValueError(f'{name} has to be a finite number.')


@dataclass(eq=False)
class SimplySupportedBeam:
    r"""Closed-form results of a straight, simply supported beam.

    Covers the two standard load cases: a uniformly distributed load
    :math:`w` over the whole span and a point load :math:`P` at mid-span.

    Parameters
    ----------
    length : :any:`float`
        Span :math:`L`.
    n_disc : :any:`int`, default=100
        Number of segments for the discretised shear force and moment
        (:py:attr:`n_disc` + 1 stations).

    Raises
    ------
    ValueError
        :py:attr:`length` has to be a finite number greater than zero and
        :py:attr:`n_disc` greater than zero.

    Examples
    --------
    >>> beam = SimplySupportedBeam(4.0)
    >>> beam.max_moment_udl(10.0)
    20.0
    >>> beam.max_moment_point_mid(10.0)
    10.0
    """

    length: float
    n_disc: int = 100

    def __post_init__(self):
        if not (math.isfinite(self.length) and self.length > 0):
            raise ValueError('length has to be greater than zero.')
        if self.n_disc < 1:
            raise ValueError('"n_disc" has to be greater than 0')

    @cached_property
    def x(self) -> np.ndarray:
        """Stations along the span from 0 to :py:attr:`length`."""
        return np.linspace(0, self.length, self.n_disc + 1)

    def max_moment_udl(self, w: float) -> float:
        r""":math:`M_{max} = w L^2 / 8` at mid-span."""
        _require_finite(w=w)
        return w * self.length ** 2 / 8

    def max_deflection_udl(
            self, w: float, young_mod: float, mom_of_int: float
    ) -> float:
        r"""Mid-span deflection under a uniform load.

        .. math::
            \delta_{max} = \frac{5 w L^4}{384 E I}

        Raises
        ------
        ValueError
            If ``young_mod`` or ``mom_of_int`` is not greater than zero.
        """
        _require_finite(w=w, young_mod=young_mod, mom_of_int=mom_of_int)
        if young_mod <= 0:
            raise ValueError('young_mod has to be greater than zero.')
        if mom_of_int <= 0:
            raise ValueError('mom_of_int has to be greater than zero.')
        return 5 * w * self.length ** 4 / (384 * young_mod * mom_of_int)

    def max_moment_point_mid(self, p: float) -> float:
        r""":math:`M_{max} = P L / 4` under the load."""
        _require_finite(p=p)
        return p * self.length / 4

    def udl_forces_disc(self, w: float) -> np.ndarray:
        r"""Shear force and moment under a uniform load.

        Returns
        -------
        :any:`numpy.ndarray`
            Shape (n_disc + 1, 2); columns :math:`V(x) = wL/2 - w x` and
            :math:`M(x) = wL/2 \, x - w x^2 / 2`.
        """
        _require_finite(w=w)
        x = self.x
        reaction = w * self.length / 2
        return np.column_stack([reaction - w * x,
                                reaction * x - w * x ** 2 / 2])

    def point_mid_forces_disc(self, p: float) -> np.ndarray:
        r"""Shear force and moment under a mid-span point load.

        The shear force jumps from :math:`+P/2` to :math:`-P/2` at
        mid-span; the station at mid-span belongs to the right half.

        Returns
        -------
        :any:`numpy.ndarray`
            Shape (n_disc + 1, 2); columns :math:`V(x)` and :math:`M(x)`.
        """
        _require_finite(p=p)
        x, half = self.x, self.length / 2
        left = x < half
        shear = np.where(left, p / 2, -p / 2)
        moment = np.where(left, p / 2 * x, p / 2 * (self.length - x))
        return np.column_stack([shear, moment])
