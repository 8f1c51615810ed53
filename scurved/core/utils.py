
import math
from typing import Any, Callable

import numpy as np

from scurved.core.defaults import DEFAULT_QUADRATURE_N


def integrate(t: float, f: Callable, n: int = DEFAULT_QUADRATURE_N) -> float:
    r"""Integrate ``f`` over :math:`[0, t]` with the composite trapezoidal
    rule.

    Parameters
    ----------
    t : :any:`float`
        Upper limit of integration. Values that are not strictly positive
        (including ``nan``) give a zero integral.
    f : callable
        Integrand. It is called once with a :any:`numpy.ndarray` holding all
        ``n + 1`` abscissae and must return values of the same shape or a
        scalar, which is broadcast.
    n : :any:`int`, default=800
        Number of equal sub-intervals.

    Returns
    -------
    :any:`float`
        Approximation of :math:`\int_0^t f(y)\,dy`. Non-finite integrand
        values propagate into the result.

    Raises
    ------
    ValueError
        If ``n`` is smaller than 1.

    Notes
    -----
    With the step :math:`h = t / n` the rule reads

    .. math::
        \int_0^t f\,dy \approx h \left(\frac{f_0}{2} + \sum_{i=1}^{n-1} f_i
        + \frac{f_n}{2}\right).

    Examples
    --------
    >>> from scurved.core.utils import integrate
    >>> integrate(2.0, lambda y: y)
    2.0
    >>> integrate(-1.0, lambda y: y)
    0.0
    """
    if n < 1:
        raise ValueError('"n" has to be greater than 0')
    if not t > 0:
        return 0.0
    y = np.linspace(0.0, t, n + 1)
    values = np.broadcast_to(np.asarray(f(y), dtype=float), y.shape)
    weights = np.ones(n + 1)
    weights[0] = weights[-1] = 0.5
    return float(np.dot(weights, values) * (t / n))


def to_number(x: Any, default: float = math.nan) -> float:
    """Coerce raw user input to a finite float.

    ``None``, empty or blank strings and everything that is not a finite
    number give ``default``. Strings such as ``'0.05'`` or ``'1e3'`` are
    parsed.

    Examples
    --------
    >>> to_number('0.02')
    0.02
    >>> to_number('', default=0.0)
    0.0
    """
    if x is None or (isinstance(x, str) and not x.strip()):
        return default
    try:
        value = float(x)
    except (TypeError, ValueError):
        return default
    return value if math.isfinite(value) else default
