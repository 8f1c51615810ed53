
import math
from dataclasses import dataclass
from typing import Optional

from scurved.core.errors import MissingLoadError
from scurved.core.utils import to_number


@dataclass(frozen=True)
class BendingLoad:
    r"""Pure bending load of a curved beam.

    The load is given either as a bending moment :math:`M` or as a force
    :math:`P` acting with the lever arm :math:`d` about the section. When
    both :math:`P` and :math:`d` are finite numbers their product is used
    and ``moment`` is ignored.

    Parameters
    ----------
    moment : :any:`float`, optional
        Bending moment :math:`M`.
    force : :any:`float`, optional
        Force :math:`P`.
    lever_arm : :any:`float`, optional
        Lever arm :math:`d` of the force.

    Examples
    --------
    >>> BendingLoad(moment=1000).resolve()
    1000.0
    >>> BendingLoad(moment=1000, force=500, lever_arm=0.1).resolve()
    50.0
    """

    moment: Optional[float] = None
    force: Optional[float] = None
    lever_arm: Optional[float] = None

    def resolve(self) -> float:
        """Bending moment acting on the section.

        Raises
        ------
        MissingLoadError
            If neither a finite moment nor a complete force/lever arm pair
            is given.
        """
        force = to_number(self.force)
        lever_arm = to_number(self.lever_arm)
        if math.isfinite(force) and math.isfinite(lever_arm):
            return force * lever_arm
        moment = to_number(self.moment)
        if math.isfinite(moment):
            return moment
        raise MissingLoadError('Provide bending moment M or both P and d')
