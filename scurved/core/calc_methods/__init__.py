
from scurved.core.calc_methods.straight_beam import SimplySupportedBeam
from scurved.core.calc_methods.winkler_bach import (
    WinklerBach,
    compute_curved_beam,
)


__all__ = [
    'compute_curved_beam',
    'SimplySupportedBeam',
    'WinklerBach',
]
