
from scurved.core.postprocessing.results import (
    CurvedBeamFailure,
    CurvedBeamResult,
    GeometryIntegrals,
    StressExtremum,
    winkler_bach_stress,
)
from scurved.core.postprocessing.plot import CurvedBeamPlot


__all__ = [
    'CurvedBeamFailure',
    'CurvedBeamPlot',
    'CurvedBeamResult',
    'GeometryIntegrals',
    'StressExtremum',
    'winkler_bach_stress',
]
