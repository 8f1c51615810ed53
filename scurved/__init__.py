
from scurved.core import (
    BendingLoad, CircularSection, CurvedBeamError, CurvedBeamFailure,
    CurvedBeamPlot, CurvedBeamResult, FailureKind, RectangularSection,
    SECTION_SPECS, SectionType, SimplySupportedBeam, TrapezoidalSection,
    TriangularSection, TSection, WinklerBach, compute_curved_beam, integrate,
    to_number, validate
)

__all__ = [
    'BendingLoad',
    'CircularSection',
    'compute_curved_beam',
    'CurvedBeamError',
    'CurvedBeamFailure',
    'CurvedBeamPlot',
    'CurvedBeamResult',
    'FailureKind',
    'integrate',
    'RectangularSection',
    'SECTION_SPECS',
    'SectionType',
    'SimplySupportedBeam',
    'to_number',
    'TrapezoidalSection',
    'TriangularSection',
    'TSection',
    'validate',
    'WinklerBach',
]
