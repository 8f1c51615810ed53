
from enum import Enum


class FailureKind(str, Enum):
    """Discriminator of a failed curved-beam computation."""

    INVALID_PARAMETER = 'invalid_parameter'
    UNSUPPORTED_SHAPE = 'unsupported_shape'
    DEGENERATE_GEOMETRY = 'degenerate_geometry'
    VANISHING_ECCENTRICITY = 'vanishing_eccentricity'
    MISSING_LOAD = 'missing_load'


class CurvedBeamError(ValueError):
    """Base class of all input and geometry errors of the solver.

    Every subclass carries its :class:`FailureKind` so that the error can be
    turned into a :class:`CurvedBeamFailure` record without inspecting the
    message.
    """

    kind: FailureKind

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidParameterError(CurvedBeamError):
    kind = FailureKind.INVALID_PARAMETER


class UnsupportedShapeError(CurvedBeamError):
    kind = FailureKind.UNSUPPORTED_SHAPE


class DegenerateGeometryError(CurvedBeamError):
    kind = FailureKind.DEGENERATE_GEOMETRY


class VanishingEccentricityError(CurvedBeamError):
    kind = FailureKind.VANISHING_ECCENTRICITY


class MissingLoadError(CurvedBeamError):
    kind = FailureKind.MISSING_LOAD
