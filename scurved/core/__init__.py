
from scurved.core import calc_methods, postprocessing, preprocessing
from scurved.core.calc_methods import *  # noqa: F401, F403
from scurved.core.errors import (  # noqa: F401
    CurvedBeamError, DegenerateGeometryError, FailureKind,
    InvalidParameterError, MissingLoadError, UnsupportedShapeError,
    VanishingEccentricityError
)
from scurved.core.postprocessing import *  # noqa: F401, F403
from scurved.core.preprocessing import *  # noqa: F401, F403
from scurved.core.utils import integrate, to_number  # noqa: F401

__all__ = [
    'calc_methods',
    'postprocessing',
    'preprocessing',
]
