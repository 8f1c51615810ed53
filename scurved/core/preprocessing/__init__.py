
from scurved.core.preprocessing.loads import BendingLoad
from scurved.core.preprocessing.section import (
    CircularSection,
    RectangularSection,
    Section,
    SectionType,
    TrapezoidalSection,
    TriangularSection,
    TSection,
    WidthProfile,
)
from scurved.core.preprocessing.validation import (
    SECTION_SPECS,
    ParamSpec,
    SectionSpec,
    ValidationResult,
    build_section,
    validate,
)


__all__ = [
    'BendingLoad',
    'build_section',
    'CircularSection',
    'ParamSpec',
    'RectangularSection',
    'Section',
    'SECTION_SPECS',
    'SectionSpec',
    'SectionType',
    'TrapezoidalSection',
    'TriangularSection',
    'TSection',
    'validate',
    'ValidationResult',
    'WidthProfile',
]
