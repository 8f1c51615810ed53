
from typing import Any

DEFAULT_SAMPLES = 201
"""Number of (r, sigma) points returned by the Winkler-Bach solver."""

DEFAULT_QUADRATURE_N = 800
"""Sub-intervals of the trapezoidal rule. The circular profile has an
unbounded slope at both tangent points and needs a dense grid there."""

ECCENTRICITY_TOL = 1e-12
"""Absolute lower bound for |e|."""

ECCENTRICITY_ULPS = 64
"""Lower bound for |e| in units of the float spacing at the centroid radius."""

DEFAULT_OUTLINE_N = 80
"""Stations used to draw the schematic cross-section outline."""

DEFAULT = dict(
    showlegend=False,
    hoverinfo='skip'
)

DEFAULT_STRESS_LINE: dict[str, Any] = dict(
    mode='lines',
    line=dict(color='#1a73e8', width=2),
    name='σ(r)',
)

DEFAULT_FIBER_POINT: dict[str, Any] = dict(
    mode='markers+text',
    marker=dict(size=8, color='black'),
    textposition='top center',
    **DEFAULT
)

DEFAULT_POLYGON: dict[str, Any] = dict(
    mode='lines',
    fill='toself',
    fillcolor='#e8f0fe',
    line=dict(color='#1a73e8', width=1),
    **DEFAULT
)

DEFAULT_SURFACE_LINE: dict[str, Any] = dict(
    mode='lines',
    line=dict(color='#999999', width=1, dash='dash'),
    **DEFAULT
)

DEFAULT_CENTROID_LINE: dict[str, Any] = dict(
    mode='lines',
    line=dict(color='#43a047', width=1, dash='dot'),
    name='centroid ȳ',
)

DEFAULT_NEUTRAL_AXIS_LINE: dict[str, Any] = dict(
    mode='lines',
    line=dict(color='#e53935', width=1, dash='dot'),
    name='neutral axis y_n',
)
