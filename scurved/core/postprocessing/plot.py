
from dataclasses import dataclass
from typing import Literal, Optional

import numpy as np
import plotly.graph_objs as go

from scurved.core.defaults import (
    DEFAULT_CENTROID_LINE, DEFAULT_FIBER_POINT, DEFAULT_NEUTRAL_AXIS_LINE,
    DEFAULT_OUTLINE_N, DEFAULT_POLYGON, DEFAULT_STRESS_LINE,
    DEFAULT_SURFACE_LINE
)
from scurved.core.postprocessing.results import CurvedBeamResult
from scurved.core.preprocessing.section import WidthProfile


@dataclass(eq=False)
class CurvedBeamPlot:
    """
    Plotly figures of a curved-beam result.

    Parameters
    ----------
    result : :class:`CurvedBeamResult`
        Solved curved beam.
    profile : :class:`WidthProfile`, optional
        Width profile of the section; only needed for
        :meth:`section_figure`.

    Examples
    --------
    >>> from scurved import compute_curved_beam, RectangularSection
    >>> res = compute_curved_beam('rectangular', {'b': 0.02, 't': 0.02},
    ...                           ri=0.05, moment=1000)
    >>> prof = RectangularSection(b=0.02, t=0.02).profile()
    >>> plot = CurvedBeamPlot(res, prof)
    >>> fig = plot.stress_figure()
    >>> len(fig.data)
    3
    """

    result: CurvedBeamResult
    profile: Optional[WidthProfile] = None

    @staticmethod
    def _layout(x_title: str, y_title: str, **y_opts):
        return go.Layout(
            template='simple_white',
            xaxis=dict(title=x_title, showgrid=True),
            yaxis=dict(title=y_title, showgrid=True, **y_opts),
        )

    def stress_figure(self) -> go.Figure:
        """Stress over the radius with both surfaces and the neutral axis."""
        res = self.result
        fig = go.Figure(layout=self._layout('r', 'σ(r)'))
        fig.add_trace(go.Scatter(x=res.r, y=res.sigma, **DEFAULT_STRESS_LINE))
        fig.add_trace(go.Scatter(
            x=[res.r_inner, res.r_outer],
            y=[res.sigma_inner, res.sigma_outer],
            text=['inner', 'outer'],
            **DEFAULT_FIBER_POINT
        ))
        lo = min(res.sigma_inner, res.sigma_outer, 0.0)
        hi = max(res.sigma_inner, res.sigma_outer, 0.0)
        fig.add_trace(go.Scatter(
            x=[res.r_n, res.r_n], y=[lo, hi], **DEFAULT_NEUTRAL_AXIS_LINE
        ))
        return fig

    def section_figure(self, n: int = DEFAULT_OUTLINE_N) -> go.Figure:
        """Schematic cross-section with surfaces, centroid and neutral axis.

        The radial offset runs downwards from the inner surface; the figure
        is not to scale across the two axes.

        Raises
        ------
        ValueError
            If no width profile was given.
        """
        if self.profile is None:
            raise ValueError('A width profile is required for the section '
                             'figure.')
        res = self.result
        x, y = self.profile.outline(n)
        half = max(float(np.max(np.abs(x))), 1e-9) * 1.2
        span = [-half, half]

        fig = go.Figure(layout=self._layout(
            'b', 'y', autorange='reversed'
        ))
        fig.add_trace(go.Scatter(x=x, y=y, **DEFAULT_POLYGON))
        for y_line in (0.0, self.profile.thickness):
            fig.add_trace(go.Scatter(
                x=span, y=[y_line, y_line], **DEFAULT_SURFACE_LINE
            ))
        fig.add_trace(go.Scatter(
            x=span, y=[res.y_bar, res.y_bar], **DEFAULT_CENTROID_LINE
        ))
        fig.add_trace(go.Scatter(
            x=span, y=[res.y_n, res.y_n], **DEFAULT_NEUTRAL_AXIS_LINE
        ))
        return fig

    def show(self, kind: Literal['stress', 'section'] = 'stress', *args,
             **kwargs):
        figures = {'stress': self.stress_figure,
                   'section': self.section_figure}
        try:
            figure = figures[kind]
        except KeyError:
            raise ValueError(f"Unknown kind: {kind}")
        figure().show(renderer='browser', *args, **kwargs)
