"""
Chart composition: styled series, axis labels and y range.

The composer turns an ordered list of traces into a :class:`ChartSpec`, the
backend-neutral description handed to the renderers in :mod:`ddo_plot.render`.
It draws nothing itself.

Styling rules
-------------
* Trace ``i`` is drawn in ``PALETTE[i % len(PALETTE)]``; both bound series of
  a trace share its color.
* Markers depend only on the series kind: circle for the lower bound, cross
  for the upper bound, square for the frontier size.
* Legends are ``"<name> - <label>"``, or the bare label for unnamed traces.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Sequence

import numpy as np

from .ranges import CHART_MODES, MODE_BOUNDS, MODE_FRONTIER, value_range
from .series import SERIES_FRONTIER, SERIES_LOWER_BOUND, SERIES_UPPER_BOUND, project
from .trace import Trace


# ---------------------------------------------------------------------------
# Style constants
# ---------------------------------------------------------------------------

PALETTE = ("#C1EBE1", "#90B9A9", "#FF0000", "#00FF00", "#0000FF")

MARKER_CIRCLE = "circle"
MARKER_CROSS = "cross"
MARKER_SQUARE = "square"

SERIES_MARKERS = {
    SERIES_LOWER_BOUND: MARKER_CIRCLE,
    SERIES_UPPER_BOUND: MARKER_CROSS,
    SERIES_FRONTIER: MARKER_SQUARE,
}
SERIES_LABELS = {
    SERIES_LOWER_BOUND: "Lower Bound",
    SERIES_UPPER_BOUND: "Upper Bound",
    SERIES_FRONTIER: "Frontier Size",
}

X_LABEL = "Explored Nodes"
Y_LABELS = {
    MODE_BOUNDS: "Bound Value",
    MODE_FRONTIER: "Frontier Size",
}

_MODE_SERIES = {
    MODE_BOUNDS: (SERIES_LOWER_BOUND, SERIES_UPPER_BOUND),
    MODE_FRONTIER: (SERIES_FRONTIER,),
}


# ---------------------------------------------------------------------------
# Chart description
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class ChartSeries:
    """One styled point sequence.

    Attributes
    ----------
    legend : str
    kind : str
        ``"lower_bound"``, ``"upper_bound"`` or ``"frontier_size"``.
    marker : str
        ``"circle"``, ``"cross"`` or ``"square"``.
    color : str
        Hex color from :data:`PALETTE`.
    points : np.ndarray, shape (n, 2)
        ``(explored, value)`` rows.
    """

    legend: str
    kind: str
    marker: str
    color: str
    points: np.ndarray = field(compare=False, repr=False)

    @property
    def xs(self) -> np.ndarray:
        return self.points[:, 0]

    @property
    def ys(self) -> np.ndarray:
        return self.points[:, 1]

    @property
    def is_empty(self) -> bool:
        return self.points.shape[0] == 0


@dataclass(frozen=True)
class ChartSpec:
    """Everything a rendering backend needs to draw the chart."""

    mode: str
    series: tuple[ChartSeries, ...]
    x_label: str
    y_label: str
    y_range: tuple[float, float]
    title: str | None = None


# ---------------------------------------------------------------------------
# Composition
# ---------------------------------------------------------------------------


def legend_for(trace: Trace, kind: str) -> str:
    label = SERIES_LABELS[kind]
    if trace.name is None:
        return label
    return f"{trace.name} - {label}"


def trace_color(index: int) -> str:
    """Palette color of the trace at position *index*, cycling every 5."""
    return PALETTE[index % len(PALETTE)]


def compose_chart(
    traces: Sequence[Trace],
    mode: str,
    title: str | None = None,
) -> ChartSpec:
    """Assemble the chart description for *traces*.

    Parameters
    ----------
    traces : sequence of Trace
        Traces in legend order.  Colors are assigned by position only.
    mode : str
        ``"bounds"``: a lower-bound and an upper-bound series per trace.
        ``"frontier"``: one frontier-size series per trace.
    title : str, optional
        Chart title, drawn by backends that support it.

    Returns
    -------
    ChartSpec

    Raises
    ------
    ValueError
        If *mode* is unknown.
    """
    if mode not in CHART_MODES:
        raise ValueError(f"mode must be one of {CHART_MODES}, got {mode!r}")

    series = []
    for index, trace in enumerate(traces):
        color = trace_color(index)
        for kind in _MODE_SERIES[mode]:
            series.append(
                ChartSeries(
                    legend=legend_for(trace, kind),
                    kind=kind,
                    marker=SERIES_MARKERS[kind],
                    color=color,
                    points=project(trace, kind),
                )
            )

    return ChartSpec(
        mode=mode,
        series=tuple(series),
        x_label=X_LABEL,
        y_label=Y_LABELS[mode],
        y_range=value_range(traces, mode),
        title=title,
    )
