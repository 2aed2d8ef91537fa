"""
Y-axis value range for a chart.

The range spans every plotted value of every trace, widened by a fixed
margin of one unit on each side so extreme points never sit on the plot
border.
"""

from __future__ import annotations

from typing import Sequence

import numpy as np

from .records import frontier_size, lower_bound, upper_bound
from .trace import Trace


MODE_BOUNDS = "bounds"
MODE_FRONTIER = "frontier"
CHART_MODES = {MODE_BOUNDS, MODE_FRONTIER}

RANGE_MARGIN: int = 1


def _mode_values(traces: Sequence[Trace], mode: str) -> np.ndarray:
    if mode == MODE_BOUNDS:
        values = [
            value
            for trace in traces
            for r in trace.records
            for value in (lower_bound(r), upper_bound(r))
        ]
    elif mode == MODE_FRONTIER:
        values = [frontier_size(r) for trace in traces for r in trace.records]
    else:
        raise ValueError(f"mode must be one of {CHART_MODES}, got {mode!r}")
    return np.asarray(values, dtype=np.float64)


def value_range(traces: Sequence[Trace], mode: str) -> tuple[float, float]:
    """Compute the inclusive y-axis range ``(low, high)`` for *traces*.

    Parameters
    ----------
    traces : sequence of Trace
        All traces drawn on the chart.  Records are pooled across traces;
        an empty trace contributes nothing.
    mode : str
        ``"bounds"`` pools lower and upper bounds, ``"frontier"`` pools
        frontier sizes.

    Returns
    -------
    (low, high) : tuple of float
        ``min - 1`` and ``max + 1``.  When there is no record at all both
        extremes default to 0, giving ``(-1.0, 1.0)``.

    Raises
    ------
    ValueError
        If *mode* is unknown.
    """
    values = _mode_values(traces, mode)
    if values.size == 0:
        low = high = 0.0
    else:
        low = float(values.min())
        high = float(values.max())
    return low - RANGE_MARGIN, high + RANGE_MARGIN
