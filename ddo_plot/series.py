"""
Projection of a trace onto ``(explored, metric)`` coordinate series.

Each series is a float64 array of shape ``(n, 2)``: column 0 is the explored
count, column 1 the metric.  Rows follow record order; duplicate x values are
kept and nothing is sorted, so a line drawn through the points assumes the
log was written with non-decreasing explored counts.
"""

from __future__ import annotations

from typing import Callable

import numpy as np

from .records import MetricRecord, explored, frontier_size, lower_bound, upper_bound
from .trace import Trace


SERIES_LOWER_BOUND = "lower_bound"
SERIES_UPPER_BOUND = "upper_bound"
SERIES_FRONTIER = "frontier_size"

_METRICS: dict[str, Callable[[MetricRecord], int]] = {
    SERIES_LOWER_BOUND: lower_bound,
    SERIES_UPPER_BOUND: upper_bound,
    SERIES_FRONTIER: frontier_size,
}


def project(trace: Trace, kind: str) -> np.ndarray:
    """Return the ``(explored, metric)`` points of *trace* for series *kind*.

    Parameters
    ----------
    trace : Trace
    kind : str
        One of ``"lower_bound"``, ``"upper_bound"``, ``"frontier_size"``.

    Returns
    -------
    np.ndarray, shape (n, 2), dtype float64

    Raises
    ------
    ValueError
        If *kind* is not a known series kind.
    """
    if kind not in _METRICS:
        raise ValueError(f"series kind must be one of {sorted(_METRICS)}, got {kind!r}")

    metric = _METRICS[kind]
    points = np.empty((len(trace.records), 2), dtype=np.float64)
    for row, record in enumerate(trace.records):
        points[row, 0] = explored(record)
        points[row, 1] = metric(record)
    return points


def lower_bound_series(trace: Trace) -> np.ndarray:
    return project(trace, SERIES_LOWER_BOUND)


def upper_bound_series(trace: Trace) -> np.ndarray:
    return project(trace, SERIES_UPPER_BOUND)


def frontier_series(trace: Trace) -> np.ndarray:
    return project(trace, SERIES_FRONTIER)
