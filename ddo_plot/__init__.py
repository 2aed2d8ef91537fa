"""
ddo_plot — Progress Charts for ddo Solver Traces
================================================

Parses the progress lines a ddo (decision diagram optimization) solver
prints while it searches::

    Explored 6700, LB 11, UB 12, Fringe sz 90
    Final 11, Explored 6790

and charts lower bound, upper bound and frontier size against the number of
explored nodes, as an SVG file or as text in the terminal.

Quick start
-----------
>>> from ddo_plot.trace import trace_from_text
>>> from ddo_plot.chart import compose_chart
>>> from ddo_plot.render import render_text
>>> from ddo_plot.layout import FALLBACK_DIMENSION
>>> trace = trace_from_text(open("run.log").read(), name="run")
>>> chart = compose_chart([trace], "bounds")
>>> print(render_text(chart, FALLBACK_DIMENSION))
"""

from .records import (
    Ongoing,
    Final,
    MetricRecord,
    FINAL_FRONTIER_SIZE,
    explored,
    lower_bound,
    upper_bound,
    frontier_size,
)
from .parser import parse_line, parse_dimension, Dimension, DimensionFormatError
from .trace import (
    Trace,
    build_trace,
    trace_from_text,
    read_trace,
    load_trace,
    trace_to_dict,
    trace_from_dict,
    save_traces_json,
    load_traces_json,
    trace_to_frame,
)
from .series import lower_bound_series, upper_bound_series, frontier_series
from .ranges import value_range, MODE_BOUNDS, MODE_FRONTIER
from .chart import compose_chart, ChartSpec, ChartSeries, PALETTE
from .layout import resolve_dimensions, terminal_probe, FALLBACK_DIMENSION

__all__ = [
    # records
    "Ongoing", "Final", "MetricRecord", "FINAL_FRONTIER_SIZE",
    "explored", "lower_bound", "upper_bound", "frontier_size",
    # parser
    "parse_line", "parse_dimension", "Dimension", "DimensionFormatError",
    # trace
    "Trace", "build_trace", "trace_from_text", "read_trace", "load_trace",
    "trace_to_dict", "trace_from_dict", "save_traces_json", "load_traces_json",
    "trace_to_frame",
    # series
    "lower_bound_series", "upper_bound_series", "frontier_series",
    # ranges
    "value_range", "MODE_BOUNDS", "MODE_FRONTIER",
    # chart
    "compose_chart", "ChartSpec", "ChartSeries", "PALETTE",
    # layout
    "resolve_dimensions", "terminal_probe", "FALLBACK_DIMENSION",
]
