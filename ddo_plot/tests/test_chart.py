"""Unit tests for value ranges, chart composition and terminal layout."""

from __future__ import annotations
import io, sys, unittest
from pathlib import Path
from unittest import mock
import numpy as np

sys.path.insert(0, str(Path(__file__).parent.parent.parent))
from ddo_plot.trace import Trace, trace_from_text
from ddo_plot.ranges import value_range, MODE_BOUNDS, MODE_FRONTIER, RANGE_MARGIN
from ddo_plot.chart import (
    compose_chart, trace_color, PALETTE,
    MARKER_CIRCLE, MARKER_CROSS, MARKER_SQUARE,
)
from ddo_plot.layout import (
    resolve_dimensions, terminal_probe, FALLBACK_DIMENSION, TERMINAL_MARGIN,
)
from ddo_plot.parser import Dimension


BOUNDS_LOG = (
    "Explored 5900, LB 11, UB 14, Fringe sz 890\n"
    "Explored 6000, LB 11, UB 14, Fringe sz 790\n"
    "Explored 6400, LB 11, UB 13, Fringe sz 390\n"
    "Explored 6600, LB 11, UB 12, Fringe sz 190\n"
)


def _trace(name=None, text=BOUNDS_LOG):
    return trace_from_text(text, name=name)


# ---------------------------------------------------------------------------
# Ranges
# ---------------------------------------------------------------------------


class TestValueRange(unittest.TestCase):

    def test_empty_trace_bounds(self):
        self.assertEqual(value_range([Trace(name=None)], MODE_BOUNDS), (-1.0, 1.0))

    def test_empty_trace_frontier(self):
        self.assertEqual(value_range([Trace(name=None)], MODE_FRONTIER), (-1.0, 1.0))

    def test_no_traces(self):
        self.assertEqual(value_range([], MODE_BOUNDS), (-1.0, 1.0))

    def test_bounds_margin(self):
        self.assertEqual(value_range([_trace()], MODE_BOUNDS), (10.0, 15.0))

    def test_frontier_margin(self):
        self.assertEqual(value_range([_trace()], MODE_FRONTIER), (189.0, 891.0))

    def test_final_record_counts_frontier_zero(self):
        trace = _trace(text=BOUNDS_LOG + "Final 11, Explored 6790\n")
        self.assertEqual(value_range([trace], MODE_FRONTIER), (-1.0, 891.0))

    def test_range_pools_all_traces(self):
        other = _trace(text="Explored 1, LB -4, UB 30, Fringe sz 2\n")
        self.assertEqual(value_range([_trace(), other], MODE_BOUNDS), (-5.0, 31.0))

    def test_empty_trace_does_not_pull_range_to_zero(self):
        self.assertEqual(value_range([_trace(), Trace(name="e")], MODE_BOUNDS), (10.0, 15.0))

    def test_inverted_bounds_still_covered(self):
        trace = _trace(text="Explored 1, LB 20, UB 3, Fringe sz 0\n")
        self.assertEqual(value_range([trace], MODE_BOUNDS), (2.0, 21.0))

    def test_margin_constant(self):
        self.assertEqual(RANGE_MARGIN, 1)

    def test_unknown_mode_raises(self):
        with self.assertRaises(ValueError):
            value_range([_trace()], "gap")


# ---------------------------------------------------------------------------
# Composition
# ---------------------------------------------------------------------------


class TestComposeBounds(unittest.TestCase):

    def test_two_series_per_trace(self):
        chart = compose_chart([_trace("a"), _trace("b")], MODE_BOUNDS)
        self.assertEqual(len(chart.series), 4)
        self.assertEqual(
            [s.legend for s in chart.series],
            ["a - Lower Bound", "a - Upper Bound", "b - Lower Bound", "b - Upper Bound"],
        )

    def test_markers(self):
        chart = compose_chart([_trace("a")], MODE_BOUNDS)
        self.assertEqual([s.marker for s in chart.series], [MARKER_CIRCLE, MARKER_CROSS])

    def test_unnamed_legends(self):
        chart = compose_chart([_trace()], MODE_BOUNDS)
        self.assertEqual([s.legend for s in chart.series], ["Lower Bound", "Upper Bound"])

    def test_axis_labels_and_range(self):
        chart = compose_chart([_trace("a")], MODE_BOUNDS)
        self.assertEqual(chart.x_label, "Explored Nodes")
        self.assertEqual(chart.y_label, "Bound Value")
        self.assertEqual(chart.y_range, (10.0, 15.0))
        self.assertIsNone(chart.title)

    def test_both_bounds_share_trace_color(self):
        chart = compose_chart([_trace("a")], MODE_BOUNDS)
        self.assertEqual(chart.series[0].color, chart.series[1].color)

    def test_points_follow_projection(self):
        chart = compose_chart([_trace("a")], MODE_BOUNDS)
        np.testing.assert_array_equal(chart.series[1].ys, [14.0, 14.0, 13.0, 12.0])
        np.testing.assert_array_equal(chart.series[1].xs, [5900.0, 6000.0, 6400.0, 6600.0])


class TestComposeFrontier(unittest.TestCase):

    def test_one_series_per_trace(self):
        chart = compose_chart([_trace("a"), _trace()], MODE_FRONTIER)
        self.assertEqual([s.legend for s in chart.series],
                         ["a - Frontier Size", "Frontier Size"])
        self.assertTrue(all(s.marker == MARKER_SQUARE for s in chart.series))

    def test_axis_labels(self):
        chart = compose_chart([_trace("a")], MODE_FRONTIER)
        self.assertEqual(chart.x_label, "Explored Nodes")
        self.assertEqual(chart.y_label, "Frontier Size")
        self.assertEqual(chart.y_range, (189.0, 891.0))

    def test_empty_trace_gives_valid_chart(self):
        chart = compose_chart([Trace(name=None)], MODE_FRONTIER, title="empty")
        self.assertEqual(chart.y_range, (-1.0, 1.0))
        self.assertTrue(chart.series[0].is_empty)
        self.assertEqual(chart.title, "empty")

    def test_unknown_mode_raises(self):
        with self.assertRaises(ValueError):
            compose_chart([_trace()], "both")


class TestColorAssignment(unittest.TestCase):

    def test_palette_size(self):
        self.assertEqual(len(PALETTE), 5)

    def test_cyclic_by_index(self):
        traces = [_trace(f"t{i}") for i in range(12)]
        chart = compose_chart(traces, MODE_FRONTIER)
        for i, s in enumerate(chart.series):
            self.assertEqual(s.color, PALETTE[i % 5])

    def test_sixth_trace_reuses_first_color(self):
        self.assertEqual(trace_color(5), trace_color(0))

    def test_independent_of_content(self):
        a = compose_chart([Trace(name=None), _trace("x")], MODE_BOUNDS)
        b = compose_chart([_trace("y"), Trace(name="z")], MODE_BOUNDS)
        self.assertEqual([s.color for s in a.series], [s.color for s in b.series])


# ---------------------------------------------------------------------------
# Layout
# ---------------------------------------------------------------------------


class TestResolveDimensions(unittest.TestCase):

    def test_explicit_wins(self):
        self.assertEqual(resolve_dimensions(Dimension(80, 24), lambda: (200, 60)),
                         Dimension(80, 24))

    def test_explicit_does_not_probe(self):
        def probe():
            raise AssertionError("probe must not be called")
        self.assertEqual(resolve_dimensions(Dimension(10, 5), probe), Dimension(10, 5))

    def test_probe_reduced_by_margin(self):
        self.assertEqual(TERMINAL_MARGIN, 10)
        self.assertEqual(resolve_dimensions(None, lambda: (120, 40)), Dimension(110, 30))

    def test_fallback(self):
        self.assertEqual(resolve_dimensions(None, lambda: None), Dimension(45, 15))
        self.assertEqual(FALLBACK_DIMENSION, (45, 15))

    def test_tiny_terminal_clamped(self):
        self.assertEqual(resolve_dimensions(None, lambda: (8, 10)), Dimension(1, 1))

    def test_probe_without_terminal_returns_none(self):
        with mock.patch.object(sys, "stdout", io.StringIO()):
            self.assertIsNone(terminal_probe())

    def test_probe_reads_terminal_size(self):
        fake = mock.Mock(columns=132, lines=43)
        stdout = mock.Mock(fileno=mock.Mock(return_value=1))
        with mock.patch.object(sys, "stdout", stdout), \
                mock.patch("ddo_plot.layout.os.get_terminal_size", return_value=fake) as probe:
            self.assertEqual(terminal_probe(), (132, 43))
        probe.assert_called_once_with(1)


if __name__ == "__main__":
    unittest.main()
