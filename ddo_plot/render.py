"""
Rendering backends for a :class:`~ddo_plot.chart.ChartSpec`.

Two outputs are supported:

  SVG file
      matplotlib (Agg backend, seaborn theme).  Uses matplotlib's own canvas
      size; the terminal layout is not consulted.

  Terminal text
      plotext, sized by a :class:`~ddo_plot.parser.Dimension` from
      :func:`ddo_plot.layout.resolve_dimensions`.

Series without points are skipped; the axes, labels and y range are still
drawn, so an empty trace gives a blank but valid chart.
"""

from __future__ import annotations

import io
import sys
from pathlib import Path

import matplotlib
matplotlib.use("Agg")  # Non-interactive; safe for headless/CI environments
import matplotlib.colors as mcolors
import matplotlib.pyplot as plt
import plotext
import seaborn as sns

from .chart import MARKER_CIRCLE, MARKER_CROSS, MARKER_SQUARE, ChartSpec
from .config import SVG_DPI
from .parser import Dimension


# ---------------------------------------------------------------------------
# Style constants
# ---------------------------------------------------------------------------

SVG_FIGSIZE = (10, 6)
LINE_WIDTH = 1.4
MARKER_SIZE = 5
BACKGROUND = "#FAFAFA"
ACCENT = "#2C3E50"

_SVG_MARKERS = {MARKER_CIRCLE: "o", MARKER_CROSS: "x", MARKER_SQUARE: "s"}
_TEXT_MARKERS = {MARKER_CIRCLE: "o", MARKER_CROSS: "x", MARKER_SQUARE: "#"}

sns.set_theme(style="whitegrid")


# ---------------------------------------------------------------------------
# SVG
# ---------------------------------------------------------------------------


def svg_bytes(chart: ChartSpec, dpi: int = SVG_DPI) -> bytes:
    """Draw *chart* and return the SVG document, without touching the disk.

    Parameters
    ----------
    chart : ChartSpec
    dpi : int

    Returns
    -------
    bytes
        The encoded SVG file content.
    """
    fig, ax = plt.subplots(figsize=SVG_FIGSIZE, facecolor=BACKGROUND)
    try:
        ax.set_facecolor(BACKGROUND)
        drawn = 0
        for s in chart.series:
            if s.is_empty:
                continue
            ax.plot(
                s.xs, s.ys,
                label=s.legend,
                color=s.color,
                marker=_SVG_MARKERS[s.marker],
                markersize=MARKER_SIZE,
                linewidth=LINE_WIDTH,
            )
            drawn += 1

        ax.set_ylim(*chart.y_range)
        ax.set_xlabel(chart.x_label, fontsize=12, color=ACCENT)
        ax.set_ylabel(chart.y_label, fontsize=12, color=ACCENT)
        if chart.title:
            ax.set_title(chart.title, fontsize=13, fontweight="bold", color=ACCENT)
        if drawn:
            ax.legend(fontsize=9, framealpha=0.85)

        fig.tight_layout()
        buffer = io.BytesIO()
        fig.savefig(buffer, format="svg", dpi=dpi)
    finally:
        plt.close(fig)

    return buffer.getvalue()


def render_svg(chart: ChartSpec, path: str | Path, dpi: int = SVG_DPI) -> Path:
    """Draw *chart* and save it as an SVG file.

    The figure is rendered into memory first, so nothing is written to
    *path* if drawing fails.

    Parameters
    ----------
    chart : ChartSpec
    path : str or Path
        Destination file.  Its parent directory must exist.
    dpi : int

    Returns
    -------
    Path
        The written file.

    Raises
    ------
    OSError
        If *path* cannot be written.
    """
    path = Path(path)
    path.write_bytes(svg_bytes(chart, dpi=dpi))
    print(f"  [ddo-plot] SVG chart → {path}", file=sys.stderr)
    return path


# ---------------------------------------------------------------------------
# Terminal text
# ---------------------------------------------------------------------------


def _rgb(color: str) -> tuple[int, int, int]:
    r, g, b = mcolors.to_rgb(color)
    return round(r * 255), round(g * 255), round(b * 255)


def render_text(chart: ChartSpec, dimension: Dimension, colorless: bool = False) -> str:
    """Draw *chart* as terminal text of the given size.

    Parameters
    ----------
    chart : ChartSpec
    dimension : Dimension
        Canvas width and height in character cells.
    colorless : bool
        Strip ANSI color codes from the result.

    Returns
    -------
    str
        The chart, ready to print.
    """
    plotext.clf()
    plotext.theme("clear")
    plotext.plotsize(dimension.width, dimension.height)

    for s in chart.series:
        if s.is_empty:
            continue
        plotext.plot(
            s.xs.tolist(), s.ys.tolist(),
            label=s.legend,
            color=_rgb(s.color),
            marker=_TEXT_MARKERS[s.marker],
        )

    plotext.ylim(*chart.y_range)
    plotext.xlabel(chart.x_label)
    plotext.ylabel(chart.y_label)
    if chart.title:
        plotext.title(chart.title)

    text = plotext.build()
    plotext.clf()
    if colorless:
        text = plotext.uncolorize(text)
    return text
