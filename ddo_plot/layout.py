"""
Canvas dimensions for the terminal chart.

Resolution order, first match wins:

1. an explicit dimension given by the caller (``--dimension``), verbatim;
2. the size of the controlling terminal, minus a margin of 10 cells in each
   dimension for the chart borders and axis labels;
3. a fixed fallback of 45 x 15.

SVG output uses the backend's own canvas and never consults this module.
"""

from __future__ import annotations

import os
import sys
from typing import Callable, Optional

from .parser import Dimension


TerminalProbe = Callable[[], Optional[tuple[int, int]]]

TERMINAL_MARGIN: int = 10
FALLBACK_DIMENSION = Dimension(45, 15)


def terminal_probe() -> tuple[int, int] | None:
    """Return ``(columns, lines)`` of the terminal on stdout, or None."""
    try:
        size = os.get_terminal_size(sys.stdout.fileno())
    except (AttributeError, OSError, ValueError):
        # stdout redirected, closed or replaced by an object without a fd
        return None
    return size.columns, size.lines


def resolve_dimensions(
    explicit: Dimension | None,
    probe: TerminalProbe = terminal_probe,
) -> Dimension:
    """Pick the terminal canvas size.

    Parameters
    ----------
    explicit : Dimension or None
        Caller override.  When given, *probe* is not called.
    probe : callable
        Returns the terminal ``(width, height)`` or None.

    Returns
    -------
    Dimension
        Probed sizes are reduced by :data:`TERMINAL_MARGIN` and never drop
        below 1.
    """
    if explicit is not None:
        return Dimension(int(explicit[0]), int(explicit[1]))

    probed = probe()
    if probed is not None:
        width, height = probed
        return Dimension(
            max(width - TERMINAL_MARGIN, 1),
            max(height - TERMINAL_MARGIN, 1),
        )

    return FALLBACK_DIMENSION
