"""
Line-level parsers: solver log lines and ``width,height`` dimension strings.

Both grammars are compiled once at import time and never mutated, so the
pattern objects can be shared freely.
"""

from __future__ import annotations

import re
from typing import NamedTuple

from .records import Final, MetricRecord, Ongoing


# ---------------------------------------------------------------------------
# Log line grammars
# ---------------------------------------------------------------------------

ONGOING_RE = re.compile(
    r"Explored (?P<explored>\d+), LB (?P<lb>-?\d+), "
    r"UB (?P<ub>-?\d+), Fringe sz (?P<fringe>\d+)"
)
FINAL_RE = re.compile(r"Final (?P<opt>-?\d+), Explored (?P<explored>\d+)")


def parse_line(line: str) -> MetricRecord | None:
    """Parse one solver log line.

    Parameters
    ----------
    line : str
        A single line of solver output, with or without its newline.

    Returns
    -------
    MetricRecord or None
        ``Ongoing`` or ``Final`` when the line matches one of the two metric
        grammars, ``None`` otherwise.  A non-metric line (banner, solution
        dump, blank line) is an expected input, not an error.
    """
    match = ONGOING_RE.search(line)
    if match is not None:
        return Ongoing(
            explored=int(match["explored"]),
            lower_bound=int(match["lb"]),
            upper_bound=int(match["ub"]),
            frontier_size=int(match["fringe"]),
        )

    match = FINAL_RE.search(line)
    if match is not None:
        return Final(
            explored=int(match["explored"]),
            optimal_value=int(match["opt"]),
        )

    return None


# ---------------------------------------------------------------------------
# Dimension override
# ---------------------------------------------------------------------------

DIMENSION_RE = re.compile(r"(?P<width>\d+),\s*(?P<height>\d+)")


class Dimension(NamedTuple):
    """Canvas size in terminal cells."""

    width: int
    height: int


class DimensionFormatError(ValueError):
    """Raised when a dimension string is not of the form ``width,height``."""


def parse_dimension(text: str) -> Dimension:
    """Parse a ``<width>,<height>`` string such as ``"80,24"`` or ``"80, 24"``.

    Raises
    ------
    DimensionFormatError
        If *text* does not follow the ``width,height`` format.
    """
    match = DIMENSION_RE.fullmatch(text.strip())
    if match is None:
        raise DimensionFormatError(
            f"Input does not conform to format 'width,height': {text!r}"
        )
    return Dimension(int(match["width"]), int(match["height"]))
