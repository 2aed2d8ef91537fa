"""
Metric records emitted by a ddo solver.

A solver log carries two kinds of metric lines:

    Explored 6700, LB 11, UB 12, Fringe sz 90
    Final 11, Explored 6790

They map onto the two variants of the ``MetricRecord`` union, ``Ongoing``
and ``Final``.  Downstream code never inspects the variant directly; it reads
records through the accessor functions below, which give both variants the
same interface.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union


# ---------------------------------------------------------------------------
# Variants
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Ongoing:
    """Progress snapshot taken while the search is still running."""

    explored: int
    lower_bound: int
    upper_bound: int
    frontier_size: int


@dataclass(frozen=True)
class Final:
    """Closing line of a solved instance."""

    explored: int
    optimal_value: int


MetricRecord = Union[Ongoing, Final]

# A Final line carries no frontier data; its frontier size is reported as 0.
FINAL_FRONTIER_SIZE: int = 0


# ---------------------------------------------------------------------------
# Accessors
# ---------------------------------------------------------------------------


def _unknown(record: object) -> TypeError:
    return TypeError(f"Not a metric record: {record!r}")


def explored(record: MetricRecord) -> int:
    """Number of nodes explored when the record was emitted."""
    match record:
        case Ongoing(explored=count) | Final(explored=count):
            return count
    raise _unknown(record)


def lower_bound(record: MetricRecord) -> int:
    """Lower bound; the optimal value for a ``Final`` record."""
    match record:
        case Ongoing(lower_bound=value):
            return value
        case Final(optimal_value=value):
            return value
    raise _unknown(record)


def upper_bound(record: MetricRecord) -> int:
    """Upper bound; the optimal value for a ``Final`` record."""
    match record:
        case Ongoing(upper_bound=value):
            return value
        case Final(optimal_value=value):
            return value
    raise _unknown(record)


def frontier_size(record: MetricRecord) -> int:
    """Open frontier size.

    For a ``Final`` record this is the sentinel :data:`FINAL_FRONTIER_SIZE`,
    not a measurement.
    """
    match record:
        case Ongoing(frontier_size=value):
            return value
        case Final():
            return FINAL_FRONTIER_SIZE
    raise _unknown(record)


def record_kind(record: MetricRecord) -> str:
    """Variant tag, ``"Ongoing"`` or ``"Final"``."""
    match record:
        case Ongoing():
            return "Ongoing"
        case Final():
            return "Final"
    raise _unknown(record)
