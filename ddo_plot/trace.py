"""
Traces: the ordered metric records parsed from one solver log.

A trace is built once by scanning a complete text source and is never
modified afterwards.  Lines that are not metric lines are dropped silently;
solver logs routinely contain banners ("Optimum 11 computed in ...") and
solution dumps that have to be ignored.

The module also provides the optional persisted form of a trace (a JSON
document mirroring the record union) and a tabular view as a pandas
DataFrame.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Iterable, TextIO

import pandas as pd

from .parser import parse_line
from .records import (
    Final,
    MetricRecord,
    Ongoing,
    explored,
    frontier_size,
    lower_bound,
    record_kind,
    upper_bound,
)


# ---------------------------------------------------------------------------
# Container
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Trace:
    """Immutable sequence of metric records from a single source.

    Attributes
    ----------
    name : str or None
        Legend name, usually the stem of the source file.  ``None`` for
        anonymous sources such as standard input.
    records : tuple of MetricRecord
        Records in source line order.  Duplicate or decreasing explored
        counts are kept as they appear.
    """

    name: str | None
    records: tuple[MetricRecord, ...] = ()

    def __len__(self) -> int:
        return len(self.records)

    @property
    def is_empty(self) -> bool:
        return not self.records


# ---------------------------------------------------------------------------
# Construction
# ---------------------------------------------------------------------------


def build_trace(lines: Iterable[str], name: str | None = None) -> Trace:
    """Parse every line of *lines* and keep the metric records in order.

    Parameters
    ----------
    lines : iterable of str
        Source lines, top to bottom.  Trailing newlines are allowed.
    name : str, optional
        Legend name of the resulting trace.

    Returns
    -------
    Trace
        Possibly empty; unrecognised lines never raise.
    """
    records = []
    for line in lines:
        record = parse_line(line)
        if record is not None:
            records.append(record)
    return Trace(name=name, records=tuple(records))


def trace_from_text(text: str, name: str | None = None) -> Trace:
    return build_trace(text.splitlines(), name=name)


def read_trace(stream: TextIO, name: str | None = None) -> Trace:
    """Build a trace from an open text stream, read to exhaustion."""
    return build_trace(stream, name=name)


def load_trace(path: str | Path) -> Trace:
    """Build a trace from a log file, naming it after the file stem.

    Raises
    ------
    FileNotFoundError
        If the file does not exist.
    OSError
        On any other read failure.
    """
    path = Path(path)
    with path.open("r", encoding="utf-8", errors="replace") as fh:
        return read_trace(fh, name=path.stem)


# ---------------------------------------------------------------------------
# Persisted form
# ---------------------------------------------------------------------------


def _record_to_dict(record: MetricRecord) -> dict[str, Any]:
    if isinstance(record, Ongoing):
        return {
            "Ongoing": {
                "explored": record.explored,
                "lower_bound": record.lower_bound,
                "upper_bound": record.upper_bound,
                "frontier_size": record.frontier_size,
            }
        }
    if isinstance(record, Final):
        return {
            "Final": {
                "explored": record.explored,
                "optimal_value": record.optimal_value,
            }
        }
    raise TypeError(f"Not a metric record: {record!r}")


def _record_from_dict(doc: dict[str, Any]) -> MetricRecord:
    if not isinstance(doc, dict) or len(doc) != 1:
        raise ValueError(f"Expected a single-key record object, got {doc!r}")

    (tag, fields), = doc.items()
    try:
        if tag == "Ongoing":
            return Ongoing(
                explored=int(fields["explored"]),
                lower_bound=int(fields["lower_bound"]),
                upper_bound=int(fields["upper_bound"]),
                frontier_size=int(fields["frontier_size"]),
            )
        if tag == "Final":
            return Final(
                explored=int(fields["explored"]),
                optimal_value=int(fields["optimal_value"]),
            )
    except KeyError as exc:
        raise ValueError(f"{tag} record is missing field {exc.args[0]!r}") from exc

    raise ValueError(f"Unknown record tag {tag!r}; expected 'Ongoing' or 'Final'")


def trace_to_dict(trace: Trace) -> dict[str, Any]:
    """Serialisable document for *trace*, one entry per record."""
    return {
        "name": trace.name,
        "records": [_record_to_dict(r) for r in trace.records],
    }


def trace_from_dict(doc: dict[str, Any]) -> Trace:
    """Inverse of :func:`trace_to_dict`.

    Raises
    ------
    ValueError
        If the document or one of its records is malformed.
    """
    if "records" not in doc:
        raise ValueError("Trace document missing required field 'records'")
    return Trace(
        name=doc.get("name"),
        records=tuple(_record_from_dict(r) for r in doc["records"]),
    )


def traces_to_json(traces: Iterable[Trace]) -> str:
    """JSON text of a list of trace documents."""
    return json.dumps([trace_to_dict(t) for t in traces], indent=2)


def save_traces_json(traces: Iterable[Trace], path: str | Path) -> None:
    Path(path).write_text(traces_to_json(traces), encoding="utf-8")


def load_traces_json(path: str | Path) -> list[Trace]:
    """Load traces previously written by :func:`save_traces_json`."""
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Trace file not found: {path}")

    payload = json.loads(path.read_text(encoding="utf-8"))
    if isinstance(payload, dict):
        payload = [payload]
    return [trace_from_dict(doc) for doc in payload]


# ---------------------------------------------------------------------------
# Tabular view
# ---------------------------------------------------------------------------

FRAME_COLUMNS = ["kind", "explored", "lower_bound", "upper_bound", "frontier_size"]


def trace_to_frame(trace: Trace) -> pd.DataFrame:
    """One row per record, read through the uniform accessors."""
    rows = [
        {
            "kind": record_kind(r),
            "explored": explored(r),
            "lower_bound": lower_bound(r),
            "upper_bound": upper_bound(r),
            "frontier_size": frontier_size(r),
        }
        for r in trace.records
    ]
    return pd.DataFrame(rows, columns=FRAME_COLUMNS)


def traces_to_frame(traces: Iterable[Trace]) -> pd.DataFrame:
    """Concatenate several traces, tagging each row with its trace name."""
    frames = []
    for index, trace in enumerate(traces):
        df = trace_to_frame(trace)
        df.insert(0, "trace", trace.name if trace.name is not None else f"trace_{index}")
        frames.append(df)
    if not frames:
        return pd.DataFrame(columns=["trace", *FRAME_COLUMNS])
    return pd.concat(frames, ignore_index=True)
