"""
Command-line runner for ddo_plot.

Reads one or more ddo solver logs, composes the bounds or frontier chart and
either saves it as SVG (``--output``) or prints it to the terminal.

Usage
-----
    ddo-plot -i run_a.log -i run_b.log -o bounds.svg
    ddo-plot -i run.log --fringe --dimension 100,30
    solver ... | ddo-plot

Without ``--input`` the log is read from standard input as a single unnamed
trace.  Every input is read completely before anything is written.  Any I/O
or configuration failure prints ``ERROR: <cause>`` to stderr and exits with
status 1.
"""

from __future__ import annotations

import argparse
import io
import sys
import warnings
from pathlib import Path
from typing import Sequence

from .chart import compose_chart
from .config import load_config
from .layout import resolve_dimensions, terminal_probe
from .parser import parse_dimension
from .ranges import MODE_FRONTIER
from .render import render_text, svg_bytes
from .trace import Trace, load_trace, read_trace, trace_to_frame, traces_to_frame, traces_to_json


# ---------------------------------------------------------------------------
# CLI
# ---------------------------------------------------------------------------


def _parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="ddo-plot",
        description="Parse ddo solver traces and plot bounds or frontier size against explored nodes.",
    )
    parser.add_argument(
        "-i", "--input",
        action="append",
        default=[],
        metavar="PATH",
        help="Solver log file; repeat for several traces (default: read stdin).",
    )
    parser.add_argument(
        "-o", "--output",
        default=None,
        metavar="PATH",
        help="Save the chart as SVG here instead of printing it to the terminal.",
    )
    parser.add_argument(
        "-d", "--dimension",
        default=None,
        metavar="W,H",
        help="Terminal chart size, e.g. 100,30 (default: terminal size minus 10).",
    )
    parser.add_argument(
        "-f", "--fringe",
        action="store_true",
        help="Plot the frontier (fringe) size instead of the bounds.",
    )
    parser.add_argument(
        "--export",
        default=None,
        metavar="PATH",
        help="Also write the parsed traces (JSON, or CSV when PATH ends in .csv).",
    )
    parser.add_argument("--config", default=None, help="Path to a JSON settings file.")
    parser.add_argument("--dpi", type=int, default=None, help="SVG resolution.")
    parser.add_argument(
        "--no-color",
        dest="no_color",
        action="store_true",
        help="Strip ANSI colors from the terminal chart.",
    )
    parser.add_argument(
        "-q", "--quiet",
        action="store_true",
        help="Do not print the per-trace summary on stderr.",
    )
    return parser.parse_args(argv)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _read_stdin() -> Trace:
    buffer = getattr(sys.stdin, "buffer", None)
    if buffer is None:
        return read_trace(sys.stdin)
    # undecodable bytes are replaced, as for files, so such lines are just skipped
    stream = io.TextIOWrapper(buffer, encoding="utf-8", errors="replace")
    try:
        return read_trace(stream)
    finally:
        stream.detach()


def _read_traces(inputs: list[str]) -> list[Trace]:
    if not inputs:
        return [_read_stdin()]
    return [load_trace(path) for path in inputs]


def _warn_empty(traces: list[Trace]) -> None:
    for index, trace in enumerate(traces):
        if trace.is_empty:
            label = trace.name if trace.name is not None else f"#{index} (stdin)"
            warnings.warn(
                f"trace {label} contains no metric line; it will be drawn empty.",
                UserWarning,
                stacklevel=2,
            )


def _export_text(traces: list[Trace], path: Path) -> str:
    if path.suffix.lower() == ".csv":
        return traces_to_frame(traces).to_csv(index=False)
    return traces_to_json(traces)


def _write_outputs(outputs: list[tuple[Path, bytes]]) -> None:
    """Write every file or none: already written files are removed on failure."""
    written: list[Path] = []
    try:
        for path, content in outputs:
            path.write_bytes(content)
            written.append(path)
    except OSError:
        for path in written:
            path.unlink(missing_ok=True)
        raise
    for path, _ in outputs:
        print(f"  [ddo-plot] Wrote → {path}", file=sys.stderr)


def _print_summary(traces: list[Trace]) -> None:
    sep = "-" * 58
    err = sys.stderr
    print(sep, file=err)
    print("  ddo-plot — Trace Summary", file=err)
    print(sep, file=err)
    hdr = f"  {'Trace':<20}  {'Records':>7}  {'Explored':>9}  {'LB':>7}  {'UB':>7}"
    print(hdr, file=err)
    for index, trace in enumerate(traces):
        name = trace.name if trace.name is not None else f"<stdin #{index}>"
        df = trace_to_frame(trace)
        if df.empty:
            print(f"  {name:<20}  {0:>7}  {'-':>9}  {'-':>7}  {'-':>7}", file=err)
            continue
        last = df.iloc[-1]
        print(
            f"  {name:<20}  {len(df):>7}  {int(df['explored'].max()):>9}  "
            f"{int(last['lower_bound']):>7}  {int(last['upper_bound']):>7}",
            file=err,
        )
    print(sep, file=err)


# ---------------------------------------------------------------------------
# Main
# ---------------------------------------------------------------------------


def run(args: argparse.Namespace) -> None:
    cfg = load_config(args.config)
    mode = MODE_FRONTIER if args.fringe else cfg["mode"]
    dpi = args.dpi if args.dpi is not None else cfg["dpi"]
    colorless = args.no_color or cfg["colorless"]
    dimension_text = args.dimension if args.dimension is not None else cfg["dimension"]

    traces = _read_traces(args.input)
    _warn_empty(traces)
    if not args.quiet:
        _print_summary(traces)

    chart = compose_chart(traces, mode, title=cfg["title"])

    # Everything is rendered in memory before the first file is written.
    outputs: list[tuple[Path, bytes]] = []
    text = None
    if args.output is not None:
        outputs.append((Path(args.output), svg_bytes(chart, dpi=dpi)))
    else:
        explicit = parse_dimension(dimension_text) if dimension_text is not None else None
        dimension = resolve_dimensions(explicit, terminal_probe)
        text = render_text(chart, dimension, colorless=colorless)

    if args.export is not None:
        export_path = Path(args.export)
        outputs.append((export_path, _export_text(traces, export_path).encode("utf-8")))

    _write_outputs(outputs)
    if text is not None:
        print(text)


def main(argv: Sequence[str] | None = None) -> None:
    args = _parse_args(argv)
    try:
        run(args)
    except (OSError, ValueError) as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
