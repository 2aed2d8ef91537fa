"""Repository-level CLI entrypoint for ddo_plot.

Preserves the invocation style from a source checkout:

    python runner.py -i trace.log [-o chart.svg] [--fringe]

It delegates execution to :mod:`ddo_plot.runner`.
"""

from __future__ import annotations

from ddo_plot.runner import main


if __name__ == "__main__":
    main()
