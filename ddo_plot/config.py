"""
Configuration loader for ddo_plot.

Loads an optional JSON settings file, validates its fields, and merges it over
the built-in defaults.  Command-line flags take precedence over the file; the
merge is done by the runner.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from .parser import parse_dimension
from .ranges import CHART_MODES, MODE_BOUNDS


# ---------------------------------------------------------------------------
# Types
# ---------------------------------------------------------------------------

ConfigDict = dict[str, Any]


# ---------------------------------------------------------------------------
# Schema constants
# ---------------------------------------------------------------------------

SVG_DPI = 100

DEFAULT_CONFIG: ConfigDict = {
    "mode": MODE_BOUNDS,
    "dimension": None,
    "dpi": SVG_DPI,
    "colorless": False,
    "title": None,
}

KNOWN_KEYS = set(DEFAULT_CONFIG)


# ---------------------------------------------------------------------------
# Loader
# ---------------------------------------------------------------------------


def load_config(path: str | Path | None = None) -> ConfigDict:
    """Load and validate a JSON configuration file.

    Parameters
    ----------
    path : str or Path, optional
        Path to the JSON configuration file.  ``None`` returns the defaults.

    Returns
    -------
    ConfigDict
        Defaults updated with the file's values.

    Raises
    ------
    ValueError
        If the file is not a JSON object or a value is invalid.
    FileNotFoundError
        If the config file does not exist.
    """
    cfg = dict(DEFAULT_CONFIG)
    if path is None:
        return cfg

    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    with path.open("r", encoding="utf-8") as fh:
        try:
            raw = json.load(fh)
        except json.JSONDecodeError as exc:
            raise ValueError(f"Config file {path} is not valid JSON: {exc}") from exc

    if not isinstance(raw, dict):
        raise ValueError(f"Config file {path} must contain a JSON object")

    _validate_config(raw)
    cfg.update(raw)
    return cfg


def _validate_config(cfg: ConfigDict) -> None:
    """Validate config fields.

    Raises
    ------
    ValueError
        On any validation failure.
    """
    unknown = set(cfg) - KNOWN_KEYS
    if unknown:
        raise ValueError(f"Config has unknown field(s): {sorted(unknown)}")

    if "mode" in cfg and cfg["mode"] not in CHART_MODES:
        raise ValueError(f"mode must be one of {CHART_MODES}, got {cfg['mode']!r}")

    dimension = cfg.get("dimension")
    if dimension is not None:
        if not isinstance(dimension, str):
            raise ValueError(f"dimension must be a 'width,height' string, got {dimension!r}")
        parse_dimension(dimension)

    if "dpi" in cfg:
        dpi = cfg["dpi"]
        if isinstance(dpi, bool) or not isinstance(dpi, int) or dpi <= 0:
            raise ValueError(f"dpi must be a positive integer, got {dpi!r}")

    if "colorless" in cfg and not isinstance(cfg["colorless"], bool):
        raise ValueError(f"colorless must be true or false, got {cfg['colorless']!r}")

    title = cfg.get("title")
    if title is not None and not isinstance(title, str):
        raise ValueError(f"title must be a string, got {title!r}")
