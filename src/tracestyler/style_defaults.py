# TraceStyler
# Copyright © 2025 Osvaldo J. Vega Rodríguez
# Licensed under CC BY-NC-SA 4.0 International
# http://creativecommons.org/licenses/by-nc-sa/4.0/

"""Central definition for factory style defaults."""

from __future__ import annotations

from copy import deepcopy
from typing import Any

STYLE_SCHEMA_VERSION = 1

STYLE_DEFAULTS: dict[str, dict[str, Any]] = {
    "palette": {
        "default": "Paired",
        "muted_color": "#9e9e9e",
        "highlight_blend": 0.25,
    },
    "line": {
        "width": 1.0,
        "dasharray": "4,2",
        "opacity": {"normal": 1.0, "highlighted": 1.0, "selected": 1.0, "muted": 0.4},
    },
    "area": {
        "opacity": {"normal": 0.75, "highlighted": 0.75, "selected": 0.75, "muted": 0.25},
    },
    "bar": {
        "opacity": {"normal": 0.8, "highlighted": 1.0, "selected": 1.0, "muted": 0.5},
    },
    "scatter": {
        "opacity": {"normal": 1.0, "highlighted": 1.0, "selected": 1.0, "muted": 0.5},
    },
    "legend": {
        "cursor": "pointer",
        "label_color": "#333",
        "label_font_size": "normal",
        "label_padding_right": 10,
        "value_color": "#999",
        "value_font_size": "smaller",
        "text_opacity": {"normal": 0.8, "highlighted": 1.0, "selected": 1.0, "muted": 0.5},
    },
    "axis": {
        "time": {
            "labels": {"labelColor": "#8B7E7E", "labelWeight": 100, "labelSize": 11},
            "axis": {"axisColor": "#C0C0C0", "axisWidth": 1},
        },
        "y": {
            "labels": {"labelColor": "#8B7E7E", "labelWeight": 100, "labelSize": 11},
            "axis": {"axisColor": "#C0C0C0"},
        },
    },
    "markers": {
        "baseline": {
            "label": {"fill": "#8B7E7E", "fontWeight": 100, "fontSize": 11, "pointerEvents": "none"},
            "line": {"stroke": "#626262", "strokeWidth": 1, "strokeDasharray": "5,3"},
        },
        "brush": {"fill": "#777", "fillOpacity": 0.3},
        "time_range_marker": {"fill": "rgba(70, 130, 180, 0.25)"},
        "value_list": {"fill": "#FEFEFE", "stroke": "#DDD", "opacity": 0.8},
        "info": {
            "line": {"stroke": "#999", "cursor": "crosshair", "pointerEvents": "none"},
            "box": {"fill": "white", "opacity": 0.9, "stroke": "#999", "pointerEvents": "none"},
            "dot": {"fill": "#999"},
        },
    },
}


def load_factory_defaults() -> dict[str, dict[str, Any]]:
    """Return a deep copy of the nested factory defaults."""

    return deepcopy(STYLE_DEFAULTS)


def _merge(base: dict[str, Any], overrides: dict[str, Any], path: str) -> dict[str, Any]:
    merged = dict(base)
    for key, value in overrides.items():
        if key not in base:
            raise ValueError(f"Unknown style setting: {path}{key}")
        if isinstance(base[key], dict):
            if not isinstance(value, dict):
                raise ValueError(f"Style setting {path}{key} expects a mapping")
            merged[key] = _merge(base[key], value, f"{path}{key}.")
        else:
            merged[key] = deepcopy(value)
    return merged


def merge_style(
    overrides: dict[str, Any] | None = None,
    base: dict[str, Any] | None = None,
) -> dict[str, Any]:
    """Deep-merge ``overrides`` into the factory defaults (or ``base``).

    Unknown sections or keys raise ``ValueError`` so that typos surface
    immediately instead of being silently ignored.
    """

    source = deepcopy(base) if base is not None else load_factory_defaults()
    if not overrides:
        return source
    return _merge(source, overrides, "")


def merge_section(path: str, overrides: dict[str, Any] | None = None) -> dict[str, Any]:
    """Return the defaults at dotted ``path`` (e.g. ``"axis.time"``) with overrides."""

    section: Any = STYLE_DEFAULTS
    for part in path.split("."):
        if not isinstance(section, dict) or part not in section:
            raise KeyError(f"No style defaults section {path!r}")
        section = section[part]
    base = deepcopy(section)
    if not overrides:
        return base
    return _merge(base, overrides, f"{path}.")
