"""Default styles for axes, markers and the other non-column components.

Each helper returns a fresh dict: the factory defaults deep-merged with the
caller's overrides. Unknown override keys raise ``ValueError``.
"""

from __future__ import annotations

from typing import Any

from tracestyler.style_defaults import merge_section

from .scheme import ColorScheme

__all__ = [
    "time_axis_style",
    "y_axis_style",
    "bound_axis_style",
    "baseline_style",
    "brush_style",
    "time_range_marker_style",
    "value_list_style",
    "info_style",
]


def time_axis_style(overrides: dict[str, Any] | None = None) -> dict[str, Any]:
    """``{"labels": {...}, "axis": {...}}`` for the shared time axis."""

    return merge_section("axis.time", overrides)


def y_axis_style(overrides: dict[str, Any] | None = None) -> dict[str, Any]:
    return merge_section("axis.y", overrides)


def bound_axis_style(
    scheme: ColorScheme,
    column_key: str,
    overrides: dict[str, Any] | None = None,
) -> dict[str, Any]:
    """Y-axis style whose labels take the color of the column it measures."""

    style = y_axis_style(overrides)
    style["labels"]["labelColor"] = scheme.color_for(column_key)
    return style


def baseline_style(overrides: dict[str, Any] | None = None) -> dict[str, Any]:
    return merge_section("markers.baseline", overrides)


def brush_style(overrides: dict[str, Any] | None = None) -> dict[str, Any]:
    return merge_section("markers.brush", overrides)


def time_range_marker_style(overrides: dict[str, Any] | None = None) -> dict[str, Any]:
    return merge_section("markers.time_range_marker", overrides)


def value_list_style(overrides: dict[str, Any] | None = None) -> dict[str, Any]:
    return merge_section("markers.value_list", overrides)


def info_style(overrides: dict[str, Any] | None = None) -> dict[str, Any]:
    """Hover info box: connecting ``line``, ``box`` and ``dot`` styles."""

    return merge_section("markers.info", overrides)
