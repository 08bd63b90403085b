# TraceStyler
# Copyright © 2025 Osvaldo J. Vega Rodríguez
# Licensed under CC BY-NC-SA 4.0 International
# http://creativecommons.org/licenses/by-nc-sa/4.0/

"""Whole-chart style tables generated from a color scheme.

These mirror the per-column tables a chart accepts as a static style, so a
generated table can be tweaked and handed back as a ``StaticTable``.
"""

from __future__ import annotations

from collections.abc import Iterator
from functools import partial
from typing import Any

from .builders import (
    StyleConfig,
    area_style,
    axis_label_style,
    bar_style,
    legend_style as _legend_item,
    line_style,
    scatter_style,
    state_styles,
)
from .bundles import AxisLabelStyle, LegendItemStyle, LegendType
from .scheme import ColorScheme
from .state import ElementStateStyling, InteractionContext, resolve_state

__all__ = [
    "line_chart_style",
    "area_chart_style",
    "bar_chart_style",
    "scatter_chart_style",
    "legend_style",
    "legend_items",
    "axis_style",
]


def _table(scheme: ColorScheme, builder: Any, config: StyleConfig | None) -> dict[str, ElementStateStyling[Any]]:
    return {
        spec.key: state_styles(builder, scheme.color_for(spec.key), spec, config=config)
        for spec in scheme.columns
    }


def line_chart_style(
    scheme: ColorScheme, *, config: StyleConfig | None = None
) -> dict[str, ElementStateStyling[Any]]:
    return _table(scheme, line_style, config)


def area_chart_style(
    scheme: ColorScheme, *, config: StyleConfig | None = None
) -> dict[str, dict[str, ElementStateStyling[Any]]]:
    """Per-column ``{"line": ..., "area": ...}`` four-state stylings."""

    table: dict[str, dict[str, ElementStateStyling[Any]]] = {}
    for key, pair in _table(scheme, area_style, config).items():
        table[key] = {
            "line": pair.map(lambda _state, bundle: bundle["line"]),
            "area": pair.map(lambda _state, bundle: bundle["area"]),
        }
    return table


def bar_chart_style(
    scheme: ColorScheme, *, config: StyleConfig | None = None
) -> dict[str, ElementStateStyling[Any]]:
    return _table(scheme, bar_style, config)


def scatter_chart_style(
    scheme: ColorScheme, *, config: StyleConfig | None = None
) -> dict[str, ElementStateStyling[Any]]:
    return _table(scheme, scatter_style, config)


def legend_style(
    scheme: ColorScheme,
    column_key: str,
    legend_type: LegendType | str = LegendType.SWATCH,
    *,
    config: StyleConfig | None = None,
) -> dict[str, ElementStateStyling[Any]]:
    """Four-state ``symbol``/``label``/``value`` stylings for one legend entry."""

    builder = partial(_legend_item, legend_type=legend_type)
    item = state_styles(builder, scheme.color_for(column_key), scheme.column(column_key), config=config)
    return {
        part: item.map(lambda _state, bundle, part=part: bundle[part])
        for part in ("symbol", "label", "value")
    }


def legend_items(
    scheme: ColorScheme,
    context: InteractionContext | None = None,
    legend_type: LegendType | str = LegendType.SWATCH,
    *,
    config: StyleConfig | None = None,
) -> Iterator[tuple[str, LegendItemStyle]]:
    """Yield ``(key, bundle)`` for every legend entry in column order."""

    for spec in scheme.columns:
        state = resolve_state(spec.key, context)
        yield spec.key, _legend_item(
            scheme.color_for(spec.key), spec, state, legend_type, config=config
        )


def axis_style(scheme: ColorScheme, column_key: str) -> AxisLabelStyle:
    return axis_label_style(scheme.color_for(column_key))
