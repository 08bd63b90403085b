# TraceStyler
# Copyright © 2025 Osvaldo J. Vega Rodríguez
# Licensed under CC BY-NC-SA 4.0 International
# http://creativecommons.org/licenses/by-nc-sa/4.0/

"""Chart style builders.

Each builder is a pure function of a resolved column color, the column's
attributes and the interaction state. The per-state numbers come from a
``StyleConfig`` built from the factory defaults in
:mod:`tracestyler.style_defaults`; pass ``config=`` to use another one.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from functools import lru_cache
from types import MappingProxyType
from typing import Any, Protocol

from tracestyler.style_defaults import merge_style

from .bundles import (
    AreaPairStyle,
    AreaStyle,
    AxisLabelStyle,
    BarStyle,
    LabelStyle,
    LegendItemStyle,
    LegendType,
    LineStyle,
    ScatterStyle,
    SymbolStyle,
    ValueStyle,
)
from .colors import blend_toward_white, validate_color
from .columns import ColumnSpec
from .state import ElementState, ElementStateStyling

__all__ = [
    "StyleConfig",
    "default_config",
    "line_style",
    "area_style",
    "bar_style",
    "scatter_style",
    "legend_style",
    "axis_label_style",
    "state_styles",
]

StateOpacity = Mapping[ElementState, float]


def _opacities(values: Mapping[str, Any], name: str) -> StateOpacity:
    result: dict[ElementState, float] = {}
    for state in ElementState:
        value = float(values[state.value])
        if not 0.0 <= value <= 1.0:
            raise ValueError(f"{name} opacity for {state.value} must be within [0, 1]")
        result[state] = value
    return MappingProxyType(result)


@dataclass(frozen=True)
class StyleConfig:
    """Numbers the builders apply per state."""

    default_palette: str
    muted_color: str
    highlight_blend: float
    line_width: float
    line_dasharray: str
    line_opacity: StateOpacity
    area_opacity: StateOpacity
    bar_opacity: StateOpacity
    scatter_opacity: StateOpacity
    legend_cursor: str
    label_color: str
    label_font_size: str
    label_padding_right: float
    value_color: str
    value_font_size: str
    text_opacity: StateOpacity

    @classmethod
    def from_style(cls, overrides: Mapping[str, Any] | None = None) -> StyleConfig:
        """Build a config from the factory defaults merged with ``overrides``."""

        style = merge_style(dict(overrides) if overrides else None)
        palette = style["palette"]
        line = style["line"]
        legend = style["legend"]

        blend = float(palette["highlight_blend"])
        if not 0.0 <= blend <= 1.0:
            raise ValueError("highlight_blend must be within [0, 1]")
        width = float(line["width"])
        if width <= 0:
            raise ValueError("line width must be > 0")

        return cls(
            default_palette=str(palette["default"]),
            muted_color=validate_color(palette["muted_color"]),
            highlight_blend=blend,
            line_width=width,
            line_dasharray=str(line["dasharray"]),
            line_opacity=_opacities(line["opacity"], "line"),
            area_opacity=_opacities(style["area"]["opacity"], "area"),
            bar_opacity=_opacities(style["bar"]["opacity"], "bar"),
            scatter_opacity=_opacities(style["scatter"]["opacity"], "scatter"),
            legend_cursor=str(legend["cursor"]),
            label_color=str(legend["label_color"]),
            label_font_size=str(legend["label_font_size"]),
            label_padding_right=float(legend["label_padding_right"]),
            value_color=str(legend["value_color"]),
            value_font_size=str(legend["value_font_size"]),
            text_opacity=_opacities(legend["text_opacity"], "legend text"),
        )

    def brighten(self, color: str) -> str:
        return blend_toward_white(color, self.highlight_blend)


@lru_cache(maxsize=1)
def default_config() -> StyleConfig:
    """Return the factory configuration."""

    return StyleConfig.from_style()


def _state_color(color: str, column: ColumnSpec, state: ElementState, config: StyleConfig) -> str:
    if state is ElementState.SELECTED and column.selected_color:
        return column.selected_color
    if state is ElementState.HIGHLIGHTED:
        return config.brighten(color)
    return color


def line_style(
    color: str,
    column: ColumnSpec,
    state: ElementState,
    *,
    config: StyleConfig | None = None,
) -> LineStyle:
    config = config or default_config()
    style: LineStyle = {
        "stroke": _state_color(color, column, state, config),
        "fill": "none",
        "strokeWidth": column.width if column.width is not None else config.line_width,
        "opacity": config.line_opacity[state],
    }
    if column.dashed:
        style["strokeDasharray"] = config.line_dasharray
    return style


def area_style(
    color: str,
    column: ColumnSpec,
    state: ElementState,
    *,
    config: StyleConfig | None = None,
) -> AreaPairStyle:
    """Outline and fill of one area series."""

    config = config or default_config()
    area: AreaStyle = {
        "fill": _state_color(color, column, state, config),
        "stroke": "none",
        "opacity": config.area_opacity[state],
    }
    return {"line": line_style(color, column, state, config=config), "area": area}


def _filled(
    color: str,
    column: ColumnSpec,
    state: ElementState,
    opacity: StateOpacity,
    config: StyleConfig,
) -> dict[str, Any]:
    if state is ElementState.MUTED and not column.selected_color:
        fill = config.muted_color
    else:
        fill = _state_color(color, column, state, config)
    return {"fill": fill, "opacity": opacity[state]}


def bar_style(
    color: str,
    column: ColumnSpec,
    state: ElementState,
    *,
    config: StyleConfig | None = None,
) -> BarStyle:
    """Bar fill: muted bars turn neutral grey unless the column has a selection color."""

    config = config or default_config()
    return BarStyle(**_filled(color, column, state, config.bar_opacity, config))


def scatter_style(
    color: str,
    column: ColumnSpec,
    state: ElementState,
    *,
    config: StyleConfig | None = None,
) -> ScatterStyle:
    config = config or default_config()
    return ScatterStyle(**_filled(color, column, state, config.scatter_opacity, config))


_SYMBOL_BUILDERS: dict[LegendType, Callable[..., Mapping[str, Any]]] = {
    LegendType.SWATCH: bar_style,
    LegendType.LINE: line_style,
    LegendType.DOT: scatter_style,
}


def legend_style(
    color: str,
    column: ColumnSpec,
    state: ElementState,
    legend_type: LegendType | str = LegendType.SWATCH,
    *,
    config: StyleConfig | None = None,
) -> LegendItemStyle:
    """Symbol, label and value styles of one legend entry.

    The symbol is built by the same builder as the chart the legend
    annotates (swatch: bar, line: line, dot: scatter) so both always agree.
    Text only changes opacity between states.
    """

    config = config or default_config()
    symbol_builder = _SYMBOL_BUILDERS[LegendType(legend_type)]
    symbol: SymbolStyle = {"cursor": config.legend_cursor}
    symbol.update(symbol_builder(color, column, state, config=config))  # type: ignore[typeddict-item]

    text_opacity = config.text_opacity[state]
    label: LabelStyle = {
        "color": config.label_color,
        "cursor": config.legend_cursor,
        "fontSize": config.label_font_size,
        "paddingRight": config.label_padding_right,
        "opacity": text_opacity,
    }
    value: ValueStyle = {
        "color": config.value_color,
        "cursor": config.legend_cursor,
        "fontSize": config.value_font_size,
        "opacity": text_opacity,
    }
    return {"symbol": symbol, "label": label, "value": value}


def axis_label_style(color: str) -> AxisLabelStyle:
    """Label color for an axis bound to a single column."""

    return {"labelColor": color}


class _Builder(Protocol):
    def __call__(
        self,
        color: str,
        column: ColumnSpec,
        state: ElementState,
        *,
        config: StyleConfig | None = None,
    ) -> Any: ...


def state_styles(
    builder: _Builder,
    color: str,
    column: ColumnSpec,
    *,
    config: StyleConfig | None = None,
) -> ElementStateStyling[Any]:
    """Run ``builder`` for every state of one column."""

    return ElementStateStyling(
        **{state.value: builder(color, column, state, config=config) for state in ElementState}
    )
