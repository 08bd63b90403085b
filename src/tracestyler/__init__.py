# TraceStyler
# Copyright © 2025 Osvaldo J. Vega Rodríguez
# Licensed under CC BY-NC-SA 4.0 International
# http://creativecommons.org/licenses/by-nc-sa/4.0/

"""Public package interface for the TraceStyler style resolution engine."""

from tracestyler.core import (
    DEFAULT_PALETTE,
    Callback,
    ColorScheme,
    ColumnSpec,
    ElementState,
    ElementStateStyling,
    Encoding,
    InteractionContext,
    LegendType,
    Palette,
    PaletteRegistry,
    SchemeHandle,
    StaticTable,
    StyleConfig,
    StyleSource,
    columns_from_frame,
    default_config,
    lookup_palette,
    palette_names,
    register_palette,
    resolve,
    resolve_columns,
    resolve_state,
)
from tracestyler.core.tables import (
    area_chart_style,
    axis_style,
    bar_chart_style,
    legend_items,
    legend_style,
    line_chart_style,
    scatter_chart_style,
)
from tracestyler.errors import (
    DuplicateColumnKeyError,
    MissingColumnStyleError,
    StyleCallbackError,
    StyleShapeError,
    StylingError,
    UnknownColumnError,
    UnknownPaletteError,
)

__version__ = "1.0.0"

__all__ = [
    "DEFAULT_PALETTE",
    "Callback",
    "ColorScheme",
    "ColumnSpec",
    "DuplicateColumnKeyError",
    "ElementState",
    "ElementStateStyling",
    "Encoding",
    "InteractionContext",
    "LegendType",
    "MissingColumnStyleError",
    "Palette",
    "PaletteRegistry",
    "SchemeHandle",
    "StaticTable",
    "StyleCallbackError",
    "StyleConfig",
    "StyleShapeError",
    "StyleSource",
    "StylingError",
    "UnknownColumnError",
    "UnknownPaletteError",
    "area_chart_style",
    "axis_style",
    "bar_chart_style",
    "columns_from_frame",
    "default_config",
    "legend_items",
    "legend_style",
    "line_chart_style",
    "lookup_palette",
    "palette_names",
    "register_palette",
    "resolve",
    "resolve_columns",
    "resolve_state",
    "scatter_chart_style",
]
