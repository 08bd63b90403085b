"""Core style resolution engine."""

from __future__ import annotations

from .builders import (
    StyleConfig,
    area_style,
    axis_label_style,
    bar_style,
    default_config,
    legend_style,
    line_style,
    scatter_style,
    state_styles,
)
from .bundles import Encoding, LegendType, validate_bundle
from .columns import ColumnSpec, columns_from_frame, normalize_columns
from .palettes import (
    DEFAULT_PALETTE,
    Palette,
    PaletteRegistry,
    default_registry,
    lookup_palette,
    palette_names,
    register_palette,
)
from .scheme import ColorScheme
from .sources import Callback, SchemeHandle, StaticTable, StyleSource, resolve, resolve_columns
from .state import ElementState, ElementStateStyling, InteractionContext, resolve_state

__all__ = [
    "DEFAULT_PALETTE",
    "Callback",
    "ColorScheme",
    "ColumnSpec",
    "ElementState",
    "ElementStateStyling",
    "Encoding",
    "InteractionContext",
    "LegendType",
    "Palette",
    "PaletteRegistry",
    "SchemeHandle",
    "StaticTable",
    "StyleConfig",
    "StyleSource",
    "area_style",
    "axis_label_style",
    "bar_style",
    "columns_from_frame",
    "default_config",
    "default_registry",
    "legend_style",
    "line_style",
    "lookup_palette",
    "normalize_columns",
    "palette_names",
    "register_palette",
    "resolve",
    "resolve_columns",
    "resolve_state",
    "scatter_style",
    "state_styles",
    "validate_bundle",
]
