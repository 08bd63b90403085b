# TraceStyler
# Copyright © 2025 Osvaldo J. Vega Rodríguez
# Licensed under CC BY-NC-SA 4.0 International
# http://creativecommons.org/licenses/by-nc-sa/4.0/

"""Column specifications: the per-series attributes a color scheme styles."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any, Union

import pandas as pd
from pydantic import BaseModel, ConfigDict, Field, field_validator

from .colors import validate_color

__all__ = ["ColumnSpec", "ColumnInput", "normalize_columns", "columns_from_frame"]


class ColumnSpec(BaseModel):
    """Style attributes for one data column.

    ``color`` overrides the palette assignment; ``selected_color`` (accepted
    as ``selected`` too) replaces the color while the column is selected.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="forbid")

    key: str
    color: str | None = None
    selected_color: str | None = Field(default=None, alias="selected")
    width: float | None = None
    dashed: bool = False

    @field_validator("key")
    def _key_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("column key must not be blank")
        return value

    @field_validator("color", "selected_color")
    def _color_valid(cls, value: str | None) -> str | None:
        if value is None:
            return value
        return validate_color(value)

    @field_validator("width")
    def _width_positive(cls, value: float | None) -> float | None:
        if value is not None and value <= 0:
            raise ValueError("width must be > 0")
        return value


ColumnInput = Union[str, Mapping[str, Any], ColumnSpec]


def normalize_columns(columns: Iterable[ColumnInput]) -> tuple[ColumnSpec, ...]:
    """Coerce plain keys, attribute mappings and specs into ``ColumnSpec``s."""

    specs: list[ColumnSpec] = []
    for item in columns:
        if isinstance(item, ColumnSpec):
            specs.append(item)
        elif isinstance(item, str):
            specs.append(ColumnSpec(key=item))
        elif isinstance(item, Mapping):
            specs.append(ColumnSpec.model_validate(dict(item)))
        else:
            raise TypeError(f"Unsupported column definition: {item!r}")
    return tuple(specs)


def columns_from_frame(
    frame: pd.DataFrame,
    *,
    exclude: Iterable[str] = ("time",),
    overrides: Mapping[str, Mapping[str, Any]] | None = None,
) -> tuple[ColumnSpec, ...]:
    """Build column specs from the value columns of a time-series frame.

    Args:
        frame: DataFrame whose columns are the series to style.
        exclude: Column names that carry time or index data rather than values.
        overrides: Optional per-key attributes (``color``, ``width`` ...).

    Returns:
        ColumnSpecs in the frame's column order.
    """

    if not isinstance(frame, pd.DataFrame):
        raise TypeError(f"Expected a pandas DataFrame, got {type(frame).__name__}")
    skipped = set(exclude)
    overrides = overrides or {}
    unknown = set(overrides) - {str(c) for c in frame.columns}
    if unknown:
        raise ValueError(f"Overrides given for missing columns: {sorted(unknown)}")

    specs: list[ColumnSpec] = []
    for name in frame.columns:
        key = str(name)
        if key in skipped:
            continue
        attrs = dict(overrides.get(key, {}))
        attrs["key"] = key
        specs.append(ColumnSpec.model_validate(attrs))
    return tuple(specs)
