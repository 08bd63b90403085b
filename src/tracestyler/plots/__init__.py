"""Adapters from resolved style bundles to plotting backends."""

from __future__ import annotations

from .mpl_adapter import (
    area_kwargs,
    dasharray_to_linestyle,
    legend_handles,
    line_kwargs,
    patch_kwargs,
    text_kwargs,
)

__all__ = [
    "area_kwargs",
    "dasharray_to_linestyle",
    "legend_handles",
    "line_kwargs",
    "patch_kwargs",
    "text_kwargs",
]
