"""Translate resolved property bundles into matplotlib keyword arguments.

Nothing here draws: the helpers return kwargs for ``Axes.plot``,
``fill_between``, ``bar``/``scatter`` and ``Text``, plus legend handles built
from the same bundles the charts use.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from matplotlib.artist import Artist
from matplotlib.lines import Line2D
from matplotlib.patches import Patch

from tracestyler.core.builders import StyleConfig
from tracestyler.core.bundles import LegendType
from tracestyler.core.scheme import ColorScheme
from tracestyler.core.state import InteractionContext
from tracestyler.core.tables import legend_items

__all__ = [
    "dasharray_to_linestyle",
    "line_kwargs",
    "area_kwargs",
    "patch_kwargs",
    "text_kwargs",
    "legend_handles",
]

_FONT_SIZES = {"normal": "medium", "smaller": "small", "larger": "large"}


def dasharray_to_linestyle(dasharray: str | None) -> Any:
    """Convert an SVG dash array (``"4,2"``) to a matplotlib dash tuple."""

    if not dasharray or dasharray.strip() == "none":
        return "solid"
    parts = [p for p in dasharray.replace(",", " ").split() if p]
    try:
        pattern = tuple(float(p) for p in parts)
    except ValueError:
        raise ValueError(f"Invalid dash array: {dasharray!r}") from None
    if len(pattern) % 2:
        # SVG repeats odd-length patterns to make them even
        pattern = pattern * 2
    return (0, pattern)


def _color(value: Any) -> Any:
    return "none" if value in (None, "none") else value


def line_kwargs(style: Mapping[str, Any]) -> dict[str, Any]:
    """Kwargs for ``Axes.plot`` from a line bundle."""

    kwargs: dict[str, Any] = {
        "color": _color(style.get("stroke")),
        "linestyle": dasharray_to_linestyle(style.get("strokeDasharray")),
    }
    if "strokeWidth" in style:
        kwargs["linewidth"] = float(style["strokeWidth"])
    if "opacity" in style:
        kwargs["alpha"] = float(style["opacity"])
    return kwargs


def area_kwargs(style: Mapping[str, Any]) -> dict[str, Any]:
    """Kwargs for ``Axes.fill_between`` from the ``area`` part of an area bundle."""

    kwargs: dict[str, Any] = {
        "facecolor": _color(style.get("fill")),
        "edgecolor": _color(style.get("stroke")),
    }
    if "opacity" in style:
        kwargs["alpha"] = float(style["opacity"])
    return kwargs


def patch_kwargs(style: Mapping[str, Any]) -> dict[str, Any]:
    """Kwargs for ``Axes.bar``/``Axes.scatter`` from a bar or scatter bundle."""

    kwargs: dict[str, Any] = {"color": _color(style.get("fill"))}
    if "opacity" in style:
        kwargs["alpha"] = float(style["opacity"])
    return kwargs


def text_kwargs(style: Mapping[str, Any]) -> dict[str, Any]:
    """Kwargs for ``Text`` from a legend label or value bundle."""

    kwargs: dict[str, Any] = {}
    if "color" in style:
        kwargs["color"] = style["color"]
    if "fontSize" in style:
        kwargs["fontsize"] = _FONT_SIZES.get(style["fontSize"], style["fontSize"])
    if "opacity" in style:
        kwargs["alpha"] = float(style["opacity"])
    return kwargs


def legend_handles(
    scheme: ColorScheme,
    context: InteractionContext | None = None,
    legend_type: LegendType | str = LegendType.SWATCH,
    *,
    labels: Mapping[str, str] | None = None,
    config: StyleConfig | None = None,
) -> list[Artist]:
    """Legend handles whose symbols match the chart bundles for ``context``."""

    legend_type = LegendType(legend_type)
    labels = labels or {}
    handles: list[Artist] = []
    for key, item in legend_items(scheme, context, legend_type, config=config):
        symbol = item["symbol"]
        label = labels.get(key, key)
        alpha = float(symbol.get("opacity", 1.0))
        if legend_type is LegendType.LINE:
            handle: Artist = Line2D([], [], label=label, **line_kwargs(symbol))
        elif legend_type is LegendType.DOT:
            handle = Line2D(
                [],
                [],
                linestyle="none",
                marker="o",
                markerfacecolor=symbol["fill"],
                markeredgecolor=symbol["fill"],
                alpha=alpha,
                label=label,
            )
        else:
            handle = Patch(facecolor=symbol["fill"], edgecolor="none", alpha=alpha, label=label)
        handles.append(handle)
    return handles
