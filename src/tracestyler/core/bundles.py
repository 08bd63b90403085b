"""Property bundle shapes produced for each chart encoding.

Keys follow the SVG/CSS property names that rendering components apply
verbatim (``strokeWidth``, ``strokeDasharray`` ...). Every shape is a plain
dict at runtime; the TypedDicts document it and drive validation of
caller-supplied bundles.
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from functools import lru_cache
from typing import Any

from pydantic import TypeAdapter
from typing_extensions import TypedDict

__all__ = [
    "Encoding",
    "LegendType",
    "LineStyle",
    "AreaStyle",
    "AreaPairStyle",
    "BarStyle",
    "ScatterStyle",
    "SymbolStyle",
    "LabelStyle",
    "ValueStyle",
    "LegendItemStyle",
    "AxisLabelStyle",
    "BUNDLE_TYPES",
    "COMPOSITE_PARTS",
    "REQUIRED_PARTS",
    "validate_bundle",
]


class Encoding(str, Enum):
    LINE = "line"
    AREA = "area"
    BAR = "bar"
    SCATTER = "scatter"
    LEGEND = "legend"
    AXIS = "axis"


class LegendType(str, Enum):
    """Legend symbol drawn next to each label."""

    SWATCH = "swatch"
    LINE = "line"
    DOT = "dot"


class LineStyle(TypedDict, total=False):
    stroke: str
    fill: str
    opacity: float
    strokeWidth: float
    strokeDasharray: str


class AreaStyle(TypedDict, total=False):
    fill: str
    stroke: str
    opacity: float


class AreaPairStyle(TypedDict):
    line: LineStyle
    area: AreaStyle


class BarStyle(TypedDict, total=False):
    fill: str
    opacity: float


class ScatterStyle(TypedDict, total=False):
    fill: str
    opacity: float


class SymbolStyle(TypedDict, total=False):
    cursor: str
    fill: str
    stroke: str
    strokeWidth: float
    strokeDasharray: str
    opacity: float


class LabelStyle(TypedDict, total=False):
    color: str
    cursor: str
    fontSize: str
    paddingRight: float
    opacity: float


class ValueStyle(TypedDict, total=False):
    color: str
    cursor: str
    fontSize: str
    opacity: float


class LegendItemStyle(TypedDict, total=False):
    symbol: SymbolStyle
    label: LabelStyle
    value: ValueStyle


class AxisLabelStyle(TypedDict):
    labelColor: str


BUNDLE_TYPES: dict[Encoding, type] = {
    Encoding.LINE: LineStyle,
    Encoding.AREA: AreaPairStyle,
    Encoding.BAR: BarStyle,
    Encoding.SCATTER: ScatterStyle,
    Encoding.LEGEND: LegendItemStyle,
    Encoding.AXIS: AxisLabelStyle,
}

# Encodings whose bundle is made of several independently styled parts
COMPOSITE_PARTS: dict[Encoding, dict[str, type]] = {
    Encoding.AREA: {"line": LineStyle, "area": AreaStyle},
    Encoding.LEGEND: {"symbol": SymbolStyle, "label": LabelStyle, "value": ValueStyle},
}

# Parts a composite bundle cannot omit; legend parts are all optional
REQUIRED_PARTS: dict[Encoding, tuple[str, ...]] = {
    Encoding.AREA: ("line", "area"),
}


@lru_cache(maxsize=None)
def _adapter(encoding: Encoding) -> TypeAdapter[Any]:
    return TypeAdapter(BUNDLE_TYPES[encoding])


def _allowed_keys(bundle_type: type) -> frozenset[str]:
    return frozenset(bundle_type.__required_keys__) | frozenset(bundle_type.__optional_keys__)


def _unknown_keys(encoding: Encoding, value: Mapping[str, Any]) -> list[str]:
    parts = COMPOSITE_PARTS.get(encoding)
    if parts is None:
        allowed = _allowed_keys(BUNDLE_TYPES[encoding])
        return sorted(str(k) for k in value if k not in allowed)
    unknown = sorted(str(k) for k in value if k not in parts)
    for part, part_type in parts.items():
        allowed = _allowed_keys(part_type)
        unknown.extend(f"{part}.{k}" for k in sorted(value.get(part, {})) if k not in allowed)
    return unknown


def validate_bundle(encoding: Encoding | str, value: Any, *, strict_keys: bool = False) -> None:
    """Check that ``value`` has the bundle shape of ``encoding``.

    Raises:
        ValueError: describing the first problem found. ``pydantic``'s
            ``ValidationError`` is a ``ValueError`` subclass and is raised as-is
            for wrongly typed properties.
    """

    encoding = Encoding(encoding)
    if not isinstance(value, Mapping):
        raise ValueError(f"expected a mapping, got {type(value).__name__}")
    _adapter(encoding).validate_python(dict(value), strict=True)
    if strict_keys:
        unknown = _unknown_keys(encoding, value)
        if unknown:
            raise ValueError(f"unexpected properties: {', '.join(unknown)}")
