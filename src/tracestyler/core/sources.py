# TraceStyler
# Copyright © 2025 Osvaldo J. Vega Rodríguez
# Licensed under CC BY-NC-SA 4.0 International
# http://creativecommons.org/licenses/by-nc-sa/4.0/

"""Style sources and their resolution into property bundles.

A chart accepts its style in one of three shapes, each wrapped in an
explicit variant:

- ``StaticTable``: a caller-authored four-state style per column.
- ``Callback``: a function called per draw; its result is the whole style.
- ``SchemeHandle``: a ``ColorScheme``; styles are generated by the builders.

``resolve`` branches once on the variant's ``kind`` tag.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass, field
from functools import partial
from types import MappingProxyType
from typing import Any, Literal, Union

from tracestyler import flags
from tracestyler.errors import MissingColumnStyleError, StyleCallbackError, StyleShapeError

from .builders import (
    StyleConfig,
    area_style,
    axis_label_style,
    bar_style,
    legend_style,
    line_style,
    scatter_style,
)
from .bundles import COMPOSITE_PARTS, REQUIRED_PARTS, Encoding, LegendType, validate_bundle
from .scheme import ColorScheme
from .state import ElementState, ElementStateStyling, InteractionContext, resolve_state

log = logging.getLogger(__name__)

__all__ = [
    "StaticTable",
    "Callback",
    "SchemeHandle",
    "StyleSource",
    "StyleCallback",
    "resolve",
    "resolve_columns",
]

StyleCallback = Callable[[Any, str], Any]
TableEntry = Union[ElementStateStyling[Any], Mapping[str, ElementStateStyling[Any]]]


def _as_styling(value: Any) -> ElementStateStyling[Any]:
    if isinstance(value, ElementStateStyling):
        return value
    if isinstance(value, Mapping):
        return ElementStateStyling.from_mapping(value)
    raise TypeError(f"Expected a four-state styling, got {type(value).__name__}")


def _as_entry(value: Any) -> TableEntry:
    if isinstance(value, ElementStateStyling):
        return value
    if not isinstance(value, Mapping):
        raise TypeError(f"Expected a four-state styling, got {type(value).__name__}")
    states = {state.value for state in ElementState}
    if set(value) <= states:
        return ElementStateStyling.from_mapping(value)
    # Composite entry such as {"line": {...}, "area": {...}}
    return MappingProxyType({part: _as_styling(styling) for part, styling in value.items()})


@dataclass(frozen=True)
class StaticTable:
    """Fully explicit per-column, per-state styles.

    Entries may be ``ElementStateStyling`` objects or nested dicts in the
    ``{"normal": ..., "highlighted": ..., "selected": ..., "muted": ...}``
    shape; area and legend entries map each part (``line``/``area`` or
    ``symbol``/``label``/``value``) to such a styling.
    """

    styles: Mapping[str, TableEntry]
    kind: Literal["static"] = field(default="static", init=False)

    def __post_init__(self) -> None:
        normalised = {str(key): _as_entry(entry) for key, entry in self.styles.items()}
        object.__setattr__(self, "styles", MappingProxyType(normalised))


@dataclass(frozen=True)
class Callback:
    """Per-draw style function ``fn(datum_or_context, column_key) -> bundle``.

    The returned bundle is used as the complete style; nothing generated by
    the builders is merged into it.
    """

    fn: StyleCallback
    kind: Literal["callback"] = field(default="callback", init=False)

    def __post_init__(self) -> None:
        if not callable(self.fn):
            raise TypeError("Callback source requires a callable")


@dataclass(frozen=True)
class SchemeHandle:
    """Generate styles from a shared color scheme."""

    scheme: ColorScheme
    kind: Literal["scheme"] = field(default="scheme", init=False)


StyleSource = Union[StaticTable, Callback, SchemeHandle]


def _resolve_static(
    source: StaticTable,
    column_key: str,
    state: ElementState,
    encoding: Encoding,
) -> Any:
    try:
        entry = source.styles[column_key]
    except KeyError:
        raise MissingColumnStyleError(column_key) from None
    parts = COMPOSITE_PARTS.get(encoding)
    if isinstance(entry, ElementStateStyling):
        if parts is not None:
            raise StyleShapeError(
                column_key, encoding.value, f"expected parts {', '.join(parts)}, got a single styling"
            )
        return entry.for_state(state)
    if parts is None:
        raise StyleShapeError(
            column_key, encoding.value, f"expected a single styling, got parts {', '.join(entry)}"
        )
    unknown = [part for part in entry if part not in parts]
    if unknown:
        raise StyleShapeError(column_key, encoding.value, f"unknown parts {', '.join(unknown)}")
    missing = [part for part in REQUIRED_PARTS.get(encoding, ()) if part not in entry]
    if missing:
        raise MissingColumnStyleError(f"{column_key}.{missing[0]}")
    return {part: styling.for_state(state) for part, styling in entry.items()}


def _resolve_callback(
    source: Callback,
    column_key: str,
    context: InteractionContext | None,
    encoding: Encoding,
    datum: Any,
) -> Any:
    subject = datum if datum is not None else (context or InteractionContext())
    try:
        result = source.fn(subject, column_key)
    except Exception as exc:
        log.debug("Style callback raised for column %s", column_key, exc_info=True)
        raise StyleCallbackError(column_key, f"{type(exc).__name__}: {exc}") from exc
    try:
        validate_bundle(encoding, result, strict_keys=flags.strict_callbacks())
    except ValueError as exc:
        log.debug("Style callback for column %s returned %r", column_key, result)
        raise StyleCallbackError(column_key, f"malformed {encoding.value} style: {exc}") from exc
    return result


_SCHEME_BUILDERS: dict[Encoding, Callable[..., Any]] = {
    Encoding.LINE: line_style,
    Encoding.AREA: area_style,
    Encoding.BAR: bar_style,
    Encoding.SCATTER: scatter_style,
}


def _resolve_scheme(
    source: SchemeHandle,
    column_key: str,
    state: ElementState,
    encoding: Encoding,
    legend_type: LegendType,
    config: StyleConfig | None,
) -> Any:
    scheme = source.scheme
    color = scheme.color_for(column_key)
    if encoding is Encoding.AXIS:
        return axis_label_style(color)
    if encoding is Encoding.LEGEND:
        builder = partial(legend_style, legend_type=legend_type)
    else:
        builder = _SCHEME_BUILDERS[encoding]
    return builder(color, scheme.column(column_key), state, config=config)


def resolve(
    source: StyleSource,
    column_key: str,
    context: InteractionContext | None = None,
    *,
    encoding: Encoding | str,
    datum: Any = None,
    legend_type: LegendType | str = LegendType.SWATCH,
    config: StyleConfig | None = None,
) -> Any:
    """Resolve the property bundle for one column under ``context``.

    Args:
        source: The chart's style source.
        column_key: Column being drawn.
        context: Current selection/highlight; ``None`` means no interaction.
        encoding: Chart encoding the bundle is for.
        datum: Event or point passed to callbacks instead of the context.
        legend_type: Symbol kind for legend bundles generated from a scheme.
        config: Builder configuration for scheme sources.

    Raises:
        MissingColumnStyleError: static table without an entry for the column.
        StyleShapeError: static entry whose parts do not fit ``encoding``.
        StyleCallbackError: callback raised or returned a malformed bundle.
        UnknownColumnError: scheme without the column.
    """

    encoding = Encoding(encoding)
    kind = source.kind
    if kind == "static":
        return _resolve_static(source, column_key, resolve_state(column_key, context), encoding)
    elif kind == "callback":
        return _resolve_callback(source, column_key, context, encoding, datum)
    elif kind == "scheme":
        return _resolve_scheme(
            source,
            column_key,
            resolve_state(column_key, context),
            encoding,
            LegendType(legend_type),
            config,
        )
    raise TypeError(f"Unknown style source kind: {kind!r}")


def resolve_columns(
    source: StyleSource,
    column_keys: Iterable[str],
    context: InteractionContext | None = None,
    *,
    encoding: Encoding | str,
    datum: Any = None,
    legend_type: LegendType | str = LegendType.SWATCH,
    config: StyleConfig | None = None,
) -> dict[str, Any]:
    """Resolve every column in order; the first failure propagates."""

    return {
        key: resolve(
            source,
            key,
            context,
            encoding=encoding,
            datum=datum,
            legend_type=legend_type,
            config=config,
        )
        for key in column_keys
    }
