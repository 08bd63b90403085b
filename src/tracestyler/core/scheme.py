# TraceStyler
# Copyright © 2025 Osvaldo J. Vega Rodríguez
# Licensed under CC BY-NC-SA 4.0 International
# http://creativecommons.org/licenses/by-nc-sa/4.0/

"""Color scheme allocator mapping configured columns onto a palette."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from types import MappingProxyType

from tracestyler.errors import DuplicateColumnKeyError, UnknownColumnError

from .builders import StyleConfig, default_config
from .columns import ColumnInput, ColumnSpec, normalize_columns
from .palettes import Palette, PaletteRegistry, default_registry

log = logging.getLogger(__name__)

__all__ = ["ColorScheme"]


class ColorScheme:
    """Assign a stable color to every configured column.

    Columns without an explicit ``color`` take the palette entry at their
    ordinal position. When there are more columns than palette entries the
    assignment wraps around (ordinal modulo palette length). Assignments are
    computed once here and never change for the lifetime of the instance, so
    a scheme can be shared by every chart and legend of one configuration.

    Without ``palette_name`` the palette is the ``default_palette`` of
    ``config`` (the factory config when omitted).
    """

    __slots__ = ("_columns", "_by_key", "_ordinals", "_palette", "_colors")

    def __init__(
        self,
        columns: Iterable[ColumnInput],
        palette_name: str | None = None,
        *,
        registry: PaletteRegistry | None = None,
        config: StyleConfig | None = None,
    ) -> None:
        specs = normalize_columns(columns)
        by_key: dict[str, ColumnSpec] = {}
        ordinals: dict[str, int] = {}
        for ordinal, spec in enumerate(specs):
            if spec.key in by_key:
                raise DuplicateColumnKeyError(spec.key)
            by_key[spec.key] = spec
            ordinals[spec.key] = ordinal

        if palette_name is None:
            palette_name = (config or default_config()).default_palette
        palette = (registry or default_registry()).lookup(palette_name)
        lookup = self._lookup(palette, len(specs))
        colors = {
            spec.key: spec.color if spec.color is not None else lookup[ordinal % len(lookup)]
            for ordinal, spec in enumerate(specs)
        }

        self._columns = specs
        self._by_key = MappingProxyType(by_key)
        self._ordinals = MappingProxyType(ordinals)
        self._palette = palette
        self._colors = MappingProxyType(colors)

        if len(specs) > len(palette):
            log.warning(
                "%d columns exceed the %d colors of palette %s; colors will repeat",
                len(specs),
                len(palette),
                palette.name,
            )
        log.debug("Color scheme on %s: %s", palette.name, dict(colors))

    @staticmethod
    def _lookup(palette: Palette, count: int) -> list[str]:
        if count < 0:
            raise ValueError(f"count must be >= 0, got {count}")
        return list(palette.colors[: min(count, len(palette))])

    # ------------------------------------------------------------------
    @property
    def palette(self) -> Palette:
        return self._palette

    @property
    def columns(self) -> tuple[ColumnSpec, ...]:
        return self._columns

    @property
    def keys(self) -> tuple[str, ...]:
        return tuple(spec.key for spec in self._columns)

    def num_columns(self) -> int:
        """Number of configured columns."""

        return len(self._columns)

    def color_lookup(self, count: int) -> list[str]:
        """Return ``count`` palette colors, capped at the palette length."""

        return self._lookup(self._palette, count)

    def color_for(self, column_key: str) -> str:
        """Return the color assigned to ``column_key``."""

        try:
            return self._colors[column_key]
        except KeyError:
            raise UnknownColumnError(column_key) from None

    def column(self, column_key: str) -> ColumnSpec:
        try:
            return self._by_key[column_key]
        except KeyError:
            raise UnknownColumnError(column_key) from None

    def ordinal(self, column_key: str) -> int:
        try:
            return self._ordinals[column_key]
        except KeyError:
            raise UnknownColumnError(column_key) from None

    # ------------------------------------------------------------------
    def __contains__(self, column_key: object) -> bool:
        return column_key in self._by_key

    def __len__(self) -> int:
        return len(self._columns)

    def __iter__(self) -> Iterator[ColumnSpec]:
        return iter(self._columns)

    def __repr__(self) -> str:
        return f"ColorScheme(columns={list(self.keys)!r}, palette={self._palette.name!r})"
